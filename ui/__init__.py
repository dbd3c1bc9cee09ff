# -*- coding: utf-8 -*-
"""
UI模块
提供热座终端界面显示
"""

from .rich_ui import RichTerminalUI, is_revealed_to

__all__ = ['RichTerminalUI', 'is_revealed_to']
