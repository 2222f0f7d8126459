"""
SafePass Shared Module
======================

Configuration, structured logging, console presentation, and common
result models shared by every SafePass component.
"""

from shared.config import SafePassConfig, get_config

__all__ = ["SafePassConfig", "get_config"]
