"""Platform abstraction layer."""

from .terminal import TerminalInfo, detect, detect_options, supports_color, supports_unicode

__all__ = [
    "TerminalInfo",
    "detect",
    "detect_options",
    "supports_color",
    "supports_unicode",
]
