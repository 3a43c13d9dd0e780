"""Core domain types and logic."""

from .config import Config, ConfigError, RenderConfig, find_config, load_config
from .errors import ErrorCode, InvalidMessage
from .loader import MessageFileError, load_message
from .message import ErrorMessage, RenderOptions
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "RenderConfig",
    "find_config",
    "load_config",
    # errors
    "ErrorCode",
    "InvalidMessage",
    # loader
    "MessageFileError",
    "load_message",
    # message
    "ErrorMessage",
    "RenderOptions",
    # result
    "Err",
    "Ok",
    "Result",
]
