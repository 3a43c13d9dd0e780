"""Typed configuration loading.

Render defaults can be set in an `errtext.toml` file:

    [render]
    symbols = true
    color = false
    max_items = 5

Keys left out stay unset so terminal detection can fill them in.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .message import RenderOptions
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "RenderConfig",
    "find_config",
    "load_config",
    "parse_toml",
]

CONFIG_FILENAME = "errtext.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a TOML file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Render overrides; None means "not configured"."""

    symbols: bool | None = None
    color: bool | None = None
    max_items: int | None = None

    def apply(self, base: RenderOptions) -> RenderOptions:
        """Overlay configured values on top of base options."""
        return replace(
            base,
            use_symbols=base.use_symbols if self.symbols is None else self.symbols,
            use_color=base.use_color if self.color is None else self.color,
            max_items=base.max_items if self.max_items is None else self.max_items,
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If max_items is present but below 1.
        """
        render: StrDict = get_table(data, "render") or {}
        max_items = get_int(render, "max_items")
        if max_items is not None and max_items < 1:
            raise ValueError(f"render.max_items must be >= 1, got {max_items}")

        return cls(
            render=RenderConfig(
                symbols=get_bool(render, "symbols"),
                color=get_bool(render, "color"),
                max_items=max_items,
            ),
        )


def parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("TOML root must be a table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"File not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Expected a file, found a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading file: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to errtext.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def find_config(start: Path) -> Path | None:
    """Search start and its parents for errtext.toml."""
    start = start.resolve()
    for parent in (start, *start.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
