"""Typed configuration loading and access.

Configuration lives in ``semtag.toml`` at the repository root:

    [release]
    tag_prefix = "v"
    namespace = ""
    use_branches = false
    branch_prefix = "release/"

Every key is optional. Command-line options override file values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "semtag.toml"

DEFAULT_TAG_PREFIX = "v"
DEFAULT_BRANCH_PREFIX = "release/"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """How release refs are named and which kind of ref marks a release."""

    tag_prefix: str = DEFAULT_TAG_PREFIX
    namespace: str = ""
    use_branches: bool = False
    branch_prefix: str = DEFAULT_BRANCH_PREFIX


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        release: StrDict = get_table(data, "release") or {}

        tag_prefix = get_str(release, "tag_prefix")
        namespace = get_str(release, "namespace")
        use_branches = get_bool(release, "use_branches")
        branch_prefix = get_str(release, "branch_prefix")

        return cls(
            release=ReleaseConfig(
                tag_prefix=DEFAULT_TAG_PREFIX if tag_prefix is None else tag_prefix,
                namespace=namespace or "",
                use_branches=bool(use_branches),
                branch_prefix=branch_prefix or DEFAULT_BRANCH_PREFIX,
            )
        )

    def with_overrides(
        self,
        *,
        tag_prefix: str | None = None,
        namespace: str | None = None,
        use_branches: bool | None = None,
        branch_prefix: str | None = None,
    ) -> Config:
        """Return a copy with every non-None argument replacing the file value."""
        r = self.release
        return Config(
            release=replace(
                r,
                tag_prefix=r.tag_prefix if tag_prefix is None else tag_prefix,
                namespace=r.namespace if namespace is None else namespace,
                use_branches=r.use_branches if use_branches is None else use_branches,
                branch_prefix=r.branch_prefix if branch_prefix is None else branch_prefix,
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to semtag.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any error."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
