# topmark:header:start
#
#   project      : TOML Maid
#   file         : model.py
#   file_relpath : src/tomlmaid/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Configuration model and discovery.

This module defines:
    - `Config`: an immutable runtime snapshot shared by every file processed in a
      run (possibly across worker threads).
    - `MutableConfig`: a mutable builder filled from a ``toml-maid.toml`` file
      and frozen into a `Config`.
    - `resolve_config`: discovery of the closest ``toml-maid.toml`` walking upward
      from a start directory.

Discovery:
    The closest file wins; files in parent directories are not merged. When no
    file is found, the defaults apply (no priority keys, no array sorting, no
    excludes).

Validation:
    Wrong value types raise `ConfigError`. Unknown keys are logged as warnings and
    otherwise ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tomlmaid.config.errors import ConfigError
from tomlmaid.config.io import is_bool, is_str_list, load_toml_dict
from tomlmaid.config.keys import Toml
from tomlmaid.config.logging import get_logger
from tomlmaid.constants import CONFIG_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tomlmaid.config.io import TomlTable
    from tomlmaid.config.logging import MaidLogger

logger: MaidLogger = get_logger(__name__)


def _ranks(keys: Iterable[str]) -> dict[str, int]:
    """Map each priority key to its position; the first occurrence wins."""
    ranks: dict[str, int] = {}
    for rank, key in enumerate(keys):
        ranks.setdefault(key, rank)
    return ranks


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        keys (tuple[str, ...]): Priority keys for table bodies, in output order.
        inline_keys (tuple[str, ...]): Priority keys for inline tables, in output order.
        sort_arrays (bool): Whether arrays of scalars are value-sorted.
        excludes (tuple[str, ...]): gitwildmatch patterns excluded from folder scans,
            relative to the scanned folder.
        config_file (Path | None): The file this config was loaded from, if any.
        key_ranks (Mapping[str, int]): Derived lookup of ``keys`` positions.
        inline_key_ranks (Mapping[str, int]): Derived lookup of ``inline_keys`` positions.
    """

    keys: tuple[str, ...] = ()
    inline_keys: tuple[str, ...] = ()
    sort_arrays: bool = False
    excludes: tuple[str, ...] = ()
    config_file: Path | None = None

    key_ranks: Mapping[str, int] = field(init=False, repr=False, compare=False)
    inline_key_ranks: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_ranks", _ranks(self.keys))
        object.__setattr__(self, "inline_key_ranks", _ranks(self.inline_keys))

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            keys=list(self.keys),
            inline_keys=list(self.inline_keys),
            sort_arrays=self.sort_arrays,
            excludes=list(self.excludes),
            config_file=self.config_file,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading; see `Config` for the fields."""

    keys: list[str] = field(default_factory=lambda: [])
    inline_keys: list[str] = field(default_factory=lambda: [])
    sort_arrays: bool = False
    excludes: list[str] = field(default_factory=lambda: [])
    config_file: Path | None = None

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            keys=tuple(self.keys),
            inline_keys=tuple(self.inline_keys),
            sort_arrays=self.sort_arrays,
            excludes=tuple(self.excludes),
            config_file=self.config_file,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data.
            config_file (Path | None): Source file, used for provenance and error messages.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        draft: MutableConfig = cls(config_file=config_file)

        for key in sorted(set(data) - Toml.known_keys()):
            logger.warning("Unknown key '%s' in %s (ignored)", key, config_file or "config")

        draft.keys = cls._get_str_list(data, Toml.KEY_KEYS, config_file)
        draft.inline_keys = cls._get_str_list(data, Toml.KEY_INLINE_KEYS, config_file)
        draft.excludes = cls._get_str_list(data, Toml.KEY_EXCLUDES, config_file)

        sort_key: str = Toml.KEY_SORT_ARRAYS
        if sort_key not in data and Toml.KEY_SORT_ARRAYS_ALIAS in data:
            sort_key = Toml.KEY_SORT_ARRAYS_ALIAS
        elif sort_key in data and Toml.KEY_SORT_ARRAYS_ALIAS in data:
            logger.warning(
                "Both '%s' and '%s' set in %s; using '%s'",
                Toml.KEY_SORT_ARRAYS,
                Toml.KEY_SORT_ARRAYS_ALIAS,
                config_file or "config",
                Toml.KEY_SORT_ARRAYS,
            )
        sort_arrays: Any = data.get(sort_key, False)
        if not is_bool(sort_arrays):
            raise ConfigError(
                f"'{sort_key}' must be a boolean, got {type(sort_arrays).__name__}",
                path=config_file,
            )
        draft.sort_arrays = sort_arrays

        logger.trace("Config from %s: %s", config_file or "dict", draft)
        return draft

    @staticmethod
    def _get_str_list(data: TomlTable, key: str, config_file: Path | None) -> list[str]:
        value: Any = data.get(key, [])
        if not is_str_list(value):
            raise ConfigError(f"'{key}' must be a list of strings", path=config_file)
        return list(value)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from a single ``toml-maid.toml`` file.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML, or holds
                values of the wrong type.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        return cls.from_toml_dict(load_toml_dict(path), config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the closest ``toml-maid.toml`` walking upward from ``start``.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            Path | None: The nearest config file, or None if there is none up to
            the filesystem root.
        """
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent
        while True:
            candidate: Path = cur / CONFIG_FILE_NAME
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            parent: Path = cur.parent
            if parent == cur:
                return None
            cur = parent


def resolve_config(start: Path | None = None, *, config_file: Path | None = None) -> Config:
    """Resolve the configuration for a run.

    Args:
        start (Path | None): Directory where upward discovery starts
            (defaults to the current working directory).
        config_file (Path | None): Explicit config file; disables discovery.

    Returns:
        Config: The loaded config, or the defaults when no file is found
        (``Config.config_file`` is then None).

    Raises:
        ConfigError: If the config file is unreadable or invalid.
    """
    path: Path | None = config_file
    if path is None:
        path = MutableConfig.discover_config_file(start or Path.cwd())
    if path is None:
        logger.info("No '%s' found; using default config", CONFIG_FILE_NAME)
        return Config()
    return MutableConfig.from_toml_file(path).freeze()
