# topmark:header:start
#
#   project      : TOML Maid
#   file         : file_resolver.py
#   file_relpath : src/tomlmaid/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Resolve the files to format from explicit paths and scanned folders.

Folder scanning walks the folder recursively and keeps ``*.toml`` files, skipping:

* files named ``toml-maid.toml`` (the tool's own config);
* hidden files and directories (name starting with ``.``);
* paths ignored by ``.gitignore`` files found in the scanned tree, each one
  evaluated relative to its own directory;
* paths matching the config's ``excludes`` (gitwildmatch patterns relative to
  the scanned folder).

Patterns are matched with ``pathspec``. The result is deterministic: files of a
folder are returned sorted, explicit files keep their command-line order, and
duplicates are dropped.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from tomlmaid.config.logging import get_logger
from tomlmaid.constants import CONFIG_FILE_NAME, GITIGNORE_NAME, TOML_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tomlmaid.config.logging import MaidLogger

logger: MaidLogger = get_logger(__name__)


def load_patterns_from_file(path: Path) -> list[str]:
    """Load non-empty, non-comment patterns from a ``.gitignore``-style file."""
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read patterns from '%s': %s", path, e)
        return []
    return [line for line in text.splitlines() if line.strip() and not line.startswith("#")]


def _rel_for_match(path: Path, base: Path, *, is_dir: bool) -> str:
    """Return a POSIX-style relative path for PathSpec matching."""
    rel: str = path.relative_to(base).as_posix()
    return rel + "/" if is_dir else rel


class _IgnoreRules:
    """Stack of ``.gitignore`` specs (one per directory) plus the config excludes."""

    def __init__(self, root: Path, excludes: Sequence[str]) -> None:
        self.root: Path = root
        self.excludes: PathSpec | None = (
            PathSpec.from_lines(GitWildMatchPattern, list(excludes)) if excludes else None
        )
        self.gitignores: dict[Path, PathSpec] = {}

    def load_gitignore(self, directory: Path) -> None:
        candidate: Path = directory / GITIGNORE_NAME
        if candidate.is_file():
            patterns: list[str] = load_patterns_from_file(candidate)
            if patterns:
                logger.debug("Loaded %d pattern(s) from %s", len(patterns), candidate)
                self.gitignores[directory] = PathSpec.from_lines(GitWildMatchPattern, patterns)

    def is_ignored(self, path: Path, *, is_dir: bool) -> bool:
        if path.name.startswith("."):
            return True
        if self.excludes is not None and self.excludes.match_file(
            _rel_for_match(path, self.root, is_dir=is_dir)
        ):
            logger.debug("Excluded by config: %s", path)
            return True
        for base, spec in self.gitignores.items():
            if base in path.parents and spec.match_file(_rel_for_match(path, base, is_dir=is_dir)):
                logger.debug("Ignored by %s: %s", base / GITIGNORE_NAME, path)
                return True
        return False


def scan_folder(folder: Path, *, excludes: Sequence[str] = ()) -> list[Path]:
    """Recursively collect the TOML files of ``folder``.

    Args:
        folder (Path): Folder to scan.
        excludes (Sequence[str]): gitwildmatch patterns relative to ``folder``.

    Returns:
        list[Path]: Matching files, sorted.

    Raises:
        FileNotFoundError: If ``folder`` does not exist or is not a directory.
    """
    if not folder.is_dir():
        raise FileNotFoundError(f"Not a directory: {folder}")

    rules = _IgnoreRules(folder, excludes)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(folder):
        current = Path(dirpath)
        rules.load_gitignore(current)
        # Prune in place so os.walk does not descend into ignored directories.
        dirnames[:] = sorted(
            d for d in dirnames if not rules.is_ignored(current / d, is_dir=True)
        )
        for name in sorted(filenames):
            if not name.endswith(TOML_SUFFIX) or name == CONFIG_FILE_NAME:
                continue
            path: Path = current / name
            if not rules.is_ignored(path, is_dir=False):
                found.append(path)

    logger.debug("Found %d TOML file(s) in %s", len(found), folder)
    return sorted(found)


def resolve_file_list(
    files: Iterable[Path],
    folders: Iterable[Path],
    *,
    excludes: Sequence[str] = (),
) -> list[Path]:
    """Combine explicit files and scanned folders into one de-duplicated list.

    Explicit files are kept as given (no suffix or ignore filtering) so that a
    missing file is reported by the pipeline rather than silently dropped.
    """
    resolved: list[Path] = []
    seen: set[Path] = set()

    def _add(path: Path) -> None:
        key: Path = path.resolve()
        if key not in seen:
            seen.add(key)
            resolved.append(path)

    for path in files:
        _add(path)
    for folder in folders:
        for path in scan_folder(folder, excludes=excludes):
            _add(path)
    return resolved
