"""Inclusion/exclusion patterns deciding which vault files are indexed."""

import fnmatch
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from vaultree.hierarchy import File
from vaultree.storage import UserSettings

logger = logging.getLogger(__name__)

GLOB_CHARS = ("*", "?", "[")


def parse_patterns(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated string (or list) of patterns, dropping blanks."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [p.strip() for p in value if p and p.strip()]


@dataclass
class PatternFilter:
    """Decide per file whether it should be indexed.

    Supported pattern kinds:
        #tag        note has the tag in its frontmatter
        *.ext       file extension (case-insensitive)
        [[Note]]    note name without extension (case-insensitive)
        glob        fnmatch against the vault-relative path, e.g. 'Daily/*.md'
        path        folder prefix or exact file path, e.g. 'Archive'

    A file matching any exclusion is dropped. When inclusions are set, only
    files matching one of them are kept.
    """

    inclusions: list[str] = field(default_factory=list)
    exclusions: list[str] = field(default_factory=list)
    vault_path: Path | None = None

    def __post_init__(self) -> None:
        self.inclusions = parse_patterns(self.inclusions)
        self.exclusions = parse_patterns(self.exclusions)
        self._tag_cache: dict[str, set[str]] = {}

    @classmethod
    def from_settings(cls, settings: UserSettings, vault_path: Path | None = None) -> "PatternFilter":
        """Create a filter from stored user settings."""
        return cls(
            inclusions=list(settings.inclusions),
            exclusions=list(settings.exclusions),
            vault_path=vault_path,
        )

    def __call__(self, file: File) -> bool:
        return self.decide(file)

    def decide(self, file: File) -> bool:
        if any(self.matches(file, p) for p in self.exclusions):
            return False
        if self.inclusions:
            return any(self.matches(file, p) for p in self.inclusions)
        return True

    def matches(self, file: File, pattern: str) -> bool:
        """Check a single pattern against a file."""
        if pattern.startswith("#"):
            return pattern[1:].lower() in self._get_tags(file)

        if pattern.startswith("[[") and pattern.endswith("]]"):
            return file.stem.lower() == pattern[2:-2].strip().lower()

        if pattern.startswith("*.") and not any(c in pattern[2:] for c in GLOB_CHARS):
            return file.extension == pattern[2:].lower()

        path_lower = file.path.lower()
        pattern_lower = pattern.strip("/").lower()

        if any(c in pattern_lower for c in GLOB_CHARS):
            return fnmatch.fnmatch(path_lower, pattern_lower)

        return path_lower == pattern_lower or path_lower.startswith(pattern_lower + "/")

    def _get_tags(self, file: File) -> set[str]:
        """Frontmatter tags of a markdown note, lowercased without '#'."""
        if file.extension != "md" or self.vault_path is None:
            return set()

        if file.path not in self._tag_cache:
            self._tag_cache[file.path] = self._read_tags(self.vault_path / file.path)
        return self._tag_cache[file.path]

    def _read_tags(self, file_path: Path) -> set[str]:
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {file_path}: {e}")
            return set()

        frontmatter = _parse_frontmatter(content)
        fm_tags = frontmatter.get("tags", [])
        if isinstance(fm_tags, str):
            fm_tags = fm_tags.replace(",", " ").split()
        elif not isinstance(fm_tags, list):
            return set()

        return {str(tag).lstrip("#").lower() for tag in fm_tags if tag}


def _parse_frontmatter(content: str) -> dict:
    """Parse YAML frontmatter from note content."""
    if not content.startswith("---"):
        return {}

    match = re.match(r"^---\n(.*?)\n---", content, re.DOTALL)
    if not match:
        return {}

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}
