"""In-memory folder hierarchy of a vault."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class File:
    """A file inside the vault."""

    name: str
    path: str  # Relative to vault root, POSIX separators

    @property
    def extension(self) -> str:
        """Lowercased text after the last dot, or "" when there is none."""
        if "." not in self.name:
            return ""
        return self.name.rsplit(".", 1)[1].lower()

    @property
    def stem(self) -> str:
        if "." not in self.name:
            return self.name
        return self.name.rsplit(".", 1)[0]


@dataclass(frozen=True)
class Folder:
    """A folder inside the vault. The vault root has an empty name."""

    name: str
    path: str
    children: tuple["Node", ...] = field(default_factory=tuple)

    @property
    def files(self) -> list[File]:
        return [child for child in self.children if isinstance(child, File)]

    @property
    def folders(self) -> list["Folder"]:
        return [child for child in self.children if isinstance(child, Folder)]

    @property
    def is_root(self) -> bool:
        return not self.name


Node = Folder | File


def load_folder(root: Path, include_hidden: bool = False, rel_path: str = "") -> Folder:
    """Materialize the directory tree under root.

    Args:
        root: Directory to load.
        include_hidden: Also load entries whose name starts with a dot
                        (.obsidian, .trash, ...).
        rel_path: Path of root relative to the vault. Empty for the vault
                  itself, which becomes the unnamed root folder.

    Entries are sorted by name. Symlinked directories are skipped.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    logger.debug(f"Loading folder hierarchy: {root}")
    return _load(root, rel_path.strip("/"), include_hidden)


def _load(directory: Path, rel_path: str, include_hidden: bool) -> Folder:
    children: list[Node] = []

    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if not include_hidden and entry.name.startswith("."):
            continue

        child_path = f"{rel_path}/{entry.name}" if rel_path else entry.name

        if entry.is_symlink() and entry.is_dir():
            continue
        if entry.is_dir():
            children.append(_load(entry, child_path, include_hidden))
        elif entry.is_file():
            children.append(File(name=entry.name, path=child_path))

    name = directory.name if rel_path else ""
    return Folder(name=name, path=rel_path, children=tuple(children))
