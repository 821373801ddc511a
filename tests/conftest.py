"""Shared test fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from vaultree.hierarchy import File, Folder


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault directory with sample notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    # Create some sample notes
    (vault / "Note1.md").write_text("# Note 1\n\nThis is note 1 content.\n\n#tag1 #tag2")
    (vault / "Note2.md").write_text(
        "---\ntitle: Custom Title\ntags: [project]\n---\n\nNote 2 with frontmatter."
    )

    # Create a subfolder
    inbox = vault / "Inbox"
    inbox.mkdir()
    (inbox / "Task.md").write_text("- [ ] Buy groceries\n- [x] Done task")
    (inbox / "scratch.tmp").write_text("temp")

    # Attachments with mixed extensions
    attachments = inbox / "Attachments"
    attachments.mkdir()
    (attachments / "Diagram.PNG").write_bytes(b"\x89PNG")
    (attachments / "README").write_text("no extension")

    # Create daily notes folder
    daily = vault / "Daily Notes"
    daily.mkdir()

    # App config folder
    obsidian = vault / ".obsidian"
    obsidian.mkdir()
    (obsidian / "app.json").write_text("{}")

    return vault


@pytest.fixture
def make_folder() -> Callable[[dict], Folder]:
    """Build an in-memory hierarchy from a nested dict.

    Dict values are sub-dicts for folders and None for files:
        {"a.md": None, "Sub": {"b.txt": None}}
    """

    def build(layout: dict, name: str = "", path: str = "") -> Folder:
        children = []
        for child_name, child_layout in layout.items():
            child_path = f"{path}/{child_name}" if path else child_name
            if child_layout is None:
                children.append(File(name=child_name, path=child_path))
            else:
                children.append(build(child_layout, child_name, child_path))
        return Folder(name=name, path=path, children=tuple(children))

    return build
