"""Build a compact JSON file tree of a vault folder for the agent."""

import json
import logging
from collections.abc import Callable
from typing import Any

from vaultree.hierarchy import File, Folder

logger = logging.getLogger(__name__)

# Tree nodes are plain dicts so they serialize straight to JSON
TreeNode = dict[str, Any]

ROOT_KEY = "vault"
UNKNOWN_EXTENSION = "unknown"

# Serialized trees above this many characters are rebuilt without file names
MAX_TREE_CHARS = 500_000

FILE_TREE_PROMPT = """A JSON represents the file tree as a nested structure:
* The root object has a key "vault" which contains a FileTreeNode object.
* Each FileTreeNode has these properties:
  * files: An array of filenames in the current directory (if any files exist)
  * subFolders: An object mapping folder names to their FileTreeNode objects (if any subfolders exist)
  * extensionCounts: An object with counts of file extensions in this folder and all subfolders

"""


def _keep_all(file: File) -> bool:
    return True


def _extension_key(file: File) -> str:
    return file.extension or UNKNOWN_EXTENSION


def build_file_tree(
    folder: Folder,
    include_files: bool = True,
    include_empty_folders: bool = False,
    keep: Callable[[File], bool] | None = None,
) -> dict[str, TreeNode]:
    """Build a nested file tree from a folder.

    Args:
        folder: Folder to traverse
        include_files: Whether to list file names in each node
        include_empty_folders: Keep folders without qualifying files as {}
        keep: Decides per file whether it is indexed. Defaults to keeping all.

    Returns:
        Single-entry dict keyed by the folder name ("vault" for the root),
        or {} when a named folder is empty and empty folders are omitted.
    """
    keep = keep or _keep_all
    node, _ = _build_node(folder, include_files, include_empty_folders, keep)

    if folder.name:
        return {folder.name: node} if node is not None else {}

    # The root is always reported, even when nothing in it qualifies
    return {ROOT_KEY: node if node is not None else {}}


def _build_node(
    folder: Folder,
    include_files: bool,
    include_empty_folders: bool,
    keep: Callable[[File], bool],
) -> tuple[TreeNode | None, dict[str, int]]:
    """Return the folder's node (None when it vanishes) and its extension counts."""
    files: list[str] = []
    extension_counts: dict[str, int] = {}
    sub_folders: dict[str, TreeNode] = {}

    for child in folder.children:
        if isinstance(child, File):
            if not keep(child):
                continue
            if include_files:
                files.append(child.name)
            ext = _extension_key(child)
            extension_counts[ext] = extension_counts.get(ext, 0) + 1
        else:
            child_node, child_counts = _build_node(
                child, include_files, include_empty_folders, keep
            )
            if child_node is None:
                continue
            sub_folders[child.name] = child_node
            for ext, count in child_counts.items():
                extension_counts[ext] = extension_counts.get(ext, 0) + count

    if not extension_counts and not sub_folders:
        return ({} if include_empty_folders else None), extension_counts

    node: TreeNode = {}
    if extension_counts:
        node["extensionCounts"] = extension_counts
    if files:
        node["files"] = files
    if sub_folders:
        node["subFolders"] = sub_folders
    return node, extension_counts


def serialize_tree(tree: dict[str, TreeNode]) -> str:
    """Serialize a tree the way JSON.stringify does (no whitespace)."""
    return json.dumps(tree, ensure_ascii=False, separators=(",", ":"))


def render_file_tree(
    root: Folder,
    full_listing: bool = False,
    keep: Callable[[File], bool] | None = None,
    max_chars: int = MAX_TREE_CHARS,
) -> tuple[str, bool]:
    """Serialize the file tree under root, dropping file names if too long.

    The full tree (with file names) is tried first. If its JSON is longer
    than max_chars it is rebuilt once without file names, keeping only
    folders and extension counts. The reduced tree is returned as-is even
    if it is still too long.

    Returns:
        The JSON text and whether the reduced tree was used.
    """
    tree = build_file_tree(root, True, full_listing, keep)
    json_result = serialize_tree(tree)
    logger.debug(f"Full file tree: {len(json_result)} chars")

    if len(json_result) <= max_chars:
        return json_result, False

    logger.info(
        f"File tree is {len(json_result)} chars (limit {max_chars}), dropping file names"
    )
    simplified_tree = build_file_tree(root, False, full_listing, keep)
    return serialize_tree(simplified_tree), True


def summarize_file_tree(
    root: Folder,
    full_listing: bool = False,
    keep: Callable[[File], bool] | None = None,
    max_chars: int = MAX_TREE_CHARS,
) -> str:
    """Describe the file tree under root for a language model."""
    json_result, _ = render_file_tree(root, full_listing, keep, max_chars)
    return FILE_TREE_PROMPT + json_result
