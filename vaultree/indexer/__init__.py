"""Vault indexing - builds the file tree summary handed to the agent."""

from .tree import (
    FILE_TREE_PROMPT,
    MAX_TREE_CHARS,
    TreeNode,
    build_file_tree,
    render_file_tree,
    serialize_tree,
    summarize_file_tree,
)

__all__ = [
    "FILE_TREE_PROMPT",
    "MAX_TREE_CHARS",
    "TreeNode",
    "build_file_tree",
    "render_file_tree",
    "serialize_tree",
    "summarize_file_tree",
]
