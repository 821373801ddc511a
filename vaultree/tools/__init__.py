"""Vault tools exposed to the agent."""

from pathlib import Path

from vaultree.indexer import MAX_TREE_CHARS
from vaultree.storage import SettingsStorage

from .base import Tool, ToolArgs, ToolRegistry, ToolResult
from .file_tree import GetFileTreeTool

__all__ = [
    "GetFileTreeTool",
    "Tool",
    "ToolArgs",
    "ToolRegistry",
    "ToolResult",
    "create_tool_registry",
]


def create_tool_registry(
    vault_path: Path,
    settings_storage: SettingsStorage,
    max_chars: int = MAX_TREE_CHARS,
) -> ToolRegistry:
    """Create a registry with all available tools."""
    registry = ToolRegistry()
    registry.register(GetFileTreeTool(vault_path, settings_storage, max_chars=max_chars))
    return registry
