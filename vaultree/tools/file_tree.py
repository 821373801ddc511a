"""Tool returning the vault file tree as JSON."""

from pathlib import Path

from pydantic import Field

from vaultree.filters import PatternFilter
from vaultree.hierarchy import load_folder
from vaultree.indexer import FILE_TREE_PROMPT, MAX_TREE_CHARS, render_file_tree
from vaultree.storage import SettingsStorage

from .base import Tool, ToolArgs, ToolResult


class FileTreeArgs(ToolArgs):
    fullListing: bool = Field(
        default=False,
        description=(
            "When true, include empty folders in the result; "
            "when false or omitted, empty folders are filtered out"
        ),
    )
    path: str = Field(
        default="",
        description="Optional folder to describe (relative to vault root). Defaults to the whole vault.",
    )


class GetFileTreeTool(Tool):
    """Describe the files in the vault as a nested folder structure."""

    name = "get_file_tree"
    description = (
        "Get the file tree as a nested structure of folders and files. "
        "By default empty folders are omitted; set fullListing to true to include them."
    )
    args_model = FileTreeArgs

    def __init__(
        self,
        vault_path: Path,
        settings_storage: SettingsStorage,
        max_chars: int = MAX_TREE_CHARS,
    ) -> None:
        super().__init__(vault_path)
        self.settings_storage = settings_storage
        self.max_chars = max_chars

    def execute(self, fullListing: bool = False, path: str = "") -> ToolResult:
        if path.strip("/"):
            folder_path = self._validate_path(path)
            if not folder_path.is_dir():
                return ToolResult(
                    success=False,
                    data=None,
                    message=f"Not a folder: {path}",
                )
        else:
            folder_path = self.vault_path

        rel_path = folder_path.relative_to(self.vault_path).as_posix()
        if rel_path == ".":
            rel_path = ""

        # Hidden folders are never part of the tree
        if any(part.startswith(".") for part in Path(rel_path).parts):
            return ToolResult(
                success=False,
                data=None,
                message=f"Folder not found: {path}",
            )

        folder = load_folder(folder_path, rel_path=rel_path)
        keep = PatternFilter.from_settings(self.settings_storage.get(), self.vault_path)
        json_result, reduced = render_file_tree(
            folder, full_listing=fullListing, keep=keep, max_chars=self.max_chars
        )

        message = f"File tree for '{path or '/'}' ({len(json_result)} chars)"
        if reduced:
            message += ", file names omitted because the tree is too large"

        return ToolResult(
            success=True,
            data=FILE_TREE_PROMPT + json_result,
            message=message,
        )
