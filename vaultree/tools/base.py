"""Tool interface and registry exposed to the agent."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError


@dataclass
class ToolResult:
    """Result from a tool execution."""

    success: bool
    data: Any
    message: str


class ToolArgs(BaseModel):
    """Arguments accepted by a tool. Subclass per tool."""


def _strip_titles(schema: dict) -> dict:
    """Drop the pydantic-generated titles, the model only needs descriptions."""
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema


class Tool(ABC):
    """Base class for vault tools.

    Subclasses set name, description and args_model; the JSON schema
    advertised to the model is generated from args_model.
    """

    name: str
    description: str
    args_model: ClassVar[type[ToolArgs]] = ToolArgs

    def __init__(self, vault_path: Path) -> None:
        self.vault_path = vault_path.resolve()

    @property
    def parameters(self) -> dict[str, Any]:
        schema = _strip_titles(self.args_model.model_json_schema())
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def _validate_path(self, path: str) -> Path:
        """Resolve a vault-relative path, refusing anything outside the vault."""
        full_path = (self.vault_path / path.lstrip("/")).resolve()
        if not full_path.is_relative_to(self.vault_path):
            raise ValueError(f"Path escapes vault: {path}")
        return full_path

    def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Validate raw arguments against args_model and execute."""
        args = self.args_model.model_validate(arguments)
        return self.execute(**args.model_dump())

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with validated parameters."""

    def to_openai_function(self) -> dict:
        """Convert tool to OpenAI function calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


@dataclass
class ToolRegistry:
    """Registry of available tools."""

    tools: dict[str, Tool] = field(default_factory=dict)

    def register(self, tool: Tool) -> None:
        self.tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        return self.tools.get(name)

    def execute(self, name: str, **kwargs) -> ToolResult:
        """Execute a tool by name. Failures come back as unsuccessful results."""
        tool = self.get(name)
        if not tool:
            return ToolResult(success=False, data=None, message=f"Unknown tool: {name}")

        try:
            return tool.run(kwargs)
        except ValidationError as e:
            return ToolResult(
                success=False,
                data=None,
                message=f"Invalid arguments for {name}: {e.errors(include_url=False)}",
            )
        except Exception as e:
            return ToolResult(success=False, data=None, message=f"Tool error: {e}")

    def execute_call(self, name: str, arguments: str) -> ToolResult:
        """Execute a tool call whose arguments arrive as a JSON string."""
        try:
            parsed = json.loads(arguments) if arguments.strip() else {}
        except json.JSONDecodeError:
            return ToolResult(
                success=False, data=None, message=f"Invalid arguments for {name}"
            )
        if not isinstance(parsed, dict):
            return ToolResult(
                success=False, data=None, message=f"Invalid arguments for {name}"
            )
        return self.execute(name, **parsed)

    def get_openai_tools(self) -> list[dict]:
        """Get all tools in OpenAI function calling format."""
        return [tool.to_openai_function() for tool in self.tools.values()]
