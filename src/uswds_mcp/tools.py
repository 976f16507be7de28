"""Tool definitions for the USWDS MCP server."""

from __future__ import annotations

import re
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from uswds_mcp.errors import ConfigurationError

TOOL_NAME_PATTERN = re.compile(r"^[a-z_]+$")
MIN_DESCRIPTION_LENGTH = 10

ToolHandler = Callable[[Any], Awaitable[Any]]


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Unknown argument keys are ignored; declared fields are type checked.
    """

    model_config = ConfigDict(extra="ignore")


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique snake_case name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Coroutine function receiving the validated parameters model.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, parameters: Dict[str, Any]) -> ToolParameters:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Raw arguments provided by the caller.

        Raises:
            ValueError: If parameter validation fails.

        Returns:
            Validated parameter model.
        """

        try:
            return self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            raise ValueError(
                f"Invalid parameters for tool '{self.name}': {_summarize(error)}"
            ) from error

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema describing accepted arguments."""

        schema = self.parameters_model.model_json_schema()
        schema.setdefault("properties", {})
        return schema

    def descriptor(self) -> Dict[str, Any]:
        """Return the discovery descriptor advertised to clients."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


def validate_descriptor(tool: ToolDefinition) -> None:
    """Check the invariants every registered tool must satisfy.

    Args:
        tool: Tool definition to check.

    Raises:
        ConfigurationError: If the name, description or input schema is malformed.
    """

    if not TOOL_NAME_PATTERN.match(tool.name):
        raise ConfigurationError(f"Tool name '{tool.name}' must match [a-z_]+")
    if len(tool.description) <= MIN_DESCRIPTION_LENGTH:
        raise ConfigurationError(f"Tool '{tool.name}' needs a longer description")
    schema = tool.input_schema()
    if schema.get("type") != "object" or not isinstance(
        schema.get("properties"), dict
    ):
        raise ConfigurationError(
            f"Tool '{tool.name}' input schema must be an object with properties"
        )
