"""Base types for generator tools."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class ParameterSpec:
    """Contract for a single tool parameter."""

    name: str
    required: bool
    kind: str = "string"
    description: str = ""


@dataclass(frozen=True)
class ToolDefinition:
    """Immutable tool contract: name, description and ordered parameters."""

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(
                    f"Duplicate parameter '{param.name}' in tool '{self.name}'"
                )
            seen.add(param.name)

    @classmethod
    def from_model(
        cls, name: str, description: str, model: type[BaseModel]
    ) -> "ToolDefinition":
        """Build a definition from a tool's argument model.

        Field aliases become parameter names, so the advertised contract
        matches the wire names the transport sends.
        """
        parameters = tuple(
            ParameterSpec(
                name=field.alias or field_name,
                required=field.is_required(),
                description=field.description or "",
            )
            for field_name, field in model.model_fields.items()
        )
        return cls(name=name, description=description, parameters=parameters)

    def required_parameters(self) -> list[ParameterSpec]:
        return [p for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the parameters."""
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.kind, "description": p.description}
                for p in self.parameters
            },
            "required": [p.name for p in self.parameters if p.required],
        }


class ToolArguments(BaseModel):
    """Base for typed per-tool arguments, populated by wire name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class BaseTool(ABC):
    """
    Abstract base class for generator tools.

    Each tool is defined in its own module with:
    - name: Unique identifier for the tool
    - description: Description for the calling agent
    - args_model: Typed argument model; its fields define the parameters
    - generate: Pure function of the validated arguments returning text
    """

    name: str
    description: str
    args_model: type[ToolArguments]

    def __init__(self) -> None:
        self.definition = ToolDefinition.from_model(
            self.name, self.description, self.args_model
        )

    @abstractmethod
    def generate(self, args: Any) -> str:
        """
        Produce the tool's text artifact.

        Args:
            args: Instance of ``args_model`` with every value resolved

        Returns:
            Generated text
        """
        pass

    def __repr__(self) -> str:
        return f"<Tool: {self.name}>"
