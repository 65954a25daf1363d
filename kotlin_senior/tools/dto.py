"""DTOs for tool dispatch."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kotlin_senior.errors import ToolError


@dataclass(frozen=True)
class Invocation:
    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InvocationResult:
    success: bool
    text: str
    error: ToolError | None = None

    @classmethod
    def ok(cls, text: str) -> "InvocationResult":
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, error: ToolError) -> "InvocationResult":
        return cls(success=False, text=error.message, error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "text": self.text}
        return {"success": False, **self.error.to_dict()}
