"""Dispatch engine: resolves arguments and routes invocations to tools."""

from collections.abc import Mapping
from typing import Any

from kotlin_senior.errors import MissingArgumentError, ToolError, UnknownToolError
from kotlin_senior.tools.base import ToolDefinition
from kotlin_senior.tools.dto import Invocation, InvocationResult
from kotlin_senior.tools.registry import ToolRegistry


class Dispatcher:
    """Single entry point for tool invocations.

    Holds no state besides the registry, which is read-only once built,
    so one instance can serve concurrent invocations.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def dispatch(self, invocation: Invocation) -> InvocationResult:
        """
        Validate an invocation, run its tool and wrap the outcome.

        Unknown tools and missing required arguments come back as failed
        results; nothing is raised for them.
        """
        tool = self.registry.lookup(invocation.tool_name)
        if tool is None:
            return InvocationResult.fail(
                UnknownToolError(invocation.tool_name, self.registry.tool_names)
            )

        try:
            resolved = resolve_arguments(tool.definition, invocation.arguments)
        except ToolError as e:
            return InvocationResult.fail(e)

        args = tool.args_model.model_validate(resolved)
        return InvocationResult.ok(tool.generate(args))

    def call(
        self, tool_name: str, arguments: Mapping[str, Any] | None = None
    ) -> InvocationResult:
        """Dispatch by tool name and argument mapping."""
        return self.dispatch(Invocation(tool_name, arguments or {}))


def resolve_arguments(
    definition: ToolDefinition, arguments: Mapping[str, Any]
) -> dict[str, str]:
    """
    Resolve raw arguments against a tool's parameter contract.

    Required parameters are checked in declaration order and the first
    absent or blank one is reported. Absent optional parameters resolve
    to an empty string. Keys not in the contract are dropped.

    Raises:
        MissingArgumentError: For the first missing required parameter
    """
    resolved: dict[str, str] = {}
    for param in definition.parameters:
        value = _as_text(arguments.get(param.name))
        if param.required and not value.strip():
            raise MissingArgumentError(definition.name, param.name)
        resolved[param.name] = value
    return resolved


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # Array form of list parameters, e.g. ["UserRepository", "EmailService"]
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)
