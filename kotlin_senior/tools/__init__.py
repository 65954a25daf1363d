"""Generator tools, registry and dispatch engine."""

from kotlin_senior.tools.base import BaseTool, ParameterSpec, ToolDefinition
from kotlin_senior.tools.dispatcher import Dispatcher
from kotlin_senior.tools.dto import Invocation, InvocationResult
from kotlin_senior.tools.registry import ToolRegistry, build_registry

__all__ = [
    "BaseTool",
    "Dispatcher",
    "Invocation",
    "InvocationResult",
    "ParameterSpec",
    "ToolDefinition",
    "ToolRegistry",
    "build_registry",
]
