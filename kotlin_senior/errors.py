"""Tool runtime error hierarchy.

Every error carries typed fields, supports ``to_dict()`` for the failure
descriptor handed back to the transport, and has a readable ``__str__``
for logging.
"""


class ToolError(Exception):
    """Base error for all tool registry and dispatch failures."""

    def __init__(self, message: str, *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": self.message, **self.detail}

    def __str__(self) -> str:
        return self.message


class DuplicateToolError(ToolError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"Tool '{tool_name}' is already registered",
            detail={"tool_name": tool_name},
        )


class UnknownToolError(ToolError):
    """Requested tool name is not in the registry."""

    def __init__(self, tool_name: str, available: list[str] | None = None) -> None:
        self.tool_name = tool_name
        self.available = available or []
        super().__init__(
            f"Unknown tool: {tool_name}",
            detail={"tool_name": tool_name, "available": self.available},
        )


class MissingArgumentError(ToolError):
    """A required parameter is absent or blank."""

    def __init__(self, tool_name: str, parameter: str) -> None:
        self.tool_name = tool_name
        self.parameter = parameter
        super().__init__(
            f"Missing required argument '{parameter}' for tool '{tool_name}'",
            detail={"tool_name": tool_name, "parameter": parameter},
        )
