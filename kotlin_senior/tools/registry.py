"""Tool registry holding the catalog of generator tools."""

import logging

from kotlin_senior.errors import DuplicateToolError
from kotlin_senior.tools.base import BaseTool, ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of tools, written once at startup and read-only afterwards."""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._frozen = False

    def register(self, tool: BaseTool) -> None:
        """
        Register a tool under its name.

        Args:
            tool: Tool instance

        Raises:
            DuplicateToolError: If a tool with the same name is registered
            RuntimeError: If the registry has already been frozen
        """
        if self._frozen:
            raise RuntimeError("Tool registry is frozen; register tools at startup")
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)

        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def freeze(self) -> None:
        """End the registration phase."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> BaseTool | None:
        """
        Get a tool by name.

        The registered definition is ``lookup(name).definition``.

        Args:
            name: Tool name

        Returns:
            Tool instance or None if not found
        """
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        """Get all tool definitions in registration order."""
        return [tool.definition for tool in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        """Get list of all tool names."""
        return list(self._tools.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry() -> ToolRegistry:
    """
    Build and freeze the registry with the full tool catalog.

    Returns:
        Frozen ToolRegistry

    Raises:
        DuplicateToolError: If the catalog declares a name twice
    """
    # Import tools here to keep tool modules free of registry imports
    from kotlin_senior.tools.analyze_architecture import AnalyzeArchitectureTool
    from kotlin_senior.tools.check_best_practices import CheckBestPracticesTool
    from kotlin_senior.tools.generate_design_pattern import GenerateDesignPatternTool
    from kotlin_senior.tools.generate_test_template import GenerateTestTemplateTool
    from kotlin_senior.tools.suggest_cloud_solution import SuggestCloudSolutionTool

    registry = ToolRegistry()
    for tool in (
        AnalyzeArchitectureTool(),
        GenerateDesignPatternTool(),
        CheckBestPracticesTool(),
        GenerateTestTemplateTool(),
        SuggestCloudSolutionTool(),
    ):
        registry.register(tool)

    registry.freeze()
    logger.info(f"Loaded {len(registry)} tools")
    return registry
