"""Tool: Heuristic best-practices review of a Kotlin snippet."""

from collections.abc import Callable

from pydantic import Field

from kotlin_senior.tools.base import BaseTool, ToolArguments

# Checked in this order; advisories are emitted in the same order.
MARKERS: list[tuple[Callable[[str], bool], str]] = [
    (
        lambda code: "!!" in code,
        "- Avoid using `!!` (not-null assertion). Use `?` safe calls or `?:` Elvis "
        "operator instead to prevent NullPointerExceptions.",
    ),
    (
        lambda code: "GlobalScope" in code,
        "- Avoid `GlobalScope`. Use structured concurrency with `viewModelScope`, "
        "`lifecycleScope`, or a custom CoroutineScope.",
    ),
    (
        lambda code: "var " in code and "val " not in code,
        "- Prefer `val` (immutable) over `var` (mutable) where possible to ensure "
        "thread safely and predictability.",
    ),
    (
        lambda code: "println" in code,
        "- Use a standard Logging framework (e.g., SLF4J or Timber) instead of "
        "`println`.",
    ),
]

CLEAN_CODE_LINES = [
    "Code looks clean regarding basic heuristics. "
    "Ensure you are following SOLID principles:",
    "- Single Responsibility: Each class should have one job.",
    "- Open/Closed: Open for extension, closed for modification.",
]


def find_issues(code_snippet: str) -> list[str]:
    """Advisory lines for every marker found, in marker order."""
    return [advice for matches, advice in MARKERS if matches(code_snippet)]


def check_best_practices(code_snippet: str) -> str:
    suggestions = find_issues(code_snippet) or CLEAN_CODE_LINES
    return "### Best Practices Analysis\n\n" + "\n".join(suggestions)


class CheckBestPracticesArgs(ToolArguments):
    code_snippet: str = Field(
        alias="codeSnippet", description="The Kotlin code to analyze."
    )


class CheckBestPracticesTool(BaseTool):
    """Tool to flag common Kotlin anti-patterns."""

    name = "check_best_practices"
    description = (
        "Analyze Kotlin code snippets for common anti-patterns and suggest "
        "improvements based on SOLID and optimization principles."
    )
    args_model = CheckBestPracticesArgs

    def generate(self, args: CheckBestPracticesArgs) -> str:
        return check_best_practices(args.code_snippet)
