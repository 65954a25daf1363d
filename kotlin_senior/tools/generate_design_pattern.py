"""Tool: Kotlin implementation of a GoF design pattern."""

from pydantic import Field

from kotlin_senior.tools.base import BaseTool, ToolArguments

SINGLETON_TEMPLATE = """object {name}Manager {{
    init {{
        println("{name}Manager initialized")
    }}

    fun doSomething() {{
        // Implementation
    }}
}}"""

STRATEGY_TEMPLATE = """interface {name}Strategy {{
    fun execute(data: String): String
}}

class Concrete{name}StrategyA : {name}Strategy {{
    override fun execute(data: String) = "Strategy A: $data"
}}

class Concrete{name}StrategyB : {name}Strategy {{
    override fun execute(data: String) = "Strategy B: $data"
}}

class {name}Context(private var strategy: {name}Strategy) {{
    fun setStrategy(strategy: {name}Strategy) {{
        this.strategy = strategy
    }}

    fun executeStrategy(data: String): String {{
        return strategy.execute(data)
    }}
}}"""

OBSERVER_TEMPLATE = """interface {name}Observer {{
    fun update(event: String)
}}

class {name}Subject {{
    private val observers = mutableListOf<{name}Observer>()

    fun addObserver(observer: {name}Observer) {{
        observers.add(observer)
    }}

    fun removeObserver(observer: {name}Observer) {{
        observers.remove(observer)
    }}

    fun notifyObservers(event: String) {{
        observers.forEach {{ it.update(event) }}
    }}
}}"""

# pattern name -> (code template, explanation)
PATTERNS: dict[str, tuple[str, str]] = {
    "singleton": (
        SINGLETON_TEMPLATE,
        "In Kotlin, `object` is the idiomatic way to implement the Singleton "
        "pattern. It is thread-safe and lazy-loaded by default.",
    ),
    "strategy": (
        STRATEGY_TEMPLATE,
        "The Strategy pattern defines a family of algorithms, encapsulates each "
        "one, and makes them interchangeable.",
    ),
    "observer": (
        OBSERVER_TEMPLATE,
        "The Observer pattern defines a one-to-many dependency between objects so "
        "that when one object changes state, all its dependents are notified and "
        "updated automatically.",
    ),
}

FALLBACK_EXPLANATION = "This pattern is recognized but template is being expanded."


def class_name_for(context: str) -> str:
    """Identifier derived from ``context`` with all whitespace removed."""
    return "".join(context.split())


def generate_design_pattern(pattern_name: str, context: str) -> str:
    """Render a Kotlin snippet for ``pattern_name`` named after ``context``."""
    entry = PATTERNS.get(pattern_name)
    if entry is None:
        code = (
            f"// Implementation for {pattern_name} Pattern in {context} "
            "context coming soon."
        )
        explanation = FALLBACK_EXPLANATION
    else:
        template, explanation = entry
        code = template.format(name=class_name_for(context))

    return (
        f"### {pattern_name} Pattern for {context}\n\n"
        f"{explanation}\n\n"
        f"```kotlin\n{code}\n```"
    )


class GenerateDesignPatternArgs(ToolArguments):
    pattern_name: str = Field(
        alias="patternName",
        description=(
            "The classic GoF design pattern to generate "
            "(singleton, factory_method, strategy, observer, etc.)."
        ),
    )
    context: str = Field(
        description=(
            "The context or use case for this pattern "
            "(e.g., 'PaymentProcessor', 'Logger')."
        ),
    )


class GenerateDesignPatternTool(BaseTool):
    """Tool to generate a design pattern implementation."""

    name = "generate_design_pattern"
    description = (
        "Generate a Kotlin implementation of a specific design pattern "
        "with best practices."
    )
    args_model = GenerateDesignPatternArgs

    def generate(self, args: GenerateDesignPatternArgs) -> str:
        return generate_design_pattern(args.pattern_name, args.context)
