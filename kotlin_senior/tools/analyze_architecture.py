"""Tool: Architecture advice for a Kotlin project."""

from pydantic import Field

from kotlin_senior.tools.base import BaseTool, ToolArguments

CLEAN_ARCHITECTURE_STRUCTURE = """
src/
  domain/          (Enterprise Business Rules - Entities)
  usecase/         (Application Business Rules)
  adapter/         (Interface Adapters)
    controller/
    presenter/
    gateway/       (Repo implementations)
  infrastructure/  (Frameworks & Drivers)
    db/
    web/"""

HEXAGONAL_STRUCTURE = """
src/
  domain/
    model/
    port/
      in/  (Use Cases)
      out/ (Repository Interfaces)
  adapter/
    in/
      web/ (Controllers)
    out/
      persistence/ (Database Adapters)
  application/
    service/ (Implementation of Use Cases)"""

MICROSERVICES_STRUCTURE = """
k8s/ (Helm charts or Kustomize)
src/main/kotlin/com/example/serviceName/
  api/ (Controllers/gRPC)
  domain/ (Core Logic)
  data/ (Repositories/Entities)
  config/ (DI, Environment)
Dockerfile"""

HEXAGONAL_ADVICE = (
    "Hexagonal Architecture (Ports and Adapters) focuses on isolating the domain "
    "logic from the outside world.\n"
    "Primary Ports (Driving): Use Cases / Input Ports.\n"
    "Secondary Ports (Driven): Repository Interfaces / Output Ports."
)

MICROSERVICES_ADVICE = (
    "Microservices Architecture involves decomposing the domain into small, "
    "independent services.\n"
    "Key Principles:\n"
    "1. Independent Deployability.\n"
    "2. Shared Nothing (Database per Service).\n"
    "3. API First Design.\n"
    "\n"
    "Kotlin fits well here with Spring Boot or Ktor/Quarkus. Focus on lightweight, "
    "fast startup containers."
)

DEFAULT_ADVICE = (
    "Choose a goal like clean_architecture, hexagonal, or microservices "
    "for detailed advice."
)
DEFAULT_STRUCTURE = "Standard Kotlin structure recommended."

KOTLIN_TIPS = (
    "### Kotlin Specific Tips:\n"
    "- Use `data class` for Domain Entities.\n"
    "- Use `sealed class` for Domain Errors or Result types.\n"
    "- Use Coroutines `suspend` functions in your Ports/UseCases for I/O operations."
)


def analyze_architecture(project_type: str, goal: str) -> str:
    """Render architecture advice and a package outline for ``goal``.

    ``project_type`` and ``goal`` are echoed into the document as given.
    """
    if goal == "clean_architecture":
        advice = (
            f"For a {project_type} aiming for Clean Architecture in Kotlin, "
            "strict separation of concerns is key.\n"
            "Dependency Rule: Source code dependencies can only point inwards.\n"
            "Result: Independent of Frameworks, Testable, Independent of UI, "
            "Independent of Database."
        )
        structure = CLEAN_ARCHITECTURE_STRUCTURE
    elif goal == "hexagonal":
        advice = HEXAGONAL_ADVICE
        structure = HEXAGONAL_STRUCTURE
    elif goal == "microservices":
        advice = MICROSERVICES_ADVICE
        structure = MICROSERVICES_STRUCTURE
    else:
        advice = DEFAULT_ADVICE
        structure = DEFAULT_STRUCTURE

    return (
        f"### Architectural Analysis for {project_type}\n\n"
        f"**Goal**: {goal}\n\n"
        f"{advice}\n\n"
        "### Suggested Kotlin Package Structure:\n"
        f"```text{structure}\n```\n\n"
        f"{KOTLIN_TIPS}"
    )


class AnalyzeArchitectureArgs(ToolArguments):
    project_type: str = Field(
        alias="projectType",
        description="The type of the project (monolith, microservice, library).",
    )
    current_structure_description: str = Field(
        alias="currentStructureDescription",
        description="Brief description of the current folder/package structure.",
    )
    goal: str = Field(
        description=(
            "The architectural goal (clean_architecture, hexagonal, "
            "modular_monolith, microservices, refactor_legacy)."
        ),
    )


class AnalyzeArchitectureTool(BaseTool):
    """Tool to suggest architectural improvements for a Kotlin project."""

    name = "analyze_architecture"
    description = (
        "Analyze and suggest architectural improvements for a Kotlin project "
        "based on Clean Architecture, Hexagonal, or Monolith patterns."
    )
    args_model = AnalyzeArchitectureArgs

    def generate(self, args: AnalyzeArchitectureArgs) -> str:
        return analyze_architecture(args.project_type, args.goal)
