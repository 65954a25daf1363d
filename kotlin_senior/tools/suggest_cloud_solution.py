"""Tool: GCP services and DevOps recommendations for a Kotlin app."""

from dataclasses import dataclass

from pydantic import Field

from kotlin_senior.tools.base import BaseTool, ToolArguments

COMPUTE_SERVERLESS = (
    "- **Compute**: Cloud Run (fully managed container platform). Perfect for "
    "Kotlin (using Spring Boot or Ktor with GraalVM/JVM)."
)
COMPUTE_KUBERNETES = (
    "- **Compute**: GKE (Google Kubernetes Engine). Standard for microservices "
    "orchestration."
)
COMPUTE_DEFAULT = (
    "- **Compute**: Cloud Run is recommended as a default for modern stateless apps."
)
DATABASE_SQL = (
    "- **Database**: Cloud SQL (PostgreSQL recommended for Kotlin/JPA/Exposed)."
)
DATABASE_NOSQL = (
    "- **Database**: Firestore (NoSQL) for rapid development and mobile backends."
)
CI_CD = (
    "- **CI/CD**: Cloud Build. Define `cloudbuild.yaml` to build and deploy your "
    "container."
)
MONITORING = "- **Monitoring**: Cloud Operations Suite (formerly Stackdriver)."


@dataclass(frozen=True)
class RequirementFlags:
    serverless: bool = False
    kubernetes: bool = False
    sql: bool = False


def detect_requirements(requirements: str) -> RequirementFlags:
    """Set each flag if any comma-separated entry mentions it."""
    entries = [r.strip() for r in requirements.lower().split(",")]
    return RequirementFlags(
        serverless=any("serverless" in r for r in entries),
        kubernetes=any("kubernetes" in r or "gke" in r for r in entries),
        sql=any("sql" in r for r in entries),
    )


def suggest_cloud_solution(usage_scenario: str, requirements: str) -> str:
    flags = detect_requirements(requirements)

    if flags.serverless:
        compute = COMPUTE_SERVERLESS
    elif flags.kubernetes:
        compute = COMPUTE_KUBERNETES
    else:
        compute = COMPUTE_DEFAULT

    database = DATABASE_SQL if flags.sql else DATABASE_NOSQL

    suggestion = "\n".join([compute, database, CI_CD, MONITORING])
    return f'### GCP Cloud Solution for "{usage_scenario}"\n\n{suggestion}'


class SuggestCloudSolutionArgs(ToolArguments):
    usage_scenario: str = Field(
        alias="usageScenario",
        description=(
            "What the application does "
            "(e.g. 'Event driven microservices', 'Simple CRUD API')."
        ),
    )
    requirements: str = Field(
        description=(
            "Comma-separated list of requirements "
            "(e.g. 'Serverless, SQL, Global Scale')."
        ),
    )


class SuggestCloudSolutionTool(BaseTool):
    """Tool to recommend GCP services."""

    name = "suggest_cloud_solution"
    description = (
        "Suggest Google Cloud Platform (GCP) services and DevOps strategies "
        "for a Kotlin application."
    )
    args_model = SuggestCloudSolutionArgs

    def generate(self, args: SuggestCloudSolutionArgs) -> str:
        return suggest_cloud_solution(args.usage_scenario, args.requirements)
