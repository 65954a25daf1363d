"""Tests for the five generator tools."""

from kotlin_senior.tools.analyze_architecture import analyze_architecture
from kotlin_senior.tools.check_best_practices import (
    CLEAN_CODE_LINES,
    check_best_practices,
    find_issues,
)
from kotlin_senior.tools.generate_design_pattern import (
    class_name_for,
    generate_design_pattern,
)
from kotlin_senior.tools.generate_test_template import (
    generate_test_template,
    parse_dependencies,
)
from kotlin_senior.tools.suggest_cloud_solution import (
    detect_requirements,
    suggest_cloud_solution,
)


# ---------------------------------------------------------------------------
# analyze_architecture
# ---------------------------------------------------------------------------


class TestAnalyzeArchitecture:
    def test_clean_architecture_mentions_dependency_rule(self):
        text = analyze_architecture("monolith", "clean_architecture")

        assert "Dependency Rule" in text
        assert "For a monolith aiming for Clean Architecture" in text
        assert "usecase/" in text

    def test_hexagonal(self):
        text = analyze_architecture("library", "hexagonal")

        assert "Ports and Adapters" in text
        assert "persistence/ (Database Adapters)" in text

    def test_microservices(self):
        text = analyze_architecture("microservice", "microservices")

        assert "Shared Nothing (Database per Service)" in text
        assert "Dockerfile" in text

    def test_unknown_goal_falls_back(self):
        text = analyze_architecture("monolith", "foo")

        assert "**Goal**: foo" in text
        assert "Choose a goal like clean_architecture" in text
        assert "```textStandard Kotlin structure recommended.\n```" in text
        assert "Dependency Rule" not in text

    def test_inputs_echoed_and_tips_appended(self):
        text = analyze_architecture("<my app>", "hexagonal")

        assert text.startswith("### Architectural Analysis for <my app>\n\n**Goal**: hexagonal")
        assert text.endswith(
            "- Use Coroutines `suspend` functions in your Ports/UseCases for I/O operations."
        )


# ---------------------------------------------------------------------------
# generate_design_pattern
# ---------------------------------------------------------------------------


class TestGenerateDesignPattern:
    def test_singleton_identifier(self):
        text = generate_design_pattern("singleton", "Payment Gateway")

        assert "object PaymentGatewayManager {" in text
        assert 'println("PaymentGatewayManager initialized")' in text
        assert text.startswith("### singleton Pattern for Payment Gateway")

    def test_output_is_idempotent(self):
        first = generate_design_pattern("singleton", "Payment Gateway")
        second = generate_design_pattern("singleton", "Payment Gateway")

        assert first == second

    def test_strategy(self):
        text = generate_design_pattern("strategy", "Payment")

        assert "interface PaymentStrategy" in text
        assert "class ConcretePaymentStrategyA : PaymentStrategy" in text
        assert "class PaymentContext(private var strategy: PaymentStrategy)" in text
        assert '"Strategy A: $data"' in text

    def test_observer(self):
        text = generate_design_pattern("observer", "Order Events")

        assert "interface OrderEventsObserver" in text
        assert "mutableListOf<OrderEventsObserver>()" in text
        assert "observers.forEach { it.update(event) }" in text

    def test_unknown_pattern_placeholder(self):
        text = generate_design_pattern("builder", "Http Request")

        assert "// Implementation for builder Pattern in Http Request context coming soon." in text
        assert "template is being expanded" in text

    def test_class_name_strips_all_whitespace(self):
        assert class_name_for(" Payment \t Gateway\n") == "PaymentGateway"


# ---------------------------------------------------------------------------
# check_best_practices
# ---------------------------------------------------------------------------


class TestCheckBestPractices:
    def test_two_markers_in_priority_order(self):
        issues = find_issues('println(user!!.name)')

        assert len(issues) == 2
        assert "not-null assertion" in issues[0]
        assert "instead of `println`" in issues[1]

    def test_all_markers_in_order(self):
        code = 'var x = 1\nGlobalScope.launch { println(y!!) }'
        issues = find_issues(code)

        assert len(issues) == 4
        assert "Avoid using `!!`" in issues[0]
        assert "Avoid `GlobalScope`" in issues[1]
        assert "Prefer `val`" in issues[2]
        assert "Logging framework" in issues[3]

    def test_var_ignored_when_val_present(self):
        assert find_issues("var a = 1\nval b = 2") == []

    def test_clean_code_returns_three_lines(self):
        text = check_best_practices("val x = listOf(1, 2, 3)")

        lines = text.split("\n")
        assert lines[:2] == ["### Best Practices Analysis", ""]
        assert lines[2:] == CLEAN_CODE_LINES
        assert len(CLEAN_CODE_LINES) == 3


# ---------------------------------------------------------------------------
# generate_test_template
# ---------------------------------------------------------------------------


class TestGenerateTestTemplate:
    def test_unit_mocks_in_input_order(self):
        text = generate_test_template("UserService", "unit", "UserRepository, EmailService")

        first = text.index("@MockK private lateinit var userRepository: UserRepository")
        second = text.index("@MockK private lateinit var emailService: EmailService")
        assert first < second
        assert "subject = UserService(userRepository, emailService)" in text
        assert "class UserServiceTest {" in text

    def test_duplicates_kept(self):
        assert parse_dependencies("Clock, Clock") == ["Clock", "Clock"]

    def test_empty_dependencies(self):
        assert parse_dependencies("") == []
        assert parse_dependencies(" , ") == []

    def test_integration_ignores_dependencies(self):
        with_deps = generate_test_template("UserService", "integration", "UserRepository")
        without = generate_test_template("UserService", "integration", "")

        assert with_deps == without
        assert "class UserServiceIntegrationTest {" in with_deps
        assert "@SpringBootTest" in with_deps
        assert "MockK" not in with_deps

    def test_unrecognized_type_is_integration(self):
        text = generate_test_template("Repo", "e2e", "A")

        assert text.startswith("### Generated e2e Test Template for Repo")
        assert "class RepoIntegrationTest" in text


# ---------------------------------------------------------------------------
# suggest_cloud_solution
# ---------------------------------------------------------------------------


class TestSuggestCloudSolution:
    def test_serverless_and_sql(self):
        text = suggest_cloud_solution("CRUD API", "Serverless, SQL")

        assert "Cloud Run (fully managed container platform)" in text
        assert "GKE" not in text
        assert "Cloud SQL (PostgreSQL" in text

    def test_serverless_has_priority_over_kubernetes(self):
        flags = detect_requirements("GKE, serverless")

        assert flags.serverless and flags.kubernetes
        assert "fully managed" in suggest_cloud_solution("x", "GKE, serverless")

    def test_kubernetes(self):
        text = suggest_cloud_solution("Event driven microservices", "Kubernetes")

        assert "GKE (Google Kubernetes Engine)" in text
        assert "Firestore (NoSQL)" in text

    def test_defaults(self):
        text = suggest_cloud_solution("Simple app", "Global Scale")

        lines = text.split("\n")
        assert lines[0] == '### GCP Cloud Solution for "Simple app"'
        assert lines[2:] == [
            "- **Compute**: Cloud Run is recommended as a default for modern stateless apps.",
            "- **Database**: Firestore (NoSQL) for rapid development and mobile backends.",
            "- **CI/CD**: Cloud Build. Define `cloudbuild.yaml` to build and deploy your container.",
            "- **Monitoring**: Cloud Operations Suite (formerly Stackdriver).",
        ]

    def test_nosql_entry_sets_sql_flag(self):
        # substring containment: "nosql" contains "sql"
        assert detect_requirements("NoSQL").sql
