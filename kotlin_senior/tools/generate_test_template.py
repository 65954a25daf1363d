"""Tool: Kotlin test class template (JUnit 5 + MockK)."""

from pydantic import Field

from kotlin_senior.tools.base import BaseTool, ToolArguments

UNIT_TEMPLATE = """
import io.mockk.impl.annotations.MockK
import io.mockk.junit5.MockKExtension
import org.junit.jupiter.api.BeforeEach
import org.junit.jupiter.api.Test
import org.junit.jupiter.api.extension.ExtendWith
import io.mockk.verify
import io.mockk.every
import org.junit.jupiter.api.Assertions.*

@ExtendWith(MockKExtension::class)
class {class_name}Test {{

{mock_declarations}

    private lateinit var subject: {class_name}

    @BeforeEach
    fun setUp() {{
        // Initialize subject with mocks
        subject = {class_name}({constructor_args})
    }}

    @Test
    fun `should do something expected`() {{
        // Given
        // every {{ ... }} returns ...

        // When
        // subject.doSomething()

        // Then
        // verify {{ ... }}
        // assertTrue(...)
    }}
}}"""

INTEGRATION_TEMPLATE = """
import org.junit.jupiter.api.Test
import org.springframework.boot.test.context.SpringBootTest
import org.springframework.test.context.ActiveProfiles

@SpringBootTest
@ActiveProfiles("test")
class {class_name}IntegrationTest {{

    @Test
    fun `context loads`() {{
    }}
}}"""


def parse_dependencies(dependencies: str) -> list[str]:
    """Split a comma-separated list, keeping order and duplicates."""
    names = [d.strip() for d in dependencies.split(",")]
    return [name for name in names if name]


def variable_name(type_name: str) -> str:
    return type_name[:1].lower() + type_name[1:]


def generate_test_template(class_name: str, test_type: str, dependencies: str) -> str:
    """Render a unit test with mocks, or an integration test for any other type."""
    if test_type == "unit":
        deps = parse_dependencies(dependencies)
        content = UNIT_TEMPLATE.format(
            class_name=class_name,
            mock_declarations="\n".join(
                f"    @MockK private lateinit var {variable_name(d)}: {d}" for d in deps
            ),
            constructor_args=", ".join(variable_name(d) for d in deps),
        )
    else:
        content = INTEGRATION_TEMPLATE.format(class_name=class_name)

    return (
        f"### Generated {test_type} Test Template for {class_name}\n\n"
        f"```kotlin{content}\n```"
    )


class GenerateTestTemplateArgs(ToolArguments):
    class_name: str = Field(
        alias="className", description="The name of the class to be tested."
    )
    test_type: str = Field(
        alias="testType",
        description="The type of test to generate (unit, integration).",
    )
    dependencies: str = Field(
        default="",
        description=(
            "Comma-separated list of dependencies to mock "
            "(e.g. 'UserRepository,EmailService')."
        ),
    )


class GenerateTestTemplateTool(BaseTool):
    """Tool to generate a test class skeleton."""

    name = "generate_test_template"
    description = "Generate a Kotlin test class template using JUnit 5 and MockK."
    args_model = GenerateTestTemplateArgs

    def generate(self, args: GenerateTestTemplateArgs) -> str:
        return generate_test_template(args.class_name, args.test_type, args.dependencies)
