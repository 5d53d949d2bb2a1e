"""Kotlin JUnit test source generation."""

from unit_test_scaffolder.generator.factory import (
    create_tests_generator,
    get_mocker_code_generator,
)
from unit_test_scaffolder.generator.junit_generator import KotlinJUnitTestGenerator
from unit_test_scaffolder.generator.test_string_builder import (
    TestStringBuilder,
    TestStringBuilderConfiguration,
)

__all__ = [
    # Rendering
    "TestStringBuilder",
    "TestStringBuilderConfiguration",
    # Orchestration
    "KotlinJUnitTestGenerator",
    "create_tests_generator",
    "get_mocker_code_generator",
]
