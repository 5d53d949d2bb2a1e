"""Wire a tests generator together from a Configuration."""

import logging

from unit_test_scaffolder.config import Configuration, Mocker
from unit_test_scaffolder.formatting import Formatting
from unit_test_scaffolder.generator.junit_generator import KotlinJUnitTestGenerator
from unit_test_scaffolder.generator.test_string_builder import TestStringBuilder
from unit_test_scaffolder.mocking import (
    MockableTypeQualifier,
    MockerCodeGenerator,
    MockitoCodeGenerator,
    MockKCodeGenerator,
)

logger = logging.getLogger(__name__)


def get_mocker_code_generator(
    mocker: Mocker,
    mockable_type_qualifier: MockableTypeQualifier,
    formatting: Formatting,
    mockito_rule_variable_name: str,
) -> MockerCodeGenerator:
    """Create the code generator for the selected mocking framework."""
    if mocker == Mocker.MOCKITO:
        return MockitoCodeGenerator(
            mockable_type_qualifier, formatting, mockito_rule_variable_name
        )
    elif mocker == Mocker.MOCKK:
        return MockKCodeGenerator(mockable_type_qualifier, formatting)
    raise ValueError(f"Unsupported mocker: {mocker}")


def create_tests_generator(
    configuration: Configuration,
    formatting: Formatting | None = None,
    mockable_type_qualifier: MockableTypeQualifier | None = None,
) -> KotlinJUnitTestGenerator:
    """Create a KotlinJUnitTestGenerator for the given configuration."""
    formatting = formatting or Formatting()
    mockable_type_qualifier = mockable_type_qualifier or MockableTypeQualifier()
    logger.info(f"Creating tests generator using {configuration.mocker.value}")

    mocker_code_generator = get_mocker_code_generator(
        configuration.mocker,
        mockable_type_qualifier,
        formatting,
        configuration.mockito_rule,
    )
    string_builder = TestStringBuilder(
        formatting,
        mocker_code_generator,
        configuration.class_under_test,
        configuration.actual_value,
        configuration.default_assertion,
        configuration.exception_capture_method,
    )
    return KotlinJUnitTestGenerator(
        string_builder,
        mocker_code_generator,
        is_parameterized=configuration.is_parameterized,
        exception_capture_method=configuration.exception_capture_method,
    )
