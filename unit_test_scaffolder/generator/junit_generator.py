"""Generate Kotlin JUnit4 tests for classes and module-level functions."""

import logging

from unit_test_scaffolder.config import ExceptionCaptureMethod
from unit_test_scaffolder.generator.test_string_builder import (
    TestStringBuilder,
    TestStringBuilderConfiguration,
)
from unit_test_scaffolder.mocking import MockerCodeGenerator
from unit_test_scaffolder.models import (
    ClassMetadata,
    FunctionMetadata,
    StaticFunctionsMetadata,
)

logger = logging.getLogger(__name__)

JUNIT_KNOWN_IMPORTS = {
    "Before": "org.junit.Before",
    "Test": "org.junit.Test",
    "RunWith": "org.junit.runner.RunWith",
    "Parameterized": "org.junit.runners.Parameterized",
    "Parameters": "org.junit.runners.Parameterized.Parameters",
    "assertEquals": "org.junit.Assert.assertEquals",
}


class KotlinJUnitTestGenerator:
    """Collect imports and mocking needs, then render through TestStringBuilder.

    Typical use is one class per session:

        generator.add_class_to_tests(class_metadata)
        source = generator.generate_tests()
        generator.reset()
    """

    def __init__(
        self,
        string_builder: TestStringBuilder,
        mocker_code_generator: MockerCodeGenerator,
        is_parameterized: bool = False,
        exception_capture_method=ExceptionCaptureMethod.NO_CAPTURE,
    ):
        self._string_builder = string_builder
        self._mocker_code_generator = mocker_code_generator
        self._is_parameterized = is_parameterized
        self._exception_capture_method = exception_capture_method
        self._used_imports: dict[str, str] = {}
        self._known_imports: dict[str, str] = {}
        self.reset()

    def add_class_to_tests(self, class_under_test: ClassMetadata):
        """Render the test class for class_under_test."""
        self._set_up_mock_generator_for_class(class_under_test)
        self._evaluate_mock_code_generator_imports()
        self._add_import_if_known("Before")
        self._evaluate_parameterized_imports()
        self._evaluate_function_imports(class_under_test.concrete_functions)
        self._add_metadata_imports(class_under_test.imports)

        has_mockable_constructor_parameters = self._has_mockable_constructor_parameters(
            class_under_test
        )
        self._string_builder.append_test_class(
            TestStringBuilderConfiguration(
                class_under_test=class_under_test,
                used_imports=frozenset(self._used_imports.values()),
                has_mockable_constructor_parameters=has_mockable_constructor_parameters,
                is_parameterized=self._is_parameterized,
            )
        )

    def add_static_functions_to_tests(
        self, functions_under_test: StaticFunctionsMetadata, output_class_name: str
    ):
        """Render a test class named after output_class_name for module functions."""
        self._set_up_mock_generator_for_functions(functions_under_test)
        self._evaluate_mock_code_generator_imports()
        self._evaluate_parameterized_imports()
        self._evaluate_function_imports(functions_under_test.concrete_functions)
        self._add_metadata_imports(functions_under_test.imports)

        self._string_builder.append_functions_test_class(
            functions_under_test,
            frozenset(self._used_imports.values()),
            output_class_name,
            self._is_parameterized,
        )

    def generate_tests(self) -> str:
        return str(self._string_builder)

    def reset(self):
        """Forget everything rendered so far, ready for the next class."""
        self._string_builder.clear()
        self._used_imports.clear()
        self._known_imports = {
            **JUNIT_KNOWN_IMPORTS,
            **self._mocker_code_generator.known_imports,
        }

    def _set_up_mock_generator_for_class(self, class_under_test: ClassMetadata):
        mocker = self._mocker_code_generator
        functions = class_under_test.concrete_functions

        if self._is_parameterized:
            mocker.set_is_parameterized_test()
            if self._has_mockable_return_values(functions):
                mocker.set_has_mocked_function_return_values()

        if self._has_mockable_constructor_parameters(class_under_test):
            mocker.set_has_mocked_constructor_parameters(class_under_test)

        if self._has_mockable_function_parameters(functions):
            mocker.set_has_mocked_function_parameters()

        if class_under_test.is_abstract:
            mocker.set_is_abstract_class_under_test(class_under_test)
            if self._has_mockable_return_values(class_under_test.abstract_functions):
                mocker.set_has_mocked_function_return_values()

    def _set_up_mock_generator_for_functions(
        self, functions_under_test: StaticFunctionsMetadata
    ):
        mocker = self._mocker_code_generator
        functions = functions_under_test.concrete_functions

        if self._is_parameterized:
            mocker.set_is_parameterized_test()
            if self._has_mockable_return_values(functions):
                mocker.set_has_mocked_function_return_values()

        if self._has_mockable_function_parameters(functions):
            mocker.set_has_mocked_function_parameters()

    def _evaluate_mock_code_generator_imports(self):
        for import_name in sorted(self._mocker_code_generator.required_imports):
            self._add_import_if_known(import_name)

    def _evaluate_parameterized_imports(self):
        if not self._is_parameterized:
            return
        self._add_import_if_known("RunWith")
        self._add_import_if_known("Parameterized")
        self._add_import_if_known("Parameters")

    def _evaluate_function_imports(self, functions: list[FunctionMetadata]):
        if not functions:
            return
        self._add_import_if_known("Test")
        if self._asserts_equality(functions):
            self._add_import_if_known("assertEquals")

    def _asserts_equality(self, functions: list[FunctionMetadata]) -> bool:
        if self._exception_capture_method == ExceptionCaptureMethod.TRY_CATCH:
            return True
        return self._is_parameterized and any(
            function.has_return_value for function in functions
        )

    def _add_metadata_imports(self, imports: dict[str, str]):
        self._used_imports.update(imports)

    def _add_import_if_known(self, entity_name: str):
        qualified_name = self._known_imports.get(entity_name)
        if qualified_name is None:
            logger.warning(f"No known import for {entity_name}")
            return
        self._used_imports[entity_name] = qualified_name

    def _has_mockable_constructor_parameters(
        self, class_under_test: ClassMetadata
    ) -> bool:
        return any(
            self._mocker_code_generator.is_mockable(parameter)
            for parameter in class_under_test.constructor_parameters
        )

    def _has_mockable_function_parameters(
        self, functions: list[FunctionMetadata]
    ) -> bool:
        return any(
            self._mocker_code_generator.is_mockable(parameter)
            for function in functions
            for parameter in function.parameters
        ) or any(
            self._mocker_code_generator.is_mockable(function.extension_receiver_type)
            for function in functions
            if function.extension_receiver_type is not None
        )

    def _has_mockable_return_values(self, functions: list[FunctionMetadata]) -> bool:
        return any(
            self._mocker_code_generator.is_mockable(function.return_type)
            for function in functions
        )
