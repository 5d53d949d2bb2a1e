"""Mockito (mockito-kotlin) code generation."""

from unit_test_scaffolder.formatting import Formatting, to_non_nullable_kotlin_string
from unit_test_scaffolder.mocking.mocker_code_generator import MockerCodeGenerator
from unit_test_scaffolder.mocking.qualifier import MockableTypeQualifier
from unit_test_scaffolder.models import ClassMetadata, DataType

DEFAULT_MOCKITO_RULE_VARIABLE_NAME = "mockitoRule"

MOCKITO_KNOWN_IMPORTS = {
    "MockitoJUnitRunner": "org.mockito.junit.MockitoJUnitRunner",
    "MockitoJUnit": "org.mockito.junit.MockitoJUnit",
    "Mock": "org.mockito.Mock",
    "mock": "org.mockito.kotlin.mock",
    "Mockito": "org.mockito.Mockito",
    "UseConstructor": "org.mockito.kotlin.UseConstructor",
    "Rule": "org.junit.Rule",
    "MethodRule": "org.junit.rules.MethodRule",
}


class MockitoCodeGenerator(MockerCodeGenerator):
    """Annotation-driven mocks with the Mockito JUnit runner."""

    test_class_base_runner_annotation = "@RunWith(MockitoJUnitRunner::class)"

    def __init__(
        self,
        mockable_type_qualifier: MockableTypeQualifier,
        formatting: Formatting,
        mockito_rule_variable_name: str = DEFAULT_MOCKITO_RULE_VARIABLE_NAME,
    ):
        super().__init__(mockable_type_qualifier, formatting)
        self._mockito_rule_variable_name = mockito_rule_variable_name

    @property
    def known_imports(self) -> dict[str, str]:
        return dict(MOCKITO_KNOWN_IMPORTS)

    @property
    def mocking_rule(self) -> str:
        return (
            f"{self._indent()}@get:Rule\n"
            f"{self._indent()}val {self._mockito_rule_variable_name}: MethodRule = "
            "MockitoJUnit.rule()"
        )

    def get_constructor_mock(self, parameter_name: str, parameter_type: DataType) -> str:
        return (
            f"{self._indent()}@Mock\n"
            f"{self._indent()}private lateinit var {parameter_name}: "
            f"{to_non_nullable_kotlin_string(parameter_type)}"
        )

    def get_mocked_instance(self, variable_type: DataType) -> str:
        return f"mock<{to_non_nullable_kotlin_string(variable_type)}>()"

    def get_abstract_class_under_test(self, class_under_test: ClassMetadata) -> str:
        return (
            "mock(defaultAnswer = Mockito.CALLS_REAL_METHODS"
            f"{self._constructor_arguments_for_abstract(class_under_test)})"
        )

    def set_is_parameterized_test(self):
        super().set_is_parameterized_test()
        self._add_mocking_rule_if_needed()

    def set_has_mocked_constructor_parameters(self, class_under_test: ClassMetadata):
        self._require("RunWith", "MockitoJUnitRunner", "Mock")
        self._state.has_mocked_constructor_parameters = True
        self._add_mocking_rule_if_needed()

    def set_has_mocked_function_parameters(self):
        self._require("mock")

    def set_has_mocked_function_return_values(self):
        self._require("mock")

    def set_is_abstract_class_under_test(self, class_under_test: ClassMetadata):
        self._require("mock", "Mockito")
        if class_under_test.constructor_parameters:
            self._require("UseConstructor")

    def _add_mocking_rule_if_needed(self):
        state = self._state
        if state.is_parameterized_test and state.has_mocked_constructor_parameters:
            self._require("Rule", "MethodRule", "MockitoJUnit")

    @staticmethod
    def _constructor_arguments_for_abstract(class_under_test: ClassMetadata) -> str:
        if not class_under_test.constructor_parameters:
            return ""
        arguments = ", ".join(
            parameter.name for parameter in class_under_test.constructor_parameters
        )
        return f", useConstructor = UseConstructor.withArguments({arguments})"
