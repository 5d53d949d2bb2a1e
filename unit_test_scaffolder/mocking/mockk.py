"""MockK code generation."""

from unit_test_scaffolder.formatting import (
    to_kotlin_string,
    to_non_nullable_kotlin_string,
)
from unit_test_scaffolder.mocking.mocker_code_generator import MockerCodeGenerator
from unit_test_scaffolder.models import ClassMetadata, DataType, FunctionMetadata

MOCKK_KNOWN_IMPORTS = {
    "MockKAnnotations": "io.mockk.MockKAnnotations",
    "MockK": "io.mockk.impl.annotations.MockK",
    "mockk": "io.mockk.mockk",
}


class MockKCodeGenerator(MockerCodeGenerator):
    """DSL-style mocks; abstract classes become anonymous objects."""

    @property
    def known_imports(self) -> dict[str, str]:
        return dict(MOCKK_KNOWN_IMPORTS)

    @property
    def set_up_statements(self) -> str | None:
        if not self._state.has_mocked_constructor_parameters:
            return None
        return f"{self._indent(2)}MockKAnnotations.init(this, relaxUnitFun = true)\n"

    def get_constructor_mock(self, parameter_name: str, parameter_type: DataType) -> str:
        return (
            f"{self._indent()}@MockK\n"
            f"{self._indent()}private lateinit var {parameter_name}: "
            f"{to_non_nullable_kotlin_string(parameter_type)}"
        )

    def get_mocked_instance(self, variable_type: DataType) -> str:
        return f"mockk<{to_non_nullable_kotlin_string(variable_type)}>()"

    def get_abstract_class_under_test(self, class_under_test: ClassMetadata) -> str:
        arguments = ", ".join(
            parameter.name for parameter in class_under_test.constructor_parameters
        )
        lines = [f"object : {class_under_test.class_name}({arguments}) {{"]
        for function in class_under_test.abstract_functions:
            lines.append(self._get_override(function))
        lines.append(f"{self._indent(2)}}}")
        return "\n".join(lines)

    def set_has_mocked_constructor_parameters(self, class_under_test: ClassMetadata):
        self._state.has_mocked_constructor_parameters = True
        self._require("MockKAnnotations", "MockK")

    def set_has_mocked_function_parameters(self):
        self._require("mockk")

    def set_has_mocked_function_return_values(self):
        self._require("mockk")

    def set_is_abstract_class_under_test(self, class_under_test: ClassMetadata):
        pass

    def _get_override(self, function: FunctionMetadata) -> str:
        receiver = ""
        if function.extension_receiver_type is not None:
            receiver = f"{to_kotlin_string(function.extension_receiver_type)}."
        parameters = ", ".join(
            f"{parameter.name}: {to_kotlin_string(parameter.type)}"
            for parameter in function.parameters
        )
        mocked_value = self.get_mocked_value(function.name, function.return_type)
        return (
            f"{self._indent(3)}override fun {receiver}{function.name}({parameters}) = "
            f"{mocked_value}"
        )
