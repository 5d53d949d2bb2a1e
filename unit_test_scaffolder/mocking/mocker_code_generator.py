"""Framework-independent part of mock code generation."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from unit_test_scaffolder.formatting import Formatting
from unit_test_scaffolder.mocking.qualifier import MockableTypeQualifier
from unit_test_scaffolder.models import ClassMetadata, DataType, TypedParameter

logger = logging.getLogger(__name__)

PARAMETERIZED_RUNNER_ANNOTATION = "@RunWith(Parameterized::class)"


@dataclass
class MockerState:
    """What a generator has been told about the class being rendered."""

    required_imports: set[str] = field(default_factory=set)
    has_mocked_constructor_parameters: bool = False
    is_parameterized_test: bool = False

    def reset(self):
        self.required_imports.clear()
        self.has_mocked_constructor_parameters = False
        self.is_parameterized_test = False


class MockerCodeGenerator(ABC):
    """Framework-specific snippets for mocks, runners and setup code.

    A generator accumulates required imports while the set_* notifications
    arrive for one class. reset() must be called before rendering the next
    class; nothing checks the call order.
    """

    test_class_base_runner_annotation: str | None = None
    test_class_parameterized_runner_annotation: str = PARAMETERIZED_RUNNER_ANNOTATION

    def __init__(
        self, mockable_type_qualifier: MockableTypeQualifier, formatting: Formatting
    ):
        self._mockable_type_qualifier = mockable_type_qualifier
        self._formatting = formatting
        self._state = MockerState()

    @property
    @abstractmethod
    def known_imports(self) -> dict[str, str]:
        """Import names this framework may require, mapped to qualified paths."""

    @property
    def mocking_rule(self) -> str | None:
        return None

    @property
    def set_up_statements(self) -> str | None:
        return None

    @property
    def required_imports(self) -> set[str]:
        return set(self._state.required_imports)

    def reset(self):
        self._state.reset()

    @abstractmethod
    def get_constructor_mock(self, parameter_name: str, parameter_type: DataType) -> str:
        """Field declaration for a framework-managed constructor mock."""

    @abstractmethod
    def get_mocked_instance(self, variable_type: DataType) -> str:
        """Expression creating an inline mock."""

    @abstractmethod
    def get_abstract_class_under_test(self, class_under_test: ClassMetadata) -> str:
        """Expression creating an instance of an abstract class under test."""

    @abstractmethod
    def set_has_mocked_constructor_parameters(self, class_under_test: ClassMetadata):
        ...

    @abstractmethod
    def set_has_mocked_function_parameters(self):
        ...

    @abstractmethod
    def set_has_mocked_function_return_values(self):
        ...

    @abstractmethod
    def set_is_abstract_class_under_test(self, class_under_test: ClassMetadata):
        ...

    def set_is_parameterized_test(self):
        self._state.is_parameterized_test = True

    def get_mocked_value(self, variable_name: str, variable_type: DataType) -> str:
        """Literal for concrete types, inline mock otherwise."""
        concrete_value = self._mockable_type_qualifier.get_non_mockable_type(
            variable_type
        )
        if concrete_value is None:
            return self.get_mocked_instance(variable_type)
        return concrete_value.default_value(variable_name, variable_type)

    def get_mocked_variable_definition(self, parameter: TypedParameter) -> str:
        """Field declaration for a constructor parameter of the class under test."""
        concrete_value = self._mockable_type_qualifier.get_non_mockable_type(
            parameter.type
        )
        if concrete_value is None:
            return self.get_constructor_mock(parameter.name, parameter.type)
        value = concrete_value.default_value(parameter.name, parameter.type)
        return f"{self._indent()}private val {parameter.name} = {value}"

    def is_mockable(self, data_type) -> bool:
        return self._mockable_type_qualifier.is_mockable(data_type)

    def _require(self, *import_names: str):
        logger.debug(f"{type(self).__name__} requires {', '.join(import_names)}")
        self._state.required_imports.update(import_names)

    def _indent(self, indentation: int = 1) -> str:
        return self._formatting.get_indentation(indentation)
