"""Decide which types get a literal value and which need a generated mock."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from unit_test_scaffolder.formatting import to_kotlin_string
from unit_test_scaffolder.models import DataType, Generic, Lambda, TypedParameter

logger = logging.getLogger(__name__)

LAMBDA_TYPE_TAG = "(?)->?"

# Element type used when a collection is declared without type arguments
ANY_TYPE = "Any"


@dataclass(frozen=True)
class ConcreteValue:
    """A type that can be constructed without mocking.

    default_value receives the variable name and the full type node and
    returns the Kotlin expression for a value of that type.
    """

    data_type: str
    default_value: Callable[[str, DataType], str]


def _constant(value: str) -> Callable[[str, DataType], str]:
    return lambda _variable_name, _data_type: value


def _collection_of(function_name: str) -> Callable[[str, DataType], str]:
    def default_value(_variable_name: str, data_type: DataType) -> str:
        if isinstance(data_type, Generic):
            element_type = ", ".join(
                to_kotlin_string(argument) for argument in data_type.type_arguments
            )
        else:
            element_type = ANY_TYPE
        return f"{function_name}<{element_type}>()"

    return default_value


NON_MOCKABLE_TYPES = (
    ConcreteValue("Boolean", _constant("false")),
    ConcreteValue("Byte", _constant("0b0")),
    ConcreteValue("Class", _constant("Any::class.java")),
    ConcreteValue("Double", _constant("0.0")),
    ConcreteValue("Float", _constant("0f")),
    ConcreteValue("Int", _constant("0")),
    ConcreteValue("Integer", _constant("0 as Integer")),
    ConcreteValue("Long", _constant("0L")),
    ConcreteValue("Short", _constant("0.toShort()")),
    ConcreteValue("String", lambda variable_name, _data_type: f'"{variable_name}"'),
    ConcreteValue("Array", _collection_of("arrayOf")),
    ConcreteValue("List", _collection_of("listOf")),
    ConcreteValue("MutableList", _collection_of("mutableListOf")),
    ConcreteValue("Map", _collection_of("mapOf")),
    ConcreteValue("MutableMap", _collection_of("mutableMapOf")),
    ConcreteValue("Set", _collection_of("setOf")),
    ConcreteValue("MutableSet", _collection_of("mutableSetOf")),
    ConcreteValue("Unit", _constant("Unit")),
)


def _empty_lambda(_variable_name: str, data_type: DataType) -> str:
    arguments = ", ".join(parameter.name for parameter in data_type.parameter_types)
    if not arguments:
        return "{}"
    return f"{{ {arguments} -> }}"


class MockableTypeQualifier:
    """Classify types as concrete (literal value) or mockable."""

    def __init__(self, non_mockable_types=NON_MOCKABLE_TYPES):
        self._non_mockable_types = {
            concrete_value.data_type: concrete_value
            for concrete_value in non_mockable_types
        }

    def get_non_mockable_type(self, data_type: DataType) -> ConcreteValue | None:
        """Return the literal-value rule for a type, or None if it needs a mock."""
        if isinstance(data_type, Lambda):
            return ConcreteValue(LAMBDA_TYPE_TAG, _empty_lambda)
        return self._non_mockable_types.get(data_type.name)

    def is_mockable(self, data_type: DataType | TypedParameter) -> bool:
        if isinstance(data_type, TypedParameter):
            data_type = data_type.type
        is_mockable = self.get_non_mockable_type(data_type) is None
        logger.debug(f"{data_type} mockable: {is_mockable}")
        return is_mockable
