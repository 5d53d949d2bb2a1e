"""Render type nodes and names as Kotlin source text."""

from unit_test_scaffolder.models import (
    UNIT_TYPE_NAME,
    DataType,
    FunctionMetadata,
    Generic,
    Lambda,
    Specific,
    TypedParameter,
    is_unit,
)

INDENT = "    "


class Formatting:
    """Indentation provider for generated code."""

    def __init__(self, indentation_string: str = INDENT):
        self._indentation_string = indentation_string

    def get_indentation(self, indentation: int = 1) -> str:
        return self._indentation_string * indentation


def to_kotlin_string(data_type: DataType) -> str:
    """Render a type node the way it is written in Kotlin source."""
    suffix = "?" if data_type.is_nullable else ""
    return to_non_nullable_kotlin_string(data_type) + suffix


def to_non_nullable_kotlin_string(data_type: DataType) -> str:
    """Render a type node without its own nullable marker.

    Type arguments and lambda parameters keep their markers.
    """
    if isinstance(data_type, Specific):
        return data_type.name
    elif isinstance(data_type, Generic):
        return f"{data_type.name}<{_join_types(data_type.type_arguments)}>"
    elif isinstance(data_type, Lambda):
        parameters = _join_types(data_type.parameter_types)
        return f"({parameters}) -> {data_type.return_type_name}"
    raise TypeError(f"Unsupported data type: {data_type!r}")


def _join_types(data_types) -> str:
    return ", ".join(to_kotlin_string(data_type) for data_type in data_types)


def expected_return_value_variable_name(function: FunctionMetadata) -> str:
    return f"{function.name}Expected"


def name_in_test_function_name(function: FunctionMetadata) -> str:
    """Function name as shown in a test name, prefixed by its receiver type."""
    if function.extension_receiver_type is None:
        return function.name
    return f"{function.extension_receiver_type.name}#{function.name}"


def parameter_to_kotlin_string(
    parameter: TypedParameter, function: FunctionMetadata, is_parameterized: bool
) -> str:
    """Argument text used when calling a function under test."""
    if is_unit(parameter.type):
        return UNIT_TYPE_NAME
    if is_parameterized:
        return parameterized_parameter_name(parameter, function)
    return parameter.name


def parameterized_parameter_name(
    parameter: TypedParameter, function: FunctionMetadata
) -> str:
    return f"{function.name}{parameter.name[:1].upper()}{parameter.name[1:]}"
