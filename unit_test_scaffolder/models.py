"""Data models for class and function metadata."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

UNIT_TYPE_NAME = "Unit"


@dataclass(frozen=True)
class Specific:
    """A named type without type arguments."""

    name: str
    is_nullable: bool = False


@dataclass(frozen=True)
class Generic:
    """A named type with one or more type arguments."""

    name: str
    is_nullable: bool
    type_arguments: tuple["DataType", ...]

    def __post_init__(self):
        if not self.type_arguments:
            raise ValueError(f"Generic type {self.name} requires type arguments")
        # Accept lists from callers but keep the node hashable
        object.__setattr__(self, "type_arguments", tuple(self.type_arguments))


@dataclass(frozen=True)
class Lambda:
    """A function type. Nullability belongs to the return type."""

    return_type_name: str
    is_nullable: bool = False
    parameter_types: tuple["DataType", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "parameter_types", tuple(self.parameter_types))

    @property
    def name(self) -> str:
        return self.return_type_name


DataType = Specific | Generic | Lambda


def is_unit(data_type: DataType) -> bool:
    """True for the Unit type, whatever its nullability."""
    return isinstance(data_type, Specific) and data_type.name == UNIT_TYPE_NAME


@dataclass(frozen=True)
class TypedParameter:
    """A named parameter and its type."""

    name: str
    type: DataType


@dataclass(frozen=True)
class FunctionMetadata:
    """A function under test."""

    name: str
    is_abstract: bool
    parameters: tuple[TypedParameter, ...]
    extension_receiver_type: DataType | None
    return_type: DataType

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def has_return_value(self) -> bool:
        return not is_unit(self.return_type)


def _read_only(imports) -> Mapping[str, str]:
    """Copy an import mapping into a view that cannot be changed."""
    return MappingProxyType(dict(imports))


def concrete_functions(functions) -> list[FunctionMetadata]:
    """Filter out abstract functions, keeping order."""
    return [function for function in functions if not function.is_abstract]


@dataclass(frozen=True)
class ClassMetadata:
    """A class under test, as produced by a source file parser."""

    package_name: str
    imports: Mapping[str, str] = field(hash=False)
    class_name: str
    is_abstract: bool
    constructor_parameters: tuple[TypedParameter, ...] = ()
    functions: tuple[FunctionMetadata, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "imports", _read_only(self.imports))
        object.__setattr__(
            self, "constructor_parameters", tuple(self.constructor_parameters)
        )
        object.__setattr__(self, "functions", tuple(self.functions))

    @property
    def concrete_functions(self) -> list[FunctionMetadata]:
        return concrete_functions(self.functions)

    @property
    def abstract_functions(self) -> list[FunctionMetadata]:
        return [function for function in self.functions if function.is_abstract]


@dataclass(frozen=True)
class StaticFunctionsMetadata:
    """Module-level functions of a single source file."""

    package_name: str
    imports: Mapping[str, str] = field(default_factory=dict, hash=False)
    functions: tuple[FunctionMetadata, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "imports", _read_only(self.imports))
        object.__setattr__(self, "functions", tuple(self.functions))

    @property
    def concrete_functions(self) -> list[FunctionMetadata]:
        return concrete_functions(self.functions)
