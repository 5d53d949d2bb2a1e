"""Tests for Kotlin text formatting helpers."""

from unit_test_scaffolder.formatting import (
    Formatting,
    name_in_test_function_name,
    parameter_to_kotlin_string,
    to_kotlin_string,
    to_non_nullable_kotlin_string,
)
from unit_test_scaffolder.models import (
    FunctionMetadata,
    Generic,
    Lambda,
    Specific,
    TypedParameter,
)


class TestFormatting:
    """Tests for indentation."""

    def test_default_indentation_is_four_spaces(self):
        """Default indentation is four spaces per level."""
        assert Formatting().get_indentation(2) == " " * 8

    def test_custom_indentation(self):
        """A custom indentation string is repeated per level."""
        assert Formatting("\t").get_indentation(3) == "\t\t\t"


class TestToKotlinString:
    """Tests for type node rendering."""

    def test_renders_nullable_generic(self):
        """Generic arguments are joined with commas."""
        list_type = Generic("List", False, (Specific("Int", True),))
        data_type = Generic("Map", True, (Specific("String"), list_type))

        assert to_kotlin_string(data_type) == "Map<String, List<Int?>>?"

    def test_renders_lambda(self):
        """Lambda renders as a Kotlin function type."""
        data_type = Lambda("Unit", False, (Specific("Double"),))

        assert to_kotlin_string(data_type) == "(Double) -> Unit"

    def test_non_nullable_keeps_nested_markers(self):
        """Only the outermost nullable marker is dropped."""
        data_type = Generic(
            "data type",
            True,
            (
                Generic("nested type", True, (Specific("deeply nested"),)),
                Specific("another type"),
            ),
        )

        assert (
            to_non_nullable_kotlin_string(data_type)
            == "data type<nested type<deeply nested>?, another type>"
        )


class TestFunctionNames:
    """Tests for names used in generated test methods."""

    def given_function(self, receiver=None):
        self.parameter = TypedParameter("userId", Specific("String"))
        self.function = FunctionMetadata(
            "load", False, (self.parameter,), receiver, Specific("User")
        )

    def test_name_without_receiver(self):
        """Plain functions use their own name."""
        self.given_function()
        assert name_in_test_function_name(self.function) == "load"

    def test_name_with_receiver(self):
        """Extension functions are prefixed by the receiver type."""
        self.given_function(receiver=Specific("Repository"))
        assert name_in_test_function_name(self.function) == "Repository#load"

    def test_parameterized_argument_name(self):
        """Parameterized tests prefix arguments with the function name."""
        self.given_function()
        assert parameter_to_kotlin_string(self.parameter, self.function, True) == (
            "loadUserId"
        )

    def test_unit_argument(self):
        """Unit parameters are passed as Unit."""
        self.given_function()
        unit_parameter = TypedParameter("nothing", Specific("Unit"))

        assert parameter_to_kotlin_string(unit_parameter, self.function, False) == "Unit"
