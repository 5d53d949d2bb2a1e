"""Tests for generator wiring."""

from unittest.mock import patch

import pytest

from unit_test_scaffolder.config import (
    Configuration,
    ConfigurationBuilder,
    ExceptionCaptureMethod,
    Mocker,
)
from unit_test_scaffolder.formatting import Formatting
from unit_test_scaffolder.generator import (
    create_tests_generator,
    get_mocker_code_generator,
)
from unit_test_scaffolder.mocking import (
    MockableTypeQualifier,
    MockitoCodeGenerator,
    MockKCodeGenerator,
)
from unit_test_scaffolder.models import ClassMetadata, FunctionMetadata, Specific


def make_configuration():
    return Configuration(
        mocker=Mocker.MOCKITO,
        class_under_test="subject",
        actual_value="result",
        default_assertion="TODO()",
    )


class TestGetMockerCodeGenerator:
    """Tests for get_mocker_code_generator."""

    @pytest.mark.parametrize(
        "mocker,expected_class",
        [(Mocker.MOCKITO, MockitoCodeGenerator), (Mocker.MOCKK, MockKCodeGenerator)],
    )
    def test_selects_strategy(self, mocker, expected_class):
        """Each mocker maps to its code generator."""
        generator = get_mocker_code_generator(
            mocker, MockableTypeQualifier(), Formatting(), "mockitoRule"
        )

        assert isinstance(generator, expected_class)

    def test_passes_rule_name_to_mockito(self):
        """The Mockito rule variable name is configurable."""
        generator = get_mocker_code_generator(
            Mocker.MOCKITO, MockableTypeQualifier(), Formatting(), "customRule"
        )

        assert "val customRule: MethodRule" in generator.mocking_rule


class TestCreateTestsGenerator:
    """Tests for create_tests_generator."""

    def test_configuration_vocabulary_is_used(self):
        """Variable names and assertion come from the configuration."""
        generator = create_tests_generator(make_configuration())

        generator.add_class_to_tests(
            ClassMetadata(
                "com.test.it",
                {},
                "Clock",
                False,
                (),
                (FunctionMetadata("now", False, (), None, Specific("Long")),),
            )
        )
        output = generator.generate_tests()

        assert "    private lateinit var subject: Clock\n" in output
        assert "        subject = Clock()\n" in output
        assert "        val result = subject.now()\n" in output
        assert "        TODO()\n" in output

    def test_custom_formatting(self):
        """A custom Formatting changes the indentation."""
        generator = create_tests_generator(make_configuration(), Formatting("\t"))

        generator.add_class_to_tests(ClassMetadata("com.test.it", {}, "Clock", False))

        assert "\tprivate lateinit var subject: Clock\n" in generator.generate_tests()

    def test_parameterized_and_capture_are_applied(self):
        """Parameterized and exception capture settings reach the generator."""
        configuration = (
            ConfigurationBuilder()
            .add_properties(
                {
                    "dependency.mocker": "mockk",
                    "vocabulary.classundertest": "cut",
                    "vocabulary.actualvalue": "actual",
                    "test.defaultassertion": "TODO()",
                    "test.parameterized": "true",
                    "test.exceptioncapture": "annotation",
                }
            )
            .build()
        )
        generator = create_tests_generator(configuration)

        generator.add_class_to_tests(
            ClassMetadata(
                "com.test.it",
                {},
                "Clock",
                False,
                (),
                (FunctionMetadata("now", False, (), None, Specific("Long")),),
            )
        )
        output = generator.generate_tests()

        assert configuration.exception_capture_method == (
            ExceptionCaptureMethod.ANNOTATION_EXPECTS
        )
        assert "@RunWith(Parameterized::class)\n" in output
        assert "    @Test(expected = Exception::class)\n" in output

    def test_uses_given_qualifier(self):
        """A supplied qualifier decides mockability."""
        qualifier = MockableTypeQualifier()

        with patch.object(qualifier, "is_mockable", return_value=False) as is_mockable:
            generator = create_tests_generator(
                make_configuration(), mockable_type_qualifier=qualifier
            )
            generator.add_class_to_tests(
                ClassMetadata(
                    "com.test.it",
                    {},
                    "Clock",
                    False,
                    (),
                    (
                        FunctionMetadata(
                            "tick", False, (), Specific("Timer"), Specific("Unit")
                        ),
                    ),
                )
            )

        is_mockable.assert_called()
        assert "org.mockito.kotlin.mock" not in generator.generate_tests()
