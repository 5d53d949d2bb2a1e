"""Mocking strategies for generated tests."""

from unit_test_scaffolder.mocking.mocker_code_generator import (
    MockerCodeGenerator,
    MockerState,
)
from unit_test_scaffolder.mocking.mockito import MockitoCodeGenerator
from unit_test_scaffolder.mocking.mockk import MockKCodeGenerator
from unit_test_scaffolder.mocking.qualifier import (
    ConcreteValue,
    MockableTypeQualifier,
)

__all__ = [
    # Qualifier
    "ConcreteValue",
    "MockableTypeQualifier",
    # Strategies
    "MockerCodeGenerator",
    "MockerState",
    "MockitoCodeGenerator",
    "MockKCodeGenerator",
]
