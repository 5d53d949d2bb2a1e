"""Generator configuration."""

import logging
from dataclasses import dataclass
from enum import Enum

from unit_test_scaffolder.mocking.mockito import DEFAULT_MOCKITO_RULE_VARIABLE_NAME

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """An invalid or incomplete configuration property."""


class Mocker(Enum):
    MOCKITO = "mockito"
    MOCKK = "mockk"


class ExceptionCaptureMethod(Enum):
    """How (and whether) to generate a 'throws exception' test per function."""

    NO_CAPTURE = "none"
    ANNOTATION_EXPECTS = "annotation"
    TRY_CATCH = "trycatch"


_EXCEPTION_CAPTURE_ALIASES = {
    "annotation": ExceptionCaptureMethod.ANNOTATION_EXPECTS,
    "expects": ExceptionCaptureMethod.ANNOTATION_EXPECTS,
    "annotationexpects": ExceptionCaptureMethod.ANNOTATION_EXPECTS,
    "try": ExceptionCaptureMethod.TRY_CATCH,
    "catch": ExceptionCaptureMethod.TRY_CATCH,
    "trycatch": ExceptionCaptureMethod.TRY_CATCH,
    "try/catch": ExceptionCaptureMethod.TRY_CATCH,
    "no": ExceptionCaptureMethod.NO_CAPTURE,
    "none": ExceptionCaptureMethod.NO_CAPTURE,
    "false": ExceptionCaptureMethod.NO_CAPTURE,
    "": ExceptionCaptureMethod.NO_CAPTURE,
}

_BOOLEAN_VALUES = {
    "true": True,
    "yes": True,
    "1": True,
    "false": False,
    "no": False,
    "0": False,
}


@dataclass(frozen=True)
class Configuration:
    """Values substituted verbatim into the generated tests."""

    mocker: Mocker
    class_under_test: str
    actual_value: str
    default_assertion: str
    exception_capture_method: ExceptionCaptureMethod = ExceptionCaptureMethod.NO_CAPTURE
    is_parameterized: bool = False
    mockito_rule: str = DEFAULT_MOCKITO_RULE_VARIABLE_NAME


class ConfigurationBuilder:
    """Build a Configuration from key/value properties."""

    def __init__(self):
        self._mocker: Mocker | None = None
        self._class_under_test: str | None = None
        self._actual_value: str | None = None
        self._default_assertion: str | None = None
        self._exception_capture_method = ExceptionCaptureMethod.NO_CAPTURE
        self._is_parameterized = False
        self._mockito_rule = DEFAULT_MOCKITO_RULE_VARIABLE_NAME

    def add_property(self, key: str, value: str) -> "ConfigurationBuilder":
        """Apply one property.

        Raises:
            ConfigurationError: If the key or its value is not recognised
        """
        if key == "dependency.mocker":
            self._mocker = _to_mocker(value)
        elif key == "vocabulary.classundertest":
            self._class_under_test = str(value)
        elif key == "vocabulary.actualvalue":
            self._actual_value = str(value)
        elif key == "vocabulary.mockitorule":
            self._mockito_rule = str(value)
        elif key == "test.defaultassertion":
            self._default_assertion = str(value)
        elif key == "test.exceptioncapture":
            self._exception_capture_method = _to_exception_capture_method(value)
        elif key == "test.parameterized":
            self._is_parameterized = _to_boolean(key, value)
        else:
            raise ConfigurationError(f"Unknown property: {key}")

        logger.debug(f"Configuration property {key} = {value!r}")
        return self

    def add_properties(self, properties: dict[str, str]) -> "ConfigurationBuilder":
        for key, value in properties.items():
            self.add_property(key, value)
        return self

    def build(self) -> Configuration:
        """Create the Configuration.

        Raises:
            ConfigurationError: If a required property was never set
        """
        missing = [
            key
            for key, value in (
                ("dependency.mocker", self._mocker),
                ("vocabulary.classundertest", self._class_under_test),
                ("vocabulary.actualvalue", self._actual_value),
                ("test.defaultassertion", self._default_assertion),
            )
            if value is None
        ]
        if missing:
            raise ConfigurationError(f"Missing properties: {', '.join(missing)}")

        return Configuration(
            mocker=self._mocker,
            class_under_test=self._class_under_test,
            actual_value=self._actual_value,
            default_assertion=self._default_assertion,
            exception_capture_method=self._exception_capture_method,
            is_parameterized=self._is_parameterized,
            mockito_rule=self._mockito_rule,
        )


def _to_mocker(value: str) -> Mocker:
    try:
        return Mocker(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown mocker type: {value}") from None


def _to_exception_capture_method(value: str) -> ExceptionCaptureMethod:
    method = _EXCEPTION_CAPTURE_ALIASES.get(str(value).strip().lower())
    if method is None:
        raise ConfigurationError(f"Unknown exception capture method: {value}")
    return method


def _to_boolean(key: str, value: str) -> bool:
    flag = _BOOLEAN_VALUES.get(str(value).strip().lower())
    if flag is None:
        raise ConfigurationError(f"Expected a boolean for {key}, got {value!r}")
    return flag
