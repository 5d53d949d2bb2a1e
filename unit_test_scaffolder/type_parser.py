"""Parse compact type signatures into DataType trees.

Accepted shapes:

    Name            Specific
    Name?           nullable Specific
    Name<A, B?>?    Generic, each argument parsed recursively
    (A, B) -> C?    Lambda; labelled parameters (name: A) are allowed

Generic argument lists may themselves contain lambdas, as in
``Map<String, (Int) -> Unit>``.
"""

import logging
from dataclasses import dataclass, field

from unit_test_scaffolder.models import DataType, Generic, Lambda, Specific

logger = logging.getLogger(__name__)

OPENERS = {"<": ">", "(": ")"}
CLOSERS = set(OPENERS.values())
DIVIDER = ","
NULLABLE_MARKER = "?"
ARROW_TAIL = "-"

_ARROW = "->"


class DataTypeParseError(ValueError):
    """A type signature could not be reduced to a supported shape."""

    def __init__(self, message: str, signature: str):
        super().__init__(f"{message}: {signature!r}")
        self.signature = signature


@dataclass
class _Token:
    """A parsed name with its bracketed children, if any."""

    name: str
    children: list["_Token"] = field(default_factory=list)

    @property
    def is_arrow(self) -> bool:
        return self.name == _ARROW


class DataTypeParser:
    """Recursive, bracket-driven parser for type signatures."""

    def parse(self, signature: str) -> DataType:
        """Parse a type signature.

        Args:
            signature: The signature text, e.g. ``List<String?>``

        Returns:
            The parsed DataType

        Raises:
            DataTypeParseError: If the signature is malformed
        """
        self._signature = signature
        tokens, _ = self._parse_level(0, closer=None)
        data_type = self._root_to_data_type(tokens)
        if not data_type.name:
            raise DataTypeParseError("Input could not be parsed", signature)
        logger.debug(f"Parsed {signature!r} into {data_type}")
        return data_type

    def _parse_level(self, start: int, closer: str | None) -> tuple[list[_Token], int]:
        """Parse siblings from start until the matching closer.

        Returns the sibling tokens and the position right after the closer
        (or the end of the signature at the root level).
        """
        source = self._signature
        tokens: list[_Token] = []
        position = start
        token_start = start
        # True once the current argument has a token
        has_argument = False

        while position < len(source):
            character = source[position]
            if character in OPENERS:
                name = self._clean_name(source[token_start:position])
                if has_argument:
                    raise DataTypeParseError(f"Missing divider before {name!r}", source)
                children, position = self._parse_level(
                    position + 1, closer=OPENERS[character]
                )
                tokens.append(_Token(name, children))
                has_argument = True
                token_start = position
            elif character == DIVIDER:
                has_argument = self._add_token(
                    tokens, source[token_start:position], has_argument
                )
                if not has_argument:
                    raise DataTypeParseError(
                        f"Empty type argument at position {position}", source
                    )
                has_argument = False
                position += 1
                token_start = position
            elif character in CLOSERS:
                if self._is_arrow_head(position, start):
                    name = source[token_start : position - 1]
                    self._add_token(tokens, name, has_argument)
                    tokens.append(_Token(_ARROW))
                    has_argument = False
                    position += 1
                    token_start = position
                    continue
                if character != closer:
                    raise DataTypeParseError(
                        f"Unexpected {character!r} at position {position}", source
                    )
                has_argument = self._add_token(
                    tokens, source[token_start:position], has_argument
                )
                # Only a lambda parameter list may be empty
                if not has_argument and (tokens or closer != ")"):
                    raise DataTypeParseError(
                        f"Empty type argument at position {position}", source
                    )
                return tokens, position + 1
            else:
                position += 1

        if closer is not None:
            raise DataTypeParseError(f"Missing closing {closer!r}", source)
        has_argument = self._add_token(tokens, source[token_start:position], has_argument)
        if tokens and not has_argument:
            raise DataTypeParseError("Signature ends without a type", source)
        return tokens, position

    def _is_arrow_head(self, position: int, start: int) -> bool:
        return (
            self._signature[position] == ">"
            and position > start
            and self._signature[position - 1] == ARROW_TAIL
        )

    def _add_token(self, tokens: list[_Token], raw_name: str, has_argument: bool) -> bool:
        """Add a named token, or merge a lone '?' onto the previous one.

        Returns whether the current argument has a token afterwards.
        """
        name = raw_name.strip()
        if not name:
            return has_argument
        if name == NULLABLE_MARKER:
            if not has_argument:
                raise DataTypeParseError("Dangling nullable marker", self._signature)
            tokens[-1].name += NULLABLE_MARKER
            return True
        if name.startswith(NULLABLE_MARKER):
            raise DataTypeParseError(
                f"Misplaced nullable marker in {name!r}", self._signature
            )
        if has_argument:
            raise DataTypeParseError(f"Missing divider before {name!r}", self._signature)
        tokens.append(_Token(self._clean_name(name)))
        return True

    @staticmethod
    def _clean_name(raw_name: str) -> str:
        # Drop a parameter label such as "name:" in "(name: Value)"
        name = raw_name.strip()
        if ":" in name:
            name = name.rsplit(":", 1)[1].strip()
        return name

    def _root_to_data_type(self, tokens: list[_Token]) -> DataType:
        if len(tokens) == 1:
            return self._token_to_data_type(tokens[0])
        if len(tokens) == 3 and tokens[1].is_arrow:
            return self._to_lambda(tokens[0], tokens[2])
        raise DataTypeParseError("Input could not be parsed", self._signature)

    def _token_to_data_type(self, token: _Token) -> DataType:
        if token.is_arrow:
            raise DataTypeParseError("Misplaced arrow", self._signature)
        name, is_nullable = _split_nullable(token.name)
        if not token.children:
            return Specific(name, is_nullable)
        return Generic(name, is_nullable, tuple(self._group_siblings(token.children)))

    def _to_lambda(self, parameters: _Token, return_token: _Token) -> Lambda:
        if parameters.name:
            raise DataTypeParseError(
                "Lambda parameters must be parenthesised", self._signature
            )
        return_type = self._token_to_data_type(return_token)
        return Lambda(
            return_type.name,
            return_type.is_nullable,
            tuple(self._group_siblings(parameters.children)),
        )

    def _group_siblings(self, tokens: list[_Token]) -> list[DataType]:
        """Convert sibling tokens, folding (params) -> return triples into lambdas."""
        data_types = []
        index = 0
        while index < len(tokens):
            if index + 1 < len(tokens) and tokens[index + 1].is_arrow:
                if index + 2 >= len(tokens):
                    raise DataTypeParseError("Lambda without return type", self._signature)
                data_types.append(self._to_lambda(tokens[index], tokens[index + 2]))
                index += 3
            else:
                data_types.append(self._token_to_data_type(tokens[index]))
                index += 1
        return data_types


def _split_nullable(name: str) -> tuple[str, bool]:
    if name.endswith(NULLABLE_MARKER):
        return name[: -len(NULLABLE_MARKER)].rstrip(), True
    return name, False


def parse_data_type(signature: str) -> DataType:
    """Parse a type signature with a fresh parser."""
    return DataTypeParser().parse(signature)
