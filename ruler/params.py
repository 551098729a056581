"""
Parameter Extractor — turns a directive's token stream into typed configs.

Directive parameters are a loose, JSON-like object literal passed as the
single argument of ``scale(...)`` or ``utility(...)``:

    scale({ minWidth: 320, prefix: 'space', pairs: { "xs": [8, 16] } })

ParamParser is a small recursive-descent parser over the flat Token stream:

    call   := FUNCTION object ")"
    object := "{" (key [":"] value [","])* "}"
    array  := "[" (value [","])* "]"
    value  := object | array | call | scalar
    scalar := STRING | run of WORD / PUNCTUATION tokens, e.g. ``.gap``

Commas are optional separators.  The typed extractors then pick the keys they
know; unknown keys are parsed (so any value shape is tolerated) and ignored.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union

from ruler.errors import ConfigurationError
from ruler.schemas.scale import DEFAULT_PREFIX, ScaleConfig, SizePair
from ruler.schemas.utility import UtilityConfig
from ruler.tokens import Token, TokenKind, tokenize

ParamValue = Union[Token, list[Any], dict[str, Any]]

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = frozenset(_OPENERS.values())


class ParamParser:
    """Recursive-descent parser for directive parameter literals."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    # ── Cursor helpers ─────────────────────────────────────────────────────────

    def _peek(self) -> Optional[Token]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            raise ConfigurationError("Unexpected end of directive parameters")
        self._pos += 1
        return token

    def _expect(self, text: str) -> None:
        token = self._advance()
        if not token.is_punctuation(text):
            raise ConfigurationError(f"Expected {text!r} in directive parameters, got {token.text!r}")

    def _skip_dividers(self) -> None:
        while (token := self._peek()) is not None and token.kind == TokenKind.DIVIDER:
            self._pos += 1

    # ── Grammar ────────────────────────────────────────────────────────────────

    def parse_call(self, name: str) -> dict[str, ParamValue]:
        """Parse ``name({...})`` and return the argument object.

        ``name()`` with no argument yields an empty object.
        """
        token = self._advance()
        if token.kind != TokenKind.FUNCTION or token.text != name:
            raise ConfigurationError(f"Expected {name}(...), got {token.text!r}")
        token = self._peek()
        if token is not None and token.is_punctuation(")"):
            self._pos += 1
            return {}
        result = self._parse_object()
        self._skip_dividers()
        self._expect(")")
        return result

    def _parse_object(self) -> dict[str, ParamValue]:
        self._expect("{")
        result: dict[str, ParamValue] = {}
        while True:
            self._skip_dividers()
            token = self._advance()
            if token.is_punctuation("}"):
                return result
            if token.kind not in (TokenKind.WORD, TokenKind.STRING):
                raise ConfigurationError(f"Expected a parameter name, got {token.text!r}")
            self._skip_dividers()
            result[token.text] = self._parse_value(token.text)

    def _parse_array(self) -> list[ParamValue]:
        self._expect("[")
        result: list[ParamValue] = []
        while True:
            self._skip_dividers()
            token = self._peek()
            if token is not None and token.is_punctuation("]"):
                self._pos += 1
                return result
            result.append(self._parse_value(None))

    def _parse_value(self, key: Optional[str]) -> ParamValue:
        token = self._peek()
        if token is None:
            raise ConfigurationError("Unexpected end of directive parameters")
        if token.is_punctuation("{"):
            return self._parse_object()
        if token.is_punctuation("["):
            return self._parse_array()
        if token.kind == TokenKind.FUNCTION:
            return self._skip_call()
        if token.kind == TokenKind.STRING:
            self._pos += 1
            return token
        if token.kind == TokenKind.PUNCTUATION and token.text in _CLOSERS:
            where = f" for {key!r}" if key else ""
            raise ConfigurationError(f"Missing value{where} before {token.text!r}")
        return self._parse_bare_scalar()

    def _parse_bare_scalar(self) -> Token:
        """Join a WORD with adjoining punctuation, so ``.gap`` or ``.container &`` is one value.

        Whitespace before a joined token is kept as a single space.  A spaced
        WORD never joins: it starts the next key.
        """
        parts = [self._advance()]
        while (token := self._peek()) is not None:
            joinable = (
                token.kind == TokenKind.PUNCTUATION
                and token.text not in _OPENERS
                and token.text not in _CLOSERS
            ) or (
                token.kind == TokenKind.WORD
                and not token.spaced
                and parts[-1].kind == TokenKind.PUNCTUATION
            )
            if not joinable:
                break
            parts.append(token)
            self._pos += 1
        if len(parts) == 1:
            return parts[0]
        text = parts[0].text + "".join(
            (" " if part.spaced else "") + part.text for part in parts[1:]
        )
        return Token(TokenKind.WORD, text, spaced=parts[0].spaced)

    def _skip_call(self) -> Token:
        """Consume a nested function call; its value is opaque to the extractors."""
        name = self._advance().text
        depth = 1
        while depth:
            token = self._advance()
            if token.kind == TokenKind.FUNCTION or (
                token.kind == TokenKind.PUNCTUATION and token.text in _OPENERS
            ):
                depth += 1
            elif token.kind == TokenKind.PUNCTUATION and token.text in _CLOSERS:
                depth -= 1
        return Token(TokenKind.FUNCTION, name)


def parse_directive(params: str, name: str) -> dict[str, ParamValue]:
    """Tokenize the at-rule params text and return the ``name(...)`` argument object."""
    return ParamParser(tokenize(params)).parse_call(name)


# ── Value coercion ────────────────────────────────────────────────────────────


def to_number(text: str) -> Optional[float]:
    """Parse *text* as a finite decimal number, or return None."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _scalar(params: dict[str, ParamValue], key: str) -> Optional[str]:
    """Return the text of a scalar parameter, None if absent."""
    if key not in params:
        return None
    value = params[key]
    if not isinstance(value, Token):
        raise ConfigurationError(f"Parameter {key!r} expects a single value")
    return value.text


def _flag(params: dict[str, ParamValue], key: str) -> Optional[bool]:
    text = _scalar(params, key)
    return None if text is None else text == "true"


def _width(params: dict[str, ParamValue], key: str, default: float) -> float:
    text = _scalar(params, key)
    if text is None:
        return default
    number = to_number(text)
    if number is None:
        raise ConfigurationError(f"Parameter {key!r} must be a number, got {text!r}")
    return number


# ── Typed extraction ──────────────────────────────────────────────────────────


def extract_pairs(value: Optional[ParamValue]) -> tuple[SizePair, ...]:
    """Build SizePairs from a ``pairs`` object, in definition order.

    Each pair keeps the first two numeric values of its list; further numbers
    are ignored and non-numeric items are discarded.  A pair with fewer than
    two numbers is dropped.  Anything other than an object yields no pairs.
    """
    if not isinstance(value, dict):
        return ()
    pairs: list[SizePair] = []
    for name, raw in value.items():
        items = raw if isinstance(raw, list) else [raw]
        numbers = [
            number
            for item in items
            if isinstance(item, Token) and (number := to_number(item.text)) is not None
        ]
        if len(numbers) >= 2:
            pairs.append(SizePair(name=name, values=(numbers[0], numbers[1])))
    return tuple(pairs)


def extract_scale_config(
    params: dict[str, ParamValue],
    min_width: float,
    max_width: float,
    generate_all_cross_pairs: bool,
) -> ScaleConfig:
    """
    Build a ScaleConfig from a parsed ``scale()`` argument object.

    Parameters
    ----------
    params:
        Output of :func:`parse_directive`.
    min_width, max_width, generate_all_cross_pairs:
        Run-level defaults used for keys the directive omits.

    Raises
    ------
    ConfigurationError
        If no usable pairs are defined, or a width is not a number.
    """
    pairs = extract_pairs(params.get("pairs"))
    if not pairs:
        raise ConfigurationError("No pairs defined in @ruler scale()")

    prefix = _scalar(params, "prefix")
    cross_pairs = _flag(params, "generateAllCrossPairs")
    return ScaleConfig(
        min_width=_width(params, "minWidth", min_width),
        max_width=_width(params, "maxWidth", max_width),
        prefix=DEFAULT_PREFIX if prefix is None else prefix,
        generate_all_cross_pairs=generate_all_cross_pairs if cross_pairs is None else cross_pairs,
        pairs=pairs,
    )


def extract_utility_config(params: dict[str, ParamValue]) -> UtilityConfig:
    """Build an (unvalidated) UtilityConfig from a parsed ``utility()`` argument object."""
    prop: Union[str, tuple[str, ...], None]
    raw_property = params.get("property")
    if isinstance(raw_property, list):
        prop = tuple(
            item.text
            for item in raw_property
            if isinstance(item, Token) and item.kind == TokenKind.STRING
        )
    else:
        prop = _scalar(params, "property")

    return UtilityConfig(
        selector=_scalar(params, "selector"),
        attribute=_scalar(params, "attribute"),
        property=prop,
        scale=_scalar(params, "scale"),
        generate_all_cross_pairs=_flag(params, "generateAllCrossPairs"),
        low_specificity=_flag(params, "lowSpecificity"),
    )
