"""
Value tokenizer for directive parameters.

tokenize() runs tinycss2's component-value parser over a parameter string and
flattens the result into a flat, typed Token stream.  Nested blocks become
explicit bracket PUNCTUATION tokens so the parameter grammar can rebuild the
structure.  Whitespace and comments are dropped; the token after them is
marked ``spaced``.

    scale({ prefix: 'space' })
    → FUNCTION scale, PUNCTUATION {, WORD prefix, DIVIDER :, STRING space,
      PUNCTUATION }, PUNCTUATION )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

import tinycss2

from ruler.errors import ConfigurationError

DIVIDERS = frozenset({",", ":", "/"})

# Opening bracket → closing bracket, keyed by tinycss2 block type
_BLOCK_BRACKETS: dict[str, tuple[str, str]] = {
    "() block": ("(", ")"),
    "[] block": ("[", "]"),
    "{} block": ("{", "}"),
}


class TokenKind(str, Enum):
    WORD = "word"
    STRING = "string"
    FUNCTION = "function"
    DIVIDER = "divider"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True)
class Token:
    """A single lexical token; ``text`` of a STRING excludes its quotes.

    ``spaced`` marks a token preceded by whitespace or a comment; it is
    excluded from equality.
    """

    kind: TokenKind
    text: str
    spaced: bool = field(default=False, compare=False)

    def is_punctuation(self, text: str) -> bool:
        return self.kind == TokenKind.PUNCTUATION and self.text == text


def tokenize(text: str) -> list[Token]:
    """Split *text* into a flat list of typed tokens.

    Raises ConfigurationError if tinycss2 reports a parse error (for example
    an unterminated string or an unmatched closing bracket).
    """
    tokens: list[Token] = []
    _flatten(tinycss2.parse_component_value_list(text, skip_comments=True), tokens)
    return tokens


def _flatten(nodes: Iterable[Any], out: list[Token]) -> None:
    spaced = False
    for node in nodes:
        start = len(out)
        match node.type:
            case "whitespace" | "comment":
                spaced = True
                continue
            case "string":
                out.append(Token(TokenKind.STRING, node.value))
            case "ident":
                out.append(Token(TokenKind.WORD, node.value))
            case "number" | "percentage" | "dimension" | "hash" | "url" | "unicode-range":
                out.append(Token(TokenKind.WORD, node.serialize()))
            case "literal":
                kind = TokenKind.DIVIDER if node.value in DIVIDERS else TokenKind.PUNCTUATION
                out.append(Token(kind, node.value))
            case "function":
                out.append(Token(TokenKind.FUNCTION, node.name))
                _flatten(node.arguments, out)
                out.append(Token(TokenKind.PUNCTUATION, ")"))
            case "() block" | "[] block" | "{} block":
                opening, closing = _BLOCK_BRACKETS[node.type]
                out.append(Token(TokenKind.PUNCTUATION, opening))
                _flatten(node.content, out)
                out.append(Token(TokenKind.PUNCTUATION, closing))
            case "error":
                raise ConfigurationError(f"Malformed directive parameters: {node.message}")
            case _:
                out.append(Token(TokenKind.WORD, node.serialize()))
        if spaced:
            out[start] = replace(out[start], spaced=True)
            spaced = False
