"""
Stylesheet parser: CSS text → node tree, via tinycss2 component values.

tinycss2 already groups the token stream into nested blocks; this module
only splits each block's content into statements:

  - an at-keyword starts an at-rule, ending at ``;`` or at its ``{}`` block;
  - any other run of tokens ending at a ``{}`` block is a (possibly nested)
    rule whose prelude is the selector;
  - a run ending at ``;`` (or at the end of the block) is a declaration,
    split at its first top-level ``:``.

Selectors, at-rule params and declaration values are slices of the source
text, located through tinycss2's line/column positions, so quoting and
spacing inside them survive untouched.
"""

from __future__ import annotations

from typing import Any

import tinycss2

from ruler.css.nodes import AtRule, Comment, Declaration, Node, Root, Rule
from ruler.errors import CssSyntaxError


def parse_stylesheet(source: str) -> Root:
    """Parse *source* into a Root.

    Raises CssSyntaxError on a tokenizer error or a statement that is
    neither a rule nor a ``property: value`` declaration.
    """
    text = _Source(source)
    return Root(_parse_block(tinycss2.parse_component_value_list(text.css), text, len(text.css)))


class _Source:
    """The text tinycss2 tokenized, with token → character offset lookup."""

    def __init__(self, source: str) -> None:
        # Same preprocessing tinycss2 applies; its positions refer to this text.
        self.css = (
            source.replace("\0", "\uFFFD")
            .replace("\r\n", "\n")
            .replace("\r", "\n")
            .replace("\f", "\n")
        )
        self._line_starts = [0] + [i + 1 for i, char in enumerate(self.css) if char == "\n"]

    def offset(self, token: Any) -> int:
        return self._line_starts[token.source_line - 1] + token.source_column - 1

    def slice(self, tokens: list[Any], end: int) -> str:
        """Source text from the first of *tokens* up to *end*, stripped."""
        if not tokens:
            return ""
        return self.css[self.offset(tokens[0]) : end].strip()

    def block_end(self, values: list[Any], index: int, parent_end: int) -> int:
        """End offset of the content of the ``{}`` block at ``values[index]``."""
        after = self.offset(values[index + 1]) if index + 1 < len(values) else parent_end
        # tinycss2 closes blocks left open at end of input
        return after - 1 if self.css[after - 1 : after] == "}" else after


def _location(token: Any) -> str:
    return f"line {token.source_line}, column {token.source_column}"


def _parse_block(values: list[Any], text: _Source, end: int) -> list[Node]:
    nodes: list[Node] = []
    pending: list[Any] = []

    for index, value in enumerate(values):
        if value.type == "error":
            raise CssSyntaxError(f"{value.message} at {_location(value)}")
        if not pending and value.type == "whitespace":
            continue
        if not pending and value.type == "comment":
            nodes.append(Comment(value.value))
            continue
        if value.type == "literal" and value.value == ";":
            if pending:
                nodes.append(_statement(pending, None, text, text.offset(value)))
            pending = []
        elif value.type == "{} block":
            content_end = text.block_end(values, index, end)
            nodes.append(_statement(pending, value, text, content_end))
            pending = []
        else:
            pending.append(value)

    if any(v.type not in ("whitespace", "comment") for v in pending):
        nodes.append(_statement(pending, None, text, end))
    return nodes


def _statement(tokens: list[Any], block: Any, text: _Source, end: int) -> Node:
    """Build one node; *end* is where the statement (or its block's content) ends."""
    first = tokens[0] if tokens else block
    prelude_end = text.offset(block) if block is not None else end

    if tokens and tokens[0].type == "at-keyword":
        children = _parse_block(block.content, text, end) if block is not None else None
        return AtRule(
            name=tokens[0].value,
            params=text.slice(tokens[1:], prelude_end),
            nodes=children,
            has_block=block is not None,
        )
    if block is not None:
        return Rule(
            selector=text.slice(tokens, prelude_end),
            nodes=_parse_block(block.content, text, end),
        )

    for i, token in enumerate(tokens):
        if token.type == "literal" and token.value == ":":
            prop = text.slice(tokens[:i], text.offset(token))
            if not prop:
                break
            return Declaration(prop=prop, value=text.slice(tokens[i + 1 :], end))
    raise CssSyntaxError(
        f"Expected a declaration or rule at {_location(first)}: {text.slice(tokens, end)!r}"
    )
