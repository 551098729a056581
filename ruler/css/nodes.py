"""
Stylesheet node tree.

Root, Rule and block at-rules are Containers holding an ordered list of child
nodes; every child knows its parent so a visitor can replace the node it is
looking at with zero or more new nodes.  ``to_css()`` serializes with
four-space indentation per nesting level.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

INDENT = "    "


class Node:
    """Base class for every tree node."""

    def __init__(self) -> None:
        self.parent: Optional[Container] = None

    def replace_with(self, *nodes: Node) -> None:
        """Put *nodes* where this node is and detach it.  No nodes means removal."""
        if self.parent is None:
            raise ValueError(f"{type(self).__name__} has no parent to be replaced in")
        self.parent.replace(self, nodes)

    def remove(self) -> None:
        self.replace_with()

    def to_css(self, depth: int = 0) -> str:
        raise NotImplementedError


class Declaration(Node):
    def __init__(self, prop: str, value: str) -> None:
        super().__init__()
        self.prop = prop
        self.value = value

    def __repr__(self) -> str:
        return f"Declaration({self.prop!r}, {self.value!r})"

    def to_css(self, depth: int = 0) -> str:
        return f"{INDENT * depth}{self.prop}: {self.value};"


class Comment(Node):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def __repr__(self) -> str:
        return f"Comment({self.text!r})"

    def to_css(self, depth: int = 0) -> str:
        return f"{INDENT * depth}/*{self.text}*/"


class Container(Node):
    """A node with ordered children."""

    def __init__(self, nodes: Optional[list[Node]] = None) -> None:
        super().__init__()
        self.nodes: list[Node] = []
        self.append(*(nodes or []))

    def append(self, *nodes: Node) -> None:
        for node in nodes:
            self._adopt(node)
            self.nodes.append(node)

    def replace(self, old: Node, new: tuple[Node, ...] | list[Node]) -> None:
        index = self.index(old)
        for node in new:
            self._adopt(node)
        self.nodes[index : index + 1] = list(new)
        old.parent = None

    def index(self, node: Node) -> int:
        for i, child in enumerate(self.nodes):
            if child is node:
                return i
        raise ValueError(f"{node!r} is not a child of this container")

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order."""
        for node in list(self.nodes):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def _adopt(self, node: Node) -> None:
        if node.parent is not None and node.parent is not self:
            node.parent.nodes.remove(node)
        node.parent = self

    def _block_css(self, depth: int) -> str:
        inner = "\n".join(node.to_css(depth + 1) for node in self.nodes)
        closing = f"{INDENT * depth}}}"
        return f"{{\n{inner}\n{closing}" if inner else "{\n" + closing


class Root(Container):
    def __repr__(self) -> str:
        return f"Root({self.nodes!r})"

    def to_css(self, depth: int = 0) -> str:
        return "\n".join(node.to_css(depth) for node in self.nodes)


class Rule(Container):
    def __init__(self, selector: str, nodes: Optional[list[Node]] = None) -> None:
        super().__init__(nodes)
        self.selector = selector

    def __repr__(self) -> str:
        return f"Rule({self.selector!r}, {self.nodes!r})"

    def to_css(self, depth: int = 0) -> str:
        return f"{INDENT * depth}{self.selector} {self._block_css(depth)}"


class AtRule(Container):
    """An at-rule; ``has_block`` is False for statement at-rules ending in ``;``."""

    def __init__(
        self,
        name: str,
        params: str = "",
        nodes: Optional[list[Node]] = None,
        has_block: bool = False,
    ) -> None:
        super().__init__(nodes)
        self.name = name
        self.params = params
        self.has_block = has_block or bool(nodes)

    def __repr__(self) -> str:
        return f"AtRule({self.name!r}, {self.params!r}, {self.nodes!r})"

    def to_css(self, depth: int = 0) -> str:
        head = f"{INDENT * depth}@{self.name}" + (f" {self.params}" if self.params else "")
        if not self.has_block:
            return head + ";"
        return f"{head} {self._block_css(depth)}"
