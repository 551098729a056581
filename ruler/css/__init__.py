"""css — minimal stylesheet tree used as the host for directive processing."""

from ruler.css.nodes import AtRule, Comment, Container, Declaration, Node, Root, Rule
from ruler.css.parser import parse_stylesheet

__all__ = [
    "Node",
    "Container",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    "parse_stylesheet",
]
