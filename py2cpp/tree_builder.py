# py2cpp/tree_builder.py
# Groups the flat token stream into a shallow two-level tree keyed on keywords.
#   root("program")
#     construct(<keyword>)
#       leaf(<token text>) ...

from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .tokenizer import Token, TokenKind

ROOT_LABEL = "program"


@dataclass
class Node:
    label: str
    children: List["Node"] = field(default_factory=list)


class _State(enum.Enum):
    AWAITING_KEYWORD = "awaiting-keyword"
    IN_CONSTRUCT = "in-construct"


def build(tokens: Iterable[Token]) -> Node:
    """
    Single left-to-right pass.

    A KEYWORD token opens a construct (closing the previous one, if any);
    every other token, whitespace included, becomes a leaf of the open
    construct. Leaves seen before the first keyword are dropped.
    """
    root = Node(ROOT_LABEL)
    state = _State.AWAITING_KEYWORD
    current: Optional[Node] = None

    for tok in tokens:
        if tok.kind is TokenKind.KEYWORD:
            if state is _State.IN_CONSTRUCT and current is not None:
                root.children.append(current)
            current = Node(tok.text)
            state = _State.IN_CONSTRUCT
            continue

        if state is _State.IN_CONSTRUCT and current is not None:
            current.children.append(Node(tok.text))
        else:
            # no construct open yet: the token is dropped
            pass

    if state is _State.IN_CONSTRUCT and current is not None:
        root.children.append(current)
    return root


# --------------------------- Rendering & JSON ---------------------------------

def render_tree(node: Node, depth: int = 0) -> str:
    """Indented listing, two spaces per level."""
    lines: List[str] = []

    def walk(n: Node, d: int):
        lines.append(" " * d + n.label)
        for child in n.children:
            walk(child, d + 2)

    walk(node, depth)
    return "\n".join(lines) + "\n"


def tree_to_dict(node: Node) -> Dict[str, Any]:
    return {"label": node.label, "children": [tree_to_dict(c) for c in node.children]}


def tree_from_dict(data: Dict[str, Any]) -> Node:
    """Inverse of tree_to_dict; every node must carry a non-empty string label."""
    if not isinstance(data, dict):
        raise TypeError("tree_from_dict expects a {'label', 'children'} mapping.")
    label = data.get("label")
    if not isinstance(label, str) or not label:
        raise ValueError(f"tree node needs a non-empty string label, got {label!r}")
    children = data.get("children") or []
    if not isinstance(children, list):
        raise TypeError(f"children of {label!r} must be a list")
    return Node(label, [tree_from_dict(c) for c in children])
