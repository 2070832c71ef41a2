# py2cpp/verifier.py
# Shallow semantic check over the construct tree.
# Goals:
# - Reject a print construct whose argument is not a string literal.
# - Never mutate the tree; other constructs are accepted as-is.
# The print argument is the first grandchild that is neither a whitespace
# leaf nor an opening '(' (so `print ( "x" )` passes), not the literal first
# grandchild.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import ValidationFailed
from .tokenizer import DEF_KEYWORD, PRINT_KEYWORD
from .tree_builder import Node

PRINT_REQUIRES_STRING = "print construct requires a string argument"

# Leaves skipped when looking for a print argument.
_ARGUMENT_OPENERS = ("(",)


@dataclass
class Verdict:
    ok: bool
    reason: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def is_whitespace_leaf(node: Node) -> bool:
    return node.label.isspace()


def first_significant(children: List[Node]) -> Optional[Node]:
    """First grandchild that is not a whitespace leaf."""
    for c in children:
        if not is_whitespace_leaf(c):
            return c
    return None


def print_argument(construct: Node) -> Optional[Node]:
    for c in construct.children:
        if is_whitespace_leaf(c) or c.label in _ARGUMENT_OPENERS:
            continue
        return c
    return None


def verify_tree(tree: Node) -> Dict[str, List[str]]:
    """
    Returns {'errors': [...], 'warnings': [...]} without raising.
    Rules:
      - print needs an argument whose label starts with '"' (error otherwise)
      - def without a name leaf is emitted as an anonymous function (warning)
    """
    errs: List[str] = []
    warns: List[str] = []

    for i, child in enumerate(tree.children):
        where = f"construct {i+1} ({child.label})"
        if child.label == PRINT_KEYWORD:
            arg = print_argument(child)
            if arg is None or not arg.label.startswith('"'):
                errs.append(f"{where}: {PRINT_REQUIRES_STRING}")
        elif child.label == DEF_KEYWORD:
            if first_significant(child.children) is None:
                warns.append(f"{where}: function definition has no name")

    return {"errors": errs, "warnings": warns}


def validate(tree: Node) -> Verdict:
    res = verify_tree(tree)
    errs = res["errors"]
    return Verdict(
        ok=not errs,
        reason=errs[0] if errs else None,
        errors=errs,
        warnings=res["warnings"],
    )


def verify_or_raise(tree: Node) -> None:
    res = verify_tree(tree)
    if res["errors"]:
        raise ValidationFailed(res["errors"])
