# py2cpp/emitter.py
# Walks the construct tree and produces C++-flavoured text.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .tokenizer import DEF_KEYWORD, PRINT_KEYWORD
from .tree_builder import Node
from .verifier import first_significant

BLOCK_OPENER = ":"

BRACE_SINGLE = "single"
BRACE_PER_CONSTRUCT = "per-construct"
BRACE_MODES = (BRACE_SINGLE, BRACE_PER_CONSTRUCT)


@dataclass(frozen=True)
class EmitOptions:
    stream: str = "output"
    newline: str = "newline"
    brace_mode: str = BRACE_SINGLE

    def __post_init__(self):
        if self.brace_mode not in BRACE_MODES:
            raise ValueError(f"unknown brace mode: {self.brace_mode!r} (expected one of {', '.join(BRACE_MODES)})")

    @classmethod
    def cpp(cls, brace_mode: str = BRACE_SINGLE) -> "EmitOptions":
        return cls(stream="std::cout", newline="std::endl", brace_mode=brace_mode)


def _emit_def(construct: Node) -> str:
    name = first_significant(construct.children)
    return f"void {name.label if name is not None else ''}() {{\n"


def _emit_print(construct: Node, opts: EmitOptions) -> str:
    payload = "".join(gc.label for gc in construct.children)
    return f"{opts.stream} << {payload} << {opts.newline};\n"


def emit(tree: Node, options: Optional[EmitOptions] = None) -> str:
    """
    Rules per direct child, first match wins:
      def   -> 'void <name>() {'
      print -> '<stream> << <grandchildren verbatim> << <newline>;'
      ':'   -> ' {'
      other -> label verbatim
    'single' mode closes with one brace in total; 'per-construct' closes
    every opened def.
    """
    opts = options or EmitOptions()
    per_construct = opts.brace_mode == BRACE_PER_CONSTRUCT
    out: List[str] = []
    open_def = False

    for child in tree.children:
        if child.label == DEF_KEYWORD:
            if per_construct and open_def:
                out.append("}\n")
            out.append(_emit_def(child))
            open_def = True
        elif child.label == PRINT_KEYWORD:
            out.append(_emit_print(child, opts))
        elif child.label == BLOCK_OPENER:
            out.append(" {\n")
        else:
            out.append(child.label)

    if not per_construct or open_def:
        out.append("}\n")
    return "".join(out)
