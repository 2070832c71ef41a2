"""Translation session: holds one source through the pipeline stages.

- Stages must run in order: load -> tokenize -> build -> validate/emit.
- A stage requested too early raises SequenceError; nothing else is touched.
- Validation is advisory: emit() works whether or not validate() ran or passed.
- Each stage appends a {"level", "event", "message"} entry to `logs`.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from .emitter import EmitOptions, emit
from .errors import SequenceError, SourceLoadError
from .schemas import validate_tree_doc
from .tokenizer import Token, tokenize
from .tree_builder import Node, build, tree_from_dict
from .verifier import Verdict, validate

LOAD_FIRST = "Load a file first."
TOKENIZE_FIRST = "Tokenize the code first."
PARSE_FIRST = "Parse the code first."


def load_source(path) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceLoadError(f"file not found: {p}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(f"cannot read {p}: {exc}") from exc


class TranslationSession:
    def __init__(self, options: Optional[EmitOptions] = None):
        self.options = options or EmitOptions()
        self.path: Optional[Path] = None
        self.source: str = ""
        self.tokens: List[Token] = []
        self.tree: Optional[Node] = None
        self.verdict: Optional[Verdict] = None
        self.logs: List[Dict[str, Any]] = []

    def _log(self, event: str, message: str, level: str = "info") -> None:
        self.logs.append({"level": level, "event": event, "message": message})

    @property
    def source_hash(self) -> str:
        return "sha256:" + hashlib.sha256(self.source.encode("utf-8")).hexdigest()

    def load_text(self, text: str, path=None) -> str:
        self.source = text or ""
        self.path = Path(path) if path is not None else None
        self.tokens = []
        self.tree = None
        self.verdict = None
        self._log("load", f"loaded {len(self.source)} characters" + (f" from {self.path}" if self.path else ""))
        return self.source

    def load_tree(self, path) -> Node:
        """Load a tree exported with --emit-tree; tokenize and build are skipped."""
        text = load_source(path)
        try:
            doc = json.loads(text)
            validate_tree_doc(doc)
            tree = tree_from_dict(doc)
        except (ValueError, TypeError, jsonschema.ValidationError) as exc:
            msg = getattr(exc, "message", None) or str(exc)
            self._log("load", f"invalid tree in {path}: {msg}", level="error")
            raise SourceLoadError(f"invalid tree in {path}: {msg}") from exc
        self.load_text(text, path=path)
        self.tree = tree
        self._log("build", f"{len(tree.children)} constructs loaded from tree")
        return tree

    def load_source(self, path) -> str:
        try:
            text = load_source(path)
        except SourceLoadError as exc:
            self._log("load", str(exc), level="error")
            raise
        return self.load_text(text, path=path)

    def tokenize(self) -> List[Token]:
        if not self.source:
            raise SequenceError(LOAD_FIRST)
        self.tokens = tokenize(self.source)
        self._log("tokenize", f"{len(self.tokens)} tokens")
        return self.tokens

    def build(self) -> Node:
        if not self.tokens:
            raise SequenceError(TOKENIZE_FIRST)
        self.tree = build(self.tokens)
        self.verdict = None
        self._log("build", f"{len(self.tree.children)} constructs")
        return self.tree

    def _require_tree(self) -> Node:
        if self.tree is None or not self.tree.label:
            raise SequenceError(PARSE_FIRST)
        return self.tree

    def validate(self) -> Verdict:
        tree = self._require_tree()
        self.verdict = validate(tree)
        for warn in self.verdict.warnings:
            self._log("validate", warn, level="warning")
        if self.verdict.ok:
            self._log("validate", "semantic check passed")
        else:
            for err in self.verdict.errors:
                self._log("validate", err, level="error")
        return self.verdict

    def emit(self) -> str:
        tree = self._require_tree()
        code = emit(tree, self.options)
        self._log("emit", f"{len(code.splitlines())} lines generated")
        return code

    def translate(self) -> str:
        """Run tokenize -> build -> validate -> emit on the loaded source."""
        self.tokenize()
        self.build()
        self.validate()
        return self.emit()
