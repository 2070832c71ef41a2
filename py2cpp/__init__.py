# py2cpp/__init__.py
from __future__ import annotations

# Four-stage translator: tokenize -> build -> validate -> emit.
from .tokenizer import Token, TokenKind, classify, tokenize
from .tree_builder import Node, build
from .verifier import Verdict, validate
from .emitter import EmitOptions, emit
from .errors import SequenceError, SourceLoadError, TranslationError, ValidationFailed
from .session import TranslationSession, load_source

__all__ = [
    "Token", "TokenKind", "classify", "tokenize",
    "Node", "build",
    "Verdict", "validate",
    "EmitOptions", "emit",
    "TranslationError", "SourceLoadError", "SequenceError", "ValidationFailed",
    "TranslationSession", "load_source",
    "translate",
]


def translate(source: str, options: EmitOptions | None = None) -> str:
    """tokenize -> build -> emit in one call; validation is left to the caller."""
    return emit(build(tokenize(source)), options)
