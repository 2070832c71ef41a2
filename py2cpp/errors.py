# py2cpp/errors.py
from __future__ import annotations


class TranslationError(Exception):
    pass


class SourceLoadError(TranslationError):
    """Source file missing or unreadable."""


class SequenceError(TranslationError):
    """A pipeline stage was requested before its input was ready."""


class ValidationFailed(TranslationError):
    def __init__(self, errors):
        self.errors = list(errors or [])
        super().__init__("Semantic check failed:\n- " + "\n- ".join(self.errors))
