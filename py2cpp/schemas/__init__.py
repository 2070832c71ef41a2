# py2cpp/schemas/__init__.py
# Local, ref-free JSON schemas for exported trees and run receipts.
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

SCHEMAS = Path(__file__).resolve().parent

TREE_SCHEMA = "syntax-tree.schema.json"
RECEIPT_SCHEMA = "receipt.schema.json"


def load_schema(name: str) -> Dict[str, Any]:
    return json.loads((SCHEMAS / name).read_text(encoding="utf-8"))


def validate_tree_doc(doc: Dict[str, Any]) -> None:
    """Raises jsonschema.ValidationError if `doc` is not a well-formed tree."""
    Draft202012Validator(load_schema(TREE_SCHEMA)).validate(doc)


def validate_receipt(receipt: Dict[str, Any]) -> None:
    Draft202012Validator(load_schema(RECEIPT_SCHEMA)).validate(receipt)
