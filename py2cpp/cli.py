# py2cpp/cli.py
# CLI for translating a source file in one go; prints code, trees and receipts.

from __future__ import annotations

import argparse
import datetime as _dt
import json
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from .emitter import BRACE_MODES, BRACE_SINGLE, EmitOptions
from .errors import TranslationError
from .menu import run_menu
from .schemas import validate_receipt, validate_tree_doc
from .session import TranslationSession
from .tokenizer import format_token
from .tree_builder import render_tree, tree_to_dict


def _now_utc_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z"


def make_base_receipt(session: TranslationSession) -> Dict[str, Any]:
    source: Dict[str, Any] = {"hash": session.source_hash}
    if session.path is not None:
        source["path"] = str(session.path)
    return {
        "engine": "py2cpp",
        "source": source,
        "run": {"timestamp": _now_utc_iso(), "uuid": str(uuid.uuid4())},
        "logs": session.logs,
    }


def write_json(path: Path, doc: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc, ensure_ascii=False, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="py2cpp",
        description="Translate a def/print Python subset to C++-style code.",
    )
    p.add_argument("input", nargs="?", help="Source file to translate.")
    p.add_argument("-o", "--output", metavar="PATH", help="Write generated code to PATH instead of stdout.")
    p.add_argument("--load-tree", action="store_true",
                   help="Treat INPUT as a tree JSON written by --emit-tree instead of source text.")
    p.add_argument("--print-tokens", action="store_true", help="List tokens before translating.")
    p.add_argument("--print-tree", action="store_true", help="Print the construct tree.")
    p.add_argument("--emit-tree", metavar="PATH", help="Write the construct tree as JSON to PATH.")
    p.add_argument("--strict", action="store_true", help="Do not generate code when the semantic check fails.")
    p.add_argument("--brace-mode", choices=BRACE_MODES, default=BRACE_SINGLE,
                   help="'single' closes once at the end; 'per-construct' closes every def.")
    p.add_argument("--stream", default=None, help="Output stream name for print (default: output).")
    p.add_argument("--newline", default=None, help="Line terminator name for print (default: newline).")
    p.add_argument("--cpp", action="store_true", help="Use std::cout / std::endl.")
    p.add_argument("--print-receipt", action="store_true", help="Print the run receipt JSON.")
    p.add_argument("--receipt-out", metavar="PATH", help="Write the run receipt JSON to PATH.")
    p.add_argument("--menu", action="store_true", help="Start the interactive menu instead.")
    return p


def _options_from_args(args: argparse.Namespace) -> EmitOptions:
    base = EmitOptions.cpp(args.brace_mode) if args.cpp else EmitOptions(brace_mode=args.brace_mode)
    return EmitOptions(
        stream=args.stream or base.stream,
        newline=args.newline or base.newline,
        brace_mode=base.brace_mode,
    )


def _finish_receipt(receipt: Dict[str, Any], args: argparse.Namespace) -> None:
    validate_receipt(receipt)
    if args.print_receipt:
        print(json.dumps(receipt, indent=2, sort_keys=True))
    if args.receipt_out:
        write_json(Path(args.receipt_out), receipt)
        print(f"py2cpp: wrote receipt {args.receipt_out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    options = _options_from_args(args)

    if args.menu:
        run_menu(options=options)
        return 0

    if not args.input:
        p.error("input path required (e.g., samples/hello.py)")

    in_path = Path(args.input)
    if not in_path.is_file():
        print(f"py2cpp: input not found: {in_path}", file=sys.stderr)
        return 2

    session = TranslationSession(options)
    try:
        if args.load_tree:
            tree = session.load_tree(in_path)
        else:
            session.load_source(in_path)
            tokens = session.tokenize()
            if args.print_tokens:
                for tok in tokens:
                    print(format_token(tok))
            tree = session.build()

        if args.print_tree:
            print(render_tree(tree), end="")
        if args.emit_tree:
            doc = tree_to_dict(tree)
            validate_tree_doc(doc)
            write_json(Path(args.emit_tree), doc)
            print(f"py2cpp: wrote tree {args.emit_tree}")

        verdict = session.validate()
        receipt = make_base_receipt(session)
        receipt["verify"] = {"errors": list(verdict.errors), "warnings": list(verdict.warnings)}
        for warn in verdict.warnings:
            print(f"py2cpp: warning: {warn}", file=sys.stderr)

        if not verdict.ok:
            for err in verdict.errors:
                print(f"py2cpp: error: {err}", file=sys.stderr)
            if args.strict:
                receipt["status"] = "invalid"
                receipt["reason"] = verdict.reason
                _finish_receipt(receipt, args)
                return 1

        code = session.emit()
        if args.output:
            out_path = Path(args.output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(code, encoding="utf-8")
            print(f"py2cpp: wrote {out_path}")
        else:
            print(code, end="")

        receipt["output"] = str(args.output) if args.output else "<stdout>"
        receipt["status"] = "ok" if verdict.ok else "invalid"
        if not verdict.ok:
            receipt["reason"] = verdict.reason
        _finish_receipt(receipt, args)
        return 0

    except (TranslationError, OSError, jsonschema.ValidationError) as e:
        reason = getattr(e, "message", None) if isinstance(e, jsonschema.ValidationError) else None
        err = make_base_receipt(session)
        err["status"] = "error"
        err["reason"] = reason or str(e)
        print(f"py2cpp: {err['reason']}", file=sys.stderr)
        try:
            _finish_receipt(err, args)
        except OSError as exc:
            print(f"py2cpp: cannot write receipt: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
