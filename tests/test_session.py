# tests/test_session.py
from pathlib import Path

import pytest

from py2cpp.errors import SequenceError, SourceLoadError
from py2cpp.session import LOAD_FIRST, PARSE_FIRST, TOKENIZE_FIRST, TranslationSession, load_source

HELLO = 'def main ( ) : print ( "Hello" )'


def _write(tmp_path: Path, text: str, name: str = "prog.py") -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_stages_refuse_to_run_out_of_order():
    s = TranslationSession()
    with pytest.raises(SequenceError, match=LOAD_FIRST):
        s.tokenize()
    with pytest.raises(SequenceError, match=TOKENIZE_FIRST):
        s.build()
    with pytest.raises(SequenceError, match=PARSE_FIRST):
        s.validate()
    with pytest.raises(SequenceError, match=PARSE_FIRST):
        s.emit()
    assert s.tokens == [] and s.tree is None


def test_missing_file_raises_source_load_error(tmp_path: Path):
    with pytest.raises(SourceLoadError):
        load_source(tmp_path / "nope.py")
    s = TranslationSession()
    with pytest.raises(SourceLoadError):
        s.load_source(tmp_path / "nope.py")
    assert s.logs[-1]["level"] == "error"


def test_empty_file_counts_as_not_loaded(tmp_path: Path):
    s = TranslationSession()
    s.load_source(_write(tmp_path, ""))
    with pytest.raises(SequenceError, match=LOAD_FIRST):
        s.tokenize()


def test_translate_runs_every_stage(tmp_path: Path):
    s = TranslationSession()
    s.load_source(_write(tmp_path, HELLO))
    code = s.translate()
    assert code.startswith("void main() {\n")
    assert s.verdict is not None and s.verdict.ok
    assert [e["event"] for e in s.logs] == ["load", "tokenize", "build", "validate", "emit"]
    assert s.source_hash.startswith("sha256:")


def test_validation_failure_does_not_block_emit():
    s = TranslationSession()
    s.load_text("print name")
    s.tokenize()
    s.build()
    verdict = s.validate()
    assert not verdict.ok
    assert s.emit() == "output <<  name << newline;\n}\n"
    assert any(e["level"] == "error" and e["event"] == "validate" for e in s.logs)


def test_keywordless_source_still_builds_a_labelled_root():
    s = TranslationSession()
    s.load_text("x = 1")
    s.tokenize()
    tree = s.build()
    assert tree.label == "program" and tree.children == []
    assert s.validate().ok
    assert s.emit() == "}\n"


def test_reloading_resets_later_stages():
    s = TranslationSession()
    s.load_text(HELLO)
    s.tokenize()
    s.build()
    s.load_text('print "again"')
    assert s.tokens == [] and s.tree is None
    with pytest.raises(SequenceError, match=TOKENIZE_FIRST):
        s.build()


def test_load_tree_skips_tokenize_and_build(tmp_path: Path):
    tree_json = '{"label": "program", "children": [{"label": "print", "children": [{"label": "\\"x\\"", "children": []}]}]}'
    s = TranslationSession()
    tree = s.load_tree(_write(tmp_path, tree_json, "tree.json"))
    assert [c.label for c in tree.children] == ["print"]
    assert s.validate().ok
    assert s.emit() == 'output << "x" << newline;\n}\n'


def test_load_tree_rejects_malformed_documents(tmp_path: Path):
    s = TranslationSession()
    with pytest.raises(SourceLoadError, match="invalid tree"):
        s.load_tree(_write(tmp_path, "not json", "a.json"))
    with pytest.raises(SourceLoadError, match="invalid tree"):
        s.load_tree(_write(tmp_path, '{"label": "program", "children": [{"label": "", "children": []}]}', "b.json"))
    assert s.tree is None
