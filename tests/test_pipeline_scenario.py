# tests/test_pipeline_scenario.py
from textwrap import dedent

from py2cpp import build, emit, tokenize, translate, validate

HELLO = 'def main ( ) : print ( "Hello" )'


def test_hello_end_to_end():
    tree = build(tokenize(HELLO))
    assert [c.label for c in tree.children] == ["def", "print"]
    assert validate(tree).ok

    out = emit(tree)
    assert out.startswith("void main() {\n")
    assert 'output <<  ( "Hello" ) << newline;\n' in out
    assert out.endswith("}\n")
    assert out.count("}") == 1


def test_translation_is_idempotent():
    src = dedent('''\
    def greet():
        print("Hi")
    def shout():
        print(name)
    ''')
    first = translate(src)
    second = emit(build(tokenize(src)))
    assert first == second
    assert first.encode("utf-8") == translate(src).encode("utf-8")


def test_multiline_source_keeps_whitespace_payload():
    src = 'def greet():\n    print("Hi")\n'
    out = translate(src)
    assert out == 'void greet() {\noutput << ("Hi")\n << newline;\n}\n'
