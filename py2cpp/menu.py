# py2cpp/menu.py
# Interactive menu: load, tokenize, parse, check and generate, one step at a time.

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .emitter import EmitOptions
from .errors import TranslationError
from .session import TranslationSession
from .tokenizer import format_token
from .tree_builder import render_tree

MENU = """Menu:
1. Load Python file
2. Tokenize
3. Parse
4. Check Semantics
5. Generate C++ Code
6. Exit
Choose an option: """


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def run_menu(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    *,
    options: Optional[EmitOptions] = None,
) -> TranslationSession:
    """Loop until option 6 or end of input; returns the session for inspection."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    session = TranslationSession(options)

    while True:
        choice = _ask(MENU, stdin, stdout)
        if choice is None or choice == "6":
            break
        try:
            if choice == "1":
                filename = _ask("Enter filename: ", stdin, stdout)
                if not filename:
                    stderr.write("Failed to open file.\n")
                    continue
                session.load_source(filename)
                stdout.write("File loaded.\n")
            elif choice == "2":
                for tok in session.tokenize():
                    stdout.write(format_token(tok) + "\n")
            elif choice == "3":
                stdout.write(render_tree(session.build()))
            elif choice == "4":
                verdict = session.validate()
                if verdict.ok:
                    stdout.write("Semantic check passed.\n")
                else:
                    stderr.write(f"Error: {verdict.reason}\n")
            elif choice == "5":
                code = session.emit()
                stdout.write("Generated C++ Code:\n" + code + "\n")
            else:
                stderr.write("Invalid option.\n")
        except TranslationError as exc:
            if choice == "1":
                stderr.write(f"Failed to open file. ({exc})\n")
            else:
                stderr.write(f"{exc}\n")

    return session
