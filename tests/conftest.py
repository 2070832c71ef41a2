# tests/conftest.py
# Ensure the project root (the folder that contains 'py2cpp' and 'tests') is on sys.path
# so that `from py2cpp...` imports work without an editable install.

import sys
import pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

try:
    import py2cpp  # noqa: F401
except Exception as e:
    has_pkg = (ROOT / "py2cpp" / "__init__.py").is_file()
    raise RuntimeError(
        f"Failed to import 'py2cpp' from {ROOT_STR}. "
        f"py2cpp/__init__.py exists: {has_pkg}"
    ) from e
