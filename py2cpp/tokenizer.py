# py2cpp/tokenizer.py
# Splits source text into flat, classified tokens.
# Tokens:
#   Token(kind=TokenKind.KEYWORD|IDENTIFIER|NUMBER|STRING_LITERAL|OPERATOR|WHITESPACE|UNKNOWN,
#         text=<exact matched substring>)

from __future__ import annotations
import enum
import re
from dataclasses import dataclass
from typing import List, Tuple

# ------------------------------ Config ---------------------------------------

DEF_KEYWORD = "def"
PRINT_KEYWORD = "print"
RESERVED_WORDS = (DEF_KEYWORD, PRINT_KEYWORD)


class TokenKind(enum.Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING_LITERAL = "STRING_LITERAL"
    OPERATOR = "OPERATOR"
    WHITESPACE = "WHITESPACE"
    UNKNOWN = "UNKNOWN"  # never produced by the current rule table


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


# ------------------------------ Patterns -------------------------------------

_RESERVED = "|".join(rf"\b{re.escape(w)}\b" for w in RESERVED_WORDS)

# Ordered rule table: (pattern source, kind). Order is both the alternation
# priority of the scanner and the classification priority.
RULES: Tuple[Tuple[str, TokenKind], ...] = (
    (_RESERVED, TokenKind.KEYWORD),
    (r"\w+", TokenKind.IDENTIFIER),
    (r"[0-9]+", TokenKind.NUMBER),
    (r'".*?"', TokenKind.STRING_LITERAL),
    (r"\s+", TokenKind.WHITESPACE),
    (r"[^\w\s]+", TokenKind.OPERATOR),
)

# Everything not claimed by an earlier rule falls through to OPERATOR.
FALLBACK_KIND = TokenKind.OPERATOR

TOKEN_RE: re.Pattern = re.compile("|".join(f"(?:{src})" for src, _ in RULES))

_CLASSIFIERS: Tuple[Tuple[re.Pattern, TokenKind], ...] = tuple(
    (re.compile(src), kind) for src, kind in RULES[:-1]
)

# ------------------------------ Main tokenizer -------------------------------


def classify(text: str) -> TokenKind:
    """Re-test a matched lexeme against the rule table, first full match wins."""
    for pattern, kind in _CLASSIFIERS:
        if pattern.fullmatch(text):
            return kind
    return FALLBACK_KIND


def tokenize(source: str) -> List[Token]:
    tokens: List[Token] = []
    for m in TOKEN_RE.finditer(source or ""):
        lexeme = m.group(0)
        tokens.append(Token(classify(lexeme), lexeme))
    return tokens


def format_token(token: Token) -> str:
    return f"Token({token.text}, Type: {token.kind.value})"
