"""
Tokenizing and typing of the literals inside one VALUES row.
"""
import re
from typing import List

from sql2json.models import SQLValue

INT_RE = re.compile(r'^-?\d+$')
FLOAT_RE = re.compile(r'^-?\d+\.\d+$')

QUOTES = ("'", '"')
OPENERS = ('(', '{')
CLOSERS = (')', '}')


def tokenize_values(s: str) -> List[str]:
    """
    Split the interior of one row, e.g. "1, 'a,b', (2,3)", into raw literal
    tokens: ["1", "'a,b'", "(2,3)"].

    Commas inside quoted strings or inside (...) / {...} do not split. A
    quote preceded by a backslash does not close the string. Tokens are
    trimmed but otherwise untouched; see normalize_literal for typing.
    """
    tokens = []
    cur = []
    in_string = False
    string_char = ''
    depth = 0
    prev = ''
    for ch in s:
        if in_string:
            cur.append(ch)
            if ch == string_char and prev != '\\':
                in_string = False
        elif ch in QUOTES:
            in_string = True
            string_char = ch
            cur.append(ch)
        elif ch in OPENERS:
            depth += 1
            cur.append(ch)
        elif ch in CLOSERS:
            depth -= 1
            cur.append(ch)
        elif ch == ',' and depth == 0:
            tokens.append(''.join(cur).strip())
            cur = []
        else:
            cur.append(ch)
        prev = ch
    last = ''.join(cur).strip()
    if last:
        tokens.append(last)
    return tokens


def unquote(value: str) -> str:
    # only \' and \" are unescaped, other backslash sequences stay as written
    return value[1:-1].replace("\\'", "'").replace('\\"', '"')


def normalize_literal(token: str) -> SQLValue:
    """
    NULL -> None, quoted -> str, integer -> int, decimal -> float.
    Anything else (bare words, expressions, malformed literals) is returned
    as the trimmed text.
    """
    value = token.strip()
    if value.upper() == 'NULL':
        return None
    if value[:1] in QUOTES and value.endswith(value[0]):
        return unquote(value)
    if INT_RE.match(value):
        return int(value)
    if FLOAT_RE.match(value):
        return float(value)
    return value


def parse_values(s: str) -> List[SQLValue]:
    return [normalize_literal(tok) for tok in tokenize_values(s)]
