"""
Assemble complete statements from a dump, either line by line (streaming)
or from the whole text at once.
"""
import re
from typing import Iterable, Iterator, List

from sqlparse import tokens as T
from sqlparse.lexer import tokenize

BOM = '\ufeff'
TRAILING_COMMENT_RE = re.compile(r";[ \t]*--[^\n]*$")


def iter_statements(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield statements from an iterable of lines.

    Blank lines and lines starting with '--' are skipped; other lines are
    joined with a single space until one ends with ';'. Whatever is left
    at the end without a terminating ';' is yielded last.
    """
    current = ''
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith('--'):
            continue
        current += ' ' + line.rstrip('\r\n')
        if stripped.endswith(';'):
            yield current.strip()
            current = ''
    if current.strip():
        yield current.strip()


def is_comment_line(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith('--')


def strip_comments(statement: str) -> str:
    """
    Drop '--' comment lines around a statement, plus a '-- ...' comment
    trailing its closing ';' on the same line.
    """
    lines = statement.splitlines()
    while lines and is_comment_line(lines[0]):
        lines.pop(0)
    while lines and is_comment_line(lines[-1]):
        lines.pop()
    return TRAILING_COMMENT_RE.sub(';', '\n'.join(lines)).strip()


def split_on_semicolons(content: str) -> Iterator[str]:
    current = []
    for ttype, value in tokenize(content):
        current.append(value)
        if ttype is T.Punctuation and value == ';':
            yield ''.join(current)
            current = []
    if current:
        yield ''.join(current)


def split_statements(content: str) -> List[str]:
    """
    Split a whole dump into statements without their trailing ';'.

    The sqlparse lexer tokenizes the text and only its ';' punctuation
    tokens end a statement, so a ';' inside a quoted value or a comment
    does not. Keywords play no part in the split. Comment lines around a
    statement are dropped, as are pieces that hold nothing but comments.
    """
    if content.startswith(BOM):
        content = content[1:]
    statements = []
    for piece in split_on_semicolons(content):
        stmt = strip_comments(piece)
        if stmt.endswith(';'):
            stmt = stmt[:-1].rstrip()
        if stmt and not stmt.startswith('--'):
            statements.append(stmt)
    return statements
