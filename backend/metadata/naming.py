"""
Column-name normalization and association naming.

Both ends of a relationship compute their association name on their own,
so everything here must depend only on the entity names and the column
set, never on which side is processed first.
"""

import re
from typing import List, Sequence

ASSOCIATION_PREFIX = 'AN_'

_RE_WORD_SEPARATORS = re.compile(r'[_\-\s.]+')

_DELIMITERS = (('[', ']'), ('"', '"'), ('`', '`'))


def unbracket(name: str) -> str:
    """Strip SQL quoting from a column name: ``[OrderID]`` -> ``OrderID``.

    Brackets come from SQL Server, double quotes from ANSI dialects and
    backticks from MySQL.
    """
    for opening, closing in _DELIMITERS:
        if len(name) >= 2 and name[0] == opening and name[-1] == closing:
            name = name[1:-1]
    return name


def unbracket_all(names: Sequence[str]) -> List[str]:
    return [unbracket(n) for n in names]


def names_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """True when both sequences hold the same column names.

    Order-insensitive and case-insensitive, compared after unbracketing.
    """
    if len(a) != len(b):
        return False
    return (sorted(unbracket(n).lower() for n in a)
            == sorted(unbracket(n).lower() for n in b))


def to_pascal_case(name: str) -> str:
    """``customer_id`` -> ``CustomerId``; names already in PascalCase are kept."""
    if not name:
        return name
    parts = [p for p in _RE_WORD_SEPARATORS.split(name) if p]
    result = []
    for part in parts:
        if part.isupper() and len(part) > 1:
            part = part.capitalize()
        result.append(part[0].upper() + part[1:])
    return ''.join(result)


def cat_column_names(column_names: Sequence[str], delim: str = ',') -> str:
    """Unbracket the column names and join them with delim."""
    return delim.join(unbracket(c) for c in column_names)


def association_name(name1: str, name2: str, column_names: Sequence[str]) -> str:
    """Build the association name shared by both ends of a relationship.

    The entity names are put in order so that either end produces the same
    string; the column suffix tells apart several relationships between
    the same two types.
    """
    cols = cat_column_names([to_pascal_case(unbracket(c)) for c in column_names], '_')
    first, second = (name1, name2) if name1 < name2 else (name2, name1)
    return f"{ASSOCIATION_PREFIX}{first}_{second}_{cols}"
