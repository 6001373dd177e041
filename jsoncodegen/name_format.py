"""Conversion of identifiers between naming conventions."""

from __future__ import annotations

from enum import Enum


class NameFormat(Enum):
    """Naming conventions that a name can be converted into."""

    #: Any format is valid, no conversion takes place.
    ANY = "any"
    #: UPPERCASE_SEPARATED_BY_UNDERSCORE
    UPPERCASE_UNDERSCORE = "uppercase_underscore"
    #: lowercase_separated_by_underscore
    LOWERCASE_UNDERSCORE = "lowercase_underscore"
    #: UPPERCASE-SEPARATED-BY-DASH
    UPPERCASE_DASH = "uppercase_dash"
    #: lowercase-separated-by-dash
    LOWERCASE_DASH = "lowercase_dash"
    #: firstLetterOfEachWordExceptTheFirstCapitalized
    CAMELCASE = "camelcase"
    #: FirstLetterOfEachWordCapitalized
    CAMELCASE_CAPITAL = "camelcase_capital"


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _separated(name: str, separator: str, upper: bool) -> str:
    parts: list[str] = []
    prev_space = False
    for c in name:
        if not _is_alnum(c):
            if not prev_space:
                parts.append(separator)
            prev_space = True
        else:
            parts.append(c.upper() if upper else c.lower())
            prev_space = False
    return "".join(parts)


def _camel(name: str, capital: bool) -> str:
    parts: list[str] = []
    prev_space = capital
    for c in name:
        if not _is_alnum(c):
            prev_space = True
        else:
            parts.append(c.upper() if prev_space else c)
            prev_space = False
    return "".join(parts)


def format_name(name: str, fmt: NameFormat) -> str:
    """Convert ``name`` into the naming convention ``fmt``.

    Any character that is not an ASCII letter or digit separates words.
    """
    if fmt is NameFormat.ANY:
        return name
    if fmt is NameFormat.UPPERCASE_UNDERSCORE:
        return _separated(name, "_", upper=True)
    if fmt is NameFormat.UPPERCASE_DASH:
        return _separated(name, "-", upper=True)
    if fmt is NameFormat.LOWERCASE_UNDERSCORE:
        return _separated(name, "_", upper=False)
    if fmt is NameFormat.LOWERCASE_DASH:
        return _separated(name, "-", upper=False)
    if fmt is NameFormat.CAMELCASE_CAPITAL:
        return _camel(name, capital=True)
    if fmt is NameFormat.CAMELCASE:
        return _camel(name, capital=False)
    raise ValueError(f"unknown name format: {fmt!r}")