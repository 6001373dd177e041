"""Shared machinery of the JSON parser and serializer code generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from .name_format import NameFormat, format_name
from .type_name import Substance, TypeName

INDENT = "    "

#: Prefix of the invented names given to unnamed structures and enums.
UNNAMED_PREFIX = "Unnamed"

SIGNATURE = "// Generated by jsoncodegen\n\n"

_CHAR_ESCAPES = {
    0x00: "'\\0'",
    0x08: "'\\b'",
    0x0C: "'\\f'",
    0x0A: "'\\n'",
    0x0D: "'\\r'",
    0x09: "'\\t'",
    0x27: "'\\''",
    0x5C: "'\\\\'",
}

_RESERVED_NAMES = ("Error", "NonRef")


class NamedType(Protocol):
    """A type that the generators can produce code for."""

    name: TypeName


@dataclass
class Settings:
    """Options that shape the generated code."""

    no_throw: bool = False
    escape_forward_slash: bool = False
    check_integer_overflow: bool = True


@dataclass
class GeneratedFunction:
    """A generated member function of the output class."""

    type: Any
    name: str
    body: str


def _is_word_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_" or not c.isascii()


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def safe_name(name: str) -> str:
    """Qualify ``name`` with the global namespace if it could clash.

    Names starting with ``Error``, ``NonRef`` or an unnamed-type prefix
    followed by a digit are used inside the generated classes.
    """
    if not name or name.startswith(":"):
        return name
    name_start = True
    for i, c in enumerate(name):
        if not (_is_word_char(c) or c == ":"):
            break
        if name_start:
            for reserved in _RESERVED_NAMES:
                if name.startswith(reserved, i):
                    after = name[i + len(reserved): i + len(reserved) + 1]
                    if not (after and _is_word_char(after)):
                        return "::" + name
            if name.startswith(UNNAMED_PREFIX, i):
                after = name[i + len(UNNAMED_PREFIX): i + len(UNNAMED_PREFIX) + 1]
                if after and _is_ascii_digit(after):
                    return "::" + name
        name_start = c == ":"
    return name


def char_literal(c: Union[str, int]) -> str:
    """A C++ character literal for a single byte, given as a character or int."""
    code = ord(c) if isinstance(c, str) else c
    if not 0 <= code <= 0xFF:
        raise ValueError(f"not a single byte: {c!r}")
    if code in _CHAR_ESCAPES:
        return _CHAR_ESCAPES[code]
    if 0x20 <= code < 0x7F:
        return f"'{chr(code)}'"
    return f"'\\x{code:02x}'"


@dataclass
class _GeneratorState:
    functions: list[GeneratedFunction] = field(default_factory=list)
    function_names: dict[str, str] = field(default_factory=dict)
    used_function_names: set[str] = field(default_factory=set)
    virtual_typedefs: list[tuple[str, str]] = field(default_factory=list)
    resolved_virtual_typenames: set[str] = field(default_factory=set)
    entry_types: list[Any] = field(default_factory=list)


class Generator:
    """Base of the parser and serializer generators.

    ``string_type`` describes the string type of the generated code: it has
    a ``name`` (a :class:`TypeName`) and methods producing code that
    manipulates such strings.
    """

    FEATURE_CSTDLIB = 0x01

    def __init__(self, class_name: str, string_type, settings: Settings | None = None) -> None:
        parts = [part for part in class_name.split(":") if part]
        if class_name.endswith(":") or not parts:
            self.class_namespaces = parts
            self.class_name = ""
        else:
            self.class_namespaces = parts[:-1]
            self.class_name = parts[-1]
        self.string_type = string_type
        self.settings = settings if settings is not None else Settings()
        self.type_includes: list[str] = []
        self.feature_bits = 0
        self._state = _GeneratorState()

    def add_type_include(self, include_address: str) -> None:
        """Include ``include_address`` (with its brackets or quotes) in the header."""
        self.type_includes.append(include_address)

    def add_feature(self, feature_bit: int) -> None:
        """Request a helper that the generated code needs."""
        self.feature_bits |= feature_bit

    def json_member_name_literal(self, member_name: str) -> str:
        """String literal of a structure member's JSON key."""
        return '"' + member_name + '"'

    def json_enum_value_literal(self, enum_value: str) -> str:
        """String literal of an enum value in JSON."""
        return '"' + enum_value + '"'

    def resolve_virtual_typename(self, type_, parent_type, member_name: str) -> None:
        """Make an unnamed member type nameable through a typedef."""
        name = type_.name
        if name.substance is not Substance.VIRTUAL:
            return
        if name.body in self._state.resolved_virtual_typenames:
            return
        self._state.resolved_virtual_typenames.add(name.body)
        type_expr = parent_type.name.body + "::" + member_name
        type_expr += "[0]" * name.suffix.count("[")
        self._state.virtual_typedefs.append((type_expr, name.body))

    def _generate_virtual_typedefs(self, indent: str) -> str:
        if not self._state.virtual_typedefs:
            return ""
        lines = [
            indent + "template <typename T> struct NonRef { typedef T Type; };\n",
            indent + "template <typename T> struct NonRef<T &> { typedef T Type; };\n",
            indent + "template <typename T> struct NonRef<const T &> { typedef T Type; };\n\n",
        ]
        for type_expr, typedef_name in self._state.virtual_typedefs:
            lines.append(
                indent + "typedef typename NonRef<decltype(" + type_expr + ")>::Type "
                + typedef_name + ";\n"
            )
        lines.append("\n")
        return "".join(lines)

    def _generate_function_name(self, prefix: str, type_) -> str:
        name = type_.name
        function_name = prefix + format_name(name.body, NameFormat.CAMELCASE_CAPITAL)
        for c in name.suffix:
            if c.isascii() and c.isalnum():
                function_name += c
            elif c == "[":
                function_name += "_"
        used = self._state.used_function_names
        if function_name in used:
            base = function_name
            if base and _is_ascii_digit(base[-1]):
                base += "_"
            i = 1
            while f"{base}{i}" in used:
                i += 1
            function_name = f"{base}{i}"
        used.add(function_name)
        return function_name

    def _begin_namespace(self) -> str:
        return "".join(f"namespace {ns} {{\n\n" for ns in self.class_namespaces)

    def _end_namespace(self) -> str:
        return "\n}\n" * len(self.class_namespaces)