"""Names of C++ types and the declarations built from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Substance(Enum):
    """Whether a type name exists in the source or was invented."""

    ACTUAL = "actual"
    VIRTUAL = "virtual"


def _is_ref_or_ptr(body: str) -> bool:
    return body.endswith(("&", "*"))


@dataclass(frozen=True)
class TypeName:
    """A type name split into the part before and after a declared name.

    For ``int x[4]`` the body is ``int`` and the suffix is ``[4]``.
    """

    body: str = ""
    suffix: str = ""
    substance: Substance = Substance.ACTUAL

    def full_name(self) -> str:
        """The complete type name."""
        return self.body + self.suffix

    def _space(self) -> str:
        return "" if _is_ref_or_ptr(self.body) else " "

    def variable_declaration(self, variable_name: str) -> str:
        """Declaration of a variable of this type."""
        return self.body + self._space() + variable_name + self.suffix

    def ref_arg_declaration(self, arg_name: str) -> str:
        """Declaration of a function argument passed by reference."""
        ref = "&" if not self.suffix else ""
        return self.body + self._space() + ref + arg_name + self.suffix

    def const_ref_arg_declaration(self, arg_name: str) -> str:
        """Declaration of a function argument passed by const reference."""
        if _is_ref_or_ptr(self.body):
            qualifier = "const &" if not self.suffix else "const "
            return self.body + qualifier + arg_name + self.suffix
        ref = " &" if not self.suffix else " "
        return "const " + self.body + ref + arg_name + self.suffix