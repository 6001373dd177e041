"""Absolute, normalized file paths with relative-path arithmetic."""

from __future__ import annotations

import os
from functools import cache

_WINDOWS = os.name == "nt"
_SEPARATORS = "/\\" if _WINDOWS else "/"


def _is_separator(c: str) -> bool:
    return c in _SEPARATORS


def _is_absolute(path: str) -> bool:
    if not path:
        return False
    if _is_separator(path[0]):
        return True
    if _WINDOWS:
        for c in path:
            if c == ":":
                return True
            if _is_separator(c):
                break
    return False


def _normalize(path: str) -> str:
    """Unify separators, drop repeated separators and resolve ``.`` and ``..``."""
    out: list[str] = []
    prev3 = prev2 = prev1 = ""
    for c in path:
        if _is_separator(c):
            c = "/"
            if prev1 == "." and prev2 == "." and prev3 == "/":
                i = len(out) - 4
                if i >= 0:
                    while i >= 0 and out[i] != "/":
                        i -= 1
                    del out[i + 1:]
            elif prev1 == "." and prev2 == "/":
                out.pop()
            elif prev1 != "/":
                out.append(c)
        else:
            out.append(c)
        prev3, prev2, prev1 = prev2, prev1, c
    return "".join(out)


def _common_path_prefix(a: str, b: str) -> int:
    common = 0
    for i, (ac, bc) in enumerate(zip(a, b)):
        if not (ac == bc or (_is_separator(ac) and _is_separator(bc))):
            break
        if _is_separator(ac):
            common = i + 1
    return common


def _directory_part(path: str) -> str:
    last = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[: last + 1]


class AbsPath:
    """An absolute path; a directory is written with a trailing separator."""

    __slots__ = ("_path",)

    def __init__(self, path: str) -> None:
        if _is_absolute(path):
            self._path = _normalize(path)
        else:
            base = _directory_part(working_directory()._path)
            self._path = _normalize(base + path)

    @classmethod
    def _from_normalized(cls, path: str) -> AbsPath:
        instance = cls.__new__(cls)
        instance._path = path
        return instance

    def __add__(self, path: str) -> AbsPath:
        """Resolve ``path`` relative to the directory of this path."""
        if not isinstance(path, str):
            return NotImplemented
        if _is_absolute(path):
            return AbsPath._from_normalized(_normalize(path))
        return AbsPath._from_normalized(_normalize(_directory_part(self._path) + path))

    def __sub__(self, other: AbsPath) -> str:
        """This path expressed relative to the directory of ``other``."""
        if not isinstance(other, AbsPath):
            return NotImplemented
        prefix_len = _common_path_prefix(self._path, other._path)
        if not prefix_len:
            return self._path
        if prefix_len == len(other._path):
            return self._path[prefix_len:]
        ups = sum(1 for c in other._path[prefix_len:] if _is_separator(c))
        return "../" * ups + self._path[prefix_len:]

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"AbsPath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbsPath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)


@cache
def working_directory() -> AbsPath:
    """The working directory at first use, with a trailing separator."""
    try:
        cwd = os.getcwd()
    except OSError:
        return AbsPath._from_normalized("")
    return AbsPath._from_normalized(_normalize(cwd + "/"))