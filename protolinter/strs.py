"""Checks and splitting for identifier naming styles (ASCII only)."""

from __future__ import annotations


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_letter(c: str) -> bool:
    return _is_upper(c) or _is_lower(c)


def _has_edge_underscore(s: str) -> bool:
    return s.startswith("_") or s.endswith("_")


def _is_camel_case(s: str) -> bool:
    return bool(s) and all(_is_letter(c) or _is_digit(c) for c in s)


def _is_snake(s: str) -> bool:
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_letter(c) or _is_digit(c) or c == "_" for c in s)


def _to_snake(s: str) -> str:
    parts = []
    prior_lower = False
    for c in s.strip():
        if prior_lower and _is_upper(c):
            parts.append("_")
        parts.append(c)
        prior_lower = _is_lower(c)
    return "".join(parts)


def is_upper_camel_case(s: str) -> bool:
    """True if ``s`` is non-empty, starts with a capital and has only letters and digits."""
    return bool(s) and _is_upper(s[0]) and _is_camel_case(s)


def is_upper_snake_case(s: str) -> bool:
    """True if ``s`` has only capitals, digits and inner underscores."""
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_upper(c) or _is_digit(c) or c == "_" for c in s)


def is_lower_snake_case(s: str) -> bool:
    """True if ``s`` has only lowercase letters, digits and inner underscores."""
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_lower(c) or _is_digit(c) or c == "_" for c in s)


def is_lower_case(s: str) -> bool:
    """True if ``s`` has only characters in a-z and 0-9."""
    return all(_is_lower(c) or _is_digit(c) for c in s)


def split_camel_case_word(s: str) -> list[str]:
    """Split a CamelCase word into its parts; empty list if it is not CamelCase."""
    if not s:
        return []
    s = s.strip()
    if not _is_camel_case(s):
        return []
    return split_snake_case_word(_to_snake(s))


def split_snake_case_word(s: str) -> list[str]:
    """Split a snake_case word into its parts; empty list if it is not snake_case."""
    if not s:
        return []
    s = s.strip()
    if not _is_snake(s):
        return []
    return s.split("_")