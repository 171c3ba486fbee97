"""Character classification and string helpers with C-string semantics."""

from __future__ import annotations

_WHITESPACE = " \f\n\r\t\v"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _code(char: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(char: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(char) <= ord("~")


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(char, str) else code


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(char, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Returns 0 when no digits follow.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not is_digit(ch):
            break
        digits.append(ch)
    if not digits:
        return 0
    value = int("".join(digits))
    return -value if negative else value


def itoa(number: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces.

    An empty separator leaves the text whole.
    """
    if len(separator) > 1:
        raise ValueError(f"separator must be one character, got {separator!r}")
    if not separator:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0; a miss gives None.
    """
    _non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; return the code point difference."""
    _non_negative("limit", limit)
    if limit == 0:
        return 0

    def at(text: str, index: int) -> int:
        return ord(text[index]) if index < len(text) else 0

    for index in range(limit):
        a, b = at(first, index), at(second, index)
        if a != b or a == 0 or index == limit - 1:
            return a - b
    return 0


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char``; the NUL character matches the end."""
    _single(char)
    index = text.find(char)
    if index >= 0:
        return index
    if char == "\0":
        return len(text)
    return None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char``; the NUL character matches the end."""
    _single(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None