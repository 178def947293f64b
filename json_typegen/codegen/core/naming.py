"""
Naming utilities for code generation.

Pure case converters used by every language generator to turn JSON keys
into target-language identifiers. All converters split their input into
words first and then join the words in the requested style.
"""

import re
from enum import Enum
from typing import Callable, Dict, List


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[-_./\\]+")
_WHITESPACE = re.compile(r"\s+")
_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]+")


def split_into_words(name: str) -> List[str]:
    """
    Split a name into word tokens.

    Boundaries are a lowercase letter followed by an uppercase one, the end
    of an acronym run (``XMLParser`` -> ``XML``, ``Parser``), any of
    ``- _ . / \\`` and whitespace.

    Args:
        name: Name to split

    Returns:
        List of words, possibly empty
    """
    spaced = _LOWER_UPPER.sub(r"\1 \2", name)
    spaced = _ACRONYM.sub(r"\1 \2", spaced)
    spaced = _SEPARATORS.sub(" ", spaced)
    spaced = _WHITESPACE.sub(" ", spaced).strip()
    return [word for word in spaced.split(" ") if word]


def _ascii_lower(word: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in word)


def _ascii_upper(word: str) -> str:
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in word)


def _capitalize(word: str) -> str:
    return _ascii_upper(word[:1]) + _ascii_lower(word[1:])


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    words = split_into_words(name)
    return "".join(
        _ascii_lower(word) if index == 0 else _capitalize(word)
        for index, word in enumerate(words)
    )


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(_capitalize(word) for word in split_into_words(name))


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    return "_".join(_ascii_lower(word) for word in split_into_words(name))


def to_screaming_snake_case(name: str) -> str:
    """Convert to SCREAMING_SNAKE_CASE."""
    return "_".join(_ascii_upper(word) for word in split_into_words(name))


def to_kebab_case(name: str) -> str:
    """Convert to kebab-case."""
    return "-".join(_ascii_lower(word) for word in split_into_words(name))


_CONVERTERS: Dict[NamingCase, Callable[[str], str]] = {
    NamingCase.SNAKE_CASE: to_snake_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.KEBAB_CASE: to_kebab_case,
    NamingCase.SCREAMING_SNAKE: to_screaming_snake_case,
}


def convert_case(name: str, target_case: NamingCase) -> str:
    """
    Convert name to a target case style.

    Args:
        name: Original name
        target_case: Desired case style

    Returns:
        Converted name
    """
    return _CONVERTERS[target_case](name)


def is_valid_identifier(name: str) -> bool:
    """Check whether name is a bare ASCII identifier (``[a-zA-Z_][a-zA-Z0-9_]*``)."""
    return bool(_IDENTIFIER.match(name))


def to_identifier(name: str, prefix: str = "_", fallback: str = "field") -> str:
    """
    Reduce name to a bare ASCII identifier.

    Characters outside ``[A-Za-z0-9_]`` are dropped and a leading digit gets
    ``prefix`` (``2fa`` -> ``_2fa``). A name with nothing left becomes
    ``fallback``.
    """
    identifier = _NON_IDENTIFIER.sub("", name)
    if not identifier:
        return fallback
    if identifier[0].isdigit():
        return prefix + identifier
    return identifier


def convert_key(
    key: str, target_case: NamingCase, prefix: str = "_", fallback: str = "field"
) -> str:
    """
    Convert a JSON key to an identifier in the target case.

    Characters that cannot appear in an identifier act as word separators,
    so ``@type`` becomes ``Type`` in PascalCase and ``first@name`` becomes
    ``firstName`` in camelCase.
    """
    words = _NON_IDENTIFIER.sub(" ", key)
    return to_identifier(convert_case(words, target_case), prefix, fallback)
