from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Union

from cipher_core.alphabet import ALPHABET, Mode, normalize_mode, normalize_shift, shift_index


class LetterCase(str, Enum):
    UPPER = "upper"
    LOWER = "lower"


# ASCII letters only; characters such as "ı" upper-case into the alphabet but are not letters of it.
_LETTER_INDEX: Dict[str, int] = {letter: i for i, letter in enumerate(ALPHABET)}
_LETTER_INDEX.update({letter.lower(): i for i, letter in enumerate(ALPHABET)})


def letter_case(char: str) -> Optional[LetterCase]:
    """Case of an alphabet letter, or None for anything outside the alphabet."""
    if char not in _LETTER_INDEX:
        return None
    return LetterCase.UPPER if char in ALPHABET else LetterCase.LOWER


def apply_case(letter: str, case: LetterCase) -> str:
    return letter.upper() if case is LetterCase.UPPER else letter.lower()


def shift_letter(char: str, shift: Any, mode: Any) -> str:
    case = letter_case(char)
    if case is None:
        return char
    new_index = shift_index(_LETTER_INDEX[char], shift, mode)
    return apply_case(ALPHABET[new_index], case)


def transform(text: Optional[Union[str, Iterable[str]]], shift: Any, mode: Any = Mode.ENCRYPT) -> str:
    """Apply the shift cipher to ``text``, one output character per input character.

    Letters keep their case, everything outside A-Z/a-z passes through untouched.
    ``shift`` is reduced mod 26 (unparseable values count as 0) and ``mode`` picks
    the direction: encrypt adds the shift, decrypt subtracts it.
    """
    if not text:
        return ""
    if not isinstance(text, str):
        text = "".join(text)
    shift = normalize_shift(shift)
    mode = normalize_mode(mode)
    return "".join(shift_letter(char, shift, mode) for char in text)
