#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR SHIFT
━━━━━━━━━━━━
Shift cipher over the 26-letter Latin alphabet.

  * case is kept per character, lookup is case-insensitive
  * anything outside a-z (digits, punctuation, Cyrillic, emoji...) is copied as is
  * key is a fixed range 0 - 999999, reduced mod 26
"""

from enum import Enum
from functools import lru_cache
from operator import index
from types import MappingProxyType
from typing import Mapping


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════════

ALPHABET = 'abcdefghijklmnopqrstuvwxyz'
ALPHABET_SIZE = len(ALPHABET)  # 26

POSITIONS: Mapping[str, int] = MappingProxyType(
    {letter: pos for pos, letter in enumerate(ALPHABET)}
)

MIN_KEY = 0
MAX_KEY = 999_999

KEY_ERROR_MSG = "the key parameter must be a positive number between 0 - 999999."


class Mode(Enum):
    ENCRYPT = 'encrypt'
    DECRYPT = 'decrypt'


class CaesarKeyError(ValueError):
    """Key outside of [MIN_KEY, MAX_KEY]. The message never echoes the value."""

    def __init__(self):
        super().__init__(KEY_ERROR_MSG)


# ═══════════════════════════════════════════════════════════════════════════════
# SHIFT
# ═══════════════════════════════════════════════════════════════════════════════

def validate_key(key: int) -> int:
    key = index(key)
    if key < MIN_KEY or key > MAX_KEY:
        raise CaesarKeyError()
    return key


@lru_cache(maxsize=ALPHABET_SIZE)
def _shifted(shift: int) -> str:
    """ALPHABET rotated so that _shifted(s)[p] == ALPHABET[(p + s) % 26]."""
    return ALPHABET[shift:] + ALPHABET[:shift]


def _offset(key: int, mode: Mode) -> int:
    # Python's % already lands in [0, 25] for a negative dividend
    if mode is Mode.ENCRYPT:
        return key % ALPHABET_SIZE
    return -key % ALPHABET_SIZE


def transform(text: str, key: int, mode: Mode) -> str:
    """
    Shift every letter of `text` by `key` positions, forward for
    Mode.ENCRYPT and backward for Mode.DECRYPT.

    Raises CaesarKeyError before touching the text if the key is out of range.
    The result always has the same number of characters as the input.
    """
    key = validate_key(key)
    if not isinstance(mode, Mode):
        mode = Mode(mode)

    table = _shifted(_offset(key, mode))
    result = []

    for char in text:
        # lower() can expand to several chars ('İ' -> 'i̇'), only the first is looked up
        pos = POSITIONS.get(char.lower()[:1])
        if pos is None:
            result.append(char)
            continue
        new_char = table[pos]
        result.append(new_char.upper() if char.isupper() else new_char)

    return ''.join(result)


def encrypt(text: str, key: int) -> str:
    return transform(text, key, Mode.ENCRYPT)


def decrypt(text: str, key: int) -> str:
    return transform(text, key, Mode.DECRYPT)
