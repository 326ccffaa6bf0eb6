"""
Key Schedule Package

This package implements the RC5 key expansion algorithm that mixes
a secret key into the table of round keys used by the block cipher.
"""

from .rc5_key_schedule import (
    expand_key,
    pack_key_words,
    generate_key,
    rotate_left,
    rotate_right,
    WORD_SIZE,
    WORD_MASK,
    ROUNDS,
    KEY_BYTES,
    KEY_WORDS,
    EXPANDED_KEY_SIZE,
    P32,
    Q32,
    RC5_PARAMS,
)

__all__ = [
    'expand_key', 'pack_key_words', 'generate_key', 'rotate_left', 'rotate_right',
    'WORD_SIZE', 'WORD_MASK', 'ROUNDS', 'KEY_BYTES', 'KEY_WORDS',
    'EXPANDED_KEY_SIZE', 'P32', 'Q32', 'RC5_PARAMS',
]
