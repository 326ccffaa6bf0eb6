"""
RC5 Key Schedule Implementation

This module implements the RC5-32/12/16 key expansion, which mixes a
16-byte secret key into a table of 26 round-key words using the same
addition, rotation and XOR primitives as the cipher rounds.
"""

import logging
import secrets
from types import MappingProxyType
from typing import List, Tuple

from ..errors import InvalidKeyLength

logger = logging.getLogger(__name__)

WORD_SIZE = 32  # Word length in bits
WORD_BYTES = WORD_SIZE // 8
WORD_MASK = (1 << WORD_SIZE) - 1
ROUNDS = 12
KEY_BYTES = 16
KEY_WORDS = KEY_BYTES // WORD_BYTES
EXPANDED_KEY_SIZE = 2 * (ROUNDS + 1)

# Magic constants derived from e and the golden ratio
P32 = 0xB7E15163
Q32 = 0x9E3779B9

RC5_PARAMS = MappingProxyType({
    'word_size': WORD_SIZE,    # Bits per word
    'rounds': ROUNDS,          # Number of rounds
    'key_bytes': KEY_BYTES,    # Secret key length
    'block_bytes': 2 * WORD_BYTES
})


def rotate_left(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word left by the specified number of bits.

    Args:
        value: The word to rotate
        shift: The number of bits to rotate by (reduced modulo the word size)

    Returns:
        The rotated word
    """
    shift %= WORD_SIZE
    value &= WORD_MASK
    return ((value << shift) | (value >> (WORD_SIZE - shift))) & WORD_MASK


def rotate_right(value: int, shift: int) -> int:
    """
    Rotate a 32-bit word right by the specified number of bits.

    Args:
        value: The word to rotate
        shift: The number of bits to rotate by (reduced modulo the word size)

    Returns:
        The rotated word
    """
    shift %= WORD_SIZE
    value &= WORD_MASK
    return ((value >> shift) | (value << (WORD_SIZE - shift))) & WORD_MASK


def generate_key(key_size: int = KEY_BYTES) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def _check_key(key: bytes) -> bytes:
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"key must be bytes-like, not {type(key).__name__}")
    key = bytes(key)
    if len(key) != KEY_BYTES:
        raise InvalidKeyLength(len(key), KEY_BYTES)
    return key


def pack_key_words(key: bytes) -> List[int]:
    """
    Load the secret key bytes into KEY_WORDS little-endian words.

    Bytes are consumed from last to first, each one shifted in below the
    bytes already accumulated in its word, so key[0] ends up as the low
    byte of word 0.

    Args:
        key: The secret key (16 bytes)

    Returns:
        The key as a list of 4 words
    """
    key = _check_key(key)
    key_words = [0] * KEY_WORDS
    for i in range(KEY_BYTES - 1, -1, -1):
        key_words[i // WORD_BYTES] = ((key_words[i // WORD_BYTES] << 8) + key[i]) & WORD_MASK
    return key_words


def expand_key(key: bytes) -> Tuple[int, ...]:
    """
    Expand a secret key into the RC5 round-key table.

    Args:
        key: The secret key (16 bytes); any value is valid, including all zeros

    Returns:
        A tuple of EXPANDED_KEY_SIZE (26) words

    Raises:
        InvalidKeyLength: If the key is not exactly 16 bytes
    """
    key_words = pack_key_words(key)

    # Arithmetic progression modulo 2^32 seeded with P and stepped by Q
    table = [P32]
    for i in range(1, EXPANDED_KEY_SIZE):
        table.append((table[i - 1] + Q32) & WORD_MASK)

    # Mix the secret key into the table, three passes over the larger array
    a = b = 0
    i = j = 0
    for _ in range(3 * EXPANDED_KEY_SIZE):
        a = table[i] = rotate_left(table[i] + a + b, 3)
        b = key_words[j] = rotate_left(key_words[j] + a + b, a + b)
        i = (i + 1) % EXPANDED_KEY_SIZE
        j = (j + 1) % KEY_WORDS

    logger.debug(f"Expanded key into {len(table)} round-key words")
    return tuple(table)
