"""
Block Cipher Implementation

This module provides the core implementation of RC5-32/12/16, a
Feistel-like block cipher operating on a pair of 32-bit words with
data-dependent rotations, modular addition and XOR.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from ..errors import InvalidBlock
from ..key_schedule.rc5_key_schedule import (
    expand_key,
    rotate_left,
    rotate_right,
    EXPANDED_KEY_SIZE,
    ROUNDS,
    WORD_BYTES,
    WORD_MASK,
)

logger = logging.getLogger(__name__)

Block = Tuple[int, int]


def _check_block(block: Sequence[int]) -> Block:
    try:
        a, b = block
    except (TypeError, ValueError):
        raise InvalidBlock() from None
    for word in (a, b):
        if not isinstance(word, int) or isinstance(word, bool) or not 0 <= word <= WORD_MASK:
            raise InvalidBlock()
    return a, b


def _check_table(table: Sequence[int]) -> None:
    if len(table) != EXPANDED_KEY_SIZE:
        raise ValueError(f"Expanded key must hold exactly {EXPANDED_KEY_SIZE} words")


def encrypt_block(table: Sequence[int], plaintext: Sequence[int]) -> Block:
    """
    Encrypt a single two-word block with an expanded key table.

    Args:
        table: The expanded key table (26 words) from expand_key
        plaintext: The plaintext block (A, B)

    Returns:
        The ciphertext block (A, B)
    """
    _check_table(table)
    a, b = _check_block(plaintext)

    # Input whitening
    a = (a + table[0]) & WORD_MASK
    b = (b + table[1]) & WORD_MASK

    for i in range(1, ROUNDS + 1):
        a = (rotate_left(a ^ b, b) + table[2 * i]) & WORD_MASK
        b = (rotate_left(b ^ a, a) + table[2 * i + 1]) & WORD_MASK

    return a, b


def decrypt_block(table: Sequence[int], ciphertext: Sequence[int]) -> Block:
    """
    Decrypt a single two-word block with an expanded key table.

    Args:
        table: The expanded key table (26 words) from expand_key
        ciphertext: The ciphertext block (A, B)

    Returns:
        The plaintext block (A, B)
    """
    _check_table(table)
    a, b = _check_block(ciphertext)

    # Rounds in reverse; B is undone first since it was computed last
    for i in range(ROUNDS, 0, -1):
        b = rotate_right((b - table[2 * i + 1]) & WORD_MASK, a) ^ a
        a = rotate_right((a - table[2 * i]) & WORD_MASK, b) ^ b

    return (a - table[0]) & WORD_MASK, (b - table[1]) & WORD_MASK


class RC5Cipher:
    """
    RC5-32/12/16 block cipher keyed with a 16-byte secret.

    The expanded key table is an immutable tuple owned by the instance.
    encrypt/decrypt only read it and may be called from several threads
    at once. setup_key is the single writer: it builds the new table in
    full and then swaps the reference, and must not race another
    setup_key call on the same instance.
    """

    def __init__(self, key: bytes):
        """
        Initialize the cipher with a secret key.

        Args:
            key: The secret key (16 bytes)
        """
        self._table: Tuple[int, ...] = ()
        self.setup_key(key)

    def setup_key(self, key: bytes) -> None:
        """
        Expand a secret key, replacing any previous key schedule.

        Args:
            key: The secret key (16 bytes)

        Raises:
            InvalidKeyLength: If the key is not exactly 16 bytes
        """
        table = expand_key(key)
        rekey = bool(self._table)
        self._table = table
        logger.debug("Re-keyed cipher instance" if rekey else "Keyed cipher instance")

    @property
    def expanded_key(self) -> Tuple[int, ...]:
        """The expanded key table, an immutable tuple of 26 words."""
        return self._table

    def encrypt(self, plaintext: Sequence[int]) -> Block:
        """Encrypt one two-word block."""
        return encrypt_block(self._table, plaintext)

    def decrypt(self, ciphertext: Sequence[int]) -> Block:
        """Decrypt one two-word block."""
        return decrypt_block(self._table, ciphertext)

    def encrypt_words(self, words: Iterable[int]) -> List[int]:
        """
        Encrypt a word sequence as independent two-word blocks.

        No chaining is applied. An odd-length sequence is padded with a
        single zero word, so the output always has an even length.

        Args:
            words: The plaintext words

        Returns:
            The ciphertext words
        """
        return self._transform_words(words, encrypt_block)

    def decrypt_words(self, words: Iterable[int]) -> List[int]:
        """
        Decrypt a word sequence as independent two-word blocks.

        Args:
            words: The ciphertext words

        Returns:
            The plaintext words
        """
        return self._transform_words(words, decrypt_block)

    def _transform_words(self, words, transform) -> List[int]:
        table = self._table
        words = list(words)
        if len(words) % 2:
            words.append(0)
        result = []
        for i in range(0, len(words), 2):
            result.extend(transform(table, words[i:i + 2]))
        return result

    def block_size(self) -> int:
        """Block size in bytes."""
        return 2 * WORD_BYTES

    def destroy(self) -> None:
        """Overwrite the key schedule with zeros."""
        self._table = (0,) * EXPANDED_KEY_SIZE


if __name__ == "__main__":
    # Zero key, zero block vector from the RC5 paper
    cipher = RC5Cipher(bytes(16))
    ct = cipher.encrypt((0, 0))
    print(f"Ciphertext: {ct[0]:08X} {ct[1]:08X}")
    assert ct == (0xEEDBA521, 0x6D8F4B15)  # bytes 21A5DBEE 154B8F6D
    assert cipher.decrypt(ct) == (0, 0)
    print("Block cipher test passed!")
