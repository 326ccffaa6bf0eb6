"""
Diffusion Analysis

This module measures how well the cipher spreads single-bit changes,
both in the plaintext (avalanche effect) and in the key (key
sensitivity). Values close to 50% indicate good diffusion.
"""

import logging
from typing import Dict, Iterable, Sequence

import numpy as np

from ..cipher_core.block_cipher import RC5Cipher
from ..key_schedule.rc5_key_schedule import KEY_BYTES, WORD_MASK, WORD_SIZE

logger = logging.getLogger(__name__)

BLOCK_BITS = 2 * WORD_SIZE


def hamming_distance(a_words: Iterable[int], b_words: Iterable[int]) -> int:
    """
    Count the bits that differ between two equal-length word sequences.

    Args:
        a_words: First sequence of 32-bit words
        b_words: Second sequence of 32-bit words

    Returns:
        The number of differing bits
    """
    a = np.asarray(list(a_words), dtype=np.uint32)
    b = np.asarray(list(b_words), dtype=np.uint32)
    if a.shape != b.shape:
        raise ValueError("Word sequences must have the same length")
    diff = np.bitwise_xor(a, b)
    return int(np.unpackbits(diff.view(np.uint8)).sum())


def _flip_block_bit(block: Sequence[int], bit: int) -> tuple:
    value = ((block[0] << WORD_SIZE) | block[1]) ^ (1 << bit)
    return value >> WORD_SIZE, value & WORD_MASK


def avalanche_effect(cipher: RC5Cipher, block: Sequence[int]) -> float:
    """
    Measure the avalanche effect of the cipher on one plaintext block.

    Each of the 64 plaintext bits is flipped in turn and the resulting
    ciphertext is compared with the ciphertext of the original block.

    Args:
        cipher: A keyed cipher
        block: The plaintext block (A, B)

    Returns:
        Mean percentage of ciphertext bits changed per flipped bit
    """
    reference = cipher.encrypt(block)
    distances = np.array([
        hamming_distance(reference, cipher.encrypt(_flip_block_bit(block, bit)))
        for bit in range(BLOCK_BITS)
    ])
    return float(np.mean(distances) / BLOCK_BITS * 100)


def key_sensitivity(key: bytes, block: Sequence[int]) -> float:
    """
    Measure how decryption under a slightly wrong key departs from the plaintext.

    The block is encrypted with the given key, then decrypted once for
    each of the 128 keys that differ from it in a single bit.

    Args:
        key: The secret key (16 bytes)
        block: The plaintext block (A, B)

    Returns:
        Mean percentage of recovered plaintext bits that are wrong
    """
    ciphertext = RC5Cipher(key).encrypt(block)
    wrong_cipher = RC5Cipher(key)
    distances = []
    for bit in range(KEY_BYTES * 8):
        wrong_key = bytearray(key)
        wrong_key[bit // 8] ^= 1 << (bit % 8)
        wrong_cipher.setup_key(bytes(wrong_key))
        distances.append(hamming_distance(block, wrong_cipher.decrypt(ciphertext)))
    return float(np.mean(np.array(distances)) / BLOCK_BITS * 100)


def evaluate_cipher(key: bytes, block: Sequence[int]) -> Dict[str, float]:
    """
    Evaluate the diffusion properties of the cipher for a key and block.

    Args:
        key: The secret key (16 bytes)
        block: The plaintext block (A, B)

    Returns:
        A dictionary of percentages (50 is ideal for both)
    """
    avalanche = avalanche_effect(RC5Cipher(key), block)
    sensitivity = key_sensitivity(key, block)
    logger.info(f"Avalanche effect: {avalanche:.2f}%, key sensitivity: {sensitivity:.2f}%")

    return {
        'avalanche': avalanche,
        'key_sensitivity': sensitivity,
    }
