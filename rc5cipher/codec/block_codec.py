"""
Text and Word Conversion

This module converts between text, raw bytes and 32-bit words for
feeding messages to the block cipher and printing its output.
Words are always packed most-significant byte first.
"""

from typing import Iterable, List, Sequence, Tuple

from ..key_schedule.rc5_key_schedule import WORD_BYTES


def _bytes_to_int(data: bytes) -> int:
    """Convert bytes to an integer (big-endian)"""
    return int.from_bytes(data, byteorder='big')


def _int_to_bytes(value: int, length: int) -> bytes:
    """Convert an integer to bytes (big-endian)"""
    return value.to_bytes(length, byteorder='big')


def bytes_to_words(data: bytes) -> List[int]:
    """
    Split raw bytes into 32-bit words.

    Args:
        data: Bytes whose length is a multiple of 4

    Returns:
        The words, most-significant byte first
    """
    if len(data) % WORD_BYTES:
        raise ValueError(f"Data length must be a multiple of {WORD_BYTES} bytes")
    return [_bytes_to_int(data[i:i + WORD_BYTES]) for i in range(0, len(data), WORD_BYTES)]


def words_to_bytes(words: Iterable[int]) -> bytes:
    """
    Join 32-bit words into raw bytes.

    Args:
        words: The words to serialize

    Returns:
        4 bytes per word, most-significant byte first
    """
    return b''.join(_int_to_bytes(word, WORD_BYTES) for word in words)


def string_to_words(text: str) -> List[int]:
    """
    Convert a string to 32-bit words.

    The UTF-8 encoding is zero-padded at the end to a whole number of
    words. The empty string yields no words.

    Args:
        text: The text to convert

    Returns:
        The words holding the encoded text
    """
    data = text.encode('utf-8')
    remainder = len(data) % WORD_BYTES
    if remainder:
        data += bytes(WORD_BYTES - remainder)
    return bytes_to_words(data)


def words_to_string(words: Iterable[int]) -> str:
    """
    Convert 32-bit words back to a string.

    Trailing zero bytes are treated as padding and removed, so a text
    that itself ends in NUL characters does not survive the round trip.
    Bytes that are not valid UTF-8 (for instance the output of a
    decryption with the wrong key) are replaced rather than rejected.

    Args:
        words: The words to convert

    Returns:
        The decoded text
    """
    return words_to_bytes(words).rstrip(b'\x00').decode('utf-8', errors='replace')


def pair_words(words: Sequence[int]) -> List[Tuple[int, int]]:
    """Group words into two-word blocks, padding an odd tail with a zero word."""
    words = list(words)
    if len(words) % 2:
        words.append(0)
    return [(words[i], words[i + 1]) for i in range(0, len(words), 2)]


def bytes_to_hex(data: bytes) -> str:
    return data.hex().upper()


def words_to_hex(words: Iterable[int]) -> str:
    return bytes_to_hex(words_to_bytes(words))
