"""
Codec Package

This package converts text and raw bytes to and from the 32-bit
words consumed by the cipher, and renders output as hexadecimal.
"""

from .block_codec import (
    string_to_words,
    words_to_string,
    bytes_to_words,
    words_to_bytes,
    pair_words,
    bytes_to_hex,
    words_to_hex,
)

__all__ = [
    'string_to_words', 'words_to_string', 'bytes_to_words', 'words_to_bytes',
    'pair_words', 'bytes_to_hex', 'words_to_hex',
]
