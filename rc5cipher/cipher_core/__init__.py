"""
Cipher Core Package

This package implements the RC5 block transform: encryption and
decryption of two-word blocks with an expanded key table, plus a
keyed cipher object that owns the table.
"""

from .block_cipher import RC5Cipher, encrypt_block, decrypt_block

__all__ = ['RC5Cipher', 'encrypt_block', 'decrypt_block']
