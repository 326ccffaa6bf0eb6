"""
RC5Cipher - RC5 Symmetric Block Cipher Library

This library implements the RC5 block cipher with 32-bit words,
12 rounds and a 128-bit key (RC5-32/12/16), built only from
modular addition, XOR and data-dependent rotations.

Key Features:
- 64-bit block made of two 32-bit words
- Key schedule mixing the secret key into 26 round-key words
- Text/word conversion and hex output helpers
- Diffusion analysis (avalanche effect, key sensitivity)
- Command-line demonstration
"""

__version__ = '0.1.0'
__author__ = 'RC5Cipher Team'

from .errors import RC5Error, InvalidKeyLength, InvalidBlock
from .key_schedule import expand_key, rotate_left, rotate_right, generate_key
from .cipher_core import RC5Cipher, encrypt_block, decrypt_block

__all__ = [
    'RC5Error', 'InvalidKeyLength', 'InvalidBlock',
    'expand_key', 'rotate_left', 'rotate_right', 'generate_key',
    'RC5Cipher', 'encrypt_block', 'decrypt_block',
]
