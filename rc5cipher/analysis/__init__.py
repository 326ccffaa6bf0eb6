"""
Analysis Package

This package measures diffusion properties of the cipher, such as
the avalanche effect and sensitivity to single-bit key changes.
"""

from .diffusion import hamming_distance, avalanche_effect, key_sensitivity, evaluate_cipher

__all__ = ['hamming_distance', 'avalanche_effect', 'key_sensitivity', 'evaluate_cipher']
