"""
Error Classes

Exceptions raised at the boundary of the cipher core. The arithmetic
itself never fails; only malformed keys and blocks are rejected.
"""


class RC5Error(Exception):
    """Base class for rc5cipher errors"""

    pass


class InvalidKeyLength(RC5Error, ValueError):
    def __init__(self, length: int, expected: int = 16):
        self.length = length
        self.expected = expected
        super().__init__(
            f"rc5: key must be {expected} bytes ({expected * 8} bits), got {length}"
        )


class InvalidBlock(RC5Error, ValueError):
    def __init__(self, reason: str = "block must be two 32-bit unsigned words"):
        super().__init__(f"rc5: {reason}")
