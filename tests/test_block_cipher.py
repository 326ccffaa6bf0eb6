import random
import unittest

from rc5cipher.analysis import hamming_distance
from rc5cipher.cipher_core import RC5Cipher, decrypt_block, encrypt_block
from rc5cipher.codec import string_to_words, words_to_hex
from rc5cipher.errors import InvalidBlock, InvalidKeyLength
from rc5cipher.key_schedule import expand_key, generate_key

# RC5-32/12/16 examples from Rivest's RC5 paper, each plaintext being
# the previous ciphertext. All values are byte strings in hex.
PAPER_VECTORS = [
    ("00000000000000000000000000000000", "0000000000000000", "21A5DBEE154B8F6D"),
    ("915F4619BE41B2516355A50110A9CE91", "21A5DBEE154B8F6D", "F7C013AC5B2B8952"),
    ("783348E75AEB0F2FD7B169BB8DC16787", "F7C013AC5B2B8952", "2F42B3B70369FC92"),
    ("DC49DB1375A5584F6485B413B5F12BAF", "2F42B3B70369FC92", "65C178B284D197CC"),
    ("5269F149D41BA0152497574D7F153125", "65C178B284D197CC", "EB44E415DA319824"),
]


def block_from_hex(block_hex):
    """Load 8 bytes as the two little-endian words (A, B)."""
    data = bytes.fromhex(block_hex)
    return int.from_bytes(data[:4], 'little'), int.from_bytes(data[4:], 'little')


class TestRC5Vectors(unittest.TestCase):
    def test_block_from_hex(self):
        self.assertEqual(block_from_hex("21A5DBEE154B8F6D"), (0xEEDBA521, 0x6D8F4B15))

    def test_paper_vectors(self):
        for key_hex, plaintext_hex, ciphertext_hex in PAPER_VECTORS:
            with self.subTest(key=key_hex):
                plaintext = block_from_hex(plaintext_hex)
                ciphertext = block_from_hex(ciphertext_hex)
                cipher = RC5Cipher(bytes.fromhex(key_hex))
                self.assertEqual(cipher.encrypt(plaintext), ciphertext)
                self.assertEqual(cipher.decrypt(ciphertext), plaintext)

    def test_module_functions_match_instance(self):
        for key_hex, plaintext_hex, ciphertext_hex in PAPER_VECTORS:
            with self.subTest(key=key_hex):
                plaintext = block_from_hex(plaintext_hex)
                ciphertext = block_from_hex(ciphertext_hex)
                table = expand_key(bytes.fromhex(key_hex))
                self.assertEqual(encrypt_block(table, plaintext), ciphertext)
                self.assertEqual(decrypt_block(table, ciphertext), plaintext)

    def test_testword_vector(self):
        key = b"0123456789012345"
        plaintext = tuple(string_to_words("testword"))
        self.assertEqual(plaintext, (0x74657374, 0x776F7264))

        ciphertext = RC5Cipher(key).encrypt(plaintext)
        self.assertEqual(ciphertext, (0x6C8867AC, 0xF1635F44))
        self.assertEqual(RC5Cipher(key).decrypt(ciphertext), plaintext)
        self.assertEqual(words_to_hex(ciphertext), "6C8867ACF1635F44")


class TestRC5Cipher(unittest.TestCase):
    def test_round_trip(self):
        rng = random.Random(1234)
        for _ in range(50):
            key = bytes(rng.getrandbits(8) for _ in range(16))
            block = (rng.getrandbits(32), rng.getrandbits(32))
            cipher = RC5Cipher(key)
            self.assertEqual(cipher.decrypt(cipher.encrypt(block)), block)

    def test_round_trip_edge_blocks(self):
        cipher = RC5Cipher(generate_key())
        for block in [(0, 0), (0xFFFFFFFF, 0xFFFFFFFF), (0, 0xFFFFFFFF), (1, 0x80000000)]:
            with self.subTest(block=block):
                self.assertEqual(cipher.decrypt(cipher.encrypt(block)), block)

    def test_zero_key(self):
        zero = RC5Cipher(bytes(16))
        self.assertEqual(len(zero.expanded_key), 26)

        block = tuple(string_to_words("testword"))
        ciphertext = RC5Cipher(b"0123456789012345").encrypt(block)
        wrong = zero.decrypt(ciphertext)
        self.assertNotEqual(wrong, block)
        self.assertGreater(hamming_distance(wrong, block), 10)

    def test_setup_key_replaces_schedule(self):
        first = b"0123456789012345"
        second = b"5432109876543210"
        cipher = RC5Cipher(first)
        ciphertext = cipher.encrypt((1, 2))

        cipher.setup_key(second)
        self.assertEqual(cipher.expanded_key, RC5Cipher(second).expanded_key)
        self.assertNotEqual(cipher.decrypt(ciphertext), (1, 2))

        cipher.setup_key(first)
        self.assertEqual(cipher.decrypt(ciphertext), (1, 2))

    def test_failed_setup_key_keeps_schedule(self):
        cipher = RC5Cipher(b"0123456789012345")
        table = cipher.expanded_key
        with self.assertRaises(InvalidKeyLength):
            cipher.setup_key(b"short")
        self.assertEqual(cipher.expanded_key, table)

    def test_invalid_key(self):
        with self.assertRaises(InvalidKeyLength):
            RC5Cipher(bytes(15))  # Too short

        with self.assertRaises(InvalidKeyLength):
            RC5Cipher(bytes(17))  # Too long

    def test_invalid_block(self):
        cipher = RC5Cipher(bytes(16))
        for block in [(1,), (1, 2, 3), (-1, 0), (0, 1 << 32), ("a", 0), (1.0, 2), None, (True, 0)]:
            with self.subTest(block=block):
                with self.assertRaises(InvalidBlock):
                    cipher.encrypt(block)
                with self.assertRaises(InvalidBlock):
                    cipher.decrypt(block)

    def test_invalid_table(self):
        with self.assertRaises(ValueError):
            encrypt_block((0,) * 25, (0, 0))

    def test_words_round_trip(self):
        cipher = RC5Cipher(b"0123456789012345")
        words = [0x11111111, 0x22222222, 0x33333333, 0x44444444]
        ciphertext = cipher.encrypt_words(words)
        self.assertEqual(len(ciphertext), 4)
        self.assertEqual(ciphertext[:2], list(cipher.encrypt(words[:2])))
        self.assertEqual(ciphertext[2:], list(cipher.encrypt(words[2:])))
        self.assertEqual(cipher.decrypt_words(ciphertext), words)

    def test_words_odd_length_padded(self):
        cipher = RC5Cipher(b"0123456789012345")
        ciphertext = cipher.encrypt_words([0x61626300])
        self.assertEqual(len(ciphertext), 2)
        self.assertEqual(cipher.decrypt_words(ciphertext), [0x61626300, 0])

    def test_words_empty(self):
        cipher = RC5Cipher(b"0123456789012345")
        self.assertEqual(cipher.encrypt_words([]), [])
        self.assertEqual(cipher.decrypt_words([]), [])

    def test_block_size(self):
        self.assertEqual(RC5Cipher(bytes(16)).block_size(), 8)

    def test_destroy(self):
        cipher = RC5Cipher(b"0123456789012345")
        cipher.destroy()
        self.assertEqual(len(cipher.expanded_key), 26)
        for word in cipher.expanded_key:
            self.assertEqual(word, 0)


if __name__ == "__main__":
    unittest.main()
