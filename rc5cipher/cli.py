"""
Command-line demonstration of the RC5 cipher.

Encrypts a text with the given key, decrypts it with the same key,
then re-keys the cipher with an all-zero key and decrypts again to
show that the wrong key yields unrelated output.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .analysis import evaluate_cipher
from .cipher_core import RC5Cipher
from .codec import pair_words, string_to_words, words_to_hex, words_to_string
from .errors import RC5Error
from .key_schedule import KEY_BYTES, RC5_PARAMS, generate_key

logger = logging.getLogger(__name__)

KEY_ENV_VAR = 'RC5_KEY'
LOG_LEVEL_ENV_VAR = 'RC5_LOG_LEVEL'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc5cipher",
        description=(
            f"RC5-{RC5_PARAMS['word_size']}/{RC5_PARAMS['rounds']}/{RC5_PARAMS['key_bytes']} "
            "encryption demo"
        ),
    )
    key_group = parser.add_mutually_exclusive_group()
    key_group.add_argument("--key", help=f"Secret key as text, exactly {KEY_BYTES} bytes in UTF-8")
    key_group.add_argument("--key-hex", help=f"Secret key as {2 * KEY_BYTES} hex digits")
    key_group.add_argument("--random-key", action="store_true", help="Use a freshly generated key")
    parser.add_argument("--analyze", action="store_true", help="Print avalanche and key sensitivity")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("text", help="Plaintext to encrypt")
    return parser


def _encode_arg(value: str, name: str, parser: argparse.ArgumentParser) -> bytes:
    try:
        return value.encode('utf-8')
    except UnicodeEncodeError:
        parser.error(f"{name} is not valid UTF-8 text")


def resolve_key(args: argparse.Namespace, parser: argparse.ArgumentParser) -> bytes:
    """
    Pick the secret key from the command line or the environment.

    The key is returned as given; its length is checked by the key
    schedule, never padded or truncated here.
    """
    if args.random_key:
        return generate_key()
    if args.key_hex is not None:
        try:
            return bytes.fromhex(args.key_hex)
        except ValueError:
            parser.error("--key-hex must be an even number of hex digits")
    if args.key is not None:
        return _encode_arg(args.key, "--key", parser)
    env_key = os.environ.get(KEY_ENV_VAR)
    if env_key:
        return _encode_arg(env_key, KEY_ENV_VAR, parser)
    parser.error(f"no key given (use --key, --key-hex, --random-key or set {KEY_ENV_VAR})")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    key = resolve_key(args, parser)
    try:
        plaintext = string_to_words(args.text)
    except UnicodeEncodeError:
        parser.error("text is not valid UTF-8")

    try:
        cipher = RC5Cipher(key)
        ciphertext = cipher.encrypt_words(plaintext)
        decrypted = cipher.decrypt_words(ciphertext)

        print(f"Text: {args.text}")
        print(f"Ciphertext: {words_to_hex(ciphertext)}")
        print(f"Decrypted (right key): {words_to_string(decrypted)}")

        cipher.setup_key(bytes(KEY_BYTES))
        print(f"Decrypted (wrong key): {words_to_string(cipher.decrypt_words(ciphertext))}")

        if args.analyze:
            blocks = pair_words(plaintext) or [(0, 0)]
            metrics = evaluate_cipher(key, blocks[0])
            print(f"Avalanche effect: {metrics['avalanche']:.2f}%")
            print(f"Key sensitivity: {metrics['key_sensitivity']:.2f}%")
    except RC5Error as e:
        logger.error(f"{e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
