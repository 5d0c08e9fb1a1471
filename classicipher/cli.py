"""
Command-line front end for the cipher engine.

Reads a payload from --text, a file or stdin, runs the selected cipher
and writes the result to stdout or a file.
"""

import sys
import math
import argparse
import logging
import re
from typing import List, Optional

from . import __version__
from .cipher_core import CIPHER_REGISTRY, affine_mapping
from .config import OUTPUT_FORMATS, load_config
from .engine import CipherKind, decrypt, encrypt, format_output
from .keys import generate_affine_key, generate_byte_key, generate_hill_key, generate_letter_key

logger = logging.getLogger(__name__)


def parse_matrix(text: str) -> List[List[int]]:
    """
    Parse a row-major Hill key such as "3 3 2 5" or "3,3;2,5".

    Raises:
        ValueError: If the values are not integers or do not form a square
    """
    values = [int(v) for v in re.split(r'[\s,;]+', text.strip()) if v]
    size = math.isqrt(len(values))
    if not values or size * size != len(values):
        raise ValueError(f"Matrix needs a square number of entries, got {len(values)}")
    return [values[row * size:(row + 1) * size] for row in range(size)]


def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher in CIPHER_REGISTRY.items():
        print(f"  {name:<10} {cipher.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def generate_key(kind: CipherKind, args, hill_attempts: int) -> str:
    """Produce printable random key material for the selected cipher."""
    if kind is CipherKind.AFFINE:
        key = generate_affine_key()
        plain, cipher = affine_mapping(key)
        return f"--a {key.a} --b {key.b}\n{' '.join(plain)}\n{' '.join(cipher)}"
    if kind is CipherKind.HILL:
        key = generate_hill_key(args.size, hill_attempts)
        return ' '.join(str(v) for row in key.matrix for v in row)
    if kind is CipherKind.EXTENDED:
        return generate_byte_key(args.length).data.hex()
    return generate_letter_key(args.length).letters


def _raw_key(kind: CipherKind, args):
    if kind is CipherKind.AFFINE:
        if args.a is None or args.b is None:
            sys.exit("Error: The affine cipher needs both --a and --b.")
        return (args.a, args.b)

    if kind is CipherKind.HILL:
        if not args.matrix:
            sys.exit("Error: The Hill cipher needs a key matrix (--matrix).")
        try:
            return parse_matrix(args.matrix)
        except ValueError as e:
            sys.exit(f"Error: Invalid matrix: {e}")

    if args.key is None:
        sys.exit("Error: Key is required (-k/--key).")
    if kind is CipherKind.EXTENDED and args.key.startswith('hex:'):
        try:
            return bytes.fromhex(args.key[4:])
        except ValueError as e:
            sys.exit(f"Error: Invalid hex key: {e}")
    return args.key


def _read_input(args):
    if args.binary:
        if args.text:
            sys.exit("Error: --binary cannot be combined with --text.")
        if args.input:
            try:
                with open(args.input, "rb") as f:
                    return f.read()
            except OSError as e:
                sys.exit(f"Error: Cannot read '{args.input}': {e}")
        return sys.stdin.buffer.read()

    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except UnicodeDecodeError as e:
            sys.exit(f"Error: '{args.input}' is not UTF-8 text ({e}); use --binary for raw bytes.")
        except OSError as e:
            sys.exit(f"Error: Cannot read '{args.input}': {e}")
    if sys.stdin.isatty():
        print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:", file=sys.stderr)
    try:
        # Raw bytes so CR/LF in extended ciphertext are not translated
        return sys.stdin.buffer.read().decode("utf-8")
    except UnicodeDecodeError as e:
        sys.exit(f"Error: Standard input is not UTF-8 text ({e}); use --binary for raw bytes.")
    except KeyboardInterrupt:
        sys.exit(0)


def _write_output(result, args, newline: bool = True):
    if isinstance(result, bytes):
        if args.output:
            with open(args.output, "wb") as f:
                f.write(result)
        else:
            sys.stdout.buffer.write(result)
            sys.stdout.flush()
        return

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    elif newline:
        print(result)
    else:
        # Every character of extended ciphertext is payload
        sys.stdout.flush()
        sys.stdout.buffer.write(result.encode("utf-8"))
        sys.stdout.flush()


def build_parser(default_format: str = 'no-spaces') -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicipher",
        description="Classical cipher engine: Vigenere, autokey, extended Vigenere, affine, Playfair, Hill",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<10}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-c", "--cipher", choices=[kind.value for kind in CipherKind], default="vigenere",
                        help=f"Select cipher (default: vigenere).\n{method_help}")

    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")
    action_group.add_argument("-g", "--generate-key", action="store_true",
                              help="Print random key material for the selected cipher")

    # Key material
    parser.add_argument("-k", "--key", help="Key for vigenere, autokey, playfair and extended\n"
                                            "(extended accepts 'hex:<digits>' for raw bytes)")
    parser.add_argument("--a", type=int, help="Affine multiplier (coprime with 26)")
    parser.add_argument("--b", type=int, help="Affine shift")
    parser.add_argument("--matrix", help='Hill key matrix, row-major, e.g. "3 3 2 5"')

    # Key generation
    parser.add_argument("--size", type=int, default=2, help="Hill matrix size for --generate-key (default: 2)")
    parser.add_argument("--length", type=int, default=8, help="Key length for --generate-key (default: 8)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")
    parser.add_argument("-o", "--output", help="Output file path")
    parser.add_argument("--binary", action="store_true",
                        help="Treat input and output as raw bytes (extended cipher only)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=default_format,
                        help=f"Text output format (default: {default_format})")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = load_config()
    except ValueError as e:
        sys.exit(f"Configuration Error: {e}")

    args = build_parser(config.output_format).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format="[%(levelname)s] %(name)s: %(message)s"
    )

    if args.list:
        list_ciphers()
        return 0

    kind = CipherKind(args.cipher)

    if args.generate_key:
        try:
            print(generate_key(kind, args, config.hill_attempts))
        except ValueError as e:
            sys.exit(f"Key Generation Error: {e}")
        return 0

    if args.binary and kind is not CipherKind.EXTENDED:
        sys.exit(f"Error: Cipher '{kind.value}' does not support binary input.")

    raw_key = _raw_key(kind, args)
    payload = _read_input(args)

    action = "Encrypt" if args.encrypt else "Decrypt"
    try:
        if args.encrypt:
            result = encrypt(kind, raw_key, payload)
        else:
            result = decrypt(kind, raw_key, payload)
    except ValueError as e:
        sys.exit(f"{action} Error: {e}")

    logger.info(f"{action}ed {len(payload)} input symbol(s) with '{kind.value}'")

    try:
        _write_output(format_output(result, args.format, config.group_size), args,
                      newline=kind is not CipherKind.EXTENDED)
    except OSError as e:
        sys.exit(f"Error writing output: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
