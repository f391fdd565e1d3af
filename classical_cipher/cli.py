"""
classical-cipher command line
=============================
Run:  classical-cipher -c vigenere -k hello -i plain.txt
  or: echo "Hello, World" | python -m classical_cipher -k 10

Reads text from a file or stdin, keeps only its letters (upper-cased),
encrypts or decrypts it and writes the result to a file or stdout.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from . import __version__
from .ciphers.base import CipherMode, CipherType
from .config import get_config
from .dispatch import ParallelDispatcher
from .exceptions import InvalidKey
from .factory import cipher_factory
from .sanitize import sanitize_text

logger = logging.getLogger(__name__)

NULL_CAESAR_KEY = "0"


@dataclass
class ProgramSettings:
    input_file:  Optional[str] = None
    output_file: Optional[str] = None
    cipher_type: CipherType = CipherType.CAESAR
    cipher_key:  Optional[str] = None
    cipher_mode: CipherMode = CipherMode.ENCRYPT
    workers:     Optional[int] = None
    verbose:     bool = False


def _worker_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid worker count: {value!r}") from None
    if count < 1:
        raise argparse.ArgumentTypeError("worker count must be at least 1")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classical-cipher",
        description="Encrypts/decrypts input alphabetic text using classical ciphers.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-i", dest="input_file", metavar="FILE",
                        help="read text to be processed from FILE (stdin if omitted)")
    parser.add_argument("-o", dest="output_file", metavar="FILE",
                        help="write processed text to FILE (stdout if omitted)")
    parser.add_argument("-c", dest="cipher", default=CipherType.CAESAR.value,
                        choices=[t.value for t in CipherType],
                        help="cipher to use (default: caesar)")
    parser.add_argument("-k", dest="key", metavar="KEY",
                        help="cipher key; caesar falls back to the null key 0")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--encrypt", dest="mode", action="store_const",
                      const=CipherMode.ENCRYPT, help="encrypt the input (default)")
    mode.add_argument("--decrypt", dest="mode", action="store_const",
                      const=CipherMode.DECRYPT, help="decrypt the input")
    parser.set_defaults(mode=CipherMode.ENCRYPT)
    parser.add_argument("-w", "--workers", type=_worker_count, metavar="N",
                        help="number of worker threads (default: CIPHER_WORKERS or 12)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug output to stderr")
    return parser


def process_command_line(argv: Optional[List[str]] = None) -> ProgramSettings:
    args = build_parser().parse_args(argv)
    return ProgramSettings(
        input_file=args.input_file,
        output_file=args.output_file,
        cipher_type=CipherType(args.cipher),
        cipher_key=args.key,
        cipher_mode=args.mode,
        workers=args.workers,
        verbose=args.verbose,
    )


def _read_input(settings: ProgramSettings) -> str:
    if settings.input_file:
        with open(settings.input_file, encoding="utf-8", errors="replace") as fh:
            return fh.read()
    return sys.stdin.read()


def _write_output(settings: ProgramSettings, text: str) -> None:
    if settings.output_file:
        with open(settings.output_file, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    settings = process_command_line(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else config.LOG_LEVEL,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    key = settings.cipher_key
    if key is None and settings.cipher_type is CipherType.CAESAR:
        key = NULL_CAESAR_KEY
    try:
        cipher = cipher_factory(settings.cipher_type, key or "")
    except InvalidKey as e:
        print(f"[error] Invalid key: {e}", file=sys.stderr)
        return 1

    try:
        text = sanitize_text(_read_input(settings))
    except OSError as e:
        print(f"[error] failed to read input file '{settings.input_file}': {e}",
              file=sys.stderr)
        return 1

    dispatcher = ParallelDispatcher(settings.workers or config.WORKERS)
    output = dispatcher.run(cipher, text, settings.cipher_mode)

    try:
        _write_output(settings, output)
    except OSError as e:
        print(f"[error] failed to write output file '{settings.output_file}': {e}",
              file=sys.stderr)
        return 1
    return 0
