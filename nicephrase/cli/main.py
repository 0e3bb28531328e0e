"""
Command line - convert between hex byte strings and passphrases

Usage:
    nicephrase from-bytes 7a40bcb12c870b52
    nicephrase to-bytes legalize rich couch axel
    nicephrase generate 16
    nicephrase serve --port 8000
"""

import argparse
import sys
from typing import List, Optional

from nicephrase import __version__
from nicephrase.codec import bytes_to_passphrase, generate_passphrase, passphrase_to_bytes
from nicephrase.config import settings, validate_settings
from nicephrase.errors import NicewareError
from nicephrase.limits import MAX_PASSPHRASE_BYTES, MIN_PASSPHRASE_BYTES
from nicephrase.utils.hexstring import format_hex, join_passphrase, parse_hex, split_passphrase
from nicephrase.wordlist import Dictionary, get_dictionary, load_dictionary

PREFIX = "[nicephrase]"


def print_error(message) -> None:
    print(f"{PREFIX} ERROR: {message}", file=sys.stderr)


def size_argument(value: str) -> int:
    """Accept only plain base-10 digits, as the size is a byte count"""
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"invalid number: {value}")
    return int(value)


def resolve_dictionary(args: argparse.Namespace) -> Dictionary:
    """Use the cached dictionary unless the command line overrides the table"""
    if args.wordlist is None and not args.allow_custom_wordlist:
        return get_dictionary()
    return load_dictionary(
        args.wordlist if args.wordlist is not None else settings.WORDLIST_PATH,
        allow_custom=args.allow_custom_wordlist or settings.ALLOW_CUSTOM_WORDLIST,
    )


def from_bytes(args: argparse.Namespace) -> int:
    data = parse_hex(args.byte_string)
    words = bytes_to_passphrase(data, resolve_dictionary(args))
    print(join_passphrase(words))
    return 0


def to_bytes(args: argparse.Namespace) -> int:
    # Words may arrive as separate arguments or as one quoted passphrase
    words = [word for arg in args.passphrase for word in split_passphrase(arg)]
    if not words:
        print_error("input looks empty to me")
        return 1

    data = passphrase_to_bytes(words, resolve_dictionary(args))
    print(format_hex(data))
    return 0


def generate(args: argparse.Namespace) -> int:
    size = settings.DEFAULT_GENERATE_SIZE if args.size is None else args.size
    generated = generate_passphrase(size, dictionary=resolve_dictionary(args))
    # first line is the bytes, second line is the passphrase
    print(generated.hex())
    print(generated.phrase)
    return 0


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    # The service reads the word table from settings on startup
    if args.wordlist is not None:
        settings.WORDLIST_PATH = args.wordlist
    if args.allow_custom_wordlist:
        settings.ALLOW_CUSTOM_WORDLIST = True

    uvicorn.run(
        "nicephrase.main:app",
        host=settings.HOST if args.host is None else args.host,
        port=settings.PORT if args.port is None else args.port,
        log_config=None,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nicephrase",
        description="Convert bytes to human-pronounceable passphrases and back",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--wordlist",
        metavar="PATH",
        default=None,
        help="Word table file, one word per line (default: the niceware table)",
    )
    parser.add_argument(
        "--allow-custom-wordlist",
        action="store_true",
        help="Accept a word table that is not the canonical niceware table",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    cmd = commands.add_parser("from-bytes", help="Convert bytes into a passphrase")
    cmd.add_argument("byte_string", help="A hex string (example: 7a40bcb12c870b52)")
    cmd.set_defaults(handler=from_bytes)

    cmd = commands.add_parser("to-bytes", help="Convert passphrase into bytes")
    cmd.add_argument(
        "passphrase",
        nargs="+",
        help="A passphrase (example: legalize rich couch axel)",
    )
    cmd.set_defaults(handler=to_bytes)

    cmd = commands.add_parser("generate", help="Generate a random passphrase")
    cmd.add_argument(
        "size",
        nargs="?",
        type=size_argument,
        default=None,
        help=(
            f"Amount of bytes to use, even and between {MIN_PASSPHRASE_BYTES} and "
            f"{MAX_PASSPHRASE_BYTES} (default: {settings.DEFAULT_GENERATE_SIZE})"
        ),
    )
    cmd.set_defaults(handler=generate)

    cmd = commands.add_parser("serve", help="Run the HTTP conversion service")
    cmd.add_argument("--host", default=None, help=f"Bind address (default: {settings.HOST})")
    cmd.add_argument("--port", type=int, default=None, help=f"Port (default: {settings.PORT})")
    cmd.set_defaults(handler=serve)

    commands.add_parser("help", help="Print this message")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    try:
        validate_settings(settings)
    except ValueError as exc:
        print_error(exc)
        return 1

    try:
        return args.handler(args)
    except NicewareError as exc:
        print_error(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
