# nicephrase text helpers
from nicephrase.utils.hexstring import (
    format_hex,
    join_passphrase,
    parse_hex,
    split_passphrase,
)

__all__ = ["format_hex", "join_passphrase", "parse_hex", "split_passphrase"]
