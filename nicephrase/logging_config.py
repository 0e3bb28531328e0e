"""
Logging configuration
Passphrases and their byte forms are secrets: events log sizes, never contents
"""

import logging
import sys
from typing import Optional, Set, TextIO


class PassphraseFilter(logging.Filter):
    """Filter that redacts passphrase material"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "words",
        "hex",
        "bytes",
        "secret",
        "seed",
        "token",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if f"{key}=" in msg or f"{key}: " in msg:
                    # Likely contains a sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = None
                    break
        return True


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None):
    """Configure application logging"""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(PassphraseFilter())

    # Root logger
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Audit event logger
audit_logger = logging.getLogger("nicephrase.audit")


def log_conversion(kind: str, byte_count: int):
    """Log a successful conversion (size only)"""
    audit_logger.info(f"{kind} converted {byte_count} byte(s)")


def log_rejected(kind: str, reason: str):
    """Log a rejected conversion by error class, never by content"""
    audit_logger.warning(f"{kind} rejected ({reason})")


def log_random_failure(size: int):
    """Log an entropy source failure"""
    audit_logger.error(f"Random source failed while generating {size} byte(s)")


def log_custom_wordlist(path: str, fingerprint: str):
    """Log use of a non-canonical word table"""
    audit_logger.warning(
        f"Using non-canonical word table {path} (fingerprint {fingerprint[:12]}); "
        "passphrases will not decode with the niceware table"
    )


def log_dictionary_ready(fingerprint: str):
    """Log the dictionary fingerprint at startup"""
    audit_logger.info(f"Dictionary loaded (fingerprint {fingerprint[:12]})")
