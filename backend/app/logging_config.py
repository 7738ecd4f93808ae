"""
Logging configuration
Tokens, public keys and ciphertext are never written to the log
"""

import logging
import sys
from typing import Set


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "token",
        "secret",
        "api_key",
        "publickey",
        "public_key=",
        "encrypted",
        "authorization",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SensitiveDataFilter())

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
