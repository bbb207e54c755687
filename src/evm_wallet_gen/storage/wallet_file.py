"""Append-only flat text file for generated wallets."""

import logging
from pathlib import Path
from typing import Union

from evm_wallet_gen.config.constants import (
    DEFAULT_WALLET_FILE,
    FIELD_SEPARATOR,
    RECORD_FIELDS,
    RECORD_SEPARATOR,
)
from evm_wallet_gen.wallet.generator import WalletEntry

logger = logging.getLogger(__name__)


def format_record(entry: WalletEntry) -> str:
    """Serialize an entry as one pipe-delimited line, newline included."""
    values = (entry.address, entry.private_key, entry.mnemonic)
    fields = [
        f"{name}{FIELD_SEPARATOR}{value}" for name, value in zip(RECORD_FIELDS, values)
    ]
    return RECORD_SEPARATOR.join(fields) + "\n"


def parse_record(line: str) -> dict[str, str]:
    """
    Parse one wallet file line back into its fields.

    Args:
        line: A line written by ``format_record``.

    Returns:
        Dict keyed by "Address", "Private Key" and "Mnemonic".

    Raises:
        ValueError: If the line does not hold exactly the expected fields.
    """
    parts = line.rstrip("\n").split(RECORD_SEPARATOR)
    if len(parts) != len(RECORD_FIELDS):
        raise ValueError(
            f"Expected {len(RECORD_FIELDS)} fields, got {len(parts)}: {line!r}"
        )

    record = {}
    for part, expected in zip(parts, RECORD_FIELDS):
        name, sep, value = part.partition(FIELD_SEPARATOR)
        if not sep or name != expected:
            raise ValueError(f"Expected field {expected!r}, got {part!r}")
        record[name] = value
    return record


class WalletFileSink:
    """
    Appends generated wallets to a plain text file, one line per wallet.

    The file is opened in append mode for each entry and closed right after,
    so earlier lines survive a failure on a later write.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_WALLET_FILE):
        """Initialize the sink.

        Args:
            path: Destination file. Created on first append.
        """
        self.path = Path(path)

    def append(self, entry: WalletEntry) -> bool:
        """
        Appends one entry to the file.

        Args:
            entry: The wallet entry to persist.

        Returns:
            True if the line was written, False if the write failed.
        """
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(format_record(entry))
        except OSError as e:
            logger.error(f"Error writing to file {self.path}: {e}")
            return False

        logger.debug(f"Saved wallet #{entry.sequence_number} to {self.path}")
        return True

    def read_records(self) -> list[dict[str, str]]:
        """Read back every record in the file, skipping blank lines."""
        if not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as f:
            return [parse_record(line) for line in f if line.strip()]
