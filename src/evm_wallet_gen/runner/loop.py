"""Generate, display and persist loop over the requested wallet count."""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from evm_wallet_gen.config.constants import WARNING_TIME_FORMAT
from evm_wallet_gen.display.box import BoxFormatter
from evm_wallet_gen.display.console import print_warning
from evm_wallet_gen.storage.wallet_file import WalletFileSink
from evm_wallet_gen.wallet.generator import EthWalletGenerator, WalletEntry

logger = logging.getLogger(__name__)

# Optional sign and leading ASCII digits; anything after them is ignored
COUNT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


class InvalidCountError(ValueError):
    """Raised when the requested wallet count is not a positive integer."""


def parse_count(text: str) -> int:
    """
    Parses the operator's wallet count from its leading digits.

    Trailing text is ignored, so "3 wallets" and "2.5" read as 3 and 2.

    Args:
        text: Raw input line.

    Returns:
        The requested count, always >= 1.

    Raises:
        InvalidCountError: If the text does not start with a base-10 integer
            or the integer is <= 0.
    """
    match = COUNT_PATTERN.match(text)
    if not match:
        raise InvalidCountError(f"Not a number: {text!r}")

    count = int(match.group(1))
    if count <= 0:
        raise InvalidCountError(f"Count must be positive, got {count}")
    return count


class IterationStatus(str, Enum):
    """Outcome of a single generate-display-save iteration."""

    SAVED = "SAVED"
    GENERATION_FAILED = "GENERATION_FAILED"
    PERSIST_FAILED = "PERSIST_FAILED"


@dataclass(frozen=True)
class IterationResult:
    """Result of one iteration. Never carries key material."""

    index: int
    status: IterationStatus
    address: Optional[str] = None


@dataclass
class RunSummary:
    """Aggregated outcome of a run."""

    requested: int
    results: list[IterationResult] = field(default_factory=list)

    def _count(self, status: IterationStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def saved(self) -> int:
        """Wallets displayed and written to the file."""
        return self._count(IterationStatus.SAVED)

    @property
    def generation_failures(self) -> int:
        """Iterations where the generator returned no address."""
        return self._count(IterationStatus.GENERATION_FAILED)

    @property
    def persist_failures(self) -> int:
        """Wallets displayed but not written to the file."""
        return self._count(IterationStatus.PERSIST_FAILED)

    @property
    def generated(self) -> int:
        """Wallets delivered to the console, saved or not."""
        return self.saved + self.persist_failures

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        return {
            "requested": self.requested,
            "generated": self.generated,
            "saved": self.saved,
            "generation_failures": self.generation_failures,
            "persist_failures": self.persist_failures,
        }


class GenerationLoop:
    """
    Drives wallet generation for indices 1..N.

    A missing address or a failed file write only affects its own iteration;
    the loop always runs to N. Exceptions raised by the collaborators are not
    caught here.
    """

    def __init__(
        self,
        generator: Optional[EthWalletGenerator] = None,
        formatter: Optional[BoxFormatter] = None,
        sink: Optional[WalletFileSink] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the loop.

        Args:
            generator: Key generator; anything with a ``generate()`` method.
            formatter: Box formatter for console output.
            sink: Destination for generated wallets.
            clock: Source of timestamps for entries and warnings.
        """
        self.generator = generator or EthWalletGenerator()
        self.formatter = formatter or BoxFormatter()
        self.sink = sink or WalletFileSink()
        self.clock = clock

    def run(self, count: int) -> RunSummary:
        """
        Generates ``count`` wallets.

        Args:
            count: Number of wallets to generate.

        Returns:
            RunSummary with one result per index.
        """
        summary = RunSummary(requested=count)
        for index in range(1, count + 1):
            summary.results.append(self.run_once(index))

        logger.info(f"Run finished: {summary.to_dict()}")
        return summary

    def run_once(self, index: int) -> IterationResult:
        """Generate, display and save the wallet with the given index."""
        wallet = self.generator.generate()

        if wallet is None or not wallet.is_valid:
            now = self.clock().strftime(WARNING_TIME_FORMAT)
            print_warning(f"[{now}] Warning: Failed to generate wallet #{index}.")
            logger.info(f"Generator returned no address for wallet #{index}")
            return IterationResult(index=index, status=IterationStatus.GENERATION_FAILED)

        entry = WalletEntry.from_wallet(wallet, index, self.clock())

        for line in self.formatter.render(entry):
            print(line)

        if not self.sink.append(entry):
            return IterationResult(
                index=index,
                status=IterationStatus.PERSIST_FAILED,
                address=entry.address,
            )

        return IterationResult(
            index=index,
            status=IterationStatus.SAVED,
            address=entry.address,
        )
