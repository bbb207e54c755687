"""Pytest configuration and fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from evm_wallet_gen.config.settings import OutputConfig, Settings
from evm_wallet_gen.display.box import BoxFormatter
from evm_wallet_gen.runner.loop import GenerationLoop
from evm_wallet_gen.storage.wallet_file import WalletFileSink
from evm_wallet_gen.wallet.generator import GeneratedWallet, WalletEntry

FIXED_TIME = datetime(2026, 10, 19, 12, 30, 45)

TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


class FakeGenerator:
    """Deterministic key generator; returns an empty address on chosen calls."""

    def __init__(self, fail_at: tuple[int, ...] = ()):
        self.fail_at = set(fail_at)
        self.calls = 0

    def generate(self) -> GeneratedWallet:
        self.calls += 1
        address = "" if self.calls in self.fail_at else f"0x{self.calls:040x}"
        return GeneratedWallet(
            address=address,
            private_key="0x" + f"{self.calls:02x}" * 32,
            public_key="0x02" + "cd" * 32,
            mnemonic=TEST_MNEMONIC,
        )


class ExplodingGenerator:
    """Key generator that fails with an unexpected error."""

    def generate(self) -> GeneratedWallet:
        raise RuntimeError("entropy source unavailable")


@pytest.fixture
def sample_entry() -> WalletEntry:
    """A fully populated wallet entry."""
    return WalletEntry(
        address="0x9858EfFD232B4033E47d90003D41EC34EcaEda94",
        private_key="0x1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727",
        public_key="0x0237b0bb7a8288d38ed49a524b5dc98cff3eb5ca824c9f9dc0dfdb3d9cd600f299",
        mnemonic=TEST_MNEMONIC,
        sequence_number=1,
        timestamp="2026-10-19 12:30:45",
    )


@pytest.fixture
def wallet_file(tmp_path: Path) -> Path:
    """Path of a not-yet-created wallet file."""
    return tmp_path / "wallets_output.txt"


@pytest.fixture
def plain_formatter() -> BoxFormatter:
    """Default-width formatter without color codes."""
    return BoxFormatter(width=85, colorize=False)


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """Generator that always succeeds."""
    return FakeGenerator()


@pytest.fixture
def make_loop(plain_formatter: BoxFormatter, wallet_file: Path):
    """Build a generation loop around a given generator and sink."""

    def _make(generator, sink=None) -> GenerationLoop:
        return GenerationLoop(
            generator=generator,
            formatter=plain_formatter,
            sink=sink or WalletFileSink(wallet_file),
            clock=lambda: FIXED_TIME,
        )

    return _make


@pytest.fixture
def test_settings(wallet_file: Path) -> Settings:
    """Settings writing to a temporary file without colors."""
    return Settings(output=OutputConfig(wallet_file=wallet_file, colorize=False))
