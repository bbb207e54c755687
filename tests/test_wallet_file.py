"""Tests for the append-only wallet file."""

import logging
from pathlib import Path

import pytest

from evm_wallet_gen.storage.wallet_file import WalletFileSink, format_record, parse_record
from evm_wallet_gen.wallet.generator import WalletEntry


class TestRecordFormat:
    """Test suite for the pipe-delimited record layout."""

    def test_format_record(self, sample_entry: WalletEntry):
        """Test the exact line layout."""
        line = format_record(sample_entry)

        assert line == (
            f"Address: {sample_entry.address} | "
            f"Private Key: {sample_entry.private_key} | "
            f"Mnemonic: {sample_entry.mnemonic}\n"
        )

    def test_public_key_not_written(self, sample_entry: WalletEntry):
        """Test that only address, private key and mnemonic are stored."""
        assert sample_entry.public_key not in format_record(sample_entry)

    def test_parse_record(self, sample_entry: WalletEntry):
        """Test that a written line splits back into its fields."""
        record = parse_record(format_record(sample_entry))

        assert record == {
            "Address": sample_entry.address,
            "Private Key": sample_entry.private_key,
            "Mnemonic": sample_entry.mnemonic,
        }

    @pytest.mark.parametrize(
        "line",
        [
            "garbage",
            "Address: 0x1 | Private Key: 0x2",
            "Address: 0x1 | Public Key: 0x2 | Mnemonic: words",
            "Address 0x1 | Private Key: 0x2 | Mnemonic: words",
        ],
    )
    def test_parse_rejects_malformed_lines(self, line: str):
        """Test that malformed lines raise ValueError."""
        with pytest.raises(ValueError):
            parse_record(line)


class TestWalletFileSink:
    """Test suite for WalletFileSink class."""

    def test_append_creates_and_extends_file(
        self, wallet_file: Path, sample_entry: WalletEntry
    ):
        """Test that each append adds exactly one line."""
        sink = WalletFileSink(wallet_file)

        assert sink.append(sample_entry)
        assert sink.append(sample_entry)

        lines = wallet_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert len(sink.read_records()) == 2

    def test_append_keeps_existing_content(
        self, wallet_file: Path, sample_entry: WalletEntry
    ):
        """Test that earlier file content is never overwritten."""
        wallet_file.write_text("Address: 0xold | Private Key: 0x0 | Mnemonic: old\n")
        sink = WalletFileSink(wallet_file)

        sink.append(sample_entry)

        records = sink.read_records()
        assert records[0]["Address"] == "0xold"
        assert records[1]["Address"] == sample_entry.address

    def test_write_failure_is_logged(
        self, tmp_path: Path, sample_entry: WalletEntry, caplog
    ):
        """Test that an unwritable path returns False and logs the cause."""
        sink = WalletFileSink(tmp_path / "missing_dir" / "wallets.txt")

        with caplog.at_level(logging.ERROR):
            assert sink.append(sample_entry) is False

        assert "Error writing to file" in caplog.text
        assert sample_entry.private_key not in caplog.text

    def test_read_records_missing_file(self, wallet_file: Path):
        """Test that a file that was never written reads as empty."""
        assert WalletFileSink(wallet_file).read_records() == []
