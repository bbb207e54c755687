"""Random EVM wallet generation backed by eth-account HD wallet features."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from eth_account import Account
from eth_account.types import Language
from eth_keys import keys

from evm_wallet_gen.config.constants import (
    ENTRY_TIMESTAMP_FORMAT,
    MNEMONIC_LANGUAGE,
    MNEMONIC_NUM_WORDS,
)

logger = logging.getLogger(__name__)

# Mnemonic creation is gated behind this flag in eth-account
Account.enable_unaudited_hdwallet_features()


@dataclass(frozen=True)
class GeneratedWallet:
    """Key material produced by a key generator."""

    address: str
    private_key: str
    public_key: str
    mnemonic: str

    @property
    def is_valid(self) -> bool:
        """A wallet is usable only if it carries a non-empty address."""
        return bool(self.address)


@dataclass(frozen=True)
class WalletEntry:
    """One generated wallet, numbered and timestamped for display and saving."""

    address: str
    private_key: str
    public_key: str
    mnemonic: str
    sequence_number: int
    timestamp: str

    def __post_init__(self):
        if self.sequence_number < 1:
            raise ValueError(
                f"Sequence number must be >= 1, got {self.sequence_number}"
            )

    @classmethod
    def from_wallet(
        cls,
        wallet: GeneratedWallet,
        sequence_number: int,
        timestamp: Optional[datetime] = None,
    ) -> "WalletEntry":
        """Create an entry from generated key material."""
        timestamp = timestamp or datetime.now()
        return cls(
            address=wallet.address,
            private_key=wallet.private_key,
            public_key=wallet.public_key,
            mnemonic=wallet.mnemonic,
            sequence_number=sequence_number,
            timestamp=timestamp.strftime(ENTRY_TIMESTAMP_FORMAT),
        )


class EthWalletGenerator:
    """
    Generates fresh random EVM wallets.

    Each wallet gets a new BIP-39 mnemonic; the account is derived from it on
    the default Ethereum path (m/44'/60'/0'/0/0). The public key is reported
    in compressed SEC1 form.
    """

    def __init__(
        self,
        num_words: int = MNEMONIC_NUM_WORDS,
        language: Language = MNEMONIC_LANGUAGE,
    ):
        """Initialize the generator.

        Args:
            num_words: Mnemonic length (12, 15, 18, 21 or 24 words).
            language: BIP-39 wordlist language; plain names such as
                "english" are accepted too.
        """
        self.num_words = num_words
        self.language = Language(language)

    def generate(self) -> GeneratedWallet:
        """
        Creates a new random wallet.

        Returns:
            GeneratedWallet with address, private key, public key and mnemonic.
        """
        account, mnemonic = Account.create_with_mnemonic(
            num_words=self.num_words,
            language=self.language,
        )
        private_key = keys.PrivateKey(bytes(account.key))
        public_key = "0x" + private_key.public_key.to_compressed_bytes().hex()

        logger.debug(f"Generated wallet {account.address}")

        return GeneratedWallet(
            address=account.address,
            private_key=private_key.to_hex(),
            public_key=public_key,
            mnemonic=mnemonic,
        )
