"""Application constants and default values."""

from eth_account.types import Language

# Output defaults
DEFAULT_WALLET_FILE = "./wallets_output.txt"
DEFAULT_BOX_WIDTH = 85

# Mnemonic generation (BIP-39, English wordlist)
MNEMONIC_NUM_WORDS = 12
MNEMONIC_LANGUAGE = Language.ENGLISH

# Timestamp formats
ENTRY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
WARNING_TIME_FORMAT = "%H:%M:%S"

# Box drawing characters
BOX_VERTICAL = "│"
BOX_HORIZONTAL = "─"
BOX_TOP = ("┌", "┐")
BOX_SEPARATOR = ("├", "┤")
BOX_BOTTOM = ("└", "┘")
ELLIPSIS = "..."

# Field labels, padded so the values line up inside the box
LABEL_ADDRESS = "Address    "
LABEL_PRIVATE_KEY = "Private Key"
LABEL_MNEMONIC = "Mnemonic   "

# Wallet file record layout
RECORD_SEPARATOR = " | "
FIELD_SEPARATOR = ": "
RECORD_FIELDS = ("Address", "Private Key", "Mnemonic")

# Console messages
PROMPT = "Number of wallets to generate: "
INVALID_INPUT_MESSAGE = "Invalid input. Please enter a positive number."
SECURITY_REMINDER = (
    "⚠️ IMPORTANT: Securely store your Private Keys and Mnemonic Phrases. "
    "Do not share them!"
)

BANNER = r"""
  _____ __     __ __  __  __        __    _ _      _
 | ____|\ \   / /|  \/  | \ \      / /_ _| | | ___| |_
 |  _|   \ \ / / | |\/| |  \ \ /\ / / _` | | |/ _ \ __|
 | |___   \ V /  | |  | |   \ V  V / (_| | | |  __/ |_
 |_____|   \_/   |_|  |_|    \_/\_/ \__,_|_|_|\___|\__|
                 EVM Wallet Generator
"""

# Logging format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
