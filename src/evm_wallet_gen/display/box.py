"""Fixed-width bordered console box for generated wallets."""

from colorama import Fore, Style

from evm_wallet_gen.config.constants import (
    BOX_BOTTOM,
    BOX_HORIZONTAL,
    BOX_SEPARATOR,
    BOX_TOP,
    BOX_VERTICAL,
    DEFAULT_BOX_WIDTH,
    ELLIPSIS,
    LABEL_ADDRESS,
    LABEL_MNEMONIC,
    LABEL_PRIVATE_KEY,
)
from evm_wallet_gen.wallet.generator import WalletEntry

BORDER_STYLE = Fore.BLUE
HEADER_STYLE = Fore.BLUE + Style.BRIGHT
ADDRESS_STYLE = Fore.GREEN
PRIVATE_KEY_STYLE = Fore.RED
MNEMONIC_STYLE = Fore.MAGENTA


class BoxFormatter:
    """
    Renders wallet entries as fixed-width boxes.

    Every line of a box has exactly ``width`` visible characters; values too
    long for the box are truncated with an ellipsis. Color codes never count
    toward the width.
    """

    def __init__(self, width: int = DEFAULT_BOX_WIDTH, colorize: bool = True):
        """Initialize the formatter.

        Args:
            width: Total display width of each box line.
            colorize: Wrap lines in ANSI color codes.

        Raises:
            ValueError: If the width cannot hold the two corner characters.
        """
        if width < 2:
            raise ValueError(f"Box width must be at least 2, got {width}")
        self.width = width
        self.colorize = colorize

    def format_line(self, label: str, value: str) -> str:
        """
        Formats one labeled field as a bordered box line.

        Args:
            label: Field label shown before the colon.
            value: Field value, truncated if it does not fit.

        Returns:
            Uncolored line ending in the right border.
        """
        prefix = f"{BOX_VERTICAL} {label}: "
        max_content_length = self.width - 4
        available_value_width = max_content_length - len(prefix) + 2

        display_value = value
        if len(value) > available_value_width:
            keep = available_value_width - len(ELLIPSIS)
            if keep >= 0:
                display_value = value[:keep] + ELLIPSIS
            else:
                # No room for an ellipsis
                display_value = value[: max(0, available_value_width)]

        line_content = prefix + display_value
        padding = " " * max(0, self.width - len(line_content) - 1)
        return line_content + padding + BOX_VERTICAL

    def border(self, corners: tuple[str, str]) -> str:
        """Builds a horizontal border line between two corner characters."""
        left, right = corners
        return left + BOX_HORIZONTAL * (self.width - 2) + right

    def render(self, entry: WalletEntry) -> list[str]:
        """
        Renders a complete box for one wallet entry.

        Args:
            entry: The wallet entry to display.

        Returns:
            Box lines in print order, ending with a blank line.
        """
        lines = [
            (BORDER_STYLE, self.border(BOX_TOP)),
            (
                HEADER_STYLE,
                self.format_line(
                    f"Wallet #{entry.sequence_number}", f"({entry.timestamp})"
                ),
            ),
            (BORDER_STYLE, self.border(BOX_SEPARATOR)),
            (ADDRESS_STYLE, self.format_line(LABEL_ADDRESS, entry.address)),
            (PRIVATE_KEY_STYLE, self.format_line(LABEL_PRIVATE_KEY, entry.private_key)),
            (MNEMONIC_STYLE, self.format_line(LABEL_MNEMONIC, entry.mnemonic)),
            (BORDER_STYLE, self.border(BOX_BOTTOM)),
        ]
        rendered = [self._style(style, line) for style, line in lines]
        rendered.append("")
        return rendered

    def _style(self, style: str, line: str) -> str:
        """Wrap a line in color codes when colorizing."""
        if not self.colorize:
            return line
        return f"{style}{line}{Style.RESET_ALL}"
