"""Interactive entry point for the EVM wallet generator."""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from evm_wallet_gen.config.constants import (
    INVALID_INPUT_MESSAGE,
    PROMPT,
    SECURITY_REMINDER,
)
from evm_wallet_gen.config.settings import Settings, get_settings
from evm_wallet_gen.display.box import BoxFormatter
from evm_wallet_gen.display.console import (
    print_banner,
    print_error,
    print_info,
    print_success,
    print_warning,
    prompt,
    setup_console,
)
from evm_wallet_gen.runner.loop import (
    GenerationLoop,
    InvalidCountError,
    RunSummary,
    parse_count,
)
from evm_wallet_gen.storage.wallet_file import WalletFileSink
from evm_wallet_gen.utils.logging import setup_logging
from evm_wallet_gen.wallet.generator import EthWalletGenerator

logger = logging.getLogger(__name__)


class WalletGeneratorApp:
    """Prompts for a count, runs the generation loop and reports the outcome."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        loop: Optional[GenerationLoop] = None,
        input_func: Callable[[str], str] = prompt,
    ):
        """Initialize the application.

        Args:
            settings: Application settings. If None, loads from environment.
            loop: Generation loop. If None, one is built from settings.
            input_func: Reads one line of operator input for a prompt.
        """
        self.settings = settings or get_settings()
        self.input_func = input_func
        self.loop = loop or GenerationLoop(
            generator=EthWalletGenerator(),
            formatter=BoxFormatter(
                width=self.settings.output.box_width,
                colorize=self.settings.output.colorize,
            ),
            sink=WalletFileSink(self.settings.output.wallet_file),
        )

    def run(self) -> Optional[RunSummary]:
        """
        Runs one interactive session.

        Every path returns normally; failures are reported on the console.

        Returns:
            RunSummary if generation ran to completion, otherwise None.
        """
        print_banner()

        try:
            raw_count = self.input_func(PROMPT)
            try:
                count = parse_count(raw_count)
            except InvalidCountError as e:
                logger.info(f"Rejected wallet count: {e}")
                print_error(INVALID_INPUT_MESSAGE)
                return None

            print_info(f"\nGenerating {count} wallet(s)...")
            summary = self.loop.run(count)
            self._report(summary)
            return summary

        except (KeyboardInterrupt, EOFError):
            print_warning("\nCancelled.")
            return None
        except Exception as e:
            print_error("\n❌ An unexpected error occurred during wallet generation:")
            print_error(str(e))
            logger.error(f"Wallet generation failed: {e}", exc_info=True)
            return None

    def _report(self, summary: RunSummary):
        """Print the end-of-run summary block."""
        if summary.generated:
            print_success(f"\n✅ Success! {summary.generated} wallet(s) generated.")
        else:
            print_warning("\nNo wallets were generated.")

        if summary.saved:
            print_success(
                "Wallet details (Address, Private Key, Mnemonic) have been saved "
                f"to {self.loop.sink.path}."
            )
        if summary.generation_failures:
            print_warning(
                f"{summary.generation_failures} wallet(s) failed to generate."
            )
        if summary.persist_failures:
            print_warning(
                f"{summary.persist_failures} wallet(s) could not be saved "
                f"to {self.loop.sink.path}."
            )

        print_warning(f"\n{SECURITY_REMINDER}")


def main():
    """Entry point for the wallet generator."""
    setup_console()

    try:
        settings = get_settings()
        setup_logging(
            level=settings.logging.level,
            log_file=settings.logging.log_file,
        )
    except ValidationError as e:
        print_error("❌ Invalid configuration:")
        print_error(str(e))
        return
    except OSError as e:
        print_error(f"❌ Could not open log file: {e}")
        return

    app = WalletGeneratorApp(settings)
    app.run()


if __name__ == "__main__":
    main()
