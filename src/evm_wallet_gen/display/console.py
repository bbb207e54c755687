"""Colored user-facing console output."""

from colorama import Fore, Style, init

from evm_wallet_gen.config.constants import BANNER


def setup_console():
    """Enable ANSI colors on terminals that need translation."""
    init()


def print_info(message: str):
    print(f"{Fore.CYAN}{message}{Style.RESET_ALL}")


def print_success(message: str):
    print(f"{Fore.GREEN + Style.BRIGHT}{message}{Style.RESET_ALL}")


def print_warning(message: str):
    print(f"{Fore.YELLOW}{message}{Style.RESET_ALL}")


def print_error(message: str):
    print(f"{Fore.RED}{message}{Style.RESET_ALL}")


def print_banner():
    print(f"{Fore.CYAN + Style.BRIGHT}{BANNER}{Style.RESET_ALL}")


def prompt(question: str) -> str:
    """Read one line from the operator with a colored prompt."""
    return input(f"{Fore.YELLOW}{question}{Style.RESET_ALL}")
