# src/jsveil/utils/console.py
import sys

from colorama import Fore, Style, init


class Console:
    _initialized = False

    @classmethod
    def setup(cls):
        """Initializes colorama once, before the first line is printed."""
        if not cls._initialized:
            init(autoreset=True)
            cls._initialized = True


def _emit(color: str, message: str, stream=None):
    print(f"{color}{message}{Style.RESET_ALL}", file=stream or sys.stdout)


def info(message: str):
    _emit(Fore.BLUE, message)


def progress(message: str):
    _emit(Fore.CYAN, message)


def success(message: str):
    _emit(Fore.GREEN, message)


def note(message: str):
    _emit(Fore.YELLOW, message)


def plain(message: str):
    _emit(Fore.WHITE, message)


def warn(message: str):
    _emit(Fore.YELLOW, message, sys.stderr)


def error(message: str):
    _emit(Fore.RED, message, sys.stderr)
