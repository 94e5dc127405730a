"""
Console output and user interaction utilities.

This module provides functions for formatted console output, user prompts,
and interactive confirmations used by the CLI commands.
"""

from rich.console import Console

from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS, EMOJI_WARNING

console = Console(highlight=False)


def print_success(message: str) -> None:
    """Print success message with emoji."""
    console.print(f"{EMOJI_SUCCESS} {message}", style="green", markup=False)


def print_error(message: str) -> None:
    """Print error message with emoji."""
    console.print(f"{EMOJI_ERROR} {message}", style="bold red", markup=False)


def print_warning(message: str) -> None:
    """Print warning message with emoji."""
    console.print(f"{EMOJI_WARNING}  {message}", style="yellow", markup=False)


def print_info(message: str) -> None:
    """Print info message with emoji."""
    console.print(f"{EMOJI_INFO}  {message}", markup=False)


def confirm_action(prompt: str, default: bool = False) -> bool:
    """
    Ask for user confirmation.

    Args:
        prompt: The question to ask
        default: Default value if user just presses Enter

    Returns:
        True if user confirms, False otherwise
    """
    suffix = " (y/N)" if not default else " (Y/n)"
    response = console.input(f"{prompt}{suffix}: ", markup=False).strip().lower()

    if not response:
        return default

    return response in ["y", "yes"]
