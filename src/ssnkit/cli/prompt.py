"""Interactive SSN entry for the ssnkit CLI.

Every keystroke is checked with partial validation, so the prompt refuses
input that can no longer become a valid SSN. The accepted value is then
validated strictly and only its masked form is echoed back.

Usage:
    ssnkit prompt
    ssnkit prompt --rule-mode pre2011
"""

from typing import Callable, Optional, Union

import questionary

from ssnkit.config import ValidationOptions
from ssnkit.masker import mask
from ssnkit.normalizer import normalize
from ssnkit.rules import RuleMode
from ssnkit.validator import validate


# ANSI colors for terminal output
class Colors:
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def print_success(message: str):
    """Print a success message."""
    print(f"{Colors.GREEN}✓{Colors.RESET} {message}")


def print_info(message: str):
    """Print an info message."""
    print(f"{Colors.BLUE}ℹ{Colors.RESET} {message}")


def print_error(message: str):
    """Print an error message."""
    print(f"{Colors.RED}✗{Colors.RESET} {message}")


def check_keystroke(text: str, rule_mode: RuleMode = RuleMode.POST_2011) -> Union[bool, str]:
    """Validate in-progress input for questionary.

    The text is normalized first, so digits typed without dashes are
    accepted. Returns True to accept or an error message to display.
    """
    normalized = normalize(text, allow_partial=True, enforce_length=False)
    result = validate(normalized, allow_partial=True, rule_mode=rule_mode)
    return True if result.ok else result.message


def ask_ssn(
    message: str,
    rule_mode: RuleMode,
    ask: Optional[Callable[..., Optional[str]]] = None,
) -> Optional[str]:
    """Ask for an SSN, validating while typing.

    Returns:
        The raw answer, or None if the user cancelled.
    """
    if ask is None:
        return questionary.text(
            message, validate=lambda text: check_keystroke(text, rule_mode)
        ).ask()
    return ask(message)


def run_prompt(
    rule_mode: Union[RuleMode, str] = RuleMode.POST_2011,
    attempts: int = 3,
    ask: Optional[Callable[..., Optional[str]]] = None,
) -> int:
    """Run the interactive prompt.

    Args:
        rule_mode: Area rule set for validation.
        attempts: Number of tries before giving up.
        ask: Replacement for the questionary prompt (used in tests).

    Returns:
        Exit code: 0 when a valid SSN was entered, 1 otherwise.
    """
    options = ValidationOptions(rule_mode=rule_mode)
    print(f"\n{Colors.BOLD}Enter a Social Security Number{Colors.RESET}")
    print("-" * 40)
    print_info(f"Rules: {options.rule_mode.value}. Dashes are added for you.")

    for _ in range(attempts):
        answer = ask_ssn("SSN:", options.rule_mode, ask)
        if answer is None:
            print_info("Cancelled.")
            return 1

        candidate = normalize(answer, allow_partial=False, enforce_length=True)
        result = validate(candidate, options)
        if result.ok:
            print_success(f"Valid SSN: {mask(result.normalized, reveal_last4=True)}")
            return 0

        print_error(result.message)

    print_error(f"No valid SSN entered after {attempts} attempts")
    return 1
