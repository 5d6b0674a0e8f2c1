#!/usr/bin/env python3
"""ssnkit CLI - Command line interface for SSN checks.

Usage:
    ssnkit validate VALUE [--partial] [--no-separators] [--rule-mode MODE]
    ssnkit normalize VALUE [--strict] [--digits-only]
    ssnkit mask VALUE [--reveal-last4] [--mask-char C]
    ssnkit generate [--mode MODE] [--digits] [-n COUNT]
    ssnkit prompt

Examples:
    # Strict validation
    ssnkit validate 123-45-6789

    # Validate while typing
    ssnkit validate 123-4 --partial

    # Display forms
    ssnkit normalize "SSN: 123 45 6789"
    ssnkit mask 123456789 --reveal-last4

    # Test data
    ssnkit generate --mode pre2011 -n 5
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ssnkit.__version__ import __version__
from ssnkit.cli.prompt import run_prompt
from ssnkit.config import GenerateMode
from ssnkit.errors import SsnKitError, format_error
from ssnkit.generator import generate
from ssnkit.masker import mask
from ssnkit.normalizer import normalize
from ssnkit.rules import RuleMode
from ssnkit.validator import validate

RULE_MODES = [m.value for m in RuleMode]
GENERATE_MODES = [m.value for m in GenerateMode]


def print_error(message: str):
    """Print an error message."""
    print(f"✗ {message}", file=sys.stderr)


def print_success(message: str):
    """Print a success message."""
    print(f"✓ {message}")


def cmd_validate(args) -> int:
    """Handle the validate command."""
    result = validate(
        args.value,
        require_separators=not args.no_separators,
        rule_mode=args.rule_mode,
        allow_partial=args.partial,
        reject_area_lookahead=args.lookahead,
    )

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        label = "Valid so far" if args.partial else "Valid"
        print_success(f"{label}: {mask(result.normalized, reveal_last4=True)}")
    else:
        print_error(f"{result.reason_code}: {result.message}")

    return 0 if result.ok else 1


def cmd_normalize(args) -> int:
    """Handle the normalize command."""
    print(
        normalize(
            args.value,
            allow_partial=not args.strict,
            digits_only=args.digits_only,
            enforce_length=not args.no_enforce_length,
        )
    )
    return 0


def cmd_mask(args) -> int:
    """Handle the mask command."""
    print(
        mask(
            args.value,
            allow_partial=not args.strict,
            reveal_last4=args.reveal_last4,
            mask_char=args.mask_char,
            digits_only=args.digits_only,
            enforce_length=args.enforce_length,
            dash_mode="preserve" if args.preserve_dashes else "normalize",
        )
    )
    return 0


def cmd_generate(args) -> int:
    """Handle the generate command."""
    if args.count < 1:
        print_error(f"Count must be positive, got {args.count}")
        return 1

    for _ in range(args.count):
        print(
            generate(
                mode=args.mode,
                format="digits" if args.digits else "dashed",
                public_value=args.public_value,
            )
        )
    return 0


def cmd_prompt(args) -> int:
    """Handle the prompt command."""
    return run_prompt(rule_mode=args.rule_mode)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssnkit",
        description="""
ssnkit - Validate, normalize, mask and generate US Social Security Numbers.

Quick Start:
    ssnkit validate 123-45-6789           # Strict check
    ssnkit validate 123-4 --partial       # Check while typing
    ssnkit mask 123-45-6789 --reveal-last4
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        aliases=["check"],
        help="Validate an SSN (exit code 0 when valid)"
    )
    validate_parser.add_argument("value", help="SSN to validate")
    validate_parser.add_argument(
        "-p", "--partial",
        action="store_true",
        help="Accept prefixes that could still become valid"
    )
    validate_parser.add_argument(
        "--no-separators",
        action="store_true",
        help="Also accept digits-only input (#########)"
    )
    validate_parser.add_argument(
        "-r", "--rule-mode",
        choices=RULE_MODES,
        default=RuleMode.POST_2011.value,
        help="Area rule set (default: post2011)"
    )
    validate_parser.add_argument(
        "--lookahead",
        action="store_true",
        help="With --partial, reject a leading 9 immediately"
    )
    validate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format"
    )

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Format input as ###-##-####"
    )
    normalize_parser.add_argument("value", help="Raw input")
    normalize_parser.add_argument(
        "--strict",
        action="store_true",
        help="Leave input unchanged until 9 digits are present"
    )
    normalize_parser.add_argument(
        "--digits-only",
        action="store_true",
        help="Output digits without dashes"
    )
    normalize_parser.add_argument(
        "--no-enforce-length",
        action="store_true",
        help="Keep digits beyond the ninth"
    )

    # Mask command
    mask_parser = subparsers.add_parser(
        "mask",
        help="Mask the digits of an SSN"
    )
    mask_parser.add_argument("value", help="Raw input")
    mask_parser.add_argument(
        "--reveal-last4",
        action="store_true",
        help="Show the serial digits"
    )
    mask_parser.add_argument(
        "--mask-char",
        default="*",
        help="Mask character (default: *)"
    )
    mask_parser.add_argument(
        "--digits-only",
        action="store_true",
        help="Output without dashes"
    )
    mask_parser.add_argument(
        "--enforce-length",
        action="store_true",
        help="Ignore digits beyond the ninth"
    )
    mask_parser.add_argument(
        "--strict",
        action="store_true",
        help="Only normalize once 9 digits are present"
    )
    mask_parser.add_argument(
        "--preserve-dashes",
        action="store_true",
        help="Only output dashes if the input had them"
    )

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate",
        aliases=["gen"],
        help="Generate SSNs for examples and test data"
    )
    generate_parser.add_argument(
        "-m", "--mode",
        choices=GENERATE_MODES,
        default=GenerateMode.PUBLIC.value,
        help="public (default, always invalid), any, pre2011 or post2011"
    )
    generate_parser.add_argument(
        "--digits",
        action="store_true",
        help="Output digits only"
    )
    generate_parser.add_argument(
        "--public-value",
        help="Force a specific publicly advertised value (public mode)"
    )
    generate_parser.add_argument(
        "-n", "--count",
        type=int,
        default=1,
        help="Number of values to generate (default: 1)"
    )

    # Prompt command
    prompt_parser = subparsers.add_parser(
        "prompt",
        help="Enter an SSN interactively with live validation"
    )
    prompt_parser.add_argument(
        "-r", "--rule-mode",
        choices=RULE_MODES,
        default=RuleMode.POST_2011.value,
        help="Area rule set (default: post2011)"
    )

    return parser


COMMANDS = {
    "validate": cmd_validate,
    "check": cmd_validate,
    "normalize": cmd_normalize,
    "mask": cmd_mask,
    "generate": cmd_generate,
    "gen": cmd_generate,
    "prompt": cmd_prompt,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except SsnKitError as e:
        print_error(format_error(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
