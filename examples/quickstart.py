#!/usr/bin/env python3
"""
ssnkit Quick Start Example

This example walks through validation, display formatting, test data
generation and pydantic form fields. Run it to see ssnkit in action.
"""

from pydantic import BaseModel, ValidationError

from ssnkit import generate, mask, normalize, validate
from ssnkit.schemas import SsnSubmit, error_reason


def section(title):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def example_validation():
    """Example 1: Strict validation with reason codes."""
    section("Example 1: Validation")

    for value in ["123-45-6789", "123456789", "666-12-3456", "123-00-4567", "078-05-1120"]:
        result = validate(value)
        if result.ok:
            print(f"  {mask(value):<14} valid")
        else:
            print(f"  {mask(value):<14} {result.reason_code}: {result.message}")

    # Areas issued only after June 25, 2011
    print("\n  773-12-3456 under pre2011:", validate("773-12-3456", rule_mode="pre2011").reason_code)
    print("  773-12-3456 under post2011:", validate("773-12-3456").ok)


def example_typing():
    """Example 2: Checking input while it is typed."""
    section("Example 2: Validate while typing")

    typed = ""
    for ch in "1234567890":
        typed = normalize(typed + ch)
        result = validate(typed, allow_partial=True)
        status = "ok" if result.ok else f"{result.reason_code}: {result.message}"
        print(f"  {typed:<14} {status}")


def example_display():
    """Example 3: Normalizing and masking for display."""
    section("Example 3: Display")

    raw = "SSN: 123 45 6789"
    print(f"  normalize:          {normalize(raw)}")
    print(f"  normalize (digits): {normalize(raw, digits_only=True)}")
    print(f"  mask:               {mask(raw)}")
    print(f"  mask (last 4):      {mask(raw, reveal_last4=True)}")
    print(f"  mask (in progress): {mask('123-45-6', reveal_last4=True)}")


def example_generate():
    """Example 4: Generating values for docs and fixtures."""
    section("Example 4: Generation")

    # public values always fail validation, safe for screenshots and docs
    print("  public:  ", generate())
    print("  pre2011: ", generate(mode="pre2011"))
    print("  post2011:", generate(mode="post2011", format="digits"))


def example_forms():
    """Example 5: pydantic form fields."""
    section("Example 5: Forms")

    class Applicant(BaseModel):
        name: str
        ssn: SsnSubmit

    applicant = Applicant(name="Jane", ssn="123456789")
    print(f"  stored: {mask(applicant.ssn, reveal_last4=True)}")

    try:
        Applicant(name="Jane", ssn="078-05-1120")
    except ValidationError as e:
        error = e.errors()[0]
        print(f"  rejected: {error_reason(error)} - {error['msg']}")


if __name__ == "__main__":
    example_validation()
    example_typing()
    example_display()
    example_generate()
    example_forms()
