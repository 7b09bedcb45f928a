"""CLI command implementations for the cabinet-pricing application.

This package contains subcommands for the cabinet-pricing CLI:
- validate: Validate a rate catalog file
"""

from cabinet_pricing.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
