from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the `rotalog` tool and translates the
parsed namespace into a rotation policy.
"""

import argparse
from typing import Optional

from rotalog.domain.config import load_policy
from rotalog.domain.settings import RotationPolicy
from rotalog.domain.severity import Severity

_SEVERITY_CHOICES = [s.name for s in Severity]


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rotalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rotalog",
        description="Write messages through a leveled, rotating logger.",
    )

    p.add_argument(
        "messages",
        nargs="*",
        help="Messages to log. Lines are read from stdin when omitted.",
    )

    # --- Destination ---
    p.add_argument(
        "-f", "--file",
        dest="log_file",
        default=None,
        help="Log file path. Logs to stdout with colors when omitted.",
    )
    p.add_argument(
        "-l", "--level",
        dest="min_severity",
        type=str.upper,
        choices=_SEVERITY_CHOICES,
        default="TRACE",
        help="Minimum severity written.",
    )
    p.add_argument(
        "-s", "--severity",
        dest="severity",
        type=str.upper,
        choices=_SEVERITY_CHOICES,
        default="INFO",
        help="Severity of the messages being logged.",
    )

    # --- Rotation Policy ---
    p.add_argument(
        "--config",
        dest="policy_file",
        default=None,
        help="JSON file holding the rotation policy. Flags below override it.",
    )
    p.add_argument(
        "--rotate",
        action="store_true",
        help="Enable size-based rotation.",
    )
    p.add_argument(
        "--max-size",
        dest="max_file_size",
        type=_non_negative_int,
        default=None,
        help="Rotation threshold in bytes.",
    )
    p.add_argument(
        "--backups",
        dest="max_backup_count",
        type=_non_negative_int,
        default=None,
        help="Number of numbered backups to keep.",
    )
    p.add_argument(
        "--clear",
        action="store_true",
        help="Truncate the log file before writing.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-policy",
        action="store_true",
        help="Print the effective rotation policy as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Show internal diagnostics (rotation events) on stderr.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_policy(args: argparse.Namespace, base: Optional[RotationPolicy] = None) -> RotationPolicy:
    """
    Merge command-line flags over a base policy.

    Args:
        args: Parsed command-line arguments.
        base: Policy to start from; loaded from --config when None.

    Returns:
        RotationPolicy: The effective policy.

    Raises:
        PolicyFileError: If --config points to an invalid file.
    """
    if base is None:
        base = load_policy(args.policy_file) if args.policy_file else RotationPolicy()

    return RotationPolicy(
        clear_on_startup=base.clear_on_startup or bool(args.clear),
        enable_rotation=base.enable_rotation or bool(args.rotate),
        max_file_size=base.max_file_size if args.max_file_size is None else args.max_file_size,
        max_backup_count=base.max_backup_count if args.max_backup_count is None else args.max_backup_count,
    )
