from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a CLI run: argument parsing, diagnostics bootstrap, policy
resolution, one-shot logger initialization and message emission.
"""

import json
import sys
from typing import Iterable, List, Optional

import rotalog
from rotalog.domain.config import policy_to_dict
from rotalog.domain.records import CallSite
from rotalog.domain.severity import Severity
from rotalog.errors import LogFileOpenError, PolicyFileError
from rotalog.infra.logging import configure_diagnostics
from rotalog.interface.cli import args as cli_args

# Records written by the CLI are attributed to the CLI itself
_CLI_SITE = CallSite(file_name="rotalog", function="main", line=0, column=0)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 configuration or I/O failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Diagnostics bootstrap
    diagnostics = configure_diagnostics("DEBUG" if args.debug else "WARNING", force=True)

    # 3. Policy resolution
    try:
        policy = cli_args.args_to_policy(args)
    except PolicyFileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.dump_policy:
        print(json.dumps(policy_to_dict(policy), indent=2))
        return 0

    # 4. Logger initialization
    try:
        if args.log_file:
            logger = rotalog.initialize(args.log_file, args.min_severity, policy)
        else:
            logger = rotalog.initialize(sys.stdout, args.min_severity)
            logger.configure(policy)
    except LogFileOpenError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    diagnostics.debug(f"Logging at {args.severity} with {policy}")

    # 5. Emission phase
    severity = Severity[args.severity]
    try:
        for message in _iter_messages(args.messages):
            logger.log(severity, message, _CLI_SITE)
    except LogFileOpenError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    finally:
        logger.close()

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _iter_messages(messages: List[str]) -> Iterable[str]:
    """Yield the positional messages, or stdin lines when none were given."""
    if messages:
        yield from messages
        return
    for line in sys.stdin:
        line = line.rstrip("\r\n")
        if line:
            yield line


if __name__ == "__main__":
    sys.exit(main())
