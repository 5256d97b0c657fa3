"""Command line front end: ``mmake [-f FILE] [-B] [-s] [TARGET...]``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import hcl
from .context import BuildRequest
from .engine import BuildEngine
from .errors import MakeError

logger = logging.getLogger(__name__)

PROG = "mmake"


def _parse_define(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Rebuild stale targets from a rule file.")
    parser.add_argument(
        "-f",
        dest="rule_file",
        metavar="FILE",
        default=hcl.DEFAULT_RULE_FILE,
        help=f"rule file to read (default: {hcl.DEFAULT_RULE_FILE})",
    )
    parser.add_argument("-B", dest="force", action="store_true", help="unconditionally make all targets")
    parser.add_argument("-s", dest="quiet", action="store_true", help="do not echo commands")
    parser.add_argument("-n", dest="dry_run", action="store_true", help="echo commands without running them")
    parser.add_argument(
        "-D",
        dest="defines",
        metavar="NAME=VALUE",
        type=_parse_define,
        action="append",
        default=[],
        help="set a variable for the rule file (repeatable)",
    )
    parser.add_argument(
        "--signal-status",
        action="store_true",
        help="record 128+N as the exit status when a command is killed by signal N",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    parser.add_argument("targets", nargs="*", metavar="TARGET")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a build and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        rules = hcl.read_rules(args.rule_file, variables=dict(args.defines))
    except OSError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return exc.errno or 1
    except ValueError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    request = BuildRequest(
        args.targets,
        force=args.force,
        quiet=args.quiet,
        dry_run=args.dry_run,
        signal_status=args.signal_status,
    )
    logger.debug("Starting %r", request)
    try:
        return BuildEngine().run(rules, request)
    except MakeError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return exc.exit_status
