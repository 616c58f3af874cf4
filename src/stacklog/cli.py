"""Main CLI entry point for stacklog.

Implements a two-pass argument parser:
  1. First pass: extract global flags (--verbose, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  stacklog -vv format trace.txt      # works
  stacklog format trace.txt -vv      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from stacklog._version import BASE_VERSION, PIP_VERSION
from stacklog.config import resolve_settings
from stacklog.levels import DEBUG, OFF, TRACE
from stacklog.manager import init_logging


# ---------------------------------------------------------------------------
# Global flags (can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v info, -vv debug, -vvv trace)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: nearest .stacklog.json)"},
}

# -v count -> verbosity knob
_VERBOSE_KNOB = {1: OFF, 2: DEBUG}


def verbosity_from_count(count):
    """Map a -v count to a verbosity knob value (None keeps the config's)."""
    if not count:
        return None
    return _VERBOSE_KNOB.get(count, TRACE)


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for runtime selection flags."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--user-agent", metavar="UA",
                        help="Browser user-agent string identifying the runtime")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in stacklog.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from stacklog.commands import format_cmd, probe
    return [format_cmd, probe]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="stacklog",
        description="stacklog — parse and compact stack traces",
        epilog=(
            "Run 'stacklog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"stacklog {BASE_VERSION} ({PIP_VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the stacklog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    try:
        settings = resolve_settings(
            {"verbosity": verbosity_from_count(global_args.verbose)},
            config_path=global_args.config,
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    init_logging(verbosity=settings.verbosity)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    args.settings = settings
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
