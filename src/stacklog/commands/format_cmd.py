"""stacklog format — Parse a raw stack trace and print it compacted.

Reads stack-trace text from a file or stdin, parses each line with the
frame format of the selected runtime, strips the directory prefix shared
by every frame, and prints one ``name@file:line:column`` line per frame.
Lines that are not frames (headers, source excerpts) are skipped; run with
-vv to see them reported.
"""

import argparse
import sys

from stacklog.formatter import format_stack
from stacklog.frames import Runtime, identify_runtime, parser_for_runtime
from stacklog.manager import get_logger

RUNTIME_CHOICES = [r.name.lower() for r in Runtime if r is not Runtime.UNKNOWN]


def register(subparsers, parents):
    """Register the 'format' subcommand."""
    p = subparsers.add_parser(
        "format",
        parents=parents,
        help="Parse and compact a stack trace",
        description=(
            "Parse stack-trace text (V8, SpiderMonkey or CPython format) and\n"
            "print its frames with the common path prefix removed."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", nargs="?", metavar="FILE",
                   help="File containing the trace (default: stdin)")
    p.add_argument("--runtime", choices=RUNTIME_CHOICES,
                   help="Trace format to parse (default: from --user-agent, "
                        "else python)")
    p.add_argument("--no-compact", action="store_true",
                   help="Keep full file paths")
    p.set_defaults(func=run)


def select_runtime(args):
    """Runtime from --runtime, else identified from the user agent."""
    if getattr(args, "runtime", None):
        return Runtime[args.runtime.upper()]
    user_agent = getattr(args, "user_agent", None)
    if user_agent is None and getattr(args, "settings", None) is not None:
        user_agent = args.settings.user_agent
    return identify_runtime(user_agent)


def _read_lines(path):
    if path is None or path == "-":
        return sys.stdin.read().splitlines()
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def run(args):
    log = get_logger()

    try:
        lines = _read_lines(args.file)
    except OSError as e:
        log.log_error_only(f"cannot read {args.file}: {e.strerror or e}")
        return 1

    runtime = select_runtime(args)
    parser = parser_for_runtime(runtime, on_error=log.log_debug_only)
    lines = [line for line in lines if line.strip()]
    frames = parser.parse_stack(lines)
    log.log_info_only(f"Parsed {len(frames)} of {len(lines)} lines "
                      f"as {runtime.value} frames")

    if not frames:
        log.log_warn_only("No stack frames recognized")
        return 1

    print(format_stack(frames, compact=not args.no_compact))
    return 0
