"""stacklog probe — Show which runtime and frame format would be used."""

from stacklog.frames import identify_runtime, parser_for_runtime


def register(subparsers, parents):
    """Register the 'probe' subcommand."""
    p = subparsers.add_parser(
        "probe",
        parents=parents,
        help="Identify the runtime for a user agent and its frame format",
    )
    p.set_defaults(func=run)


def run(args):
    user_agent = args.user_agent
    if user_agent is None and getattr(args, "settings", None) is not None:
        user_agent = args.settings.user_agent
    runtime = identify_runtime(user_agent)
    parser = parser_for_runtime(runtime)
    print(f"Runtime: {runtime.value}")
    print(f"Format:  {parser.format_name}")
    return 0
