"""cpm-slack CLI entry point.

Usage: cpm-slack GRAPH_FILE [--format table|json] [--top N]
"""
import argparse
import logging
import sys

from cpm_slack.graph.slack import ZERO_SLACK_TOLERANCE

log = logging.getLogger("cpm_slack")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpm-slack",
        description="Per-node slack (total float) of a dependency graph.",
    )
    parser.add_argument(
        "graph",
        help="Graph file: .json with nodes/edges, or text with one "
        "'src dst' edge per line.",
    )
    parser.add_argument(
        "--format", choices=("table", "json"), default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--top", type=int, default=0,
        help="Show only the N nodes with the most slack in the table "
        "(default: all; JSON output always lists every node)",
    )
    parser.add_argument(
        "--tolerance", type=float, default=ZERO_SLACK_TOLERANCE,
        help=f"Slack below this counts as critical "
        f"(default: {ZERO_SLACK_TOLERANCE})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    from cpm_slack.graph.io import load_graph
    from cpm_slack.report import analyze, format_json, format_table

    graph = load_graph(args.graph)
    log.debug("loaded %r from %s", graph, args.graph)

    report = analyze(graph, top=args.top, tolerance=args.tolerance)
    if report.cyclic:
        log.warning(
            "%s contains a cycle; slack is undefined and reported as 0",
            args.graph,
        )

    if args.format == "json":
        print(format_json(report))
    else:
        print(format_table(report))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except (OSError, ValueError) as exc:
        print(f"cpm-slack: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
