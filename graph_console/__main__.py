"""
    Entry point: ``python -m graph_console`` or ``graph-console``.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import ConsoleConfig
from .console import GraphConsole
from .context import GraphContext
from .observer import GraphObserver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-console",
        description="Interactive editor for a directed, weighted graph.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr).",
    )
    parser.add_argument(
        "--unlocked-observer", action="store_true",
        help="Let the observer read the graph without taking the command lock.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ConsoleConfig(observer_uses_graph_lock=not args.unlocked_observer)
    context = GraphContext(config=config)
    context.graph.add_observer(GraphObserver.from_context(context))
    return GraphConsole(context).run()


if __name__ == "__main__":
    sys.exit(main())
