"""Command line interface.

Usage:
    faacheck graph.json
    faacheck graph.json --format json
    faacheck - --config path/to/pyproject.toml < graph.json

Exit status: 0 = pass, 1 = violations found, 2 = error.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from faacheck import __version__
from faacheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from faacheck.application.services import GraphAuditor
from faacheck.domain.exceptions.base import FaaCheckError
from faacheck.domain.exceptions.parsing import GraphFormatError
from faacheck.domain.model.configuration import AuditConfig
from faacheck.infrastructure.adapters.graph_loader import load_graph, loads_graph
from faacheck.infrastructure.config_loader import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from faacheck.domain.model.module_graph import ModuleGraph
    from faacheck.domain.ports.reporter import ReporterProtocol

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

DEFAULT_CONFIG = Path("pyproject.toml")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="faacheck",
        description="Check a module graph against Feature-Action Architecture layering rules.",
    )
    parser.add_argument(
        "graph",
        help="module graph JSON file ('-' reads stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="pyproject.toml with a [tool.faacheck] table (default: ./pyproject.toml if present)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json", "console"),
        default="text",
        help="report format (default: text)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="threads for edge validation (overrides config)",
    )
    parser.add_argument(
        "--no-cycles",
        action="store_true",
        help="do not list import cycles",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="debug logging to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _resolve_config(args)
        graph = _read_graph(args.graph)
        auditor = GraphAuditor(config, reporter=_make_reporter(args.format))
        report = auditor.audit_graph(graph)
    except (FaaCheckError, FileNotFoundError) as e:
        print(f"faacheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK if report.passed else EXIT_VIOLATIONS


def _resolve_config(args: argparse.Namespace) -> AuditConfig:
    """Load config file and apply command line overrides."""
    if args.config is not None:
        config = load_config(args.config)
    elif DEFAULT_CONFIG.is_file():
        config = load_config(DEFAULT_CONFIG)
    else:
        config = AuditConfig()

    if args.workers is not None:
        if args.workers < 1:
            raise FaaCheckError(f"--workers must be >= 1, got {args.workers}")
        config = dataclasses.replace(config, max_workers=args.workers)
    if args.no_cycles:
        config = dataclasses.replace(config, detect_cycles=False)

    logger.debug("config: %s", config)
    return config


def _read_graph(name: str) -> ModuleGraph:
    if name == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise GraphFormatError("<stdin>", f"not valid UTF-8: {e}") from e
        return loads_graph(text, source="<stdin>")
    return load_graph(Path(name))


def _make_reporter(fmt: str) -> ReporterProtocol:
    match fmt:
        case "json":
            return JSONReporter(sys.stdout)
        case "console":
            return ConsoleReporter()
        case _:
            return PlainTextReporter(sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
