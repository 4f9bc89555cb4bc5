# src/main.py — v2
"""CLI entry point — modularity of a graph partition.

Usage:
    modscore <edge_list> <cover> [-v] [-a] [--cross-check] [--json]

Exit codes: 0 on success, 1 on any fatal or usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from modscore.config.settings import Settings, load_settings
from modscore.core.errors import IncorrectCoverError, ModScoreError
from modscore.core.models import ModularityReport
from modscore.logging.logger import setup_logging
from modscore.pipeline.runner import run_pipeline
from modscore.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        settings = load_settings(**_settings_overrides(args))
    except (ModScoreError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    try:
        report = run_pipeline(args.edge_list, args.cover, settings)
    except IncorrectCoverError as exc:
        logger.debug("Cover rejected: %s", exc)
        print("Incorrect cover! Terminating!")
        return 1
    except ModScoreError as exc:
        logger.debug("Fatal error", exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    if settings.output_format == "json":
        print(report.model_dump_json(indent=2))
    else:
        _print_report(report, settings)
    return 0


class _CliParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = _CliParser(
        prog="modscore",
        description=f"modscore v{__version__} — disjoint modularity of a graph partition",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument("edge_list", type=Path, help="Edge list: one `u v` pair per edge")
    parser.add_argument("cover", type=Path, help="Cover (partition) of the graph's nodes")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print elapsed time per phase",
    )
    parser.add_argument(
        "-a", "--alternate", action="store_true",
        help="Cover lists one community per line, members ended by -1",
    )
    parser.add_argument(
        "--reject-duplicates", action="store_true",
        help="Fail when the cover labels a node more than once",
    )
    parser.add_argument(
        "--cross-check", action="store_true",
        help="Also compute modularity with networkx",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full report as JSON",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map explicitly set CLI flags onto Settings fields."""
    overrides: dict[str, object] = {}
    if args.verbose:
        overrides["timing_enabled"] = True
    if args.alternate:
        overrides["cover_format"] = "alternate"
    if args.reject_duplicates:
        overrides["duplicate_policy"] = "reject"
    if args.cross_check:
        overrides["cross_check"] = True
    if args.json:
        overrides["output_format"] = "json"
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides


def _print_report(report: ModularityReport, settings: Settings) -> None:
    """Print the plain-text summary of a ModularityReport."""
    print(f"n = {report.order}, m = {report.size}")
    print(f"Read {report.num_clusters} clusters")
    print(f"Modularity of the partition: {settings.format_score(report.modularity)}")
    if report.reference_modularity is not None:
        print(f"networkx modularity: {settings.format_score(report.reference_modularity)}")

    if settings.timing_enabled:
        t = report.timings
        print()
        print(f"Graph is read in {t.graph_read_s:g} seconds")
        print(f"Cover is read in {t.cover_read_s:g} seconds")
        print(f"Modularity calculated in {t.modularity_s:g} seconds")
        print(f"Total time taken: {t.total_s:g} seconds")


if __name__ == "__main__":
    sys.exit(main())
