"""CLI entry point for ethical alignment scoring."""

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ethos.catalog import Catalog
from ethos.config import settings
from ethos.models import CompanyReport, ScoredCompany, default_guest_prefs, tag_name, validate_prefs
from ethos.report import build_company_report, search_and_rank

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def load_prefs(prefs_path: Optional[Path]) -> dict[str, float]:
    """Load user preferences from JSON, or use guest defaults."""
    if prefs_path is None:
        logger.info("No preferences given, using guest mode")
        return default_guest_prefs()

    with open(prefs_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    prefs = validate_prefs(data)
    logger.info(f"Loaded preferences from {prefs_path}")
    return prefs


def export_to_csv(report: CompanyReport, output_path: Path):
    """Export a company's alternatives to a CSV file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)

        # Header
        writer.writerow([
            "Rank",
            "Name",
            "Category",
            "Score",
            "Improvement",
            "Summary",
        ])

        # Data rows
        for i, alt in enumerate(report.alternatives, 1):
            writer.writerow([
                i,
                alt.name,
                alt.category.value,
                f"{alt.score:.3f}",
                f"{alt.score - report.score:+.3f}",
                alt.summary or "",
            ])


def print_report(report: CompanyReport):
    """Print a company report to console."""
    print("\n" + "=" * 60)
    print(f"{report.name.upper()} ({report.category.value})")
    print("=" * 60)

    print(f"\nAlignment score: {report.score:+.2f}")
    if report.summary:
        print(report.summary)

    if report.tag_scores:
        print("\n" + "-" * 60)
        print("SCORE BY CAUSE")
        print("-" * 60)
        for tag_key, value in sorted(report.tag_scores.items(), key=lambda kv: kv[1]):
            print(f"   {tag_name(tag_key):<28} {value:+.3f}")

    if report.highlighted_facts:
        print("\n" + "-" * 60)
        print(f"ON YOUR TOP CAUSES ({', '.join(tag_name(t) for t in report.top_tags)})")
        print("-" * 60)
        for fact in report.highlighted_facts:
            print(f"   {fact.tag_name}: {fact.stance.value} ({fact.confidence:.0%})")
            if fact.notes:
                print(f"      {fact.notes}")

    if report.sources:
        print("\nSources:")
        for source in report.sources:
            print(f"   - {source.publisher or source.title or 'Source'}: {source.url}")

    if report.alternatives:
        print("\n" + "-" * 60)
        heading = "CONSIDER INSTEAD" if report.show_alternatives else "BETTER ALIGNED"
        print(heading)
        print("-" * 60)
        for alt in report.alternatives:
            print(f"   {alt.name:<32} {alt.score:+.2f}")

    print("\n" + "=" * 60)


def print_alternatives(report: CompanyReport):
    """Print a company's better-aligned alternatives to console."""
    print(f"{report.name} ({report.category.value}): {report.score:+.2f}")
    if not report.alternatives:
        print("No better-aligned alternatives found.")
        return

    for i, alt in enumerate(report.alternatives, 1):
        print(f"#{i:<3} {alt.name:<36} {alt.score:+.2f} ({alt.score - report.score:+.2f})")


def print_results(results: list[ScoredCompany]):
    """Print ranked search results to console."""
    if not results:
        print("No companies found.")
        return

    for r in results:
        print(f"#{r.rank:<3} {r.name:<36} {r.category.value:<11} {r.score:+.2f}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Ethical alignment scores for companies"
    )
    parser.add_argument(
        "--catalog", "-c",
        type=Path,
        default=settings.catalog_path,
        help="Path to company catalog JSON (default: data/sample_catalog.json)",
    )
    parser.add_argument(
        "--prefs", "-p",
        type=Path,
        default=None,
        help="Path to preferences JSON (default: guest preferences)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Score one company")
    score_parser.add_argument("company_id", help="Company identifier")

    search_parser = subparsers.add_parser("search", help="Search and rank companies")
    search_parser.add_argument("query", nargs="?", default="", help="Name or category to search for")

    alternatives_parser = subparsers.add_parser("alternatives", help="List better-aligned alternatives")
    alternatives_parser.add_argument("company_id", help="Company identifier")

    export_parser = subparsers.add_parser("export", help="Export better-aligned alternatives as CSV")
    export_parser.add_argument("company_id", help="Company identifier")
    export_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=settings.data_dir / "alternatives.csv",
        help="Output CSV path (default: data/alternatives.csv)",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.catalog.exists():
        logger.error(f"Catalog file not found: {args.catalog}")
        sys.exit(1)

    try:
        catalog = Catalog.from_file(args.catalog)
        prefs = load_prefs(args.prefs)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Failed to load input: {e}")
        sys.exit(1)

    if args.command == "search":
        print_results(search_and_rank(catalog, args.query, prefs))
        return

    company = catalog.get(args.company_id)
    if company is None:
        logger.error(f"Company not found: {args.company_id}")
        sys.exit(1)

    report = build_company_report(company, catalog, prefs)

    if args.command == "export":
        export_to_csv(report, args.output)
        logger.info(f"Exported {len(report.alternatives)} alternatives to {args.output}")
    elif args.command == "alternatives":
        print_alternatives(report)
    else:
        print_report(report)


if __name__ == "__main__":
    main()
