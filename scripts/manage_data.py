#!/usr/bin/env python3
"""
Data management CLI for the Portfolio Backend.

Usage:
    python scripts/manage_data.py init
    python scripts/manage_data.py check
    python scripts/manage_data.py reset
    python scripts/manage_data.py import Profile.csv Positions.csv Skills.csv [options]

Examples:
    # Preview an import with flat skill categories
    python scripts/manage_data.py import exports/Skills.csv --no-subcategories

    # Import and save, keeping Other as a flat list
    python scripts/manage_data.py import exports/*.csv --save --flat Other
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from common import constants, storage, logger
from common.schemas import CategorizationPreferences, format_validation_errors
from pipeline.orchestrator import run_linkedin_import


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Manage the portfolio data directory and run LinkedIn imports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Data directory (default: PORTFOLIO_DATA_DIR or ./data)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create and seed the data directory if missing")
    subparsers.add_parser("check", help="Report missing section files")
    subparsers.add_parser("reset", help="Delete and re-seed the data directory")

    import_parser = subparsers.add_parser("import", help="Run the LinkedIn CSV importer")
    import_parser.add_argument("csv_files", nargs="+", type=Path, help="LinkedIn export CSV files")
    import_parser.add_argument(
        "--save",
        action="store_true",
        help="Write the imported sections instead of only printing them"
    )
    import_parser.add_argument(
        "--no-subcategories",
        action="store_true",
        help="Disable subcategory grouping unless a role is overridden"
    )
    import_parser.add_argument(
        "--min-skills",
        type=int,
        default=constants.CATEGORIZATION_DEFAULTS["minSkillsForSubcategory"],
        help="Minimum skills in a role before it is split into subcategories"
    )
    import_parser.add_argument(
        "--flat",
        action="append",
        default=[],
        metavar="ROLE",
        help="Always keep this role as a flat list (repeatable)"
    )
    import_parser.add_argument(
        "--nested",
        action="append",
        default=[],
        metavar="ROLE",
        help="Always split this role into subcategories (repeatable)"
    )

    return parser.parse_args(argv)


def build_cli_preferences(args) -> CategorizationPreferences:
    """Build categorization preferences from the import options."""
    overrides = {role: "flat" for role in args.flat}
    overrides.update({role: "subcategories" for role in args.nested})
    return CategorizationPreferences(
        useSubcategories=not args.no_subcategories,
        minSkillsForSubcategory=args.min_skills,
        categoryOverrides=overrides
    )


def run_import(args) -> int:
    files = []
    for csv_path in args.csv_files:
        if not csv_path.is_file():
            print(f"✗ File not found: {csv_path}", file=sys.stderr)
            return 1
        files.append((csv_path.name, csv_path.read_bytes()))

    try:
        preferences = build_cli_preferences(args)
    except ValidationError as e:
        for message in format_validation_errors(e):
            print(f"✗ Invalid option: {message}", file=sys.stderr)
        return 1

    result = run_linkedin_import(files, preferences, persist=args.save, data_dir=args.data_dir)
    print(json.dumps(result.model_dump(mode='json'), indent=2))

    for filename, error in result.file_errors.items():
        print(f"✗ {filename}: {error}", file=sys.stderr)

    failed = [r for r in result.save_results if not r.saved]
    return 1 if failed else 0


def main(argv=None) -> int:
    args = parse_arguments(argv)
    logger.setup_root_logger()

    if args.command == "init":
        created = storage.initialize_data_directory(args.data_dir)
        print("✓ Data directory created" if created else "✓ Data directory already exists")
        return 0

    if args.command == "check":
        missing = storage.check_data_directory(args.data_dir)
        if missing:
            print(f"✗ Missing section files: {', '.join(missing)}")
            return 1
        print("✓ All section files present")
        return 0

    if args.command == "reset":
        storage.reset_data_directory(args.data_dir)
        print("✓ Data directory reset")
        return 0

    return run_import(args)


if __name__ == "__main__":
    sys.exit(main())
