"""
Pipeline orchestrator for the Portfolio Backend.
Runs the LinkedIn import steps in order: parse each uploaded CSV, transform
the parsed data into section documents, and optionally persist them.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import uuid4

from common import constants, logger
from common.errors import CsvParseError
from common.schemas import CategorizationPreferences, ImportResult, LinkedInCsvData
from pipeline.step_1_parse import KIND_PARSERS, decode_csv_bytes, detect_csv_kind
from pipeline.step_2_transform import map_skill, transform_linkedin_data
from pipeline.step_3_persist import save_to_portfolio

UploadedCsv = Tuple[str, bytes]


def new_import_id() -> str:
    """Generate a new short import ID."""
    return uuid4().hex[:8]


def count_named_skills(records: Sequence[dict]) -> int:
    """Number of skill records that map to a skill (i.e. carry a name)."""
    return sum(1 for record in records if map_skill(record) is not None)


def parse_linkedin_files(files: Sequence[UploadedCsv], import_id: str) -> Tuple[LinkedInCsvData, Dict[str, str]]:
    """
    Parse every uploaded file according to the kind its name indicates.

    A file that fails to parse is logged and skipped; the remaining files are
    still processed. When two files share a kind, the later one wins.

    Args:
        files: (filename, raw bytes) pairs
        import_id: Import ID used to scope log lines

    Returns:
        Tuple of (parsed data, mapping filename -> parse error message)
    """
    parse_logger = logger.get_structured_logger(import_id, "csv_parse")
    parsed: Dict[str, object] = {}
    file_errors: Dict[str, str] = {}

    for filename, content in files:
        kind = detect_csv_kind(filename)
        if kind is None:
            logger.log_structured_event(
                parse_logger,
                "csv_file_ignored",
                {"filename": filename},
                f"Ignoring {filename}: name matches no LinkedIn export kind"
            )
            continue

        try:
            records = KIND_PARSERS[kind](decode_csv_bytes(content))
            if kind == constants.CSV_KIND_SKILLS and records and count_named_skills(records) == 0:
                raise CsvParseError("No skill names found")
            parsed[kind] = records
        except CsvParseError as e:
            logger.log_structured_error(
                parse_logger,
                "csv_parse_failed",
                f"Error parsing {filename}: {str(e)}",
                {"filename": filename, "kind": kind}
            )
            file_errors[filename] = str(e)
            continue

        logger.log_structured_event(
            parse_logger,
            "csv_file_parsed",
            {"filename": filename, "kind": kind},
            f"Parsed {filename} as {kind}"
        )

    return LinkedInCsvData(**parsed), file_errors


def summarize_imported_data(csv_data: LinkedInCsvData) -> Dict[str, object]:
    """Count what was found in the parsed files."""
    return {
        "profile": "Yes" if csv_data.profile is not None else "No",
        "positions": len(csv_data.positions),
        "skills": count_named_skills(csv_data.skills),
        "education": len(csv_data.education)
    }


def run_linkedin_import(files: Sequence[UploadedCsv],
                        preferences: CategorizationPreferences,
                        persist: bool = False,
                        data_dir: Optional[Path] = None,
                        import_id: Optional[str] = None) -> ImportResult:
    """
    Run a LinkedIn CSV import end to end.

    Args:
        files: (filename, raw bytes) pairs
        preferences: Categorization preferences for the skills section
        persist: Validate and write the produced sections when True
        data_dir: Optional data directory override
        import_id: Optional import ID (generated when omitted)

    Returns:
        ImportResult with the produced sections, per-file parse errors and,
        when persisting, one save result per section
    """
    import_id = import_id or new_import_id()
    orchestrator_logger = logger.get_structured_logger(import_id, "import_orchestrator")

    logger.log_structured_event(
        orchestrator_logger,
        "import_started",
        {
            "filenames": [filename for filename, _ in files],
            "persist": persist,
            "preferences": preferences.model_dump(mode='json')
        },
        f"Starting LinkedIn import {import_id} with {len(files)} file(s)"
    )

    csv_data, file_errors = parse_linkedin_files(files, import_id)
    portfolio_data = transform_linkedin_data(csv_data, preferences)

    result = ImportResult(
        import_id=import_id,
        portfolio_data=portfolio_data,
        file_errors=file_errors,
        imported_counts=summarize_imported_data(csv_data),
        persisted=persist
    )

    if persist:
        result.save_results = save_to_portfolio(portfolio_data, data_dir)
        failed: List[str] = [r.section for r in result.save_results if not r.saved]
        if failed:
            logger.log_structured_error(
                orchestrator_logger,
                "import_sections_failed",
                f"Import {import_id} could not save: {', '.join(failed)}",
                {"failed_sections": failed}
            )

    logger.log_structured_event(
        orchestrator_logger,
        "import_completed",
        {
            "sections": list(portfolio_data.keys()),
            "file_errors": file_errors,
            "imported_counts": result.imported_counts
        },
        f"LinkedIn import {import_id} completed"
    )

    return result
