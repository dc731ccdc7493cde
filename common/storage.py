"""
Storage utilities for the Portfolio Backend.
Provides section-centric JSON file operations on the local data directory.

Layout:
- {data_dir}/{section}.json      one document per portfolio section
- {data_dir}/categorization.json skill categorization preferences

Writes replace the whole document. There is no locking: two concurrent writes
to the same section race and the last one wins.
"""

import json
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from . import constants
from .errors import SectionNotFoundError, StorageError
from .placeholders import PLACEHOLDER_DATA

logger = logging.getLogger(__name__)


# =============================================================================
# CORE JSON FILE I/O
# =============================================================================

def get_section_path(section: str, data_dir: Optional[Path] = None) -> Path:
    """Get the path of the JSON file backing a section."""
    base_dir = data_dir or constants.get_data_dir()
    return Path(base_dir) / f"{section}{constants.SECTION_FILE_SUFFIX}"


def write_json(path: Path, data: Any) -> None:
    """
    Write JSON data to a file (2-space indent, UTF-8).

    Args:
        path: Target file path
        data: Data to write as JSON

    Raises:
        StorageError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as e:
        raise StorageError(f"Failed to write {path.name}: {str(e)}")


def read_json(path: Path) -> Optional[Any]:
    """
    Read JSON data from a file.

    Args:
        path: Source file path

    Returns:
        Parsed JSON data, or None if the file doesn't exist

    Raises:
        StorageError: If the file exists but cannot be read or parsed
    """
    if not path.exists():
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise StorageError(f"Invalid JSON in {path.name}: {str(e)}")
    except OSError as e:
        raise StorageError(f"Failed to read {path.name}: {str(e)}")


# =============================================================================
# SECTION STORE
# =============================================================================

def _start_date_ordinal(start_date: Any) -> Optional[int]:
    """Turn 'YYYY', 'YYYY-MM' or 'YYYY-MM-DD' into a sortable month number."""
    if not isinstance(start_date, str):
        return None
    for date_format in ("%Y-%m", "%Y-%m-%d", "%Y"):
        try:
            parsed = datetime.strptime(start_date.strip(), date_format)
            return parsed.year * 12 + parsed.month
        except ValueError:
            continue
    return None


def _job_sort_key(job: Any) -> Tuple[int, int, int]:
    if not isinstance(job, dict):
        return (1, 1, 0)
    current_rank = 0 if job.get("isCurrent") else 1
    ordinal = _start_date_ordinal(job.get("startDate"))
    if ordinal is None:
        return (current_rank, 1, 0)
    return (current_rank, 0, -ordinal)


def sort_experience_jobs(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sort experience jobs: current jobs first, then start date descending.

    Jobs whose start date cannot be parsed go last within their group.

    Args:
        document: Experience section document

    Returns:
        The same document with its jobs list sorted in place
    """
    jobs = document.get("jobs") if isinstance(document, dict) else None
    if isinstance(jobs, list):
        jobs.sort(key=_job_sort_key)
    return document


def read_section(section: str, data_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read a section document.

    Experience documents come back with their jobs re-sorted; the order on
    disk is left untouched.

    Args:
        section: Section name (e.g., 'skills')
        data_dir: Optional data directory override

    Returns:
        The section document

    Raises:
        SectionNotFoundError: If the section file doesn't exist
        StorageError: If the file cannot be read or parsed
    """
    document = read_json(get_section_path(section, data_dir))
    if document is None:
        raise SectionNotFoundError(section)

    if section == constants.EXPERIENCE_SECTION:
        sort_experience_jobs(document)

    return document


def write_section(section: str, document: Dict[str, Any], data_dir: Optional[Path] = None) -> None:
    """
    Overwrite a section document. Callers validate before calling.

    Args:
        section: Section name
        document: Whole document to store
        data_dir: Optional data directory override

    Raises:
        StorageError: If the file cannot be written
    """
    write_json(get_section_path(section, data_dir), document)
    logger.info(f"Wrote section '{section}'")


def read_all_sections(data_dir: Optional[Path] = None) -> Dict[str, Optional[Dict[str, Any]]]:
    """
    Read every portfolio section.

    Args:
        data_dir: Optional data directory override

    Returns:
        Mapping of section name to document, None for missing or unreadable sections
    """
    portfolio_data = {}
    for section in constants.VALID_SECTIONS:
        try:
            portfolio_data[section] = read_section(section, data_dir)
        except StorageError as e:
            logger.error(f"Error reading {section} data: {str(e)}")
            portfolio_data[section] = None
    return portfolio_data


def flatten_skill_categories(skill_categories: Dict[str, Any]) -> Dict[str, List[Any]]:
    """
    Collapse nested skill categories into one flat list per category.

    Args:
        skill_categories: Mapping of category to a skill list or to a
            mapping of subcategory to skill list

    Returns:
        Mapping of category to a flat skill list
    """
    flattened = {}
    for category, skills in (skill_categories or {}).items():
        if isinstance(skills, list):
            flattened[category] = skills
        elif isinstance(skills, dict):
            all_skills = []
            for subcategory_skills in skills.values():
                if isinstance(subcategory_skills, list):
                    all_skills.extend(subcategory_skills)
            flattened[category] = all_skills
    return flattened


# =============================================================================
# CATEGORIZATION PREFERENCES
# =============================================================================

def get_preferences_path(data_dir: Optional[Path] = None) -> Path:
    base_dir = data_dir or constants.get_data_dir()
    return Path(base_dir) / constants.CATEGORIZATION_FILE


def read_preferences(data_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read the stored categorization preferences.

    Args:
        data_dir: Optional data directory override

    Returns:
        Stored preferences, or the defaults when none were saved yet

    Raises:
        StorageError: If the file exists but cannot be read or parsed
    """
    preferences = read_json(get_preferences_path(data_dir))
    if preferences is None:
        return constants.get_default_categorization()
    return preferences


def write_preferences(preferences: Dict[str, Any], data_dir: Optional[Path] = None) -> None:
    """Persist categorization preferences, creating the file on first use."""
    write_json(get_preferences_path(data_dir), preferences)
    logger.info("Wrote categorization preferences")


# =============================================================================
# DATA DIRECTORY BOOTSTRAP
# =============================================================================

def _write_placeholder_section(section: str, data_dir: Path) -> None:
    try:
        write_section(section, PLACEHOLDER_DATA[section], data_dir)
        logger.info(f"Created {section}.json with placeholder data")
    except StorageError as e:
        logger.error(f"Error creating {section}.json: {str(e)}")


def _copy_example_data(data_dir: Path, example_dir: Path) -> None:
    for section in constants.VALID_SECTIONS:
        source_path = get_section_path(section, example_dir)
        destination_path = get_section_path(section, data_dir)
        try:
            shutil.copyfile(source_path, destination_path)
            logger.info(f"Copied {section}.json from example data")
        except OSError as e:
            logger.warning(f"Error copying {section}.json: {str(e)}; using placeholder data")
            _write_placeholder_section(section, data_dir)


def initialize_data_directory(data_dir: Optional[Path] = None,
                              example_dir: Optional[Path] = None) -> bool:
    """
    Create and seed the data directory if it doesn't exist yet.

    Seeds from the example data directory when present, falling back to the
    built-in placeholder document for any section that cannot be copied.

    Args:
        data_dir: Optional data directory override
        example_dir: Optional example data directory override

    Returns:
        True if the directory was created, False if it already existed
    """
    data_dir = Path(data_dir or constants.get_data_dir())
    example_dir = Path(example_dir or constants.get_example_data_dir())

    if data_dir.exists():
        logger.info(f"Data directory already exists: {data_dir}")
        return False

    logger.info(f"Creating data directory: {data_dir}")
    data_dir.mkdir(parents=True, exist_ok=True)

    if example_dir.is_dir():
        logger.info(f"Example data found, copying from {example_dir}")
        _copy_example_data(data_dir, example_dir)
    else:
        logger.info("No example data found, creating placeholder data files")
        for section in constants.VALID_SECTIONS:
            _write_placeholder_section(section, data_dir)

    logger.info("Data directory initialization completed")
    return True


def check_data_directory(data_dir: Optional[Path] = None) -> List[str]:
    """
    Check the data directory for missing section files.

    Args:
        data_dir: Optional data directory override

    Returns:
        Names of sections whose file is missing (empty when complete)
    """
    missing = [
        section for section in constants.VALID_SECTIONS
        if not get_section_path(section, data_dir).exists()
    ]
    for section in missing:
        logger.warning(f"Missing file: {section}.json")
    return missing


def reset_data_directory(data_dir: Optional[Path] = None,
                         example_dir: Optional[Path] = None) -> None:
    """Remove the data directory and seed it again from scratch."""
    data_dir = Path(data_dir or constants.get_data_dir())

    if data_dir.exists():
        shutil.rmtree(data_dir)
        logger.info(f"Removed existing data directory: {data_dir}")

    initialize_data_directory(data_dir, example_dir)
    logger.info("Data directory reset")
