"""
CSV parsing logic for LinkedIn export files.

Parsing is intentionally naive: lines are split on newlines and fields on
commas, with no support for quoting or escaping. A value containing a comma
shifts every following column of its row; this is a known limitation.
"""

from typing import Dict, List, Optional

from common import constants
from common.errors import CsvParseError


Record = Dict[str, str]

# First lines of a single-column skills file that are headers, not skills
SKILL_LIST_HEADERS = ("name", "skill_name")


def detect_csv_kind(filename: str) -> Optional[str]:
    """
    Detect which LinkedIn export a file holds from its name.

    Args:
        filename: Uploaded file name (e.g., 'Positions.csv')

    Returns:
        One of the CSV_KIND_* constants, or None if the name matches no kind
    """
    lowered = (filename or "").lower()
    for marker, kind in constants.CSV_KIND_FILENAME_MARKERS:
        if marker in lowered:
            return kind
    return None


def _split_lines(csv_content: str) -> List[str]:
    """Split content into lines, dropping blank ones."""
    return [line for line in csv_content.split('\n') if line.strip()]


def _split_fields(line: str) -> List[str]:
    return [field.strip() for field in line.split(',')]


def _map_row(headers: List[str], line: str) -> Record:
    """Map one data line onto lower-cased headers; missing fields become ''."""
    values = _split_fields(line)
    return {
        header.lower(): values[index] if index < len(values) else ''
        for index, header in enumerate(headers)
    }


def parse_rows(csv_content: str) -> List[Record]:
    """
    Parse CSV text into one record per data line.

    The first non-blank line is the header row. Content with no lines or only a
    header yields an empty list.

    Args:
        csv_content: Decoded CSV text

    Returns:
        Records mapping lower-cased header to raw string value
    """
    lines = _split_lines(csv_content)
    if not lines:
        return []

    headers = _split_fields(lines[0])
    return [_map_row(headers, line) for line in lines[1:]]


def parse_profile_csv(csv_content: str) -> Record:
    """
    Parse a profile export; only the first data line is used.

    Raises:
        CsvParseError: If there is no header line plus at least one data line
    """
    lines = _split_lines(csv_content)
    if len(lines) < 2:
        raise CsvParseError("Profile CSV must have at least header and one data row")

    headers = _split_fields(lines[0])
    return _map_row(headers, lines[1])


def parse_positions_csv(csv_content: str) -> List[Record]:
    return parse_rows(csv_content)


def parse_education_csv(csv_content: str) -> List[Record]:
    return parse_rows(csv_content)


def _is_name_list(lines: List[str]) -> bool:
    """A skills file is a bare name list when no line has more than one column."""
    return all(',' not in line for line in lines)


def parse_skills_csv(csv_content: str) -> List[Record]:
    """
    Parse a skills export.

    Two layouts are accepted:
    - a single-column list of names, optionally under a "name" or
      "skill_name" header; every name gets the default level
    - a regular header-mapped CSV such as "name,level"

    Args:
        csv_content: Decoded CSV text

    Returns:
        Skill records; name-list entries carry 'name' and 'level' keys
    """
    lines = _split_lines(csv_content)
    if not lines:
        return []

    if not _is_name_list(lines):
        return parse_rows(csv_content)

    names = [line.strip() for line in lines]
    if names[0].lower() in SKILL_LIST_HEADERS:
        names = names[1:]

    return [
        {"name": name, "level": constants.DEFAULT_SKILL_LEVEL}
        for name in names if name
    ]


KIND_PARSERS = {
    constants.CSV_KIND_PROFILE: parse_profile_csv,
    constants.CSV_KIND_POSITIONS: parse_positions_csv,
    constants.CSV_KIND_SKILLS: parse_skills_csv,
    constants.CSV_KIND_EDUCATION: parse_education_csv,
}


def decode_csv_bytes(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a BOM and carriage returns."""
    text = content.decode('utf-8-sig', errors='replace')
    return text.replace('\r\n', '\n').replace('\r', '\n')
