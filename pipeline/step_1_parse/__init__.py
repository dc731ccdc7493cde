"""
Step 1 Parse module for the Portfolio Backend.
Turns uploaded LinkedIn CSV exports into lists of header-keyed records.
"""

from .csv_logic import (
    detect_csv_kind,
    decode_csv_bytes,
    parse_rows,
    parse_profile_csv,
    parse_positions_csv,
    parse_skills_csv,
    parse_education_csv,
    KIND_PARSERS
)

__all__ = [
    'detect_csv_kind',
    'decode_csv_bytes',
    'parse_rows',
    'parse_profile_csv',
    'parse_positions_csv',
    'parse_skills_csv',
    'parse_education_csv',
    'KIND_PARSERS'
]
