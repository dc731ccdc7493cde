"""
Persistence of imported section documents.
Validates each produced section and writes it to the section store.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from common import constants, storage
from common.errors import StorageError
from common.schemas import SectionSaveResult, validate_section

logger = logging.getLogger(__name__)


def save_section(section: str, document: Dict[str, Any],
                 data_dir: Optional[Path] = None) -> SectionSaveResult:
    """
    Validate one section document and write it if it passes.

    Args:
        section: Section name
        document: Document produced by the transformer
        data_dir: Optional data directory override

    Returns:
        SectionSaveResult describing the outcome
    """
    sanitized, validation_errors = validate_section(section, document)
    if validation_errors:
        logger.warning(f"Imported {section} failed validation: {validation_errors}")
        return SectionSaveResult(section=section, saved=False, errors=validation_errors)

    try:
        storage.write_section(section, sanitized, data_dir)
    except StorageError as e:
        logger.error(f"Error updating {section}.json: {str(e)}")
        return SectionSaveResult(section=section, saved=False, errors=[str(e)])

    logger.info(f"Updated {section}.json with LinkedIn CSV data")
    return SectionSaveResult(section=section, saved=True)


def save_to_portfolio(portfolio_data: Dict[str, Any],
                      data_dir: Optional[Path] = None) -> List[SectionSaveResult]:
    """
    Save every imported section, one at a time.

    A failing section does not stop or roll back the others.

    Args:
        portfolio_data: Mapping of section name to document
        data_dir: Optional data directory override

    Returns:
        One result per section present in portfolio_data, in save order
    """
    results = []
    for section in constants.IMPORTABLE_SECTIONS:
        if section in portfolio_data:
            results.append(save_section(section, portfolio_data[section], data_dir))
    return results
