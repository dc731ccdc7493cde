"""
Portfolio section routes for the Portfolio Backend API.
Public reads of the section store and admin-only updates.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from common import constants, errors, logger, storage
from common.errors import SectionNotFoundError, StorageError
from common.schemas import validate_section
from api.utils.auth_utils import require_admin
from .schema import (
    PortfolioUpdateResponse,
    RoleStructure,
    SectionUpdateResponse,
    SkillsStructureResponse
)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


def _read_section_or_raise(section: str) -> Dict[str, Any]:
    """Read one section, translating storage failures into HTTP errors."""
    try:
        return storage.read_section(section)
    except SectionNotFoundError:
        errors.raise_section_not_found(section)
    except StorageError as e:
        errors.raise_internal_server_error(f"Failed to read {section} data", str(e))


@router.get("")
async def get_portfolio():
    """Return every section; sections that cannot be read are null."""
    return storage.read_all_sections()


@router.get("/skills/structure", response_model=SkillsStructureResponse)
async def get_skills_structure():
    """List the skill roles the importer can produce, with their subcategories."""
    roles = constants.get_role_names()
    return SkillsStructureResponse(
        availableRoles=roles,
        roles=[
            RoleStructure(name=role, subcategories=constants.get_subcategory_names(role))
            for role in roles
        ]
    )


@router.get("/skills/flat")
async def get_flat_skills():
    """
    Return the skills section with every category collapsed to a single list.

    Raises:
        HTTPException: 404 when the skills section does not exist
    """
    skills = _read_section_or_raise(constants.SKILLS_SECTION)
    flattened = dict(skills)
    flattened["skillCategories"] = storage.flatten_skill_categories(skills.get("skillCategories", {}))
    return flattened


@router.get("/{section}")
async def get_section(section: str):
    """
    Return one section.

    Raises:
        HTTPException: 400 for an unknown section name, 404 when missing
    """
    if not constants.is_valid_section(section):
        errors.raise_invalid_section(section)
    return _read_section_or_raise(section)


@router.put("", response_model=PortfolioUpdateResponse)
async def update_portfolio(
    payload: Dict[str, Any] = Body(...),
    _claims: Dict[str, Any] = Depends(require_admin)
):
    """
    Update several sections at once.

    Every section is validated before anything is written; if any section
    fails, nothing is written and the errors are returned per section.

    Raises:
        HTTPException: 400 for unknown sections or validation failures
    """
    update_logger = logger.get_structured_logger("portfolio", "api_update")

    if not payload:
        errors.raise_invalid_request("Request body must contain at least one section")

    unknown = [section for section in payload if not constants.is_valid_section(section)]
    if unknown:
        errors.raise_invalid_section(", ".join(unknown))

    validated: Dict[str, Dict[str, Any]] = {}
    validation_errors: Dict[str, List[str]] = {}
    for section, document in payload.items():
        sanitized, section_errors = validate_section(section, document)
        if section_errors:
            validation_errors[section] = section_errors
        else:
            validated[section] = sanitized

    if validation_errors:
        logger.log_structured_error(
            update_logger,
            "portfolio_validation_failed",
            f"Validation failed for: {', '.join(validation_errors)}",
            {"endpoint": "update_portfolio", "errors": validation_errors}
        )
        errors.raise_validation_failed(validation_errors)

    try:
        for section, document in validated.items():
            storage.write_section(section, document)
    except StorageError as e:
        logger.log_structured_error(
            update_logger,
            "portfolio_write_failed",
            f"Failed to write portfolio: {str(e)}",
            {"endpoint": "update_portfolio", "error": str(e)}
        )
        errors.raise_internal_server_error("Failed to save portfolio data", str(e))

    logger.log_structured_event(
        update_logger,
        "portfolio_updated",
        {"endpoint": "update_portfolio", "sections": list(validated)},
        f"Updated {len(validated)} section(s)"
    )
    return PortfolioUpdateResponse(
        message="Portfolio updated successfully",
        sections=list(validated)
    )


@router.put("/{section}", response_model=SectionUpdateResponse)
async def update_section(
    section: str,
    payload: Any = Body(...),
    _claims: Dict[str, Any] = Depends(require_admin)
):
    """
    Replace one section with a validated document.

    Unknown fields are stripped before writing.

    Raises:
        HTTPException: 400 for an unknown section or a document that fails validation
    """
    update_logger = logger.get_structured_logger(section, "api_update")

    if not constants.is_valid_section(section):
        errors.raise_invalid_section(section)

    sanitized, section_errors = validate_section(section, payload)
    if section_errors:
        logger.log_structured_error(
            update_logger,
            "section_validation_failed",
            f"Validation failed for {section}",
            {"endpoint": "update_section", "section": section, "errors": section_errors}
        )
        errors.raise_validation_failed(section_errors)

    try:
        storage.write_section(section, sanitized)
    except StorageError as e:
        logger.log_structured_error(
            update_logger,
            "section_write_failed",
            f"Failed to write {section}: {str(e)}",
            {"endpoint": "update_section", "section": section, "error": str(e)}
        )
        errors.raise_internal_server_error(f"Failed to save {section} data", str(e))

    logger.log_structured_event(
        update_logger,
        "section_updated",
        {"endpoint": "update_section", "section": section},
        f"Updated section {section}"
    )
    return SectionUpdateResponse(
        message=f"{section} updated successfully",
        section=section,
        data=sanitized
    )
