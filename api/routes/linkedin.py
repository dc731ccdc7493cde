"""
LinkedIn import routes for the Portfolio Backend API.
Accepts LinkedIn export CSVs, previews or persists the resulting sections, and
manages the stored skill categorization preferences.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from common import errors, logger, storage
from common.errors import StorageError
from common.schemas import CategorizationPreferences, ImportResult
from pipeline.orchestrator import new_import_id, run_linkedin_import
from api.utils.auth_utils import require_admin
from api.utils.io_helpers import (
    build_preferences,
    load_stored_preferences,
    parse_categorization_field,
    read_csv_uploads
)
from .schema import (
    CategorizationRequest,
    CategorizationResponse,
    ImportPreviewResponse,
    ImportUploadResponse,
    SectionSaveResultResponse
)

router = APIRouter(prefix="/api/linkedin", tags=["linkedin"])


def _resolve_preferences(categorization: Optional[str]) -> CategorizationPreferences:
    """Use the request's preferences when sent, otherwise the defaults."""
    preferences = parse_categorization_field(categorization)
    if preferences is None:
        preferences = CategorizationPreferences()
    return preferences


def _preview_fields(result: ImportResult, file_count: int) -> Dict[str, Any]:
    return {
        "importId": result.import_id,
        "sections": list(result.portfolio_data.keys()),
        "fileCount": file_count,
        "importedData": result.imported_counts,
        "fileErrors": result.file_errors,
        "portfolioData": result.portfolio_data
    }


async def _run_import(endpoint: str,
                      files: Optional[List[UploadFile]],
                      categorization: Optional[str],
                      persist: bool) -> ImportResult:
    """
    Shared body of the preview and upload endpoints.

    Raises:
        HTTPException: 400 for rejected uploads, 500 for unexpected failures
    """
    import_id = new_import_id()
    api_logger = logger.get_structured_logger(import_id, f"api_{endpoint}")

    logger.log_structured_event(
        api_logger,
        "api_request_started",
        {
            "endpoint": endpoint,
            "filenames": [upload.filename for upload in files or []]
        },
        f"Starting LinkedIn {endpoint} {import_id}"
    )

    try:
        uploads = await read_csv_uploads(files)
        preferences = _resolve_preferences(categorization)
        result = run_linkedin_import(uploads, preferences, persist=persist, import_id=import_id)
    except HTTPException:
        logger.log_structured_error(
            api_logger,
            "api_request_failed",
            f"LinkedIn {endpoint} request rejected",
            {"endpoint": endpoint}
        )
        raise
    except Exception as e:
        logger.log_structured_error(
            api_logger,
            "api_request_failed",
            f"Unexpected error during LinkedIn {endpoint}: {str(e)}",
            {"endpoint": endpoint, "error": str(e), "error_type": type(e).__name__}
        )
        errors.raise_internal_server_error(f"LinkedIn import failed: {str(e)}")

    logger.log_structured_event(
        api_logger,
        "api_request_succeeded",
        {
            "endpoint": endpoint,
            "sections": list(result.portfolio_data.keys()),
            "file_errors": result.file_errors
        },
        f"LinkedIn {endpoint} {import_id} succeeded"
    )
    return result


@router.post("/preview-csv", response_model=ImportPreviewResponse)
async def preview_csv(
    files: Optional[List[UploadFile]] = File(None),
    categorization: Optional[str] = Form(None),
    _claims: Dict[str, Any] = Depends(require_admin)
):
    """
    Transform uploaded LinkedIn CSVs without saving anything.

    Args:
        files: LinkedIn export CSV files
        categorization: Optional JSON-encoded categorization preferences

    Returns:
        ImportPreviewResponse with the sections that would be written
    """
    result = await _run_import("preview", files, categorization, persist=False)
    return ImportPreviewResponse(
        message="CSV data processed successfully",
        **_preview_fields(result, len(files or []))
    )


@router.post("/upload-csv", response_model=ImportUploadResponse)
async def upload_csv(
    files: Optional[List[UploadFile]] = File(None),
    categorization: Optional[str] = Form(None),
    _claims: Dict[str, Any] = Depends(require_admin)
):
    """
    Transform uploaded LinkedIn CSVs and write the resulting sections.

    Each section is validated and saved independently, so one failing section
    does not prevent the others from being written.

    Returns:
        ImportUploadResponse with a save result per section
    """
    result = await _run_import("upload", files, categorization, persist=True)
    saved = [r.section for r in result.save_results if r.saved]
    return ImportUploadResponse(
        message=f"LinkedIn data imported successfully ({len(saved)} of {len(result.save_results)} sections saved)",
        saveResults=[SectionSaveResultResponse(**r.model_dump()) for r in result.save_results],
        **_preview_fields(result, len(files or []))
    )


@router.get("/configure-categorization", response_model=CategorizationPreferences)
async def get_categorization(_claims: Dict[str, Any] = Depends(require_admin)):
    """
    Return the stored categorization preferences, or the defaults when none
    were saved yet.

    Raises:
        HTTPException: 500 when the stored preferences cannot be read
    """
    try:
        return load_stored_preferences()
    except StorageError as e:
        config_logger = logger.get_structured_logger("categorization", "api_configure")
        logger.log_structured_error(
            config_logger,
            "categorization_read_failed",
            f"Failed to fetch categorization preferences: {str(e)}",
            {"error": str(e)}
        )
        errors.raise_internal_server_error("Failed to fetch categorization preferences", str(e))


@router.post("/configure-categorization", response_model=CategorizationResponse)
async def configure_categorization(
    request: CategorizationRequest,
    _claims: Dict[str, Any] = Depends(require_admin)
):
    """
    Validate and store categorization preferences.

    Omitted or null fields take their default values.

    Raises:
        HTTPException: 400 when the categorization object is missing or malformed
    """
    config_logger = logger.get_structured_logger("categorization", "api_configure")

    if request.categorization is None:
        errors.raise_invalid_categorization("categorization object is required")

    preferences = build_preferences(request.categorization)

    try:
        storage.write_preferences(preferences.model_dump(mode='json'))
    except StorageError as e:
        logger.log_structured_error(
            config_logger,
            "categorization_write_failed",
            f"Failed to save categorization preferences: {str(e)}",
            {"error": str(e)}
        )
        errors.raise_internal_server_error("Failed to save categorization preferences", str(e))

    logger.log_structured_event(
        config_logger,
        "categorization_saved",
        {"categorization": preferences.model_dump(mode='json')},
        "Saved categorization preferences"
    )
    return CategorizationResponse(
        message="Categorization preferences saved successfully",
        categorization=preferences.model_dump(mode='json')
    )
