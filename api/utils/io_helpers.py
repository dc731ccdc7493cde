"""
IO helper functions for the LinkedIn import endpoints.
Reads and checks multipart CSV uploads and resolves categorization preferences.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from fastapi import UploadFile
from pydantic import ValidationError

from common import constants, errors, storage
from common.errors import StorageError
from common.schemas import CategorizationPreferences, format_validation_errors


def _is_csv_upload(upload: UploadFile) -> bool:
    filename = (upload.filename or "").lower()
    content_type = (upload.content_type or "").lower()
    return (
        filename.endswith(constants.UPLOAD_CONFIG["allowed_extension"])
        or content_type == constants.UPLOAD_CONFIG["allowed_content_type"]
    )


async def read_csv_uploads(files: Optional[List[UploadFile]]) -> List[Tuple[str, bytes]]:
    """
    Read uploaded CSV files into (filename, bytes) pairs.

    Args:
        files: Uploaded files from the multipart 'files' field

    Returns:
        List of (filename, content) pairs in upload order

    Raises:
        HTTPException: 400 when no files were sent, too many were sent, a file
            is not a CSV, or a file exceeds the size limit
    """
    if not files:
        errors.raise_no_files()

    max_files = constants.UPLOAD_CONFIG["max_files"]
    if len(files) > max_files:
        errors.raise_too_many_files(len(files), max_files)

    max_bytes = constants.UPLOAD_CONFIG["max_file_size_bytes"]
    uploads = []
    for upload in files:
        filename = upload.filename or "upload.csv"
        if not _is_csv_upload(upload):
            errors.raise_invalid_csv(
                "Only CSV files are allowed",
                {"filename": filename, "content_type": upload.content_type}
            )

        content = await upload.read(max_bytes + 1)
        if len(content) > max_bytes:
            errors.raise_file_too_large(filename, max_bytes)

        uploads.append((filename, content))

    return uploads


def _drop_null_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Null fields fall back to their defaults."""
    return {key: value for key, value in raw.items() if value is not None}


def build_preferences(raw: Any) -> CategorizationPreferences:
    """
    Validate a categorization object, filling in defaults.

    Raises:
        HTTPException: 400 when the object is malformed
    """
    if not isinstance(raw, dict):
        errors.raise_invalid_categorization("categorization must be a JSON object")

    try:
        return CategorizationPreferences.model_validate(_drop_null_fields(raw))
    except ValidationError as e:
        errors.raise_invalid_categorization(format_validation_errors(e))


def parse_categorization_field(raw_field: Optional[str]) -> Optional[CategorizationPreferences]:
    """
    Parse the optional 'categorization' multipart form field.

    Args:
        raw_field: JSON text sent by the client, or None

    Returns:
        Parsed preferences, or None when the field is absent or blank
    """
    if raw_field is None or not raw_field.strip():
        return None

    try:
        raw = json.loads(raw_field)
    except json.JSONDecodeError as e:
        errors.raise_invalid_categorization(f"categorization is not valid JSON: {str(e)}")

    return build_preferences(raw)


def load_stored_preferences() -> CategorizationPreferences:
    """
    Load the persisted preferences, or the defaults when none are stored.

    Raises:
        StorageError: If the preferences file cannot be read or no longer
            holds a valid preferences object
    """
    stored = storage.read_preferences()
    if not isinstance(stored, dict):
        raise StorageError("Stored categorization preferences are not a JSON object")

    try:
        return CategorizationPreferences.model_validate(_drop_null_fields(stored))
    except ValidationError as e:
        raise StorageError(
            f"Stored categorization preferences are invalid: {'; '.join(format_validation_errors(e))}"
        )
