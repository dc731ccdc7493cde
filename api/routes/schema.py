"""
API-facing Pydantic models for the Portfolio Backend.
Defines request/response schemas for FastAPI endpoints.

Section documents themselves are validated by common.schemas; the models here
describe only the envelopes around them.
"""

from pydantic import BaseModel, Field
from typing import Dict, Optional, List, Any


class LoginRequest(BaseModel):
    """Request model for the login endpoint."""
    password: str = ""


class LoginResponse(BaseModel):
    """Response model for the login endpoint."""
    token: str


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str = "ok"
    timestamp: str
    uptime: float = Field(..., description="Seconds since the API started")
    environment: str


class RoleStructure(BaseModel):
    """A skill role together with its subcategories."""
    name: str
    subcategories: List[str] = Field(default_factory=list)


class SkillsStructureResponse(BaseModel):
    """Response model for the skills structure endpoint."""
    availableRoles: List[str]
    roles: List[RoleStructure] = Field(
        default_factory=list, description="Roles with their subcategories"
    )


class CategorizationRequest(BaseModel):
    """Request model for saving categorization preferences."""
    categorization: Optional[Dict[str, Any]] = None


class CategorizationResponse(BaseModel):
    """Response model for saving categorization preferences."""
    message: str
    categorization: Dict[str, Any]


class SectionSaveResultResponse(BaseModel):
    """Outcome of saving one imported section."""
    section: str
    saved: bool
    errors: List[str] = Field(default_factory=list)


class ImportPreviewResponse(BaseModel):
    """Response model for the CSV preview endpoint."""
    message: str
    importId: str
    sections: List[str]
    fileCount: int
    importedData: Dict[str, Any] = Field(
        default_factory=dict, description="Counts of what was found in the files"
    )
    fileErrors: Dict[str, str] = Field(
        default_factory=dict, description="Parse error per failed file"
    )
    portfolioData: Dict[str, Any] = Field(default_factory=dict)


class ImportUploadResponse(ImportPreviewResponse):
    """Response model for the CSV upload endpoint."""
    saveResults: List[SectionSaveResultResponse] = Field(default_factory=list)


class SectionUpdateResponse(BaseModel):
    """Response model for a single-section update."""
    message: str
    section: str
    data: Dict[str, Any]


class PortfolioUpdateResponse(BaseModel):
    """Response model for a multi-section update."""
    message: str
    sections: List[str]
