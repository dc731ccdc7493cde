"""
Pydantic data models for the Portfolio Backend.
Defines the per-section schema contract, categorization preferences and the
records passed between the LinkedIn import steps.

Section models ignore unknown fields, so validating a document and dumping it
back strips anything the schema does not declare.
"""

import re
from typing import Any, Dict, List, Optional, Tuple, Union, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    SKILL_LEVELS, LOCATION_TYPES, MIN_SKILLS_FOR_SUBCATEGORY_RANGE, CATEGORIZATION_DEFAULTS,
    PERSONAL_INFO_SECTION, ABOUT_SECTION, SKILLS_SECTION, EXPERIENCE_SECTION,
    PROJECTS_SECTION, CONTACT_SECTION, EDUCATION_SECTION
)

YEAR_MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_empty_or_min_length(value: Optional[str], min_length: int) -> Optional[str]:
    """Allow an empty string, otherwise enforce a minimum length."""
    if value and len(value) < min_length:
        raise ValueError(f'must be empty or at least {min_length} characters long')
    return value


def _check_year_month(value: Optional[str]) -> Optional[str]:
    """Allow None or an empty string, otherwise require YYYY-MM."""
    if value and not YEAR_MONTH_PATTERN.match(value):
        raise ValueError('must use the YYYY-MM format')
    return value


def _check_uri(value: Optional[str]) -> Optional[str]:
    """Allow an empty string, otherwise require an absolute http(s) URL."""
    if not value:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ValueError('must be a valid http(s) URL')
    return value


class SectionModel(BaseModel):
    """Base class for section documents; unknown fields are dropped."""
    model_config = ConfigDict(extra='ignore')

    def to_document(self) -> Dict[str, Any]:
        """Dump the validated section as a plain JSON-compatible dict."""
        return self.model_dump(mode='json', exclude_none=True)


# =============================================================================
# CATEGORIZATION PREFERENCES
# =============================================================================

class CategorizationPreferences(BaseModel):
    """User knobs deciding whether imported skill roles are flat or nested."""
    model_config = ConfigDict(extra='ignore')

    useSubcategories: bool = CATEGORIZATION_DEFAULTS["useSubcategories"]
    minSkillsForSubcategory: int = Field(
        CATEGORIZATION_DEFAULTS["minSkillsForSubcategory"],
        ge=MIN_SKILLS_FOR_SUBCATEGORY_RANGE[0],
        le=MIN_SKILLS_FOR_SUBCATEGORY_RANGE[1]
    )
    categoryOverrides: Dict[str, Literal['flat', 'subcategories']] = Field(default_factory=dict)


# =============================================================================
# SECTION MODELS
# =============================================================================

class PersonalInfoSection(SectionModel):
    name: str = Field(..., min_length=2, max_length=100)
    title: Optional[str] = Field(None, min_length=2, max_length=100)
    location: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)

    @field_validator('location')
    @classmethod
    def validate_location(cls, v):
        return _check_empty_or_min_length(v, 2)

    @field_validator('bio')
    @classmethod
    def validate_bio(cls, v):
        return _check_empty_or_min_length(v, 10)


class AboutSection(SectionModel):
    content: str = Field(..., min_length=10, max_length=1000)


class SkillEntry(SectionModel):
    name: str = Field(..., min_length=1, max_length=100)
    level: str

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        if v not in SKILL_LEVELS:
            raise ValueError(f'level must be one of {SKILL_LEVELS}')
        return v


class SkillsSection(SectionModel):
    """Skills grouped per role, either flat or nested one level by subcategory."""
    skillCategories: Dict[str, Union[List[SkillEntry], Dict[str, List[SkillEntry]]]]
    categorization: Optional[CategorizationPreferences] = None


class Job(SectionModel):
    title: str = Field(..., min_length=2, max_length=100)
    company: str = Field(..., min_length=2, max_length=100)
    startDate: str
    endDate: Optional[str] = None
    isCurrent: bool
    location: str
    country: str = Field(..., min_length=2, max_length=100)
    city: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    achievements: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    @field_validator('startDate')
    @classmethod
    def validate_start_date(cls, v):
        if not YEAR_MONTH_PATTERN.match(v):
            raise ValueError('must use the YYYY-MM format')
        return v

    @field_validator('endDate')
    @classmethod
    def validate_end_date(cls, v):
        return _check_year_month(v)

    @field_validator('location')
    @classmethod
    def validate_location(cls, v):
        if v not in LOCATION_TYPES:
            raise ValueError(f'location must be one of {LOCATION_TYPES}')
        return v

    @field_validator('achievements')
    @classmethod
    def validate_achievements(cls, v):
        for achievement in v:
            if not 1 <= len(achievement) <= 200:
                raise ValueError('achievements must be 1-200 characters long')
        return v

    @field_validator('skills')
    @classmethod
    def validate_skills(cls, v):
        for skill in v:
            if not 1 <= len(skill) <= 50:
                raise ValueError('skills must be 1-50 characters long')
        return v


class ExperienceSection(SectionModel):
    jobs: List[Job]


class Project(SectionModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    technologies: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    github: Optional[str] = None
    image: Optional[str] = None

    @field_validator('technologies')
    @classmethod
    def validate_technologies(cls, v):
        for technology in v:
            if not 1 <= len(technology) <= 50:
                raise ValueError('technologies must be 1-50 characters long')
        return v

    @field_validator('url', 'github', 'image')
    @classmethod
    def validate_links(cls, v):
        return _check_uri(v)


class ProjectsSection(SectionModel):
    projects: List[Project]


class SocialLink(SectionModel):
    platform: str = Field(..., min_length=1)
    url: str

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if not v:
            raise ValueError('url is required')
        return _check_uri(v)


class ContactSection(SectionModel):
    email: str
    phone: Optional[str] = None
    socialLinks: List[SocialLink] = Field(default_factory=list)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        if not EMAIL_PATTERN.match(v):
            raise ValueError('email must be a valid email address')
        return v


class Degree(SectionModel):
    degree: str = Field(..., min_length=2, max_length=100)
    school: str = Field(..., min_length=2, max_length=100)
    field: str = Field(..., min_length=2, max_length=100)
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = Field(None, max_length=500)

    @field_validator('startDate', 'endDate')
    @classmethod
    def validate_dates(cls, v):
        return _check_year_month(v)


class EducationSection(SectionModel):
    degrees: List[Degree]


SECTION_MODELS = {
    PERSONAL_INFO_SECTION: PersonalInfoSection,
    ABOUT_SECTION: AboutSection,
    SKILLS_SECTION: SkillsSection,
    EXPERIENCE_SECTION: ExperienceSection,
    PROJECTS_SECTION: ProjectsSection,
    CONTACT_SECTION: ContactSection,
    EDUCATION_SECTION: EducationSection,
}


def format_validation_errors(error: ValidationError) -> List[str]:
    """
    Turn a pydantic ValidationError into short "field.path: message" strings.

    Args:
        error: The raised ValidationError

    Returns:
        One message per failing field, in pydantic's reporting order
    """
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        message = item.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages


def validate_section(section: str, data: Any) -> Tuple[Optional[Dict[str, Any]], List[str]]:
    """
    Validate a section document against its schema.

    All failures are collected rather than stopping at the first one, and
    unknown fields are stripped from the returned document.

    Args:
        section: Section name (e.g., 'experience')
        data: Candidate document

    Returns:
        Tuple of (sanitized document or None, list of error messages)

    Raises:
        ValueError: If no schema exists for the section
    """
    model = SECTION_MODELS.get(section)
    if model is None:
        raise ValueError(f"No schema found for section: {section}")

    try:
        validated = model.model_validate(data)
    except ValidationError as e:
        return None, format_validation_errors(e)

    return validated.to_document(), []


# =============================================================================
# IMPORT PIPELINE MODELS
# =============================================================================

class LinkedInCsvData(BaseModel):
    """Parsed LinkedIn export: one optional profile record plus row lists."""
    profile: Optional[Dict[str, str]] = None
    positions: List[Dict[str, str]] = Field(default_factory=list)
    skills: List[Dict[str, str]] = Field(default_factory=list)
    education: List[Dict[str, str]] = Field(default_factory=list)


class SectionSaveResult(BaseModel):
    """Outcome of validating and writing one imported section."""
    section: str
    saved: bool
    errors: List[str] = Field(default_factory=list)


class ImportResult(BaseModel):
    """Everything one LinkedIn import run produced."""
    import_id: str
    portfolio_data: Dict[str, Any] = Field(default_factory=dict)
    file_errors: Dict[str, str] = Field(default_factory=dict)
    imported_counts: Dict[str, Union[str, int]] = Field(default_factory=dict)
    save_results: List[SectionSaveResult] = Field(default_factory=list)
    persisted: bool = False
