"""
Constants and configuration settings for the Portfolio Backend.
Contains default paths, section names, upload limits and the skill taxonomy.
"""

import os
from pathlib import Path
from typing import Dict, List, Tuple

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_EXAMPLE_DATA_DIR = PROJECT_ROOT / "data_example"

# Portfolio sections (one JSON document per section)
PERSONAL_INFO_SECTION = "personalInfo"
ABOUT_SECTION = "about"
SKILLS_SECTION = "skills"
EXPERIENCE_SECTION = "experience"
PROJECTS_SECTION = "projects"
CONTACT_SECTION = "contact"
EDUCATION_SECTION = "education"

VALID_SECTIONS = [
    PERSONAL_INFO_SECTION,
    ABOUT_SECTION,
    SKILLS_SECTION,
    EXPERIENCE_SECTION,
    PROJECTS_SECTION,
    CONTACT_SECTION,
    EDUCATION_SECTION
]

# Sections the LinkedIn importer may produce, in save order
IMPORTABLE_SECTIONS = [
    PERSONAL_INFO_SECTION,
    ABOUT_SECTION,
    SKILLS_SECTION,
    EXPERIENCE_SECTION,
    EDUCATION_SECTION
]

# File names
SECTION_FILE_SUFFIX = ".json"
CATEGORIZATION_FILE = "categorization.json"

# Enumerations used by the section schemas
SKILL_LEVELS = ["beginner", "intermediate", "advanced", "expert"]
DEFAULT_SKILL_LEVEL = "intermediate"
LOCATION_TYPES = ["remote", "onsite", "hybrid"]
CATEGORY_LAYOUTS = ["flat", "subcategories"]

# Categorization preference defaults
CATEGORIZATION_DEFAULTS = {
    "useSubcategories": True,
    "minSkillsForSubcategory": 3,
    "categoryOverrides": {}
}
MIN_SKILLS_FOR_SUBCATEGORY_RANGE = (1, 10)

# Upload limits for the LinkedIn importer
UPLOAD_CONFIG = {
    "max_file_size_bytes": 10 * 1024 * 1024,
    "max_files": 10,
    "allowed_extension": ".csv",
    "allowed_content_type": "text/csv"
}

# LinkedIn CSV kinds, detected by filename substring (checked in this order)
CSV_KIND_PROFILE = "profile"
CSV_KIND_POSITIONS = "positions"
CSV_KIND_SKILLS = "skills"
CSV_KIND_EDUCATION = "education"

CSV_KIND_FILENAME_MARKERS: List[Tuple[str, str]] = [
    ("profile", CSV_KIND_PROFILE),
    ("position", CSV_KIND_POSITIONS),
    ("skill", CSV_KIND_SKILLS),
    ("education", CSV_KIND_EDUCATION),
]

# Skill roles in their preferred output order
OTHER_ROLE = "Other"
OTHER_SUBCATEGORY = "Other"

ROLE_ORDER = [
    "Frontend Development",
    "Backend Development",
    "Data & Analytics",
    "DevOps & Infrastructure",
    "Tools & Platforms",
    OTHER_ROLE
]

# (role, ((subcategory, keywords), ...)); match order is declaration order
SKILL_TAXONOMY: Tuple[Tuple[str, Tuple[Tuple[str, Tuple[str, ...]], ...]], ...] = (
    ("Frontend Development", (
        ("Languages", ("javascript", "typescript", "html", "css")),
        ("Frameworks", ("react", "vue", "angular", "svelte", "next.js", "nuxt.js")),
        ("Styling", ("sass", "less", "bootstrap", "tailwind", "styled-components")),
        ("Build Tools", ("webpack", "vite", "parcel", "gulp")),
    )),
    ("Backend Development", (
        ("Languages", ("python", "java", "c#", "go", "php", "ruby", "node.js")),
        ("Frameworks", ("express", "django", "spring", "fastapi", "laravel", "asp.net")),
        ("APIs", ("rest", "graphql", "grpc", "soap")),
        ("Architecture", ("microservices", "monolith", "serverless", "event-driven")),
    )),
    ("Data & Analytics", (
        ("Databases", ("mongodb", "postgresql", "mysql", "sqlite", "redis", "elasticsearch")),
        ("Big Data", ("hadoop", "spark", "kafka", "airflow", "snowflake")),
        ("Analytics", ("tableau", "power bi", "python pandas", "numpy")),
        ("Machine Learning", ("tensorflow", "pytorch", "scikit-learn", "keras")),
    )),
    ("DevOps & Infrastructure", (
        ("Cloud", ("aws", "azure", "google cloud", "gcp")),
        ("Containers", ("docker", "kubernetes", "podman", "rancher")),
        ("CI/CD", ("jenkins", "gitlab ci", "github actions", "circleci")),
        ("Monitoring", ("prometheus", "grafana", "elk stack", "datadog")),
    )),
    ("Tools & Platforms", (
        ("Version Control", ("git", "github", "gitlab", "bitbucket")),
        ("Project Management", ("jira", "confluence", "notion", "trello")),
        ("Development", ("vs code", "intellij", "postman", "swagger")),
        ("Testing", ("jest", "cypress", "selenium", "junit")),
    )),
    (OTHER_ROLE, (
        ("General", ("leadership", "communication", "problem solving", "teamwork")),
        ("Soft Skills", ("presentation", "negotiation", "mentoring", "collaboration")),
        ("Domain Knowledge", ("finance", "healthcare", "ecommerce", "education")),
        ("Certifications", ("pmp", "scrum", "agile", "six sigma")),
    )),
)

# Separators substituted for spaces inside multi-word keywords
KEYWORD_SPACE_VARIANTS = ["", "-", ".", "_"]

# Auth configuration
JWT_ALGORITHM = "HS256"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_JWT_SECRET = "your-secret-key"
DEFAULT_JWT_EXPIRES_HOURS = 24
ADMIN_ROLE = "admin"

# API configuration
API_CONFIG = {
    "title": "Portfolio Backend API",
    "description": "REST API for portfolio sections and LinkedIn CSV import",
    "version": "1.0.0"
}

DEV_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def get_data_dir() -> Path:
    """Get the directory holding the section JSON files."""
    return Path(os.getenv("PORTFOLIO_DATA_DIR", str(DEFAULT_DATA_DIR)))


def get_example_data_dir() -> Path:
    """Get the directory whose section files seed a fresh data directory."""
    return Path(os.getenv("PORTFOLIO_EXAMPLE_DATA_DIR", str(DEFAULT_EXAMPLE_DATA_DIR)))


def get_admin_password() -> str:
    return os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)


def get_jwt_secret() -> str:
    return os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)


def get_jwt_expires_hours() -> int:
    """
    Get the token lifetime in hours.

    Returns:
        Hours from JWT_EXPIRES_HOURS, or the default when unset or not an integer
    """
    raw_value = os.getenv("JWT_EXPIRES_HOURS")
    if not raw_value:
        return DEFAULT_JWT_EXPIRES_HOURS
    try:
        return int(raw_value)
    except ValueError:
        return DEFAULT_JWT_EXPIRES_HOURS


def get_environment() -> str:
    return os.getenv("ENVIRONMENT", "development")


def get_allowed_origins() -> List[str]:
    """
    Get CORS origins from ALLOWED_ORIGINS.

    Returns:
        ["*"] when the variable is exactly "*", the parsed comma-separated list
        when set, otherwise the local development origins
    """
    allowed_origins_env = os.getenv("ALLOWED_ORIGINS")

    if allowed_origins_env == "*":
        return ["*"]
    if allowed_origins_env:
        return [origin.strip() for origin in allowed_origins_env.split(',') if origin.strip()]
    return list(DEV_ALLOWED_ORIGINS)


def is_valid_section(section: str) -> bool:
    """
    Check if a section name is valid.

    Args:
        section: Section name to validate

    Returns:
        True if section is valid, False otherwise
    """
    return section in VALID_SECTIONS


def get_role_names() -> List[str]:
    """Get the role names in taxonomy declaration order."""
    return [role for role, _ in SKILL_TAXONOMY]


def get_subcategory_names(role: str) -> List[str]:
    """
    Get the subcategory names declared for a role.

    Args:
        role: Role name (e.g., 'Backend Development')

    Returns:
        Subcategory names in declaration order, empty for unknown roles
    """
    for role_name, subcategories in SKILL_TAXONOMY:
        if role_name == role:
            return [name for name, _ in subcategories]
    return []


def get_default_categorization() -> Dict:
    """Get a fresh copy of the default categorization preferences."""
    return {
        "useSubcategories": CATEGORIZATION_DEFAULTS["useSubcategories"],
        "minSkillsForSubcategory": CATEGORIZATION_DEFAULTS["minSkillsForSubcategory"],
        "categoryOverrides": {}
    }
