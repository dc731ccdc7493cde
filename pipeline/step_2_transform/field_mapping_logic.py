"""
Field mapping logic for LinkedIn CSV records.

Each portfolio field is described by an ordered tuple of accepted CSV headers
(already lower-cased by the parser) and a literal fallback. The first header
holding a non-empty value wins; otherwise the fallback is used.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from common import constants

Record = Dict[str, str]
FieldSpec = Tuple[Tuple[str, ...], Any]

PROFILE_FIELD_MAP: Dict[str, FieldSpec] = {
    "name": (("full_name", "name"), "Your Name"),
    "title": (("headline", "title"), "Software Developer"),
    "location": (("location",), "Your Location"),
    "bio": (("summary",), "A passionate software developer..."),
}

ABOUT_FIELD_MAP: Dict[str, FieldSpec] = {
    "content": (("summary",), "I am a passionate software developer..."),
}

POSITION_FIELD_MAP: Dict[str, FieldSpec] = {
    "title": (("title", "job_title"), "Software Developer"),
    "company": (("company", "organization"), "Company Name"),
    "startDate": (("start_date", "from"), "2023-01"),
    "endDate": (("end_date", "to"), None),
    "location": (("location",), "remote"),
    "country": (("country",), "Your Country"),
    "city": (("city",), "Your City"),
    "description": (("description",), "Develop and maintain web applications..."),
}

POSITION_CURRENT_ALIASES = ("is_current", "current")

POSITION_ACHIEVEMENTS_ALIASES = ("achievements",)
DEFAULT_ACHIEVEMENTS = [
    "Developed and deployed 3 major features",
    "Improved application performance by 30%"
]

POSITION_SKILLS_ALIASES = ("skills",)
DEFAULT_POSITION_SKILLS = ["React", "Node.js", "JavaScript"]

EDUCATION_FIELD_MAP: Dict[str, FieldSpec] = {
    "degree": (("degree", "degree_name"), "Bachelor's Degree"),
    "school": (("school", "institution"), "University Name"),
    "field": (("field", "major"), "Computer Science"),
    "startDate": (("start_date", "from"), "2019-09"),
    "endDate": (("end_date", "to"), "2023-05"),
    "description": (("description",), "Relevant coursework and projects..."),
}

SKILL_NAME_ALIASES = ("name", "skill_name")
SKILL_LEVEL_ALIASES = ("level", "proficiency")


def lookup_field(record: Record, aliases: Sequence[str], default: Any = None) -> Any:
    """
    Return the value of the first alias present with a non-empty value.

    Args:
        record: Parsed CSV record
        aliases: Accepted headers, in priority order
        default: Fallback when no alias holds a value

    Returns:
        The matched string value, or the default
    """
    for alias in aliases:
        value = record.get(alias)
        if value:
            return value
    return default


def apply_field_map(record: Record, field_map: Dict[str, FieldSpec]) -> Dict[str, Any]:
    """Build a sub-document by resolving every field of a field map."""
    return {
        field: lookup_field(record, aliases, default)
        for field, (aliases, default) in field_map.items()
    }


def parse_bool_field(record: Record, aliases: Sequence[str]) -> bool:
    """Only the literal string "true" counts as true."""
    return any(record.get(alias) == "true" for alias in aliases)


def split_list_field(record: Record, aliases: Sequence[str], separator: str,
                     default: List[str]) -> List[str]:
    """
    Split a delimited field into trimmed, non-empty items.

    Args:
        record: Parsed CSV record
        aliases: Accepted headers, in priority order
        separator: Item separator (';' for achievements, ',' for skills)
        default: Items used when the field is absent or yields nothing

    Returns:
        List of items
    """
    raw_value = lookup_field(record, aliases)
    if not raw_value:
        return list(default)

    items = [item.strip() for item in raw_value.split(separator) if item.strip()]
    return items or list(default)


def map_personal_info(profile: Record) -> Dict[str, Any]:
    return apply_field_map(profile, PROFILE_FIELD_MAP)


def map_about(profile: Record) -> Dict[str, Any]:
    return apply_field_map(profile, ABOUT_FIELD_MAP)


def map_position(position: Record) -> Dict[str, Any]:
    """Map a positions record onto an experience job."""
    job = apply_field_map(position, POSITION_FIELD_MAP)
    job["isCurrent"] = parse_bool_field(position, POSITION_CURRENT_ALIASES)
    job["achievements"] = split_list_field(
        position, POSITION_ACHIEVEMENTS_ALIASES, ';', DEFAULT_ACHIEVEMENTS
    )
    job["skills"] = split_list_field(
        position, POSITION_SKILLS_ALIASES, ',', DEFAULT_POSITION_SKILLS
    )
    return job


def map_education(education: Record) -> Dict[str, Any]:
    return apply_field_map(education, EDUCATION_FIELD_MAP)


def map_skill(skill: Record) -> Optional[Dict[str, str]]:
    """
    Map a skills record onto a skill entry.

    Levels are lower-cased; anything outside the known levels falls back to
    the default level.

    Returns:
        {'name', 'level'} entry, or None when the record carries no name
    """
    name = lookup_field(skill, SKILL_NAME_ALIASES)
    if not name:
        return None

    level = lookup_field(skill, SKILL_LEVEL_ALIASES, constants.DEFAULT_SKILL_LEVEL).strip().lower()
    if level not in constants.SKILL_LEVELS:
        level = constants.DEFAULT_SKILL_LEVEL

    return {"name": name.strip(), "level": level}
