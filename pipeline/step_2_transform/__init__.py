"""
Step 2 Transform module for the Portfolio Backend.
Contains field mapping, skill categorization and section assembly logic.
"""

from .field_mapping_logic import (
    lookup_field,
    map_personal_info,
    map_about,
    map_position,
    map_education,
    map_skill
)
from .skill_categorization_logic import (
    keyword_variants,
    match_skill,
    assign_skills,
    resolve_layout,
    restructure_roles,
    categorize_skills
)
from .transform_logic import build_skills_section, transform_linkedin_data

__all__ = [
    'lookup_field',
    'map_personal_info',
    'map_about',
    'map_position',
    'map_education',
    'map_skill',
    'keyword_variants',
    'match_skill',
    'assign_skills',
    'resolve_layout',
    'restructure_roles',
    'categorize_skills',
    'build_skills_section',
    'transform_linkedin_data'
]
