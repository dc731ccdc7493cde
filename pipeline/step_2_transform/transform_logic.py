"""
Transformation of parsed LinkedIn CSV data into portfolio section documents.
"""

import logging
from typing import Any, Dict

from common import constants
from common.schemas import CategorizationPreferences, LinkedInCsvData

from .field_mapping_logic import (
    map_personal_info, map_about, map_position, map_education, map_skill
)
from .skill_categorization_logic import categorize_skills

logger = logging.getLogger(__name__)


def build_skills_section(csv_data: LinkedInCsvData,
                         preferences: CategorizationPreferences) -> Dict[str, Any]:
    """
    Build the skills section, recording the preferences that produced it.

    Args:
        csv_data: Parsed CSV data
        preferences: Categorization preferences

    Returns:
        Skills document with 'skillCategories' and 'categorization'
    """
    skills = []
    for record in csv_data.skills:
        skill = map_skill(record)
        if skill is None:
            logger.warning(f"Skipping skill record without a name: {record}")
            continue
        skills.append(skill)

    return {
        "skillCategories": categorize_skills(skills, preferences),
        "categorization": preferences.model_dump(mode='json')
    }


def transform_linkedin_data(csv_data: LinkedInCsvData,
                            preferences: CategorizationPreferences) -> Dict[str, Any]:
    """
    Map parsed LinkedIn data onto the portfolio's section documents.

    Only sections backed by input data are produced: a profile yields
    personalInfo and about, non-empty positions and education yield experience
    and education, and skills is produced only when at least one skill record
    carries a name.

    Args:
        csv_data: Parsed CSV data
        preferences: Categorization preferences, passed explicitly

    Returns:
        Mapping of section name to document
    """
    portfolio_data: Dict[str, Any] = {}

    if csv_data.profile is not None:
        portfolio_data[constants.PERSONAL_INFO_SECTION] = map_personal_info(csv_data.profile)
        portfolio_data[constants.ABOUT_SECTION] = map_about(csv_data.profile)

    if csv_data.positions:
        portfolio_data[constants.EXPERIENCE_SECTION] = {
            "jobs": [map_position(position) for position in csv_data.positions]
        }

    if csv_data.skills:
        skills_section = build_skills_section(csv_data, preferences)
        if skills_section["skillCategories"]:
            portfolio_data[constants.SKILLS_SECTION] = skills_section

    if csv_data.education:
        portfolio_data[constants.EDUCATION_SECTION] = {
            "degrees": [map_education(education) for education in csv_data.education]
        }

    return portfolio_data
