"""
Skill categorization logic for imported LinkedIn skills.

Each skill is assigned to a role and a subcategory of the fixed taxonomy in
common.constants.SKILL_TAXONOMY by keyword matching, then every role is laid
out either as one flat list or as a mapping of subcategory to list, depending
on the categorization preferences passed in.

Everything here is a pure function of its arguments.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from common import constants
from common.schemas import CategorizationPreferences

SkillEntry = Dict[str, str]
Taxonomy = Tuple[Tuple[str, Tuple[Tuple[str, Tuple[str, ...]], ...]], ...]

LAYOUT_FLAT = "flat"
LAYOUT_SUBCATEGORIES = "subcategories"


def keyword_variants(keyword: str) -> List[str]:
    """
    List the spellings a keyword is matched with.

    The keyword itself comes first, then its spaces replaced by each of
    "", "-", "." and "_" so that e.g. "power bi" also matches "PowerBI" and
    "power-bi".

    Args:
        keyword: Taxonomy keyword

    Returns:
        Distinct lower-cased variants in matching order
    """
    keyword = keyword.lower()
    variants = [keyword]
    for separator in constants.KEYWORD_SPACE_VARIANTS:
        variant = keyword.replace(" ", separator)
        if variant not in variants:
            variants.append(variant)
    return variants


def match_skill(skill_name: str, taxonomy: Taxonomy = constants.SKILL_TAXONOMY) -> Tuple[str, str]:
    """
    Find the role and subcategory of a skill.

    Search order is role, then subcategory, then keyword, all in declaration
    order; the first keyword contained in the lower-cased name wins.

    Args:
        skill_name: Skill name as imported (e.g., 'Spring Boot')
        taxonomy: Ordered (role, ((subcategory, keywords), ...)) structure

    Returns:
        Tuple of (role, subcategory); ('Other', 'Other') when nothing matches
    """
    skill_name_lower = skill_name.lower()

    for role, subcategories in taxonomy:
        for subcategory, keywords in subcategories:
            for keyword in keywords:
                if any(variant in skill_name_lower for variant in keyword_variants(keyword)):
                    return role, subcategory

    return constants.OTHER_ROLE, constants.OTHER_SUBCATEGORY


def assign_skills(skills: Iterable[SkillEntry],
                  taxonomy: Taxonomy = constants.SKILL_TAXONOMY) -> Dict[str, Dict[str, List[SkillEntry]]]:
    """
    Group skill entries by role and subcategory.

    Roles and subcategories keep the order in which they were first assigned.

    Args:
        skills: Skill entries with 'name' and 'level'
        taxonomy: Ordered taxonomy structure

    Returns:
        Mapping role -> subcategory -> list of skill entries
    """
    assigned: Dict[str, Dict[str, List[SkillEntry]]] = {}

    for skill in skills:
        role, subcategory = match_skill(skill["name"], taxonomy)
        assigned.setdefault(role, {}).setdefault(subcategory, []).append(
            {"name": skill["name"], "level": skill["level"]}
        )

    return assigned


def resolve_layout(total_skills: int, override: Optional[str],
                   preferences: CategorizationPreferences) -> str:
    """
    Decide whether a role is emitted flat or nested.

    Args:
        total_skills: Number of skills assigned to the role
        override: Per-role override ('flat', 'subcategories' or None)
        preferences: Categorization preferences

    Returns:
        LAYOUT_FLAT or LAYOUT_SUBCATEGORIES
    """
    threshold = preferences.minSkillsForSubcategory

    if override == LAYOUT_FLAT:
        return LAYOUT_FLAT
    if override is None and not preferences.useSubcategories and total_skills < threshold:
        return LAYOUT_FLAT
    if override == LAYOUT_SUBCATEGORIES:
        return LAYOUT_SUBCATEGORIES
    if preferences.useSubcategories and total_skills >= threshold:
        return LAYOUT_SUBCATEGORIES
    return LAYOUT_FLAT


def order_roles(roles: Iterable[str]) -> List[str]:
    """Known roles in their preferred order, then unknown roles as discovered."""
    roles = list(roles)
    known = [role for role in constants.ROLE_ORDER if role in roles]
    unknown = [role for role in roles if role not in constants.ROLE_ORDER]
    return known + unknown


def restructure_roles(assigned: Dict[str, Dict[str, List[SkillEntry]]],
                      preferences: CategorizationPreferences) -> Dict[str, Any]:
    """
    Lay out every role flat or nested according to the preferences.

    Roles with no skills are dropped; nested roles drop empty subcategories.

    Args:
        assigned: Output of assign_skills
        preferences: Categorization preferences

    Returns:
        Mapping role -> list of skills, or role -> subcategory -> list of skills
    """
    skill_categories: Dict[str, Any] = {}

    for role in order_roles(assigned.keys()):
        subcategories = assigned[role]
        total_skills = sum(len(skills) for skills in subcategories.values())
        if total_skills == 0:
            continue

        override = preferences.categoryOverrides.get(role)
        layout = resolve_layout(total_skills, override, preferences)

        if layout == LAYOUT_SUBCATEGORIES:
            skill_categories[role] = {
                subcategory: skills
                for subcategory, skills in subcategories.items() if skills
            }
        else:
            skill_categories[role] = [
                skill for skills in subcategories.values() for skill in skills
            ]

    return skill_categories


def categorize_skills(skills: Iterable[SkillEntry],
                      preferences: CategorizationPreferences) -> Dict[str, Any]:
    """
    Build the skillCategories mapping of the skills section.

    Args:
        skills: Skill entries with 'name' and 'level'
        preferences: Categorization preferences

    Returns:
        Mapping role -> flat list or role -> subcategory -> list
    """
    return restructure_roles(assign_skills(skills), preferences)
