"""
Tests for section validation and categorization preferences.
"""

import pytest
from pydantic import ValidationError

from common.placeholders import PLACEHOLDER_DATA
from common.schemas import CategorizationPreferences, validate_section


class TestValidateSection:

    @pytest.mark.parametrize("section", sorted(PLACEHOLDER_DATA))
    def test_placeholder_documents_are_valid(self, section):
        _, errors = validate_section(section, PLACEHOLDER_DATA[section])
        assert errors == []

    def test_unknown_fields_are_stripped(self):
        document, errors = validate_section("about", {"content": "Long enough text", "secret": 1})
        assert errors == []
        assert document == {"content": "Long enough text"}

    def test_unknown_section_raises(self):
        with pytest.raises(ValueError, match="No schema found"):
            validate_section("hobbies", {})

    def test_all_failures_are_collected(self, valid_job):
        bad_job = dict(valid_job, startDate="03/2021", location="moon", country="X")
        document, errors = validate_section("experience", {"jobs": [bad_job]})
        assert document is None
        assert len(errors) == 3
        assert any(error.startswith("jobs.0.startDate") for error in errors)
        assert any(error.startswith("jobs.0.location") for error in errors)
        assert any(error.startswith("jobs.0.country") for error in errors)

    def test_null_end_date_is_omitted(self, valid_job):
        current_job = dict(valid_job, endDate=None, isCurrent=True)
        document, errors = validate_section("experience", {"jobs": [current_job]})
        assert errors == []
        assert "endDate" not in document["jobs"][0]

    def test_empty_optional_strings_are_allowed(self):
        document, errors = validate_section("personalInfo", {"name": "Ada", "location": "", "bio": ""})
        assert errors == []
        assert document["location"] == ""

    def test_short_bio_is_rejected(self):
        _, errors = validate_section("personalInfo", {"name": "Ada", "bio": "short"})
        assert len(errors) == 1

    def test_skill_level_must_be_known(self):
        _, errors = validate_section("skills", {
            "skillCategories": {"Other": [{"name": "Leadership", "level": "guru"}]}
        })
        assert errors

    def test_nested_skill_categories_are_valid(self):
        document, errors = validate_section("skills", {
            "skillCategories": {
                "Frontend Development": {"Frameworks": [{"name": "React", "level": "advanced"}]},
                "Other": [{"name": "Leadership", "level": "expert"}]
            }
        })
        assert errors == []
        assert document["skillCategories"]["Frontend Development"]["Frameworks"][0]["name"] == "React"

    def test_contact_links_must_be_urls(self):
        _, errors = validate_section("contact", {
            "email": "ada@example.com",
            "socialLinks": [{"platform": "github", "url": "not a url"}]
        })
        assert errors and errors[0].startswith("socialLinks.0.url")

    def test_invalid_email_is_rejected(self):
        _, errors = validate_section("contact", {"email": "not-an-email"})
        assert errors and errors[0].startswith("email")


class TestCategorizationPreferences:

    def test_defaults(self):
        preferences = CategorizationPreferences()
        assert preferences.useSubcategories is True
        assert preferences.minSkillsForSubcategory == 3
        assert preferences.categoryOverrides == {}

    @pytest.mark.parametrize("value", [0, 11])
    def test_threshold_range(self, value):
        with pytest.raises(ValidationError):
            CategorizationPreferences(minSkillsForSubcategory=value)

    def test_override_values_are_restricted(self):
        with pytest.raises(ValidationError):
            CategorizationPreferences(categoryOverrides={"Other": "sideways"})
