"""
Tests for turning parsed LinkedIn data into section documents.
"""

from common.schemas import CategorizationPreferences, LinkedInCsvData, validate_section
from pipeline.step_2_transform import transform_linkedin_data, build_skills_section


class TestTransformLinkedInData:

    def test_only_sections_with_input_are_produced(self, default_preferences):
        csv_data = LinkedInCsvData(skills=[{"name": "Python", "level": "expert"}])
        portfolio_data = transform_linkedin_data(csv_data, default_preferences)
        assert list(portfolio_data.keys()) == ["skills"]

    def test_empty_input_produces_nothing(self, default_preferences):
        assert transform_linkedin_data(LinkedInCsvData(), default_preferences) == {}

    def test_skills_without_names_produce_no_section(self, default_preferences):
        csv_data = LinkedInCsvData(skills=[{"skill": "Python", "years": "5"}])
        assert transform_linkedin_data(csv_data, default_preferences) == {}

    def test_profile_feeds_personal_info_and_about(self, default_preferences):
        csv_data = LinkedInCsvData(profile={
            "full_name": "Ada Lovelace",
            "headline": "Analytical Engineer",
            "summary": "Writes programs for engines"
        })
        portfolio_data = transform_linkedin_data(csv_data, default_preferences)
        assert portfolio_data["personalInfo"]["name"] == "Ada Lovelace"
        assert portfolio_data["about"] == {"content": "Writes programs for engines"}

    def test_positions_and_education_are_wrapped(self, default_preferences):
        csv_data = LinkedInCsvData(
            positions=[{"title": "Engineer", "company": "Acme", "start_date": "2020-01"}],
            education=[{"school": "TU Berlin", "degree": "MSc"}]
        )
        portfolio_data = transform_linkedin_data(csv_data, default_preferences)
        assert len(portfolio_data["experience"]["jobs"]) == 1
        assert portfolio_data["experience"]["jobs"][0]["company"] == "Acme"
        assert portfolio_data["education"]["degrees"][0]["school"] == "TU Berlin"

    def test_produced_sections_pass_validation(self, default_preferences):
        csv_data = LinkedInCsvData(
            profile={"full_name": "Ada Lovelace", "summary": "Writes programs for engines"},
            positions=[{"title": "Engineer", "company": "Acme", "start_date": "2020-01"}],
            skills=[{"name": "React", "level": "advanced"}],
            education=[{"school": "TU Berlin", "degree": "MSc"}]
        )
        for section, document in transform_linkedin_data(csv_data, default_preferences).items():
            _, errors = validate_section(section, document)
            assert errors == [], f"{section} failed validation: {errors}"


class TestBuildSkillsSection:

    def test_records_the_preferences_used(self):
        preferences = CategorizationPreferences(
            useSubcategories=False,
            minSkillsForSubcategory=4,
            categoryOverrides={"Other": "subcategories"}
        )
        csv_data = LinkedInCsvData(skills=[{"name": "Leadership", "level": "expert"}])
        section = build_skills_section(csv_data, preferences)
        assert section["categorization"] == {
            "useSubcategories": False,
            "minSkillsForSubcategory": 4,
            "categoryOverrides": {"Other": "subcategories"}
        }
        assert section["skillCategories"] == {
            "Other": {"General": [{"name": "Leadership", "level": "expert"}]}
        }

    def test_records_without_name_are_dropped(self, default_preferences):
        csv_data = LinkedInCsvData(skills=[
            {"name": "", "level": "expert"},
            {"name": "Git", "level": "Advanced"}
        ])
        section = build_skills_section(csv_data, default_preferences)
        assert section["skillCategories"] == {
            "Tools & Platforms": [{"name": "Git", "level": "advanced"}]
        }
