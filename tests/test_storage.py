"""
Tests for the JSON section store.
"""

import json

import pytest

from common import constants, storage
from common.errors import SectionNotFoundError, StorageError
from common.placeholders import PLACEHOLDER_DATA


class TestSectionReadWrite:

    def test_round_trip(self, data_dir):
        document = {"content": "Hello there, portfolio"}
        storage.write_section("about", document)
        assert storage.read_section("about") == document

    def test_write_uses_two_space_indent(self, data_dir):
        storage.write_section("about", {"content": "Hello there, portfolio"})
        raw = (data_dir / "about.json").read_text(encoding="utf-8")
        assert raw == '{\n  "content": "Hello there, portfolio"\n}'

    def test_missing_section_raises_not_found(self, data_dir):
        with pytest.raises(SectionNotFoundError) as exc_info:
            storage.read_section("projects")
        assert exc_info.value.section == "projects"

    def test_invalid_json_raises_storage_error(self, data_dir):
        data_dir.mkdir(parents=True)
        (data_dir / "contact.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError, match="Invalid JSON"):
            storage.read_section("contact")

    def test_explicit_data_dir_overrides_environment(self, data_dir, tmp_path):
        other_dir = tmp_path / "other"
        storage.write_section("about", {"content": "Somewhere else"}, other_dir)
        assert (other_dir / "about.json").exists()
        assert not (data_dir / "about.json").exists()


class TestExperienceOrdering:
    """Experience jobs come back current-first, newest-first."""

    def test_read_sorts_jobs(self, data_dir, valid_job):
        older = dict(valid_job, title="Old Job", startDate="2015-01")
        newer = dict(valid_job, title="New Job", startDate="2020-06")
        current = dict(valid_job, title="Current Job", startDate="2012-01", isCurrent=True)
        storage.write_section("experience", {"jobs": [older, newer, current]})

        titles = [job["title"] for job in storage.read_section("experience")["jobs"]]
        assert titles == ["Current Job", "New Job", "Old Job"]

    def test_unparseable_dates_go_last(self):
        document = {"jobs": [
            {"title": "Unknown", "startDate": "sometime", "isCurrent": False},
            {"title": "Known", "startDate": "2019-02", "isCurrent": False},
        ]}
        storage.sort_experience_jobs(document)
        assert [job["title"] for job in document["jobs"]] == ["Known", "Unknown"]


class TestReadAllSections:

    def test_unreadable_sections_are_none(self, data_dir):
        storage.write_section("about", {"content": "Hello there, portfolio"})
        (data_dir / "skills.json").write_text("[broken", encoding="utf-8")

        portfolio = storage.read_all_sections()
        assert set(portfolio.keys()) == set(constants.VALID_SECTIONS)
        assert portfolio["about"] == {"content": "Hello there, portfolio"}
        assert portfolio["skills"] is None
        assert portfolio["contact"] is None


class TestFlattenSkillCategories:

    def test_nested_categories_are_concatenated(self):
        categories = {
            "Frontend Development": {
                "Frameworks": [{"name": "React", "level": "advanced"}],
                "Languages": [{"name": "TypeScript", "level": "expert"}],
            },
            "Other": [{"name": "Leadership", "level": "advanced"}],
        }
        assert storage.flatten_skill_categories(categories) == {
            "Frontend Development": [
                {"name": "React", "level": "advanced"},
                {"name": "TypeScript", "level": "expert"},
            ],
            "Other": [{"name": "Leadership", "level": "advanced"}],
        }


class TestPreferences:

    def test_defaults_when_nothing_stored(self, data_dir):
        assert storage.read_preferences() == {
            "useSubcategories": True,
            "minSkillsForSubcategory": 3,
            "categoryOverrides": {}
        }

    def test_round_trip(self, data_dir):
        preferences = {"useSubcategories": False, "minSkillsForSubcategory": 5, "categoryOverrides": {}}
        storage.write_preferences(preferences)
        assert storage.read_preferences() == preferences
        assert json.loads((data_dir / "categorization.json").read_text()) == preferences


class TestDataDirectoryBootstrap:

    def test_initialize_writes_placeholders(self, data_dir):
        assert storage.initialize_data_directory() is True
        for section in constants.VALID_SECTIONS:
            assert storage.read_section(section) == PLACEHOLDER_DATA[section]

    def test_initialize_leaves_existing_directory_alone(self, data_dir):
        data_dir.mkdir(parents=True)
        assert storage.initialize_data_directory() is False
        assert storage.check_data_directory() == constants.VALID_SECTIONS

    def test_initialize_copies_example_data(self, data_dir, tmp_path):
        example_dir = tmp_path / "example"
        storage.write_section("about", {"content": "Example about text"}, example_dir)

        storage.initialize_data_directory(example_dir=example_dir)
        assert storage.read_section("about") == {"content": "Example about text"}
        # Sections missing from the example fall back to placeholders
        assert storage.read_section("contact") == PLACEHOLDER_DATA["contact"]

    def test_reset_restores_placeholders(self, data_dir):
        storage.initialize_data_directory()
        storage.write_section("about", {"content": "Edited about text"})

        storage.reset_data_directory()
        assert storage.read_section("about") == PLACEHOLDER_DATA["about"]
        assert storage.check_data_directory() == []
