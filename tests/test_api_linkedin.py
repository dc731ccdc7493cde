"""
Tests for the LinkedIn import and categorization endpoints.
"""

import json

import pytest

from common import constants, storage


def _csv(filename, content):
    return ("files", (filename, content, "text/csv"))


class TestPreviewCsv:

    def test_preview_returns_sections_without_saving(self, client, auth_headers, skills_csv):
        before = storage.read_section("skills")
        response = client.post(
            "/api/linkedin/preview-csv",
            files=[_csv("Skills.csv", skills_csv)],
            headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert data["sections"] == ["skills"]
        assert data["fileCount"] == 1
        assert data["importedData"] == {"profile": "No", "positions": 0, "skills": 3, "education": 0}
        assert "Frontend Development" in data["portfolioData"]["skills"]["skillCategories"]
        assert storage.read_section("skills") == before

    def test_categorization_form_field_is_applied(self, client, auth_headers, skills_csv):
        response = client.post(
            "/api/linkedin/preview-csv",
            files=[_csv("Skills.csv", skills_csv)],
            data={"categorization": json.dumps({"minSkillsForSubcategory": 1})},
            headers=auth_headers
        )
        skill_categories = response.json()["portfolioData"]["skills"]["skillCategories"]
        assert skill_categories["Other"] == {
            "General": [{"name": "Leadership", "level": "intermediate"}]
        }

    def test_defaults_are_used_when_field_is_absent(self, client, auth_headers, skills_csv):
        storage.write_preferences({
            "useSubcategories": True,
            "minSkillsForSubcategory": 1,
            "categoryOverrides": {"Other": "flat"}
        })
        response = client.post(
            "/api/linkedin/preview-csv",
            files=[_csv("Skills.csv", skills_csv)],
            headers=auth_headers
        )
        skills = response.json()["portfolioData"]["skills"]
        assert skills["categorization"] == {
            "useSubcategories": True,
            "minSkillsForSubcategory": 3,
            "categoryOverrides": {}
        }
        assert skills["skillCategories"]["Frontend Development"] == [
            {"name": "React", "level": "intermediate"}
        ]

    def test_malformed_categorization_is_rejected(self, client, auth_headers, skills_csv):
        response = client.post(
            "/api/linkedin/preview-csv",
            files=[_csv("Skills.csv", skills_csv)],
            data={"categorization": "{not json"},
            headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_categorization"


class TestUploadValidation:

    def test_no_files_is_bad_request(self, client, auth_headers):
        response = client.post("/api/linkedin/upload-csv", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "no_files"

    def test_non_csv_file_is_rejected(self, client, auth_headers):
        response = client.post(
            "/api/linkedin/upload-csv",
            files=[("files", ("Skills.txt", b"React\n", "text/plain"))],
            headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_csv"

    def test_csv_extension_with_other_content_type_is_accepted(self, client, auth_headers):
        response = client.post(
            "/api/linkedin/preview-csv",
            files=[("files", ("Skills.csv", b"React\n", "application/octet-stream"))],
            headers=auth_headers
        )
        assert response.status_code == 200

    def test_too_many_files_is_rejected(self, client, auth_headers):
        files = [_csv(f"Skills{i}.csv", b"React\n") for i in range(constants.UPLOAD_CONFIG["max_files"] + 1)]
        response = client.post("/api/linkedin/upload-csv", files=files, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "too_many_files"

    def test_oversized_file_is_rejected(self, client, auth_headers, monkeypatch):
        monkeypatch.setitem(constants.UPLOAD_CONFIG, "max_file_size_bytes", 16)
        response = client.post(
            "/api/linkedin/upload-csv",
            files=[_csv("Skills.csv", b"React\nDocker\nLeadership\nKubernetes\n")],
            headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "file_too_large"

    def test_requires_token(self, client, skills_csv):
        response = client.post("/api/linkedin/upload-csv", files=[_csv("Skills.csv", skills_csv)])
        assert response.status_code == 401


class TestUploadCsv:

    def test_upload_persists_sections(self, client, auth_headers, profile_csv, positions_csv, skills_csv):
        response = client.post(
            "/api/linkedin/upload-csv",
            files=[
                _csv("Profile.csv", profile_csv),
                _csv("Positions.csv", positions_csv),
                _csv("Skills.csv", skills_csv),
            ],
            headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert data["fileCount"] == 3
        assert data["fileErrors"] == {}
        assert {r["section"]: r["saved"] for r in data["saveResults"]} == {
            "personalInfo": True, "about": True, "skills": True, "experience": True
        }

        portfolio = client.get("/api/portfolio").json()
        assert portfolio["personalInfo"]["name"] == "Ada Lovelace"
        assert portfolio["about"]["content"] == "Writes programs for engines"
        assert [job["company"] for job in portfolio["experience"]["jobs"]] == ["Acme Corp", "Initech"]

    def test_bad_profile_is_reported_while_others_import(self, client, auth_headers, skills_csv):
        response = client.post(
            "/api/linkedin/upload-csv",
            files=[_csv("Profile.csv", b"full_name,headline\n"), _csv("Skills.csv", skills_csv)],
            headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert list(data["fileErrors"]) == ["Profile.csv"]
        assert data["sections"] == ["skills"]
        assert [r["section"] for r in data["saveResults"]] == ["skills"]

    def test_failed_section_is_reported(self, client, auth_headers, skills_csv):
        positions = b"company,title,location,start_date\nAcme Corp,Engineer,Berlin,2020-01\n"
        response = client.post(
            "/api/linkedin/upload-csv",
            files=[_csv("Positions.csv", positions), _csv("Skills.csv", skills_csv)],
            headers=auth_headers
        )
        assert response.status_code == 200
        results = {r["section"]: r for r in response.json()["saveResults"]}
        assert results["skills"]["saved"] is True
        assert results["experience"]["saved"] is False
        assert any("location" in error for error in results["experience"]["errors"])


class TestConfigureCategorization:

    def test_defaults_when_nothing_stored(self, client, auth_headers):
        data = client.get("/api/linkedin/configure-categorization", headers=auth_headers).json()
        assert data == {
            "useSubcategories": True,
            "minSkillsForSubcategory": 3,
            "categoryOverrides": {}
        }

    def test_save_fills_defaults_and_persists(self, client, auth_headers):
        response = client.post(
            "/api/linkedin/configure-categorization",
            json={"categorization": {"useSubcategories": False, "minSkillsForSubcategory": None}},
            headers=auth_headers
        )
        assert response.status_code == 200
        expected = {"useSubcategories": False, "minSkillsForSubcategory": 3, "categoryOverrides": {}}
        assert response.json()["categorization"] == expected
        assert storage.read_preferences() == expected

        stored = client.get("/api/linkedin/configure-categorization", headers=auth_headers).json()
        assert stored == expected

    def test_unreadable_stored_preferences_are_a_server_error(self, client, auth_headers, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "categorization.json").write_text("{not json")

        response = client.get("/api/linkedin/configure-categorization", headers=auth_headers)
        assert response.status_code == 500
        assert response.json()["detail"]["code"] == "internal_server_error"

    def test_stored_preferences_out_of_range_are_a_server_error(self, client, auth_headers):
        storage.write_preferences({"minSkillsForSubcategory": 42})

        response = client.get("/api/linkedin/configure-categorization", headers=auth_headers)
        assert response.status_code == 500
        assert "minSkillsForSubcategory" in response.json()["detail"]["details"]

    @pytest.mark.parametrize("payload", [
        {},
        {"categorization": {"minSkillsForSubcategory": 42}},
        {"categorization": {"categoryOverrides": {"Other": "sideways"}}},
    ])
    def test_invalid_payload_is_rejected(self, client, auth_headers, payload):
        response = client.post(
            "/api/linkedin/configure-categorization", json=payload, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_categorization"
