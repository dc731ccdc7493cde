"""
Shared pytest fixtures for the Portfolio Backend tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent))

from common.schemas import CategorizationPreferences


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the section store at a fresh, not yet created directory."""
    directory = tmp_path / "data"
    monkeypatch.setenv("PORTFOLIO_DATA_DIR", str(directory))
    monkeypatch.setenv("PORTFOLIO_EXAMPLE_DATA_DIR", str(tmp_path / "no_example_data"))
    return directory


@pytest.fixture
def auth_env(monkeypatch):
    """Known admin credentials for token tests."""
    monkeypatch.setenv("ADMIN_PASSWORD", "test-password")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.delenv("JWT_EXPIRES_HOURS", raising=False)


@pytest.fixture
def client(data_dir, auth_env):
    """TestClient with startup hooks run against the temporary data directory."""
    from fastapi.testclient import TestClient
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Authorization header carrying a freshly issued admin token."""
    response = client.post("/api/login", json={"password": "test-password"})
    assert response.status_code == 200, f"Login failed: {response.text}"
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def default_preferences():
    return CategorizationPreferences()


@pytest.fixture
def valid_job():
    """An experience job that passes schema validation."""
    return {
        "title": "Backend Engineer",
        "company": "Acme Corp",
        "startDate": "2021-03",
        "endDate": "2023-06",
        "isCurrent": False,
        "location": "remote",
        "country": "Germany",
        "city": "Berlin",
        "description": "Built payment services",
        "achievements": ["Cut latency by half"],
        "skills": ["Python", "PostgreSQL"]
    }


@pytest.fixture
def profile_csv():
    return (
        b"first_name,last_name,full_name,headline,summary,location\n"
        b"Ada,Lovelace,Ada Lovelace,Analytical Engineer,Writes programs for engines,London\n"
    )


@pytest.fixture
def positions_csv():
    return (
        b"company,title,description,location,start_date,end_date,is_current\n"
        b"Acme Corp,Senior Engineer,Leads the platform team,remote,2022-01,,true\n"
        b"Initech,Engineer,Maintained reports,remote,2018-05,2021-12,false\n"
    )


@pytest.fixture
def skills_csv():
    return b"React\nDocker\nLeadership\n"
