from __future__ import annotations

import pytest
from pydantic import ValidationError

from mcp_resume_generator.models import DEFAULT_SECTIONS, ResumeData, placeholder_template


def test_defaults_fill_missing_sections() -> None:
    payload = ResumeData.model_validate({"basics": {"name": "Ada Lovelace"}}).to_payload()

    assert payload["selectedTemplate"] == 1
    assert payload["headings"] == {
        "awards": "Introduction",
        "work": "Work Experience",
        "education": "Education",
        "skills": "Skills",
        "projects": "Projects",
    }
    assert payload["basics"] == {
        "name": "Ada Lovelace",
        "email": "",
        "phone": "",
        "website": "",
        "location": {"address": ""},
    }
    for section in ("work", "skills", "projects", "education", "awards"):
        assert payload[section] == []
    assert payload["sections"] == DEFAULT_SECTIONS


def test_wire_names_are_camel_case() -> None:
    data = ResumeData.model_validate(
        {
            "selectedTemplate": 3,
            "work": [{"company": "Analytical Engines", "startDate": "1842", "endDate": "1843"}],
            "education": [{"institution": "Home", "studyType": "Private tutoring"}],
        }
    )

    assert data.selected_template == 3
    payload = data.to_payload()
    assert payload["work"][0]["startDate"] == "1842"
    assert payload["education"][0]["studyType"] == "Private tutoring"
    assert "start_date" not in payload["work"][0]


def test_unknown_fields_are_passed_through() -> None:
    payload = ResumeData.model_validate({"customField": {"a": 1}, "basics": {"pronouns": "they"}}).to_payload()

    assert payload["customField"] == {"a": 1}
    assert payload["basics"]["pronouns"] == "they"


def test_invalid_template_number_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ResumeData.model_validate({"selectedTemplate": "not-a-number"})


def test_placeholder_template_has_bracketed_values() -> None:
    payload = placeholder_template(4).to_payload()

    assert payload["selectedTemplate"] == 4
    assert payload["basics"]["name"] == "[Your Full Name]"
    assert payload["basics"]["location"]["address"] == "[Your City, State]"
    assert len(payload["work"][0]["highlights"]) == 3
    assert payload["education"][0]["studyType"] == "[Degree Type]"
    assert payload["awards"][0]["summary"].startswith("[")
    assert payload["sections"] == DEFAULT_SECTIONS
