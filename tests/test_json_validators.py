"""Tests for resume content validation."""
import copy

import pytest

from resume_fit.json_validators import validate_resume_content


class TestValidateResumeContent:
    """Tests for validate_resume_content."""

    def test_valid_resume(self, sample_resume):
        is_valid, errors = validate_resume_content(sample_resume)
        assert is_valid
        assert errors == []

    def test_minimal_resume(self):
        is_valid, errors = validate_resume_content({"name": "Jane"})
        assert is_valid
        assert errors == []

    @pytest.mark.parametrize("data", [None, [], "resume"])
    def test_non_mapping(self, data):
        is_valid, errors = validate_resume_content(data)
        assert not is_valid
        assert "must be an object" in errors[0]

    @pytest.mark.parametrize("name", [None, "", "   ", 42])
    def test_missing_name(self, name):
        is_valid, errors = validate_resume_content({"name": name})
        assert not is_valid
        assert any("'name'" in error for error in errors)

    def test_wrong_scalar_types(self):
        is_valid, errors = validate_resume_content({"name": "Jane", "summary": ["a"], "contact": {"email": 1}})
        assert not is_valid
        assert "'summary' must be a string" in errors
        assert "contact.email must be a string" in errors

    def test_contact_not_an_object(self):
        _, errors = validate_resume_content({"name": "Jane", "contact": "jane@example.com"})
        assert "'contact' must be an object" in errors

    def test_string_lists(self):
        _, errors = validate_resume_content({"name": "Jane", "skills": "Go", "languages": ["English", 3]})
        assert "'skills' must be a list" in errors
        assert "'languages' must contain only strings" in errors

    def test_legacy_achievements_key_is_checked(self):
        _, errors = validate_resume_content({"name": "Jane", "achivements": "Won"})
        assert "'achivements' must be a list" in errors

    def test_record_lists(self):
        data = {
            "name": "Jane",
            "experience": [
                "Engineer at Acme",
                {"role": "Dev", "company": 7, "description": "Built things"},
                {"role": "QA", "description": ["ok", 3]},
            ],
            "education": {"degree": "BSc"},
        }
        is_valid, errors = validate_resume_content(data)

        assert not is_valid
        assert "experience[0] must be an object, got str" in errors
        assert "experience[1].company must be a string" in errors
        assert "experience[1].description must be a list" in errors
        assert "experience[2].description must contain only strings" in errors
        assert "'education' must be a list, got dict" in errors

    def test_does_not_mutate(self, sample_resume):
        sample_resume["skills"] = None
        original = copy.deepcopy(sample_resume)
        validate_resume_content(sample_resume)
        assert sample_resume == original
