"""
Resume content validator.

RESPONSIBILITY: Report shape problems in generated resume content
- Pure validation only - NEVER mutates data
- Returns (is_valid, errors) tuples
- The fitting engine does not depend on it; it coerces whatever it gets

Used by the CLI to warn about model output before fitting.
"""

from __future__ import annotations

from typing import Dict, Any, List, Tuple

from resume_fit.schema import (
    CONTACT_FIELDS,
    LEGACY_ACHIEVEMENTS_KEY,
    RECORD_LIST_FIELDS,
    STRING_FIELDS,
    STRING_LIST_FIELDS,
)


def _validate_record_list(data: Dict[str, Any], key: str, keys: tuple, has_description: bool) -> List[str]:
    errors: List[str] = []
    entries = data[key]
    if not isinstance(entries, list):
        return [f"'{key}' must be a list, got {type(entries).__name__}"]

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f"{key}[{i}] must be an object, got {type(entry).__name__}")
            continue
        for field in keys:
            value = entry.get(field)
            if value is not None and not isinstance(value, str):
                errors.append(f"{key}[{i}].{field} must be a string")
        if has_description and "description" in entry:
            description = entry["description"]
            if not isinstance(description, list):
                errors.append(f"{key}[{i}].description must be a list")
            elif not all(isinstance(b, str) for b in description):
                errors.append(f"{key}[{i}].description must contain only strings")
    return errors


def validate_resume_content(data: Any) -> Tuple[bool, List[str]]:
    """
    Validate a resume record.

    Required: name (non-empty string)
    Optional: title, summary (strings); contact (object of strings);
              achievements, skills, softSkills, languages (lists of strings);
              experience, education, certifications, volunteer (lists of objects)

    Returns:
        (is_valid, errors)
    """
    if not isinstance(data, dict):
        return False, [f"Resume must be an object, got {type(data).__name__}"]

    errors: List[str] = []

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append("Resume missing required 'name' field")

    for key in STRING_FIELDS:
        if key != "name" and data.get(key) is not None and not isinstance(data[key], str):
            errors.append(f"'{key}' must be a string")

    contact = data.get("contact")
    if contact is not None:
        if not isinstance(contact, dict):
            errors.append("'contact' must be an object")
        else:
            for key in CONTACT_FIELDS:
                if contact.get(key) is not None and not isinstance(contact[key], str):
                    errors.append(f"contact.{key} must be a string")

    for key in STRING_LIST_FIELDS + (LEGACY_ACHIEVEMENTS_KEY,):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list):
            errors.append(f"'{key}' must be a list")
        elif not all(isinstance(item, str) for item in value):
            errors.append(f"'{key}' must contain only strings")

    for key, (keys, has_description) in RECORD_LIST_FIELDS.items():
        if data.get(key) is not None:
            errors.extend(_validate_record_list(data, key, keys, has_description))

    return len(errors) == 0, errors
