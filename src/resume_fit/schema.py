"""
Resume content shapes and layout hint models.

Resume content travels through the pipeline as plain JSON-shaped dicts; the
TypedDicts below document the expected keys. Layout hints are pydantic models
serialized with camelCase aliases so templates can read them unchanged.
"""
from __future__ import annotations

from typing import TypedDict, List, Dict, Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ============================================================================
# Resume Content Schema
# ============================================================================

class Contact(TypedDict, total=False):
    """Contact block."""
    phone: str
    email: str
    address: str
    linkedin: str


class ExperienceEntry(TypedDict, total=False):
    """Work experience entry; description holds the bullets."""
    role: str
    company: str
    duration: str
    description: List[str]


class EducationEntry(TypedDict, total=False):
    degree: str
    school: str
    year: str


class CertificationEntry(TypedDict, total=False):
    name: str
    year: str


class VolunteerEntry(TypedDict, total=False):
    role: str
    org: str
    duration: str
    description: List[str]


class ResumeContent(TypedDict, total=False):
    """Structured resume record produced by the generation step."""
    name: str
    title: str
    photoUrl: str
    contact: Contact
    summary: str
    experience: List[ExperienceEntry]
    education: List[EducationEntry]
    certifications: List[CertificationEntry]
    achievements: List[str]
    volunteer: List[VolunteerEntry]
    skills: List[str]
    softSkills: List[str]
    languages: List[str]
    interests: List[str]


STRING_FIELDS = ("name", "title", "summary")
STRING_LIST_FIELDS = ("achievements", "skills", "softSkills", "languages")
CONTACT_FIELDS = ("phone", "email", "address", "linkedin")

# list field -> (string keys of each record, whether it carries a description)
RECORD_LIST_FIELDS: Dict[str, tuple] = {
    "experience": (("role", "company", "duration"), True),
    "education": (("degree", "school", "year"), False),
    "certifications": (("name", "year"), False),
    "volunteer": (("role", "org", "duration"), True),
}

# Spelling used by documents saved before the key was renamed
LEGACY_ACHIEVEMENTS_KEY = "achivements"


def as_text(value: Any) -> str:
    """Coerce a scalar to a string; None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def as_text_list(value: Any) -> List[str]:
    """Coerce a list of scalars to a list of strings; anything else becomes []."""
    if not isinstance(value, list):
        return []
    return [as_text(item) for item in value]


def _coerce_record(entry: Any, keys: tuple, has_description: bool) -> Dict[str, Any]:
    record = dict(entry) if isinstance(entry, dict) else {}
    for key in keys:
        record[key] = as_text(record.get(key))
    if has_description:
        record["description"] = as_text_list(record.get("description"))
    return record


def coerce_resume_content(data: Any) -> Dict[str, Any]:
    """
    Fill absent or malformed fields of a resume record with empty defaults.

    Modifies ``data`` in place when it is a dict and returns it; any other
    value yields a fresh empty record. Unknown keys are preserved and strings
    are not trimmed.
    """
    record: Dict[str, Any] = data if isinstance(data, dict) else {}

    for key in STRING_FIELDS:
        record[key] = as_text(record.get(key))

    contact = record.get("contact")
    contact = dict(contact) if isinstance(contact, dict) else {}
    for key in CONTACT_FIELDS:
        if key in contact:
            contact[key] = as_text(contact[key])
    record["contact"] = contact

    achievements = as_text_list(record.get("achievements"))
    if LEGACY_ACHIEVEMENTS_KEY in record:
        achievements.extend(as_text_list(record.pop(LEGACY_ACHIEVEMENTS_KEY)))
    record["achievements"] = achievements

    for key in STRING_LIST_FIELDS:
        if key != "achievements":
            record[key] = as_text_list(record.get(key))

    for key, (keys, has_description) in RECORD_LIST_FIELDS.items():
        entries = record.get(key)
        if not isinstance(entries, list):
            entries = []
        record[key] = [_coerce_record(e, keys, has_description) for e in entries]

    return record


# ============================================================================
# Layout Hints
# ============================================================================

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Dump with the camelCase keys templates expect."""
        return self.model_dump(by_alias=True)


class SectionFontSizes(_CamelModel):
    """Per-section font sizes in px."""
    name: int
    section_title: int
    body: int
    sidebar_title: int
    sidebar_body: int
    duration: int


class LayoutHints(_CamelModel):
    """Renderer-facing layout parameters attached to a fitted resume as ``_layout``."""
    compact_mode: bool
    name_font_size: int
    max_experience_items: int
    max_bullets_per_exp: int
    max_education_items: int
    truncate_char_per_line: int
    section_font_sizes: SectionFontSizes
    sidebar_width_px: int
