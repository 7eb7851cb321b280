"""
Content density estimation.

The density of a resume is a plain character count across its text fields.
It is a heuristic, not a token or pixel measure: list-like fields are joined
with a single space so adjacent words keep a separator. The layout
thresholds in ``layout_fit`` are calibrated against exactly this count.
"""

from __future__ import annotations

from typing import Any, Dict, List

from resume_fit.schema import as_text, as_text_list


def _entries(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [e if isinstance(e, dict) else {} for e in value]


def _join(value: Any) -> str:
    return " ".join(as_text_list(value))


def _experience_text(entries: Any) -> str:
    return " ".join(
        f"{as_text(e.get('role'))} {as_text(e.get('company'))} {as_text(e.get('duration'))} "
        f"{_join(e.get('description'))}"
        for e in _entries(entries)
    )


def _education_text(entries: Any) -> str:
    return " ".join(
        f"{as_text(e.get('degree'))} {as_text(e.get('school'))} {as_text(e.get('year'))}"
        for e in _entries(entries)
    )


def _certification_text(entries: Any) -> str:
    # name and year are glued together, entries are space separated
    return " ".join(as_text(e.get("name")) + as_text(e.get("year")) for e in _entries(entries))


def _volunteer_text(entries: Any) -> str:
    return " ".join(
        f"{as_text(e.get('role'))} {as_text(e.get('org'))} {_join(e.get('description'))}"
        for e in _entries(entries)
    )


def estimate_section_chars(content: Any) -> Dict[str, int]:
    """
    Character count per section.

    Missing or malformed fields count as empty. The values sum to
    ``estimate_total_chars(content)``.
    """
    data = content if isinstance(content, dict) else {}
    return {
        "name": len(as_text(data.get("name"))),
        "title": len(as_text(data.get("title"))),
        "summary": len(as_text(data.get("summary"))),
        "experience": len(_experience_text(data.get("experience"))),
        "education": len(_education_text(data.get("education"))),
        "skills": len(_join(data.get("skills"))),
        "softSkills": len(_join(data.get("softSkills"))),
        "achievements": len(_join(data.get("achievements"))),
        "languages": len(_join(data.get("languages"))),
        "certifications": len(_certification_text(data.get("certifications"))),
        "volunteer": len(_volunteer_text(data.get("volunteer"))),
    }


def estimate_total_chars(content: Any) -> int:
    """Total character count used to pick the layout regime."""
    return sum(estimate_section_chars(content).values())
