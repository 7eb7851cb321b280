"""
Adaptive single-page layout fitting for resume content.

This module turns variable-length resume JSON into a bounded, printable
single-page layout. It derives font sizes from the content density, caps
list lengths, truncates long bullets and moves overflowing experience and
education entries into the achievements list. The transform is pure and
deterministic: the input is deep-copied and the annotated copy is returned.

The numeric constants are calibrated against the rendering templates.
Changing any of them changes the rendered output.
"""

from __future__ import annotations

import copy
import math
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

from pydantic import ValidationError

from resume_fit.density import estimate_total_chars
from resume_fit.json_loaders import load_resume_content, save_fitted_resume
from resume_fit.logger import get_logger
from resume_fit.paths import DEFAULT_FITTED_RESUME
from resume_fit.schema import LayoutHints, SectionFontSizes, as_text, as_text_list, coerce_resume_content

logger = get_logger("layout_fit")

# Density thresholds (characters)
TARGET_CHARS = 3600  # comfortable amount for one page at full-size fonts
MEDIUM_CHARS = 2200  # above this, compact mode
COMPACT_CHAR_THRESHOLD = 4200  # above this, sidebar fonts shrink further

MIN_GLOBAL_SCALE = 0.70
MAX_GLOBAL_SCALE = 1.0
SCALE_EXPONENT = 0.5

BASE_NAME_FONT = 40
NAME_FONT_RANGE = (16, 48)
LONG_NAME_CHARS = 24
LONG_NAME_PENALTY_PER_CHAR = 0.25

SIDEBAR_PENALTY = 0.88
SIDEBAR_WIDTH_PX = 180

# section -> (base px, min px, max px)
SECTION_FONT_BASES: Dict[str, Tuple[int, int, int]] = {
    "section_title": (14, 10, 18),
    "body": (12, 9, 14),
    "sidebar_title": (12, 9, 14),
    "sidebar_body": (11, 8, 12),
    "duration": (10, 8, 12),
}
SIDEBAR_SECTIONS = ("sidebar_title", "sidebar_body")

# (normal, compact)
MAX_EXPERIENCE_ITEMS = (6, 3)
MAX_BULLETS_PER_EXP = (4, 2)
MAX_EDUCATION_ITEMS = (6, 2)
TRUNCATE_CHAR_PER_LINE = (220, 120)
MAX_ACHIEVEMENTS = (12, 6)
MAX_SKILLS = (30, 12)
MAX_SOFT_SKILLS = (12, 6)
MAX_LANGUAGES = (8, 3)
MAX_CERTIFICATIONS = 20

ELLIPSIS = "…"
OVERFLOW_TITLE_SEPARATOR = " — "
OVERFLOW_BULLET_SEPARATOR = " • "
# extra characters a condensed entry can measure over its raw text (normal caps)
OVERFLOW_SEPARATOR_SLACK = (len(OVERFLOW_TITLE_SEPARATOR) - 1) + MAX_BULLETS_PER_EXP[0] * (len(OVERFLOW_BULLET_SEPARATOR) - 1)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 upwards, as the templates were calibrated with (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _pick(pair: Tuple[int, int], compact_mode: bool) -> int:
    return pair[1] if compact_mode else pair[0]


# ============================================================================
# Scale and font sizes
# ============================================================================

def compute_global_scale(total_chars: int) -> float:
    """
    Font scale factor for a given density.

    The square root damps the shrink: four times the target content halves
    the fonts instead of quartering them. Always within [0.70, 1.0].
    """
    raw_scale = TARGET_CHARS / max(1, total_chars)
    return clamp(raw_scale ** SCALE_EXPONENT, MIN_GLOBAL_SCALE, MAX_GLOBAL_SCALE)


def compute_name_font_size(name: str, global_scale: float) -> int:
    """Header font size; names past 24 characters lose 0.25px per extra character."""
    name_len = len(name or "")
    penalty = (name_len - LONG_NAME_CHARS) * LONG_NAME_PENALTY_PER_CHAR if name_len > LONG_NAME_CHARS else 0
    low, high = NAME_FONT_RANGE
    return int(clamp(round_half_up(BASE_NAME_FONT * global_scale - penalty), low, high))


def compute_section_font_sizes(total_chars: int, global_scale: float, name_font_size: int) -> SectionFontSizes:
    """Per-section font sizes, each clamped to its own window."""
    sidebar_penalty = SIDEBAR_PENALTY if total_chars > COMPACT_CHAR_THRESHOLD else 1.0
    sizes: Dict[str, int] = {"name": name_font_size}
    for section, (base, low, high) in SECTION_FONT_BASES.items():
        factor = global_scale * sidebar_penalty if section in SIDEBAR_SECTIONS else global_scale
        sizes[section] = int(clamp(round_half_up(base * factor), low, high))
    return SectionFontSizes(**sizes)


def resolve_caps(compact_mode: bool) -> Dict[str, int]:
    """Item caps for the layout regime."""
    return {
        "max_experience_items": _pick(MAX_EXPERIENCE_ITEMS, compact_mode),
        "max_bullets_per_exp": _pick(MAX_BULLETS_PER_EXP, compact_mode),
        "max_education_items": _pick(MAX_EDUCATION_ITEMS, compact_mode),
        "truncate_char_per_line": _pick(TRUNCATE_CHAR_PER_LINE, compact_mode),
    }


def compute_layout_hints(content: Any) -> LayoutHints:
    """Layout hints for a resume record without touching its content."""
    data = coerce_resume_content(copy.deepcopy(content))
    return _layout_for(data, estimate_total_chars(data))


def _is_fitted_normal_record(data: Dict[str, Any], total_chars: int) -> bool:
    """
    True when ``data`` is a normal-mode fit result whose content still respects the normal caps.

    Overflow strings carry separators, so a record fitted just under the
    compact threshold can measure slightly above it on a later pass. Such a
    record keeps its normal regime instead of being trimmed a second time,
    as long as the excess is within what the separators can add.
    """
    previous = data.get("_layout")
    if not isinstance(previous, dict):
        return False
    try:
        hints = LayoutHints.model_validate(previous)
    except ValidationError:
        return False
    if hints.compact_mode:
        return False

    if total_chars > MEDIUM_CHARS + OVERFLOW_SEPARATOR_SLACK * len(data["achievements"]):
        return False

    caps = resolve_caps(False)
    experience = data["experience"]
    return (
        len(experience) <= caps["max_experience_items"]
        and len(data["education"]) <= caps["max_education_items"]
        and all(len(e["description"]) <= caps["max_bullets_per_exp"] for e in experience)
        and all(len(b.strip()) <= caps["truncate_char_per_line"] for e in experience for b in e["description"])
        and len(data["achievements"]) <= MAX_ACHIEVEMENTS[0]
        and len(data["skills"]) <= MAX_SKILLS[0]
        and len(data["softSkills"]) <= MAX_SOFT_SKILLS[0]
        and len(data["languages"]) <= MAX_LANGUAGES[0]
    )


def _layout_for(data: Dict[str, Any], total_chars: int) -> LayoutHints:
    compact_mode = total_chars > MEDIUM_CHARS and not _is_fitted_normal_record(data, total_chars)
    global_scale = compute_global_scale(total_chars)
    name_font_size = compute_name_font_size(data.get("name", ""), global_scale)
    return LayoutHints(
        compact_mode=compact_mode,
        name_font_size=name_font_size,
        section_font_sizes=compute_section_font_sizes(total_chars, global_scale, name_font_size),
        sidebar_width_px=SIDEBAR_WIDTH_PX,
        **resolve_caps(compact_mode),
    )


# ============================================================================
# Content trimming
# ============================================================================

def truncate_line(text: str, limit: int) -> str:
    """Cut a line longer than ``limit`` to ``limit - 1`` characters plus an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit - 1].rstrip() + ELLIPSIS


def unique_strings(items: List[str]) -> List[str]:
    """Trim, drop empties and remove exact duplicates, keeping first occurrences."""
    seen = set()
    result = []
    for item in items:
        item = as_text(item).strip()
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def condense_experience(entry: Dict[str, Any], max_bullets: int) -> str:
    """One-line form of an experience entry: 'role — company • bullet • bullet'."""
    title = f"{as_text(entry.get('role'))}{OVERFLOW_TITLE_SEPARATOR}{as_text(entry.get('company'))}".strip()
    bullets = [b.strip() for b in as_text_list(entry.get("description"))[:max_bullets]]
    return OVERFLOW_BULLET_SEPARATOR.join(part for part in [title, *bullets] if part)


def condense_education(entry: Dict[str, Any]) -> str:
    """One-line form of an education entry: 'degree — school year'."""
    return (
        f"{as_text(entry.get('degree'))}{OVERFLOW_TITLE_SEPARATOR}{as_text(entry.get('school'))} "
        f"{as_text(entry.get('year')).strip()}"
    ).strip()


def _split_overflow(items: List[Any], cap: int) -> Tuple[List[Any], List[Any]]:
    return items[:cap], items[cap:]


def preprocess_resume(content: Any) -> Dict[str, Any]:
    """
    Fit resume content onto a single page.

    Returns a deep copy of ``content`` with absent fields defaulted, lists
    capped, long bullets truncated, overflow moved into achievements and the
    layout hints attached under ``_layout``. Never raises for any input shape
    and never mutates ``content``.
    """
    data = coerce_resume_content(copy.deepcopy(content))
    total_chars = estimate_total_chars(data)
    layout = _layout_for(data, total_chars)
    compact_mode = layout.compact_mode
    max_bullets = layout.max_bullets_per_exp
    line_limit = layout.truncate_char_per_line

    overflow: List[str] = []

    experience, extra_experience = _split_overflow(data["experience"], layout.max_experience_items)
    for entry in extra_experience:
        condensed = condense_experience(entry, max_bullets)
        if condensed:
            overflow.append(condensed)

    education, extra_education = _split_overflow(data["education"], layout.max_education_items)
    for entry in extra_education:
        condensed = condense_education(entry)
        if condensed:
            overflow.append(condensed)

    data["experience"] = [
        {
            **entry,
            "description": [truncate_line(b.strip(), line_limit) for b in entry["description"][:max_bullets]],
        }
        for entry in experience
    ]
    data["education"] = education

    data["certifications"] = [
        {**cert, "name": cert["name"].strip(), "year": cert["year"].strip()}
        for cert in data["certifications"][:MAX_CERTIFICATIONS]
    ]
    data["softSkills"] = unique_strings(data["softSkills"])[:_pick(MAX_SOFT_SKILLS, compact_mode)]
    data["skills"] = unique_strings(data["skills"])[:_pick(MAX_SKILLS, compact_mode)]
    data["languages"] = unique_strings(data["languages"])[:_pick(MAX_LANGUAGES, compact_mode)]

    existing = [a.strip() for a in data["achievements"]]
    data["achievements"] = unique_strings(existing + overflow)[:_pick(MAX_ACHIEVEMENTS, compact_mode)]

    data["_layout"] = layout.to_dict()

    logger.debug(
        f"Fitted resume: total_chars={total_chars}, compact={compact_mode}, "
        f"moved {len(extra_experience)} experience / {len(extra_education)} education entries"
    )
    return data


# ============================================================================
# File-level entry point
# ============================================================================

def _fit_metadata(before: Dict[str, Any], after: Dict[str, Any]) -> Dict[str, Any]:
    """Count what ``preprocess_resume`` removed, moved or shortened."""
    layout = after["_layout"]
    line_limit = layout["truncateCharPerLine"]
    max_bullets = layout["maxBulletsPerExp"]
    total_chars = estimate_total_chars(before)

    kept = before["experience"][:len(after["experience"])]
    trimmed_bullets = sum(max(0, len(e["description"]) - max_bullets) for e in kept)
    truncated_bullets = sum(
        1 for e in kept for bullet in e["description"][:max_bullets] if len(bullet.strip()) > line_limit
    )
    moved_experiences = len(before["experience"]) - len(after["experience"])
    moved_education = len(before["education"]) - len(after["education"])
    achievement_candidates = len(before["achievements"]) + moved_experiences + moved_education

    return {
        "total_chars": total_chars,
        "global_scale": round(compute_global_scale(total_chars), 4),
        "compact_mode": layout["compactMode"],
        "moved_experiences": moved_experiences,
        "moved_education": moved_education,
        "trimmed_bullets": trimmed_bullets,
        "truncated_bullets": truncated_bullets,
        "dropped_achievements": max(0, achievement_candidates - len(after["achievements"])),
        "trimmed_skills": len(before["skills"]) - len(after["skills"]),
        "trimmed_soft_skills": len(before["softSkills"]) - len(after["softSkills"]),
        "trimmed_languages": len(before["languages"]) - len(after["languages"]),
        "trimmed_certifications": len(before["certifications"]) - len(after["certifications"]),
    }


def fit_resume_file(input_path: Path, output_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Fit a resume document on disk and write the annotated result.

    Reads JSON or YAML through ``load_resume_content``, runs
    ``preprocess_resume`` and writes pretty-printed JSON. Problems are
    reported in the returned metadata, never raised.

    Args:
        input_path: Resume document (.json, .yaml or .yml)
        output_path: Where to write the fitted JSON (default: output/fitted_resume.json)

    Returns:
        Dictionary with fitting metadata:
        {
            "status": "success" | "error",
            "message": str,
            "output_path": str,
            "total_chars": int,
            "global_scale": float,
            "compact_mode": bool,
            "moved_experiences": int,
            "moved_education": int,
            "trimmed_bullets": int,
            "truncated_bullets": int,
            "dropped_achievements": int,
            "trimmed_skills": int,
            "trimmed_soft_skills": int,
            "trimmed_languages": int,
            "trimmed_certifications": int
        }
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else DEFAULT_FITTED_RESUME

    if not input_path.exists():
        logger.error(f"Resume file not found: {input_path}")
        return {"status": "error", "message": f"Resume file not found: {input_path}", "output_path": ""}

    content = load_resume_content(input_path)
    if content is None:
        return {"status": "error", "message": f"No resume content could be read from {input_path}", "output_path": ""}

    before = coerce_resume_content(copy.deepcopy(content))
    fitted = preprocess_resume(content)
    metadata = _fit_metadata(before, fitted)

    try:
        save_fitted_resume(fitted, output_path)
    except OSError as e:
        logger.error(f"Failed to write fitted resume to {output_path}: {e}")
        metadata.update({"status": "error", "message": f"Failed to write {output_path}: {e}", "output_path": ""})
        return metadata

    metadata.update({
        "status": "success",
        "message": f"Fitted resume written to {output_path}",
        "output_path": str(output_path),
    })
    logger.info(
        f"Fitted {input_path.name}: {metadata['total_chars']} chars, "
        f"compact={metadata['compact_mode']}, scale={metadata['global_scale']}"
    )
    return metadata


def format_fit_summary(metadata: Dict[str, Any]) -> str:
    """
    Format fitting metadata into a user-friendly summary string.

    Args:
        metadata: Metadata from fit_resume_file

    Returns:
        Formatted summary string
    """
    if metadata.get("status") == "error":
        return f"[error] {metadata.get('message', 'Unknown error')}"

    parts = []

    if metadata.get("moved_experiences", 0) > 0:
        parts.append(f"Experiences: {metadata['moved_experiences']} moved to achievements")

    if metadata.get("moved_education", 0) > 0:
        parts.append(f"Education: {metadata['moved_education']} moved to achievements")

    if metadata.get("trimmed_bullets", 0) > 0:
        parts.append(f"Experience bullets: {metadata['trimmed_bullets']} removed")

    if metadata.get("truncated_bullets", 0) > 0:
        parts.append(f"Experience bullets: {metadata['truncated_bullets']} shortened")

    if metadata.get("dropped_achievements", 0) > 0:
        parts.append(f"Achievements: {metadata['dropped_achievements']} dropped")

    for key, label in (
        ("trimmed_skills", "Skills"),
        ("trimmed_soft_skills", "Soft skills"),
        ("trimmed_languages", "Languages"),
        ("trimmed_certifications", "Certifications"),
    ):
        if metadata.get(key, 0) > 0:
            parts.append(f"{label}: {metadata[key]} removed")

    mode = "compact" if metadata.get("compact_mode") else "normal"
    header = (
        f"Layout: {mode} mode, {metadata.get('total_chars', 0)} chars, "
        f"font scale {metadata.get('global_scale', 1.0):.2f}"
    )

    if parts:
        return header + "\n – " + "\n – ".join(parts)

    return header + "\nNo trimming needed"
