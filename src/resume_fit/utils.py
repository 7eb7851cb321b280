"""Shared utility functions for resume-fit."""

from __future__ import annotations

import json
import re

from json_repair import repair_json

from resume_fit.logger import get_logger

logger = get_logger("utils")

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F]')


def strip_markdown_fences(content: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence."""
    content = content.strip()
    if content.startswith("```"):
        lines = content.split("\n")
        if lines[0].strip().startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        content = "\n".join(lines)
    return content.strip()


def _extract_first_json(content: str) -> str | None:
    """Return the first balanced, parseable JSON object/array in ``content``."""
    for start_char, end_char in (('{', '}'), ('[', ']')):
        start_idx = content.find(start_char)
        if start_idx == -1:
            continue

        depth = 0
        in_string = False
        escape_next = False
        end_idx = -1

        for i in range(start_idx, len(content)):
            char = content[i]

            if escape_next:
                escape_next = False
                continue

            if char == '\\':
                escape_next = True
                continue

            if char == '"':
                in_string = not in_string
                continue

            if not in_string:
                if char == start_char:
                    depth += 1
                elif char == end_char:
                    depth -= 1
                    if depth == 0:
                        end_idx = i + 1
                        break

        if end_idx > start_idx:
            candidate = content[start_idx:end_idx]
            try:
                json.loads(candidate)
                return candidate
            except json.JSONDecodeError:
                continue

    return None


def clean_json_content(content: str) -> str:
    """
    Clean model output so it parses as JSON.

    Model responses often wrap JSON in ```json fences, carry stray control
    characters, trail extra prose after the object, or leave trailing commas
    and unquoted keys behind. This strips the fences and control characters,
    extracts the first complete JSON value, and as a last resort runs
    ``json_repair`` over the text.

    Args:
        content: Raw model output or file contents

    Returns:
        JSON text; an empty string if there was nothing to clean
    """
    content = strip_markdown_fences(content or "")

    # JSON allows \t, \n and \r; other control chars become spaces
    content = _CONTROL_CHARS.sub(' ', content).strip()
    if not content:
        return ""

    try:
        json.loads(content)
        return content
    except json.JSONDecodeError:
        pass

    extracted = _extract_first_json(content)
    if extracted is not None:
        return extracted

    repaired = repair_json(content)
    if repaired and repaired != '""':
        logger.debug("Repaired malformed JSON content")
        return repaired

    # Let the caller report the parse error
    return content
