"""
Resume document loading and saving.

RESPONSIBILITY: Runtime consumer safety + backward compatibility
- Load resume documents from disk (JSON, or YAML for hand-written content)
- Clean model output before parsing (markdown fences, trailing prose, broken JSON)
- Fold the legacy 'achivements' key into 'achievements'
- Return None on errors (never crash the pipeline); a valid empty document loads as {}

NOT used for:
- Shape validation (see json_validators.py for that)
- Filling absent fields (schema.coerce_resume_content does that)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from resume_fit.logger import get_logger
from resume_fit.schema import LEGACY_ACHIEVEMENTS_KEY
from resume_fit.utils import clean_json_content

logger = get_logger("json_loaders")

YAML_SUFFIXES = (".yaml", ".yml")


def _fold_legacy_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    legacy = data.pop(LEGACY_ACHIEVEMENTS_KEY, None)
    if isinstance(legacy, list):
        current = data.get("achievements")
        data["achievements"] = (current if isinstance(current, list) else []) + legacy
        logger.debug(f"Folded {len(legacy)} entries from legacy '{LEGACY_ACHIEVEMENTS_KEY}' key")
    return data


def parse_resume_text(raw_content: str) -> Optional[Dict[str, Any]]:
    """
    Parse resume JSON text, cleaning model output first.

    Returns None when the text holds no JSON object.
    """
    cleaned = clean_json_content(raw_content)
    if not cleaned:
        return None
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Resume content is not valid JSON - {e}")
        return None
    if not isinstance(data, dict):
        logger.error(f"Resume content must be a JSON object, got {type(data).__name__}")
        return None
    return _fold_legacy_keys(data)


def load_resume_content(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load a resume document.

    Schema: {name, title?, contact?, summary, experience: [...], education: [...],
             certifications?, achievements?, volunteer?, skills?, softSkills?, languages?}

    .yaml/.yml files go through yaml.safe_load; everything else is treated as JSON.
    Returns None when the file cannot be read or holds no resume mapping.
    """
    file_path = Path(file_path)
    try:
        raw_content = file_path.read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.error(f"Resume file not found: {file_path}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"{file_path.name}: Error reading file - {e}")
        return None

    if file_path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(raw_content)
        except yaml.YAMLError as e:
            logger.error(f"{file_path.name}: Invalid YAML - {e}")
            return None
        if not isinstance(data, dict):
            logger.error(f"{file_path.name}: Resume must be a mapping, got {type(data).__name__}")
            return None
        return _fold_legacy_keys(data)

    data = parse_resume_text(raw_content)
    if data is None:
        logger.warning(f"{file_path.name}: no resume content found")
    return data


def save_fitted_resume(data: Dict[str, Any], file_path: Path) -> Path:
    """Write a fitted resume as pretty-printed UTF-8 JSON and return the path."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding='utf-8')
    logger.info(f"Saved fitted resume: {file_path}")
    return file_path
