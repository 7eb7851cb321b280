"""
Layout Fit Tool

Runs the single-page layout fit on a resume JSON file produced by an agent.
Writes the fitted document (with its `_layout` hints) and reports what was
trimmed so the agent can decide whether the content needs rewriting.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Type

from crewai.tools import BaseTool
from pydantic import BaseModel, Field, ConfigDict

from resume_fit.layout_fit import fit_resume_file, format_fit_summary
from resume_fit.logger import get_logger
from resume_fit.paths import OUTPUT_DIR, PROJECT_ROOT

logger = get_logger("layout_fit_tool")


class LayoutFitInput(BaseModel):
    """Input schema for LayoutFitTool."""
    input_path: str = Field(..., description="Path to the resume JSON/YAML file (absolute, or relative to the output directory or project root).")
    output_path: Optional[str] = Field(None, description="Where to write the fitted resume JSON (default: output/fitted_resume.json).")

    model_config = ConfigDict(extra="ignore")


def _resolve(file_path: str) -> Path:
    path = Path(file_path)
    if path.is_absolute():
        return path
    # OUTPUT_DIR first, where agents write their JSON
    for base in (OUTPUT_DIR, PROJECT_ROOT):
        candidate = base / path
        if candidate.exists():
            return candidate
    return path.resolve()


class LayoutFitTool(BaseTool):
    """
    Fits resume content onto a single page.
    Returns a JSON string with the trimming metadata and a human-readable summary.
    """
    name: str = "resume_layout_fit"
    description: str = (
        "Fit a resume JSON file onto a single printable page. Computes font sizes from the content "
        "density, caps experience/education/skills lists, truncates long bullets and moves overflowing "
        "experience and education entries into achievements. Writes the fitted resume with '_layout' "
        "hints for the renderer and returns what was trimmed."
    )
    args_schema: Type[BaseModel] = LayoutFitInput

    def _run(self, input_path: str, output_path: Optional[str] = None) -> str:
        try:
            source = _resolve(input_path)
            target = Path(output_path) if output_path else None
            if target is not None and not target.is_absolute():
                target = OUTPUT_DIR / target

            metadata = fit_resume_file(source, target)
            metadata["summary"] = format_fit_summary(metadata)
            return json.dumps(metadata, ensure_ascii=False)
        except Exception as e:
            logger.error(f"Layout fit failed for {input_path}: {e}", exc_info=True)
            return json.dumps({"status": "error", "message": f"Layout fit failed: {e}"})
