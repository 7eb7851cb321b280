import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture(scope="session", autouse=True)
def add_src_to_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


def _experience(i: int, bullets: int = 4, bullet_len: int = 50) -> Dict[str, Any]:
    return {
        "role": f"Software Engineer {i}",
        "company": f"Company {i}",
        "duration": "2019 - 2021",
        "description": [f"{i}-{b}-".ljust(bullet_len, "x") for b in range(bullets)],
    }


@pytest.fixture
def make_experience() -> Callable[..., Dict[str, Any]]:
    return _experience


@pytest.fixture
def sample_resume() -> Dict[str, Any]:
    """A small, complete resume that fits comfortably in normal mode."""
    return {
        "name": "Jane Doe",
        "title": "Senior Software Engineer",
        "contact": {
            "phone": "+1 234 567 890",
            "email": "jane.doe@example.com",
            "address": "Springfield, IL",
            "linkedin": "https://linkedin.com/in/janedoe",
        },
        "summary": "Engineer with 8 years of experience building web applications and developer tools.",
        "experience": [
            {
                "role": "Senior Frontend Engineer",
                "company": "Atlas Tech",
                "duration": "2022 - Present",
                "description": [
                    "Led migration of the dashboard to Next.js",
                    "Cut bundle size by 40%",
                ],
            },
            {
                "role": "Frontend Engineer",
                "company": "Nimbus",
                "duration": "2019 - 2022",
                "description": ["Built the design system", "Mentored two juniors"],
            },
        ],
        "education": [{"degree": "B.Sc. Computer Science", "school": "State University", "year": "2016"}],
        "certifications": [{"name": "AWS Solutions Architect", "year": "2021"}],
        "achievements": ["Speaker at ReactConf 2023"],
        "volunteer": [
            {"role": "Mentor", "org": "Code Club", "duration": "2020", "description": ["Weekly sessions"]},
        ],
        "skills": ["TypeScript", "React", "Next.js"],
        "softSkills": ["Mentoring", "Communication"],
        "languages": ["English", "Spanish"],
    }


@pytest.fixture
def dense_resume() -> Dict[str, Any]:
    """Eight experiences and a long summary: well above every density threshold."""
    return {
        "name": "John Smith",
        "summary": "s" * 2500,
        "experience": [_experience(i) for i in range(8)],
        "education": [{"degree": f"Degree {i}", "school": f"School {i}", "year": "2010"} for i in range(3)],
        "skills": [f"skill-{i}" for i in range(20)],
        "softSkills": [f"soft-{i}" for i in range(8)],
        "languages": ["English", "French", "German", "Italian"],
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    def _write(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
