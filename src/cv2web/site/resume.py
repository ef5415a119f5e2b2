"""
Resume document loading.

The resume is a plain YAML mapping; sections are read with ``.get`` so that
missing optional sections simply produce empty output.
"""

from pathlib import Path
from typing import Any

import yaml

from cv2web.animator.config import DotFieldConfig


def load_resume(path: Path) -> dict[str, Any]:
    """
    Read and parse a resume YAML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path} not found")

    with open(path, encoding="utf-8") as f:
        resume = yaml.safe_load(f)

    if not isinstance(resume, dict):
        raise ValueError(f"{path} must contain a YAML mapping, got {type(resume).__name__}")
    return resume


def canvas_config(resume: dict[str, Any], **overrides) -> DotFieldConfig:
    """Animator config from the resume's ``canvas`` section."""
    return DotFieldConfig.from_mapping(resume.get("canvas"), **overrides)


def photo_path(resume: dict[str, Any], root: Path) -> Path | None:
    """
    Locate the resume photo.

    The generated page serves it from ``public/``, so that is tried first,
    then the path relative to ``root`` itself.
    """
    photo = (resume.get("personal") or {}).get("photo")
    if not photo:
        return None
    root = Path(root)
    for candidate in (root / "public" / photo, root / photo):
        if candidate.exists():
            return candidate
    return None
