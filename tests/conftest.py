# File: tests/conftest.py
# Contains pytest fixtures shared by the generator tests.

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from dmmf_samples import blog_dmmf
from ent_auto_generator.codegen.base import setup_jinja_env


@pytest.fixture
def sample_dmmf() -> Dict[str, Any]:
    """The blog DMMF document as a plain dictionary."""
    return blog_dmmf()


@pytest.fixture
def dmmf_file(tmp_path: Path, sample_dmmf: Dict[str, Any]) -> Path:
    """The blog DMMF written to a JSON file inside a temporary project."""
    path = tmp_path / "prisma" / "dmmf.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(sample_dmmf), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Keep handlers installed by the CLI from leaking between tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_jinja_env():
    setup_jinja_env.cache_clear()
    yield
