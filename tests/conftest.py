from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

# Ensure repo root is importable when running pytest from any CWD.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def generate_shape_script():
    """The ``scripts/generate_shape.py`` entry point loaded as a module."""
    path = REPO_ROOT / "scripts" / "generate_shape.py"
    spec = importlib.util.spec_from_file_location("generate_shape", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
