"""
Test fixtures for workout-notation.

Provides the FastAPI test client and sample notation used across the suite.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-notation
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_notation...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_notation.main import app  # noqa: E402


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_exercise_row() -> dict:
    """Exercise row as the grid editor would submit it."""
    return {
        "kind": "exercise",
        "weight": "125-135",
        "reps": "10,8,AMRAP",
        "sets": "3+AMRAP",
        "rest": "1m30s-2m",
        "effort": "8",
        "notes": "",
    }
