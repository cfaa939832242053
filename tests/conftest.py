from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from shapesaver.value_model import JsonValue, from_json
from tests.tree_helpers import max_array_length

SAMPLE_DOCUMENT = {
    "meta": {"source": "example", "count": 3},
    "users": [
        {"id": 1, "name": "Ada", "roles": ["admin", "editor"]},
        {"id": 2, "name": "Max", "roles": ["viewer"]},
    ],
    "events": [
        {"type": "click", "tags": ["nav", "cta", "primary"]},
        {"type": "scroll", "tags": ["hero", "story"]},
    ],
}


@pytest.fixture
def sample_raw() -> dict[str, object]:
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def sample_value(sample_raw: dict[str, object]) -> JsonValue:
    return from_json(sample_raw)


@pytest.fixture
def sample_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_max_array_length(sample_value: JsonValue) -> int:
    return max_array_length(sample_value)
