import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import inventory_reports` works from any CWD.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


class RecordingRenderer:
    """Stands in for the chart renderer and remembers every call."""

    def __init__(self):
        self.calls = []

    def render(self, kind, data, options=None):
        self.calls.append((kind, data, options))
        return {"kind": kind, "rows": len(data)}


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def dataset():
    from inventory_reports.sample_data import sample_dataset

    return sample_dataset()


@pytest.fixture
def rng():
    from inventory_reports.trends import make_rng

    return make_rng(1234)


@pytest.fixture(autouse=True)
def isolated_output(tmp_path, monkeypatch):
    """Keep downloads out of the working tree."""
    from inventory_reports import settings

    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    yield
