import importlib.util
import json
from pathlib import Path

from app.config.backends import MemoryBackend
from app.config.seed import build_seed_records

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_db.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_db", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_dry_run_writes_nothing():
    backend = MemoryBackend()
    assert _load_script().write_to_store(backend, build_seed_records()) == 0
    assert backend.blobs == {}


def test_apply_overwrites_every_record():
    backend = MemoryBackend({"alerts": json.dumps([])})

    written = _load_script().write_to_store(backend, build_seed_records(), apply=True)

    assert written == 3
    assert [a["id"] for a in json.loads(backend.blobs["alerts"])] == ["alert-1", "alert-2", "alert-3"]
