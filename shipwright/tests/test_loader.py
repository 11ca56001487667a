"""
Test ship preset loading

Verifies YAML -> ShipParameters conversion and schema validation.
"""

import tempfile
from pathlib import Path

import pytest

from shipwright.data_types import ShipParameters, HullParameters
from shipwright.loader import (
    DataLoadError,
    load_parameters,
    load_hull_parameters,
    load_presets,
    load_yaml,
    parse_parameters,
)


DATA_ROOT = Path(__file__).parent.parent.parent / "data"
SHIPS_DIR = DATA_ROOT / "ships"
SCHEMA_DIR = DATA_ROOT / "schemas"


def write_yaml(directory: Path, name: str, text: str) -> Path:
    path = Path(directory) / name
    path.write_text(text)
    return path


def test_load_default_preset():
    """Reference preset matches the documented scenario"""
    params = load_parameters(SHIPS_DIR / "default.yaml", SCHEMA_DIR)

    print(f"[OK] Loaded preset: {params.name} (seed={params.seed})")
    assert params == ShipParameters(
        ship_length=64, max_width=24, min_rooms=10, max_rooms=25,
        room_width_min=4, room_width_max=16, room_height_min=4, room_height_max=16,
        seed=42, name="default",
    )


def test_load_preset_without_seed():
    params = load_parameters(SHIPS_DIR / "corvette.yaml", SCHEMA_DIR)
    assert params.seed is None
    assert params.max_attempts == 64
    assert params.room_height_min == 2


def test_load_string_seed():
    params = load_parameters(SHIPS_DIR / "freighter.yaml", SCHEMA_DIR)
    assert params.seed == "freighter-mk2"
    assert params.ship_length == 128


def test_load_hull_parameters():
    hull = load_hull_parameters(SHIPS_DIR / "default.yaml", SCHEMA_DIR)
    assert hull == HullParameters(length=64, max_width=16, min_run=4, max_run=8)
    assert load_hull_parameters(SHIPS_DIR / "corvette.yaml") is None


def test_load_presets_registry():
    registry = load_presets(SHIPS_DIR, SCHEMA_DIR)
    print(f"[OK] Loaded {len(registry)} presets: {', '.join(sorted(registry))}")
    assert {"default", "corvette", "freighter"} <= set(registry)
    for params in registry.values():
        params.validate()


def test_missing_file():
    with pytest.raises(DataLoadError):
        load_yaml(DATA_ROOT / "does-not-exist.yaml")


def test_missing_preset_dir():
    with pytest.raises(DataLoadError):
        load_presets(DATA_ROOT / "no-such-dir")


def test_empty_preset_dir():
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(DataLoadError):
            load_presets(Path(tmp))


def test_yaml_parse_error():
    with tempfile.TemporaryDirectory() as tmp:
        path = write_yaml(tmp, "broken.yaml", "ship: [unclosed\n")
        with pytest.raises(DataLoadError):
            load_parameters(path)


def test_invalid_invariants_reported_as_load_error():
    with tempfile.TemporaryDirectory() as tmp:
        path = write_yaml(tmp, "bad.yaml", (
            "ship:\n"
            "  ship_length: 64\n"
            "  max_width: 24\n"
            "  min_rooms: 30\n"
            "  max_rooms: 25\n"
        ))
        with pytest.raises(DataLoadError) as excinfo:
            load_parameters(path)
        assert "min_rooms" in str(excinfo.value)


def test_unknown_key_without_schema():
    with tempfile.TemporaryDirectory() as tmp:
        path = write_yaml(tmp, "extra.yaml", "ship:\n  ship_length: 64\n  hull_color: red\n")
        with pytest.raises(DataLoadError):
            load_parameters(path)


def test_unknown_key_rejected_by_schema():
    with tempfile.TemporaryDirectory() as tmp:
        path = write_yaml(tmp, "extra.yaml", (
            "ship:\n"
            "  ship_length: 64\n"
            "  max_width: 24\n"
            "  min_rooms: 10\n"
            "  max_rooms: 25\n"
            "  hull_color: red\n"
        ))
        with pytest.raises(DataLoadError) as excinfo:
            load_parameters(path, SCHEMA_DIR)
        assert "Validation error" in str(excinfo.value)


def test_missing_schema_is_skipped():
    with tempfile.TemporaryDirectory() as tmp:
        params = load_parameters(SHIPS_DIR / "default.yaml", Path(tmp))
        assert params.seed == 42


def test_parse_parameters_requires_ship_section():
    with pytest.raises(DataLoadError):
        parse_parameters({"name": "nothing"})
    params = parse_parameters({"ship": {"ship_length": 40}})
    assert params.ship_length == 40
    assert params.max_width == ShipParameters().max_width
