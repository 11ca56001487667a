"""
YAML data loader with schema validation.

Loads ship parameter presets (and optional hull profile settings) from YAML
files and validates against JSON schemas.

File layout:
    name: frigate
    seed: 42                # optional
    description: ...        # optional
    ship: {ship_length: 64, max_width: 24, ...}
    hull: {length: 64, max_width: 16, min_run: 4, max_run: 8}   # optional
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .data_types import ShipParameters, HullParameters, ConfigError


SHIP_SCHEMA_NAME = "ship_parameters.schema.json"


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")

    if not isinstance(data, dict):
        raise DataLoadError(f"Expected a mapping at top level of {file_path}")
    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional (schemas are not shipped with every data pack)
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def _load_validated(file_path: Path, schema_dir: Optional[Path]) -> dict:
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        schema_path = Path(schema_dir) / SHIP_SCHEMA_NAME
        validate_against_schema(data, schema_path, file_path)

    return data


def parse_parameters(data: dict, source: str = "<dict>") -> ShipParameters:
    """Build ShipParameters from an already-parsed config dict"""
    ship = data.get('ship')
    if not isinstance(ship, dict):
        raise DataLoadError(f"Missing 'ship' section in {source}")

    try:
        params = ShipParameters(
            seed=data.get('seed'),
            name=data.get('name'),
            **ship
        )
        params.validate()
    except TypeError as e:
        raise DataLoadError(f"Bad ship parameters in {source}: {e}")
    except ConfigError as e:
        raise DataLoadError(f"Invalid ship parameters in {source}: {e}")

    return params


def load_parameters(file_path: Path, schema_dir: Optional[Path] = None) -> ShipParameters:
    """Load ship parameters from YAML"""
    data = _load_validated(file_path, schema_dir)
    return parse_parameters(data, str(file_path))


def load_hull_parameters(file_path: Path, schema_dir: Optional[Path] = None) -> Optional[HullParameters]:
    """Load the optional hull section from YAML (None when absent)"""
    data = _load_validated(file_path, schema_dir)
    if 'hull' not in data:
        return None

    try:
        return HullParameters(**data['hull'])
    except TypeError as e:
        raise DataLoadError(f"Bad hull parameters in {file_path}: {e}")


def load_presets(preset_dir: Path, schema_dir: Optional[Path] = None) -> Dict[str, ShipParameters]:
    """Load all ship presets from directory, keyed by name (file stem when unnamed)"""
    preset_dir = Path(preset_dir)
    if not preset_dir.exists():
        raise DataLoadError(f"Preset directory not found: {preset_dir}")

    registry = {}
    for yaml_file in sorted(preset_dir.glob("*.yaml")):
        params = load_parameters(yaml_file, schema_dir)
        registry[params.name or yaml_file.stem] = params

    if not registry:
        raise DataLoadError(f"No preset files found in {preset_dir}")

    return registry
