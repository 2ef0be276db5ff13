"""package.json parsing and validation."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from ..helpers.utils import load_yaml
from .errors import ManifestReadError

MANIFEST_FILE_NAME = "package.json"
BUILD_SCRIPT_NAME = "build"


@dataclass
class BuildManifest:
    """The parts of package.json the pipeline cares about."""

    name: Optional[str] = None
    scripts: Dict[str, str] = field(default_factory=dict)

    @property
    def build_command(self) -> Optional[str]:
        """The declared build script, or None when there is nothing to build."""
        return self.scripts.get(BUILD_SCRIPT_NAME) or None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuildManifest":
        return cls(name=data.get("name"), scripts=dict(data.get("scripts") or {}))


def load_schema() -> Dict[str, Any]:
    """Load the package manifest schema."""
    schema_path = Path(__file__).parent / "package-manifest-schema.yaml"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    return load_yaml(str(schema_path))


def validate_manifest_schema(
    manifest_data: Any, schema: Dict[str, Any] = None
) -> Tuple[bool, List[str]]:
    """
    Validate manifest data against the schema.

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    if schema is None:
        schema = load_schema()

    validator = jsonschema.Draft7Validator(schema)
    errors = list(validator.iter_errors(manifest_data))
    if not errors:
        return True, []

    error_messages = []
    for error in errors:
        path = (
            " -> ".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )
        error_messages.append(f"Path '{path}': {error.message}")

    return False, error_messages


def read_build_manifest(workspace_dir: str) -> BuildManifest:
    """
    Read and validate package.json from the workspace.

    Raises:
        ManifestReadError: If the file is missing, is not JSON, or has an
            unexpected structure
    """
    manifest_path = Path(workspace_dir) / MANIFEST_FILE_NAME

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestReadError(f"{e.strerror or e}: {manifest_path}") from e
    except json.JSONDecodeError as e:
        raise ManifestReadError(f"Invalid JSON in {manifest_path}: {e}") from e

    is_valid, errors = validate_manifest_schema(data)
    if not is_valid:
        raise ManifestReadError(
            f"Invalid {MANIFEST_FILE_NAME}: " + "; ".join(errors),
            details={"errors": errors},
        )

    return BuildManifest.from_dict(data)
