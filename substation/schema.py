from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft202012Validator

from .errors import ConfigInvalid

SCHEMAS_DIR = Path(__file__).parent / "schemas"


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class SchemaRegistry:
    schemas_base_dir: Path = field(default=SCHEMAS_DIR)

    def validate(self, document: Any, schema_filename: str) -> None:
        schema = read_json(self.schemas_base_dir / schema_filename)
        try:
            Draft202012Validator(schema).validate(document)
        except ValidationError as e:
            where = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigInvalid(code="CONFIG_INVALID", message=f"{where}: {e.message}") from e
