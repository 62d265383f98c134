"""JSON Schema registry for the bundled JSON-RPC envelope schemas."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

REQUEST_SCHEMA = "jsonrpc.request.schema.json"
RESPONSE_SCHEMA = "jsonrpc.response.schema.json"


class SchemaValidationError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


@dataclass(frozen=True)
class SchemaRegistry:
    schema_root: Path

    @classmethod
    def default(cls) -> "SchemaRegistry":
        return cls(schema_root=Path(__file__).resolve().parent / "schemas")

    def schema_path(self, schema_filename: str) -> Path:
        return self.schema_root / schema_filename

    def validator_for(self, schema_filename: str) -> jsonschema.Validator:
        return _validator(self.schema_path(schema_filename))

    def validate_instance(self, instance: Any, schema_filename: str) -> None:
        validator = self.validator_for(schema_filename)
        errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
        if errors:
            formatted = [self._format_error(err) for err in errors]
            raise SchemaValidationError(
                f"Schema validation failed for {schema_filename}.",
                errors=formatted,
            )

    @staticmethod
    def _format_error(error: jsonschema.ValidationError) -> str:
        location = "/".join(str(part) for part in error.path) or "<root>"
        return f"{location}: {error.message}"


# One validator per schema file for the life of the process.
@lru_cache(maxsize=None)
def _validator(path: Path) -> jsonschema.Validator:
    with path.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)
