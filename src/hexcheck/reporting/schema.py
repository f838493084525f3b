"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hexcheck report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "duration_s"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "name", "status", "duration_ms"],
                "properties": {
                    "index": {"type": "integer", "minimum": 1},
                    "name": {"type": "string"},
                    "status": {"enum": ["passed", "failed"]},
                    "duration_ms": {"type": "number"},
                    "message": {"type": "string"},
                },
                "additionalProperties": False,
            },
        },
    },
}
