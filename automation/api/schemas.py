"""JSON Schemas for the sandbox ``/posts`` resource.

Field-level expectations live in ``checks``; these schemas only pin the
shape of the payloads so a renamed or retyped field fails loudly.
"""

from typing import Any, Dict

from jsonschema import ValidationError, validate

from automation.common.errors import CheckFailure

POST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "userId": {"type": "integer"},
        "title": {"type": "string"},
        "body": {"type": "string"},
    },
    "required": ["id", "userId", "title", "body"],
}

NEW_POST_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "body": {"type": "string"},
        "userId": {"type": "integer"},
    },
    "required": ["title", "body", "userId"],
    "additionalProperties": False,
}


def validate_post(data: Any, schema: Dict[str, Any] = POST_SCHEMA) -> None:
    """Raise ``CheckFailure`` when ``data`` does not match ``schema``."""
    try:
        validate(data, schema)
    except ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise CheckFailure(f"Post payload violates schema at {path}: {e.message}") from e
