"""API smoke checks for the JSONPlaceholder ``/posts`` resource.

Two straight-line checks:

- ``check_get_post_by_id``: ``GET /posts/1`` returns 200 and post 1.
- ``check_create_post``: ``POST /posts`` returns 201 and echoes the payload
  with a server-assigned ``id``.

Each check raises ``CheckFailure`` on the first mismatch and lets transport
errors propagate. Nothing is retried. The sandbox does not persist created
posts, so both checks are safe to re-run.
"""

from typing import Any, Dict, List, Optional

import httpx

from automation.common.config import ApiConfig
from automation.common.errors import (
    CheckFailure,
    expect_equal,
    expect_non_empty,
    expect_not_none,
    expect_present,
)
from automation.common.logging import CheckLogger

from .client import JsonPlaceholderClient, ResponseSnapshot
from .schemas import NEW_POST_SCHEMA, POST_SCHEMA, validate_post

NEW_POST: Dict[str, Any] = {"title": "foo", "body": "bar", "userId": 1}


def _parse_object(snapshot: ResponseSnapshot) -> Dict[str, Any]:
    expect_non_empty(snapshot.text, "Response body should not be empty")
    try:
        data = snapshot.json()
    except ValueError as e:
        raise CheckFailure(f"Response body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise CheckFailure("Response body should be a JSON object", expected="object", actual=type(data).__name__)
    return data


def check_get_post_by_id(client: JsonPlaceholderClient, post_id: int = 1) -> ResponseSnapshot:
    """Fetch a single post and verify status and content."""
    with CheckLogger("get_post_by_id", post_id=post_id) as log:
        snapshot = client.get(f"/posts/{post_id}")
        log.step("Response received", status_code=snapshot.status_code)

        expect_equal(200, snapshot.status_code, f"Expected status code 200 OK for GET /posts/{post_id}")
        data = _parse_object(snapshot)

        expect_equal(post_id, expect_present(data, "id", "ID node should exist"), f"ID should be {post_id}")
        expect_equal(1, expect_present(data, "userId", "User ID node should exist"), "User ID should be 1")
        title = expect_present(data, "title", "Title node should exist")
        expect_non_empty(title, "Title should not be empty")
        expect_present(data, "body", "Body node should exist")
        validate_post(data, POST_SCHEMA)

        log.passed(status_code=snapshot.status_code)
        return snapshot


def check_create_post(
    client: JsonPlaceholderClient,
    payload: Optional[Dict[str, Any]] = None,
) -> ResponseSnapshot:
    """Create a post and verify the sandbox echoes it with a new ``id``."""
    payload = dict(NEW_POST if payload is None else payload)
    with CheckLogger("create_post") as log:
        validate_post(payload, NEW_POST_SCHEMA)

        snapshot = client.post("/posts", payload)
        log.step("Response received", status_code=snapshot.status_code)

        expect_equal(201, snapshot.status_code, "Expected status code 201 Created for POST /posts")
        data = _parse_object(snapshot)

        for key in ("title", "body", "userId"):
            actual = expect_present(data, key, f"Created post should echo '{key}'")
            expect_equal(payload[key], actual, f"Field '{key}' should match the request payload")
        expect_not_none(
            expect_present(data, "id", "New post should have been assigned an ID"),
            "New post should have been assigned an ID",
        )

        log.passed(status_code=snapshot.status_code, id=data["id"])
        return snapshot


def run_api_checks(
    config: Optional[ApiConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> List[ResponseSnapshot]:
    """Run the GET check then the POST check over one scoped client."""
    with JsonPlaceholderClient(config, transport=transport) as client:
        return [
            check_get_post_by_id(client),
            check_create_post(client),
        ]
