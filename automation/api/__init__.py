"""HTTP API smoke checks against the JSONPlaceholder sandbox."""

from .client import ApiRequest, JsonPlaceholderClient, ResponseSnapshot
from .checks import NEW_POST, check_create_post, check_get_post_by_id, run_api_checks

__all__ = [
    "ApiRequest",
    "JsonPlaceholderClient",
    "ResponseSnapshot",
    "NEW_POST",
    "check_create_post",
    "check_get_post_by_id",
    "run_api_checks",
]
