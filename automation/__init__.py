"""Smoke automation checks.

Subpackages:
- ``automation.common``: configuration, logging, and the error taxonomy.
- ``automation.api``: HTTP client and smoke checks for the JSONPlaceholder sandbox.
- ``automation.browser``: browser-driven search page smoke check.
- ``automation.pipeline``: ordered, fail-fast build/test pipeline runner.

Notes:
- Each flow is independent; they only share the ``common`` helpers.
"""

__version__ = "0.1.0"
