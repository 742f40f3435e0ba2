"""Tests for the smoke automation checks.

Offline tests cover configuration, logging, the API checks (through
``httpx.MockTransport``), the search flow (through mocked Playwright objects)
and the pipeline runner (through short real subprocesses). Live checks are
marked ``smoke`` and ``ui``.
"""
