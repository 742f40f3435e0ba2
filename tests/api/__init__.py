"""API check tests.

``test_checks`` runs offline against canned responses; ``TestJsonPlaceholderApi``
hits the live sandbox and skips when it is unreachable.
"""
