"""Pipeline runner tests."""
