"""Search page check tests."""
