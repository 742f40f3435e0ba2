"""Browser-driven smoke check for a search engine home page."""

from .search import SearchResult, run_search_check, search_and_wait

__all__ = ["SearchResult", "run_search_check", "search_and_wait"]
