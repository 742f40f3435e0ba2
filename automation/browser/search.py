"""
Search page smoke check driven through Playwright.

Opens a browser, loads the search page, types the query into the input
named ``q``, submits it with Enter and waits until the page title contains
the query. The browser is closed on every exit path.
"""
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeout, sync_playwright

from automation.common.config import BrowserConfig
from automation.common.errors import CheckTimeout, expect_contains
from automation.common.logging import CheckLogger, get_logger

logger = get_logger("search_check")

TITLE_CONTAINS_JS = "query => document.title.includes(query)"


@dataclass(frozen=True)
class SearchResult:
    query: str
    initial_title: str
    final_title: str

    @property
    def matched(self) -> bool:
        return self.query in self.final_title


def search_and_wait(
    page: Page,
    url: str,
    input_name: str,
    query: str,
    timeout_seconds: float = 40.0,
) -> SearchResult:
    """
    Run the search flow on an already open page.

    Raises:
        CheckTimeout: title never contained the query within ``timeout_seconds``.
        CheckFailure: final title does not contain the query.
    """
    with CheckLogger("search_title", url=url, query=query) as log:
        log.step("Navigating to search page")
        page.goto(url)
        initial_title = page.title()
        log.step("Page loaded", title=initial_title)

        search_box = page.locator(f'[name="{input_name}"]').first
        search_box.fill(query)
        log.step("Typed query into search box", input_name=input_name)

        search_box.press("Enter")
        log.step("Pressed Enter")

        try:
            page.wait_for_function(TITLE_CONTAINS_JS, arg=query, timeout=timeout_seconds * 1000)
        except PlaywrightTimeout as e:
            raise CheckTimeout(f"Page title never contained {query!r}", timeout_seconds) from e
        log.step("Page title updated, search results loaded")

        final_title = page.title()
        expect_contains(final_title, query, "Search results page title should contain the query")

        log.passed(title=final_title)
        return SearchResult(query=query, initial_title=initial_title, final_title=final_title)


def run_search_check(config: Optional[BrowserConfig] = None) -> SearchResult:
    """Launch the configured browser, run ``search_and_wait`` and always close it."""
    config = config or BrowserConfig()

    with sync_playwright() as p:
        browser_type = getattr(p, config.browser_name)
        browser = browser_type.launch(
            headless=config.browser_headless,
            slow_mo=config.browser_slow_mo_ms,
        )
        try:
            page = browser.new_page()
            return search_and_wait(
                page,
                config.search_url,
                config.search_input_name,
                config.search_query,
                config.search_title_timeout_seconds,
            )
        finally:
            logger.info("Closing browser", browser=config.browser_name)
            browser.close()
            logger.info("Browser closed", browser=config.browser_name)
