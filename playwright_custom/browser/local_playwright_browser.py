import logging
from typing import Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

logger = logging.getLogger(__name__)


class LocalPlaywrightBrowser:
    """Launches a local Chromium with one context and one page.

    Use as a context manager; everything is closed on exit.
    """

    def __init__(self, headless: bool = True, timeout_ms: Optional[int] = None) -> None:
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.browser_context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    def __enter__(self) -> "LocalPlaywrightBrowser":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        self._playwright = sync_playwright().start()
        self.browser = self._playwright.chromium.launch(headless=self.headless)
        self.browser_context = self.browser.new_context()
        if self.timeout_ms is not None:
            self.browser_context.set_default_timeout(self.timeout_ms)
        self.page = self.browser_context.new_page()
        logger.info("Browser started (headless=%s)", self.headless)

    def close(self) -> None:
        if self.browser_context:
            self.browser_context.close()
            self.browser_context = None
        if self.browser:
            self.browser.close()
            self.browser = None
        if self._playwright:
            self._playwright.stop()
            self._playwright = None
        self.page = None
