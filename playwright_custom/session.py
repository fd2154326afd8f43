from __future__ import annotations

"""Playwright implementation of the browser session used by page objects."""

import logging
from typing import Any, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from jenkins_acceptance.config import DEFAULT_TIMEOUT_MS
from jenkins_acceptance.errors import ElementNotFound, PageObjectError

from .utils.animation_utils import AnimationUtilsPlaywright

logger = logging.getLogger(__name__)


class PlaywrightSession:
    """Drives one Playwright page synchronously.

    ``find`` waits up to ``timeout_ms`` for the selector to attach and raises
    :class:`ElementNotFound` when it does not; every other Playwright error is
    left to propagate.
    """

    def __init__(
        self,
        page: Page,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        animate_actions: bool = False,
    ) -> None:
        self.page = page
        self.timeout_ms = timeout_ms
        self._animator: Optional[AnimationUtilsPlaywright] = (
            AnimationUtilsPlaywright() if animate_actions else None
        )

    @property
    def current_url(self) -> str:
        return self.page.url

    def visit(self, url: str) -> None:
        logger.debug("Navigating to %s", url)
        self.page.goto(url)
        if self._animator:
            self._animator.forget_highlights()

    # lookups ----------------------------------------------------------
    def find(self, selector: str) -> Locator:
        locator = self.page.locator(selector).first
        try:
            locator.wait_for(state="attached", timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            raise ElementNotFound(selector) from None
        return locator

    def all(self, selector: str) -> List[Locator]:
        return self.page.locator(selector).all()

    def text(self, element: Locator) -> str:
        return element.inner_text()

    # mutators ---------------------------------------------------------
    def click(self, element: Locator) -> None:
        if self._animator:
            self._animator.highlight(element)
            self._animator.add_click_effect(element)
            # unhighlight first: the element may not survive the click
            self._animator.unhighlight(element)
        element.click()

    def set_value(self, element: Locator, value: str) -> None:
        if self._animator:
            self._animator.highlight(element)
        element.fill(value)
        if self._animator:
            self._animator.unhighlight(element)

    def select_option(self, element: Locator, visible_text: str) -> None:
        if self._animator:
            self._animator.highlight(element)
        element.select_option(label=visible_text)
        if self._animator:
            self._animator.unhighlight(element)

    # structured data --------------------------------------------------
    def fetch_json(self, url: str) -> Any:
        response = self.page.request.get(url)
        if not response.ok:
            raise PageObjectError(url, f"HTTP {response.status}")
        try:
            return response.json()
        except (ValueError, PlaywrightError) as exc:
            raise PageObjectError(url, f"invalid JSON: {exc}") from exc
