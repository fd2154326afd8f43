"""Chromium lifecycle helpers."""

from .local_playwright_browser import LocalPlaywrightBrowser

__all__ = ["LocalPlaywrightBrowser"]
