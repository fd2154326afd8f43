"""Playwright-backed browser session.

browser/local_playwright_browser.py  – Chromium/context/page lifecycle.
session.py                           – `PlaywrightSession`, the session used by page objects.
utils/animation_utils.py             – Optional highlighting of elements before actions.
"""
