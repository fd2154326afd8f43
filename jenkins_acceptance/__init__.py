"""Page objects and matchers for browser acceptance tests of a Jenkins web UI.

Key sub-modules:

paths.py          – Relative/absolute control paths and their resolution.
selectors.py      – Selector factory (`By`) over the form's `path` attributes.
page_area.py      – Page areas, controls, repeatable lists and UI-shape probing.
page_objects.py   – Jenkins, Job, User and the SCM base class.
matchers.py       – Assertion matchers over sessions and page objects.
plugins/git.py    – Git SCM section with its addable behaviours.

The browser itself is reached through the `Session` protocol (session.py); the
Playwright implementation lives in the `playwright_custom` package.
"""

from .errors import (
    AcceptanceError,
    ElementNotFound,
    FormModelError,
    IndexDivergenceError,
    PageObjectError,
    RevealError,
)
from .page_area import Control, PageArea, RepeatableList
from .page_objects import Jenkins, Job, User
from .selectors import By

__all__ = [
    "AcceptanceError",
    "By",
    "Control",
    "ElementNotFound",
    "FormModelError",
    "IndexDivergenceError",
    "Jenkins",
    "Job",
    "PageArea",
    "PageObjectError",
    "RepeatableList",
    "RevealError",
    "User",
]
