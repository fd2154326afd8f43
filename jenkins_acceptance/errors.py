from __future__ import annotations

"""Exception taxonomy shared by page objects, page areas and matchers."""


class AcceptanceError(Exception):
    """Root of every error raised by this package."""


class ElementNotFound(AcceptanceError, LookupError):
    """No element matched a selector within the implicit wait.

    Matchers and versioned fallbacks treat this as a negative answer rather than
    an operational failure.
    """

    def __init__(self, selector: str) -> None:
        super().__init__(f"Unable to locate element: {selector}")
        self.selector = selector


class PageObjectError(AcceptanceError):
    """The structured (JSON API) representation of a page object could not be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FormModelError(AcceptanceError):
    """The form model and the rendered document no longer agree."""


class RevealError(FormModelError):
    """The disclosure link of an optional form section could not be clicked."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Could not reveal section {label!r}")
        self.label = label


class IndexDivergenceError(FormModelError):
    """A repeatable list renders a different number of items than were appended."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Repeatable list {name!r} renders {actual} item(s), expected {expected}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual
