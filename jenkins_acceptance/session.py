from __future__ import annotations

"""The narrow browser capability surface consumed by page objects and matchers."""

from typing import Any, List, Protocol


class Session(Protocol):
    """A single browser tab driven synchronously.

    ``find`` raises :class:`~jenkins_acceptance.errors.ElementNotFound` when nothing
    matches; ``all`` never fails and returns an empty list instead. Elements are
    opaque handles only ever passed back into the same session.
    """

    @property
    def current_url(self) -> str: ...

    def visit(self, url: str) -> None: ...

    def find(self, selector: str) -> Any: ...

    def all(self, selector: str) -> List[Any]: ...

    def text(self, element: Any) -> str: ...

    def click(self, element: Any) -> None: ...

    def set_value(self, element: Any, value: str) -> None: ...

    def select_option(self, element: Any, visible_text: str) -> None: ...

    def fetch_json(self, url: str) -> Any: ...
