from __future__ import annotations

"""Path-addressable page areas, their controls and repeatable sub-sections.

A :class:`PageArea` is a region of a form bound to a base path. It hands out
:class:`Control` objects that are resolved against the live session on every
operation, and owns :class:`RepeatableList` counters for sections appended at
run time.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from .errors import ElementNotFound, IndexDivergenceError
from .paths import PathSpec, Relative, indexed, parse_path, resolve_path
from .selectors import By

logger = logging.getLogger(__name__)


class ProbeOutcome(str, Enum):
    """Result of trying a UI shape that may not exist on this server version."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    ERROR = "error"


@dataclass
class ProbeResult:
    outcome: ProbeOutcome
    error: Optional[BaseException] = None

    def raise_for_error(self) -> None:
        if self.outcome is ProbeOutcome.ERROR and self.error is not None:
            raise self.error


def probe(action: Callable[[], Any]) -> ProbeResult:
    """Run *action*; a missing element means UNSUPPORTED, any other failure ERROR."""
    try:
        action()
    except ElementNotFound as exc:
        return ProbeResult(ProbeOutcome.UNSUPPORTED, exc)
    except Exception as exc:
        return ProbeResult(ProbeOutcome.ERROR, exc)
    return ProbeResult(ProbeOutcome.SUPPORTED)


class PageArea:
    """A named region of a form, rooted at a fixed base path."""

    def __init__(self, parent: Optional["PageArea"], path: str) -> None:
        self.parent = parent
        self._path = path
        if parent is not None:
            self.session = parent.session

    @property
    def path(self) -> str:
        return self._path

    # ------------------------------------------------------------------
    def control(self, *paths: str | PathSpec) -> "Control":
        """Control addressed by one or more candidate paths, tried in order."""
        specs = [parse_path(p) if isinstance(p, str) else p for p in paths]
        return Control(self, specs)

    def control_by(self, selector: str) -> "Control":
        """Control addressed by a raw selector, outside the path scheme."""
        return Control(self, [], selector=selector)

    def find(self, selector: str) -> Any:
        return self.session.find(selector)

    def all(self, selector: str) -> List[Any]:
        return self.session.all(selector)

    def click_link(self, text: str) -> None:
        logger.debug("Clicking link %r", text)
        self.session.click(self.find(By.link(text)))

    def _mark_configured(self) -> None:
        """Hook called after one of this area's controls was mutated."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class Control:
    """A single form field. Stateless; resolved afresh for every operation."""

    def __init__(
        self,
        owner: PageArea,
        specs: Sequence[PathSpec],
        selector: Optional[str] = None,
    ) -> None:
        if not specs and selector is None:
            raise ValueError("a control needs at least one path or a selector")
        self.owner = owner
        self.specs = list(specs)
        self._selector = selector

    def paths(self) -> List[str]:
        return [resolve_path(self.owner.path, s) for s in self.specs]

    @property
    def path(self) -> Optional[str]:
        paths = self.paths()
        return paths[0] if paths else None

    def selectors(self) -> List[str]:
        if self._selector is not None:
            return [self._selector]
        return [By.path(p) for p in self.paths()]

    def resolve(self) -> Any:
        candidates = self.selectors()
        for selector in candidates:
            try:
                return self.owner.session.find(selector)
            except ElementNotFound:
                logger.debug("No element for %s", selector)
        raise ElementNotFound(" or ".join(candidates))

    def exists(self) -> bool:
        try:
            self.resolve()
            return True
        except ElementNotFound:
            return False

    # mutators ---------------------------------------------------------
    def set(self, value: Any) -> "Control":
        element = self.resolve()
        logger.debug("Setting %s to %r", self.path or self._selector, value)
        self.owner.session.set_value(element, str(value))
        self.owner._mark_configured()
        return self

    def select(self, visible_text: str) -> "Control":
        element = self.resolve()
        logger.debug("Selecting %r in %s", visible_text, self.path or self._selector)
        self.owner.session.select_option(element, visible_text)
        self.owner._mark_configured()
        return self

    def click(self) -> "Control":
        element = self.resolve()
        logger.debug("Clicking %s", self.path or self._selector)
        self.owner.session.click(element)
        self.owner._mark_configured()
        return self

    def __repr__(self) -> str:
        return f"Control({', '.join(self.selectors())})"


class RepeatableList:
    """Caller-side sequence counter for a list of items rendered under *owner*.

    The counter is only advanced after the rendered item count has been checked
    against it, so a lost click surfaces as :class:`IndexDivergenceError` instead
    of a later write to the wrong field.
    """

    def __init__(
        self,
        owner: PageArea,
        name: str,
        add_control: str,
        first_prerendered: bool = False,
        verify: bool = True,
    ) -> None:
        self.owner = owner
        self.name = name
        self.add = owner.control(add_control)
        self.first_prerendered = first_prerendered
        self.verify = verify
        self.count = 0

    def item_path(self, index: int) -> str:
        return resolve_path(self.owner.path, Relative((indexed(self.name, index),)))

    def rendered(self) -> int:
        """Count the items of this list rendered inside the owner.

        An item belongs to the owner when it holds a field whose ``path`` lies
        under the list's own path, so same-named lists of sibling areas are not
        counted.
        """
        base = resolve_path(self.owner.path, Relative((self.name,)))
        return len(self.owner.all(By.xpath(
            "//div[contains(@class, 'repeated-chunk')][@name=%s]"
            "[.//*[@path=%s or starts-with(@path, %s) or starts-with(@path, %s)]]",
            self.name, base, base + "/", base + "[",
        )))

    def sync(self) -> int:
        """Adopt the number of items already present in the document."""
        self.count = self.rendered()
        return self.count

    def append(self, reveal: Optional[Callable[[], None]] = None) -> str:
        index = self.count
        if index > 0 or not self.first_prerendered:
            self.add.click()
        if reveal is not None:
            reveal()
        if self.verify:
            actual = self.rendered()
            if actual != index + 1:
                logger.warning(
                    "List %s diverged: %d rendered, %d expected", self.name, actual, index + 1
                )
                raise IndexDivergenceError(self.name, index + 1, actual)
        self.count = index + 1
        path = self.item_path(index)
        logger.debug("Appended %s", path)
        return path
