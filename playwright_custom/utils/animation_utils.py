from typing import List
import logging
import time

from playwright.sync_api import Locator

logger = logging.getLogger(__name__)


class AnimationUtilsPlaywright:
    """
    Visual feedback for actions performed through a session: the target element is
    outlined before it is clicked or filled, and a ripple marks clicks.
    """

    def __init__(self, highlight_delay: float = 0.3, evaluate_timeout_ms: float = 1000) -> None:
        self.highlight_delay = highlight_delay
        self.evaluate_timeout_ms = evaluate_timeout_ms
        self.highlighted_elements: List[Locator] = []

    def highlight(self, locator: Locator) -> None:
        """
        Outline the element in red and wait for the border transition.

        Args:
            locator (Locator): The element about to be acted on.
        """
        try:
            locator.evaluate(
                """
                (elm) => {
                    elm.style.transition = 'border 0.3s ease-in-out';
                    elm.style.border = '2px solid red';
                }
                """,
                timeout=self.evaluate_timeout_ms,
            )
            if locator not in self.highlighted_elements:
                self.highlighted_elements.append(locator)
            time.sleep(self.highlight_delay)
        except Exception as e:
            logger.debug("Could not highlight element: %s", e)

    def unhighlight(self, locator: Locator) -> None:
        try:
            locator.evaluate(
                "(elm) => { elm.style.border = ''; elm.style.transition = ''; }",
                timeout=self.evaluate_timeout_ms,
            )
            if locator in self.highlighted_elements:
                self.highlighted_elements.remove(locator)
        except Exception as e:
            # the element is often gone after a click that re-renders the form
            logger.debug("Could not remove highlight: %s", e)

    def add_click_effect(self, locator: Locator) -> None:
        """
        Draw a short-lived ripple at the centre of the element.

        Args:
            locator (Locator): The element being clicked.
        """
        try:
            box = locator.bounding_box()
            if not box:
                return
            x = box["x"] + box["width"] / 2
            y = box["y"] + box["height"] / 2
            locator.page.evaluate(
                """
                ([x, y]) => {
                    const ripple = document.createElement('div');
                    ripple.style.position = 'absolute';
                    ripple.style.left = (x - 20) + 'px';
                    ripple.style.top = (y - 20) + 'px';
                    ripple.style.width = '40px';
                    ripple.style.height = '40px';
                    ripple.style.borderRadius = '50%';
                    ripple.style.backgroundColor = 'rgba(255, 0, 0, 0.3)';
                    ripple.style.pointerEvents = 'none';
                    ripple.style.zIndex = '999997';
                    document.body.appendChild(ripple);
                    setTimeout(() => ripple.remove(), 600);
                }
                """,
                [x, y],
            )
        except Exception as e:
            logger.debug("Could not draw click effect: %s", e)

    def forget_highlights(self) -> None:
        """Drop tracked highlights after navigation; the new document carries none."""
        self.highlighted_elements = []
