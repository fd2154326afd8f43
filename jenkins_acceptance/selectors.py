from __future__ import annotations

"""Selector factory producing Playwright selector strings."""


def xpath_literal(value: str) -> str:
    """Quote *value* as an XPath 1.0 string literal."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


class By:
    """Builds selectors understood by ``Page.locator``."""

    @staticmethod
    def xpath(expr: str, *args: str) -> str:
        """XPath selector; ``%s`` placeholders receive quoted string literals."""
        if args:
            expr = expr % tuple(xpath_literal(str(a)) for a in args)
        return f"xpath={expr}"

    @staticmethod
    def css(selector: str) -> str:
        return f"css={selector}"

    @staticmethod
    def path(path: str) -> str:
        """Form element addressed by its ``path`` attribute."""
        return By.xpath("//*[@path=%s]", path)

    @staticmethod
    def class_name(name: str) -> str:
        return By.css(f".{name}")

    @staticmethod
    def href(url: str) -> str:
        return By.xpath("//a[@href=%s]", url)

    @staticmethod
    def link(text: str) -> str:
        return By.xpath("//a[normalize-space(.)=%s]", text)

    @staticmethod
    def button(text: str) -> str:
        return By.xpath("//button[normalize-space(.)=%s]", text)

    @staticmethod
    def radio_button(label: str) -> str:
        return By.xpath("//input[@type='radio'][../label[normalize-space(.)=%s]]", label)
