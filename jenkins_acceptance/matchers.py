from __future__ import annotations

"""Assertion matchers over live pages, page objects and strings.

Every matcher answers a yes/no question about its subject and can explain both
what it expected and, on failure, what it observed. A missing element is an
answer ("does not match"), never an error that escapes the matcher.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Union

from .errors import AcceptanceError, ElementNotFound
from .page_objects import ContainerPageObject, Jenkins, Job, PageObject, User
from .plugins.analysis import AnalysisPlugin
from .selectors import By
from .session import Session

logger = logging.getLogger(__name__)


def _value(value: Any) -> str:
    if isinstance(value, str):
        return '"' + value.replace('"', '\\"') + '"'
    if isinstance(value, re.Pattern):
        return _value(value.pattern)
    return f"<{value}>"


def _session_of(item: Any) -> Session:
    return item.session if isinstance(item, PageObject) else item


@dataclass
class MatchResult:
    matched: bool
    description: str


class Matcher:
    """Base class; subclasses implement :meth:`matches`."""

    def __init__(self, description: str, *args: Any) -> None:
        self.description = description % tuple(_value(a) for a in args) if args else description

    def matches(self, item: Any) -> bool:
        raise NotImplementedError

    def describe_to(self) -> str:
        return self.description

    def describe_mismatch(self, item: Any) -> str:
        return f"was {_value(item)}"

    def evaluate(self, item: Any) -> MatchResult:
        if self.matches(item):
            return MatchResult(True, self.describe_to())
        return MatchResult(False, self.describe_mismatch(item))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


def assert_that(item: Any, matcher: Matcher, reason: str = "") -> None:
    result = matcher.evaluate(item)
    if not result.matched:
        raise AssertionError(
            f"{reason}\nExpected: {matcher.describe_to()}\n     but: {result.description}"
        )


# ----------------------------------------------------------------------
# page content

class _HasContent(Matcher):
    def __init__(self, pattern: re.Pattern[str]) -> None:
        super().__init__("Text matching %s", pattern)
        self.pattern = pattern

    @staticmethod
    def _page_text(item: Any) -> str:
        session = _session_of(item)
        return session.text(session.find(By.xpath("/html")))

    def matches(self, item: Any) -> bool:
        try:
            return self.pattern.search(self._page_text(item)) is not None
        except ElementNotFound:
            return False

    def describe_mismatch(self, item: Any) -> str:
        session = _session_of(item)
        try:
            text = self._page_text(item)
        except ElementNotFound:
            text = ""
        return f"was {_value(session.current_url)}\n{_value(text)}"


def has_content(content: Union[str, re.Pattern[str]]) -> Matcher:
    """Page text contains *content*; plain strings are matched literally."""
    if isinstance(content, str):
        content = re.compile(re.escape(content))
    return _HasContent(content)


class _HasElement(Matcher):
    def __init__(self, selector: str) -> None:
        super().__init__("contains element that matches %s", selector)
        self.selector = selector

    def matches(self, item: Any) -> bool:
        # the list lookup returns [] rather than raising, so this is true for any
        # well-formed selector
        try:
            _session_of(item).all(self.selector)
            return True
        except ElementNotFound:
            return False

    def describe_mismatch(self, item: Any) -> str:
        return f"was at {_value(_session_of(item).current_url)}"


def has_element(selector: str) -> Matcher:
    return _HasElement(selector)


class _HasAction(Matcher):
    def __init__(self, display_name: str) -> None:
        super().__init__("contains action titled %s", display_name)
        self.display_name = display_name

    def matches(self, po: PageObject) -> bool:
        try:
            po.open()
            po.find(By.xpath("//div[@id='tasks']/div/a[text()=%s]", self.display_name))
            return True
        except ElementNotFound:
            return False

    def describe_mismatch(self, po: PageObject) -> str:
        return f"{_value(po.url)} does not have action: {_value(self.display_name)}"


def has_action(display_name: str) -> Matcher:
    """The page object's sidebar lists an action titled *display_name*. Opens the page."""
    return _HasAction(display_name)


class _ContainsRegexp(Matcher):
    def __init__(self, pattern: re.Pattern[str]) -> None:
        super().__init__("Matches regexp %s", pattern.pattern)
        self.pattern = pattern

    def matches(self, item: str) -> bool:
        return self.pattern.search(item) is not None


def contains_regexp(regexp: Union[str, re.Pattern[str]], flags: int = 0) -> Matcher:
    if isinstance(regexp, str):
        regexp = re.compile(regexp, flags)
    return _ContainsRegexp(regexp)


# ----------------------------------------------------------------------
# page objects

class _PageObjectExists(Matcher):
    def __init__(self) -> None:
        super().__init__("Page object exists")

    def matches(self, item: ContainerPageObject) -> bool:
        # any failure, transport errors included, reads as "does not exist"
        try:
            item.get_json()
            return True
        except Exception as exc:
            logger.debug("%s treated as missing: %s", item.url, exc)
            return False

    def describe_mismatch(self, item: ContainerPageObject) -> str:
        return f"{item.url} does not exist"


def page_object_exists() -> Matcher:
    return _PageObjectExists()


class _HasLoggedInUser(Matcher):
    def __init__(self, user: str) -> None:
        super().__init__("has logged in user %s", user)
        self.user = user

    def matches(self, jenkins: Jenkins) -> bool:
        try:
            jenkins.find(By.href("/user/" + self.user))
            return True
        except ElementNotFound:
            return False

    def describe_mismatch(self, jenkins: Jenkins) -> str:
        return f"{self.user} is not logged in."


def has_logged_in_user(user: str) -> Matcher:
    return _HasLoggedInUser(user)


class _IsMemberOf(Matcher):
    def __init__(self, group: str) -> None:
        super().__init__(" is member of group %s", group)
        self.group = group

    def matches(self, user: User) -> bool:
        user.open()
        try:
            for element in user.all(By.xpath("//ul/li")):
                if user.session.text(element) == self.group:
                    return True
        except ElementNotFound:
            return False
        return False

    def describe_mismatch(self, user: User) -> str:
        return f"{user} is not member of group {self.group}."


def is_member_of(group: str) -> Matcher:
    return _IsMemberOf(group)


class _FullNameIs(Matcher):
    def __init__(self, full_name: str) -> None:
        super().__init__(" full name is %s", full_name)
        self.full_name = full_name

    def matches(self, user: User) -> bool:
        user.open()
        try:
            return user.full_name() == self.full_name
        except AcceptanceError:
            return False

    def describe_mismatch(self, user: User) -> str:
        return f"{user} full name is not {self.full_name}."


def full_name_is(full_name: str) -> Matcher:
    return _FullNameIs(full_name)


class _MailAddressIs(Matcher):
    def __init__(self, mail: str) -> None:
        super().__init__(" mail address is %s", mail)
        self.mail = mail

    def matches(self, user: User) -> bool:
        user.open()
        try:
            return user.mail() == self.mail
        except AcceptanceError:
            return False

    def describe_mismatch(self, user: User) -> str:
        return f"mail address of {user} is not {self.mail}."


def mail_address_is(mail: str) -> Matcher:
    return _MailAddressIs(mail)


class _HasAnalysisWarningsFor(Matcher):
    def __init__(self, plugin: AnalysisPlugin) -> None:
        super().__init__(" shows analysis results for plugin %s", plugin.value)
        self.plugin = plugin

    def matches(self, job: Job) -> bool:
        job.open()
        try:
            job.find(By.xpath(
                "//h2[text()='Analysis results']/following-sibling::ul/li/img[@title=%s]",
                self.plugin.value,
            ))
            return True
        except ElementNotFound:
            return False

    def describe_mismatch(self, job: Job) -> str:
        return f"Job is not showing analysis results for plugin {self.plugin.value}"


def has_analysis_warnings_for(plugin: AnalysisPlugin) -> Matcher:
    return _HasAnalysisWarningsFor(plugin)
