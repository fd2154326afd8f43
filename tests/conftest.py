"""
Shared fixtures: an in-memory session that records every mutating operation.
"""
import re
from collections import Counter

import pytest

from jenkins_acceptance.errors import ElementNotFound, PageObjectError
from jenkins_acceptance.page_objects import Jenkins
from jenkins_acceptance.plugins.git import GitScm

CHUNK_RE = re.compile(r"repeated-chunk.*?@path='([^']+)'")


class FakeElement:
    def __init__(self, selector, text=""):
        self.selector = selector
        self.text = text

    def __repr__(self):
        return f"FakeElement({self.selector!r})"


class FakeSession:
    """Session double.

    Every selector is present unless listed in ``missing`` (ElementNotFound) or
    ``failures`` (arbitrary exception). Clicks on selectors containing a fragment
    registered with ``grow_on_click`` add a rendered chunk to the list at the
    given path; ``chunks`` counts rendered items per list path.
    """

    def __init__(self):
        self.current_url = "http://jenkins/"
        self.ops = []
        self.missing = set()
        self.failures = {}
        self.texts = {}
        self.lists = {}
        self.json = {}
        self.chunks = Counter()
        self._growth = []

    def grow_on_click(self, fragment, list_path):
        self._growth.append((fragment, list_path))

    def ops_of(self, kind):
        return [op for op in self.ops if op[0] == kind]

    # Session surface ---------------------------------------------------
    def visit(self, url):
        self.ops.append(("visit", url, None))
        self.current_url = url

    def find(self, selector):
        if selector in self.failures:
            raise self.failures[selector]
        if selector in self.missing:
            raise ElementNotFound(selector)
        return FakeElement(selector, self.texts.get(selector, ""))

    def all(self, selector):
        chunk = CHUNK_RE.search(selector)
        if chunk:
            return [FakeElement(selector)] * self.chunks[chunk.group(1)]
        return [FakeElement(selector, text) for text in self.lists.get(selector, [])]

    def text(self, element):
        return element.text

    def click(self, element):
        self.ops.append(("click", element.selector, None))
        for fragment, list_path in self._growth:
            if fragment in element.selector:
                self.chunks[list_path] += 1

    def set_value(self, element, value):
        self.ops.append(("set", element.selector, value))

    def select_option(self, element, visible_text):
        self.ops.append(("select", element.selector, visible_text))

    def fetch_json(self, url):
        payload = self.json.get(url)
        if isinstance(payload, Exception):
            raise payload
        if payload is None:
            raise PageObjectError(url, "HTTP 404")
        return payload


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def git_session():
    """Session whose behaviour menu links and add buttons render new list items."""
    s = FakeSession()
    s.grow_on_click("//a[", "/scm/extensions")
    s.grow_on_click("Sparse Checkout paths", "/scm/extensions/sparseCheckoutPaths")
    s.grow_on_click("repeatable-add", "/scm/extensions/sparseCheckoutPaths")
    return s


@pytest.fixture
def jenkins(session):
    return Jenkins(session, "http://jenkins/")


@pytest.fixture
def git(git_session):
    job = Jenkins(git_session, "http://jenkins/").job("demo")
    return GitScm(job, "/scm")
