"""
Page areas, controls, repeatable lists and probing
"""
import pytest

from jenkins_acceptance.errors import ElementNotFound, IndexDivergenceError
from jenkins_acceptance.page_area import PageArea, ProbeOutcome, RepeatableList, probe
from jenkins_acceptance.page_objects import PageObject
from jenkins_acceptance.selectors import By


@pytest.fixture
def root(session):
    return PageObject(session, "http://jenkins/job/demo/configure")


class TestControl:
    def test_relative_control_uses_owner_path(self, root):
        area = PageArea(root, "/scm")
        assert area.control("userRemoteConfigs/url").path == "/scm/userRemoteConfigs/url"

    def test_absolute_control_is_owner_independent(self, root):
        shallow = PageArea(root, "/scm")
        deep = PageArea(PageArea(root, "/scm/extensions[2]"), "/scm/extensions[2]/inner")
        for path in ("/", "/browser/repoUrl"):
            assert shallow.control(path).selectors() == deep.control(path).selectors()

    def test_set_stringifies_value(self, root, session):
        PageArea(root, "/scm").control("depth").set(3)
        assert session.ops == [("set", By.path("/scm/depth"), "3")]

    def test_candidates_tried_in_order(self, root, session):
        session.missing.add(By.path("/scm/old"))
        element = PageArea(root, "/scm").control("old", "new").resolve()
        assert element.selector == By.path("/scm/new")

    def test_all_candidates_missing(self, root, session):
        session.missing.update({By.path("/scm/old"), By.path("/scm/new")})
        control = PageArea(root, "/scm").control("old", "new")
        with pytest.raises(ElementNotFound) as info:
            control.resolve()
        assert "/scm/old" in str(info.value) and "/scm/new" in str(info.value)
        assert control.exists() is False

    def test_control_by_selector_bypasses_paths(self, root, session):
        control = PageArea(root, "/scm").control_by(By.class_name("credentials-select"))
        control.select("admin/****")
        assert control.path is None
        assert session.ops == [("select", "css=.credentials-select", "admin/****")]

    def test_control_resolved_on_every_operation(self, root, session):
        control = PageArea(root, "/scm").control("url")
        control.set("a")
        session.missing.add(By.path("/scm/url"))
        with pytest.raises(ElementNotFound):
            control.set("b")

    def test_control_needs_an_address(self, root):
        from jenkins_acceptance.page_area import Control
        with pytest.raises(ValueError):
            Control(root, [])


class TestRepeatableList:
    def test_item_paths(self, root):
        items = RepeatableList(PageArea(root, "/scm"), "extensions", "hetero-list-add[extensions]")
        assert items.item_path(0) == "/scm/extensions"
        assert items.item_path(2) == "/scm/extensions[2]"

    def test_append_clicks_and_counts(self, root, session):
        session.grow_on_click("hetero-list-add", "/scm/extensions")
        items = RepeatableList(PageArea(root, "/scm"), "extensions", "hetero-list-add[extensions]")
        assert [items.append() for _ in range(3)] == [
            "/scm/extensions", "/scm/extensions[1]", "/scm/extensions[2]",
        ]
        assert len(session.ops_of("click")) == 3
        assert items.count == 3

    def test_prerendered_first_item_needs_no_click(self, root, session):
        session.chunks["/area/paths"] = 1
        session.grow_on_click("repeatable-add", "/area/paths")
        items = RepeatableList(PageArea(root, "/area"), "paths", "repeatable-add", first_prerendered=True)
        items.append()
        assert session.ops_of("click") == []
        items.append()
        assert session.ops_of("click") == [("click", By.path("/area/repeatable-add"), None)]

    def test_divergence_fails_loudly_and_keeps_counter(self, root, session):
        items = RepeatableList(PageArea(root, "/scm"), "extensions", "hetero-list-add[extensions]")
        with pytest.raises(IndexDivergenceError) as info:
            items.append()
        assert (info.value.expected, info.value.actual) == (1, 0)
        assert items.count == 0

    def test_unverified_list_trusts_counter(self, root, session):
        items = RepeatableList(PageArea(root, "/scm"), "x", "add", verify=False)
        assert items.append() == "/scm/x"
        assert items.append() == "/scm/x[1]"

    def test_rendered_items_are_counted_per_owner(self, root, session):
        session.chunks["/scm/extensions"] = 3
        session.chunks["/scm[1]/extensions"] = 1
        first = RepeatableList(PageArea(root, "/scm"), "extensions", "hetero-list-add[extensions]")
        second = RepeatableList(PageArea(root, "/scm[1]"), "extensions", "hetero-list-add[extensions]")
        assert (first.rendered(), second.rendered()) == (3, 1)

    def test_sync_adopts_rendered_items(self, root, session):
        session.chunks["/scm/extensions"] = 2
        items = RepeatableList(PageArea(root, "/scm"), "extensions", "hetero-list-add[extensions]")
        assert items.sync() == 2
        assert items.item_path(items.count) == "/scm/extensions[2]"


class TestProbe:
    def test_supported(self):
        result = probe(lambda: None)
        assert result.outcome is ProbeOutcome.SUPPORTED
        result.raise_for_error()

    def test_missing_element_is_unsupported(self):
        def action():
            raise ElementNotFound("x")

        result = probe(action)
        assert result.outcome is ProbeOutcome.UNSUPPORTED
        result.raise_for_error()

    def test_other_failure_is_error_and_reraised(self):
        boom = RuntimeError("transport closed")

        def action():
            raise boom

        result = probe(action)
        assert result.outcome is ProbeOutcome.ERROR
        with pytest.raises(RuntimeError) as info:
            result.raise_for_error()
        assert info.value is boom
