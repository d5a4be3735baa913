"""Tests for resolving the sidebar against the content store."""

import pytest

from bashguide.content.documents import ContentStore
from bashguide.content.exceptions import DuplicatePathError
from bashguide.issues import BrokenLink, OrphanedDocument, Severity
from bashguide.navigation.resolver import (
    ExternalLink,
    NavigationResolutionError,
    ResolvedGroup,
    ResolvedLink,
    resolve,
)
from bashguide.navigation.tree import Autogenerate, Group, Link, NavigationTree


@pytest.fixture
def store(make_doc):
    return ContentStore.from_documents(
        [
            make_doc("/", title="Home"),
            make_doc("/a/", title="Alpha"),
            make_doc("/b/", title="Beta"),
        ]
    )


def test_every_link_resolves_to_its_document(store):
    tree = NavigationTree((Link("Home", "/"), Group("G", (Link("A", "/a/"), Link("B", "/b/")))))

    resolved = resolve(tree, store)

    assert resolved.link_count() == 3
    assert [link.document for link in resolved.links()] == [store["/"], store["/a/"], store["/b/"]]
    assert resolved.warnings == ()


def test_resolved_tree_keeps_shape_and_order(store):
    tree = NavigationTree((Group("G", (Link("B", "/b/"), Link("A", "/a/")), collapsed=True), Link("Home", "/")))

    resolved = resolve(tree, store)

    group, home = resolved.entries
    assert isinstance(group, ResolvedGroup)
    assert group.collapsed is True
    assert [child.label for child in group.children] == ["B", "A"]
    assert isinstance(home, ResolvedLink)
    assert home.path == "/"


def test_single_missing_path_reports_one_broken_link(store):
    tree = NavigationTree((Link("Home", "/"), Link("A", "/a/"), Link("B", "/b/"), Link("Gone", "/gone/")))

    with pytest.raises(NavigationResolutionError) as excinfo:
        resolve(tree, store)

    assert excinfo.value.errors == (BrokenLink(label="Gone", path="/gone/", locations=("sidebar[3]",)),)


def test_all_broken_links_are_reported_together(store):
    tree = NavigationTree(
        (
            Link("One", "/one/"),
            Group("G", (Link("Two", "/two/"), Group("Inner", (Link("Three", "/three/"),)))),
            Link("A", "/a/"),
        )
    )

    with pytest.raises(NavigationResolutionError) as excinfo:
        resolve(tree, store)

    errors = excinfo.value.errors
    assert [error.path for error in errors] == ["/one/", "/two/", "/three/"]
    assert all(error.severity is Severity.ERROR for error in errors)
    assert errors[2].locations == ("sidebar[1].items[1].items[0]",)


def test_example_scenario_reports_error_and_orphans(store):
    tree = NavigationTree((Group("G", (Link("A", "/a/"), Link("Missing", "/missing/"))),))

    with pytest.raises(NavigationResolutionError) as excinfo:
        resolve(tree, store)

    assert [error.path for error in excinfo.value.errors] == ["/missing/"]
    assert excinfo.value.warnings == (OrphanedDocument("/"), OrphanedDocument("/b/"))


def test_empty_tree_only_warns(store):
    resolved = resolve(NavigationTree(), store)

    assert resolved.entries == ()
    assert resolved.link_count() == 0
    assert len(resolved.warnings) == len(store)
    assert all(warning.severity is Severity.WARNING for warning in resolved.warnings)


def test_orphan_is_a_warning_not_an_error(store):
    resolved = resolve(NavigationTree((Link("Home", "/"), Link("A", "/a/"))), store)

    assert resolved.warnings == (OrphanedDocument("/b/"),)
    assert not resolved.warnings[0].is_fatal


def test_resolution_is_idempotent(store):
    tree = NavigationTree((Link(None, "/"), Group("G", (Link("A", "/a/"),))))

    assert resolve(tree, store) == resolve(tree, store)


def test_plain_dict_store_is_accepted(make_doc):
    store = {"/": make_doc("/", title="Home"), "/a/": make_doc("/a/")}

    resolved = resolve(NavigationTree((Link("A", "a"),)), store)

    assert resolved.link_count() == 1
    assert resolved.warnings == (OrphanedDocument("/"),)


def test_unlabeled_link_takes_document_title(store):
    resolved = resolve(NavigationTree((Link(None, "a"),)), store)

    (link,) = resolved.entries
    assert link.label == "Alpha"


def test_external_links_are_not_checked(store):
    tree = NavigationTree((Link("GitHub", "https://github.com/example/bash-guide"), Link("Home", "/")))

    resolved = resolve(tree, store)

    external = resolved.entries[0]
    assert isinstance(external, ExternalLink)
    assert external.url == "https://github.com/example/bash-guide"
    assert resolved.link_count() == 1


def test_autogenerate_expands_directory_in_sidebar_order(make_doc):
    store = ContentStore.from_documents(
        [
            make_doc("/", title="Home"),
            make_doc("/basics/variables/", title="Variables", sidebar={"order": 2}),
            make_doc("/basics/quoting/", title="Quoting"),
            make_doc("/basics/intro/", title="Intro", sidebar={"order": 1}),
        ]
    )
    tree = NavigationTree((Link("Home", "/"), Autogenerate("Basics", "basics")))

    resolved = resolve(tree, store)

    group = resolved.entries[1]
    assert [child.label for child in group.children] == ["Intro", "Variables", "Quoting"]
    assert resolved.warnings == ()


def test_autogenerate_for_empty_directory_is_broken(store):
    with pytest.raises(NavigationResolutionError) as excinfo:
        resolve(NavigationTree((Autogenerate("Advanced", "advanced"),)), store)

    assert excinfo.value.errors[0].path == "/advanced/"


def test_to_dict_is_render_ready(store):
    resolved = resolve(NavigationTree((Group("G", (Link("A", "/a/"),)),)), store)

    assert resolved.to_dict() == {
        "sidebar": [
            {
                "type": "group",
                "label": "G",
                "collapsed": False,
                "entries": [{"type": "link", "label": "A", "href": "/a/", "description": "Summary."}],
            }
        ]
    }


def test_repeated_missing_path_is_one_error_with_every_location(store):
    tree = NavigationTree(
        (
            Link("Gone", "/gone/"),
            Group("G", (Link("Again", "gone"), Link("Other", "/other/"))),
        )
    )

    with pytest.raises(NavigationResolutionError) as excinfo:
        resolve(tree, store)

    assert excinfo.value.errors == (
        BrokenLink(label="Gone", path="/gone/", locations=("sidebar[0]", "sidebar[1].items[0]")),
        BrokenLink(label="Other", path="/other/", locations=("sidebar[1].items[1]",)),
    )
    assert "sidebar[0], sidebar[1].items[0]" in excinfo.value.errors[0].message


def test_unnormalized_store_keys_are_matched(make_doc):
    store = {"/a": make_doc("/a/", title="Alpha"), "/Guide/": make_doc("/guide/", title="Guide")}

    resolved = resolve(NavigationTree((Link("A", "/a"), Link("G", "/Guide/"))), store)

    assert [link.path for link in resolved.links()] == ["/a/", "/guide/"]
    assert resolved.warnings == ()


def test_store_keys_that_normalize_together_are_duplicates(make_doc):
    store = {"/a": make_doc("/a/", title="One"), "/a/": make_doc("/a/", title="Two")}

    with pytest.raises(DuplicatePathError) as excinfo:
        resolve(NavigationTree((Link("A", "/a/"),)), store)

    assert [duplicate.path for duplicate in excinfo.value.duplicates] == ["/a/"]
