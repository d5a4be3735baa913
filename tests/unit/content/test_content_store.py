from pathlib import Path

import pytest

from bashguide.content.documents import ContentStore, Document
from bashguide.content.exceptions import DuplicatePathError


def test_from_documents_keys_by_normalized_path(make_doc):
    store = ContentStore.from_documents([make_doc("/"), make_doc("a")])

    assert sorted(store) == ["/", "/a/"]
    assert len(store) == 2
    assert store["/a/"].title == "a"


def test_store_is_read_only(make_doc):
    store = ContentStore.from_documents([make_doc("/")])

    with pytest.raises(TypeError):
        store["/new/"] = make_doc("/new/")  # type: ignore[index]


def test_duplicates_are_all_reported():
    documents = [
        Document(path="/a/", title="A", source=Path("a.md")),
        Document(path="/a/", title="A index", source=Path("a/index.md")),
        Document(path="/b/", title="B", source=Path("b.md")),
        Document(path="/b/", title="B index", source=Path("b/index.mdx")),
        Document(path="/c/", title="C"),
    ]

    with pytest.raises(DuplicatePathError) as excinfo:
        ContentStore.from_documents(documents)

    duplicates = excinfo.value.duplicates
    assert [duplicate.path for duplicate in duplicates] == ["/a/", "/b/"]
    assert duplicates[0].sources == (Path("a.md"), Path("a/index.md"))
    assert duplicates[0].is_fatal


def test_under_sorts_by_sidebar_order_then_path(make_doc):
    store = ContentStore.from_documents(
        [
            make_doc("/loops/while/"),
            make_doc("/loops/for/"),
            make_doc("/loops/until/", sidebar={"order": 1}),
            make_doc("/other/"),
        ]
    )

    assert [doc.path for doc in store.under("loops")] == ["/loops/until/", "/loops/for/", "/loops/while/"]


def test_sidebar_order_ignores_non_integers(make_doc):
    assert make_doc("/a/", sidebar={"order": "first"}).sidebar_order is None
    assert make_doc("/a/", sidebar={"order": True}).sidebar_order is None
    assert make_doc("/a/", sidebar={"order": 3}).sidebar_order == 3
