import pytest

from notionkit import objects
from notionkit.objects import (
    BlockParent,
    Database,
    DatabaseParent,
    Page,
    PageParent,
    SearchFilter,
    SearchRequest,
    Sort,
    WorkspaceParent,
)
from notionkit.properties import NumberProperty, PageTitleProperty
from notionkit.richtext import RichText, Text


def test_decode_parent():
    decode = objects.decode_parent

    assert decode({"type": "database_id", "database_id": "db"}) == DatabaseParent(
        database_id="db"
    )
    assert decode({"type": "page_id", "page_id": "p"}) == PageParent(page_id="p")
    assert decode({"type": "block_id", "block_id": "b"}) == BlockParent(block_id="b")
    assert decode({"type": "workspace", "workspace": True}) == WorkspaceParent()
    assert decode(None) is None

    with pytest.raises(ValueError, match=r"Unsupported parent type: team"):
        decode({"type": "team", "team": "t"})


def test_decode_page(load_json):
    page = objects.decode_page(load_json("page.json"))

    assert page.id == "b55c9c91-384d-452b-81db-d1ef79372b75"
    assert page.parent == DatabaseParent(
        database_id="d9824bdc-8445-4327-be8b-5b47500af6ce"
    )
    assert page.url.startswith("https://www.notion.so/Tuscan-kale")
    assert page.archived is False
    assert page.title == "Tuscan kale"
    assert page.properties["Price"] == NumberProperty(id="BJXS", number=2.5)


def test_page_without_title():
    page = Page(id="p", properties={"Price": NumberProperty(id="n", number=1)})

    assert page.title is None


def test_decode_database(load_json):
    database = objects.decode_database(load_json("database.json"))

    assert isinstance(database, Database)
    assert database.parent == PageParent(page_id="98ad959b-2b6a-4774-80ee-00246fb0ea9b")
    assert [span.plain_text for span in database.title] == ["Grocery List"]
    assert len(database.properties) == 8


def test_decode_object():
    page = {"object": "page", "id": "p", "properties": {}}
    database = {"object": "database", "id": "d", "title": [], "properties": {}}

    assert objects.decode_object(page) == Page(id="p")
    assert objects.decode_object(database) == Database(id="d")

    with pytest.raises(ValueError, match=r"got: block"):
        objects.decode_object({"object": "block", "id": "b"})


def test_decode_search_results(load_json):
    results = objects.decode_search_results(load_json("search.json"))

    assert results.has_more is False
    assert results.next_cursor is None
    assert [r.object for r in results.results] == ["database", "page"]
    page = results.results[1]
    assert page.properties == {
        "Name": PageTitleProperty(
            id="title",
            title=[
                RichText(type="text", plain_text="Task 1", text=Text(content="Task1 1"))
            ],
        )
    }


def test_encode_search_request():
    encode = objects.encode_search_request

    assert encode(SearchRequest()) == {}
    assert encode(
        SearchRequest(
            query="External tasks",
            sort=Sort(direction="ascending"),
            filter=SearchFilter(value="database"),
            start_cursor="cursor",
            page_size=10,
        )
    ) == {
        "query": "External tasks",
        "sort": {"direction": "ascending", "timestamp": "last_edited_time"},
        "filter": {"value": "database", "property": "object"},
        "start_cursor": "cursor",
        "page_size": 10,
    }


def test_objects_are_frozen():
    page = Page(id="p")

    with pytest.raises(AttributeError):
        page.id = "q"

    with pytest.raises(AttributeError):
        page.properties = {}
