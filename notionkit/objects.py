"""Top-level API objects: pages, databases and result lists."""
from dataclasses import field
from typing import Any, Dict, List, Literal

from pydantic.dataclasses import dataclass

from notionkit import blocks, richtext
from notionkit.properties import PageTitleProperty, Property, decode_properties
from notionkit.richtext import RichText
from notionkit.types import JsonValue, SearchFilterValue, SortDirection


@dataclass(frozen=True)
class DatabaseParent:
    database_id: str
    type: Literal["database_id"] = "database_id"


@dataclass(frozen=True)
class PageParent:
    page_id: str
    type: Literal["page_id"] = "page_id"


@dataclass(frozen=True)
class BlockParent:
    block_id: str
    type: Literal["block_id"] = "block_id"


@dataclass(frozen=True)
class WorkspaceParent:
    type: Literal["workspace"] = "workspace"


Parent = DatabaseParent | PageParent | BlockParent | WorkspaceParent


@dataclass(frozen=True)
class Page:
    id: str
    object: Literal["page"] = "page"
    created_time: str | None = None
    last_edited_time: str | None = None
    parent: Parent | None = None
    archived: bool = False
    url: str | None = None
    properties: Dict[str, Property] = field(default_factory=dict)

    @property
    def title(self) -> str | None:
        """Plain text of the page title, if the page has one."""
        for value in self.properties.values():
            if isinstance(value, PageTitleProperty):
                return richtext.plain_text(value.title)
        return None


@dataclass(frozen=True)
class Database:
    id: str
    object: Literal["database"] = "database"
    created_time: str | None = None
    last_edited_time: str | None = None
    parent: Parent | None = None
    title: List[RichText] = field(default_factory=list)
    url: str | None = None
    properties: Dict[str, Property] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResults:
    object: Literal["list"] = "list"
    has_more: bool = False
    next_cursor: str | None = None
    results: List[Page | Database] = field(default_factory=list)


@dataclass(frozen=True)
class QueryResults:
    object: Literal["list"] = "list"
    has_more: bool = False
    next_cursor: str | None = None
    results: List[Page] = field(default_factory=list)


@dataclass(frozen=True)
class ListBlockChildrenResult:
    object: Literal["list"] = "list"
    # Decoded blocks or opaque payloads of unknown types.
    results: List[Any] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None


@dataclass(frozen=True)
class Sort:
    direction: SortDirection = "descending"
    timestamp: Literal["last_edited_time"] = "last_edited_time"


@dataclass(frozen=True)
class SearchFilter:
    value: SearchFilterValue
    property: Literal["object"] = "object"


@dataclass(frozen=True)
class SearchRequest:
    """Search request.

    Attributes:
        query (str, optional): Text to match page and database titles against.
            Everything shared with the integration is returned when omitted.
        sort (Sort, optional): Result order. Only `last_edited_time` is
            supported by the API.
        filter (SearchFilter, optional): Limit results to pages or databases.
        start_cursor (str, optional): `next_cursor` of a previous response.
        page_size (int, optional): Up to 100 results per response.
    """

    query: str | None = None
    sort: Sort | None = None
    filter: SearchFilter | None = None
    start_cursor: str | None = None
    page_size: int | None = None


def encode_search_request(request: SearchRequest) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    if request.query is not None:
        payload["query"] = request.query
    if request.sort is not None:
        payload["sort"] = {
            "direction": request.sort.direction,
            "timestamp": request.sort.timestamp,
        }
    if request.filter is not None:
        payload["filter"] = {
            "value": request.filter.value,
            "property": request.filter.property,
        }
    if request.start_cursor is not None:
        payload["start_cursor"] = request.start_cursor
    if request.page_size is not None:
        payload["page_size"] = request.page_size
    return payload


def decode_parent(raw: Dict[str, Any] | None) -> Parent | None:
    if raw is None:
        return None

    match raw["type"]:
        case "database_id":
            return DatabaseParent(database_id=raw["database_id"])
        case "page_id":
            return PageParent(page_id=raw["page_id"])
        case "block_id":
            return BlockParent(block_id=raw["block_id"])
        case "workspace":
            return WorkspaceParent()
        case unknown:
            raise ValueError(f"Unsupported parent type: {unknown}")


def decode_page(raw: Dict[str, Any]) -> Page:
    return Page(
        id=raw["id"],
        created_time=raw.get("created_time"),
        last_edited_time=raw.get("last_edited_time"),
        parent=decode_parent(raw.get("parent")),
        archived=raw.get("archived", False),
        url=raw.get("url"),
        properties=decode_properties(raw.get("properties", {})),
    )


def decode_database(raw: Dict[str, Any]) -> Database:
    return Database(
        id=raw["id"],
        created_time=raw.get("created_time"),
        last_edited_time=raw.get("last_edited_time"),
        parent=decode_parent(raw.get("parent")),
        title=richtext.decode_list(raw.get("title", [])),
        url=raw.get("url"),
        properties=decode_properties(raw.get("properties", {})),
    )


def decode_object(raw: Dict[str, Any]) -> Page | Database:
    """Decode a page or a database depending on its `object` field."""
    match raw["object"]:
        case "page":
            return decode_page(raw)
        case "database":
            return decode_database(raw)
        case unknown:
            raise ValueError(f"Expected a page or a database, got: {unknown}")


def decode_search_results(raw: Dict[str, Any]) -> SearchResults:
    return SearchResults(
        object=raw["object"],
        has_more=raw.get("has_more", False),
        next_cursor=raw.get("next_cursor"),
        results=[decode_object(result) for result in raw["results"]],
    )


def decode_query_results(raw: Dict[str, Any]) -> QueryResults:
    return QueryResults(
        object=raw["object"],
        has_more=raw.get("has_more", False),
        next_cursor=raw.get("next_cursor"),
        results=[decode_page(result) for result in raw["results"]],
    )


def decode_block_children(raw: Dict[str, Any]) -> ListBlockChildrenResult:
    results: List[JsonValue] = raw["results"]
    return ListBlockChildrenResult(
        object=raw["object"],
        results=blocks.decode_children(results),
        has_more=raw.get("has_more", False),
        next_cursor=raw.get("next_cursor"),
    )
