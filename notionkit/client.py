"""Notion API operations.

Each operation sends one request through a `Transport`, checks the status
and decodes the body into typed objects:

    transport = notionkit.transport.create()
    results = search(SearchRequest(query="External tasks"), transport=transport)

`Client` bundles the same operations around a single transport.
"""
import json
import logging
from typing import Any, Callable, Dict, List, TypeVar

from notionkit.errors import ApiError, MalformedResponse
from notionkit.objects import (
    Database,
    ListBlockChildrenResult,
    Page,
    QueryResults,
    SearchRequest,
    SearchResults,
    decode_block_children,
    decode_database,
    decode_page,
    decode_query_results,
    decode_search_results,
    encode_search_request,
)
from notionkit.transport import Transport
from notionkit.transport import create as create_transport
from notionkit.types import HTTPVerb, JsonValue

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHILDREN_PATH = "blocks/{block_id}/children"
# Kept separate from CHILDREN_PATH so callers can point appends elsewhere.
APPEND_CHILDREN_PATH = "blocks/{block_id}/children"
SEARCH_PATH = "search"
PAGE_PATH = "pages/{page_id}"
DATABASE_PATH = "databases/{database_id}"
DATABASE_QUERY_PATH = "databases/{database_id}/query"


def _api_error(status: int, body: bytes) -> ApiError:
    """Build an error from the response body, falling back to raw text."""
    text = body.decode("utf-8", errors="replace")
    try:
        info = json.loads(text)
    except json.decoder.JSONDecodeError:
        return ApiError(status_code=status, code="", message=text)

    if not isinstance(info, dict):
        return ApiError(status_code=status, code="", message=text)

    return ApiError(
        status_code=status,
        code=str(info.get("code") or ""),
        message=str(info.get("message", text)),
    )


def _make_api_call(
    transport: Transport, verb: HTTPVerb, path: str, payload: JsonValue | None = None
) -> Any:
    status, body = transport.send(verb, path, payload)

    if status != 200:
        error = _api_error(status, body)
        logger.warning(f"Error making API call to {path}: {error}")
        raise error

    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedResponse(f"Response from {path} is not valid JSON") from e


def _decode(decoder: Callable[[Any], T], data: Any, path: str) -> T:
    try:
        return decoder(data)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise MalformedResponse(f"Unexpected response from {path}: {e!r}") from e


def _drop_none(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


def list_children(
    block_id: str,
    *,
    transport: Transport,
    start_cursor: str | None = None,
    page_size: int | None = None,
) -> ListBlockChildrenResult:
    """Get child blocks of a block or a page.

    Args:
        block_id: id of a block or a page.
        transport: Transport to send the request with.
        start_cursor: `next_cursor` from a previous response.
        page_size: Max number of blocks in the response, up to 100.

    Returns:
        One page of children. Blocks of unsupported types are kept as
        plain JSON in `results`.
    """
    path = CHILDREN_PATH.format(block_id=block_id)
    params = _drop_none({"start_cursor": start_cursor, "page_size": page_size})
    data = _make_api_call(transport, "GET", path, params or None)
    return _decode(decode_block_children, data, path)


def append_children(
    block_id: str,
    children: List[JsonValue],
    *,
    transport: Transport,
    path: str = APPEND_CHILDREN_PATH,
) -> JsonValue:
    """Append blocks to a block or a page.

    Block payloads vary per block type and are validated by the API, so
    both `children` and the result are plain JSON. See `notionkit.blocks`
    for helpers building the payloads.

    Args:
        block_id: id of the parent block or page.
        children: Block objects to append.
        transport: Transport to send the request with.
        path: Endpoint template with a `{block_id}` placeholder.

    Returns:
        Response body as is.
    """
    path = path.format(block_id=block_id)
    return _make_api_call(transport, "POST", path, {"children": children})


def search(request: SearchRequest, *, transport: Transport) -> SearchResults:
    """Search pages and databases shared with the integration."""
    data = _make_api_call(
        transport, "POST", SEARCH_PATH, encode_search_request(request)
    )
    return _decode(decode_search_results, data, SEARCH_PATH)


def retrieve_page(page_id: str, *, transport: Transport) -> Page:
    path = PAGE_PATH.format(page_id=page_id)
    return _decode(decode_page, _make_api_call(transport, "GET", path), path)


def retrieve_database(database_id: str, *, transport: Transport) -> Database:
    path = DATABASE_PATH.format(database_id=database_id)
    return _decode(decode_database, _make_api_call(transport, "GET", path), path)


def query_database(
    database_id: str,
    *,
    transport: Transport,
    filter: Dict[str, Any] | None = None,
    sorts: List[Dict[str, Any]] | None = None,
    start_cursor: str | None = None,
    page_size: int | None = None,
) -> QueryResults:
    """Get pages of a database.

    `filter` and `sorts` are passed to the API as is. Details:
    https://developers.notion.com/reference/post-database-query-filter
    """
    path = DATABASE_QUERY_PATH.format(database_id=database_id)
    payload = _drop_none(
        {
            "filter": filter,
            "sorts": sorts,
            "start_cursor": start_cursor,
            "page_size": page_size,
        }
    )
    data = _make_api_call(transport, "POST", path, payload)
    return _decode(decode_query_results, data, path)


class Client:
    """Operations of this module bound to one transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    @classmethod
    def from_env(cls, **kwargs) -> "Client":
        """Create a client with a `requests` transport configured from env.

        Keyword arguments override the environment, see
        `notionkit.transport.create()`.
        """
        return cls(create_transport(**kwargs))

    def list_children(self, block_id: str, **kwargs) -> ListBlockChildrenResult:
        return list_children(block_id, transport=self.transport, **kwargs)

    def append_children(
        self, block_id: str, children: List[JsonValue], **kwargs
    ) -> JsonValue:
        return append_children(block_id, children, transport=self.transport, **kwargs)

    def search(self, request: SearchRequest) -> SearchResults:
        return search(request, transport=self.transport)

    def retrieve_page(self, page_id: str) -> Page:
        return retrieve_page(page_id, transport=self.transport)

    def retrieve_database(self, database_id: str) -> Database:
        return retrieve_database(database_id, transport=self.transport)

    def query_database(self, database_id: str, **kwargs) -> QueryResults:
        return query_database(database_id, transport=self.transport, **kwargs)
