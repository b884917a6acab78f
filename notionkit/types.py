from typing import List, Literal, NoReturn, TypeGuard

from pydantic import JsonValue  # noqa: F401

PropertyType = Literal[
    "title",
    "rich_text",
    "number",
    "select",
    "multi_select",
    "date",
    "people",
    "files",
    "checkbox",
    "url",
    "email",
    "phone_number",
    "formula",
    "relation",
    "rollup",
    "created_time",
    "created_by",
    "last_edited_time",
    "last_edited_by",
]
PROPERTY_TYPES: List[PropertyType] = [
    "title",
    "rich_text",
    "number",
    "select",
    "multi_select",
    "date",
    "people",
    "files",
    "checkbox",
    "url",
    "email",
    "phone_number",
    "formula",
    "relation",
    "rollup",
    "created_time",
    "created_by",
    "last_edited_time",
    "last_edited_by",
]

BlockType = Literal[
    "paragraph",
    "heading_1",
    "heading_2",
    "heading_3",
    "bulleted_list_item",
    "numbered_list_item",
    "to_do",
    "toggle",
    "child_page",
]
BLOCK_TYPES: List[BlockType] = [
    "paragraph",
    "heading_1",
    "heading_2",
    "heading_3",
    "bulleted_list_item",
    "numbered_list_item",
    "to_do",
    "toggle",
    "child_page",
]

SpanType = Literal["text", "mention", "equation"]
SPAN_TYPES: List[SpanType] = ["text", "mention", "equation"]

Color = Literal[
    "default",
    "gray",
    "brown",
    "orange",
    "yellow",
    "green",
    "blue",
    "purple",
    "pink",
    "red",
    "gray_background",
    "brown_background",
    "orange_background",
    "yellow_background",
    "green_background",
    "blue_background",
    "purple_background",
    "pink_background",
    "red_background",
]

SortDirection = Literal["ascending", "descending"]
SearchFilterValue = Literal["page", "database"]

HTTPVerb = Literal["GET", "POST"]


def is_property_type(val: str) -> TypeGuard[PropertyType]:
    return val in PROPERTY_TYPES


def is_block_type(val: str) -> TypeGuard[BlockType]:
    return val in BLOCK_TYPES


def is_span_type(val: str) -> TypeGuard[SpanType]:
    return val in SPAN_TYPES


def assert_never(x: NoReturn) -> NoReturn:
    # runtime error, should not happen
    raise Exception(f"Unhandled value: {x}")
