"""Blocks: the content of pages.

Decoding dispatches on the `type` discriminator. Block types this module
doesn't know are kept as opaque JSON, so one new block type doesn't break
reading the rest of a page.

Details: https://developers.notion.com/reference/block
"""
import logging
from dataclasses import field
from typing import Any, Callable, Dict, List, Literal, Sequence

from pydantic.dataclasses import dataclass

from notionkit import richtext
from notionkit.richtext import RichText
from notionkit.types import JsonValue, is_block_type

logger = logging.getLogger(__name__)

# Max length of a single text span's content accepted by the API.
NOTION_RICH_TEXT_CONTENT_LIMIT = 2_000


@dataclass(frozen=True)
class _BlockBase:
    id: str
    object: Literal["block"] = "block"
    created_time: str | None = None
    last_edited_time: str | None = None
    has_children: bool = False
    archived: bool = False


@dataclass(frozen=True)
class ParagraphBlock(_BlockBase):
    type: Literal["paragraph"] = "paragraph"
    text: List[RichText] = field(default_factory=list)
    # Decoded blocks or opaque payloads of unknown types.
    children: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class HeadingBlock(_BlockBase):
    type: Literal["heading_1", "heading_2", "heading_3"] = "heading_1"
    text: List[RichText] = field(default_factory=list)

    @property
    def level(self) -> int:
        return int(self.type[-1])


@dataclass(frozen=True)
class BulletedListItemBlock(_BlockBase):
    type: Literal["bulleted_list_item"] = "bulleted_list_item"
    text: List[RichText] = field(default_factory=list)
    children: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class NumberedListItemBlock(_BlockBase):
    type: Literal["numbered_list_item"] = "numbered_list_item"
    text: List[RichText] = field(default_factory=list)
    children: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class TodoBlock(_BlockBase):
    type: Literal["to_do"] = "to_do"
    text: List[RichText] = field(default_factory=list)
    checked: bool = False
    children: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ToggleBlock(_BlockBase):
    type: Literal["toggle"] = "toggle"
    text: List[RichText] = field(default_factory=list)
    children: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ChildPageBlock(_BlockBase):
    type: Literal["child_page"] = "child_page"
    title: str = ""


Block = (
    ParagraphBlock
    | HeadingBlock
    | BulletedListItemBlock
    | NumberedListItemBlock
    | TodoBlock
    | ToggleBlock
    | ChildPageBlock
)


def _common(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": raw["id"],
        "created_time": raw.get("created_time"),
        "last_edited_time": raw.get("last_edited_time"),
        "has_children": raw.get("has_children", False),
        "archived": raw.get("archived", False),
    }


def _spans(payload: Dict[str, Any]) -> List[RichText]:
    # `rich_text` since API version 2022-02-22, `text` before that.
    spans = payload.get("rich_text", payload.get("text", []))
    return richtext.decode_list(spans)


def _decode_paragraph(raw: Dict[str, Any]) -> Block:
    payload = raw["paragraph"]
    return ParagraphBlock(
        **_common(raw),
        text=_spans(payload),
        children=decode_children(payload.get("children") or []),
    )


def _decode_heading(raw: Dict[str, Any]) -> Block:
    _type = raw["type"]
    return HeadingBlock(**_common(raw), type=_type, text=_spans(raw[_type]))


def _decode_bulleted_list_item(raw: Dict[str, Any]) -> Block:
    payload = raw["bulleted_list_item"]
    return BulletedListItemBlock(
        **_common(raw),
        text=_spans(payload),
        children=decode_children(payload.get("children") or []),
    )


def _decode_numbered_list_item(raw: Dict[str, Any]) -> Block:
    payload = raw["numbered_list_item"]
    return NumberedListItemBlock(
        **_common(raw),
        text=_spans(payload),
        children=decode_children(payload.get("children") or []),
    )


def _decode_to_do(raw: Dict[str, Any]) -> Block:
    payload = raw["to_do"]
    return TodoBlock(
        **_common(raw),
        text=_spans(payload),
        checked=payload.get("checked", False),
        children=decode_children(payload.get("children") or []),
    )


def _decode_toggle(raw: Dict[str, Any]) -> Block:
    payload = raw["toggle"]
    return ToggleBlock(
        **_common(raw),
        text=_spans(payload),
        children=decode_children(payload.get("children") or []),
    )


def _decode_child_page(raw: Dict[str, Any]) -> Block:
    return ChildPageBlock(**_common(raw), title=raw["child_page"].get("title", ""))


BLOCK_DECODERS: Dict[str, Callable[[Dict[str, Any]], Block]] = {
    "paragraph": _decode_paragraph,
    "heading_1": _decode_heading,
    "heading_2": _decode_heading,
    "heading_3": _decode_heading,
    "bulleted_list_item": _decode_bulleted_list_item,
    "numbered_list_item": _decode_numbered_list_item,
    "to_do": _decode_to_do,
    "toggle": _decode_toggle,
    "child_page": _decode_child_page,
}


def decode_block(raw: JsonValue) -> Block | JsonValue:
    """Decode a block object.

    Returns:
        One of the `Block` variants, or `raw` itself when the block type
        is not supported.
    """
    if not isinstance(raw, dict):
        logger.warning(f"Passing through non-object block: {raw!r}")
        return raw

    _type = raw.get("type")
    if not isinstance(_type, str) or not is_block_type(_type):
        logger.debug(f"Passing through block of unsupported type: {_type}")
        return raw

    return BLOCK_DECODERS[_type](raw)


def decode_children(raw: Sequence[JsonValue]) -> List[Block | JsonValue]:
    return [decode_block(block) for block in raw]


def _chunk(text: str, limit: int) -> List[str]:
    return [text[i : i + limit] for i in range(0, len(text), limit)] or [""]


def render_text(text: str | Sequence[RichText]) -> List[Dict[str, Any]]:
    """Render text for a block payload.

    Plain strings longer than the API limit are split into several spans.
    """
    if isinstance(text, str):
        return [
            {"type": "text", "text": {"content": chunk}}
            for chunk in _chunk(text, NOTION_RICH_TEXT_CONTENT_LIMIT)
        ]
    return richtext.encode_list(text)


def _render(_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"object": "block", "type": _type, _type: payload}


def paragraph(text: str | Sequence[RichText]) -> Dict[str, Any]:
    return _render("paragraph", {"rich_text": render_text(text)})


def heading(text: str | Sequence[RichText], level: int = 1) -> Dict[str, Any]:
    if level not in (1, 2, 3):
        raise ValueError(f"Invalid heading level: {level}. Expected 1, 2 or 3.")
    return _render(f"heading_{level}", {"rich_text": render_text(text)})


def bulleted_list_item(text: str | Sequence[RichText]) -> Dict[str, Any]:
    return _render("bulleted_list_item", {"rich_text": render_text(text)})


def numbered_list_item(text: str | Sequence[RichText]) -> Dict[str, Any]:
    return _render("numbered_list_item", {"rich_text": render_text(text)})


def to_do(text: str | Sequence[RichText], checked: bool = False) -> Dict[str, Any]:
    return _render("to_do", {"rich_text": render_text(text), "checked": checked})


def toggle(text: str | Sequence[RichText]) -> Dict[str, Any]:
    return _render("toggle", {"rich_text": render_text(text)})
