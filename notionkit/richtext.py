"""Rich text spans.

Notion represents formatted text as a list of spans. Each span has a `type`
(`text`, `mention` or `equation`), a `plain_text` rendition, formatting
`annotations` and a payload stored under the key named by its type:

    {
        "type": "text",
        "text": {"content": "Tasks", "link": null},
        "annotations": {"bold": false, ..., "color": "default"},
        "plain_text": "Tasks",
        "href": null
    }

Details: https://developers.notion.com/reference/rich-text
"""
from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from pydantic.dataclasses import dataclass

from notionkit.errors import UnsupportedSpanType
from notionkit.types import Color, JsonValue, SpanType, is_span_type


@dataclass(frozen=True)
class Annotations:
    """Span formatting. Missing fields in a payload fall back to defaults."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: Color = "default"


@dataclass(frozen=True)
class Link:
    url: str


@dataclass(frozen=True)
class Text:
    content: str
    link: Link | None = None


@dataclass(frozen=True)
class Mention:
    """Mention of a user, page, database or date.

    Attributes:
        type (str): Kind of mention, i.e. `"user"`, `"page"`, `"date"`.
        value (JsonValue): Payload stored under `type` in the wire object,
            kept as is.
    """

    type: str
    value: JsonValue = None


@dataclass(frozen=True)
class Equation:
    expression: str


@dataclass(frozen=True)
class RichText:
    type: SpanType
    plain_text: str = ""
    annotations: Annotations = Annotations()
    href: str | None = None
    text: Text | None = None
    mention: Mention | None = None
    equation: Equation | None = None

    def __post_init__(self):
        payloads = {
            "text": self.text,
            "mention": self.mention,
            "equation": self.equation,
        }
        present = [name for name, value in payloads.items() if value is not None]
        if present != [self.type]:
            raise ValueError(
                f"Span of type `{self.type}` must carry only a `{self.type}` payload,"
                f" got: {present}"
            )


def _decode_annotations(raw: Dict[str, Any] | None) -> Annotations:
    raw = raw or {}
    return Annotations(
        bold=raw.get("bold", False),
        italic=raw.get("italic", False),
        strikethrough=raw.get("strikethrough", False),
        underline=raw.get("underline", False),
        code=raw.get("code", False),
        color=raw.get("color", "default"),
    )


def decode(raw: Dict[str, Any]) -> RichText:
    """Create a `RichText` from its API representation.

    Raises:
        UnsupportedSpanType: `type` is missing or not a known span type.
    """
    span_type = raw.get("type")
    if span_type is None or not is_span_type(span_type):
        raise UnsupportedSpanType(span_type)

    payload: Dict[str, Any] = {}
    match span_type:
        case "text":
            span = raw["text"]
            link = span.get("link")
            payload["text"] = Text(
                content=span["content"],
                link=Link(url=link["url"]) if link else None,
            )
        case "mention":
            mention = raw["mention"]
            mention_type = mention["type"]
            payload["mention"] = Mention(
                type=mention_type, value=mention.get(mention_type)
            )
        case "equation":
            payload["equation"] = Equation(expression=raw["equation"]["expression"])

    return RichText(
        type=span_type,
        plain_text=raw.get("plain_text", ""),
        annotations=_decode_annotations(raw.get("annotations")),
        href=raw.get("href"),
        **payload,
    )


def encode(rich_text: RichText) -> Dict[str, Any]:
    """Render `RichText` in API representation. Inverse of `decode()`."""
    result: Dict[str, Any] = {
        "type": rich_text.type,
        "plain_text": rich_text.plain_text,
        "annotations": asdict(rich_text.annotations),
        "href": rich_text.href,
    }

    match rich_text.type:
        case "text":
            if rich_text.text is None:
                raise ValueError("Text span without `text` payload")
            link = rich_text.text.link
            result["text"] = {
                "content": rich_text.text.content,
                "link": {"url": link.url} if link else None,
            }
        case "mention":
            if rich_text.mention is None:
                raise ValueError("Mention span without `mention` payload")
            mention_type = rich_text.mention.type
            result["mention"] = {
                "type": mention_type,
                mention_type: rich_text.mention.value,
            }
        case "equation":
            if rich_text.equation is None:
                raise ValueError("Equation span without `equation` payload")
            result["equation"] = {"expression": rich_text.equation.expression}

    return result


def decode_list(raw: Sequence[Dict[str, Any]]) -> List[RichText]:
    return [decode(span) for span in raw]


def encode_list(spans: Sequence[RichText]) -> List[Dict[str, Any]]:
    return [encode(span) for span in spans]


def plain_text(spans: Sequence[RichText]) -> str:
    return "".join(span.plain_text for span in spans)


def text(content: str, link: str | None = None, **annotations: Any) -> RichText:
    """Build a text span, i.e. for block payloads.

    Args:
        content: Text content.
        link: Optional URL the text links to.
        **annotations: `Annotations` fields, i.e. `bold=True`, `color="red"`.

    Returns:
        Text span with `plain_text` set to `content`.
    """
    return RichText(
        type="text",
        plain_text=content,
        annotations=Annotations(**annotations),
        href=link,
        text=Text(content=content, link=Link(url=link) if link else None),
    )
