"""Page and database properties.

Every property object carries a `type` discriminator and stores its payload
under the key named by that discriminator:

    {"id": "vd@l", "type": "multi_select", "multi_select": {"options": []}}

Database responses describe the property schema (`options`, `format`,
`expression`...), page responses carry property values. Both decode into
the same variant; schema-only and value-only fields are left at their
defaults when absent.

Details: https://developers.notion.com/reference/property-object
"""
import logging
from dataclasses import field
from typing import Any, Callable, Dict, List, Literal, Mapping

from pydantic.dataclasses import dataclass

from notionkit import richtext
from notionkit.errors import UnsupportedPropertyType
from notionkit.richtext import RichText
from notionkit.types import Color, JsonValue, is_property_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectOption:
    name: str
    id: str | None = None
    color: Color = "default"


@dataclass(frozen=True)
class Relation:
    database_id: str
    synced_property_name: str | None = None
    synced_property_id: str | None = None


@dataclass(frozen=True)
class Rollup:
    relation_property_name: str
    relation_property_id: str
    rollup_property_name: str
    rollup_property_id: str
    function: str


class _Typed:
    def get_type(self) -> str:
        return self.type  # type: ignore[attr-defined]


@dataclass(frozen=True)
class PageTitleProperty(_Typed):
    """Title of a page: a list of rich text spans."""

    id: str
    type: Literal["title"] = "title"
    title: List[RichText] = field(default_factory=list)


@dataclass(frozen=True)
class DatabaseTitleProperty(_Typed):
    """Title column of a database schema: a nested object, usually empty."""

    id: str
    type: Literal["title"] = "title"
    title: Dict[str, JsonValue] | None = None


@dataclass(frozen=True)
class RichTextProperty(_Typed):
    id: str
    type: Literal["rich_text"] = "rich_text"
    rich_text: List[RichText] = field(default_factory=list)


@dataclass(frozen=True)
class NumberProperty(_Typed):
    id: str
    type: Literal["number"] = "number"
    format: str | None = None
    number: int | float | None = None


@dataclass(frozen=True)
class SelectProperty(_Typed):
    id: str
    type: Literal["select"] = "select"
    options: List[SelectOption] = field(default_factory=list)
    select: SelectOption | None = None


@dataclass(frozen=True)
class MultiSelectProperty(_Typed):
    id: str
    type: Literal["multi_select"] = "multi_select"
    options: List[SelectOption] = field(default_factory=list)
    multi_select: List[SelectOption] = field(default_factory=list)


@dataclass(frozen=True)
class DateProperty(_Typed):
    id: str
    type: Literal["date"] = "date"
    date: JsonValue = None


@dataclass(frozen=True)
class PeopleProperty(_Typed):
    id: str
    type: Literal["people"] = "people"
    people: JsonValue = None


@dataclass(frozen=True)
class FilesProperty(_Typed):
    id: str
    type: Literal["files"] = "files"
    files: JsonValue = None


@dataclass(frozen=True)
class CheckboxProperty(_Typed):
    id: str
    type: Literal["checkbox"] = "checkbox"
    checkbox: JsonValue = None


@dataclass(frozen=True)
class URLProperty(_Typed):
    id: str
    type: Literal["url"] = "url"
    url: JsonValue = None


@dataclass(frozen=True)
class EmailProperty(_Typed):
    id: str
    type: Literal["email"] = "email"
    email: JsonValue = None


@dataclass(frozen=True)
class PhoneNumberProperty(_Typed):
    id: str
    type: Literal["phone_number"] = "phone_number"
    phone_number: JsonValue = None


@dataclass(frozen=True)
class FormulaProperty(_Typed):
    id: str
    type: Literal["formula"] = "formula"
    expression: str | None = None
    formula: JsonValue = None


@dataclass(frozen=True)
class RelationProperty(_Typed):
    id: str
    type: Literal["relation"] = "relation"
    relation: Relation | None = None
    pages: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RollupProperty(_Typed):
    id: str
    type: Literal["rollup"] = "rollup"
    rollup: Rollup | None = None
    value: JsonValue = None


@dataclass(frozen=True)
class CreatedTimeProperty(_Typed):
    id: str
    type: Literal["created_time"] = "created_time"
    created_time: JsonValue = None


@dataclass(frozen=True)
class CreatedByProperty(_Typed):
    id: str
    type: Literal["created_by"] = "created_by"
    created_by: JsonValue = None


@dataclass(frozen=True)
class LastEditedTimeProperty(_Typed):
    id: str
    type: Literal["last_edited_time"] = "last_edited_time"
    last_edited_time: JsonValue = None


@dataclass(frozen=True)
class LastEditedByProperty(_Typed):
    id: str
    type: Literal["last_edited_by"] = "last_edited_by"
    last_edited_by: JsonValue = None


Property = (
    PageTitleProperty
    | DatabaseTitleProperty
    | RichTextProperty
    | NumberProperty
    | SelectProperty
    | MultiSelectProperty
    | DateProperty
    | PeopleProperty
    | FilesProperty
    | CheckboxProperty
    | URLProperty
    | EmailProperty
    | PhoneNumberProperty
    | FormulaProperty
    | RelationProperty
    | RollupProperty
    | CreatedTimeProperty
    | CreatedByProperty
    | LastEditedTimeProperty
    | LastEditedByProperty
)


def _decode_option(raw: Dict[str, Any]) -> SelectOption:
    return SelectOption(
        name=raw["name"], id=raw.get("id"), color=raw.get("color", "default")
    )


def _decode_title(raw: Dict[str, Any]) -> Property:
    # Databases describe the title column with an object, pages hold spans.
    title = raw.get("title")
    if isinstance(title, dict):
        return DatabaseTitleProperty(id=raw["id"], title=title)
    return PageTitleProperty(id=raw["id"], title=richtext.decode_list(title or []))


def _decode_rich_text(raw: Dict[str, Any]) -> Property:
    value = raw.get("rich_text")
    spans = richtext.decode_list(value) if isinstance(value, list) else []
    return RichTextProperty(id=raw["id"], rich_text=spans)


def _decode_number(raw: Dict[str, Any]) -> Property:
    value = raw.get("number")
    if isinstance(value, dict):
        return NumberProperty(id=raw["id"], format=value.get("format"))
    return NumberProperty(id=raw["id"], number=value)


def _decode_select(raw: Dict[str, Any]) -> Property:
    value = raw.get("select")
    if value is None:
        return SelectProperty(id=raw["id"])
    if "options" in value:
        return SelectProperty(
            id=raw["id"], options=[_decode_option(o) for o in value["options"]]
        )
    return SelectProperty(id=raw["id"], select=_decode_option(value))


def _decode_multi_select(raw: Dict[str, Any]) -> Property:
    value = raw.get("multi_select")
    if isinstance(value, dict):
        return MultiSelectProperty(
            id=raw["id"],
            options=[_decode_option(o) for o in value.get("options", [])],
        )
    return MultiSelectProperty(
        id=raw["id"], multi_select=[_decode_option(o) for o in value or []]
    )


def _decode_formula(raw: Dict[str, Any]) -> Property:
    value = raw.get("formula")
    if isinstance(value, dict) and "expression" in value:
        return FormulaProperty(id=raw["id"], expression=value["expression"])
    return FormulaProperty(id=raw["id"], formula=value)


def _decode_relation(raw: Dict[str, Any]) -> Property:
    value = raw.get("relation")
    if isinstance(value, dict):
        relation = Relation(
            database_id=value["database_id"],
            synced_property_name=value.get("synced_property_name"),
            synced_property_id=value.get("synced_property_id"),
        )
        return RelationProperty(id=raw["id"], relation=relation)
    return RelationProperty(id=raw["id"], pages=[page["id"] for page in value or []])


def _decode_rollup(raw: Dict[str, Any]) -> Property:
    value = raw.get("rollup")
    if isinstance(value, dict) and "function" in value and "type" not in value:
        rollup = Rollup(
            relation_property_name=value["relation_property_name"],
            relation_property_id=value["relation_property_id"],
            rollup_property_name=value["rollup_property_name"],
            rollup_property_id=value["rollup_property_id"],
            function=value["function"],
        )
        return RollupProperty(id=raw["id"], rollup=rollup)
    return RollupProperty(id=raw["id"], value=value)


def _opaque(cls: type, key: str) -> Callable[[Dict[str, Any]], Property]:
    def _decode(raw: Dict[str, Any]) -> Property:
        return cls(id=raw["id"], **{key: raw.get(key)})

    return _decode


PROPERTY_DECODERS: Dict[str, Callable[[Dict[str, Any]], Property]] = {
    "title": _decode_title,
    "rich_text": _decode_rich_text,
    "number": _decode_number,
    "select": _decode_select,
    "multi_select": _decode_multi_select,
    "date": _opaque(DateProperty, "date"),
    "people": _opaque(PeopleProperty, "people"),
    "files": _opaque(FilesProperty, "files"),
    "checkbox": _opaque(CheckboxProperty, "checkbox"),
    "url": _opaque(URLProperty, "url"),
    "email": _opaque(EmailProperty, "email"),
    "phone_number": _opaque(PhoneNumberProperty, "phone_number"),
    "formula": _decode_formula,
    "relation": _decode_relation,
    "rollup": _decode_rollup,
    "created_time": _opaque(CreatedTimeProperty, "created_time"),
    "created_by": _opaque(CreatedByProperty, "created_by"),
    "last_edited_time": _opaque(LastEditedTimeProperty, "last_edited_time"),
    "last_edited_by": _opaque(LastEditedByProperty, "last_edited_by"),
}


def decode_property(raw: Dict[str, Any]) -> Property:
    """Decode a single property object.

    Raises:
        UnsupportedPropertyType: `type` is not a known property type.
    """
    _type = raw["type"]
    if not is_property_type(_type):
        raise UnsupportedPropertyType(_type)
    return PROPERTY_DECODERS[_type](raw)


def decode_properties(raw: Mapping[str, Any]) -> Dict[str, Property]:
    """Decode a `properties` map of a page or a database.

    Entries without a `type` key are skipped: callers should not expect
    every raw entry to be present in the result.

    Args:
        raw: Property name to property object, as returned by the API.

    Returns:
        Property name to decoded property.

    Raises:
        UnsupportedPropertyType: One of the entries has an unknown `type`.
            Nothing is returned in that case.
    """
    properties: Dict[str, Property] = {}
    for name, value in raw.items():
        if not isinstance(value, dict) or "type" not in value:
            logger.debug(f"Skipping property without type: {name}")
            continue
        properties[name] = decode_property(value)
    return properties
