import pytest

from notionkit import properties
from notionkit.errors import UnsupportedPropertyType
from notionkit.properties import (
    DatabaseTitleProperty,
    FormulaProperty,
    MultiSelectProperty,
    NumberProperty,
    PageTitleProperty,
    Relation,
    RelationProperty,
    RichTextProperty,
    Rollup,
    RollupProperty,
    SelectOption,
    SelectProperty,
    decode_properties,
)
from notionkit.richtext import RichText, Text
from notionkit.types import PROPERTY_TYPES


def test_all_property_types():
    for _type in PROPERTY_TYPES:
        result = decode_properties({"k": {"id": "abc", "type": _type}})
        assert list(result) == ["k"]
        assert result["k"].get_type() == _type
        assert result["k"].id == "abc"

    assert set(properties.PROPERTY_DECODERS) == set(PROPERTY_TYPES)


def test_unsupported_property_type():
    raw = {
        "Name": {"id": "title", "type": "title", "title": []},
        "Status": {"id": "s", "type": "status", "status": {}},
    }

    with pytest.raises(UnsupportedPropertyType, match=r"status") as e:
        decode_properties(raw)

    assert e.value.discriminator == "status"


def test_title_shapes():
    result = decode_properties(
        {
            "Database": {"id": "title", "type": "title", "title": {}},
            "Page": {
                "id": "title",
                "type": "title",
                "title": [
                    {
                        "type": "text",
                        "text": {"content": "Task 1"},
                        "plain_text": "Task 1",
                    }
                ],
            },
            "Empty page": {"id": "title", "type": "title", "title": []},
        }
    )

    assert result["Database"] == DatabaseTitleProperty(id="title", title={})
    assert result["Page"] == PageTitleProperty(
        id="title",
        title=[RichText(type="text", plain_text="Task 1", text=Text(content="Task 1"))],
    )
    assert result["Empty page"] == PageTitleProperty(id="title")


def test_skip_without_type():
    result = decode_properties(
        {
            "Typed": {"id": "a", "type": "checkbox", "checkbox": True},
            "Untyped": {"id": "b", "checkbox": False},
            "Not an object": "value",
        }
    )

    assert list(result) == ["Typed"]
    assert result["Typed"].checkbox is True


def test_database_schema(load_json):
    result = decode_properties(load_json("database.json")["properties"])

    assert result["Name"] == DatabaseTitleProperty(id="title", title={})
    assert result["Description"] == RichTextProperty(id="J@cS")
    assert result["Price"] == NumberProperty(id="evWq", format="dollar")
    assert result["Food group"] == SelectProperty(
        id="TJmr",
        options=[
            SelectOption(
                id="96eb622f-4b88-4283-919d-ece2fbed3841",
                name="Vegetable",
                color="green",
            ),
            SelectOption(
                id="bb443819-81dc-46fb-882d-ebee6e22c432", name="Fruit", color="red"
            ),
        ],
    )
    assert result["Cost of next trip"] == FormulaProperty(
        id="WOd%3B", expression='if(prop("In stock"), 0, prop("Price"))'
    )
    assert result["Recipes"] == RelationProperty(
        id="YfIu",
        relation=Relation(
            database_id="c7c11cca-454b-4ef4-a7a2-7c0f4e8b0b6f",
            synced_property_name="Ingredients",
            synced_property_id="Y%3D%3Fm",
        ),
    )
    assert result["Number of recipes"] == RollupProperty(
        id="qAeL",
        rollup=Rollup(
            relation_property_name="Recipes",
            relation_property_id="YfIu",
            rollup_property_name="Name",
            rollup_property_id="title",
            function="count",
        ),
    )
    assert result["Last ordered"].date == {}


def test_page_values(load_json):
    result = decode_properties(load_json("page.json")["properties"])

    assert len(result) == 10
    assert [s.plain_text for s in result["Name"].title] == ["Tuscan kale"]
    assert [s.plain_text for s in result["Description"].rich_text] == [
        "A dark green leafy vegetable"
    ]
    assert result["Price"] == NumberProperty(id="BJXS", number=2.5)
    assert result["Store availability"] == MultiSelectProperty(
        id="%3E%5Ehh",
        multi_select=[
            SelectOption(id="t|O@", name="Gus's Community Market", color="yellow"),
            SelectOption(id="{Ml\\", name="Rainbow Grocery", color="gray"),
        ],
    )
    assert result["Food group"].select == SelectOption(
        id="5e8e7e8f-432e-4d8a-8166-1821e10225fc", name="Vegetable", color="pink"
    )
    assert result["Food group"].options == []
    assert result["In stock"].checkbox is True
    assert result["Last ordered"].date == {
        "start": "2022-02-22",
        "end": None,
        "time_zone": None,
    }
    assert result["Recipes"] == RelationProperty(
        id="YfIu", pages=["90eeeed8-2cdd-4af4-9cc1-3d24aff5f63c"]
    )
    assert result["Cost of next trip"] == FormulaProperty(
        id="WOd%3B", formula={"type": "number", "number": 0}
    )
    assert result["Photo"].url is None


def test_rollup_value():
    result = properties.decode_property(
        {
            "id": "qAeL",
            "type": "rollup",
            "rollup": {"type": "number", "number": 3, "function": "count"},
        }
    )

    assert result == RollupProperty(
        id="qAeL", value={"type": "number", "number": 3, "function": "count"}
    )


def test_empty_select_value():
    result = properties.decode_property({"id": "x", "type": "select", "select": None})

    assert result == SelectProperty(id="x")


def test_decode_is_deterministic(load_json):
    raw = load_json("page.json")["properties"]

    assert decode_properties(raw) == decode_properties(raw)


def test_large_integer_number():
    result = properties.decode_property(
        {"id": "n", "type": "number", "number": 2**53 + 1}
    )

    assert result.number == 9007199254740993
    assert isinstance(result.number, int)
