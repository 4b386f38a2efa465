import json

import pytest

from sugarcane.metadata import (
    MAX_NAME_LENGTH,
    MAX_SYMBOL_LENGTH,
    MAX_URI_LENGTH,
    Attribute,
    Collection,
    FileAttr,
    Metadata,
    Property,
    ValidateError,
    check_name,
    check_seller_fee_basis_points,
    check_symbol,
    check_url,
    load_metadata,
    parse_metadata,
)


def sample_document():
    return {
        "name": "Item 0",
        "symbol": "SYM",
        "description": "An item",
        "seller_fee_basis_points": 500,
        "image": "0.png",
        "animation_url": "0.mp4",
        "external_url": "https://example.com",
        "attributes": [{"trait_type": "color", "value": "red"}],
        "collection": {"name": "Things", "family": "Stuff"},
        "properties": {
            "files": [{"uri": "0.png", "type": "image/png"}],
            "category": "image",
        },
    }


def test_check_name_limit():
    check_name("a" * MAX_NAME_LENGTH)
    with pytest.raises(ValidateError, match="Name exceeds 32 chars."):
        check_name("a" * (MAX_NAME_LENGTH + 1))


def test_check_name_counts_bytes():
    with pytest.raises(ValidateError) as info:
        check_name("é" * 17)
    assert info.value.message == ValidateError.NAME_TOO_LONG


def test_check_symbol_limit():
    check_symbol("S" * MAX_SYMBOL_LENGTH)
    with pytest.raises(ValidateError, match="Symbol exceeds 10 chars."):
        check_symbol("S" * (MAX_SYMBOL_LENGTH + 1))


def test_check_url_limit():
    check_url("u" * MAX_URI_LENGTH)
    with pytest.raises(ValidateError, match="Url exceeds 200 chars."):
        check_url("u" * (MAX_URI_LENGTH + 1))


def test_check_seller_fee_basis_points():
    check_seller_fee_basis_points(10000)
    with pytest.raises(ValidateError) as info:
        check_seller_fee_basis_points(10001)
    assert info.value.message == ValidateError.INVALID_CREATOR_SHARE


def test_parse_full_document():
    metadata = parse_metadata(json.dumps(sample_document()))
    assert metadata.name == "Item 0"
    assert metadata.seller_fee_basis_points == 500
    assert metadata.collection == Collection(name="Things", family="Stuff")
    assert metadata.attributes == [Attribute(trait_type="color", value="red")]
    assert metadata.properties == Property(
        files=[FileAttr(uri="0.png", file_type="image/png")], category="image"
    )


def test_round_trip():
    document = sample_document()
    assert parse_metadata(document).to_dict() == document
    metadata = parse_metadata(document)
    assert parse_metadata(json.dumps(metadata.to_dict())) == metadata


def test_optional_fields_may_be_missing():
    document = sample_document()
    for key in ("animation_url", "external_url", "collection"):
        del document[key]
    metadata = parse_metadata(document)
    assert metadata.animation_url is None
    assert metadata.collection is None
    assert metadata.to_dict()["external_url"] is None


def test_unknown_fields_ignored():
    document = sample_document()
    document["extra"] = {"anything": 1}
    assert parse_metadata(document).to_dict() == sample_document()


@pytest.mark.parametrize("key", ["name", "symbol", "description", "image", "attributes", "properties"])
def test_missing_required_field(key):
    document = sample_document()
    del document[key]
    with pytest.raises(ValueError, match=key):
        parse_metadata(document)


@pytest.mark.parametrize("value", [-1, 70000, 5.0, "500", True])
def test_bad_seller_fee(value):
    document = sample_document()
    document["seller_fee_basis_points"] = value
    with pytest.raises(ValueError):
        parse_metadata(document)


def test_bad_json():
    with pytest.raises(ValueError):
        parse_metadata("{not json")


def test_attribute_value_must_be_string():
    document = sample_document()
    document["attributes"] = [{"trait_type": "level", "value": 3}]
    with pytest.raises(ValueError):
        parse_metadata(document)


def test_validate_rejects_long_symbol():
    metadata = parse_metadata(sample_document())
    metadata.symbol = "X" * 11
    with pytest.raises(ValidateError, match="Symbol"):
        metadata.validate()


def test_validate_strict_ok():
    metadata = parse_metadata(sample_document())
    metadata.validate_strict()
    assert metadata.animation_url == "0.mp4"


@pytest.mark.parametrize(
    "key, message",
    [
        ("animation_url", ValidateError.MISSING_ANIMATION_URL),
        ("collection", ValidateError.MISSING_COLLECTION),
        ("external_url", ValidateError.MISSING_EXTERNAL_URL),
    ],
)
def test_validate_strict_missing(key, message):
    document = sample_document()
    del document[key]
    metadata = parse_metadata(document)
    metadata.validate()
    with pytest.raises(ValidateError) as info:
        metadata.validate_strict()
    assert info.value.message == message


def test_validate_strict_order_checks_animation_first():
    metadata = Metadata(name="n" * 40)
    with pytest.raises(ValidateError) as info:
        metadata.validate_strict()
    assert info.value.message == ValidateError.MISSING_ANIMATION_URL


def test_invalid_creator_address_message():
    error = ValidateError.invalid_creator_address("abc")
    assert str(error) == "Creator address: abc is invalid."


def test_load_metadata(tmp_path):
    path = tmp_path / "0.json"
    path.write_text(json.dumps(sample_document()), encoding="utf-8")
    assert load_metadata(path).to_dict() == sample_document()