"""Token metadata documents: parsing, serialisation and field checks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

MAX_NAME_LENGTH = 32
MAX_SYMBOL_LENGTH = 10
MAX_URI_LENGTH = 200
MAX_SELLER_FEE_BASIS_POINTS = 10_000
_U16_MAX = 0xFFFF


class ValidateError(Exception):
    """A metadata document or assets directory failed validation."""

    MISSING_OR_EMPTY_ASSETS_DIRECTORY = "Missing or empty assets directory"
    INVALID_ASSETS_DIRECTORY = "Invalid assets directory"
    NAME_TOO_LONG = "Name exceeds 32 chars."
    SYMBOL_TOO_LONG = "Symbol exceeds 10 chars."
    URL_TOO_LONG = "Url exceeds 200 chars."
    INVALID_CREATOR_SHARE = "Creators' share does not equal 100%."
    INVALID_SELLER_FEE_BASIS_POINTS = (
        "Seller fee basis points must be between 0 and 10,000."
    )
    MISSING_ANIMATION_URL = "Missing animation url field"
    MISSING_EXTERNAL_URL = "Missing external url field"
    MISSING_COLLECTION = "Missing collection field"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def invalid_creator_address(cls, address: str) -> "ValidateError":
        return cls(f"Creator address: {address} is invalid.")


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def check_name(name: str) -> None:
    """Raise if the name is longer than the on-chain limit (in bytes)."""
    if _byte_length(name) > MAX_NAME_LENGTH:
        raise ValidateError(ValidateError.NAME_TOO_LONG)


def check_symbol(symbol: str) -> None:
    """Raise if the symbol is longer than the on-chain limit (in bytes)."""
    if _byte_length(symbol) > MAX_SYMBOL_LENGTH:
        raise ValidateError(ValidateError.SYMBOL_TOO_LONG)


def check_url(url: str) -> None:
    """Raise if the URL is longer than the on-chain limit (in bytes)."""
    if _byte_length(url) > MAX_URI_LENGTH:
        raise ValidateError(ValidateError.URL_TOO_LONG)


def check_seller_fee_basis_points(seller_fee_basis_points: int) -> None:
    """Raise if the seller fee exceeds 10,000 basis points."""
    if seller_fee_basis_points > MAX_SELLER_FEE_BASIS_POINTS:
        raise ValidateError(ValidateError.INVALID_CREATOR_SHARE)


@dataclass
class Collection:
    name: str = ""
    family: str = ""


@dataclass
class FileAttr:
    uri: str = ""
    file_type: str = ""


@dataclass
class Property:
    files: list[FileAttr] = field(default_factory=list)
    category: str = ""


@dataclass
class Attribute:
    trait_type: str = ""
    value: str = ""


@dataclass
class Metadata:
    name: str = ""
    symbol: str = ""
    description: str = ""
    seller_fee_basis_points: int = 0
    image: str = ""
    animation_url: str | None = None
    external_url: str | None = None
    attributes: list[Attribute] = field(default_factory=list)
    collection: Collection | None = None
    properties: Property = field(default_factory=Property)

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain JSON-ready data."""
        return {
            "name": self.name,
            "symbol": self.symbol,
            "description": self.description,
            "seller_fee_basis_points": self.seller_fee_basis_points,
            "image": self.image,
            "animation_url": self.animation_url,
            "external_url": self.external_url,
            "attributes": [
                {"trait_type": a.trait_type, "value": a.value}
                for a in self.attributes
            ],
            "collection": (
                None
                if self.collection is None
                else {"name": self.collection.name, "family": self.collection.family}
            ),
            "properties": {
                "files": [
                    {"uri": f.uri, "type": f.file_type} for f in self.properties.files
                ],
                "category": self.properties.category,
            },
        }

    def validate(self) -> None:
        """Check name, symbol, image URL and seller fee."""
        check_name(self.name)
        check_symbol(self.symbol)
        check_url(self.image)
        check_seller_fee_basis_points(self.seller_fee_basis_points)

    def validate_strict(self) -> None:
        """Like validate, but also require animation URL, collection and external URL."""
        if self.animation_url is None:
            raise ValidateError(ValidateError.MISSING_ANIMATION_URL)
        check_url(self.animation_url)

        if self.collection is None:
            raise ValidateError(ValidateError.MISSING_COLLECTION)

        if self.external_url is None:
            raise ValidateError(ValidateError.MISSING_EXTERNAL_URL)
        check_url(self.external_url)

        self.validate()


def _object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"expected an object for {where}")
    return value


def _required(obj: dict[str, Any], key: str, where: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing field `{key}` in {where}")
    return obj[key]


def _string(obj: dict[str, Any], key: str, where: str) -> str:
    value = _required(obj, key, where)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` in {where} must be a string")
    return value


def _optional_string(obj: dict[str, Any], key: str, where: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` in {where} must be a string or null")
    return value


def _u16(obj: dict[str, Any], key: str, where: str) -> int:
    value = _required(obj, key, where)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` in {where} must be an integer")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"field `{key}` in {where} is out of range: {value}")
    return value


def _list(obj: dict[str, Any], key: str, where: str) -> list[Any]:
    value = _required(obj, key, where)
    if not isinstance(value, list):
        raise ValueError(f"field `{key}` in {where} must be an array")
    return value


def _parse_attribute(value: Any) -> Attribute:
    obj = _object(value, "attribute")
    return Attribute(
        trait_type=_string(obj, "trait_type", "attribute"),
        value=_string(obj, "value", "attribute"),
    )


def _parse_collection(value: Any) -> Collection | None:
    if value is None:
        return None
    obj = _object(value, "collection")
    return Collection(
        name=_string(obj, "name", "collection"),
        family=_string(obj, "family", "collection"),
    )


def _parse_file(value: Any) -> FileAttr:
    obj = _object(value, "file")
    return FileAttr(uri=_string(obj, "uri", "file"), file_type=_string(obj, "type", "file"))


def _parse_properties(value: Any) -> Property:
    obj = _object(value, "properties")
    return Property(
        files=[_parse_file(item) for item in _list(obj, "files", "properties")],
        category=_string(obj, "category", "properties"),
    )


def parse_metadata(data: str | bytes | dict[str, Any]) -> Metadata:
    """Build a Metadata from JSON text or already-decoded data.

    Raises ValueError when the document is malformed.
    """
    decoded = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
    obj = _object(decoded, "metadata")
    where = "metadata"
    return Metadata(
        name=_string(obj, "name", where),
        symbol=_string(obj, "symbol", where),
        description=_string(obj, "description", where),
        seller_fee_basis_points=_u16(obj, "seller_fee_basis_points", where),
        image=_string(obj, "image", where),
        animation_url=_optional_string(obj, "animation_url", where),
        external_url=_optional_string(obj, "external_url", where),
        attributes=[_parse_attribute(a) for a in _list(obj, "attributes", where)],
        collection=_parse_collection(obj.get("collection")),
        properties=_parse_properties(_required(obj, "properties", where)),
    )


def load_metadata(path: str | PathLike[str]) -> Metadata:
    """Read and parse a metadata JSON file."""
    return parse_metadata(Path(path).read_bytes())