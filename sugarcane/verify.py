"""Comparison of cached items with the config lines stored on chain."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from sugarcane.assets import CacheItem


class VerifyError(Exception):
    """Verification of the on-chain data failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def failed_to_get_account_data(cls, address: str) -> "VerifyError":
        return cls(
            "Failed to get candy machine account data from Solana for address: "
            f"{address}."
        )

    @classmethod
    def mismatch(cls, field: str, expected: str, found: str) -> "VerifyError":
        error = cls(f"{field} mismatch (expected='{expected}', found='{found}')")
        error.field = field
        error.expected = expected
        error.found = found
        return error


@dataclass
class OnChainItem:
    name: str
    uri: str


def items_match(cache_item: CacheItem, on_chain_item: OnChainItem) -> None:
    """Raise VerifyError if the name or metadata link differs from the chain."""
    if cache_item.name != on_chain_item.name:
        raise VerifyError.mismatch("name", cache_item.name, on_chain_item.name)
    if cache_item.metadata_link != on_chain_item.uri:
        raise VerifyError.mismatch("uri", cache_item.metadata_link, on_chain_item.uri)


def find_mismatches(
    cache_items: Mapping[str, CacheItem], on_chain_items: Sequence[OnChainItem]
) -> list[tuple[str, str]]:
    """Check every cached item against the on-chain line at the same index.

    Mismatched items are marked as not on chain; returns (index, reason) pairs.
    """
    if len(on_chain_items) < len(cache_items):
        raise ValueError(
            f"Expected {len(cache_items)} on-chain item(s), found {len(on_chain_items)}"
        )

    errors: list[tuple[str, str]] = []
    for index, on_chain_item in enumerate(on_chain_items[: len(cache_items)]):
        key = str(index)
        try:
            cache_item = cache_items[key]
        except KeyError:
            raise KeyError("Failed to get item from config.") from None
        try:
            items_match(cache_item, on_chain_item)
        except VerifyError as error:
            cache_item.on_chain = False
            errors.append((key, str(error)))
    return errors