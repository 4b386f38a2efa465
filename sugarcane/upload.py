"""Planning and bookkeeping for uploading assets to storage."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from sugarcane.assets import AssetPair, CacheItem
from sugarcane.metadata import parse_metadata
from sugarcane.upload_errors import UploadError


@dataclass
class AssetType:
    """Indices of the assets whose image, metadata or animation need uploading."""

    image: list[int] = field(default_factory=list)
    metadata: list[int] = field(default_factory=list)
    animation: list[int] = field(default_factory=list)

    def needs_upload(self) -> bool:
        """True if any file of any kind is waiting to be uploaded."""
        return bool(self.image or self.metadata or self.animation)


def _animation_changed(item: CacheItem, pair: AssetPair) -> bool:
    if item.animation_hash is None or item.animation_link is None:
        return False
    return item.animation_hash != pair.animation_hash or item.animation_link == ""


def plan_upload(
    asset_pairs: Mapping[int, AssetPair],
    cache_items: MutableMapping[str, CacheItem],
) -> AssetType:
    """Work out what to upload and bring the cache entries up to date.

    Cache entries for new or changed images (or animations) are replaced with
    fresh ones; entries whose metadata alone changed lose their metadata link.
    """
    indices = AssetType()

    for index, pair in sorted(asset_pairs.items()):
        key = str(index)
        item = cache_items.get(key)

        if item is None:
            cache_items[key] = pair.into_cache_item()
            indices.image.append(index)
            indices.metadata.append(index)
            if pair.animation_hash is not None:
                indices.animation.append(index)
        elif item.image_hash != pair.image_hash or item.image_link == "":
            cache_items[key] = pair.into_cache_item()
            indices.image.append(index)
            indices.metadata.append(index)
            if item.animation_hash is not None or item.animation_link is not None:
                indices.animation.append(index)
        elif _animation_changed(item, pair):
            cache_items[key] = pair.into_cache_item()
            indices.animation.append(index)
            indices.image.append(index)
            indices.metadata.append(index)
        elif item.metadata_hash != pair.metadata_hash or item.metadata_link == "":
            item.metadata_hash = pair.metadata_hash
            item.metadata_link = ""
            item.on_chain = False
            indices.metadata.append(index)

    if len(indices.image) > len(indices.metadata):
        raise RuntimeError(
            f"There are more image files ({len(indices.image)}) to upload "
            f"than metadata ({len(indices.metadata)})"
        )

    return indices


def check_metadata_consistency(
    asset_pairs: Mapping[int, AssetPair],
    symbol: str,
    seller_fee_basis_points: int,
) -> None:
    """Ensure every metadata file has the configured symbol and seller fee."""
    for _, pair in sorted(asset_pairs.items()):
        content = Path(pair.metadata).read_bytes()
        try:
            metadata = parse_metadata(content)
        except ValueError as error:
            raise ValueError(f"Error parsing metadata ({pair.metadata}): {error}") from error

        if metadata.symbol != symbol:
            raise UploadError.mismatch_value(
                "symbol", pair.metadata, symbol, metadata.symbol
            )
        if metadata.seller_fee_basis_points != seller_fee_basis_points:
            raise UploadError.mismatch_value(
                "seller_fee_basis_points",
                pair.metadata,
                str(seller_fee_basis_points),
                str(metadata.seller_fee_basis_points),
            )


def drop_failed_metadata(
    indices: AssetType, cache_items: Mapping[str, CacheItem]
) -> list[int]:
    """Remove metadata indices whose image or animation upload failed.

    Returns the indices that were removed, in the order they were found.
    """
    failed: list[int] = []
    for index in indices.image:
        if cache_items[str(index)].image_link == "":
            failed.append(index)
    for index in indices.animation:
        if not cache_items[str(index)].animation_link:
            failed.append(index)

    dropped = set(failed)
    indices.metadata[:] = [index for index in indices.metadata if index not in dropped]
    return list(dict.fromkeys(failed))


def count_uploaded(cache_items: Mapping[str, CacheItem]) -> int:
    """Number of cache entries whose files have all been uploaded."""
    return sum(
        1
        for item in cache_items.values()
        if item.image_link != ""
        and item.metadata_link != ""
        and item.animation_link != ""
    )


def completion_error(
    count: int, total: int, errors: Iterable[Exception]
) -> UploadError | None:
    """The error to report when fewer than ``total`` assets were uploaded."""
    if count == total:
        return None

    errors = list(errors)
    if errors:
        unique = dict.fromkeys(str(error) for error in errors)
        message = f"Failed to upload all files, {len(errors)} error(s) occurred:"
        message += "".join(f"\n=> {text}" for text in unique)
    else:
        message = "Incorrect number of image/metadata pairs"

    return UploadError.incomplete(message)