"""Discovery and hashing of image/metadata/animation asset files."""

from __future__ import annotations

import enum
import fnmatch
import hashlib
import json
import os
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from sugarcane.metadata import load_metadata, parse_metadata

_CHUNK_SIZE = 1024
_INDEX = re.compile(r"\+?[0-9]+")
_ANIMATION_FILE = re.compile(r"(.+)\.((mp4)|(mov)|(webm))")
_IMAGE_EXTENSIONS = "(jpg)|(gif)|(png)"
_ANIMATION_EXTENSIONS = "(mp4)|(mov)|(webm)"


class DataType(enum.Enum):
    IMAGE = "image"
    METADATA = "metadata"
    ANIMATION = "animation"


@dataclass
class CacheItem:
    name: str
    image_hash: str
    image_link: str
    metadata_hash: str
    metadata_link: str
    on_chain: bool
    animation_hash: str | None = None
    animation_link: str | None = None


@dataclass
class AssetPair:
    name: str
    metadata: str
    metadata_hash: str
    image: str
    image_hash: str
    animation: str | None = None
    animation_hash: str | None = None

    def into_cache_item(self) -> CacheItem:
        """A fresh cache entry with no uploaded links yet."""
        return CacheItem(
            name=self.name,
            image_hash=self.image_hash,
            image_link="",
            metadata_hash=self.metadata_hash,
            metadata_link="",
            on_chain=False,
            animation_hash=self.animation_hash,
            animation_link=self.animation,
        )


def get_data_size(assets_dir: str | PathLike[str], extension: str) -> int:
    """Total size in bytes of the ``*.<extension>`` entries of the directory."""
    pattern = f"*.{extension}"
    return sum(
        entry.stat().st_size
        for entry in Path(assets_dir).iterdir()
        if fnmatch.fnmatchcase(entry.name, pattern)
    )


def list_files(assets_dir: str | PathLike[str]) -> list[Path]:
    """Regular, non-hidden files of the directory, sorted by name."""
    try:
        with os.scandir(assets_dir) as entries:
            files = [
                Path(entry.path)
                for entry in entries
                if not entry.name.startswith(".")
                and entry.is_file(follow_symlinks=False)
            ]
    except OSError as error:
        raise OSError("Failed to read assets directory") from error
    return sorted(files, key=lambda path: path.name)


def _parse_index(text: str) -> int | None:
    return int(text) if _INDEX.fullmatch(text) else None


def _first_with_extension(names: list[str], stem: str, extensions: str) -> str | None:
    pattern = re.compile(rf"{re.escape(stem)}\.({extensions})", re.IGNORECASE)
    return next((name for name in names if pattern.fullmatch(name)), None)


def get_asset_pairs(assets_dir: str | PathLike[str]) -> dict[int, AssetPair]:
    """Group the directory's files into assets keyed by their numeric index.

    Every ``<n>.json`` needs a ``<n>.jpg|gif|png`` image; a ``<n>.mp4|mov|webm``
    animation is optional. Raises ValueError on badly named or malformed files.
    """
    directory = os.fspath(assets_dir)
    names = [path.name for path in list_files(directory)]

    for name in names:
        match = _ANIMATION_FILE.fullmatch(name)
        if match and _parse_index(match.group(1)) is None:
            raise ValueError(f"Couldn't parse filename '{name}' to a valid index  number.")

    pairs: dict[int, AssetPair] = {}

    for metadata_name in (name for name in names if name.lower().endswith(".json")):
        stem = metadata_name.split(".")[0]
        index = _parse_index(stem)
        if index is None:
            raise ValueError(
                f"Couldn't parse filename '{metadata_name}' to a valid index number."
            )

        image_name = _first_with_extension(names, stem, _IMAGE_EXTENSIONS)
        if image_name is None:
            raise ValueError(
                f"Couldn't parse image filename at index {index} to a valid index number."
            )
        animation_name = _first_with_extension(names, stem, _ANIMATION_EXTENSIONS)

        metadata_path = os.path.join(directory, metadata_name)
        try:
            metadata = load_metadata(metadata_path)
        except ValueError as error:
            raise ValueError(
                f"Failed to read metadata file '{metadata_path}' with error: {error}"
            ) from error

        image_path = os.path.join(directory, image_name)
        animation_path = (
            os.path.join(directory, animation_name) if animation_name is not None else None
        )

        pairs[index] = AssetPair(
            name=metadata.name,
            metadata=metadata_path,
            metadata_hash=encode(metadata_path),
            image=image_path,
            image_hash=encode(image_path),
            animation=animation_path,
            animation_hash=encode(animation_path) if animation_path is not None else None,
        )

    return pairs


def encode(path: str | PathLike[str]) -> str:
    """Lower-case hex SHA-256 digest of a file's contents."""
    digest = hashlib.sha256()
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def get_updated_metadata(
    metadata_file: str | PathLike[str],
    image_link: str,
    animation_link: str | None,
) -> str:
    """The metadata as compact JSON with its image and animation links replaced.

    The file on disk is left untouched so that its hash stays the same.
    """
    try:
        content = Path(metadata_file).read_bytes()
    except OSError as error:
        raise OSError(
            f"Failed to read metadata file '{os.fspath(metadata_file)}' with error: {error}"
        ) from error
    metadata = parse_metadata(content)

    for file in metadata.properties.files:
        if file.uri == metadata.image:
            file.uri = image_link
        if animation_link is not None and metadata.animation_url is not None:
            if file.uri == metadata.animation_url:
                file.uri = animation_link

    metadata.image = image_link
    metadata.animation_url = animation_link

    return json.dumps(metadata.to_dict(), separators=(",", ":"), ensure_ascii=False)