"""Validation of every metadata file in an assets directory."""

from __future__ import annotations

import argparse
import fnmatch
import logging
import sys
from os import PathLike
from pathlib import Path

from sugarcane.metadata import ValidateError, parse_metadata

logger = logging.getLogger(__name__)

_SUCCESS_MESSAGE = "Validation complete, your metadata file(s) look good."


class ReadFilesError(Exception):
    """One or more metadata files could not be read, parsed or validated."""

    FILE_OPEN_ERRORS = "file_open_errors"
    DESERIALIZE_ERRORS = "deserialize_errors"
    VALIDATE_ERRORS = "validate_errors"

    _MESSAGES = {
        FILE_OPEN_ERRORS: "Failed to open some metadata files",
        DESERIALIZE_ERRORS: "Failed to deserialize some metadata files",
        VALIDATE_ERRORS: "Some metadata files failed validation",
    }

    def __init__(self, kind: str, errors: list[tuple[Path, Exception]]) -> None:
        details = "; ".join(f"{path.name}: {error}" for path, error in errors)
        super().__init__(f"{self._MESSAGES[kind]} ({len(errors)}): {details}")
        self.kind = kind
        self.errors = errors


def validate_assets(assets_dir: str | PathLike[str], strict: bool = False) -> int:
    """Validate all ``*.json`` files in the directory; return how many were checked."""
    directory = Path(assets_dir)

    if not directory.exists() or next(directory.iterdir(), None) is None:
        logger.info("Assets directory is missing or empty.")
        raise ValidateError(ValidateError.MISSING_OR_EMPTY_ASSETS_DIRECTORY)

    paths = sorted(
        entry for entry in directory.iterdir() if fnmatch.fnmatchcase(entry.name, "*.json")
    )

    open_errors: list[tuple[Path, Exception]] = []
    deserialize_errors: list[tuple[Path, Exception]] = []
    validate_errors: list[tuple[Path, Exception]] = []

    for path in paths:
        try:
            content = path.read_bytes()
        except OSError as error:
            logger.error("%s: %s", path, error)
            open_errors.append((path, error))
            continue

        try:
            metadata = parse_metadata(content)
        except ValueError as error:
            logger.error("%s: %s", path, error)
            deserialize_errors.append((path, error))
            continue

        try:
            if strict:
                metadata.validate_strict()
            else:
                metadata.validate()
        except ValidateError as error:
            logger.error("%s: %s", path, error)
            validate_errors.append((path, error))

    for kind, errors in (
        (ReadFilesError.FILE_OPEN_ERRORS, open_errors),
        (ReadFilesError.DESERIALIZE_ERRORS, deserialize_errors),
        (ReadFilesError.VALIDATE_ERRORS, validate_errors),
    ):
        if errors:
            raise ReadFilesError(kind, errors)

    logger.info(_SUCCESS_MESSAGE)
    return len(paths)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: validate an assets directory."""
    parser = argparse.ArgumentParser(description="Validate metadata JSON files.")
    parser.add_argument("assets_dir", nargs="?", default="assets")
    parser.add_argument("--strict", action="store_true", help="require all optional fields")
    args = parser.parse_args(argv)

    print("[1/1] Loading assets")
    try:
        count = validate_assets(args.assets_dir, args.strict)
    except (ValidateError, ReadFilesError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print(f"Validated {count} metadata file(s).")
    print(f"\n{_SUCCESS_MESSAGE}")
    return 0