"""Errors raised while preparing or uploading assets."""

from __future__ import annotations


class UploadError(Exception):
    """An upload could not be prepared or did not complete.

    ``kind`` names the failure; the constructors below build each one with
    its message.
    """

    INVALID_ASSETS_DIRECTORY = "invalid_assets_directory"
    GET_EXTENSION_ERROR = "get_extension_error"
    NO_EXTENSION = "no_extension"
    INVALID_NUMBER_OF_FILES = "invalid_number_of_files"
    NO_BUNDLR_BALANCE = "no_bundlr_balance"
    INVALID_BUNDLR_CLUSTER = "invalid_bundlr_cluster"
    INCOMPLETE = "incomplete"
    SEND_DATA_FAILED = "send_data_failed"
    MISMATCH_VALUE = "mismatch_value"
    ANIMATION_FILE_ERROR = "animation_file_error"

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def invalid_assets_directory(cls, path: str) -> "UploadError":
        return cls(cls.INVALID_ASSETS_DIRECTORY, f"Invalid assets directory: {path}")

    @classmethod
    def get_extension_error(cls) -> "UploadError":
        return cls(cls.GET_EXTENSION_ERROR, "Failed to get extension from assets dir")

    @classmethod
    def no_extension(cls) -> "UploadError":
        return cls(cls.NO_EXTENSION, "No extension for path")

    @classmethod
    def invalid_number_of_files(cls, count: int) -> "UploadError":
        return cls(
            cls.INVALID_NUMBER_OF_FILES,
            f"Invalid number of files {count}, there should be an even number of files",
        )

    @classmethod
    def no_bundlr_balance(cls, address: str) -> "UploadError":
        return cls(
            cls.NO_BUNDLR_BALANCE,
            f"No Bundlr balance found for address: {address}, "
            "check Bundlr cluster and address balance",
        )

    @classmethod
    def invalid_bundlr_cluster(cls, cluster: str) -> "UploadError":
        return cls(
            cls.INVALID_BUNDLR_CLUSTER,
            f"Invalid Bundlr cluster: {cluster} Use 'devnet' or 'mainnet'",
        )

    @classmethod
    def incomplete(cls, message: str) -> "UploadError":
        return cls(cls.INCOMPLETE, message)

    @classmethod
    def send_data_failed(cls, message: str) -> "UploadError":
        return cls(cls.SEND_DATA_FAILED, message)

    @classmethod
    def mismatch_value(
        cls, prop: str, file: str, expected: str, found: str
    ) -> "UploadError":
        return cls(
            cls.MISMATCH_VALUE,
            f'Mismatch value for "{prop}" property in file "{file}": '
            f'expected "{expected}", found "{found}"',
        )

    @classmethod
    def animation_file_error(cls, file: str) -> "UploadError":
        return cls(
            cls.ANIMATION_FILE_ERROR,
            f"Metadata file {file} is not formatted correctly for animations.",
        )