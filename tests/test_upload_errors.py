import pytest

from sugarcane.upload_errors import UploadError


def test_invalid_assets_directory_message():
    error = UploadError.invalid_assets_directory("assets")
    assert str(error) == "Invalid assets directory: assets"
    assert error.kind == UploadError.INVALID_ASSETS_DIRECTORY


def test_fixed_messages():
    assert str(UploadError.get_extension_error()) == "Failed to get extension from assets dir"
    assert str(UploadError.no_extension()) == "No extension for path"


def test_invalid_number_of_files():
    error = UploadError.invalid_number_of_files(3)
    assert str(error) == (
        "Invalid number of files 3, there should be an even number of files"
    )
    assert error.kind == UploadError.INVALID_NUMBER_OF_FILES


def test_bundlr_messages():
    assert str(UploadError.no_bundlr_balance("addr")) == (
        "No Bundlr balance found for address: addr, check Bundlr cluster and address balance"
    )
    assert str(UploadError.invalid_bundlr_cluster("testnet")) == (
        "Invalid Bundlr cluster: testnet Use 'devnet' or 'mainnet'"
    )


@pytest.mark.parametrize(
    "factory, kind",
    [
        (UploadError.incomplete, UploadError.INCOMPLETE),
        (UploadError.send_data_failed, UploadError.SEND_DATA_FAILED),
    ],
)
def test_message_passthrough(factory, kind):
    error = factory("Not all files were uploaded.")
    assert str(error) == "Not all files were uploaded."
    assert error.kind == kind


def test_mismatch_value_message():
    error = UploadError.mismatch_value("symbol", "0.json", "ABC", "XYZ")
    assert str(error) == (
        'Mismatch value for "symbol" property in file "0.json": expected "ABC", found "XYZ"'
    )
    assert error.kind == UploadError.MISMATCH_VALUE


def test_animation_file_error_message():
    error = UploadError.animation_file_error("1.json")
    assert str(error) == "Metadata file 1.json is not formatted correctly for animations."


def test_is_raisable():
    error = UploadError.invalid_assets_directory("x")
    assert error.kind == UploadError.INVALID_ASSETS_DIRECTORY
    assert str(error) == "Invalid assets directory: x"
    with pytest.raises(UploadError, match="Invalid assets directory: x") as info:
        raise error
    assert info.value is error