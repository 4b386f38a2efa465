# sugarcane

Tools for preparing a folder of NFT assets. The package can:

- check metadata files;
- pair images, animations and metadata files by their index;
- plan which files still need uploading and keep the cache entries up to date;
- compare cached items with the config lines stored on chain.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Validating an assets folder

Each asset is a group of files that share a number, such as `0.json`,
`0.png` and an optional `0.mp4`. To check every `*.json` file in a folder:

```
sugarcane-validate path/to/assets
sugarcane-validate --strict path/to/assets
```

If no folder is given, the command uses `assets`.

The normal check sets these limits:

- the name is at most 32 bytes (UTF-8);
- the symbol is at most 10 bytes;
- the image URL is at most 200 bytes;
- the seller fee basis points are at most 10,000.

Strict mode also requires `animation_url`, `collection` and `external_url`, and
limits both URLs to 200 bytes.

The command exits with status 1 in each of these cases:

- the folder is missing or empty;
- a file cannot be read;
- a file is not valid metadata;
- a file fails a check.

From Python:

```python
from sugarcane.validate import validate_assets
from sugarcane.metadata import load_metadata, parse_metadata

count = validate_assets("assets", strict=False)  # number of files checked
metadata = load_metadata("assets/0.json")
metadata.validate()
metadata.validate_strict()
```

Failed checks raise `sugarcane.metadata.ValidateError`. When some files cannot be
read, parsed or validated, `validate_assets` raises
`sugarcane.validate.ReadFilesError`. Its `kind` and `errors` attributes list the
files that failed.

`parse_metadata` accepts JSON text, bytes or an already decoded dict. It raises
`ValueError` when the document is malformed. `Metadata.to_dict()` returns the
document as data ready for JSON.

## Working with asset pairs

```python
from sugarcane.assets import get_asset_pairs, get_updated_metadata, get_data_size

pairs = get_asset_pairs("assets")  # {index: AssetPair}
item = pairs[0].into_cache_item()
json_text = get_updated_metadata(pairs[0].metadata, "https://example.com/0.png", None)
png_bytes = get_data_size("assets", "png")
```

`get_asset_pairs` skips hidden files and directories. It hashes every file it
uses with SHA-256 (`encode`). It raises `ValueError` in these cases:

- a metadata or animation file name is not a number;
- a metadata file has no matching `.jpg`, `.gif` or `.png` image;
- a metadata file cannot be parsed.

`get_updated_metadata` returns compact JSON with the image and animation links
replaced. It does not change the file on disk.

## Planning an upload

```python
from sugarcane.upload import (
    plan_upload, check_metadata_consistency, drop_failed_metadata,
    count_uploaded, completion_error,
)

check_metadata_consistency(pairs, symbol="SYM", seller_fee_basis_points=500)
indices = plan_upload(pairs, cache_items)  # cache_items: {"0": CacheItem, ...}
if indices.needs_upload():
    ...  # send indices.image / indices.animation / indices.metadata somewhere
    drop_failed_metadata(indices, cache_items)
error = completion_error(count_uploaded(cache_items), len(pairs), errors)
```

`plan_upload` works out which images, animations and metadata files need
uploading. A file needs uploading when it is new, has changed, or has no link
yet. The function replaces or resets the cache items to match.

`check_metadata_consistency` raises `UploadError` when a metadata file's symbol
or seller fee basis points differ from the values you pass in.

`completion_error` returns an `UploadError`, or `None` if every asset was
uploaded.

## Verifying cached items

`sugarcane.verify.items_match` compares a cached item with an `OnChainItem`,
which holds a name and a URI. On a mismatch it raises `VerifyError`.

`find_mismatches` checks each cached item against the on-chain item at the same
index. It marks every mismatched item as no longer on chain and returns
`(index, reason)` pairs.

## What this package does not do

The package does not do any of the following:

- send files to any storage service;
- read or write a cache file;
- talk to a blockchain.

Upload planning and verification work on in-memory `CacheItem` mappings and
`OnChainItem` lists. You supply these and act on the results yourself. The only
command is `sugarcane-validate`.