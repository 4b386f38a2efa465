"""Validate, pair and track NFT asset folders for upload and verification."""

__version__ = "0.1.0"