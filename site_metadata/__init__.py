"""Metadata record for the slinkydeveloper.com static site."""

from .metadata import METADATA, SITE_METADATA
from .models import Author, SiteMetadata, SiteMetadataError

__all__ = ["Author", "METADATA", "SITE_METADATA", "SiteMetadata", "SiteMetadataError"]
