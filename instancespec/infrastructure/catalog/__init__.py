"""Simplestreams image catalog support."""

from .image_source import SimplestreamsImageSource
from .schema import CatalogItem, CatalogProduct, CatalogVersion, ImageCatalog
from .simplestreams import (
    ImageMetadata,
    get_latest_image_metadata,
    parse_catalog,
    product_ids,
)

__all__ = [
    "SimplestreamsImageSource",
    "ImageCatalog",
    "CatalogProduct",
    "CatalogVersion",
    "CatalogItem",
    "ImageMetadata",
    "get_latest_image_metadata",
    "parse_catalog",
    "product_ids",
]
