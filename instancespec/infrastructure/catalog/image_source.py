"""Image source backed by a simplestreams catalog."""
from typing import List, Optional, Union

from instancespec.config.schemas.catalog_schema import CatalogConfig
from instancespec.domain.base.ports.image_source_port import ImageSourcePort
from instancespec.domain.image.value_objects import Image, ImageConstraint
from instancespec.infrastructure.catalog.simplestreams import get_latest_image_metadata, parse_catalog


class SimplestreamsImageSource(ImageSourcePort):
    """
    ImageSourcePort implementation over catalog content held in memory.

    The catalog is parsed once at construction; lookups never modify it, so
    one instance may serve concurrent lookups.
    """

    def __init__(self, catalog_data: Union[bytes, str], config: Optional[CatalogConfig] = None):
        self._catalog = parse_catalog(catalog_data)
        self._config = config or CatalogConfig()

    @property
    def content_id(self) -> str:
        return self._catalog.content_id

    def find_images(self, constraint: ImageConstraint) -> List[Image]:
        return [
            metadata.to_image()
            for metadata in get_latest_image_metadata(self._catalog, constraint, self._config)
        ]
