"""Image lookup in simplestreams catalogs.

A catalog groups images by product (``<prefix>:<series version>:<arch>``),
then by version (a sortable build serial such as ``20121218``), then by item.
A lookup returns the items of the most recent version that has any image in
the requested region, for every requested architecture.
"""
import re
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from instancespec.config.schemas.catalog_schema import CatalogConfig
from instancespec.domain.image.value_objects import Image, ImageConstraint
from instancespec.helpers.logger import get_logger
from instancespec.infrastructure.catalog.schema import CatalogItem, CatalogProduct, ImageCatalog
from instancespec.infrastructure.exceptions import CatalogParseError, UnknownSeriesError

logger = get_logger(__name__)

_DIGITS = re.compile(r"(\d+)")


class ImageMetadata(BaseModel):
    """Catalog entry for one image, flattened out of its product and version."""
    model_config = ConfigDict(frozen=True)

    id: str
    arch: str
    vtype: str = ""
    region: str
    root_store: str = ""
    version: str

    def to_image(self) -> Image:
        """Project to the domain image."""
        return Image(id=self.id, arch=self.arch, vtype=self.vtype)


def parse_catalog(data: Union[bytes, str]) -> ImageCatalog:
    """
    Parse raw catalog content.

    Raises:
        CatalogParseError: If ``data`` is not JSON or does not fit the schema
    """
    try:
        return ImageCatalog.model_validate_json(data)
    except PydanticValidationError as e:
        raise CatalogParseError(f"invalid image catalog: {e}", e.errors()) from e


def product_ids(constraint: ImageConstraint, config: Optional[CatalogConfig] = None) -> List[str]:
    """
    Build the catalog product ids searched for ``constraint``, one per arch.

    Raises:
        UnknownSeriesError: If the series has no configured release version
    """
    config = config or CatalogConfig()
    version = config.series_versions.get(constraint.series)
    if version is None:
        raise UnknownSeriesError(constraint.series)
    return [f"{config.product_prefix}:{version}:{arch}" for arch in constraint.arches]


def _version_key(version: str):
    # Natural ordering so that "9" sorts before "10".
    return [int(part) if part.isdecimal() else part for part in _DIGITS.split(version)]


def _item_matches(item: CatalogItem, constraint: ImageConstraint) -> bool:
    if item.region != constraint.region:
        return False
    return not (item.endpoint and constraint.endpoint and item.endpoint != constraint.endpoint)


def _latest_items(product_id: str, product: CatalogProduct,
                  constraint: ImageConstraint) -> List[ImageMetadata]:
    arch = product.arch or product_id.rsplit(":", 1)[-1]
    for version in sorted(product.versions, key=_version_key, reverse=True):
        items = [
            item for item in product.versions[version].items.values()
            if _item_matches(item, constraint)
        ]
        if items:
            return [
                ImageMetadata(
                    id=item.id,
                    arch=arch,
                    vtype=item.virt,
                    region=item.region,
                    root_store=item.root_store,
                    version=version,
                )
                for item in items
            ]
    return []


def get_latest_image_metadata(catalog: Union[ImageCatalog, bytes, str],
                              constraint: ImageConstraint,
                              config: Optional[CatalogConfig] = None) -> List[ImageMetadata]:
    """
    Find the most recent images matching ``constraint``.

    Args:
        catalog: Parsed catalog or its raw JSON content
        constraint: Region, endpoint, series and architectures to look up
        config: Catalog configuration; defaults apply when omitted

    Returns:
        Matching image metadata, grouped by requested architecture in the
        order requested and in catalog order within a version. Empty when
        nothing matches.

    Raises:
        CatalogParseError: If raw content cannot be parsed
        UnknownSeriesError: If the series has no configured release version
    """
    if not isinstance(catalog, ImageCatalog):
        catalog = parse_catalog(catalog)

    results: List[ImageMetadata] = []
    for product_id in product_ids(constraint, config):
        product = catalog.products.get(product_id)
        if product is None:
            continue
        results.extend(_latest_items(product_id, product, constraint))

    logger.debug(
        "Image catalog lookup",
        content_id=catalog.content_id,
        region=constraint.region,
        series=constraint.series,
        arches=list(constraint.arches),
        found=len(results),
    )
    return results
