"""Pydantic models of a simplestreams ``products:1.0`` image catalog."""
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """A single published image."""
    model_config = ConfigDict(extra="allow")

    id: str
    region: str
    virt: str = ""
    root_store: str = ""
    endpoint: Optional[str] = None


class CatalogVersion(BaseModel):
    """One published version (build) of a product."""
    model_config = ConfigDict(extra="allow")

    items: Dict[str, CatalogItem] = Field(default_factory=dict)
    pubname: Optional[str] = None
    label: Optional[str] = None


class CatalogProduct(BaseModel):
    """A product: one series release for one architecture."""
    model_config = ConfigDict(extra="allow")

    release: Optional[str] = None
    version: Optional[str] = None
    arch: Optional[str] = None
    versions: Dict[str, CatalogVersion] = Field(default_factory=dict)


class ImageCatalog(BaseModel):
    """Top level catalog document."""
    model_config = ConfigDict(extra="allow")

    content_id: str
    format: str = "products:1.0"
    products: Dict[str, CatalogProduct] = Field(default_factory=dict)
