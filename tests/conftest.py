import json

import pytest

from instancespec.config.schemas.catalog_schema import CatalogConfig
from instancespec.infrastructure.catalog.image_source import SimplestreamsImageSource

CATALOG = {
    "content_id": "com.ubuntu.cloud:released:aws",
    "products": {
        "com.ubuntu.cloud:server:12.04:amd64": {
            "release": "precise",
            "version": "12.04",
            "arch": "amd64",
            "versions": {
                "20121218": {
                    "items": {
                        "usee1pi": {"root_store": "instance", "virt": "pv",
                                    "region": "us-east-1", "id": "ami-00000011"},
                        "usww1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "us-west-1", "id": "ami-00000016"},
                        "apne1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "ap-northeast-1", "id": "ami-00000026"},
                        "test1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "test", "id": "ami-00000033"},
                        "test1he": {"root_store": "ebs", "virt": "hvm",
                                    "region": "test", "id": "ami-00000035"},
                    },
                    "pubname": "ubuntu-precise-12.04-amd64-server-20121218",
                    "label": "release",
                },
                "20121118": {
                    "items": {
                        "apne1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "ap-northeast-1", "id": "ami-00000008"},
                        "test2he": {"root_store": "ebs", "virt": "hvm",
                                    "region": "test", "id": "ami-00000036"},
                    },
                    "pubname": "ubuntu-precise-12.04-amd64-server-20121118",
                    "label": "release",
                },
            },
        },
        "com.ubuntu.cloud:server:12.04:arm": {
            "release": "precise",
            "version": "12.04",
            "arch": "arm",
            "versions": {
                "20121218": {
                    "items": {
                        "apne1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "ap-northeast-1", "id": "ami-00000023"},
                        "test1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "test", "id": "ami-00000034"},
                        "armo1pe": {"root_store": "ebs", "virt": "pv",
                                    "region": "arm-only", "id": "ami-00000036"},
                    },
                    "pubname": "ubuntu-precise-12.04-arm-server-20121218",
                    "label": "release",
                },
            },
        },
    },
    "format": "products:1.0",
}


@pytest.fixture
def catalog_data():
    """Raw JSON content of the sample image catalog."""
    return json.dumps(CATALOG).encode("utf-8")


@pytest.fixture
def catalog_config():
    return CatalogConfig()


@pytest.fixture
def image_source(catalog_data, catalog_config):
    return SimplestreamsImageSource(catalog_data, catalog_config)
