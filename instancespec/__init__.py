"""Instance Spec Resolver - Root Package.

This package resolves an abstract machine request (series, region, CPU
architectures and hardware constraints) into a concrete provisioning order:
the single machine image and instance type pairing that satisfies it.

Key Components:
    - domain: Value objects, constraint handling and the resolver itself
    - application: Services orchestrating catalog lookup and resolution
    - infrastructure: Image catalog (simplestreams) parsing and lookup
    - config: Typed configuration loading and management
    - helpers: Logging setup

Architecture:
    The resolver is a pure function over immutable value objects. Catalog
    lookup is reached through a domain port so that alternative image
    sources can be plugged in without touching the domain layer.
"""

from ._version import __version__

__author__ = "Instance Spec Resolver Developers"

__all__ = ["__version__"]
