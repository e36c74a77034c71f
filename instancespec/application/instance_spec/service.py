# instancespec/application/instance_spec/service.py
from typing import Optional, Sequence, Union

from instancespec.config.manager import ConfigurationManager
from instancespec.config.schemas.catalog_schema import CatalogConfig
from instancespec.domain.base.ports.image_source_port import ImageSourcePort
from instancespec.domain.constraints.value_objects import Constraints
from instancespec.domain.image.value_objects import ImageConstraint
from instancespec.domain.instance_spec.exceptions import ResolutionError
from instancespec.domain.instance_spec.resolver import find_instance_spec
from instancespec.domain.instance_spec.value_objects import InstanceConstraint, InstanceSpec
from instancespec.domain.instance_type.value_objects import InstanceType
from instancespec.helpers.logger import get_logger


class InstanceSpecService:
    """Application service resolving deployment requests into instance specs."""

    def __init__(self,
                 image_source: ImageSourcePort,
                 config_manager: Optional[ConfigurationManager] = None):
        self._image_source = image_source
        self._config_manager = config_manager or ConfigurationManager()
        self._logger = get_logger(__name__)

    def find_instance_spec(self,
                           series: str,
                           region: str,
                           arches: Optional[Sequence[str]] = None,
                           constraints: Union[str, Constraints] = "",
                           instance_types: Sequence[InstanceType] = (),
                           endpoint: str = "") -> InstanceSpec:
        """
        Resolve a deployment request.

        Args:
            series: Operating system release
            region: Cloud region
            arches: Acceptable architectures; configured defaults when None
            constraints: Constraints string or an already parsed value
            instance_types: Available instance types in preference order
            endpoint: Cloud endpoint, used to tell apart regions of
                different clouds sharing a catalog

        Returns:
            The resolved instance spec

        Raises:
            ConstraintsParseError: If ``constraints`` cannot be parsed
            UnknownSeriesError: If the catalog has no version for ``series``
            ResolutionError: If no instance spec satisfies the request
        """
        if isinstance(constraints, str):
            constraints = Constraints.parse(constraints)
        if arches is None:
            arches = self._config_manager.get_typed(CatalogConfig).default_arches
        arches = tuple(arches)
        # An arch constraint narrows the acceptable arches, never widens them.
        search_arches = tuple(
            a for a in arches if constraints.arch is None or a == constraints.arch
        )

        images = []
        if search_arches:
            image_constraint = ImageConstraint(
                region=region, endpoint=endpoint, series=series, arches=search_arches
            )
            images = self._image_source.find_images(image_constraint)

        instance_constraint = InstanceConstraint(
            series=series, region=region, arches=arches, constraints=constraints
        )
        try:
            spec = find_instance_spec(images, instance_constraint, instance_types)
        except ResolutionError as e:
            self._logger.warning(
                "Instance spec resolution failed",
                series=series,
                region=region,
                error=str(e),
            )
            raise

        self._logger.info(
            "Resolved instance spec",
            series=series,
            region=region,
            image_id=spec.image.id,
            instance_type=spec.instance_type.name,
        )
        return spec
