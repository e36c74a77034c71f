"""Domain port for image lookup."""
from abc import ABC, abstractmethod
from typing import List

from instancespec.domain.image.value_objects import Image, ImageConstraint


class ImageSourcePort(ABC):
    """
    Interface for finding candidate images.

    This interface allows the domain layer to obtain images without
    depending on a specific catalog format or cloud provider.
    """

    @abstractmethod
    def find_images(self, constraint: ImageConstraint) -> List[Image]:
        """
        Find the images matching a query.

        Args:
            constraint: Region, series and architectures to look up

        Returns:
            Matching images in catalog order; empty when nothing matches
        """
