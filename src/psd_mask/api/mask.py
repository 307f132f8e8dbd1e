"""
Mask module.
"""

import logging

from psd_mask.constants import MaskKind
from psd_mask.psd.layer_mask_data import MaskRecord, MaskSection

logger = logging.getLogger(__name__)


class Mask:
    """Mask data attached to a layer.

    There are two distinct internal mask data: user mask and vector mask.
    User mask refers any pixel-based mask whereas vector mask refers a mask
    from a shape path.
    """

    def __init__(self, data: MaskRecord, kind: MaskKind):
        self._data = data
        self._kind = kind

    @property
    def kind(self) -> MaskKind:
        """Kind of the mask, vector or raster."""
        return self._kind

    @property
    def background_color(self) -> int:
        """Background color."""
        return self._data.default_color

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """BBox"""
        return self.left, self.top, self.right, self.bottom

    @property
    def left(self) -> int:
        """Left coordinate."""
        return self._data.left

    @property
    def right(self) -> int:
        """Right coordinate."""
        return self._data.right

    @property
    def top(self) -> int:
        """Top coordinate."""
        return self._data.top

    @property
    def bottom(self) -> int:
        """Bottom coordinate."""
        return self._data.bottom

    @property
    def width(self) -> int:
        """Width."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Height."""
        return self.bottom - self.top

    @property
    def size(self) -> tuple[int, int]:
        """(Width, Height) tuple."""
        return self.width, self.height

    @property
    def disabled(self) -> bool:
        """Disabled."""
        return self._data.mask_disabled

    @property
    def flags(self) -> int:
        """Flags."""
        return self._data.flags

    @property
    def density(self) -> int:
        """Density, 0 to 255."""
        return self._data.density

    @property
    def feather(self) -> float:
        """Feather."""
        return self._data.feather

    @property
    def opacity(self) -> float:
        """Density scaled to the range [0.0, 1.0]."""
        return self._data.density / 255.0

    @property
    def data(self) -> MaskRecord:
        """Return raw mask record."""
        return self._data

    def is_vector(self) -> bool:
        """Return True if this is the vector mask."""
        return self._kind == MaskKind.VECTOR

    def __repr__(self) -> str:
        return "%s(kind=%s offset=(%d,%d) size=%dx%d)" % (
            self.__class__.__name__,
            self._kind.value,
            self.left,
            self.top,
            self.width,
            self.height,
        )


def masks_of(section: MaskSection) -> list[Mask]:
    """
    Return the masks present in the section, vector mask first.

    :param section: :py:class:`~psd_mask.psd.layer_mask_data.MaskSection`
    :return: list of :py:class:`.Mask`
    """
    masks = []
    if section.vector_mask is not None:
        masks.append(Mask(section.vector_mask, MaskKind.VECTOR))
    if section.raster_mask is not None:
        masks.append(Mask(section.raster_mask, MaskKind.RASTER))
    return masks
