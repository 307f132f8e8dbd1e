"""
Various constants for psd_mask
"""

from enum import Enum, IntFlag


class MaskFlag(IntFlag):
    """
    Flag bits of the layer mask data.
    """

    POS_RELATIVE_TO_LAYER = 1
    MASK_DISABLED = 2
    INVERT_MASK = 4  # Obsolete.
    USER_MASK_FROM_RENDER = 8
    PARAMETERS_APPLIED = 16


class MaskParameterFlag(IntFlag):
    """
    Flag bits that gate the fields of the mask parameter block.
    """

    USER_MASK_DENSITY = 1
    USER_MASK_FEATHER = 2
    VECTOR_MASK_DENSITY = 4
    VECTOR_MASK_FEATHER = 8


class MaskKind(str, Enum):
    """
    Role of a mask descriptor within the layer mask data.

    User mask refers any pixel-based mask whereas vector mask refers a mask
    from a shape path.
    """

    VECTOR = "vector"
    RASTER = "raster"
