"""
Low-level API that translates binary data to Python structure.

All the data structure in this subpackage inherits from
:py:class:`psd_mask.psd.base.BaseElement`.
"""

from .layer_mask_data import (
    MaskParameters as MaskParameters,
    MaskRecord as MaskRecord,
    MaskSection as MaskSection,
    read_mask_section as read_mask_section,
)

__all__ = [
    "MaskSection",
    "MaskRecord",
    "MaskParameters",
    "read_mask_section",
]
