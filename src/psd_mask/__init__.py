"""
psd-mask: Python package for decoding layer mask data of Adobe Photoshop files.

Each layer record of a PSD/PSB file carries a "layer mask / adjustment layer
data" block describing up to two masks: a vector mask and a user (raster)
mask. This package decodes that block.

Basic usage::

    from psd_mask import MaskSection, masks_of

    with open('layer_record.bin', 'rb') as f:
        section = MaskSection.read(f)

    for mask in masks_of(section):
        print(mask.kind, mask.bbox, mask.density)

Architecture:

- :py:mod:`psd_mask.psd`: Low-level binary structure parsing
- :py:mod:`psd_mask.api`: High-level user-facing API
"""

from psd_mask.api.mask import Mask, masks_of
from psd_mask.exceptions import Error, TruncatedSectionError
from psd_mask.psd.layer_mask_data import MaskRecord, MaskSection, read_mask_section
from psd_mask.version import __version__

__all__ = [
    "Error",
    "Mask",
    "MaskRecord",
    "MaskSection",
    "TruncatedSectionError",
    "__version__",
    "masks_of",
    "read_mask_section",
]
