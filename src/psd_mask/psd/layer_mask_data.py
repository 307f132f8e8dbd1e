"""
Layer mask / adjustment layer data structures.

This module decodes the mask data sub-section of a single layer record, as
found in the "Layer and Mask Information" section of PSD and PSB files. The
sub-section is a length-prefixed block that is 4 bytes long when the layer
has no mask, 20 or 36 bytes in most documents, and longer when a parameter
block is present.

Key classes:

- :py:class:`MaskSection`: The decoded block, holding up to two masks
- :py:class:`MaskRecord`: A single mask descriptor (bounds, color, flags)
- :py:class:`MaskParameters`: Optional density and feather overrides

The block may contain one or two mask records. When there are two, the first
describes the vector mask and the second the user (raster) mask. When there
is only one, the ``user_mask_from_render`` flag decides its role.

Example::

    from psd_mask.psd.layer_mask_data import MaskSection

    with open('layer_record.bin', 'rb') as f:
        f.seek(offset)
        section = MaskSection.read(f)

    if section.raster_mask is not None:
        print(section.raster_mask.bbox, section.raster_mask.density)
"""

import io
import logging
from typing import Any, BinaryIO, Optional, TypeVar

from attrs import define, field

from psd_mask.constants import MaskFlag, MaskKind, MaskParameterFlag
from psd_mask.psd.base import BaseElement
from psd_mask.psd.bin_utils import read_fmt, read_length_block, skip, trimmed_repr
from psd_mask.validators import range_

logger = logging.getLogger(__name__)

T_MaskRecord = TypeVar("T_MaskRecord", bound="MaskRecord")
T_MaskParameters = TypeVar("T_MaskParameters", bound="MaskParameters")
T_MaskSection = TypeVar("T_MaskSection", bound="MaskSection")

#: Byte size of a single mask record: 4 coordinates, color and flags.
RECORD_SIZE = 18

#: Blocks shorter than this carry no mask record.
MIN_LENGTH = 16

DEFAULT_DENSITY = 255
DEFAULT_FEATHER = 0.0


@define(frozen=True)
class MaskRecord(BaseElement):
    """
    Mask record.

    .. py:attribute:: top

        Top position.

    .. py:attribute:: left

        Left position.

    .. py:attribute:: bottom

        Bottom position.

    .. py:attribute:: right

        Right position.

    .. py:attribute:: default_color

        Default color outside of the rectangle. 0 or 255.

    .. py:attribute:: flags

        Flag byte. See :py:class:`~psd_mask.constants.MaskFlag`.

    .. py:attribute:: density

        Mask density, 255 unless a parameter block overrides it.

    .. py:attribute:: feather

        Mask feather, 0.0 unless a parameter block overrides it.
    """

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0
    default_color: int = field(default=0, validator=range_(0, 255))
    flags: int = field(default=0, validator=range_(0, 255))
    density: int = field(default=DEFAULT_DENSITY, validator=range_(0, 255))
    feather: float = field(default=DEFAULT_FEATHER, converter=float)

    @classmethod
    def read(
        cls: type[T_MaskRecord], fp: BinaryIO, flags_first: bool = False, **kwargs: Any
    ) -> T_MaskRecord:
        """
        Read a mask record.

        Density and feather keep their defaults; they come from the parameter
        block of :py:class:`.MaskSection`.

        :param flags_first: The second record of the block stores flags and
            color before the rectangle.
        """
        return cls(**_read_record_fields(fp, flags_first))

    def _test(self, flag: MaskFlag) -> bool:
        return bool(self.flags & flag)

    @property
    def pos_relative_to_layer(self) -> bool:
        """Position relative to layer."""
        return self._test(MaskFlag.POS_RELATIVE_TO_LAYER)

    @property
    def mask_disabled(self) -> bool:
        """Layer mask disabled."""
        return self._test(MaskFlag.MASK_DISABLED)

    @property
    def invert_mask(self) -> bool:
        """Invert layer mask when blending (Obsolete)."""
        return self._test(MaskFlag.INVERT_MASK)

    @property
    def user_mask_from_render(self) -> bool:
        """The user mask actually came from rendering other data."""
        return self._test(MaskFlag.USER_MASK_FROM_RENDER)

    @property
    def parameters_applied(self) -> bool:
        """The user and/or vector masks have parameters applied to them."""
        return self._test(MaskFlag.PARAMETERS_APPLIED)

    @property
    def width(self) -> int:
        """Width of the mask."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Height of the mask."""
        return self.bottom - self.top

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple."""
        return self.left, self.top, self.right, self.bottom

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height


def _read_record_fields(fp: BinaryIO, flags_first: bool = False) -> dict[str, int]:
    if flags_first:
        flags, default_color, top, left, bottom, right = read_fmt("2B4i", fp)
    else:
        top, left, bottom, right, default_color, flags = read_fmt("4i2B", fp)
    return dict(
        top=top,
        left=left,
        bottom=bottom,
        right=right,
        default_color=default_color,
        flags=flags,
    )


@define(frozen=True)
class MaskParameters(BaseElement):
    """
    Mask parameters.

    Fields whose flag bit is not set in the stream are None.

    .. py:attribute:: user_mask_density
    .. py:attribute:: user_mask_feather
    .. py:attribute:: vector_mask_density
    .. py:attribute:: vector_mask_feather
    """

    user_mask_density: Optional[int] = None
    user_mask_feather: Optional[float] = None
    vector_mask_density: Optional[int] = None
    vector_mask_feather: Optional[float] = None

    @classmethod
    def read(
        cls: type[T_MaskParameters], fp: BinaryIO, **kwargs: Any
    ) -> T_MaskParameters:
        parameters = MaskParameterFlag(read_fmt("B", fp)[0])
        return cls(
            read_fmt("B", fp)[0]
            if parameters & MaskParameterFlag.USER_MASK_DENSITY
            else None,
            read_fmt("d", fp)[0]
            if parameters & MaskParameterFlag.USER_MASK_FEATHER
            else None,
            read_fmt("B", fp)[0]
            if parameters & MaskParameterFlag.VECTOR_MASK_DENSITY
            else None,
            read_fmt("d", fp)[0]
            if parameters & MaskParameterFlag.VECTOR_MASK_FEATHER
            else None,
        )

    def density(self, kind: MaskKind) -> int:
        """Density for the given mask kind, 0 when absent."""
        if kind == MaskKind.VECTOR:
            value = self.vector_mask_density
        else:
            value = self.user_mask_density
        return 0 if value is None else value

    def feather(self, kind: MaskKind) -> float:
        """Feather for the given mask kind, 0.0 when absent."""
        if kind == MaskKind.VECTOR:
            value = self.vector_mask_feather
        else:
            value = self.user_mask_feather
        return 0.0 if value is None else value


@define(frozen=True)
class MaskSection(BaseElement):
    """
    Layer mask / adjustment layer data.

    Either mask can be None. When the block holds two records, the first is
    the vector mask and the second is the user (raster) mask.

    .. py:attribute:: vector_mask

        :py:class:`.MaskRecord` of the vector mask, or None.

    .. py:attribute:: raster_mask

        :py:class:`.MaskRecord` of the user mask, or None.
    """

    vector_mask: Optional[MaskRecord] = None
    raster_mask: Optional[MaskRecord] = None

    @classmethod
    def read(cls: type[T_MaskSection], fp: BinaryIO, **kwargs: Any) -> T_MaskSection:
        data = read_length_block(fp)
        logger.debug("Layer mask data: %d bytes", len(data))
        if len(data) < MIN_LENGTH:
            if data:
                logger.debug("Skipped %d bytes of layer mask data", len(data))
            return cls()

        with io.BytesIO(data) as f:
            return cls._read_body(f, len(data))

    @classmethod
    def _read_body(cls: type[T_MaskSection], fp: BinaryIO, length: int) -> T_MaskSection:
        first = _read_record_fields(fp)

        second = None
        if length - fp.tell() >= RECORD_SIZE:
            second = _read_record_fields(fp, flags_first=True)

        parameters = None
        if first["flags"] & MaskFlag.PARAMETERS_APPLIED:
            parameters = MaskParameters.read(fp)

        trailing = skip(fp, length - fp.tell())
        if trailing:
            logger.debug(
                "Discarded %d trailing bytes: %s", len(trailing), trimmed_repr(trailing)
            )

        if second is not None:
            vector_fields, raster_fields = first, second
        elif first["flags"] & MaskFlag.USER_MASK_FROM_RENDER:
            vector_fields, raster_fields = first, None
        else:
            vector_fields, raster_fields = None, first

        return cls(
            vector_mask=_make_record(vector_fields, MaskKind.VECTOR, parameters),
            raster_mask=_make_record(raster_fields, MaskKind.RASTER, parameters),
        )

    def is_empty(self) -> bool:
        """Return True if the block holds no mask."""
        return self.vector_mask is None and self.raster_mask is None


def _make_record(
    fields: Optional[dict[str, int]],
    kind: MaskKind,
    parameters: Optional[MaskParameters],
) -> Optional[MaskRecord]:
    if fields is None:
        return None
    if parameters is None:
        return MaskRecord(**fields)
    return MaskRecord(
        density=parameters.density(kind), feather=parameters.feather(kind), **fields
    )


def read_mask_section(fp: BinaryIO) -> MaskSection:
    """
    Read layer mask data from the current position of ``fp``.

    Exactly the declared number of bytes plus the 4-byte length marker are
    consumed.

    :param fp: file-like object positioned at the length marker.
    :return: :py:class:`.MaskSection`
    :raise TruncatedSectionError: when the data is shorter than required.
    """
    return MaskSection.read(fp)
