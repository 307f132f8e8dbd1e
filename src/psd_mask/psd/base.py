"""
Base data structures intended for inheritance.

All the data objects in this subpackage inherit from the base class here.
That means, all the data structures in the :py:mod:`psd_mask.psd` subpackage
implement the methods of :py:class:`~psd_mask.psd.base.BaseElement` for
decoding.

Objects that inherit from the :py:class:`~psd_mask.psd.base.BaseElement`
typically get attrs_ decoration to have data fields.

.. _attrs: https://www.attrs.org/en/stable/index.html
"""

import io
import logging
from enum import Enum
from typing import Any, BinaryIO, Callable, Generator, Optional, TypeVar

from attrs import fields, has, validate

from psd_mask.psd.bin_utils import trimmed_repr

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseElement")


class BaseElement:
    """
    Base element of the layer mask structs. All the data objects in
    :py:mod:`psd_mask.psd` subpackage inherit from this class.

    .. py:classmethod:: read(cls, fp)

        Read the element from a file-like object.

    .. py:classmethod:: frombytes(self, data, *args, **kwargs)

        Read the element from bytes.

    .. py:method:: validate(self)

        Validate the attribute.
    """

    @classmethod
    def read(cls: type[T], fp: BinaryIO, **kwargs: Any) -> T:
        raise NotImplementedError()

    @classmethod
    def frombytes(cls: type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
        with io.BytesIO(data) as f:
            return cls.read(f, *args, **kwargs)

    def validate(self) -> None:
        return validate(self)  # type: ignore[arg-type]

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("{name}(...)".format(name=self.__class__.__name__))
            return

        with p.group(2, "{name}(".format(name=self.__class__.__name__), ")"):
            p.breakable("")
            field_list = [f for f in fields(self.__class__) if f.repr]  # type: ignore[arg-type]
            for idx, field_item in enumerate(field_list):
                if idx:
                    p.text(",")
                    p.breakable()
                p.text("{field}=".format(field=field_item.name))
                value = getattr(self, field_item.name)
                if isinstance(value, bytes):
                    p.text(trimmed_repr(value))
                elif isinstance(value, Enum):
                    p.text(str(value.name))
                else:
                    p.pretty(value)
            p.breakable("")

    def _find(
        self, condition: Optional[Callable[[Any], bool]] = None
    ) -> Generator[Any, None, None]:
        """
        Traversal API intended for debugging.
        """
        for _ in BaseElement._traverse(self, condition):
            yield _

    @staticmethod
    def _traverse(
        element: Any, condition: Optional[Callable[[Any], bool]] = None
    ) -> Generator[Any, None, None]:
        """
        Traversal API intended for debugging.
        """
        if condition is None or condition(element):
            yield element
        if has(element.__class__):
            for field_item in fields(element.__class__):
                child = getattr(element, field_item.name)
                for _ in BaseElement._traverse(child, condition):
                    yield _
