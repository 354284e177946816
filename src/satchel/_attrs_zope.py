# -*- test-case-name: satchel.test.test_attrs_zope -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
An C{attrs} validator for C{zope.interface} providers.
"""

from typing import Any, Type

from attr import Attribute, attrib, attrs
from zope.interface import Interface


__all__ = ()


@attrs(frozen=True, repr=False)
class _ProvidesValidator:
    interface: Type[Interface] = attrib()

    def __call__(
        self, instance: Any, attribute: Attribute, value: Any
    ) -> None:
        if not self.interface.providedBy(value):
            raise TypeError(
                f"{attribute.name!r} must provide {self.interface!r} "
                f"which {value!r} doesn't.",
                attribute,
                self.interface,
                value,
            )

    def __repr__(self) -> str:
        return f"<provides validator for interface {self.interface!r}>"


def provides(interface: Type[Interface]) -> _ProvidesValidator:
    """
    A validator raising L{TypeError} when an attribute is set to an object
    which does not provide C{interface}.

    @raise TypeError: With a message, the attribute, the interface and the
        offending value as arguments.
    """
    return _ProvidesValidator(interface)
