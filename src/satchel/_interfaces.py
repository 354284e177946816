# Copyright (c) 2011-2021. See LICENSE for details.

"""
Internal interface definitions.

All Zope Interface classes should be imported from here so that type checking
works, since mypy doesn't otherwise get along with Zope Interface.
"""

from typing import TYPE_CHECKING

from ._icontext import IRequestContext as _IRequestContext
from ._icontext import SeekableStream


if TYPE_CHECKING:  # pragma: no cover
    from typing import Union

    from ._context import RequestContext

    IRequestContext = Union[_IRequestContext, RequestContext]
else:
    IRequestContext = _IRequestContext


__all__ = (
    "IRequestContext",
    "SeekableStream",
)
