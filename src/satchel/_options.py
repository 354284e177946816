# -*- test-case-name: satchel.test.test_options -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Parser configuration.
"""

import json
from typing import Any, Callable, Optional

from attr import attrib, attrs
from attr.validators import instance_of, is_callable, optional


__all__ = ()


def positive(instance: Any, attribute: Any, value: Optional[int]) -> None:
    """
    Validator for limits which, when given, must be positive.
    """
    if value is not None and value < 1:
        raise ValueError(f"{attribute.name} must be positive, not {value!r}")


@attrs(frozen=True)
class ParsingOptions:
    """
    Options controlling how request bodies and query strings are parsed.

    @ivar charset: Encoding used to decode query strings and urlencoded
        request bodies.

    @ivar jsonLoader: Callable turning the raw body into a Python value.
        It must raise L{ValueError} on malformed input, as L{json.loads}
        does.

    @ivar maxNestingDepth: How deeply bracketed parameter names such as
        C{a[b][c]} may nest before the request is rejected.

    @ivar maxFormMemorySize: Maximum size in bytes of the non-file fields
        of a multipart body, or L{None} for no limit.

    @ivar maxFormParts: Maximum number of parts in a multipart body, or
        L{None} for no limit.
    """

    charset: str = attrib(validator=instance_of(str), default="utf-8")
    jsonLoader: Callable[[bytes], Any] = attrib(
        validator=is_callable(), default=json.loads
    )
    maxNestingDepth: int = attrib(
        validator=[instance_of(int), positive], default=100
    )
    maxFormMemorySize: Optional[int] = attrib(
        validator=[optional(instance_of(int)), positive], default=None
    )
    maxFormParts: Optional[int] = attrib(
        validator=[optional(instance_of(int)), positive], default=None
    )
