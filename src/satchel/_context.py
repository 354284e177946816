# -*- test-case-name: satchel.test.test_context -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Request context API.
"""

from typing import Any, Optional

from attr import attrib, attrs
from attr.validators import instance_of, optional
from werkzeug.http import parse_options_header
from zope.interface import implementer

from ._interfaces import IRequestContext, SeekableStream


__all__ = ()


FORM_URLENCODED = "application/x-www-form-urlencoded"
FORM_MULTIPART = "multipart/form-data"
JSON = "application/json"

FORM_DATA_MEDIA_TYPES = frozenset((FORM_URLENCODED, FORM_MULTIPART))


def mediaTypeOf(contentType: Optional[str]) -> Optional[str]:
    """
    Extract the media type from a C{Content-Type} header value.

    Parameters such as C{charset} are dropped and the media type is
    lower-cased, so C{"Application/JSON; charset=utf-8"} becomes
    C{"application/json"}.

    @return: The media type, or L{None} if C{contentType} is L{None} or
        empty.
    """
    if not contentType:
        return None
    mediaType, _ = parse_options_header(contentType)
    return mediaType.lower() or None


def isFormData(method: str, mediaType: Optional[str]) -> bool:
    """
    Classify a request as carrying form data.

    A request carries form data if it declares one of the two form media
    types, or if it is a C{POST} with no declared media type at all, which
    is what browsers and command-line clients send by default.
    """
    if mediaType is None:
        return method.upper() == "POST"
    return mediaType in FORM_DATA_MEDIA_TYPES


def validateStream(
    instance: Any, attribute: Any, stream: Optional[SeekableStream]
) -> None:
    """
    Validator for L{RequestContext.body}.
    """
    if stream is None:
        return
    if not (callable(getattr(stream, "read", None)) and callable(
        getattr(stream, "seek", None)
    )):
        raise TypeError("body must be a seekable stream or None")


@implementer(IRequestContext)
@attrs(frozen=True)
class RequestContext:
    """
    Immutable view of the parts of an HTTP request that the helpers in
    L{satchel} read.
    """

    scheme: str = attrib(validator=instance_of(str))
    host: str = attrib(validator=instance_of(str))
    port: int = attrib(validator=instance_of(int))
    scriptPath: str = attrib(validator=instance_of(str), default="")
    queryString: str = attrib(validator=instance_of(str), default="")
    contentType: Optional[str] = attrib(
        validator=optional(instance_of(str)), default=None
    )
    isFormData: bool = attrib(validator=instance_of(bool), default=False)
    body: Optional[SeekableStream] = attrib(
        validator=validateStream, default=None
    )

    @property
    def mediaType(self) -> Optional[str]:
        """
        The media type of the request, without parameters.
        """
        return mediaTypeOf(self.contentType)
