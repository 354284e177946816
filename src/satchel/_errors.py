# -*- test-case-name: satchel.test.test_errors -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Request-facing errors.

Both errors are L{werkzeug.exceptions.HTTPException}s, so a Klein (or any
other werkzeug-aware) application which lets them propagate will render the
matching 4xx response.
"""

from typing import Optional

from werkzeug.exceptions import BadRequest, UnsupportedMediaType


__all__ = ()


class BadRequestError(BadRequest):
    """
    The request carried a malformed payload, or no payload where one was
    required.
    """

    def __init__(self, message: str) -> None:
        """
        @param message: A human-readable description of what was wrong with
            the request.
        """
        super().__init__(message)
        self.message = message


class UnsupportedMediaTypeError(UnsupportedMediaType):
    """
    The declared content type of the request cannot be interpreted in the
    requested body mode.

    @ivar mediaType: The offending media type, or L{None} if the request did
        not declare one.
    """

    def __init__(self, mediaType: Optional[str]) -> None:
        super().__init__(f"Unsupported media type: {mediaType!r}")
        self.mediaType = mediaType
