# -*- test-case-name: satchel.test.test_body -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Content-type aware access to request bodies.
"""

from enum import Enum, auto
from typing import Any, Optional, Union

from attr import Factory, attrib, attrs
from attr.validators import instance_of

from twisted.logger import Logger

from ._attrs_zope import provides
from ._context import FORM_MULTIPART, JSON, mediaTypeOf
from ._errors import BadRequestError, UnsupportedMediaTypeError
from ._interfaces import IRequestContext, SeekableStream
from ._options import ParsingOptions
from ._parsers import parseJSON, parseMultipart, parseRaw, parseURLEncoded


__all__ = ()


log = Logger()


class BodyMode(Enum):
    """
    How the caller expects the request body to be interpreted.

    @cvar hash: A mapping of parameters: a JSON document with an object at
        the top level, or an HTML form submission.
    @cvar json: Any JSON document.
    @cvar raw: The body bytes, uninterpreted.
    """

    hash = "hash"
    json = "json"
    raw = "raw"

    @classmethod
    def lookup(cls, mode: Union["BodyMode", str]) -> "BodyMode":
        """
        Look up a mode given either as a L{BodyMode} or as its name.

        @raise ValueError: If C{mode} is not a known mode.
        """
        try:
            return cls(mode)
        except ValueError:
            raise ValueError(f"Unknown body mode: {mode!r}") from None


class ParseStrategy(Enum):
    """
    The parser used to turn a request body into a value.
    """

    jsonObject = auto()
    jsonValue = auto()
    urlEncoded = auto()
    multipart = auto()
    raw = auto()


def selectStrategy(
    mode: BodyMode, mediaType: Optional[str], isFormData: bool
) -> ParseStrategy:
    """
    Decide how to parse a request body.

    @param mode: The body mode requested by the caller.
    @param mediaType: The media type declared by the request, without
        parameters.
    @param isFormData: Whether the request was classified as form data.

    @raise UnsupportedMediaTypeError: If a body of type C{mediaType} cannot
        be interpreted in C{mode}.
    """
    if mode is BodyMode.raw:
        return ParseStrategy.raw

    if mediaType == JSON:
        if mode is BodyMode.json:
            return ParseStrategy.jsonValue
        return ParseStrategy.jsonObject

    if mode is BodyMode.hash and isFormData:
        if mediaType == FORM_MULTIPART:
            return ParseStrategy.multipart
        return ParseStrategy.urlEncoded

    raise UnsupportedMediaTypeError(mediaType)


class _Unset(Enum):
    token = auto()


UNSET = _Unset.token


@attrs(frozen=False)
class BodyCache:
    """
    Per-request storage for the request body and the values parsed from it.

    Each slot holds L{UNSET} until it has been computed, since L{None} is a
    legitimate value for all of them.
    """

    payload: Union[Optional[bytes], _Unset] = attrib(default=UNSET)
    hashBody: Any = attrib(default=UNSET)
    jsonBody: Any = attrib(default=UNSET)


def readBody(stream: Optional[SeekableStream]) -> Optional[bytes]:
    """
    Read a body stream to the end, then rewind it.

    @return: The stream contents, or L{None} if there is no stream.
    """
    if stream is None:
        return None
    try:
        return bytes(stream.read())
    finally:
        stream.seek(0)


@attrs(frozen=True)
class BodyResolver:
    """
    Parses the body of one request according to the requested L{BodyMode}
    and the content type the request declares.

    The body stream is read at most once, and each mode's result is parsed
    at most once; results are kept in L{BodyCache} for the lifetime of the
    resolver.  Failures are not cached.
    """

    context: IRequestContext = attrib(validator=provides(IRequestContext))
    options: ParsingOptions = attrib(
        validator=instance_of(ParsingOptions), default=Factory(ParsingOptions)
    )

    _cache: BodyCache = attrib(default=Factory(BodyCache), init=False)

    def body(self, mode: Union[BodyMode, str] = BodyMode.hash) -> Any:
        """
        Parse and return the request body.

        @param mode: One of:

            - L{BodyMode.hash}: return a L{dict} of request parameters.  JSON
              documents with an object at the top level and HTML form
              submissions (urlencoded or multipart) are accepted.

            - L{BodyMode.json}: require a JSON body, and return whatever it
              decodes to.  RFC 7159 allows any JSON value at the top level,
              so this may be a L{dict}, L{list}, L{str}, L{int}, L{float},
              L{bool} or L{None}.

            - L{BodyMode.raw}: return the body as L{bytes}.

        @raise BadRequestError: If the body is empty or absent when one is
            required, if it cannot be parsed, or if a JSON document without
            an object at the top level is requested as a hash.

        @raise UnsupportedMediaTypeError: If the request's content type
            can't be interpreted in C{mode}.

        @raise ValueError: If C{mode} is not a L{BodyMode}.
        """
        mode = BodyMode.lookup(mode)
        try:
            if mode is BodyMode.hash:
                return self._hashBody()
            elif mode is BodyMode.json:
                return self._jsonBody()
            else:
                return parseRaw(self.payload())
        except (BadRequestError, UnsupportedMediaTypeError) as e:
            log.info(
                "Rejecting {mode} request body: {error}",
                mode=mode.value,
                error=e.description,
            )
            raise

    def payload(self) -> Optional[bytes]:
        """
        The raw request body, or L{None} if the request has no body.
        """
        if self._cache.payload is UNSET:
            payload = readBody(self.context.body)
            log.debug(
                "Read {length} bytes of request body",
                length=0 if payload is None else len(payload),
            )
            self._cache.payload = payload
        return self._cache.payload

    def _strategy(self, mode: BodyMode) -> ParseStrategy:
        mediaType = mediaTypeOf(self.context.contentType)
        strategy = selectStrategy(mode, mediaType, self.context.isFormData)
        log.debug(
            "Parsing {mediaType} request body as {strategy} for {mode}",
            mediaType=mediaType,
            strategy=strategy.name,
            mode=mode.value,
        )
        return strategy

    def _hashBody(self) -> Any:
        if self._cache.hashBody is UNSET:
            strategy = self._strategy(BodyMode.hash)
            if strategy is ParseStrategy.jsonObject:
                document = self._jsonBody()
                if not isinstance(document, dict):
                    raise BadRequestError(
                        "Expected a JSON document containing an object"
                    )
                result: Any = document
            elif strategy is ParseStrategy.multipart:
                result = parseMultipart(
                    self.payload(), self.context.contentType, self.options
                )
            else:
                result = parseURLEncoded(self.payload(), self.options)
            self._cache.hashBody = result
        return self._cache.hashBody

    def _jsonBody(self) -> Any:
        if self._cache.jsonBody is UNSET:
            self._strategy(BodyMode.json)
            self._cache.jsonBody = parseJSON(self.payload(), self.options)
        return self._cache.jsonBody
