# -*- test-case-name: satchel.test.test_helper -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Per-request helper tying together URL, query and body access.
"""

from typing import Any, Optional, Union

from attr import Factory, attrib, attrs
from attr.validators import instance_of
from hyperlink import DecodedURL

from ._attrs_zope import provides
from ._body import BodyMode, BodyResolver
from ._interfaces import IRequestContext
from ._options import ParsingOptions
from ._query import FlatParams, NestedParams, parseFlatQuery, parseNestedQuery
from ._url import baseURL, resolveURL


__all__ = ()


@attrs(frozen=False)
class _HelperState:
    """
    Internal mutable state for L{RequestHelper}.
    """

    baseURL: Optional[DecodedURL] = attrib(default=None, init=False)
    queryParams: Optional[FlatParams] = attrib(default=None, init=False)
    nestedQueryParams: Optional[NestedParams] = attrib(
        default=None, init=False
    )


@attrs(frozen=True)
class RequestHelper:
    """
    Request-facing conveniences for one HTTP request.

    Everything is computed lazily and remembered for the lifetime of the
    helper, so a helper should be created per request and thrown away with
    it.

    @ivar context: The request.
    @ivar options: How to parse query strings and request bodies.
    """

    context: IRequestContext = attrib(validator=provides(IRequestContext))
    options: ParsingOptions = attrib(
        validator=instance_of(ParsingOptions), default=Factory(ParsingOptions)
    )

    _resolver: BodyResolver = attrib(
        default=Factory(
            lambda self: BodyResolver(self.context, self.options),
            takes_self=True,
        ),
        init=False,
    )
    _state: _HelperState = attrib(default=Factory(_HelperState), init=False)

    def baseURL(self) -> DecodedURL:
        """
        The URL of the root of the application handling this request.
        """
        if self._state.baseURL is None:
            context = self.context
            self._state.baseURL = baseURL(
                context.scheme, context.host, context.port, context.scriptPath
            )
        return self._state.baseURL

    def url(self, path: str) -> str:
        """
        Generate an absolute URL for C{path}, relative to the root of the
        application.

        C{"/funny"} and C{"funny"} both give the same URL.
        """
        return resolveURL(self.baseURL(), path)

    def queryParams(self) -> FlatParams:
        """
        The query parameters of this request, with names taken literally.

        If the query string is C{foo[bar]=baz}, this returns
        C{{"foo[bar]": "baz"}}.  For bracketed names to be interpreted, see
        L{nestedQueryParams}.

        @note: Only the query string is consulted; form data sent in the
            request body is available through L{body}.

        @raise BadRequestError: If the query string does not decode.
        """
        if self._state.queryParams is None:
            self._state.queryParams = parseFlatQuery(
                self.context.queryString, self.options.charset
            )
        return self._state.queryParams

    qp = queryParams

    def nestedQueryParams(self) -> NestedParams:
        """
        The query parameters of this request, with bracketed names turned
        into nested L{dict}s and L{list}s.

        C{foo[bar]=baz} gives C{{"foo": {"bar": "baz"}}} and C{foo[]=baz}
        gives C{{"foo": ["baz"]}}.  This applies recursively, which can
        produce arbitrarily complicated structures from untrusted input, up
        to L{ParsingOptions.maxNestingDepth}.

        @note: Only the query string is consulted; form data sent in the
            request body is available through L{body}.

        @raise BadRequestError: If the query string does not decode, or
            uses the same name both as a value and as a container.
        """
        if self._state.nestedQueryParams is None:
            self._state.nestedQueryParams = parseNestedQuery(
                self.context.queryString,
                self.options.charset,
                self.options.maxNestingDepth,
            )
        return self._state.nestedQueryParams

    nqp = nestedQueryParams

    def body(self, mode: Union[BodyMode, str] = BodyMode.hash) -> Any:
        """
        Parse and return the request body.

        See L{BodyResolver.body}.
        """
        return self._resolver.body(mode)
