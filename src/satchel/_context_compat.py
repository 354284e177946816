# -*- test-case-name: satchel.test.test_context_compat -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Support for building L{RequestContext}s from L{twisted.web.iweb.IRequest}s
and from WSGI environments.
"""

from io import BytesIO
from typing import Any, Mapping, Optional, Tuple

from werkzeug.wsgi import get_input_stream

from twisted.logger import Logger
from twisted.web.iweb import IRequest

from ._context import RequestContext, isFormData, mediaTypeOf
from ._errors import BadRequestError
from ._interfaces import SeekableStream


__all__ = ()


log = Logger()


HEADER_VALUE_ENCODING = "iso-8859-1"

DEFAULT_PORTS = {"http": 80, "https": 443}


def defaultPort(scheme: str) -> int:
    return DEFAULT_PORTS.get(scheme, 80)


def _decode(what: str, value: bytes) -> str:
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        log.warn("Invalid encoding in {what}.", what=what)
        raise BadRequestError(f"Non-UTF-8 encoding in {what}.") from e


def contextFromRequest(request: IRequest) -> RequestContext:
    """
    Build a L{RequestContext} from a Twisted Web request.

    The script path is made of the path segments already consumed by
    resource traversal (C{request.prepath}), so an application mounted as a
    child resource at C{/api} gets a script path of C{/api}.

    @raise BadRequestError: If the host name, the script path or the query
        string are not UTF-8.
    """
    scheme = "https" if request.isSecure() else "http"

    port = getattr(request.getHost(), "port", 0) or defaultPort(scheme)

    scriptPath = b""
    if request.prepath:
        scriptPath = b"/".join(request.prepath)
        if not scriptPath.startswith(b"/"):
            scriptPath = b"/" + scriptPath

    _, _, queryString = request.uri.partition(b"?")

    contentType = request.getHeader(b"content-type")
    if contentType is not None:
        contentType = contentType.decode(HEADER_VALUE_ENCODING)

    method = request.method.decode("ascii")

    return RequestContext(
        scheme=scheme,
        host=_decode("SERVER_NAME", request.getRequestHostname()),
        port=port,
        scriptPath=_decode("SCRIPT_NAME", scriptPath),
        queryString=_decode("QUERY_STRING", queryString),
        contentType=contentType,
        isFormData=isFormData(method, mediaTypeOf(contentType)),
        body=request.content,
    )


def splitHostHeader(value: str, fallbackPort: int) -> Tuple[str, int]:
    """
    Split a C{Host} header value into a host name and a port.

    IPv6 literals lose their brackets, since L{hyperlink} adds them back.

    @raise BadRequestError: If the port is not a number.
    """
    host, port = value, fallbackPort
    if not value.endswith("]") and ":" in value:
        host, _, portText = value.rpartition(":")
        try:
            port = int(portText)
        except ValueError:
            raise BadRequestError(
                f"Invalid port in Host header: {value!r}"
            ) from None
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def _seekableInput(environ: Mapping[str, Any]) -> Optional[SeekableStream]:
    stream = environ.get("wsgi.input")
    if stream is None:
        return None
    seekable = getattr(stream, "seekable", None)
    if seekable is not None and seekable():
        return stream
    # Copy the (length-limited) input so it can be rewound.
    return BytesIO(get_input_stream(environ).read())


def contextFromEnviron(environ: Mapping[str, Any]) -> RequestContext:
    """
    Build a L{RequestContext} from a WSGI environment.

    The host and port are taken from the C{Host} header if the client sent
    one, and from C{SERVER_NAME} and C{SERVER_PORT} otherwise.  If
    C{wsgi.input} cannot be rewound, its contents (up to C{CONTENT_LENGTH})
    are copied into memory.
    """
    scheme = environ.get("wsgi.url_scheme", "http")

    try:
        serverPort = int(environ.get("SERVER_PORT") or defaultPort(scheme))
    except ValueError:
        raise BadRequestError(
            f"Invalid SERVER_PORT: {environ['SERVER_PORT']!r}"
        ) from None

    hostHeader = environ.get("HTTP_HOST")
    if hostHeader:
        host, port = splitHostHeader(hostHeader, defaultPort(scheme))
    else:
        host, port = environ.get("SERVER_NAME", ""), serverPort

    contentType = environ.get("CONTENT_TYPE") or None

    return RequestContext(
        scheme=scheme,
        host=host,
        port=port,
        scriptPath=environ.get("SCRIPT_NAME", ""),
        queryString=environ.get("QUERY_STRING", ""),
        contentType=contentType,
        isFormData=isFormData(
            environ.get("REQUEST_METHOD", "GET"), mediaTypeOf(contentType)
        ),
        body=_seekableInput(environ),
    )
