"""
Shared tools for satchel's test suite.
"""

from io import BytesIO
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from twisted.web.iweb import IRequest
from twisted.web.server import Request
from twisted.web.test.test_web import DummyChannel

from .._context import RequestContext


emptyMapping: Mapping[Any, Any] = MappingProxyType({})


class CountingStream(BytesIO):
    """
    A L{BytesIO} which counts how many times it has been read and rewound.
    """

    reads = 0
    seeks = 0

    def read(self, size: Optional[int] = -1) -> bytes:
        self.reads += 1
        return super().read(size)

    def seek(self, offset: int, whence: int = 0) -> int:
        self.seeks += 1
        return super().seek(offset, whence)


class BrokenStream(CountingStream):
    """
    A stream which fails when read, but can still be rewound.
    """

    def read(self, size: Optional[int] = -1) -> bytes:
        super().read(size)
        raise OSError("connection went away")


class UnseekableStream:
    """
    A stream which can only be read, like many real C{wsgi.input}s.
    """

    def __init__(self, data: bytes) -> None:
        self._data = BytesIO(data)

    def read(self, size: Optional[int] = -1) -> bytes:
        return self._data.read(size)

    def readline(self, size: Optional[int] = -1) -> bytes:
        return self._data.readline(size)

    def seekable(self) -> bool:
        return False


def contextWithBody(
    body: Optional[bytes],
    contentType: Optional[str] = None,
    isFormData: bool = False,
    **kwargs: Any,
) -> RequestContext:
    """
    Make a L{RequestContext} for C{http://localhost/} with the given body.
    """
    kwargs.setdefault("scheme", "http")
    kwargs.setdefault("host", "localhost")
    kwargs.setdefault("port", 80)
    return RequestContext(
        contentType=contentType,
        isFormData=isFormData,
        body=None if body is None else CountingStream(body),
        **kwargs,
    )


def twistedRequest(
    uri: bytes = b"/",
    method: bytes = b"GET",
    host: bytes = b"localhost",
    port: int = 8080,
    isSecure: bool = False,
    body: bytes = b"",
    headers: Mapping[bytes, Sequence[bytes]] = emptyMapping,
    prepath: Iterable[bytes] = (),
) -> IRequest:
    """
    Make a Twisted Web request, as it would look to a resource after
    traversing C{prepath}.
    """
    request = Request(DummyChannel(), False)
    request.gotLength(len(body))
    request.content.write(body)
    request.content.seek(0)
    request.setHost(host, port, isSecure)
    request.uri = uri
    request.method = method
    request.clientproto = b"HTTP/1.1"
    request.prepath = list(prepath)
    for name, values in headers.items():
        request.requestHeaders.setRawHeaders(name, values)
    return request


def multipartBody(
    boundary: bytes, parts: Iterable[Tuple[Dict[bytes, bytes], bytes]]
) -> bytes:
    """
    Encode a C{multipart/form-data} body.

    @param parts: Pairs of (headers, content) for each part.
    """
    chunks = []
    for headers, content in parts:
        chunks.append(b"--" + boundary + b"\r\n")
        for name, value in headers.items():
            chunks.append(name + b": " + value + b"\r\n")
        chunks.append(b"\r\n" + content + b"\r\n")
    chunks.append(b"--" + boundary + b"--\r\n")
    return b"".join(chunks)


def formField(name: bytes, value: bytes) -> Tuple[Dict[bytes, bytes], bytes]:
    """
    A plain multipart form field.
    """
    disposition = b'form-data; name="' + name + b'"'
    return {b"Content-Disposition": disposition}, value


def fileField(
    name: bytes, filename: bytes, content: bytes, contentType: bytes
) -> Tuple[Dict[bytes, bytes], bytes]:
    """
    A multipart file upload.
    """
    disposition = (
        b'form-data; name="' + name + b'"; filename="' + filename + b'"'
    )
    return {
        b"Content-Disposition": disposition,
        b"Content-Type": contentType,
    }, content
