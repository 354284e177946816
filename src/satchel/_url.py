# -*- test-case-name: satchel.test.test_url -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Application URL construction.
"""

from typing import Tuple
from urllib.parse import unquote

from hyperlink import DecodedURL, EncodedURL


__all__ = ()


def pathSegments(path: str) -> Tuple[str, ...]:
    """
    Split a slash-separated path into segments.

    A leading slash is ignored; a trailing slash is kept as a trailing empty
    segment, so C{"/a/b/"} is C{("a", "b", "")}.
    """
    if not path:
        return ()
    if path.startswith("/"):
        path = path[1:]
    return tuple(path.split("/"))


def baseURL(scheme: str, host: str, port: int, scriptPath: str) -> DecodedURL:
    """
    Build the URL at which an application is mounted.

    The port is left out of the textual form of the URL when it is the
    default port for C{scheme}.

    @param scheme: C{http} or C{https}.
    @param host: The host name.
    @param port: The port number.
    @param scriptPath: The path at which the application is mounted.
    """
    url = DecodedURL(EncodedURL(scheme=scheme, host=host, port=port))
    segments = pathSegments(scriptPath)
    if segments:
        url = url.replace(path=segments, rooted=True)
    return url


def resolveURL(base: DecodedURL, path: str) -> str:
    """
    Append C{path} to the path of C{base}.

    Exactly one slash separates the two, whether or not C{base} ends with a
    slash and whether or not C{path} starts with one, so C{"/funny"} and
    C{"funny"} resolve to the same URL.

    Percent-escapes already present in C{path} are kept as they are, so
    C{"a%20b"} and C{"a b"} both resolve to C{./a%20b}.

    @return: The resolved URL, as text.
    """
    segments = list(base.path)
    if segments and segments[-1] == "":
        segments.pop()
    segments.extend(
        unquote(segment) for segment in pathSegments(path) or ("",)
    )
    return base.replace(path=tuple(segments), rooted=True).to_text()
