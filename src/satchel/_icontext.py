# Copyright (c) 2011-2021. See LICENSE for details.

"""
Interfaces related to request contexts.

Do not import directly from here, except:
 - From _interfaces.py.
 - From implementations of these interfaces, but even then, import the
   zope.interface.Interface classes via _interfaces.py.

This will ensure that type checking works.
"""

from typing import Optional, Protocol

from zope.interface import Attribute, Interface


__all__ = ()


class SeekableStream(Protocol):
    """
    A readable byte stream which can be rewound.
    """

    def read(self) -> bytes:
        ...

    def seek(self, offset: int) -> int:
        ...


class IRequestContext(Interface):
    """
    A read-only view of one inbound HTTP request.

    This is the only thing the helpers in L{satchel} need to know about a
    request; hosting frameworks either build one directly or adapt their own
    request objects to it (see L{satchel.contextFromRequest} and
    L{satchel.contextFromEnviron}).
    """

    scheme: str = Attribute("URL scheme, C{http} or C{https}.")
    host: str = Attribute("Host name the request was addressed to.")
    port: int = Attribute("Port number the request was addressed to.")
    scriptPath: str = Attribute(
        """
        The path at which the application is mounted, such as
        C{/something}.  Empty if the application is mounted at the root.
        """
    )
    queryString: str = Attribute(
        "The raw, still percent-encoded, query string, without the C{?}."
    )
    contentType: Optional[str] = Attribute(
        """
        The declared value of the C{Content-Type} header, parameters
        included, or L{None} if the request did not declare one.
        """
    )
    isFormData: bool = Attribute(
        """
        Whether the hosting framework classified the request as carrying
        form fields (urlencoded or multipart).
        """
    )
    body: Optional[SeekableStream] = Attribute(
        """
        The request body as a seekable byte stream, or L{None} if the
        request did not come with one.
        """
    )
