# -*- test-case-name: satchel.test.test_parsers -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Request body parsers.

Each parser takes the raw request body (or L{None}, if the request had no
body) and returns a Python value, raising L{BadRequestError} if the body is
malformed.
"""

from io import BytesIO
from typing import Any, Dict, Optional

from werkzeug.formparser import FormDataParser
from werkzeug.http import parse_options_header

from ._context import FORM_MULTIPART
from ._errors import BadRequestError
from ._options import ParsingOptions
from ._query import NestedParams, parseNestedQuery


__all__ = ()


def parseJSON(payload: Optional[bytes], options: ParsingOptions) -> Any:
    """
    Decode a JSON document.

    Any top-level JSON value is accepted, so the result may be a L{dict}, a
    L{list}, a L{str}, an L{int}, a L{float}, a L{bool} or L{None}.
    """
    if not payload:
        raise BadRequestError("Empty request body")
    try:
        return options.jsonLoader(payload)
    except (ValueError, RecursionError) as e:
        raise BadRequestError(f"Could not parse request body: {e}") from e


def parseURLEncoded(
    payload: Optional[bytes], options: ParsingOptions
) -> NestedParams:
    """
    Decode an C{application/x-www-form-urlencoded} body, interpreting
    bracketed field names the same way L{parseNestedQuery} does.
    """
    if not payload:
        return {}
    try:
        text = payload.decode(options.charset)
    except UnicodeDecodeError as e:
        raise BadRequestError(
            f"Request body is not valid {options.charset}"
        ) from e
    return parseNestedQuery(text, options.charset, options.maxNestingDepth)


def parseMultipart(
    payload: Optional[bytes],
    contentType: Optional[str],
    options: ParsingOptions,
) -> Dict[str, Any]:
    """
    Decode a C{multipart/form-data} body.

    Plain fields are returned as L{str}; uploaded files as
    L{werkzeug.datastructures.FileStorage}.  Field names are used literally,
    and if a name appears more than once the last part wins.

    @raise werkzeug.exceptions.RequestEntityTooLarge: If the body exceeds
        the limits configured in C{options}.
    """
    if not payload:
        return {}
    _, headerOptions = parse_options_header(contentType or "")
    if not headerOptions.get("boundary"):
        raise BadRequestError("Multipart request body has no boundary")

    parser = FormDataParser(
        max_form_memory_size=options.maxFormMemorySize,
        max_form_parts=options.maxFormParts,
        silent=False,
    )
    try:
        _, form, files = parser.parse(
            BytesIO(payload), FORM_MULTIPART, len(payload), headerOptions
        )
    except ValueError as e:
        raise BadRequestError(f"Could not parse request body: {e}") from e

    fields: Dict[str, Any] = dict(form.items(multi=True))
    fields.update(files.items(multi=True))
    return fields


def parseRaw(payload: Optional[bytes]) -> bytes:
    """
    Return the body as-is, insisting that there be one.
    """
    if not payload:
        raise BadRequestError("Empty request body")
    return payload
