from ._body import BodyMode, BodyResolver, ParseStrategy, selectStrategy
from ._context import RequestContext, isFormData, mediaTypeOf
from ._context_compat import contextFromEnviron, contextFromRequest
from ._errors import BadRequestError, UnsupportedMediaTypeError
from ._helper import RequestHelper
from ._options import ParsingOptions
from ._query import parseFlatQuery, parseNestedQuery
from ._url import baseURL, resolveURL
from ._version import __version__ as _incremental_version


__all__ = (
    "BadRequestError",
    "BodyMode",
    "BodyResolver",
    "ParseStrategy",
    "ParsingOptions",
    "RequestContext",
    "RequestHelper",
    "UnsupportedMediaTypeError",
    "__author__",
    "__copyright__",
    "__license__",
    "__version__",
    "baseURL",
    "contextFromEnviron",
    "contextFromRequest",
    "isFormData",
    "mediaTypeOf",
    "parseFlatQuery",
    "parseNestedQuery",
    "resolveURL",
    "selectStrategy",
)


# Make it a str
__version__ = _incremental_version.base()

__author__ = "The satchel contributors"
__license__ = "MIT"
__copyright__ = f"Copyright 2011-2021 {__author__}"
