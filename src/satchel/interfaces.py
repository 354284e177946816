from ._errors import BadRequestError, UnsupportedMediaTypeError
from ._interfaces import IRequestContext, SeekableStream


__all__ = (
    "BadRequestError",
    "IRequestContext",
    "SeekableStream",
    "UnsupportedMediaTypeError",
)
