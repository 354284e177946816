# -*- test-case-name: satchel.test.test_query -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Query string parsing.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import unquote_plus

from ._errors import BadRequestError


__all__ = ()


FlatParams = Dict[str, Optional[str]]
NestedParams = Dict[str, Any]

DEFAULT_DEPTH_LIMIT = 100

_leadingName = re.compile(r"\A[\[\]]*([^\[\]]+)\]*")
_listOfMappingsChild = re.compile(r"\A\[\]\[([^\[\]]+)\]\Z")
_listRemainder = re.compile(r"\A\[\](.+)\Z", re.DOTALL)
_keyParts = re.compile(r"[\[\]]+")


def _unquote(text: str, charset: str) -> str:
    try:
        return unquote_plus(text, encoding=charset, errors="strict")
    except UnicodeDecodeError as e:
        raise BadRequestError(
            f"Invalid {charset} encoding in parameter {text!r}"
        ) from e


def queryPairs(
    queryString: Optional[str], charset: str = "utf-8"
) -> Iterable[Tuple[str, Optional[str]]]:
    """
    Split a query string into decoded C{(name, value)} pairs, in the order
    they appear.

    A pair with no C{=} has a value of L{None}.  Empty pairs, such as the
    ones produced by C{a=1&&b=2}, are skipped.

    @raise BadRequestError: If a name or value does not decode in
        C{charset}.
    """
    if not queryString:
        return
    for piece in queryString.split("&"):
        if not piece:
            continue
        name, sep, value = piece.partition("=")
        yield (
            _unquote(name, charset),
            _unquote(value, charset) if sep else None,
        )


def parseFlatQuery(
    queryString: Optional[str], charset: str = "utf-8"
) -> FlatParams:
    """
    Parse a query string into a flat mapping.

    Parameter names are used literally: C{foo[bar]=baz} is returned as
    C{{"foo[bar]": "baz"}}.  If a name appears more than once, the last
    value wins.
    """
    return dict(queryPairs(queryString, charset))


def parseNestedQuery(
    queryString: Optional[str],
    charset: str = "utf-8",
    depthLimit: int = DEFAULT_DEPTH_LIMIT,
) -> NestedParams:
    """
    Parse a query string into a nested structure.

    Square brackets in parameter names are interpreted:

        - C{name[key]=value} makes C{name} a L{dict} with C{key} mapped to
          C{value};

        - C{name[]=value} makes C{name} a L{list} and appends C{value} to it;

        - C{name[][key]=value} makes C{name} a L{list} of L{dict}s, starting
          a new L{dict} whenever the last one already has C{key}.

    All of this applies recursively, so C{a[b][c][]=d} is
    C{{"a": {"b": {"c": ["d"]}}}}.

    @raise BadRequestError: If the same name is used both as a plain value
        and as a container, if names nest deeper than C{depthLimit}, or if
        a name or value does not decode in C{charset}.
    """
    params: NestedParams = {}
    for name, value in queryPairs(queryString, charset):
        _normalize(params, name, value, depthLimit)
    return params


def _expect(
    params: NestedParams, key: str, kind: type
) -> Union[List[Any], NestedParams]:
    existing = params.get(key)
    if existing is None:
        existing = params[key] = kind()
    if not isinstance(existing, kind):
        raise BadRequestError(
            f"Expected {kind.__name__} (got {type(existing).__name__}) "
            f"for param {key!r}"
        )
    return existing


def _hasKey(params: NestedParams, name: str) -> bool:
    """
    Whether C{params} already holds a value at the (possibly bracketed)
    C{name}.
    """
    if "[]" in name:
        return False
    current: Any = params
    for part in _keyParts.split(name):
        if not part:
            continue
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def _normalize(
    params: NestedParams, name: str, value: Optional[str], depth: int
) -> NestedParams:
    if depth <= 0:
        raise BadRequestError("Exceeded the nested parameter depth limit")

    match = _leadingName.match(name)
    if match is None:
        return params
    key = match.group(1)
    after = name[match.end() :]

    if after == "":
        params[key] = value
    elif after == "[":
        params[name] = value
    elif after == "[]":
        _expect(params, key, list).append(value)
    else:
        childMatch = _listOfMappingsChild.match(after) or _listRemainder.match(
            after
        )
        if childMatch is not None:
            childKey = childMatch.group(1)
            items = _expect(params, key, list)
            last = items[-1] if items else None
            if isinstance(last, dict) and not _hasKey(last, childKey):
                _normalize(last, childKey, value, depth - 1)
            else:
                items.append(_normalize({}, childKey, value, depth - 1))
        else:
            child = _expect(params, key, dict)
            _normalize(child, after, value, depth - 1)

    return params
