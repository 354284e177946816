# -*- test-case-name: satchel.test.test_options -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{satchel._options}.
"""

import json

from .._options import ParsingOptions
from ._trial import TestCase


__all__ = ()


class ParsingOptionsTests(TestCase):
    """
    Tests for L{ParsingOptions}.
    """

    def test_defaults(self) -> None:
        """
        By default, text is UTF-8, JSON is decoded with L{json.loads}, names
        may nest 100 deep and multipart bodies are not limited.
        """
        options = ParsingOptions()
        self.assertEqual(options.charset, "utf-8")
        self.assertIdentical(options.jsonLoader, json.loads)
        self.assertEqual(options.maxNestingDepth, 100)
        self.assertIdentical(options.maxFormMemorySize, None)
        self.assertIdentical(options.maxFormParts, None)

    def test_notCallable(self) -> None:
        """
        The JSON loader must be callable.
        """
        self.assertRaises(TypeError, ParsingOptions, jsonLoader="json")

    def test_limitsPositive(self) -> None:
        """
        Limits must be positive.
        """
        e = self.assertRaises(ValueError, ParsingOptions, maxNestingDepth=0)
        self.assertEqual(str(e), "maxNestingDepth must be positive, not 0")
        self.assertRaises(ValueError, ParsingOptions, maxFormParts=-1)
        self.assertRaises(ValueError, ParsingOptions, maxFormMemorySize=0)

    def test_limitsIntegers(self) -> None:
        """
        Limits must be integers, or L{None} where there may be no limit.
        """
        self.assertRaises(TypeError, ParsingOptions, maxNestingDepth=None)
        self.assertRaises(TypeError, ParsingOptions, maxFormParts="10")
