# Copyright (C) 2026 The StackPage authors. All rights reserved.
#
# This file is part of StackPage.
#
# StackPage is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 2 of the License, or
# (at your option) any later version.
#
# StackPage is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with StackPage.  If not, see <http://www.gnu.org/licenses/>.
'''
Tests for the value formatters
'''
import unittest
from stackpage.core import StackPageException
from stackpage.render.formatting import escape, format_natural, format_integer, format_real
from common import get_test_logger


class EscapeTests(unittest.TestCase):

    def setUp(self):
        self.logger = get_test_logger()
        self.logger.debug('TESTING METHOD: %s', self._testMethodName)

    def testPlainTextUnchanged(self):
        self.assertEqual(escape('text'), 'text')
        self.assertEqual(escape(''), '')

    def testSpecialCharacters(self):
        self.assertEqual(escape('<escaped text/>'), '&lt;escaped text/&gt;')
        self.assertEqual(escape('/a&b'), '/a&amp;b')
        self.assertEqual(escape('"q"'), '&quot;q&quot;')
        self.assertEqual(escape("'"), '&#x27;')

    def testTemplateMarkupIsEscaped(self):
        self.assertEqual(escape('<% ignored %>'), '&lt;% ignored %&gt;')

    def testNonStringRaises(self):
        with self.assertRaises(StackPageException):
            escape(10)


class IntegerFormatTests(unittest.TestCase):

    def setUp(self):
        self.logger = get_test_logger()
        self.logger.debug('TESTING METHOD: %s', self._testMethodName)

    def testNatural(self):
        self.assertEqual(format_natural(10), '10')
        self.assertEqual(format_natural(0), '0')
        self.assertEqual(format_natural(1234567), '1234567')

    def testNaturalWidths(self):
        self.assertEqual(format_natural(255, 'uint8'), '255')
        self.assertEqual(format_natural(65535, 'uint16'), '65535')
        self.assertEqual(format_natural(2 ** 32 - 1, 'uint32'), '4294967295')
        self.assertEqual(format_natural(2 ** 64 - 1, 'uint64'), '18446744073709551615')

    def testNaturalOutOfRange(self):
        with self.assertRaises(StackPageException):
            format_natural(256, 'uint8')
        with self.assertRaises(StackPageException):
            format_natural(-1)

    def testInteger(self):
        self.assertEqual(format_integer(20), '20')
        self.assertEqual(format_integer(-20), '-20')
        self.assertEqual(format_integer(0), '0')

    def testIntegerWidths(self):
        self.assertEqual(format_integer(-128, 'int8'), '-128')
        self.assertEqual(format_integer(127, 'int8'), '127')
        self.assertEqual(format_integer(-2 ** 31, 'int32'), '-2147483648')
        self.assertEqual(format_integer(2 ** 63 - 1, 'int64'), '9223372036854775807')

    def testIntegerOutOfRange(self):
        with self.assertRaises(StackPageException):
            format_integer(128, 'int8')
        with self.assertRaises(StackPageException):
            format_integer(-2 ** 31 - 1, 'int32')

    def testUnknownWidth(self):
        with self.assertRaises(StackPageException):
            format_integer(1, 'int128')
        with self.assertRaises(StackPageException):
            format_natural(1, 'int8')

    def testNonIntRaises(self):
        with self.assertRaises(StackPageException):
            format_integer(1.0)
        with self.assertRaises(StackPageException):
            format_natural(True)


class RealFormatTests(unittest.TestCase):

    def setUp(self):
        self.logger = get_test_logger()
        self.logger.debug('TESTING METHOD: %s', self._testMethodName)

    def testIntegralHasNoDecimalPoint(self):
        self.assertEqual(format_real(30.0), '30')
        self.assertEqual(format_real(0.0), '0')
        self.assertEqual(format_real(-64.0), '-64')

    def testMinimalDigits(self):
        self.assertEqual(format_real(0.1), '0.1')
        self.assertEqual(format_real(2.5), '2.5')
        self.assertEqual(format_real(1 / 3.0), '0.3333333333333333')

    def testNoExponent(self):
        self.assertEqual(format_real(1e20), '100000000000000000000')
        self.assertEqual(format_real(1.5e-7), '0.00000015')

    def testNegativeZero(self):
        self.assertEqual(format_real(-0.0), '-0')

    def testNonFinite(self):
        self.assertEqual(format_real(float('nan')), 'NaN')
        self.assertEqual(format_real(float('inf')), '+Inf')
        self.assertEqual(format_real(float('-inf')), '-Inf')

    def testIntArgument(self):
        self.assertEqual(format_real(30), '30')

    def testFloat32(self):
        self.assertEqual(format_real(32.0, 'float32'), '32')
        self.assertEqual(format_real(0.1, 'float32'), '0.10000000149011612')

    def testFloat32Overflow(self):
        self.assertEqual(format_real(1e300, 'float32'), '+Inf')
        self.assertEqual(format_real(-1e300, 'float32'), '-Inf')

    def testBadArguments(self):
        with self.assertRaises(StackPageException):
            format_real('30')
        with self.assertRaises(StackPageException):
            format_real(True)
        with self.assertRaises(StackPageException):
            format_real(1.0, 'float16')
