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
Value formatters used by the page renderers.

:Escaping: ``escape`` replaces ``& < > " '`` with character references.

:Integers:
    ``format_natural`` and ``format_integer`` render base-10 digits,
    no leading zeros and no grouping.
    The value must fit in the given width.

    +---------+--------------------------+----------------------------+
    | Width   | Min                      | Max                        |
    +=========+==========================+============================+
    | uint8   | 0                        | 255                        |
    +---------+--------------------------+----------------------------+
    | uint16  | 0                        | 65535                      |
    +---------+--------------------------+----------------------------+
    | uint32  | 0                        | 4294967295                 |
    +---------+--------------------------+----------------------------+
    | uint64  | 0                        | 18446744073709551615       |
    +---------+--------------------------+----------------------------+
    | int8    | -128                     | 127                        |
    +---------+--------------------------+----------------------------+
    | int16   | -32768                   | 32767                      |
    +---------+--------------------------+----------------------------+
    | int32   | -2147483648              | 2147483647                 |
    +---------+--------------------------+----------------------------+
    | int64   | -9223372036854775808     | 9223372036854775807        |
    +---------+--------------------------+----------------------------+

:Reals:
    ``format_real`` renders the shortest digits that read back to the same
    double, in fixed notation, without a decimal point for integral values.
    float32 values are rounded to single precision first.
'''
import html
import math
import struct
from decimal import Decimal
from stackpage.core import kassert, StackPageException


NATURAL_WIDTHS = {
    'uint8': 8,
    'uint16': 16,
    'uint32': 32,
    'uint64': 64,
}

INTEGER_WIDTHS = {
    'int8': 8,
    'int16': 16,
    'int32': 32,
    'int64': 64,
}

REAL_WIDTHS = ('float32', 'float64')


def escape(text):
    '''
    :type text: ``str``
    :param text: text to escape
    :return: text with HTML special characters replaced by character references
    '''
    kassert.is_of_types(text, str)
    return html.escape(text, quote=True)


def format_natural(value, width='uint64'):
    '''
    :param value: non-negative integer
    :param width: one of NATURAL_WIDTHS (default: 'uint64')
    :return: base-10 representation of value
    '''
    kassert.is_in(width, NATURAL_WIDTHS)
    kassert.is_int(value)
    kassert.in_range(value, 0, (1 << NATURAL_WIDTHS[width]) - 1)
    return '%d' % value


def format_integer(value, width='int64'):
    '''
    :param value: signed integer
    :param width: one of INTEGER_WIDTHS (default: 'int64')
    :return: base-10 representation of value
    '''
    kassert.is_in(width, INTEGER_WIDTHS)
    kassert.is_int(value)
    bits = INTEGER_WIDTHS[width]
    kassert.in_range(value, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    return '%d' % value


def _to_float32(value):
    try:
        return struct.unpack('<f', struct.pack('<f', value))[0]
    except OverflowError:
        # out of single precision range
        return math.copysign(math.inf, value)


def format_real(value, width='float64'):
    '''
    :param value: int or float
    :param width: 'float32' or 'float64' (default: 'float64')
    :return: minimal digits fixed notation of value
    '''
    kassert.is_in(width, REAL_WIDTHS)
    if isinstance(value, bool):
        raise StackPageException('object type (%s) is not a real' % type(value))
    kassert.is_of_types(value, (int, float))
    value = float(value)
    if width == 'float32':
        value = _to_float32(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '+Inf' if value > 0 else '-Inf'
    return format(Decimal(repr(value)).normalize(), 'f')
