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

from stackpage.core import StackPageException


def is_of_types(obj, types):
    '''
    :param obj: object to assert
    :param types: iterable of types, or a single type
    :raise: an exception if obj is not an instance of types
    '''
    if not isinstance(obj, types):
        raise StackPageException('object type (%s) is not one of (%s)' % (type(obj), types))


def is_int(obj):
    '''
    :param obj: object to assert
    :raise: an exception if obj is not an int type (bool is not accepted)
    '''
    if isinstance(obj, bool):
        raise StackPageException('object type (%s) is not an int' % type(obj))
    is_of_types(obj, int)


def is_in(obj, it):
    '''
    :param obj: object to assert
    :param it: iterable of elements we assert obj is in
    :raise: an exception if obj is not in an iterable
    '''
    if obj not in it:
        raise StackPageException('(%s) is not in %s' % (obj, it))


def in_range(obj, min_value, max_value):
    '''
    :param obj: number to assert
    :param min_value: lowest allowed value (inclusive)
    :param max_value: highest allowed value (inclusive)
    :raise: an exception if obj is outside [min_value, max_value]
    '''
    if not min_value <= obj <= max_value:
        raise StackPageException('(%s) is not in range [%s, %s]' % (obj, min_value, max_value))


def not_none(obj):
    '''
    :param obj: object to assert
    :raise: an exception if obj is None
    '''
    if obj is None:
        raise StackPageException('object is None')


def is_int32(obj):
    '''
    :param obj: object to assert
    :raise: an exception if obj is not an int in the signed 32 bit range
    '''
    is_int(obj)
    in_range(obj, -(1 << 31), (1 << 31) - 1)
