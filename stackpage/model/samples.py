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
The values shown on the demonstration pages.
A RenderContext is built for every request, nothing in it is shared.
'''
from stackpage.core import kassert
from stackpage.model.stack import Stack


class RenderContext(object):
    '''
    Request path and sample values of a single page rendering
    '''

    def __init__(self, path=''):
        '''
        :type path: ``str``
        :param path: request path, untrusted (default: '')
        '''
        kassert.is_of_types(path, str)
        self.path = path

        self.flag = True
        self.natural = 10
        self.integer = 20
        self.real = 30.0
        self.text = 'text'
        self.escaped_text = '<escaped text/>'
        self.ignored_markup = '<% ignored %>'
        self.stack_values = (10, 20, 30)

        # (value, width) pairs
        self.naturals = ((8, 'uint8'), (16, 'uint16'), (32, 'uint32'), (64, 'uint64'))
        self.integers = ((8, 'int8'), (16, 'int16'), (32, 'int32'), (64, 'int64'))
        self.reals = ((32.0, 'float32'), (64.0, 'float64'))

    def new_stack(self):
        '''
        :return: a fresh int32 stack holding stack_values, last value on top
        '''
        return Stack(element_type=int, elements=self.stack_values, check=kassert.is_int32)
