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
Last-in-first-out container.

A single Stack class serves every element type.
The optional element type is a plain isinstance filter (so an int stack
also takes bools), a check function can narrow it further::

    stack = Stack(element_type=int)
    stack.push(10)
    stack.push(20)
    list(stack.drain())  # [20, 10]

    int32_stack = Stack(element_type=int, check=kassert.is_int32)
'''
from stackpage.core import EmptyStackError
from stackpage.core import kassert


class Stack(object):
    '''
    Strict LIFO ordering over a list
    '''

    def __init__(self, element_type=None, elements=None, check=None):
        '''
        :param element_type: type (or tuple of types) of the elements, None for any type (default: None)
        :param elements: initial elements, pushed in order (default: None)
        :param check: function(element) raising on invalid elements, called on every push (default: None)
        '''
        self._element_type = element_type
        self._check = check
        self._elements = []
        if elements:
            for element in elements:
                self.push(element)

    def is_empty(self):
        '''
        :return: True if the stack holds no elements
        '''
        return len(self._elements) == 0

    def push(self, element):
        '''
        :param element: element to put on top of the stack
        :raise: StackPageException if element is not of the stack's element type or fails the check
        '''
        if self._element_type is not None:
            kassert.is_of_types(element, self._element_type)
        if self._check is not None:
            self._check(element)
        self._elements.append(element)

    def pop(self):
        '''
        :return: the most recently pushed element, removing it from the stack
        :raise: EmptyStackError if the stack is empty
        '''
        if self.is_empty():
            raise EmptyStackError('pop from an empty stack')
        return self._elements.pop()

    def peek(self):
        '''
        :return: the most recently pushed element, without removing it
        :raise: EmptyStackError if the stack is empty
        '''
        if self.is_empty():
            raise EmptyStackError('peek into an empty stack')
        return self._elements[-1]

    def drain(self):
        '''
        Pop elements until the stack is empty

        :return: generator of the popped elements, top first
        '''
        while not self.is_empty():
            yield self.pop()

    def get_element_type(self):
        return self._element_type

    def __len__(self):
        return len(self._elements)

    def __bool__(self):
        return not self.is_empty()

    def __repr__(self):
        return 'Stack(element_type=%s, elements=%r)' % (
            getattr(self._element_type, '__name__', self._element_type),
            self._elements
        )
