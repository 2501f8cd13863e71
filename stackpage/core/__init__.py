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
Core classes and exceptions shared by all StackPage modules.
'''


class StackPageException(Exception):
    '''
    Base exception for all StackPage errors
    '''
    pass


class EmptyStackError(StackPageException, IndexError):
    '''
    Raised when popping (or peeking into) an empty stack
    '''
    pass
