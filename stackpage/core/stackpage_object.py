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
StackPageObject is the base class of the server side objects.
It holds a name and a logger, and provides a shared logger
for objects that were not given one.
'''
import logging


class StackPageObject(object):
    '''
    Basic class to ease logging and description of objects.
    '''

    _logger = None
    log_format = '[%(levelname)-8s] [%(asctime)s] [%(module)-17s.%(funcName)-20s] -> %(message)s'

    @classmethod
    def get_logger(cls):
        '''
        :return: the class logger
        '''
        if StackPageObject._logger is None:
            logger = logging.getLogger('stackpage')
            logger.setLevel(logging.INFO)
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(StackPageObject.log_format))
            logger.addHandler(console_handler)
            StackPageObject._logger = logger
        return StackPageObject._logger

    @classmethod
    def set_verbosity(cls, verbose):
        '''
        :param verbose: if True, log debug messages as well
        '''
        level = logging.DEBUG if verbose else logging.INFO
        cls.get_logger().setLevel(level)

    @classmethod
    def add_log_file(cls, filename):
        '''
        Also write the class logger output to a file

        :param filename: path of the log file
        '''
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(StackPageObject.log_format))
        cls.get_logger().addHandler(file_handler)

    def __init__(self, name, logger=None):
        '''
        :param name: name of the object
        :param logger: logger for the object (default: None)
        '''
        self.name = name
        if logger:
            self.logger = logger
        else:
            self.logger = StackPageObject.get_logger()

    def get_description(self):
        '''
        :rtype: str
        :return: the description of the object. by default only prints the object type.
        '''
        return type(self).__name__

    def get_name(self):
        '''
        :rtype: str
        :return: object's name
        '''
        return self.name

    def not_implemented(self, func_name):
        '''
        log access to unimplemented method and raise error

        :param func_name: name of unimplemented function.
        :raise: NotImplementedError detailing the function the is not implemented.
        '''
        msg = '%s is not overridden by %s' % (func_name, type(self).__name__)
        self.logger.error(msg)
        raise NotImplementedError(msg)
