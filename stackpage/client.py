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
Client side API of a running StackPage server
'''
import requests
from stackpage.core import StackPageException


class StackPageWebApi(object):

    def __init__(self, host, port, timeout=10):
        '''
        :param host: server hostname
        :param port: server port
        :param timeout: request timeout in seconds (default: 10)
        '''
        self.url = 'http://%(host)s:%(port)s' % {'host': host, 'port': port}
        self.timeout = timeout

    def get_response(self, path='/'):
        '''
        :param path: path to request (default: '/')
        :return: the requests response object
        '''
        if not path.startswith('/'):
            path = '/' + path
        return requests.get('%s%s' % (self.url, path), timeout=self.timeout)

    def get_page(self, path='/'):
        '''
        :param path: path to request (default: '/')
        :return: the page text
        :raise: StackPageException if the server did not answer with 200
        '''
        resp = self.get_response(path)
        if resp.status_code != 200:
            raise StackPageException('GET %s returned %d' % (path, resp.status_code))
        resp.encoding = 'utf-8'
        return resp.text

    def get_stack_values(self, path='/'):
        '''
        :param path: path to request (default: '/')
        :return: list of the values printed in the stack section, in page order
        '''
        return parse_stack_values(self.get_page(path))


def parse_stack_values(page):
    '''
    :param page: text of a stack page
    :return: list of ints printed after "Stack :"
    :raise: StackPageException if the page has no stack section
    '''
    marker = 'Stack :'
    if marker not in page:
        raise StackPageException('page has no stack section')
    section = page.split(marker, 1)[1].split('</body>', 1)[0]
    section = section.replace('<br/>', ' ')
    return [int(token) for token in section.split()]
