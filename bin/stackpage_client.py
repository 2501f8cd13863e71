#!/usr/bin/env python
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
Usage:
    stackpage-client page [<path>] [--host <hostname>] [--port <port>]
    stackpage-client stack [<path>] [--host <hostname>] [--port <port>]

Fetch a page from a running StackPage server

Commands:
    page    print the page
    stack   print the values of the stack section, one per line

Options:
    -h --host <hostname>    StackPage server host [default: localhost]
    -p --port <port>        StackPage server port [default: 8080]
'''
import sys
import docopt
from stackpage.client import StackPageWebApi


def cmd_page(options, web):
    print(web.get_page(options['<path>'] or '/'))


def cmd_stack(options, web):
    for value in web.get_stack_values(options['<path>'] or '/'):
        print(value)


def _main():
    options = docopt.docopt(__doc__)
    web = StackPageWebApi(options['--host'], int(options['--port']))
    try:
        if options['page']:
            cmd_page(options, web)
        elif options['stack']:
            cmd_stack(options, web)
    except Exception as ex:
        print('[!] %s' % ex)
        sys.exit(1)


if __name__ == '__main__':
    _main()
