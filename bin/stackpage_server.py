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
Serve the StackPage demonstration page over HTTP.

Usage:
    stackpage-server [options]
    stackpage-server --version

Options:
    -H --host HOST          address to listen on [default: 0.0.0.0]
    -p --port PORT          port to listen on [default: 8080]
    -P --page PAGE          page to serve, one of: stack, widths [default: stack]
    -l --log-file FILE      also write the log to FILE
    -v --verbose            verbose output
    --version               print version and exit
    -h --help               print this help and exit
'''
import sys
import docopt
from stackpage import __version__
from stackpage.core import StackPageException
from stackpage.core.stackpage_object import StackPageObject
from stackpage.render.page import get_page
from stackpage.server.page_server import PageServer


def get_logger(opts):
    StackPageObject.set_verbosity(opts['--verbose'])
    if opts['--log-file']:
        StackPageObject.add_log_file(opts['--log-file'])
    return StackPageObject.get_logger()


def get_port(opts):
    try:
        return int(opts['--port'])
    except ValueError:
        raise StackPageException('port should be a number')


def _main():
    opts = docopt.docopt(__doc__, version=__version__)
    logger = StackPageObject.get_logger()
    try:
        logger = get_logger(opts)
        page = get_page(opts['--page'], logger=logger)
        server = PageServer(page, host=opts['--host'], port=get_port(opts), logger=logger)
        server.start()
    except Exception as ex:
        logger.error('Error: %s' % ex)
        sys.exit(1)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info('Server stopped by user')
    server.stop()


if __name__ == '__main__':
    _main()
