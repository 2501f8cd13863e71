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
HTTP listener serving a single page on every path.

Each request is handled in its own thread and renders its own page,
so a failing request is answered with 500 and does not affect the others.
'''
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit
from stackpage import __version__
from stackpage.core import StackPageException, kassert
from stackpage.core.stackpage_object import StackPageObject


DEFAULT_HOST = ''
DEFAULT_PORT = 8080


def request_path(target):
    '''
    :param target: request target, as received in the request line
    :return: the decoded path, without scheme, host, query and fragment
    '''
    path = target.split('#', 1)[0].split('?', 1)[0]
    if not path.startswith('/'):
        # absolute-form target, keep only the path
        path = urlsplit(path).path
    return unquote(path)


class PageRequestHandler(BaseHTTPRequestHandler):
    '''
    Answers GET and HEAD on any path with the server's page
    '''

    server_version = 'StackPage/%s' % __version__

    def do_GET(self):
        self._serve(send_body=True)

    def do_HEAD(self):
        self._serve(send_body=False)

    def _serve(self, send_body):
        page = self.server.page
        path = request_path(self.path)
        try:
            body = page.render_bytes(path)
        except Exception as e:
            self.server.logger.error('Failed to render page for %r: %s' % (path, e))
            self.send_error(500)
            return
        self.send_response(200)
        self.send_header('Content-Type', page.content_type)
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        if send_body:
            self.wfile.write(body)

    def log_message(self, format, *args):
        self.server.logger.info('%s - %s' % (self.address_string(), format % args))


class _PageHTTPServer(ThreadingHTTPServer):

    daemon_threads = True
    # a second listener on the same port must fail to bind
    allow_reuse_port = False

    def __init__(self, server_address, page, logger):
        self.page = page
        self.logger = logger
        super(_PageHTTPServer, self).__init__(server_address, PageRequestHandler)


class PageServer(StackPageObject):
    '''
    Owns the listener lifecycle: start -> serve_forever -> stop
    '''

    def __init__(self, page, host=DEFAULT_HOST, port=DEFAULT_PORT, name='PageServer', logger=None):
        '''
        :param page: page to serve (:class:`~stackpage.render.page.Page`)
        :param host: address to bind (default: '' - all interfaces)
        :param port: port to bind, 0 for any free port (default: 8080)
        :param name: name of the object (default: 'PageServer')
        :param logger: logger for the object (default: None)
        '''
        super(PageServer, self).__init__(name, logger)
        kassert.not_none(page)
        kassert.is_int(port)
        self.page = page
        self.host = host
        self.port = port
        self._httpd = None
        self._thread = None

    def start(self):
        '''
        Bind the listening socket

        :raise: StackPageException if the address cannot be bound
        '''
        try:
            self._httpd = _PageHTTPServer((self.host, self.port), self.page, self.logger)
        except OSError as e:
            raise StackPageException('Cannot listen on %s:%s: %s' % (self.host, self.port, e))
        self.port = self._httpd.server_address[1]
        self.logger.info('Listening on http://localhost:%d' % self.port)

    def serve_forever(self):
        '''
        Handle requests until stop() is called
        '''
        if self._httpd is None:
            self.start()
        self._httpd.serve_forever()

    def start_in_thread(self):
        '''
        Start the server and handle requests in a background thread
        '''
        self.start()
        self._thread = threading.Thread(target=self._httpd.serve_forever)
        self._thread.daemon = True
        self._thread.start()

    def stop(self):
        '''
        Stop serving and close the listening socket
        '''
        if self._httpd is None:
            return
        self.logger.info('Stopping %s' % self.name)
        if self._thread is not None:
            self._httpd.shutdown()
            self._thread.join()
            self._thread = None
        self._httpd.server_close()
        self._httpd = None

    def get_url(self):
        '''
        :return: base url of the running server
        '''
        return 'http://%s:%d' % (self.host or 'localhost', self.port)
