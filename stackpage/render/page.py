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
Page renderers.

A page is rendered from the request path only, the output is a plain string
built from literal markup and formatted (escaped where needed) values.
The same path always renders the same document.

+---------+-------------+---------------------------------------------------+
| Name    | Class       | Content                                           |
+=========+=============+===================================================+
| stack   | StackPage   | sample values and a stack drained in LIFO order   |
+---------+-------------+---------------------------------------------------+
| widths  | WidthsPage  | integers and reals of every width                 |
+---------+-------------+---------------------------------------------------+
'''
from stackpage.core import kassert
from stackpage.core.stackpage_object import StackPageObject
from stackpage.model.samples import RenderContext
from stackpage.render.formatting import escape, format_natural, format_integer, format_real


class Page(StackPageObject):
    '''
    Base (abstract) page, renders the document skeleton around the body
    '''

    encoding = 'utf-8'
    content_type = 'text/html; charset=utf-8'

    _head = '<!DOCTYPE html>\n<html lang="en">\n    <head>\n        <meta charset="utf-8">\n        <title>'
    _body_start = '</title>\n    </head>\n    <body>\n        '
    _body_end = '\n    </body>\n</html>'

    def __init__(self, name, logger=None):
        '''
        :param name: name of the page
        :param logger: logger for the page (default: None)
        '''
        super(Page, self).__init__(name, logger)

    def render(self, path):
        '''
        :type path: ``str``
        :param path: request path
        :return: the HTML document
        '''
        context = RenderContext(path)
        parts = [self._head, escape(context.path), self._body_start]
        parts.extend(self._render_body(context))
        parts.append(self._body_end)
        return ''.join(parts)

    def render_bytes(self, path):
        '''
        :param path: request path
        :return: the HTML document, encoded
        '''
        return self.render(path).encode(self.encoding)

    def _render_body(self, context):
        '''
        :param context: RenderContext of the request
        :return: list of body fragments
        '''
        self.not_implemented('_render_body')


class StackPage(Page):
    '''
    Sample values, followed by the content of a stack, popped until empty
    '''

    def __init__(self, name='stack', logger=None):
        super(StackPage, self).__init__(name, logger)

    def _render_body(self, context):
        parts = []
        if context.flag:
            parts += [
                '\n            ',
                escape('URL : ' + context.path),
                '\n            <br/>\n            ',
                format_natural(context.natural),
                '\n            ',
                format_integer(context.integer),
                '\n            ',
                format_real(context.real),
                '\n            <br/>\n            ',
                context.text,
                '\n            ',
                escape(context.escaped_text),
                '\n            ',
                escape(context.ignored_markup),
                '\n        ',
            ]
        parts.append('\n        <br/>\n        Stack :\n        <br/>\n        ')
        stack = context.new_stack()
        for value in stack.drain():
            parts += ['\n            ', format_integer(value, 'int32'), '\n        ']
        return parts


class WidthsPage(Page):
    '''
    Naturals, integers and reals of each width, concatenated per kind
    '''

    def __init__(self, name='widths', logger=None):
        super(WidthsPage, self).__init__(name, logger)

    def _render_body(self, context):
        self._log_flags(context)
        return [
            escape('URL=' + context.path),
            '\n        ',
            ''.join(format_natural(v, w) for (v, w) in context.naturals),
            '\n        ',
            ''.join(format_integer(v, w) for (v, w) in context.integers),
            '\n        ',
            ''.join(format_real(v, w) for (v, w) in context.reals),
            '\n        ',
            context.text,
            '\n        ',
            escape(context.escaped_text),
            '\n        ',
            escape(context.ignored_markup),
        ]

    def _log_flags(self, context):
        flag = context.flag
        self.logger.debug('flag and flag: %s', flag and flag)
        self.logger.debug('not (flag and not flag): %s', not (flag and not flag))
        self.logger.debug('flag: %s', flag)
        self.logger.debug('not flag: %s', not flag)


PAGES = {
    'stack': StackPage,
    'widths': WidthsPage,
}


def get_page(name, logger=None):
    '''
    :param name: page name, one of PAGES
    :param logger: logger for the page (default: None)
    :return: a new page object
    '''
    kassert.is_in(name, PAGES)
    return PAGES[name](logger=logger)


def render_root_page(path):
    '''
    :param path: request path
    :return: the stack page document for path
    '''
    return StackPage().render(path)
