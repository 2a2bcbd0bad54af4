# -*- coding: utf-8 -*-
#
# This file is part of `rsxfmt`, a library to read and pretty-print rsx blocks
#
# Copyright © 2026 by the rsxfmt authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Rendering of embedded expressions.

The formatter does not know anything about the language of the expressions
that are embedded in an rsx block. It asks a :class:`Renderer` for the text
of an expression, and only decides where the lines of that text start.

A Renderer must be deterministic: the same expression must always render to
the same text, otherwise formatting would not be idempotent.

:class:`ExpressionRenderer` is the default. You can give your own renderer
to the :class:`~rsxfmt.dom.indent.Formatter`, e.g. one that calls an
external pretty-printer for the expression language::

    >>> from rsxfmt.expression import Renderer
    >>> class Upper(Renderer):
    ...     def render(self, expression):
    ...         return expression.head.upper()
    ...
    >>> from rsxfmt import format_block
    >>> print(format_block('div { width: w }', renderer=Upper()), end='')
    div {
        width: W,
    }

"""

import parce
import parce.action as a


class Renderer:
    """Base class for an expression renderer.

    Implement :meth:`render`.

    """
    def render(self, expression):
        """Return the canonical text of the :class:`~rsxfmt.dom.rsx.Expression`.

        Multiple lines are separated by a newline.

        """
        raise NotImplementedError

    def lines(self, expression):
        """Return the rendered expression as a list of lines."""
        return self.render(expression).split('\n')

    def literal_lines(self, text):
        """Return the set of the indices of the lines in ``text`` that start
        inside a string literal.

        Such lines are part of the value of the literal, and must be written
        as they are, without indent.

        """
        from .lang.rsx import Rsx
        result = set()
        for t in parce.root(Rsx.expression, text).tokens():
            if t.action in a.String and '\n' in t.text:
                first = text.count('\n', 0, t.pos)
                result.update(range(first + 1, first + 1 + t.text.count('\n')))
        return result


class ExpressionRenderer(Renderer):
    """The default renderer, that tidies the source text of the expression.

    Trailing whitespace is removed from every line, blank lines are dropped,
    and the common indent of the lines after the first is removed. The first
    line is never indented. So the expression::

        move |_| {
                count += 1;
            }

    becomes::

        move |_| {
            count += 1;
        }

    Lines that start inside a multi-line string literal are kept as they
    are, and trailing whitespace is only removed when the line does not end
    inside a string literal.

    """
    def render(self, expression):
        text = expression.head.strip()
        literal = self.literal_lines(text)
        lines = []
        for i, line in enumerate(text.split('\n')):
            if i + 1 not in literal:
                line = line.rstrip()
            if line or i in literal or not i:
                lines.append((i in literal, line))
        rest = [line for verbatim, line in lines[1:] if not verbatim]
        if rest:
            indent = min(len(line) - len(line.lstrip()) for line in rest)
            lines[1:] = [(verbatim, line if verbatim else line[indent:])
                for verbatim, line in lines[1:]]
        return '\n'.join(line for verbatim, line in lines)
