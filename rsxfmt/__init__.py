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
The rsxfmt module.

Reads an rsx block and writes it back in its canonical form::

    >>> from rsxfmt import format_block
    >>> print(format_block('div { class: "box", "hi" }'), end='')
    div {
        class: "box",
        "hi"
    }

:func:`format_block` raises a :class:`~rsxfmt.errors.FormatError` subclass
when the text can't be read or formatted; :func:`fmt_block` returns None in
that case.

"""

import logging

from .errors import FormatError
from .pkginfo import version, version_string


__all__ = ('format_block', 'fmt_block', 'version', 'version_string')


logger = logging.getLogger(__name__)


def format_block(text, indent_width=4, renderer=None):
    """Read the rsx ``text`` and return it formatted.

    The ``indent_width`` is the number of spaces per indent level; the
    ``renderer``, if given, is the :class:`~rsxfmt.expression.Renderer` for
    embedded expressions.

    Raises :class:`~rsxfmt.errors.ParseFailure` if the text can't be read,
    and :class:`~rsxfmt.errors.UnsupportedConstruct` if it contains nodes
    that can't be formatted.

    """
    from .dom import read
    return read.rsx_document(text).write(indent_width, 0, renderer)


def fmt_block(text, indent_width=4, renderer=None):
    """Like :func:`format_block`, but return None if formatting fails."""
    try:
        return format_block(text, indent_width, renderer)
    except FormatError as e:
        logger.debug("can't format block: %s", e)
