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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the
best when building DOM snippets using this module and composing them into
other documents.

If you set the ``with_origin`` argument in the reader functions to True, the
origin tokens are preserved, so the DOM nodes know their position in the
originating text.

Text that can't be read raises a :class:`~rsxfmt.errors.ParseFailure`, so the
returned nodes never contain :class:`~rsxfmt.dom.base.Invalid` elements.

"""

import logging

from parce.transform import Transformer

from ..errors import ParseFailure
from ..lang import rsx as lang
from . import base, rsx


logger = logging.getLogger(__name__)


# init two transformers, accessible by 0 (False) and 1 (True) :-)
_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


def check(node):
    """Raise :class:`~rsxfmt.errors.ParseFailure` for the first
    :class:`~rsxfmt.dom.base.Invalid` element in the node, if any.

    Returns the node.

    """
    for n in node // base.Invalid:
        logger.debug("parse failure at %s: %s", n.position, n.head)
        raise ParseFailure(n.head, n.position)
    return node


def rsx_document(text, with_origin=False):
    """Return a :class:`.rsx.Document` from the text.

    Example::

        >>> from rsxfmt.dom import read
        >>> node = read.rsx_document('div { class: "box", "hi" }')
        >>> node.dump()
        <rsx.Document (1 child)>
         ╰╴<rsx.Element 'div' (2 children)>
            ├╴<rsx.TextAttribute 'class' (1 child)>
            │  ╰╴<rsx.String 'box'>
            ╰╴<rsx.Text 'hi'>

    If you want the generated nodes to know the position in the original
    text, you should keep the origin tokens and set ``with_origin`` to True::

        >>> read.rsx_document('div { "hi" }', True).dump()
        <rsx.Document (1 child)>
         ╰╴<rsx.Element 'div' (1 child) [0:12]>
            ╰╴<rsx.Text 'hi' [6:10]>

    """
    node = _transformer[with_origin].transform_text(lang.Rsx.root, text)
    if node is None:
        node = rsx.Document()
    return check(node)


def rsx_node(text, with_origin=False):
    """Return one body node from the text, read in Rsx.root.

    Returns None if the text contains no nodes.

        >>> from rsxfmt.dom import read
        >>> read.rsx_node('"hello"')
        <rsx.Text 'hello'>

    """
    for node in rsx_document(text, with_origin):
        return node
