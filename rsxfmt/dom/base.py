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
Some general element types and some base classes for the rsxfmt.dom elements.
"""


from parce import transform

from . import element


## Base classes:

class Document(element.Element):
    """Base class for a full source document."""


## Special element:

class Invalid(element.TextElement):
    """Represents a piece of source text that could not be read.

    This element can only occur in documents transformed from source. The
    head value is a message describing the problem, e.g. the text that did
    not match or a missing delimiter. The ``position`` attribute is the
    position of the problem in the source text, also when the origin tokens
    are not kept.

    Documents containing Invalid elements can't be formatted; the functions
    in :mod:`~rsxfmt.dom.read` check for them and raise
    :class:`~rsxfmt.errors.ParseFailure` instead of returning such a
    document.

    """
    __slots__ = ('position',)

    def __init__(self, head, *children):
        self.position = None
        super().__init__(head, *children)

    @classmethod
    def from_message(cls, message, origin=()):
        """Create an Invalid element with the message, remembering the position
        of the first token in ``origin``, if any.

        """
        node = cls(message)
        if origin:
            node.position = origin[0].pos
        return node


## Transform base/helper classes

class Transform(transform.Transform):
    """Transform base class that keeps the origin tokens.

    Provides the :meth:`factory` method that creates the DOM node.

    """
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances. All elements should be created using this method, so
        that it can be overridden for the case you don't want to remember the
        origin.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)


class AdHocTransform:
    """Transform mixin class that does *not* keep the origin tokens.

    This is used to create pieces (nodes) of an rsx document from text, that
    are then used to compose a larger Document. It is undesirable that origin
    tokens then would mistakenly be used as if they originated from the
    document that's being composed.

    """
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element *without* keeping its origin."""
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children)
