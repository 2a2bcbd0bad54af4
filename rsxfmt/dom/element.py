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
This module defines the :class:`Element` class.

An Element describes an object in an rsx block and can have child objects.
Every Element has a ``head`` value: for a :class:`TextElement` this is a
writable value given on construction (e.g. the name of a tag or the text of
an expression), other element types have a fixed head or none at all.

An Element can be constructed in two ways: either using the
:meth:`~HeadElement.from_origin` class method from tokens (this is done by
the :class:`~rsxfmt.lang.rsx.RsxTransform` class), or manually using the
normal constructor::

    >>> from rsxfmt.dom import rsx
    >>> div = rsx.Element('div',
    ...     rsx.TextAttribute('class', rsx.String('box')),
    ...     rsx.Text('hi'))
    >>> print(div.write(), end='')
    div {
        class: "box",
        "hi"
    }

When an Element is constructed with :meth:`~HeadElement.with_origin`, it
keeps the tokens it was read from, and thus knows its position in the source
text (see :attr:`Element.pos` and :attr:`Element.end`).

:class:`Element` inherits from :class:`~rsxfmt.node.Node`, and thus from
:class:`list`, to build a reliable and easy to navigate tree structure.

"""

import reprlib

from ..node import Node


class Element(Node):
    """Base class for all element types.

    The Element has no head value. Child elements can be specified directly
    as arguments to the constructor.

    """
    __slots__ = ()

    _head = None

    def __repr__(self):
        def result():
            # class name with last part module prepended
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            # position, only if we have an origin ourselves
            origin = getattr(self, 'head_origin', None)
            if origin:
                tail = getattr(self, 'tail_origin', None) or origin
                yield '[{}:{}]'.format(origin[0].pos, tail[-1].end)
        return "<{}>".format(" ".join(result()))

    @property
    def head(self):
        """The head contents."""
        return self._head

    def repr_head(self):
        """Return a representation for the head.

        The default implementation returns None.

        """
        return None

    @property
    def pos(self):
        """Return the position of this element in the source text.

        Only makes sense for elements that have an origin, or one of the
        descendants has an origin. Returns None if this node and no single
        descendant of it has an origin.

        """
        try:
            return self.head_origin[0].pos
        except (AttributeError, IndexError):
            for n in self.descendants():
                try:
                    return n.head_origin[0].pos
                except (AttributeError, IndexError):
                    pass

    @property
    def end(self):
        """Return the end position of this element in the source text.

        Returns None if this node and no single descendant of it has an
        origin.

        """
        try:
            return self.tail_origin[-1].end
        except (AttributeError, IndexError):
            for n in reversed(self):
                end = n.end
                if end is not None:
                    return end
            try:
                return self.head_origin[-1].end
            except (AttributeError, IndexError):
                pass

    def write(self, indent_width=4, start_indent=0, renderer=None):
        """Return the pretty-printed output of this node and its children.

        See for all the arguments the :class:`~rsxfmt.dom.indent.Formatter`
        class from the :mod:`~rsxfmt.dom.indent` module.

        """
        from . import indent
        return indent.Formatter(indent_width, start_indent, renderer).write(self)


class HeadElement(Element):
    """Element that has a fixed head value."""
    __slots__ = ('head_origin', 'tail_origin')

    @classmethod
    def read_head(cls, head_origin):
        """Return the value as computed from the specified origin Tokens.

        The default implementation concatenates the text from all tokens.

        """
        return ''.join(t.text for t in head_origin)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        """Instantiate an Element from the origin tokens, but don't keep the tokens."""
        return cls(*children)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        """Instantiate an Element from the origin tokens, and keep the tokens.

        This way, this element knows its position in the text source.

        """
        node = cls.from_origin(head_origin, tail_origin, *children)
        node.head_origin = head_origin  #: tuple of parce Tokens the head value is read from
        node.tail_origin = tail_origin  #: tuple of parce Tokens of the closing delimiter
        return node


class TextElement(HeadElement):
    """Element that has a variable/writable head value.

    This value must be given to the constructor, and can be modified later.

    You can implement the :meth:`check_head` method, which by default checks
    that the head is a string, to perform some checking on the ``head`` value
    of this element. This prevents forgetting to set the ``head`` value on
    manual construction.

    """
    __slots__ = ('_head',)

    def __new__(cls, head, *children):
        if not cls.check_head(head):
            raise TypeError("invalid head value for {}: {}".format(cls.__name__, repr(head)))
        return super().__new__(cls)

    @classmethod
    def _factory(cls, head, *children):
        """Factory bypassing the ``check_head`` check."""
        instance = super().__new__(cls)
        instance.__init__(head, *children)
        return instance

    def __init__(self, head, *children):
        self._head = head
        super().__init__(*children)

    @property
    def head(self):
        """The head contents."""
        return self._head

    @head.setter
    def head(self, head):
        self._head = head

    def repr_head(self):
        """Return a repr value for our head value."""
        h = self.head
        if h is not None:
            return reprlib.repr(h)

    @classmethod
    def check_head(cls, head):
        """Returns whether the proposed head value is valid."""
        return isinstance(head, str)

    def body_equals(self, other):
        """Compares the head values, called by :meth:`Node.equals() <rsxfmt.node.Node.equals>`."""
        return self.head == other.head

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        head = cls.read_head(head_origin)
        return cls._factory(head, *children)

    def copy(self, with_children=True):
        """Copy the node, without the origin.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return self._factory(self.head, *children)
