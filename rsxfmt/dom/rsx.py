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
This module defines a DOM (Document Object Model) for rsx blocks.

An rsx block is a sequence of body nodes: elements, components, text,
embedded expressions and meta annotations. Elements and components have
attributes (or fields) and child body nodes.

The DOM is a simple tree where every attribute and every child is a child
node of its element. The order of the child nodes is the order in which the
formatter writes them, except for the :class:`Key` of an element, which is
always written first. For example::

    >>> from rsxfmt.dom import read
    >>> read.rsx_document('div { key: "a", class: "box", onclick: move |_| go(), "hi" }').dump()
    <rsx.Document (1 child)>
     ╰╴<rsx.Element 'div' (4 children)>
        ├╴<rsx.Key 'a'>
        ├╴<rsx.TextAttribute 'class' (1 child)>
        │  ╰╴<rsx.String 'box'>
        ├╴<rsx.EventHandler 'onclick' (1 child)>
        │  ╰╴<rsx.Expression 'move |_| go()'>
        ╰╴<rsx.Text 'hi'>

Embedded expressions are opaque: an :class:`Expression` only holds the
source text of the expression, and is rendered by an
:class:`~rsxfmt.expression.Renderer`.

"""


from . import base, element


## value nodes

class String(element.TextElement):
    """A literal string value.

    The head is the text between the double quotes, such as it appears in
    the source; escape sequences are kept and not interpreted.

    """
    @classmethod
    def read_head(cls, origin):
        """Strip the quotes."""
        return ''.join(t.text for t in origin)[1:-1]


class Expression(element.TextElement):
    """An embedded expression; the head is its source text."""


#: The node types that can be the value of an attribute or field.
VALUE_TYPES = (String, Expression)


class BodyNode:
    """Mixin class for nodes that can appear in the body of a block."""
    __slots__ = ()


class Document(base.Document):
    """A full rsx block, containing the root body nodes."""

    def body(self):
        """Iterate over the root nodes."""
        return self / BodyNode


## body nodes

class Block(BodyNode, element.TextElement):
    """Base class for body nodes with a braced block: Element and Component.

    The head is the name.

    """
    @classmethod
    def read_head(cls, origin):
        """Strip the opening brace that is read together with the name."""
        return ''.join(t.text for t in origin)[:-1].strip()

    @property
    def name(self):
        """The name."""
        return self.head

    def body(self):
        """Iterate over the child body nodes, in order."""
        return self / BodyNode


class Element(Block):
    """An element, e.g. ``div { ... }``.

    The head is the tag name. The children are an optional :class:`Key`,
    :class:`Attribute` nodes and body nodes.

    """
    @property
    def key(self):
        """The value of the :class:`Key`, or None."""
        for k in self / Key:
            return k.head

    def attributes(self):
        """Iterate over the attributes, in order."""
        return self / Attribute


class Component(Block):
    """A component, e.g. ``Link { to: "/", "Home" }``.

    The head is the component's path, e.g. ``'router::Link'``. The children
    are :class:`Field` nodes, an optional :class:`Spread` and body nodes.

    """
    def fields(self):
        """Iterate over the fields, in order."""
        return self / Field

    @property
    def spread(self):
        """The :class:`Spread` child, or None."""
        for s in self / Spread:
            return s


class Text(BodyNode, element.TextElement):
    """A text node, e.g. ``"Hello {name}"``.

    The head is the literal text between the quotes.

    """
    @classmethod
    def read_head(cls, origin):
        """Strip the quotes."""
        return ''.join(t.text for t in origin)[1:-1]


class RawExpression(BodyNode, element.HeadElement):
    """An embedded expression in a block body, e.g. ``{items.iter().map(...)}``.

    Has one :class:`Expression` child. This node currently produces no output
    when formatted.

    """
    @property
    def expression(self):
        """The :class:`Expression`, or None."""
        for e in self / Expression:
            return e


class Meta(BodyNode, element.TextElement):
    """A meta annotation, e.g. ``#[doc = "info"]``.

    The head is its literal textual form.

    """


## attributes and fields

class Key(element.TextElement):
    """The key of an element; the head is the key literal."""


class NameValue(element.TextElement):
    """Base class for attributes and fields.

    The head is the name, the only child the value.

    """
    @classmethod
    def read_head(cls, origin):
        """Strip the colon that is read together with the name."""
        return ''.join(t.text for t in origin)[:-1].rstrip()

    @property
    def name(self):
        """The name."""
        return self.head

    @property
    def value(self):
        """The value node (:class:`String` or :class:`Expression`), or None."""
        for n in self / VALUE_TYPES:
            return n


class Attribute(NameValue):
    """Base class for element attributes."""


class TextAttribute(Attribute):
    """An attribute with a literal value, e.g. ``class: "box"``."""


class ExpressionAttribute(Attribute):
    """An attribute with an expression value, e.g. ``width: size * 2``."""


class EventHandler(Attribute):
    """An event handler, e.g. ``onclick: move |_| count += 1``."""


class CustomTextAttribute(Attribute):
    """An attribute with a quoted name and a literal value.

    E.g. ``"data-id": "12"``. The head includes the quotes.

    """


class CustomExpressionAttribute(Attribute):
    """An attribute with a quoted name and an expression value.

    E.g. ``"data-id": id``. The head includes the quotes.

    """


class MetaAttribute(Attribute):
    """A meta annotation in the attribute list; produces no output.

    The head is its literal textual form.

    """


class Field(NameValue):
    """Base class for component fields."""


class ExpressionField(Field):
    """A field with an expression value, e.g. ``count: 3``."""


class FormattedField(Field):
    """A field with a literal string value, e.g. ``title: "Hello {name}"``."""


class HandlerField(Field):
    """A field with a handler value, e.g. ``onclose: move |_| close()``."""


class Spread(element.HeadElement):
    """The spread of a component, e.g. ``..props``.

    Has one :class:`Expression` child.

    """
    @property
    def expression(self):
        """The :class:`Expression`, or None."""
        for e in self / Expression:
            return e
