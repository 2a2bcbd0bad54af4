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
Rsx language and transformation definition.

The language describes the body of an ``rsx!`` block: a sequence of
elements, components, text, embedded expressions and meta annotations.
Embedded expressions are not parsed, they are only tokenized so far that
their extent is known: an expression ends at the first comma or closing
brace that is not inside brackets, a string or a comment.

"""

import parce.action as a
from parce import Language, lexicon, default_action, skip
from parce.util import Dispatcher

from rsxfmt.dom import base, rsx


RE_IDENT = r'[^\W\d]\w*'
RE_STRING = r'"(?:[^"\\]|\\.)*"'


class Rsx(Language):
    """Rsx language definition."""

    @lexicon
    def root(cls):
        yield from cls.body()
        yield default_action, a.Invalid

    @classmethod
    def common(cls):
        """Whitespace, comments and separators between items."""
        yield r'\s+', skip
        yield r'//[^\n]*', skip
        yield r'/\*[\s\S]*?\*/', skip
        yield r',', a.Delimiter.Separator

    @classmethod
    def body(cls):
        """The body nodes."""
        yield from cls.common()
        yield r'#!?\[', a.Name.Decorator, cls.meta
        yield RE_STRING, a.String
        yield r'\{', a.Delimiter.Bracket, cls.raw_expression
        yield r'[a-z][a-z0-9_]*\s*\{', a.Name.Tag, cls.element
        yield r'(?:' + RE_IDENT + r'::)*' + RE_IDENT + r'\s*\{', a.Name.Class, cls.component

    @lexicon
    def element(cls):
        """The contents of an element, after the name and the opening brace."""
        yield r'\}', a.Delimiter.Bracket, -1
        yield RE_IDENT + r'\s*:(?!:)', a.Name.Attribute, cls.attribute
        yield RE_STRING + r'\s*:(?!:)', a.Name.Attribute, cls.attribute
        yield from cls.body()
        yield default_action, a.Invalid

    @lexicon
    def component(cls):
        """The contents of a component, after the path and the opening brace."""
        yield r'\}', a.Delimiter.Bracket, -1
        yield RE_IDENT + r'\s*:(?!:)', a.Name.Attribute, cls.attribute
        yield r'\.\.', a.Operator, cls.spread
        yield from cls.body()
        yield default_action, a.Invalid

    @lexicon
    def attribute(cls):
        """The value of an attribute or field, after the name and the colon.

        A string at the end of a line also ends the value, so that the comma
        after a key may be left out.

        """
        yield r',', a.Delimiter.Separator, -1
        yield r'(?=\})', skip, -1
        yield RE_STRING + r'(?=[ \t]*(?://[^\n]*)?\n)', a.String, -1
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @lexicon
    def spread(cls):
        """The expression after ``..`` in a component; ends at a newline."""
        yield r'(?=[,}\n])', skip, -1
        yield r'[ \t]+', a.Whitespace
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @lexicon
    def raw_expression(cls):
        """An expression between braces, in the body of a block."""
        yield r'\}', a.Delimiter.Bracket, -1
        yield r',', a.Text
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @lexicon
    def meta(cls):
        """A meta annotation, such as ``#[doc = "..."]``."""
        yield r'\]', a.Name.Decorator, -1
        yield r',', a.Text
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @lexicon
    def expression_group(cls):
        """Text between brackets in an expression."""
        yield r'[)\]}]', a.Delimiter.Bracket, -1
        yield r',', a.Text
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @lexicon
    def expression(cls):
        """A standalone expression, only used to find its tokens."""
        yield r'[)\]},]', a.Text
        yield from cls.expression_common()
        yield default_action, a.Invalid

    @classmethod
    def expression_common(cls):
        """The tokens of an expression."""
        yield r'r#"[\s\S]*?"#', a.String.Raw
        yield r'r"[^"]*"', a.String.Raw
        yield RE_STRING, a.String
        yield r'"', a.Invalid
        yield r"'(?:[^'\\\n]|\\[^\n]*?)'", a.String.Char
        yield r'//[^\n]*', a.Comment
        yield r'/\*[\s\S]*?\*/', a.Comment
        yield r'[(\[{]', a.Delimiter.Bracket, cls.expression_group
        yield r'\s+', a.Whitespace
        yield r'''[^\s()\[\]{},"'/]+|[/']''', a.Text


class RsxTransform(base.Transform):
    """Transform Rsx to :mod:`rsxfmt.dom.rsx` elements.

    The token that opens a block, an attribute or a spread lives in the
    parent context, so the nodes are created by the parent, using the token
    and the result of transforming the context that follows it.

    Text that can't be read is transformed to :class:`~rsxfmt.dom.base.Invalid`
    elements, as are missing closing delimiters and attributes without a
    value.

    """
    ## helper methods

    @staticmethod
    def closed(items, text):
        """Return True if the last item is a token with the text."""
        return bool(items) and items[-1].is_token and items[-1].text == text

    @staticmethod
    def contexts(items):
        """Yield (item, context) tuples.

        A token that is directly followed by a context is yielded together
        with that context, other items with None. The context is also None
        when the context of an opening token remained empty.

        """
        i, count = 0, len(items)
        while i < count:
            item = items[i]
            i += 1
            if item.is_token and i < count and not items[i].is_token:
                yield item, items[i]
                i += 1
            else:
                yield item, None

    def create_invalid(self, token):
        """Return an Invalid element for the unexpected token."""
        return base.Invalid.from_message("unexpected {!r}".format(token.text), (token,))

    def create_missing(self, what, origin):
        """Return an Invalid element for something missing after the origin."""
        return base.Invalid.from_message("missing {}".format(what), origin)

    def pieces(self, items):
        """Yield the text of expression items.

        Invalid elements are yielded for unexpected tokens and unterminated
        brackets.

        """
        for i in items:
            if i.is_token:
                if i.action is a.Invalid:
                    yield self.create_invalid(i)
                else:
                    yield i.text
            else:
                yield from i.obj

    def create_expression(self, items, origin):
        """Return an Expression element for the items, or an Invalid element.

        The ``origin`` is used for the position when no expression is there.
        A line comment at the end of the expression is left out.

        """
        items = list(items)
        while items and items[-1].is_token and (items[-1].action is a.Whitespace
                or (items[-1].action is a.Comment and items[-1].text.startswith('//'))):
            items.pop()
        pieces = list(self.pieces(items))
        for p in pieces:
            if isinstance(p, base.Invalid):
                return p
        text = ''.join(pieces).strip()
        if not text:
            return self.create_missing("expression", origin)
        node = self.factory(rsx.Expression,
            [i for i in items if i.is_token and i.action is not a.Whitespace])
        node.head = text
        return node

    def create_value(self, name_token, items):
        """Return a String or Expression element for the value items of an
        attribute or field.

        """
        values = [i for i in items if not (i.is_token and i.action is a.Whitespace)]
        if len(values) == 1 and values[0].is_token and values[0].action is a.String:
            return self.factory(rsx.String, values)
        return self.create_expression(items, (name_token,))

    def create_attribute(self, name_token, items):
        """Return an element attribute (or Key) for the name token and the
        value items.

        """
        value = self.create_value(name_token, items)
        text = isinstance(value, rsx.String)
        name = rsx.NameValue.read_head((name_token,))
        if name.startswith('"'):
            cls = rsx.CustomTextAttribute if text else rsx.CustomExpressionAttribute
        elif name == "key" and text:
            key = self.factory(rsx.Key, (name_token,))
            key.head = value.head
            return key
        elif text:
            cls = rsx.TextAttribute
        elif name.startswith("on"):
            cls = rsx.EventHandler
        else:
            cls = rsx.ExpressionAttribute
        return self.factory(cls, (name_token,), (), value)

    def create_field(self, name_token, items):
        """Return a component field for the name token and the value items."""
        value = self.create_value(name_token, items)
        if isinstance(value, rsx.String):
            cls = rsx.FormattedField
        elif rsx.NameValue.read_head((name_token,)).startswith("on"):
            cls = rsx.HandlerField
        else:
            cls = rsx.ExpressionField
        return self.factory(cls, (name_token,), (), value)

    def create_block(self, element_class, token, context):
        """Return an Element or Component for the opening token and the
        result of the ``element`` or ``component`` context.

        """
        children, tail = context.obj if context else ((), ())
        node = self.factory(element_class, (token,), tail, *children)
        if not tail:
            node.append(self.create_missing("'}'", (token,)))
        return node

    def body_node(self, item, context):
        """Return a body node (or Invalid element) for the item and its
        context, or None for a separator.

        """
        if not item.is_token:
            return base.Invalid.from_message("unexpected {}".format(item.name))
        meth = self._body.get(item.action)
        if meth:
            return meth(item, context)
        return self.create_invalid(item)

    def body_nodes(self, items):
        """Yield the body nodes for the items, skipping separators."""
        for item, context in self.contexts(items):
            node = self.body_node(item, context)
            if node is not None:
                yield node

    ## body nodes, created from the token that starts them

    _body = Dispatcher()

    @_body(a.Delimiter.Separator)
    def separator_node(self, token, context):
        """A comma between body nodes is skipped."""
        return None

    @_body(a.String)
    def text_node(self, token, context):
        """Create a Text node."""
        return self.factory(rsx.Text, (token,))

    @_body(a.Name.Tag)
    def element_node(self, token, context):
        """Create an Element."""
        return self.create_block(rsx.Element, token, context)

    @_body(a.Name.Class)
    def component_node(self, token, context):
        """Create a Component."""
        return self.create_block(rsx.Component, token, context)

    @_body(a.Delimiter.Bracket)
    def raw_expression_node(self, token, context):
        """Create a RawExpression."""
        items, tail = context.obj if context else ((), ())
        if not tail:
            return self.create_missing("'}'", (token,))
        return self.factory(rsx.RawExpression, (token,), tail,
            self.create_expression(items, (token,)))

    @_body(a.Name.Decorator)
    def meta_node(self, token, context):
        """Create a Meta node."""
        items = context.obj if context else ()
        if not self.closed(items, ']'):
            return self.create_missing("']'", (token,))
        pieces = [token.text]
        pieces.extend(self.pieces(items))
        for p in pieces:
            if isinstance(p, base.Invalid):
                return p
        node = self.factory(rsx.Meta, (token,), items[-1:])
        node.head = ''.join(pieces)
        return node

    ### transforming methods
    def root(self, items):
        """Build a full ``rsx.Document``."""
        return rsx.Document(*self.body_nodes(items))

    def element(self, items):
        """Return a tuple (children, tail_origin) for an ``rsx.Element``."""
        tail = (items.pop(),) if self.closed(items, '}') else ()
        children = []
        key = False
        for item, context in self.contexts(items):
            if item.is_token and item.action is a.Name.Attribute:
                attr = self.create_attribute(item, context.obj if context else ())
                if isinstance(attr, rsx.Key):
                    if key:
                        attr = base.Invalid.from_message("duplicate key", (item,))
                    key = True
                children.append(attr)
            else:
                node = self.body_node(item, context)
                if node is not None:
                    children.append(node)
        return children, tail

    def component(self, items):
        """Return a tuple (children, tail_origin) for an ``rsx.Component``."""
        tail = (items.pop(),) if self.closed(items, '}') else ()
        children = []
        spread = False
        for item, context in self.contexts(items):
            value = context.obj if context else ()
            if item.is_token and item.action is a.Name.Attribute:
                children.append(self.create_field(item, value))
            elif item.is_token and item.action is a.Operator:
                if spread:
                    children.append(base.Invalid.from_message("second spread", (item,)))
                else:
                    children.append(self.factory(rsx.Spread, (item,), (),
                        self.create_expression(value, (item,))))
                spread = True
            else:
                node = self.body_node(item, context)
                if node is not None:
                    children.append(node)
        return children, tail

    def attribute(self, items):
        """Return the value items of an attribute or field.

        The :meth:`element` and :meth:`component` methods create the
        attribute or field element.

        """
        if self.closed(items, ','):
            items.pop()
        return list(items)

    def spread(self, items):
        """Return the expression items of a spread."""
        return list(items)

    def raw_expression(self, items):
        """Return a tuple (expression_items, tail_origin)."""
        tail = (items.pop(),) if self.closed(items, '}') else ()
        return list(items), tail

    def meta(self, items):
        """Return the items of a meta annotation, including the closing ``]``."""
        return list(items)

    def expression_group(self, items):
        """Return a list of the text pieces of a bracketed expression part,
        including the closing bracket.

        The list contains an Invalid element if the closing bracket is
        missing.

        """
        pieces = list(self.pieces(items))
        if not (items and items[-1].is_token and items[-1].text in (')', ']', '}')):
            pieces.append(self.create_missing("closing bracket", items[:1]))
        return pieces


class RsxAdHocTransform(base.AdHocTransform, RsxTransform):
    """Rsx Transform that does not keep the originating tokens."""
    pass
