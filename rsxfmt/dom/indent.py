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
Functionality to pretty-print an rsx DOM document, with stable indentation.

The output has one item per line: every element or component opens a block
with ``name {`` and closes it with ``}`` on a line of its own. Attributes,
fields and children are indented one level deeper than their block. Every
attribute and field line ends with a comma, except the spread line of a
component. No blank lines are ever written.

"""

import io

from parce.util import Dispatcher

from ..errors import UnsupportedConstruct, WriteFailure
from ..expression import ExpressionRenderer
from . import rsx


class Output:
    """Writes the text of one formatting run to a file-like object.

    Any error raised by the file's ``write`` method is turned into a
    :class:`~rsxfmt.errors.WriteFailure`.

    """
    def __init__(self, file, indent_width=4):
        self.file = file
        self.unit = ' ' * indent_width

    def write(self, text):
        """Write text."""
        try:
            self.file.write(text)
        except (OSError, MemoryError) as e:
            raise WriteFailure("can't write output: {}".format(e)) from e

    def tabs(self, depth):
        """Write the indent for ``depth`` levels."""
        self.write(self.unit * depth)


class Formatter:
    """Prints the formatted output of rsx nodes.

    Preferences can be given on instantiation or by setting the attributes of
    the same name.

    The ``indent_width`` is the number of spaces per indent level, the
    ``start_indent`` the level of the outermost nodes, defaulting to 0. The
    ``renderer`` is the :class:`~rsxfmt.expression.Renderer` used for
    embedded expressions; by default an
    :class:`~rsxfmt.expression.ExpressionRenderer`.

    Call :meth:`write` to get the formatted text output of a node. The
    formatter keeps no state between calls, so one formatter can be used
    from multiple threads at the same time.

    """
    def __init__(self,
            indent_width = 4,
            start_indent = 0,
            renderer = None,
        ):

        #: the number of spaces per indent level
        self.indent_width = indent_width

        #: the indent level of the outermost nodes
        self.start_indent = start_indent

        #: the renderer for embedded expressions
        self.renderer = renderer or ExpressionRenderer()

    def write(self, node):
        """Get the formatted output of the node.

        If the node is a :class:`~rsxfmt.dom.rsx.Document`, all its root
        nodes are formatted.

        Called by :meth:`Element.write() <rsxfmt.dom.element.Element.write>`.

        """
        nodes = node if isinstance(node, rsx.Document) else (node,)
        return self.write_nodes(nodes)

    def write_nodes(self, nodes):
        """Get the formatted output of the iterable of root nodes."""
        f = io.StringIO()
        self.output(nodes, f)
        return f.getvalue()

    def output(self, nodes, file):
        """Write the formatted output of the nodes to a file-like object.

        Raises :class:`~rsxfmt.errors.WriteFailure` when writing fails, and
        :class:`~rsxfmt.errors.UnsupportedConstruct` for nodes that can't be
        formatted. In both cases the output written so far is incomplete.

        """
        out = Output(file, self.indent_width)
        for node in nodes:
            self.output_node(out, node, self.start_indent)

    def output_node(self, out, node, depth):
        """*(Internal.)* Output one body node and its children."""
        meth = self._node.get(type(node))
        if not meth:
            raise UnsupportedConstruct("can't format {!r}".format(node), node)
        meth(out, node, depth)

    def output_value(self, out, prefix, value, depth, suffix=','):
        """*(Internal.)* Output a value on a line starting with ``prefix``.

        A :class:`~rsxfmt.dom.rsx.String` is written between double quotes.
        An :class:`~rsxfmt.dom.rsx.Expression` is rendered; when the rendered
        text has more than one line, every next line is written on a new line
        with the indent of ``depth``, keeping its own relative indent. Lines
        that start inside a multi-line string literal are written without
        indent. The ``suffix`` is appended to the last line.

        """
        if isinstance(value, rsx.String):
            lines = ['"{}"'.format(value.head)]
            literal = ()
        elif isinstance(value, rsx.Expression):
            lines = self.renderer.lines(value)
            literal = self.renderer.literal_lines('\n'.join(lines)) if len(lines) > 1 else ()
        else:
            raise UnsupportedConstruct("missing or invalid value for {!r}".format(value), value)
        out.tabs(depth)
        out.write(prefix + lines[0])
        for i, line in enumerate(lines[1:], 1):
            out.write('\n')
            if i not in literal:
                out.tabs(depth)
            out.write(line)
        out.write(suffix + '\n')

    def check_children(self, node, *types):
        """*(Internal.)* Raise UnsupportedConstruct if the node has children
        that are not an instance of one of the types.

        """
        for n in node ^ types:
            raise UnsupportedConstruct("can't format {!r} in {!r}".format(n, node), n)

    ## body nodes

    _node = Dispatcher()

    @_node(rsx.Element)
    def output_element(self, out, node, depth):
        """*(Internal.)* Output an Element."""
        self.check_children(node, rsx.Key, rsx.Attribute, rsx.BodyNode)
        keys = list(node / rsx.Key)
        if len(keys) > 1:
            raise UnsupportedConstruct("more than one key in {!r}".format(node), keys[1])
        attributes = list(node.attributes())
        out.tabs(depth)
        out.write(node.name + " {\n")
        for key in keys:
            out.tabs(depth + 1)
            out.write('key: "{}"'.format(key.head))
            out.write(",\n" if attributes else "\n")
        for attr in attributes:
            meth = self._attribute.get(type(attr))
            if not meth:
                raise UnsupportedConstruct("can't format {!r}".format(attr), attr)
            meth(out, attr, depth + 1)
        for child in node.body():
            self.output_node(out, child, depth + 1)
        out.tabs(depth)
        out.write("}\n")

    @_node(rsx.Component)
    def output_component(self, out, node, depth):
        """*(Internal.)* Output a Component."""
        self.check_children(node, rsx.Field, rsx.Spread, rsx.BodyNode)
        out.tabs(depth)
        out.write(node.name + " {\n")
        for field in node.fields():
            meth = self._field.get(type(field))
            if not meth:
                raise UnsupportedConstruct("can't format {!r}".format(field), field)
            meth(out, field, depth + 1)
        for spread in node / rsx.Spread:
            self.output_value(out, "..", spread.expression, depth + 1, '')
        for child in node.body():
            self.output_node(out, child, depth + 1)
        out.tabs(depth)
        out.write("}\n")

    @_node(rsx.Text)
    def output_text(self, out, node, depth):
        """*(Internal.)* Output a Text node."""
        out.tabs(depth)
        out.write('"{}"\n'.format(node.head))

    @_node(rsx.RawExpression)
    def output_raw_expression(self, out, node, depth):
        """*(Internal.)* A RawExpression is not written."""

    @_node(rsx.Meta)
    def output_meta(self, out, node, depth):
        """*(Internal.)* Output a Meta node."""
        out.tabs(depth)
        out.write(node.head + "\n")

    ## element attributes

    _attribute = Dispatcher()

    @_attribute(rsx.TextAttribute)
    @_attribute(rsx.ExpressionAttribute)
    @_attribute(rsx.EventHandler)
    def output_attribute(self, out, node, depth):
        """*(Internal.)* Output an attribute with a name and value."""
        self.output_value(out, node.name + ": ", node.value, depth)

    @_attribute(rsx.CustomTextAttribute)
    @_attribute(rsx.CustomExpressionAttribute)
    def output_custom_attribute(self, out, node, depth):
        """*(Internal.)* Attributes with a quoted name are not supported yet."""
        raise UnsupportedConstruct(
            "can't format attribute with a quoted name: {}".format(node.name), node)

    @_attribute(rsx.MetaAttribute)
    def output_meta_attribute(self, out, node, depth):
        """*(Internal.)* A MetaAttribute is not written."""

    ## component fields

    _field = Dispatcher()

    @_field(rsx.ExpressionField)
    @_field(rsx.FormattedField)
    @_field(rsx.HandlerField)
    def output_field(self, out, node, depth):
        """*(Internal.)* Output a field with a name and value."""
        self.output_value(out, node.name + ": ", node.value, depth)
