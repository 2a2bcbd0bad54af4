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
Test the formatter on hand-built trees.
"""

### find rsxfmt
import sys
sys.path.insert(0, '.')

import io

import pytest

from rsxfmt.dom import rsx, indent
from rsxfmt.errors import UnsupportedConstruct, WriteFailure
from rsxfmt.expression import Renderer


class Fixed(Renderer):
    """Renders every expression to the same text."""
    def __init__(self, text):
        self.text = text

    def render(self, expression):
        return self.text


class Broken:
    """A file that can't be written to."""
    def write(self, text):
        raise OSError("disk full")


def test_main():
    div = rsx.Element('div',
        rsx.TextAttribute('class', rsx.String('box')),
        rsx.Text('hi'),
    )
    assert div.write() == 'div {\n    class: "box",\n    "hi"\n}\n'


def test_key_first():
    li = rsx.Element('li',
        rsx.TextAttribute('class', rsx.String('item')),
        rsx.Key('k1'),
    )
    assert li.write() == 'li {\n    key: "k1",\n    class: "item",\n}\n'

    # no comma when no attributes follow
    li = rsx.Element('li', rsx.Key('k1'), rsx.Text('x'))
    assert li.write() == 'li {\n    key: "k1"\n    "x"\n}\n'


def test_order_and_depth():
    tree = rsx.Element('ul',
        rsx.ExpressionAttribute('width', rsx.Expression('size * 2')),
        rsx.EventHandler('onclick', rsx.Expression('move |_| go()')),
        rsx.Element('li', rsx.Text('a')),
        rsx.Element('li', rsx.Text('b')),
    )
    assert tree.write() == (
        'ul {\n'
        '    width: size * 2,\n'
        '    onclick: move |_| go(),\n'
        '    li {\n'
        '        "a"\n'
        '    }\n'
        '    li {\n'
        '        "b"\n'
        '    }\n'
        '}\n'
    )


def test_empty():
    assert rsx.Element('div').write() == 'div {\n}\n'
    assert rsx.Component('Card').write() == 'Card {\n}\n'


def test_multiline():
    div = rsx.Element('div', rsx.ExpressionAttribute('name', rsx.Expression('x')))
    assert div.write(renderer=Fixed('foo(\n  bar,\n)')) == (
        'div {\n'
        '    name: foo(\n'
        '      bar,\n'
        '    ),\n'
        '}\n'
    )


def test_component():
    card = rsx.Component('ui::Card',
        rsx.ExpressionField('count', rsx.Expression('3')),
        rsx.FormattedField('title', rsx.String('Hi {name}')),
        rsx.HandlerField('onclose', rsx.Expression('move |_| close()')),
        rsx.Spread(rsx.Expression('props')),
        rsx.Text('body'),
    )
    assert card.write() == (
        'ui::Card {\n'
        '    count: 3,\n'
        '    title: "Hi {name}",\n'
        '    onclose: move |_| close(),\n'
        '    ..props\n'
        '    "body"\n'
        '}\n'
    )


def test_multiline_string_literal():
    # lines inside a string literal get no indent
    div = rsx.Element('div', rsx.ExpressionAttribute('text', rsx.Expression('x')))
    assert div.write(renderer=Fixed('f("a\n  b")')) == (
        'div {\n'
        '    text: f("a\n'
        '  b"),\n'
        '}\n'
    )


def test_multiline_spread():
    card = rsx.Component('Card', rsx.Spread(rsx.Expression('x')))
    assert card.write(renderer=Fixed('merge(\n  a,\n)')) == (
        'Card {\n'
        '    ..merge(\n'
        '      a,\n'
        '    )\n'
        '}\n'
    )


def test_meta_and_raw_expression():
    div = rsx.Element('div',
        rsx.Meta('#[doc = "x"]'),
        rsx.RawExpression(rsx.Expression('items')),
        rsx.MetaAttribute('#[cfg(test)]'),
        rsx.Text('a'),
    )
    assert div.write() == 'div {\n    #[doc = "x"]\n    "a"\n}\n'
    assert rsx.RawExpression(rsx.Expression('items')).write() == ''


def test_document():
    doc = rsx.Document(rsx.Text('a'), rsx.Element('br'))
    assert doc.write() == '"a"\nbr {\n}\n'
    assert indent.Formatter().write_nodes(list(doc)) == doc.write()


def test_indent_width():
    div = rsx.Element('div', rsx.Element('p', rsx.Text('x')))
    assert div.write(indent_width=2) == 'div {\n  p {\n    "x"\n  }\n}\n'
    assert div.write(start_indent=1) == '    div {\n        p {\n            "x"\n        }\n    }\n'
    f = indent.Formatter()
    f.indent_width = 1
    assert f.write(div) == 'div {\n p {\n  "x"\n }\n}\n'


def test_unsupported():
    with pytest.raises(UnsupportedConstruct):
        rsx.Element('div', rsx.CustomTextAttribute('"data-x"', rsx.String('1'))).write()
    with pytest.raises(UnsupportedConstruct):
        rsx.Element('div', rsx.CustomExpressionAttribute('"data-x"', rsx.Expression('x'))).write()
    # not a body node
    with pytest.raises(UnsupportedConstruct) as info:
        rsx.Element('div', rsx.String('x')).write()
    assert isinstance(info.value.node, rsx.String)
    with pytest.raises(UnsupportedConstruct):
        indent.Formatter().write(rsx.Key('x'))
    # two keys
    with pytest.raises(UnsupportedConstruct) as info:
        rsx.Element('li', rsx.Key('a'), rsx.Key('b')).write()
    assert info.value.node.head == 'b'
    # missing value
    with pytest.raises(UnsupportedConstruct):
        rsx.Element('div', rsx.TextAttribute('class')).write()


def test_write_failure():
    with pytest.raises(WriteFailure) as info:
        indent.Formatter().output([rsx.Text('a')], Broken())
    assert isinstance(info.value, OSError)
    assert isinstance(info.value.__cause__, OSError)


def test_no_mutation():
    div = rsx.Element('div',
        rsx.TextAttribute('class', rsx.String('box')),
        rsx.Key('k'),
    )
    copy = div.copy()
    div.write()
    assert div.equals(copy)
    assert isinstance(div[1], rsx.Key)


if __name__ == "__main__":
    test_main()
    test_key_first()
    test_order_and_depth()
    test_empty()
    test_multiline()
    test_component()
    test_multiline_string_literal()
    test_multiline_spread()
    test_meta_and_raw_expression()
    test_document()
    test_indent_width()
    test_unsupported()
    test_write_failure()
    test_no_mutation()
