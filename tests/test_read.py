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
Test reading rsx text into the DOM.
"""

### find rsxfmt
import sys
sys.path.insert(0, '.')

import pytest

from rsxfmt.dom import read, rsx
from rsxfmt.errors import ParseFailure


def test_main():
    doc = read.rsx_document('div { class: "box", "hi" }')
    assert isinstance(doc, rsx.Document)
    assert len(doc) == 1
    div = doc[0]
    assert isinstance(div, rsx.Element)
    assert div.name == 'div'
    assert div.key is None
    attr, = div.attributes()
    assert isinstance(attr, rsx.TextAttribute)
    assert attr.name == 'class'
    assert isinstance(attr.value, rsx.String)
    assert attr.value.head == 'box'
    text, = div.body()
    assert isinstance(text, rsx.Text)
    assert text.head == 'hi'


def test_attributes():
    div = read.rsx_node('div { key: "a", width: size * 2, onclick: move |_| go(), "data-x": "1" }')
    assert div.key == 'a'
    assert isinstance(div[0], rsx.Key)
    width, onclick, custom = div.attributes()
    assert isinstance(width, rsx.ExpressionAttribute)
    assert width.value.head == 'size * 2'
    assert isinstance(onclick, rsx.EventHandler)
    assert onclick.value.head == 'move |_| go()'
    assert isinstance(custom, rsx.CustomTextAttribute)
    assert custom.name == '"data-x"'


def test_nested_expression():
    div = read.rsx_node('div { onclick: move |_| { a(1, 2); }, "x" }')
    handler, = div.attributes()
    assert handler.value.head == 'move |_| { a(1, 2); }'
    assert [n.head for n in div.body()] == ['x']


def test_component():
    card = read.rsx_node('ui::Card { count: 3, title: "Hi", onclose: move |_| close(), ..props, p { "x" } }')
    assert isinstance(card, rsx.Component)
    assert card.name == 'ui::Card'
    count, title, onclose = card.fields()
    assert isinstance(count, rsx.ExpressionField)
    assert count.value.head == '3'
    assert isinstance(title, rsx.FormattedField)
    assert title.value.head == 'Hi'
    assert isinstance(onclose, rsx.HandlerField)
    assert card.spread.expression.head == 'props'
    p, = card.body()
    assert isinstance(p, rsx.Element)
    assert p.name == 'p'


def test_body_nodes():
    doc = read.rsx_document('#[doc = "x"]\nul {\n    // comment\n    {items}\n    "a"\n}\n')
    meta, ul = doc
    assert isinstance(meta, rsx.Meta)
    assert meta.head == '#[doc = "x"]'
    raw, text = ul
    assert isinstance(raw, rsx.RawExpression)
    assert raw.expression.head == 'items'
    assert text.head == 'a'


def test_opening_tokens():
    # the name of a block and of an attribute come from their own tokens
    div = read.rsx_node('div { key: "a", id: "b", p { } }')
    assert div.name == 'div'
    assert div.key == 'a'
    attr, = div.attributes()
    assert attr.name == 'id'
    p, = div.body()
    assert p.name == 'p'
    assert len(p) == 0


def test_empty():
    assert len(read.rsx_document('')) == 0
    assert len(read.rsx_document('  // nothing\n')) == 0
    assert read.rsx_node('') is None


def test_origin():
    div = read.rsx_node('div { "hi" }', True)
    assert div.pos == 0
    assert div.end == 12
    assert div[0].pos == 6
    assert div[0].end == 10
    assert repr(div[0]) == "<rsx.Text 'hi' [6:10]>"
    assert repr(read.rsx_node('div { "hi" }')[0]) == "<rsx.Text 'hi'>"


def test_parse_failure():
    for text in (
        'div { class: "x"',
        'div { "unterminated }',
        'div { @ }',
        'li { key: "a", key: "b" }',
        'Card { ..a, ..b }',
        '#[doc',
        'div { onclick: f(x }',
    ):
        with pytest.raises(ParseFailure):
            read.rsx_document(text)


def test_parse_failure_position():
    with pytest.raises(ParseFailure) as info:
        read.rsx_document('div {')
    assert info.value.pos == 0
    assert "missing '}'" in str(info.value)

    with pytest.raises(ParseFailure) as info:
        read.rsx_document('div { class: }')
    assert info.value.pos == 6
    assert "missing expression" in str(info.value)
    assert str(info.value).endswith("(at position 6)")

    with pytest.raises(ParseFailure) as info:
        read.rsx_document('div { @ }')
    assert info.value.pos == 6
    assert isinstance(info.value, ValueError)


if __name__ == "__main__":
    test_main()
    test_attributes()
    test_nested_expression()
    test_component()
    test_body_nodes()
    test_opening_tokens()
    test_empty()
    test_origin()
    test_parse_failure()
    test_parse_failure_position()
