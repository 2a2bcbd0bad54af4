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
Test the expression renderers.
"""

### find rsxfmt
import sys
sys.path.insert(0, '.')

from rsxfmt.dom import rsx
from rsxfmt.expression import ExpressionRenderer


def render(text):
    return ExpressionRenderer().render(rsx.Expression(text))


def test_main():
    assert render("a + b") == "a + b"
    assert render("  a + b  \n") == "a + b"


def test_dedent():
    text = "move |_| {\n            count += 1;\n        }"
    assert render(text) == "move |_| {\n    count += 1;\n}"


def test_blank_lines():
    text = "foo(\n\n    bar,   \n\n)"
    assert render(text) == "foo(\n    bar,\n)"


def test_string_literal():
    text = 'move |_| {\n let s = "a\n\n    b";\n }'
    assert render(text) == 'move |_| {\nlet s = "a\n\n    b";\n}'
    r = ExpressionRenderer()
    assert r.literal_lines('f("a\n\n  b",\n r"c\nd")') == {1, 2, 4}
    assert r.literal_lines('f(a,\n  b)') == set()


def test_lines():
    r = ExpressionRenderer()
    assert r.lines(rsx.Expression("x")) == ["x"]
    assert r.lines(rsx.Expression("f(\n  a,\n)")) == ["f(", "  a,", ")"]


def test_stable():
    text = "move |_| {\n            count += 1;\n        }"
    once = render(text)
    assert render(once) == once


if __name__ == "__main__":
    test_main()
    test_dedent()
    test_blank_lines()
    test_string_literal()
    test_lines()
    test_stable()
