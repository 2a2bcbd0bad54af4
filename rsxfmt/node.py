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
This module defines a :class:`Node` class, the list-based tree structure the
rsx DOM is built from.

A node is a Python :class:`list` of child nodes that also knows its parent.
Two query operators make it easy to find nodes of a certain type::

    for attr in element / rsx.Attribute:
        ...     # the attribute children of element

    for text in document // rsx.Text:
        ...     # all text nodes in the document, in document order

"""

import itertools
import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """A tree node, based on Python :class:`list`.

    The parent is referred to with a weak reference, so a tree does not
    contain circular references; keep a reference to the root node.

    Adding nodes sets their parent, removing them doesn't unset it. A node
    always evaluates to True, even if it has no children.

    The ``/`` operator iterates over the children that are an instance of the
    given class (or tuple of classes), the ``//`` operator over all such
    descendants, and the ``^`` operator over the children that are *not* an
    instance of the given class(es).

    """

    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _NO_PARENT
        if children:
            list.extend(self, children)
            for node in self:
                node._parent = weakref.ref(self)

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare, so that :meth:`list.index` finds the node itself."""
        return self is other

    def __ne__(self, other):
        return self is not other

    def _select(self, cls, nodes, invert=False):
        """Filter ``nodes`` on being an instance of ``cls``."""
        if not isinstance(cls, (tuple, type)):
            return NotImplemented
        predicate = lambda node: isinstance(node, cls)
        return (itertools.filterfalse if invert else filter)(predicate, nodes)

    def __truediv__(self, cls):
        """Iterate over children that inherit the specified class(es)."""
        return self._select(cls, self)

    def __floordiv__(self, cls):
        """Iterate over descendants inheriting the specified class(es), in document order."""
        return self._select(cls, self.descendants())

    def __xor__(self, cls):
        """Iterate over children that do not inherit the specified class(es)."""
        return self._select(cls, self, True)

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    def root(self):
        """Return the root node."""
        root = self
        for root in self.ancestors():
            pass
        return root

    def ancestors(self):
        """Yield the parent, then the parent's parent, etcetera."""
        n = self.parent
        while n:
            yield n
            n = n.parent

    def descendants(self):
        """Iterate over all the descendants of this node, depth-first."""
        stack = []
        gen = iter(self)
        while True:
            for n in gen:
                yield n
                if len(n):
                    stack.append(gen)
                    gen = iter(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def depth(self):
        """Return the number of ancestors."""
        return sum(1 for _ in self.ancestors())

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children)

    def append(self, node):
        """Append node to this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def extend(self, nodes):
        """Append nodes to this node; the parent is set to this node."""
        index = len(self)
        list.extend(self, nodes)
        for node in self[index:]:
            node._parent = weakref.ref(self)

    def insert(self, index, node):
        """Insert node in this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.insert(self, index, node)

    def __setitem__(self, k, new):
        """Set self[k] to the node(s) in ``new``; the parent is set to this Node."""
        if isinstance(k, slice):
            new = tuple(new)
            for node in new:
                node._parent = weakref.ref(self)
        else:
            new._parent = weakref.ref(self)
        list.__setitem__(self, k, new)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when both have the same class, the same number of
        children, :meth:`body_equals` returns True, and all the children are
        equivalent as well.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def is_last(self):
        """Return True if this is the last node. Fails if no parent."""
        return self.parent[-1] is self

    def dump(self, file=None, style=None, depth=0):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        i = 2
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node = self
        for _ in range(depth):
            prefix.append(d[i + int(node.is_last())])
            node = node.parent
            i = 0
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self:
            n.dump(file, style, depth + 1)
