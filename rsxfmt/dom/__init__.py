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

An rsx block is represented by a simple tree structure where every element,
component, attribute, text or embedded expression is a node, with possible
child nodes.

This DOM is used in two ways:

1. Building an rsx block from scratch, using the classes in
   :mod:`~rsxfmt.dom.rsx`.

2. Transform a *parce* tree of an rsx block, see :mod:`~rsxfmt.dom.read`.
   If requested, the tokens are stored in the nodes (in the ``head_origin``
   and ``tail_origin`` attributes), so each node knows its position in the
   text.

Both kinds of trees can be written in their canonical form using the
:class:`~rsxfmt.dom.indent.Formatter`.

"""
