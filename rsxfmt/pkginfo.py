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
Meta-information about the rsxfmt package.

This information is used by the install script, and also for the
``version`` and ``version_string`` values in the package's namespace.

"""

#: name of the package
name = "rsxfmt"

#: the current version
version = (0, 1, 0)
version_suffix = None
#: the current version as a string
version_string = "{}.{}.{}".format(*version)
if version_suffix:
    version_string += version_suffix

#: short description
description = "Read and pretty-print rsx markup blocks"

#: long description
long_description = \
    "The rsxfmt package reads rsx markup blocks (elements, components, " \
    "attributes, text and embedded expressions) and writes them in a " \
    "canonical, stably indented form."

#: maintainer name
maintainer = "The rsxfmt authors"

#: license
license = "GPL v3"
