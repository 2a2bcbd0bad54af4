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
The exceptions raised when reading or formatting rsx.

All of them inherit :class:`FormatError`, and also a builtin exception type
that describes the kind of failure, so callers that do not know about
rsxfmt can still handle them sensibly.

"""


class FormatError(Exception):
    """Base class for all errors raised by rsxfmt."""


class ParseFailure(FormatError, ValueError):
    """Raised when the text is not a valid rsx block.

    The ``pos`` attribute holds the position in the text where the problem
    was found, or None if that is not known.

    """
    def __init__(self, message, pos=None):
        super().__init__(message)
        self.pos = pos

    def __str__(self):
        message = super().__str__()
        if self.pos is not None:
            return "{} (at position {})".format(message, self.pos)
        return message


class UnsupportedConstruct(FormatError, NotImplementedError):
    """Raised when the formatter encounters a node it can't render.

    The ``node`` attribute holds the offending node.

    """
    def __init__(self, message, node=None):
        super().__init__(message)
        self.node = node


class WriteFailure(FormatError, OSError):
    """Raised when the output could not be written.

    The original exception is available as ``__cause__``.

    """
