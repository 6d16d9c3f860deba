#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Three-valued boolean for Python

This package provides :class:`TriState`, an enumeration that is either
:attr:`~TriState.TRUE`, :attr:`~TriState.FALSE`, or :attr:`~TriState.DEFAULT`
(a fallback to some default value). It is an alternative to ``bool | None``
with helpers for converting back and forth:

* ``TriState.from_bool(True)`` -> ``TriState.TRUE``
* ``TriState.from_optional(None)`` -> ``TriState.DEFAULT``
* ``TriState.FALSE.to_optional()`` -> ``False``
"""

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"
__version__: str = "1.0.0"

from . import (  # noqa: F401
    meta,
)
from ._tristate import (
    TriState as TriState,
)

# prepare for external use
meta.export(globals())
