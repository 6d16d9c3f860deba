#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
This package implements some metaprogramming techniques and concepts that are
used for the library's own needs. Although many of them are designed for
internal use, you can also use them for your own purposes.
"""

from ._enums import (
    FrozenEnum as FrozenEnum,
    SingletonEnum as SingletonEnum,
)
from ._exports import (
    export as export,
)
from ._markers import (
    MISSING as MISSING,
    MissingType as MissingType,
)
