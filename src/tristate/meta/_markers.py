#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING

from ._enums import SingletonEnum

if TYPE_CHECKING:
    from typing import Final, NoReturn

    if sys.version_info >= (3, 11):  # a caching bug fix
        from typing import Literal
    else:  # typing-extensions>=4.6.0
        from typing_extensions import Literal

    if sys.version_info >= (3, 11):  # python/cpython#90633
        from typing import Never
    else:  # typing-extensions>=4.1.0
        from typing_extensions import Never

if sys.version_info >= (3, 11):  # runtime introspection support
    from typing import final
else:  # typing-extensions>=4.1.0
    from typing_extensions import final


@final
class MissingType(SingletonEnum):
    """
    A singleton class for :data:`MISSING`; mimics :data:`~types.NoneType`.

    Used as the default value of parameters for which :data:`None` is a
    meaningful argument.
    """

    MISSING = "MISSING"

    def __init_subclass__(cls, /, **kwargs: Never) -> NoReturn:
        bcs = __class__  # an implicit closure reference
        bcs_repr = f"{bcs.__module__}.{bcs.__qualname__}"

        msg = f"type '{bcs_repr}' is not an acceptable base type"
        raise TypeError(msg)

    def __bool__(self, /) -> Literal[False]:
        return False


MISSING: Final[Literal[MissingType.MISSING]] = MissingType.MISSING
