#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, TypeVar

from .meta import MISSING, FrozenEnum, MissingType

if sys.version_info >= (3, 11):  # `EnumMeta` has been renamed to `EnumType`
    from enum import EnumType
else:
    from enum import EnumMeta as EnumType

if sys.version_info >= (3, 11):
    from typing import overload
else:
    from typing_extensions import overload

if TYPE_CHECKING:
    from typing import NoReturn

    if sys.version_info >= (3, 11):  # python/cpython#90633
        from typing import Never
    else:  # typing-extensions>=4.1.0
        from typing_extensions import Never

    if sys.version_info >= (3, 9):
        from collections.abc import Callable
    else:
        from typing import Callable

if sys.version_info >= (3, 11):  # runtime introspection support
    from typing import final
else:  # typing-extensions>=4.1.0
    from typing_extensions import final

_D = TypeVar("_D")


class _TriStateMeta(EnumType):
    # to allow `TriState() is TriState.DEFAULT`
    def __call__(cls, /, *args, **kwargs):
        if args or kwargs:
            return super().__call__(*args, **kwargs)

        return super().__call__(None)


def _position(member: TriState, /) -> int:
    return member.__class__._member_names_.index(member._name_)


@final
class TriState(FrozenEnum, metaclass=_TriStateMeta):
    """
    A three-valued alternative to ``bool | None``: an explicit :data:`True`,
    an explicit :data:`False`, or a fallback to some default value.

    The value of each member is its optional boolean counterpart, so the
    standard enum lookup converts from ``bool | None`` as well:

    Example:
      >>> TriState(True)
      tristate.TriState.TRUE
      >>> TriState(None)
      tristate.TriState.DEFAULT
      >>> TriState()
      tristate.TriState.DEFAULT
      >>> TriState.FALSE.value
      False

    The conversion to ``bool | None`` is lossy by design:
    :attr:`DEFAULT` becomes :data:`None`, and :data:`None` always becomes
    :attr:`DEFAULT`, so "explicitly set to default" and "never set" cannot be
    told apart.

    Members are ordered by declaration (``FALSE < DEFAULT < TRUE``), and only
    :attr:`TRUE` is truthy.
    """

    FALSE = False
    DEFAULT = None
    TRUE = True

    def __init_subclass__(cls, /, **kwargs: Never) -> NoReturn:
        bcs = __class__  # an implicit closure reference
        bcs_repr = f"{bcs.__module__}.{bcs.__qualname__}"

        msg = f"type '{bcs_repr}' is not an acceptable base type"
        raise TypeError(msg)

    @classmethod
    def from_bool(cls, value: bool, /) -> TriState:
        """
        Return the member corresponding to the boolean *value*.

        Example:
          >>> TriState.from_bool(True)
          tristate.TriState.TRUE
          >>> TriState.from_bool(False)
          tristate.TriState.FALSE
        """

        if value:
            return cls.TRUE

        return cls.FALSE

    @classmethod
    def from_optional(cls, value: bool | None, /) -> TriState:
        """
        Return the member corresponding to the optional boolean *value*;
        :data:`None` maps to :attr:`DEFAULT`.

        Example:
          >>> TriState.from_optional(None)
          tristate.TriState.DEFAULT
          >>> TriState.from_optional(False)
          tristate.TriState.FALSE
        """

        if value is None:
            return cls.DEFAULT

        return cls.from_bool(value)

    def to_optional(self, /) -> bool | None:
        """
        Return the optional boolean counterpart of the member;
        :attr:`DEFAULT` maps to :data:`None`.

        Example:
          >>> TriState.TRUE.to_optional()
          True
          >>> TriState.DEFAULT.to_optional() is None
          True
        """

        return self._value_

    def __bool__(self, /) -> bool:
        """
        Returns :data:`True` only for :attr:`TRUE`; :attr:`DEFAULT` is falsy.

        Used by the standard :ref:`truth testing procedure <truth>`.
        """

        return self._value_ is True

    def __lt__(self, other: object, /) -> bool:
        if isinstance(other, TriState):
            return _position(self) < _position(other)

        return NotImplemented

    def __le__(self, other: object, /) -> bool:
        if isinstance(other, TriState):
            return _position(self) <= _position(other)

        return NotImplemented

    def __gt__(self, other: object, /) -> bool:
        if isinstance(other, TriState):
            return _position(self) > _position(other)

        return NotImplemented

    def __ge__(self, other: object, /) -> bool:
        if isinstance(other, TriState):
            return _position(self) >= _position(other)

        return NotImplemented

    @overload
    def get(
        self,
        /,
        default: bool | MissingType = MISSING,
        *,
        default_factory: MissingType = MISSING,
    ) -> bool: ...
    @overload
    def get(
        self,
        /,
        default: _D,
        *,
        default_factory: MissingType = MISSING,
    ) -> bool | _D: ...
    @overload
    def get(
        self,
        /,
        default: MissingType = MISSING,
        *,
        default_factory: Callable[[], _D],
    ) -> bool | _D: ...
    def get(self, /, default=MISSING, *, default_factory=MISSING):
        """
        Return the boolean value of an explicit member. For :attr:`DEFAULT`,
        return *default* if it is passed, otherwise the result of calling
        *default_factory* if it is passed, otherwise raise
        :exc:`LookupError`.

        Example:
          >>> TriState.FALSE.get(True)
          False
          >>> TriState.DEFAULT.get(True)
          True
          >>> TriState.DEFAULT.get(default_factory=bool)
          False
        """

        value = self._value_

        if value is not None:
            return value

        if default is not MISSING:
            return default

        if default_factory is not MISSING:
            return default_factory()

        raise LookupError(self)
