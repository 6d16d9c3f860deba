#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import enum
import sys

from inspect import ismemberdescriptor

if sys.version_info >= (3, 11):  # `EnumMeta` has been renamed to `EnumType`
    from enum import EnumType
else:
    from enum import EnumMeta as EnumType


class FrozenEnum(enum.Enum):
    """
    A base class for enumerations whose members behave as immutable values.

    Unlike :class:`enum.Enum`, it prohibits setting attributes that are not
    explicitly declared (via :ref:`slots`), and represents its members by
    their qualified names.

    Example:
      >>> class Color(FrozenEnum):
      ...     RED = 1
      >>> repr(Color.RED) == f"{__name__}.Color.RED"
      True
      >>> str(Color.RED)
      'RED'
      >>> Color.RED.shade = 'dark'
      Traceback (most recent call last):
      AttributeError: 'Color' object has no attribute 'shade'
    """

    def __setattr__(self, /, name: str, value: object) -> None:
        if name.startswith("_") and name.endswith("_"):  # used by `enum.Enum`
            super().__setattr__(name, value)
            return

        cls = self.__class__
        cls_qualname = cls.__qualname__

        if ismemberdescriptor(getattr(cls, name, None)):
            super().__setattr__(name, value)
            return

        # Note, `enum.Enum` itself does not prohibit setting attributes (see
        # python/cpython#90290)!
        msg = f"{cls_qualname!r} object has no attribute {name!r}"
        raise AttributeError(msg)

    def __repr__(self, /) -> str:
        cls = self.__class__

        return f"{cls.__module__}.{cls.__qualname__}.{self._name_}"

    def __str__(self, /) -> str:  # overridden by `enum.Enum`
        return self._name_


class _SingletonMeta(EnumType):
    # to allow `type(SINGLETON)() is SINGLETON`
    def __call__(cls, /, *args, **kwargs):
        # With several members (or none) it is unknown which one is wanted,
        # and extra arguments mean a regular lookup, so we fall back to the
        # parent implementation in such cases.
        if len(cls) != 1 or args or kwargs:
            return super().__call__(*args, **kwargs)

        return super().__call__(next(iter(cls)).value)


class SingletonEnum(FrozenEnum, metaclass=_SingletonMeta):
    """
    A base class for creating type-checker-friendly singleton classes whose
    instances will be defined at the module level.

    Example:
      >>> class SingletonType(SingletonEnum):
      ...     SINGLETON = 'SINGLETON'
      >>> SINGLETON = SingletonType.SINGLETON
      >>> repr(SINGLETON) == f"{__name__}.SINGLETON"
      True
      >>> SingletonType() is SINGLETON
      True
    """

    def __repr__(self, /) -> str:
        return f"{self.__class__.__module__}.{self._name_}"

    def __str__(self, /) -> str:
        return f"{self.__class__.__module__}.{self._name_}"
