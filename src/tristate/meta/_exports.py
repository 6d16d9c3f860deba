#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from types import FunctionType, ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import MutableMapping
    else:
        from typing import MutableMapping

if sys.version_info >= (3, 11):  # runtime introspection support
    from typing import get_overloads, overload
else:  # typing-extensions>=4.2.0
    from typing_extensions import get_overloads, overload


def _issubmodule(module_name: str | None, package_name: str, /) -> bool:
    return module_name is not None and (
        module_name == package_name
        or module_name.startswith(f"{package_name}.")
    )


def _export_one(
    package_name: str,
    qualname: str,
    name: str,
    value: object,
    /,
    *,
    visited: set[int] | None = None,
) -> None:
    # We rely on explicit type checking so that we do not have to deal with
    # enum members and other objects that provide a read-only `__module__`
    # attribute.

    if isinstance(value, type):
        if not _issubmodule(value.__module__, package_name):
            return  # skip foreign ones

        # A class may reference itself directly or indirectly, so we track the
        # visited IDs in the current stack.
        if visited is None:
            visited = set()
        elif id(value) in visited:
            return  # skip visited ones

        visited.add(id(value))

        try:
            # Only direct attributes of the class are processed (via
            # `__dict__`), so members inherited from non-public parents keep
            # their original location.

            # copy the namespace so that it works in case of parallel calls
            for attr_name, attr_value in {**vars(value)}.items():
                if attr_name.startswith("_"):
                    continue  # skip non-public ones

                _export_one(
                    package_name,
                    f"{qualname}.{attr_name}",
                    attr_name,
                    attr_value,
                    visited=visited,
                )
        finally:
            visited.remove(id(value))

        value.__name__ = name
        value.__qualname__ = qualname
        value.__module__ = package_name
    elif isinstance(value, FunctionType):
        if not _issubmodule(value.__module__, package_name):
            return  # skip foreign ones

        # Overloads are keyed by the function's attributes, so they have to be
        # re-registered before the attributes change.
        for value_overload in get_overloads(value):
            value_overload.__name__ = name
            value_overload.__qualname__ = qualname
            value_overload.__module__ = package_name

            # re-register the overload for `package_name` and `qualname`
            overload(value_overload)

        value.__name__ = name
        value.__qualname__ = qualname
        value.__module__ = package_name
    elif isinstance(value, (classmethod, staticmethod)):
        # We cannot reliably check whether the `classmethod`/`staticmethod`
        # instance belongs to the package, so we always assume that it does.

        _export_one(package_name, qualname, name, value.__func__)

        if sys.version_info >= (3, 10):  # inherit the method attributes
            value.__name__ = name
            value.__qualname__ = qualname
            value.__module__ = package_name
    elif isinstance(value, property):
        for func in (value.fget, value.fset, value.fdel):
            if func is None:
                continue

            _export_one(package_name, qualname, name, func)

        if sys.version_info >= (3, 13):  # new `__name__` attribute
            value.__name__ = name


def export(
    package_namespace: ModuleType | MutableMapping[str, object],
    /,
) -> None:
    """
    Prepare *package_namespace* for external use.

    Its contents must be structured as follows:

    * Every non-public submodule/subpackage that is part of the implementation
      has a name that starts with the underscore character (``package._util``).
    * Every public submodule/subpackage that is available for direct use has a
      name that does not start with the underscore character (``package.meta``).

    The function updates attributes of all public members so that they look
    as if they were defined directly in the package. Public subpackages and
    classes are processed recursively. Additionally, for each public package a
    human-readable :keyword:`__all__ <import>` is built, which includes the
    names of all public members that are not submodules/subpackages.

    Typically, the usage is as follows: ``export(globals())`` near the end of
    ``__init__.py``. This keeps pickles independent of the non-public module
    layout and gives members convenient representations
    (``tristate.TriState.TRUE`` rather than ``tristate._tristate.TriState.TRUE``).

    Example:
      >>> def helper(): pass
      >>> helper.__module__ = 'pkg._impl'
      >>> namespace = {'__name__': 'pkg', 'helper': helper}
      >>> export(namespace)
      >>> helper.__module__
      'pkg'
      >>> namespace['__all__']
      ('helper',)
    """

    if TYPE_CHECKING:
        # `sphinx.ext.autodoc` does not support the `__module__` hacks, so we
        # skip all on type checking.
        return

    if isinstance(package_namespace, ModuleType):
        package_name = package_namespace.__name__
        package_namespace = vars(package_namespace)
    else:
        package_name = package_namespace["__name__"]

    public_names = []

    # copy the namespace so that it works in case of parallel calls
    for name, value in {**package_namespace}.items():
        if name.startswith("_"):
            continue  # skip non-public ones

        if isinstance(value, ModuleType):
            if value.__name__.rpartition(".")[0] != package_name:
                continue  # skip indirect ones

            export(value)
        else:
            public_names.append(name)

            _export_one(package_name, name, name, value)

    # sort the list to make it more human-readable
    public_names.sort()
    public_names.sort(key=str.isupper, reverse=True)

    package_namespace.setdefault("__all__", tuple(public_names))
