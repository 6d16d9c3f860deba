#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import pytest

from tristate.meta import FrozenEnum, SingletonEnum


class Answer(FrozenEnum):
    NO = 0
    YES = 1


class Pair(SingletonEnum):
    FIRST = 1
    SECOND = 2


class Slotted(SingletonEnum):
    __slots__ = ("_cache",)

    ONLY = "ONLY"


class TestFrozenEnum:
    def test_base(self, /):
        assert Answer(1) is Answer.YES
        assert Answer["NO"] is Answer.NO

        assert repr(Answer.YES) == f"{__name__}.Answer.YES"
        assert str(Answer.YES) == "YES"
        assert f"{Answer.NO}" == "NO"

    def test_attrs(self, /):
        with pytest.raises(AttributeError):
            Answer.YES.nonexistent_attribute = 42

        assert not hasattr(Answer.YES, "nonexistent_attribute")


class TestSingletonEnum:
    def test_base(self, /):
        assert Slotted() is Slotted.ONLY
        assert Slotted("ONLY") is Slotted.ONLY

        assert repr(Slotted.ONLY) == f"{__name__}.ONLY"
        assert str(Slotted.ONLY) == f"{__name__}.ONLY"

        with pytest.raises(ValueError):
            Slotted("OTHER")

    def test_ambiguous_call(self, /):
        with pytest.raises(TypeError):
            Pair()
        with pytest.raises(TypeError):
            Answer()

    def test_slots(self, /):
        Slotted.ONLY._cache = 1

        assert Slotted.ONLY._cache == 1

        with pytest.raises(AttributeError):
            Slotted.ONLY._other = 2
