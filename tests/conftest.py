#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2024 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import sys
import threading

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from contextlib import contextmanager

import pytest

from wrapt import decorator

if sys.version_info >= (3, 11):
    WaitTimeout = TimeoutError
else:
    from concurrent.futures import TimeoutError as WaitTimeout


@contextmanager
def _test_thread_safety_cm(*functions):
    with ThreadPoolExecutor(len(functions) + 1) as executor:
        barrier = threading.Barrier(len(functions) + 1)
        stopped = threading.Event()

        @decorator
        def _wrapper(wrapped, instance, args, kwargs):
            barrier.wait()

            while True:
                result = wrapped(*args, **kwargs)

                if stopped.is_set():
                    break

            return result

        interval = sys.getswitchinterval()
        sys.setswitchinterval(min(1e-6, interval))

        try:
            outer_future = Future()
            inner_futures = {executor.submit(_wrapper(f)) for f in functions}

            @executor.submit
            def _wait():
                try:
                    barrier.wait()

                    for future in as_completed(inner_futures, timeout=6):
                        future.result()  # reraise
                except WaitTimeout:
                    outer_future.set_result(True)
                except BaseException as exc:  # noqa: BLE001
                    outer_future.set_exception(exc)
                else:
                    outer_future.set_result(False)
                finally:
                    stopped.set()

            yield outer_future
        finally:
            sys.setswitchinterval(interval)


@pytest.fixture
def test_thread_safety(request):
    def _impl(*args):
        with _test_thread_safety_cm(*args) as future:
            return future.result()

    return _impl


def pytest_addoption(parser):
    parser.addoption(
        "--thread-safety",
        action="store_true",
        default=False,
        help="run thread-safety tests",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "threadsafe: mark test as thread-safety test",
    )


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "test_thread_safety" in item.fixturenames:
            item.add_marker(pytest.mark.threadsafe)

        if "threadsafe" in item.keywords:
            if not config.getoption("--thread-safety"):
                item.add_marker(
                    pytest.mark.skip(
                        reason="need --thread-safety option to run",
                    )
                )
