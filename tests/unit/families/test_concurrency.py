from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from collections.abc import Callable

import pytest

from distcore.families.configuration import configure_families_register
from distcore.types import FamilyName

N_THREADS = 16


def run_in_threads(task: Callable[[int], float]) -> tuple[list[float], list[BaseException]]:
    barrier = threading.Barrier(N_THREADS)
    results: list[float] = []
    errors: list[BaseException] = []

    def worker(i: int) -> None:
        barrier.wait()
        try:
            for _ in range(20):
                results.append(task(i))
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results, errors


class TestSharedDistributions:
    def setup_method(self) -> None:
        registry = configure_families_register()
        self.beta = registry.get(FamilyName.BETA)(shape_a=2.0, shape_b=5.0)
        self.triangular = registry.get(FamilyName.TRIANGULAR)(min=0.0, max=1.0, mode=0.5)

    def test_derived_characteristics_from_many_threads(self) -> None:
        def task(i: int) -> float:
            if i % 3 == 0:
                return float(self.beta.sf(0.3))
            if i % 3 == 1:
                return float(self.beta.inverse_cdf(0.4))
            return float(self.triangular.sf(0.25))

        results, errors = run_in_threads(task)

        assert errors == []
        assert len(results) == N_THREADS * 20

    def test_threads_agree_with_serial_values(self) -> None:
        expected = float(self.beta.inverse_cdf(0.4))
        results, errors = run_in_threads(lambda _: float(self.beta.inverse_cdf(0.4)))

        assert errors == []
        assert results == pytest.approx([expected] * len(results))
