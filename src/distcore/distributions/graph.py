"""
Characteristic Graph
====================

Directed graph over characteristic names. An edge ``src -> dst`` carries
the :class:`~distcore.distributions.computation.ComputationMethod` that
derives ``dst`` once ``src`` is known.

For univariate continuous distributions the graph has two edges, both
leaving ``cdf``: ``cdf -> ppf`` (root finding) and ``cdf -> sf``
(complement). Densities are always supplied in closed form.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import deque
from functools import lru_cache
from typing import TYPE_CHECKING

from distcore.distributions.computation import ComputationMethod
from distcore.distributions.fitters import fit_cdf_to_ppf, fit_cdf_to_sf
from distcore.types import CharacteristicName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from distcore.types import DistributionType, GenericCharacteristicName


class CharacteristicGraph:
    """Adjacency ``edges[src][dst] -> ComputationMethod`` with BFS lookup."""

    def __init__(self) -> None:
        self._edges: dict[
            GenericCharacteristicName,
            dict[GenericCharacteristicName, ComputationMethod[Any, Any]],
        ] = {}

    def add_edge(self, method: ComputationMethod[Any, Any]) -> None:
        self._edges.setdefault(method.source, {})[method.target] = method

    def find_path(
        self, src: GenericCharacteristicName, dst: GenericCharacteristicName
    ) -> list[ComputationMethod[Any, Any]] | None:
        """
        Shortest chain of edges leading from ``src`` to ``dst``.

        Returns
        -------
        list of ComputationMethod or None
            ``[]`` when ``src == dst``; ``None`` when ``dst`` is unreachable.
        """
        if src == dst:
            return []
        parent: dict[GenericCharacteristicName, ComputationMethod[Any, Any]] = {}
        queue = deque([src])
        while queue:
            node = queue.popleft()
            for nxt, method in self._edges.get(node, {}).items():
                if nxt == src or nxt in parent:
                    continue
                parent[nxt] = method
                if nxt == dst:
                    path = []
                    while nxt != src:
                        path.append(parent[nxt])
                        nxt = parent[nxt].source
                    return path[::-1]
                queue.append(nxt)
        return None


@lru_cache(maxsize=None)
def characteristic_graph(distribution_type: DistributionType) -> CharacteristicGraph:
    """
    Graph for ``distribution_type``.

    Only univariate continuous distributions have edges; any other type gets
    an empty graph, so nothing beyond its analytical characteristics
    resolves.
    """
    graph = CharacteristicGraph()
    if distribution_type == UnivariateContinuous:
        cdf = CharacteristicName.CDF
        graph.add_edge(ComputationMethod(cdf, CharacteristicName.PPF, fit_cdf_to_ppf))
        graph.add_edge(ComputationMethod(cdf, CharacteristicName.SF, fit_cdf_to_sf))
    return graph


__all__ = ["CharacteristicGraph", "characteristic_graph"]
