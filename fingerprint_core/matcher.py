"""Matcher records and the best-match skipper."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PersonsSkipScore:
    """Skip score reached by one person."""

    person: int
    score: float


class BestMatchSkipper:
    """Keeps the best ``skip + 1`` scores seen for each person."""

    def __init__(self, persons: int, skip: int) -> None:
        if persons <= 0 or skip + 1 <= 0:
            raise ValueError(f"invalid skipper dimensions persons={persons} skip={skip}")
        self.collected = np.full((skip + 1, persons), -1.0, dtype=np.float32)

    def add_score(self, person: int, score: float) -> None:
        """Record a score for a person, keeping the ranking of the best ones."""
        value = np.float32(score)
        column = self.collected[:, person]
        depth = len(column)
        for nth in range(depth - 1, -1, -1):
            if column[nth] < value:
                if nth + 1 < depth:
                    column[nth + 1] = column[nth]
                column[nth] = value

    def skip_score(self, person: int) -> float:
        """The lowest positive kept score of a person, or 0.0 if there is none."""
        for value in self.collected[::-1, person]:
            if value > 0:
                return float(value)
        return 0.0


@dataclass(frozen=True)
class MinutiaPair:
    """Indexes of a probe minutia and its candidate counterpart."""

    probe: int
    candidate: int


@dataclass
class PairInfo:
    """A matched pair, the pair it was reached from, and its edge support."""

    pair: MinutiaPair
    reference: MinutiaPair
    supporting_edges: int = 0

    def copy(self) -> PairInfo:
        return PairInfo(self.pair, self.reference, self.supporting_edges)


@dataclass(frozen=True)
class EdgeShape:
    """Length of an edge and its angles at both ends."""

    length: int
    reference_angle: int
    neighbour_angle: int


@dataclass(frozen=True)
class EdgeLocation:
    """Indexes of the minutiae at both ends of an edge."""

    reference: int
    neighbour: int


@dataclass(frozen=True)
class IndexedEdge:
    """Edge shape together with where the edge lies."""

    shape: EdgeShape
    location: EdgeLocation


@dataclass(frozen=True)
class NeighbourEdge:
    """Edge shape leading to a neighbouring minutia."""

    edge: EdgeShape
    neighbour: int