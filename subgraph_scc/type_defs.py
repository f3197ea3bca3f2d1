#!/usr/bin/env python3

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Protocol, TypeVar


class Comparable(Protocol):
    @abc.abstractmethod
    def __lt__(self: T, other: T) -> bool:
        ...


T = TypeVar("T", bound=Comparable)

# Vertex index -> successor indices, dense index space 0..n-1
AdjacencyList = Sequence[Sequence[int]]
