"""Job assignment by branch and bound over a cost matrix."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def lower_bound(
    cost_matrix: Sequence[Sequence[int]],
    job: int,
    available: Sequence[bool],
    current_cost: int,
) -> int:
    """Cost so far plus the cheapest available worker for every job after ``job``."""
    bound = current_cost
    free = [worker for worker, is_free in enumerate(available) if is_free]
    for row in cost_matrix[job + 1 :]:
        if not free:
            raise ValueError("no worker available for a remaining job")
        bound += min(row[worker] for worker in free)
    logger.debug("lower bound for job %d: %d", job, bound)
    return bound


@dataclass
class _Node:
    assigned: tuple[int, ...]
    available: tuple[bool, ...]
    job: int
    cost: int
    bound: int


def find_min_cost(cost_matrix: Sequence[Sequence[int]]) -> int:
    """Least total cost of giving each job ``i`` its own worker ``j``."""
    size = len(cost_matrix)
    if any(len(row) != size for row in cost_matrix):
        raise ValueError("cost matrix must be square")

    available = (True,) * size
    root = _Node((-1,) * size, available, -1, 0, lower_bound(cost_matrix, -1, available, 0))
    tie = itertools.count()
    queue = [(root.bound, next(tie), root)]
    best = math.inf
    while queue:
        _, _, node = heapq.heappop(queue)
        next_job = node.job + 1
        if next_job == size:
            best = min(best, node.cost)
            continue
        for worker, is_free in enumerate(node.available):
            if not is_free:
                continue
            child_available = node.available[:worker] + (False,) + node.available[worker + 1 :]
            child_assigned = node.assigned[:next_job] + (worker,) + node.assigned[next_job + 1 :]
            child_cost = node.cost + cost_matrix[next_job][worker]
            bound = lower_bound(cost_matrix, next_job, child_available, child_cost)
            if bound < best:
                child = _Node(child_assigned, child_available, next_job, child_cost, bound)
                heapq.heappush(queue, (bound, next(tie), child))
    return int(best)