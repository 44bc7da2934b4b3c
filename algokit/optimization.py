"""Knapsack and rod-cutting optimisation."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _pair_up(values: Sequence[int], weights: Sequence[int]) -> list[tuple[int, int]]:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    return list(zip(values, weights))


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of items fitting in capacity (0/1 knapsack, exact)."""
    items = _pair_up(values, weights)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for _, weight in items):
        raise ValueError("weights must not be negative")
    row = [0] * (capacity + 1)
    for value, weight in items:
        row = [0] + [
            max(value + row[room - weight], row[room]) if weight <= room else row[room]
            for room in range(1, capacity + 1)
        ]
    return row[capacity]


def _ratio(value: int, weight: int) -> float:
    if weight:
        return value / weight
    if value > 0:
        return math.inf
    if value < 0:
        return -math.inf
    return math.nan


def _partition(items: list[tuple[int, int, float]], low: int, high: int) -> int:
    pivot_ratio = items[high][2]
    boundary = low
    for j in range(low, high):
        if items[j][2] > pivot_ratio:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def _order_by_ratio(items: list[tuple[int, int, float]], low: int, high: int) -> None:
    while low < high:
        pivot = _partition(items, low, high)
        if pivot - low < high - pivot:
            _order_by_ratio(items, low, pivot - 1)
            low = pivot + 1
        else:
            _order_by_ratio(items, pivot + 1, high)
            high = pivot - 1


def greedy_knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Take items by falling value/weight ratio while they still fit."""
    items = [(value, weight, _ratio(value, weight)) for value, weight in _pair_up(values, weights)]
    _order_by_ratio(items, 0, len(items) - 1)
    total_value = total_weight = 0
    for value, weight, _ in items:
        if total_weight + weight <= capacity:
            total_weight += weight
            total_value += value
    return total_value


def rod_cut(prices: Sequence[int], length: int) -> int:
    """Best revenue from cutting a rod, where prices[i] sells a piece of length i+1."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length > len(prices):
        raise ValueError("no price given for some piece length")
    best = [0]
    for size in range(1, length + 1):
        best.append(max([-1] + [prices[piece - 1] + best[size - piece] for piece in range(1, size + 1)]))
    return best[length]