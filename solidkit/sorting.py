"""Classic in-memory sorting algorithms that count the work they do."""

from __future__ import annotations

import heapq
import random
from dataclasses import dataclass

SHELL_GAPS = (9, 5, 3, 2, 1)
VALUE_SPAN = 100  # random values fall in [-VALUE_SPAN // 2, VALUE_SPAN // 2)


@dataclass
class SortStats:
    """Loop iterations, element moves and satisfied comparisons of one sort."""

    iterations: int = 0
    exchanges: int = 0
    conditions: int = 0

    def __iadd__(self, other):
        if not isinstance(other, SortStats):
            return NotImplemented
        self.iterations += other.iterations
        self.exchanges += other.exchanges
        self.conditions += other.conditions
        return self


def bubble_sort(values):
    """Exchange sort: compare each element with every later one and swap."""
    items = list(values)
    stats = SortStats()
    count = len(items)
    for i in range(count):
        for j in range(i + 1, count):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
                stats.exchanges += 1
                stats.conditions += 1
            stats.iterations += 1
    return items, stats


def selection_sort(values):
    """Repeated full passes swapping adjacent out-of-order neighbours."""
    items = list(values)
    stats = SortStats()
    count = len(items)
    for _ in range(count):
        for j in range(count - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                stats.exchanges += 1
                stats.conditions += 1
            stats.iterations += 1
    return items, stats


def insertion_sort(values):
    """Straight insertion: shift larger elements right, drop the key in place."""
    items = list(values)
    stats = SortStats()
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and key < items[j]:
            stats.iterations += 1
            stats.exchanges += 1
            items[j + 1] = items[j]
            j -= 1
        stats.iterations += 1
        items[j + 1] = key
    stats.iterations -= len(items) - 1
    return items, stats


def binary_insertion_sort(values):
    """Insertion sort that finds each insertion point by halving the range."""
    items = list(values)
    stats = SortStats()
    for i in range(1, len(items)):
        low, high = 0, i
        stats.exchanges += 1
        key = items[i]
        while low != high:
            middle = (low + high) // 2
            if key > items[middle]:
                low = middle + 1
            else:
                high = middle
            stats.conditions += 1
            stats.iterations += 1
        shifted = i - low
        items[low + 1 : i + 1] = items[low:i]
        items[low] = key
        stats.exchanges += shifted
        stats.iterations += shifted
    return items, stats


def shell_sort(values):
    """Shell sort over the fixed gap sequence 9, 5, 3, 2, 1."""
    items = list(values)
    stats = SortStats()
    for gap in SHELL_GAPS:
        for i in range(gap, len(items)):
            key = items[i]
            j = i - gap
            while j >= 0 and key < items[j]:
                items[j + gap] = items[j]
                stats.iterations += 1
                stats.exchanges += 1
                j -= gap
            items[j + gap] = key
    return items, stats


def quick_sort(values):
    """Hoare-style quicksort with the middle element as pivot."""
    items = list(values)
    stats = SortStats()
    if not items:
        return items, stats
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        i, j = left, right
        pivot = items[(left + right) // 2]
        while True:
            while items[i] < pivot and i < right:
                i += 1
                stats.iterations += 1
            while pivot < items[j] and j > left:
                j -= 1
                stats.iterations += 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
                stats.exchanges += 1
                stats.conditions += 1
            if i > j:
                break
        if left < j:
            pending.append((left, j))
        if i < right:
            pending.append((i, right))
    return items, stats


ALGORITHMS = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "binary_insertion": binary_insertion_sort,
    "shell": shell_sort,
    "quick": quick_sort,
}


def merge_sorted(first, second):
    """Merge two ascending sequences; on ties the element of first comes first."""
    return list(heapq.merge(first, second))


def format_array(values):
    """Render values as a bracketed row of right-aligned three-wide numbers."""
    return "[" + "".join(f" {value:3d}" for value in values) + "]"


def _random_values(size, rng):
    half = VALUE_SPAN // 2
    return [rng.randrange(VALUE_SPAN) - half for _ in range(size)]


def benchmark(size=15, rounds=100, rng=None):
    """Sort fresh random arrays with every algorithm; return average stats by name."""
    if size < 0:
        raise ValueError("size must not be negative")
    if rounds < 1:
        raise ValueError("rounds must be at least 1")
    rng = random.Random() if rng is None else rng
    totals = {name: SortStats() for name in ALGORITHMS}
    for _ in range(rounds):
        for name, algorithm in ALGORITHMS.items():
            _, stats = algorithm(_random_values(size, rng))
            totals[name] += stats
    return {
        name: SortStats(
            total.iterations // rounds,
            total.exchanges // rounds,
            total.conditions // rounds,
        )
        for name, total in totals.items()
    }