"""Interactive menu that runs the counting sorts and shows their statistics."""

from __future__ import annotations

import argparse
import random
import sys

from solidkit.sorting import (
    VALUE_SPAN,
    benchmark,
    binary_insertion_sort,
    bubble_sort,
    format_array,
    insertion_sort,
    merge_sorted,
    quick_sort,
    selection_sort,
    shell_sort,
)

SIZE = 15
BENCHMARK_ROUNDS = 100
ESC = "\x1b"
FAREWELL = "See you...  ;)"
PAUSE = "Any key..."

JOIN_FIRST = (-1, 1, 2, 3, 3)
JOIN_SECOND = (-2, 0, 2, 4, 4)

SORTS = {
    "1": bubble_sort,
    "2": selection_sort,
    "3": insertion_sort,
    "4": binary_insertion_sort,
    "5": shell_sort,
    "6": quick_sort,
}

TITLES = {
    "bubble": "Exchange sort:",
    "selection": "Selection sort:",
    "insertion": "Straight insertion sort:",
    "binary_insertion": "Binary insertion sort:",
    "shell": "Shell sort:",
    "quick": "Quick sort:",
}

_MENU = (
    "Menu:",
    "",
    "  1. Exchange sort (bubble method)",
    "  2. Selection sort",
    "  3. Straight insertion sort",
    "  4. Binary insertion sort (insertion by halving)",
    "  5. Shell sort",
    "  6. Quick sort",
    "",
    "  7. Merge of sorted arrays",
    "  8. Performance test",
    "",
    "  ESC. Exit",
    "",
    "",
    "->",
)


def menu_text():
    """Return the main menu as shown before each key press."""
    return "\n".join(_MENU) + "\n"


def _random_values(size, rng):
    half = VALUE_SPAN // 2
    return [rng.randrange(VALUE_SPAN) - half for _ in range(size)]


def _show_sort(out, sort, values):
    items, stats = sort(values)
    out.write("Sorted array:\n")
    out.write(format_array(items) + "\n")
    out.write(f"\n\nIterations required: {stats.iterations}\n")
    out.write(f"Cell exchanges made: {stats.exchanges}\n")
    out.write(f"Conditions passed: {stats.conditions}\n")


def _show_join(out):
    out.write("Array A:\n" + format_array(JOIN_FIRST) + "\n")
    out.write("Array B:\n" + format_array(JOIN_SECOND) + "\n")
    merged = merge_sorted(JOIN_FIRST, JOIN_SECOND)
    out.write("Array C:\n" + format_array(merged) + "\n")


def _show_benchmark(out, size, rng):
    averages = benchmark(size, BENCHMARK_ROUNDS, rng)
    for name, stats in averages.items():
        title = TITLES[name]
        out.write(f"{title:<32}iterations = {stats.iterations}\n")
        out.write(f"{'':<32}exchanges = {stats.exchanges}\n")
        out.write(f"{'':<32}conditions = {stats.conditions}\n\n")
    out.write("Ok...\n")


def run(keys, out=None, rng=None):
    """Drive the menu with a sequence of key presses until ESC or no keys remain."""
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    presses = iter(keys)

    while True:
        values = _random_values(SIZE, rng)
        out.write(menu_text())
        key = next(presses, None)
        if key is None or key == ESC:
            break
        if "0" <= key <= "6":
            out.write("Original array:\n" + format_array(values) + "\n")
        if key in SORTS:
            _show_sort(out, SORTS[key], values)
        elif key == "7":
            _show_join(out)
        elif key == "8":
            _show_benchmark(out, SIZE, rng)
        else:
            continue
        out.write(f"\n\n{PAUSE}\n")
        if next(presses, None) is None:
            break

    out.write(f"\n\n{FAREWELL}\n")


def _stdin_keys():
    while True:
        char = sys.stdin.read(1)
        if not char:
            return
        if char in "\r\n":
            continue
        yield char


def main(argv=None):
    """Command entry point: read key presses from standard input."""
    parser = argparse.ArgumentParser(prog="sortdemo", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the random arrays")
    args = parser.parse_args(argv)
    run(_stdin_keys(), sys.stdout, random.Random(args.seed))
    return 0