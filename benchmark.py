#!/usr/bin/env python3
"""Micro-benchmarks for the BST symbol table (timeit, fresh tree per benchmark)."""

import sys
import timeit
from typing import Callable, Dict, List
from bst import BST

# Classic symbol-table trace: 13 puts, 10 distinct keys.
DATA: List[str] = ["S", "E", "A", "R", "C", "H", "E", "X", "A", "M", "P", "L", "E"]

DEFAULT_NUMBER = 10_000


def build() -> BST[int]:
    """Fresh tree loaded with DATA; value is the insertion position."""
    st: BST[int] = BST()
    for v, k in enumerate(DATA):
        st.put(k, v)
    return st


def _bench_put() -> Callable[[], None]:
    st: BST[int] = BST()

    def op() -> None:
        for v, k in enumerate(DATA):
            st.put(k, v)
    return op


def _bench_get() -> Callable[[], None]:
    st = build()

    def op() -> None:
        for k in DATA:
            st.get(k)
    return op


def _bench_delete_min() -> Callable[[], None]:
    st = build()
    return st.delete_min


def _bench_delete_max() -> Callable[[], None]:
    st = build()
    return st.delete_max


def _bench_delete() -> Callable[[], None]:
    st = build()

    def op() -> None:
        for k in DATA:
            st.delete(k)
    return op


def _bench_keys() -> Callable[[], None]:
    return build().keys


def _bench_len() -> Callable[[], None]:
    return build().__len__


def _bench_str() -> Callable[[], None]:
    return build().__str__


BENCHMARKS: Dict[str, Callable[[], Callable[[], None]]] = {
    "put": _bench_put,
    "get": _bench_get,
    "delete_min": _bench_delete_min,
    "delete_max": _bench_delete_max,
    "delete": _bench_delete,
    "keys": _bench_keys,
    "len": _bench_len,
    "str": _bench_str,
}


def run_benchmarks(number: int = DEFAULT_NUMBER) -> Dict[str, float]:
    """Return {name: total seconds for `number` calls}."""
    return {name: timeit.timeit(setup(), number=number) for name, setup in BENCHMARKS.items()}


def main(argv: List[str]) -> int:
    number = DEFAULT_NUMBER if len(argv) < 2 else int(argv[1])
    for name, secs in run_benchmarks(number).items():
        sys.stdout.write(f"{name:<12} {secs / number * 1e9:>12.1f} ns/op\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
