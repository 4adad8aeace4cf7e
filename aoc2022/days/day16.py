"""Day 16: Proboscidea Volcanium.

Only valves with a positive flow rate matter, so the tunnel network is
compressed to pairwise travel times (`scipy.sparse.csgraph`). A depth-first
search then records, for every set of opened valves, the most pressure that
set can release; two workers (part 2) combine disjoint sets.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import shortest_path

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

_VALVE = re.compile(r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? (\w+(?:, \w+)*)")

START = "AA"
MINUTES_ALONE = 30
MINUTES_WITH_ELEPHANT = 26


@dataclass(frozen=True)
class Network:
    names: list[str]
    rates: list[int]
    tunnels: dict[str, list[str]]


def parse_network(text: str) -> Network:
    names: list[str] = []
    rates: list[int] = []
    tunnels: dict[str, list[str]] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        m = _VALVE.fullmatch(line)
        if m is None:
            raise PuzzleInputError(f"unrecognised valve report {line!r}", line=lineno)
        names.append(m[1])
        rates.append(int(m[2]))
        tunnels[m[1]] = m[3].split(", ")
    for name, targets in tunnels.items():
        for target in targets:
            if target not in tunnels:
                raise PuzzleInputError(f"valve {name} leads to unknown valve {target}")
    if START not in tunnels:
        raise PuzzleInputError(f"no valve {START} to start from")
    return Network(names, rates, tunnels)


def travel_times(net: Network) -> np.ndarray:
    """All-pairs minutes needed to walk between valves."""
    index = {name: i for i, name in enumerate(net.names)}
    src = [index[a] for a, targets in net.tunnels.items() for _ in targets]
    dst = [index[b] for targets in net.tunnels.values() for b in targets]
    n = len(net.names)
    graph = csr_matrix((np.ones(len(src)), (src, dst)), shape=(n, n))
    return shortest_path(graph, method="FW", directed=True, unweighted=True)


def best_by_valve_set(net: Network, minutes: int) -> np.ndarray:
    """`best[mask]`: most pressure released by opening exactly the valves in `mask`.

    Bit `i` of a mask refers to the i-th valve with a positive flow rate.
    Unreachable sets stay at 0.
    """
    times = travel_times(net)
    useful = [i for i, rate in enumerate(net.rates) if rate > 0]
    logger.debug("%d useful valves of %d", len(useful), len(net.names))
    start = net.names.index(START)

    best = np.zeros(1 << len(useful), dtype=np.int64)
    stack = [(start, minutes, 0, 0)]
    while stack:
        pos, left, mask, released = stack.pop()
        if released > best[mask]:
            best[mask] = released
        for bit, valve in enumerate(useful):
            if mask & (1 << bit) or not np.isfinite(times[pos, valve]):
                continue
            remaining = left - int(times[pos, valve]) - 1
            if remaining > 0:
                stack.append((valve, remaining, mask | (1 << bit), released + net.rates[valve] * remaining))
    return best


def best_within_subsets(best: np.ndarray) -> np.ndarray:
    """`out[mask]` = max of `best` over all subsets of `mask`."""
    out = best.copy()
    bits = out.size.bit_length() - 1
    for bit in range(bits):
        view = out.reshape(-1, 2, 1 << bit)
        np.maximum(view[:, 1, :], view[:, 0, :], out=view[:, 1, :])
    return out


def most_pressure(net: Network) -> int:
    return int(best_by_valve_set(net, MINUTES_ALONE).max())


def most_pressure_with_elephant(net: Network) -> int:
    best = best_within_subsets(best_by_valve_set(net, MINUTES_WITH_ELEPHANT))
    full = best.size - 1
    masks = np.arange(best.size)
    return int((best[masks] + best[full ^ masks]).max())


@guarded(16)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(16, "Most pressure that can be released from the volcano's valves.")
    args = parse_args(ap, 16, argv)
    net = parse_network(read_input(args.input))
    return report(most_pressure(net) if args.mode == PART1 else most_pressure_with_elephant(net))


if __name__ == "__main__":
    raise SystemExit(main())
