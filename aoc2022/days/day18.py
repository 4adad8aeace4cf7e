"""Day 18: Boiling Boulders."""

from __future__ import annotations

import numpy as np
from scipy import ndimage

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report


def parse_cubes(text: str) -> np.ndarray:
    """`(N, 3)` integer array of cube coordinates."""
    cubes = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            x, y, z = (int(v) for v in line.split(","))
        except ValueError as exc:
            raise PuzzleInputError(f"expected 'x,y,z', got {line!r}", line=lineno) from exc
        cubes.append((x, y, z))
    if not cubes:
        raise PuzzleInputError("no cubes in input")
    return np.array(cubes, dtype=np.int64)


def voxelize(cubes: np.ndarray) -> np.ndarray:
    """Boolean volume with a one-voxel empty margin on every side."""
    shifted = cubes - cubes.min(axis=0) + 1
    volume = np.zeros(tuple(shifted.max(axis=0) + 2), dtype=bool)
    volume[shifted[:, 0], shifted[:, 1], shifted[:, 2]] = True
    return volume


def surface_area(volume: np.ndarray) -> int:
    """Faces between filled and empty voxels (the margin keeps every face inside)."""
    return int(sum(np.count_nonzero(np.diff(volume.astype(np.int8), axis=axis)) for axis in range(3)))


def fill_pockets(volume: np.ndarray) -> np.ndarray:
    """Treat air not connected to the outside as solid."""
    labels, _ = ndimage.label(~volume)
    # the margin guarantees the corner voxel belongs to the outside air
    return labels != labels[0, 0, 0]


@guarded(18)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(18, "Surface area of a lava droplet scan.")
    args = parse_args(ap, 18, argv)
    volume = voxelize(parse_cubes(read_input(args.input)))
    if args.mode != PART1:
        volume = fill_pockets(volume)
    return report(surface_area(volume))


if __name__ == "__main__":
    raise SystemExit(main())
