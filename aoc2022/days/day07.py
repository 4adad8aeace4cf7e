"""Day 7: No Space Left On Device.

A shell transcript (`$ cd X`, `$ ls` and its listing) is replayed into a
directory tree; directory sizes include everything below them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from ..constants import PART1
from ..errors import PuzzleInputError
from ..runner import build_parser, guarded, parse_args, read_input, report

logger = logging.getLogger(__name__)

SMALL_DIR_LIMIT = 100_000
DISK_SIZE = 70_000_000
SPACE_NEEDED = 30_000_000


@dataclass(eq=False)
class Directory:
    name: str
    parent: Directory | None = None
    children: dict[str, Directory] = field(default_factory=dict)
    files: dict[str, int] = field(default_factory=dict)

    @property
    def path(self) -> str:
        if self.parent is None:
            return "/"
        parent = self.parent.path
        return f"{parent}{self.name}" if parent == "/" else f"{parent}/{self.name}"

    def subdir(self, name: str) -> Directory:
        if name not in self.children:
            self.children[name] = Directory(name, parent=self)
        return self.children[name]

    def walk(self) -> Iterator[Directory]:
        yield self
        for child in self.children.values():
            yield from child.walk()


def parse_transcript(text: str) -> Directory:
    """Replay the transcript and return the root directory."""
    root = Directory("/")
    cwd = root
    for lineno, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "$":
            if parts[1:] == ["ls"]:
                continue
            if len(parts) != 3 or parts[1] != "cd":
                raise PuzzleInputError(f"unknown command {line!r}", line=lineno)
            target = parts[2]
            if target == "/":
                cwd = root
            elif target == "..":
                if cwd.parent is None:
                    raise PuzzleInputError("cd .. from the root directory", line=lineno)
                cwd = cwd.parent
            else:
                cwd = cwd.subdir(target)
        elif len(parts) == 2 and parts[0] == "dir":
            cwd.subdir(parts[1])
        elif len(parts) == 2 and parts[0].isdigit():
            cwd.files[parts[1]] = int(parts[0])
        else:
            raise PuzzleInputError(f"unexpected listing entry {line!r}", line=lineno)
    return root


def directory_sizes(root: Directory) -> dict[Directory, int]:
    """Total size of every directory, children before parents."""
    sizes: dict[Directory, int] = {}

    def visit(d: Directory) -> int:
        total = sum(d.files.values()) + sum(visit(child) for child in d.children.values())
        sizes[d] = total
        return total

    visit(root)
    return sizes


def small_directories_total(sizes: dict[Directory, int], limit: int = SMALL_DIR_LIMIT) -> int:
    return sum(size for size in sizes.values() if size <= limit)


def directory_to_delete(
    root: Directory,
    sizes: dict[Directory, int],
    disk_size: int = DISK_SIZE,
    needed: int = SPACE_NEEDED,
) -> Directory:
    """Smallest directory whose removal leaves at least `needed` free.

    Raises:
        PuzzleInputError: If the files cannot fit on the disk at all, or if
            there is already enough free space.
    """
    used = sizes[root]
    if used > disk_size:
        raise PuzzleInputError(f"{used} bytes in use exceed the disk size {disk_size}")
    missing = needed - (disk_size - used)
    if missing <= 0:
        raise PuzzleInputError(f"already {disk_size - used} bytes free; nothing to delete")
    return min((d for d, size in sizes.items() if size >= missing), key=sizes.__getitem__)


@guarded(7)
def main(argv: list[str] | None = None) -> int:
    ap = build_parser(7, "Directory sizes from a shell transcript.")
    args = parse_args(ap, 7, argv)
    root = parse_transcript(read_input(args.input))
    sizes = directory_sizes(root)
    if args.mode == PART1:
        return report(small_directories_total(sizes))
    victim = directory_to_delete(root, sizes)
    logger.debug("deleting %s", victim.path)
    return report(sizes[victim])


if __name__ == "__main__":
    raise SystemExit(main())
