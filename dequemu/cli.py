"""Line-oriented front end for the deque emulator."""

from __future__ import annotations

import argparse
import random
import sys

from dequemu.emulator import DequeEmulator

_NO_ARGUMENT = {
    "pop_front": DequeEmulator.pop_front,
    "pop_back": DequeEmulator.pop_back,
    "clear": DequeEmulator.clear,
    "erase": DequeEmulator.erase,
    "prev": DequeEmulator.prev,
    "next": DequeEmulator.next,
    "begin": DequeEmulator.begin,
    "end": DequeEmulator.end,
    "reverse": DequeEmulator.reverse,
    "shuffle": DequeEmulator.shuffle,
    "min_element": DequeEmulator.min_element,
    "max_element": DequeEmulator.max_element,
    "merge_sort": DequeEmulator.merge_sort,
    "merge_sort_ci": DequeEmulator.merge_sort_case_insensitive,
    "unique": DequeEmulator.unique,
    "tea": DequeEmulator.load_tea,
    "cakes": DequeEmulator.load_cakes,
}

_TEXT_ARGUMENT = {
    "push_front": DequeEmulator.push_front,
    "push_back": DequeEmulator.push_back,
    "insert": DequeEmulator.insert,
    "edit": DequeEmulator.edit,
    "find": DequeEmulator.find,
    "resize": DequeEmulator.resize,
    "lower_bound": DequeEmulator.lower_bound,
    "upper_bound": DequeEmulator.upper_bound,
}


def execute(emulator: DequeEmulator, line: str) -> str | None:
    """Run one command line; return text to show, if the command yields any."""
    command, _, argument = line.strip().partition(" ")
    if command in _NO_ARGUMENT:
        _NO_ARGUMENT[command](emulator)
        return None
    if command in _TEXT_ARGUMENT:
        _TEXT_ARGUMENT[command](emulator, argument)
        return None
    if command == "count":
        return str(emulator.count(argument))
    if command == "select":
        try:
            row = int(argument)
        except ValueError:
            raise ValueError(f"select needs a row number, got {argument!r}") from None
        emulator.select_row(row)
        return None
    raise ValueError(f"unknown command: {command!r}")


def render(emulator: DequeEmulator) -> str:
    """Show the rows with the cursor marked, then the size and current item."""
    current_row = len(emulator.items) if emulator.at_end() else emulator.pos
    lines = [
        f"{'>' if index == current_row else ' '} {row}"
        for index, row in enumerate(emulator.rows())
    ]
    lines.append(f"size: {len(emulator.items)}")
    lines.append(f"current: {emulator.current()}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dequemu", description="Interactive deque emulator.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffle")
    args = parser.parse_args(argv)

    emulator = DequeEmulator(random.Random(args.seed))
    for raw in sys.stdin:
        line = raw.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        try:
            output = execute(emulator, line)
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            continue
        if output is not None:
            print(output)
        print(render(emulator))
    return 0


if __name__ == "__main__":
    sys.exit(main())