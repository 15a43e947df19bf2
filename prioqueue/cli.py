"""Interactive menu for exercising the priority queues."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import TextIO

from prioqueue.array_pq import ArrayPQ
from prioqueue.heap_pq import HeapPQ
from prioqueue.node import EmptyQueueError, KeyUpdateError

Queue = ArrayPQ | HeapPQ

MENU = (
    "--- queue MENU ---\n"
    "1  insert(e p)\n"
    "2  extract-max()\n"
    "3  find-max()\n"
    "4  increase-key(e p)\n"
    "5  decrease-key(e p)\n"
    "6  return-size()\n"
    "7  load-from-file\n"
    "8  generate-random(seed N)\n"
    "0  quit\n\n> "
)


def find_index(queue: Queue, value: int, priority: int) -> int | None:
    """Return the position of the first element with this value and priority."""
    for index, node in enumerate(queue):
        if node.value == value and node.priority == priority:
            return index
    return None


def load_from_file(queue: Queue, path: str | Path) -> int:
    """Insert ``value priority`` pairs read from a file; return how many.

    Reading stops at the first token that is not an integer.
    """
    tokens = Path(path).read_text().split()
    count = 0
    for value_text, priority_text in zip(tokens[::2], tokens[1::2]):
        try:
            value, priority = int(value_text), int(priority_text)
        except ValueError:
            break
        queue.insert(value, priority)
        count += 1
    return count


def generate_random(queue: Queue, seed: int, count: int) -> int:
    """Insert ``count`` random elements, deterministic for a given seed."""
    if count <= 0:
        raise ValueError("count must be positive")
    rng = random.Random(seed)
    for _ in range(count):
        queue.insert(rng.randint(0, 2 * count), rng.randint(0, 5 * count - 1))
    return count


def _parse_ints(line: str, n: int) -> tuple[int, ...] | None:
    tokens = line.split()
    if len(tokens) < n:
        return None
    try:
        return tuple(int(token) for token in tokens[:n])
    except ValueError:
        return None


def _clear_screen(stdout: TextIO) -> None:
    if stdout.isatty():
        stdout.write("\033[2J\033[H")


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write("\n### Press Enter to continue")
    stdout.flush()
    stdin.readline()


def _prompt(stdin: TextIO, stdout: TextIO, text: str) -> str:
    stdout.write(text)
    stdout.flush()
    return stdin.readline()


def _change_key(queue: Queue, stdin: TextIO, stdout: TextIO, increase: bool) -> None:
    numbers = _parse_ints(_prompt(stdin, stdout, "enter e, current p and new p: "), 3)
    if numbers is None:
        stdout.write("invalid input\n")
        return
    value, current, new = numbers
    index = find_index(queue, value, current)
    if index is None:
        stdout.write("no such element\n")
        return
    try:
        if increase:
            queue.increase_key(index, new)
        else:
            queue.decrease_key(index, new)
    except KeyUpdateError:
        relation = "greater than or equal to" if increase else "less than or equal to"
        stdout.write(f"new priority must be {relation} the current one\n")
    else:
        stdout.write("priority increased\n" if increase else "priority decreased\n")


def menu_loop(queue: Queue, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the menu until the user quits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        _clear_screen(stdout)
        line = _prompt(stdin, stdout, MENU)
        if not line:
            stdout.write("\nend\n")
            return
        parsed = _parse_ints(line, 1)
        if parsed is None:
            stdout.write("enter a digit from the menu")
            _pause(stdin, stdout)
            continue
        choice = parsed[0]
        _clear_screen(stdout)

        if choice == 0:
            stdout.write("end\n")
            return
        if choice == 1:
            numbers = _parse_ints(_prompt(stdin, stdout, "enter e and p: "), 2)
            if numbers is None:
                stdout.write("invalid input\n")
            else:
                queue.insert(*numbers)
                stdout.write(f"inserted ({numbers[0]}, {numbers[1]})\n")
        elif choice in (2, 3):
            try:
                node = queue.extract_max() if choice == 2 else queue.find_max()
            except EmptyQueueError:
                stdout.write("queue is empty\n")
            else:
                label = "extracted" if choice == 2 else "max ="
                stdout.write(f"{label} ({node.value}, {node.priority})\n")
        elif choice in (4, 5):
            _change_key(queue, stdin, stdout, increase=choice == 4)
        elif choice == 6:
            stdout.write(f"size = {len(queue)}\n")
        elif choice == 7:
            path = _prompt(stdin, stdout, "enter file name: ").strip()
            try:
                count = load_from_file(queue, path)
            except OSError:
                stdout.write("cannot open file\n")
            else:
                stdout.write(f"loaded {count} elements\n")
        elif choice == 8:
            numbers = _parse_ints(_prompt(stdin, stdout, "enter seed and N: "), 2)
            if numbers is None or numbers[0] < 0 or numbers[1] <= 0:
                stdout.write("invalid input\n")
            else:
                seed, count = numbers
                generate_random(queue, seed, count)
                stdout.write(f"inserted {count} random elements (seed={seed})\n")
        else:
            stdout.write("unknown option\n")
        _pause(stdin, stdout)


def main(argv: list[str] | None = None) -> int:
    """Choose a queue implementation and run the menu."""
    parser = argparse.ArgumentParser(prog="prioqueue", description="Priority queue menu.")
    parser.add_argument(
        "impl", nargs="?", help="1 for the unsorted array, 2 for the binary heap"
    )
    args = parser.parse_args(argv)

    choice = args.impl
    if choice is None:
        _clear_screen(sys.stdout)
        choice = _prompt(
            sys.stdin,
            sys.stdout,
            "Choose the queue implementation:\n"
            "1 - unsorted array (ArrayPQ)\n"
            "2 - binary heap (HeapPQ)\n> ",
        ).strip()

    if choice not in ("1", "2"):
        print("invalid choice - exiting")
        return 0

    queue: Queue = ArrayPQ() if choice == "1" else HeapPQ()
    menu_loop(queue)
    return 0


if __name__ == "__main__":
    sys.exit(main())