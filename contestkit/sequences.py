"""Puzzles over sequences: chains, array edits, a bounded deque, scoring and ranking."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def longest_chain(values: Sequence[int]) -> int:
    """Length of the longest increasing chain, with the first element counted twice.

    A chain that starts at the first element counts one extra. Results of
    two or less are reported as 0.
    """
    lengths: list[int] = []
    for index, value in enumerate(values):
        if index == 0:
            lengths.append(2)
            continue
        best = max(
            (length for earlier, length in zip(values, lengths) if earlier < value),
            default=0,
        )
        lengths.append(best + 1)
    result = max(lengths, default=0)
    return result if result > 2 else 0


def apply_operations(
    values: Iterable[int], operations: Iterable[Sequence[object]]
) -> list[int]:
    """Apply array operations and return the resulting list.

    Each operation is a code followed by its arguments:
    ``("S", d)`` adds ``d`` to every element, ``("M", d)`` multiplies,
    ``("D", d)`` divides rounding toward zero, ``("R",)`` reverses, and
    ``("P", y, z)`` swaps the elements at ``y`` and ``z``. Unknown codes
    are ignored.
    """
    items = list(values)
    for operation in operations:
        code, *args = operation
        if code == "S":
            (amount,) = args
            items = [item + amount for item in items]
        elif code == "M":
            (factor,) = args
            items = [item * factor for item in items]
        elif code == "D":
            (divisor,) = args
            if divisor == 0:
                raise ZeroDivisionError("division by zero in operation 'D'")
            items = [_trunc_div(item, divisor) for item in items]
        elif code == "R":
            items.reverse()
        elif code == "P":
            y, z = args
            for position in (y, z):
                if not 0 <= position < len(items):
                    raise IndexError(
                        f"position {position} is out of range for {len(items)} values"
                    )
            items[y], items[z] = items[z], items[y]
    return items


def transform_by_max(values: Iterable[int], k: int) -> list[int]:
    """Replace every element by ``max - element``, ``k`` times.

    The maximum is taken together with 0. Since the transform repeats with
    period two, only the parity of ``k`` matters once it is non-zero.
    """
    items = list(values)
    if k == 0:
        rounds = 0
    else:
        rounds = 2 if k % 2 == 0 else 1
    for _ in range(rounds):
        big = max([0, *items])
        items = [big - item for item in items]
    return items


class BoundedDeque:
    """Double-ended queue that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def _ensure_room(self) -> None:
        if self.full:
            raise IndexError("The queue is full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise IndexError("The queue is empty")

    def push_left(self, value: int) -> None:
        """Add ``value`` at the left end; IndexError if full."""
        self._ensure_room()
        self._items.appendleft(value)

    def push_right(self, value: int) -> None:
        """Add ``value`` at the right end; IndexError if full."""
        self._ensure_room()
        self._items.append(value)

    def pop_left(self) -> int:
        """Remove and return the leftmost value; IndexError if empty."""
        self._ensure_items()
        return self._items.popleft()

    def pop_right(self) -> int:
        """Remove and return the rightmost value; IndexError if empty."""
        self._ensure_items()
        return self._items.pop()


def run_deque_commands(
    capacity: int, commands: Iterable[Sequence[object]]
) -> list[str]:
    """Run deque commands on a fresh deque and return one message per command.

    Commands are ``("pushLeft", x)``, ``("pushRight", x)``, ``("popLeft",)``
    and ``("popRight",)``; unknown commands produce no message.
    """
    queue = BoundedDeque(capacity)
    messages: list[str] = []
    for command in commands:
        name, *args = command
        try:
            if name == "pushLeft":
                (value,) = args
                queue.push_left(value)
                messages.append(f"Pushed in left: {value}")
            elif name == "pushRight":
                (value,) = args
                queue.push_right(value)
                messages.append(f"Pushed in right: {value}")
            elif name == "popLeft":
                messages.append(f"Popped from left: {queue.pop_left()}")
            elif name == "popRight":
                messages.append(f"Popped from right: {queue.pop_right()}")
        except IndexError as error:
            messages.append(str(error))
    return messages


def bulls_and_cows(secret: str, guess: str) -> tuple[int, int]:
    """Score a guess: bulls are exact matches, cows are misplaced digits.

    For each position that is not a bull, every occurrence of the secret's
    digit anywhere in the guess counts as a cow.
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"guess has {len(guess)} digits, secret has {len(secret)}"
        )
    bulls = 0
    cows = 0
    for wanted, given in zip(secret, guess):
        if wanted == given:
            bulls += 1
        else:
            cows += guess.count(wanted)
    return bulls, cows


def edit_distance_table(source: str, target: str) -> list[list[int]]:
    """Full Levenshtein table; the last cell is the edit distance."""
    table = [[0] * (len(target) + 1) for _ in range(len(source) + 1)]
    for i in range(len(source) + 1):
        table[i][0] = i
    for j in range(len(target) + 1):
        table[0][j] = j
    for i, a in enumerate(source, start=1):
        for j, b in enumerate(target, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = (
                    min(table[i - 1][j - 1], table[i - 1][j], table[i][j - 1]) + 1
                )
    return table


def edit_script(source: str, target: str) -> str:
    """Edit operations turning ``source`` into ``target``, ending with ``E``.

    Each step is a letter (``I`` insert, ``C`` change, ``D`` delete), the
    character involved and a two-digit position; steps run from the end of
    the strings backwards.
    """
    table = edit_distance_table(source, target)
    i, j = len(source), len(target)
    steps: list[str] = []
    while i or j:
        if i > 0 and j > 0 and source[i - 1] == target[j - 1]:
            i -= 1
            j -= 1
            continue
        if j > 0 and table[i][j] == table[i][j - 1] + 1:
            steps.append(f"I{target[j - 1]}{i + 1:02d}")
            j -= 1
        elif i > 0 and j > 0 and table[i][j] == table[i - 1][j - 1] + 1:
            steps.append(f"C{target[j - 1]}{i:02d}")
            i -= 1
            j -= 1
        else:
            steps.append(f"D{source[i - 1]}{i:02d}")
            i -= 1
    steps.append("E")
    return "".join(steps)


@dataclass(frozen=True)
class Student:
    """A student's roll number, name and marks."""

    roll: int
    name: str
    marks: int


def rank_students(students: Iterable[Student]) -> list[Student]:
    """Order students by marks, highest first, then by roll number."""
    return sorted(students, key=lambda student: (-student.marks, student.roll))


def format_ranking(students: Iterable[Student]) -> str:
    """Ranked students as a table with Roll, Name and Marks columns."""
    lines = ["Roll | Name       | Marks", "-------------------------"]
    lines.extend(
        f"{student.roll:>4} | {student.name:<11}| {student.marks}"
        for student in rank_students(students)
    )
    return "\n".join(lines)