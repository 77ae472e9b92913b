"""The components that run inside executors: spout, ranker and printer."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterable
from typing import Optional

from tuplestorm.tuples import MAX_STR, Field, StormTuple

TOP_N = 5
EMIT_INTERVAL = 1
WAIT_TIME = 2

Emit = Callable[[StormTuple], None]


def load_words(path: str | os.PathLike[str]) -> list[str]:
    """Read a word list: a count on the first line, then one word per line.

    Every word line must end in a newline and fit, newline included, in
    ``MAX_STR - 1`` bytes.
    """
    with open(path, encoding="utf-8") as fh:
        header = fh.readline()
        try:
            count = int(header)
        except ValueError as exc:
            raise ValueError(f"{path}: first line must hold the number of words") from exc
        if count < 0:
            raise ValueError(f"{path}: negative word count {count}")
        words = []
        for number in range(count):
            line = fh.readline()
            if not line:
                raise ValueError(f"{path}: expected {count} words, found {number}")
            if not line.endswith("\n") or len(line.encode("utf-8")) > MAX_STR - 1:
                raise ValueError(
                    f"{path}: word {number + 1} is not a complete line "
                    f"of at most {MAX_STR - 2} bytes"
                )
            words.append(line[:-1])
    return words


def format_tuple(tup: StormTuple) -> str:
    """The printer's line for ``tup``, without the trailing newline."""
    pairs = "".join(f"['{value.str}', {value.integer}], " for value in tup.values)
    return "Printer got: " + pairs


class Spout:
    """Emits the words of a list one after another, wrapping around.

    Before its first emission it waits ``wait_time`` seconds.
    """

    def __init__(self, words: Iterable[str], wait_time: float = WAIT_TIME) -> None:
        self.words = list(words)
        if not self.words:
            raise ValueError("a spout needs at least one word")
        self.wait_time = wait_time
        self._started = False
        self._next = 0

    def execute(self, tup: Optional[StormTuple], emit: Emit) -> None:
        if tup is not None:
            raise ValueError("a spout takes no input tuple")
        if not self._started:
            time.sleep(self.wait_time)
            self._started = True
        emit(StormTuple(values=[Field(self.words[self._next])]))
        self._next = (self._next + 1) % len(self.words)


class Ranker:
    """Keeps the top words by count and emits them at most once a second.

    Each incoming value updates the word's count (or takes the spare last
    slot when the word is not ranked yet); values end at the first zero
    count.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lasttime = 0
        self._rankings = [Field() for _ in range(TOP_N + 1)]

    @property
    def rankings(self) -> list[Field]:
        """Copies of the current top entries, best first."""
        return [Field(entry.str, entry.integer) for entry in self._rankings[:TOP_N]]

    def execute(self, tup: Optional[StormTuple], emit: Emit) -> None:
        if tup is None:
            raise ValueError("a ranker needs an input tuple")
        for value in tup.values:
            if value.integer == 0:
                break
            entry = next((e for e in self._rankings if e.str == value.str), None)
            if entry is None:
                entry = self._rankings[TOP_N]
                entry.str = value.str
            entry.integer = value.integer
            self._rankings.sort(key=lambda e: e.integer, reverse=True)

        now = int(self._clock())
        if now >= self._lasttime + EMIT_INTERVAL:
            self._lasttime = now
            emit(StormTuple(values=self.rankings))


class Printer:
    """Prints every tuple it receives."""

    def execute(self, tup: Optional[StormTuple], emit: Emit) -> None:
        if tup is None:
            raise ValueError("a printer needs an input tuple")
        print(format_tuple(tup))