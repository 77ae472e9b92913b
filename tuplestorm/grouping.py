"""Strategies that choose the destination task of an emitted tuple."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import takewhile

from tuplestorm.hashing import jenkins_hash
from tuplestorm.tuples import StormTuple


def _active_tasks(outtasks: Sequence[int]) -> list[int]:
    """The output tasks up to the first 0, which ends the list."""
    tasks = list(takewhile(lambda task: task != 0, outtasks))
    if not tasks:
        raise ValueError("no output tasks to group onto")
    return tasks


def fields_grouping(tup: StormTuple, outtasks: Sequence[int]) -> int:
    """Send equal keys to the same task, chosen by hashing the first string."""
    tasks = _active_tasks(outtasks)
    return tasks[jenkins_hash(tup.key.encode("utf-8"), 0) % len(tasks)]


def global_grouping(tup: StormTuple, outtasks: Sequence[int]) -> int:
    """Send every tuple to the first output task; 0 (drop) if there is none."""
    return outtasks[0] if outtasks else 0


def shuffle_grouping(tup: StormTuple, outtasks: Sequence[int]) -> int:
    """Send the tuple to an output task chosen at random."""
    tasks = _active_tasks(outtasks)
    return tasks[random.randrange(len(tasks))]