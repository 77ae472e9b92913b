"""Cluster layouts: which worker hosts which executors, and how they connect.

Every topology runs the same word-ranking pipeline: spouts (tasks 1-4) feed
counters (10-13) by fields grouping, counters feed intermediate rankers
(20-23) by fields grouping, and those feed the final ranker (30), which
emits nowhere.  The layouts differ only in how tasks are placed on hosts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from tuplestorm.grouping import fields_grouping, global_grouping, shuffle_grouping
from tuplestorm.tuples import StormTuple


class Grouping(str, Enum):
    """How an executor chooses the destination of the tuples it emits."""

    FIELDS = "fields"
    GLOBAL = "global"
    SHUFFLE = "shuffle"

    @property
    def choose(self) -> Callable[[StormTuple, Sequence[int]], int]:
        return {
            Grouping.FIELDS: fields_grouping,
            Grouping.GLOBAL: global_grouping,
            Grouping.SHUFFLE: shuffle_grouping,
        }[self]


@dataclass(frozen=True)
class ExecutorSpec:
    """One task placed on a worker.

    ``kind`` names the component that runs it (``spout``, ``count``,
    ``rank`` or ``print``).  An empty ``outtasks`` means the task emits
    nowhere.
    """

    kind: str
    taskid: int
    outtasks: tuple[int, ...] = ()
    grouping: Grouping = Grouping.GLOBAL
    spout: bool = False

    def route(self, tup: StormTuple) -> int:
        """Destination task of ``tup``; 0 means drop it."""
        return self.grouping.choose(tup, self.outtasks)


@dataclass(frozen=True)
class WorkerSpec:
    """A worker process: its address and the executors it runs."""

    hostname: str
    port: int
    executors: tuple[ExecutorSpec, ...]
    mac: bytes | None = None


_COUNTERS = (10, 11, 12, 13)
_RANKERS = (20, 21, 22, 23)


def _spout(taskid: int) -> ExecutorSpec:
    return ExecutorSpec("spout", taskid, _COUNTERS, Grouping.FIELDS, spout=True)


def _count(taskid: int) -> ExecutorSpec:
    return ExecutorSpec("count", taskid, _RANKERS, Grouping.FIELDS)


def _rank(taskid: int) -> ExecutorSpec:
    outtasks = () if taskid == 30 else (30,)
    return ExecutorSpec("rank", taskid, outtasks, Grouping.GLOBAL)


def _worker(hostname: str, port: int, *executors: ExecutorSpec,
            mac: bytes | None = None) -> WorkerSpec:
    return WorkerSpec(hostname, port, tuple(executors), mac)


def _balanced(hosts: Sequence[str], ports: Sequence[int],
              macs: Sequence[bytes | None] = (None, None, None)) -> tuple[WorkerSpec, ...]:
    return (
        _worker(hosts[0], ports[0], _spout(3), _count(12), _rank(20), _rank(23), mac=macs[0]),
        _worker(hosts[1], ports[1], _spout(1), _spout(4), _count(11), _count(13), _rank(21),
                mac=macs[1]),
        _worker(hosts[2], ports[2], _spout(2), _count(10), _rank(22), _rank(30), mac=macs[2]),
    )


_MAC_A = bytes.fromhex("020000000001")
_MAC_B = bytes.fromhex("020000000002")
_MAC_C = bytes.fromhex("020000000003")

_TOPOLOGIES: dict[str, tuple[WorkerSpec, ...]] = {
    "local": (
        _worker("127.0.0.1", 7001, *map(_spout, (1, 2, 3, 4))),
        _worker("127.0.0.1", 7002, *map(_count, _COUNTERS)),
        _worker("127.0.0.1", 7003, *map(_rank, _RANKERS)),
        _worker("127.0.0.1", 7004, _rank(30)),
    ),
    "bigfish": _balanced(("198.51.100.106",) * 3, (7001, 7002, 7003)),
    "bigfish_flexnic": _balanced(("192.168.26.22",) * 3, (7001, 7002, 7003)),
    "bigfish_flexnic_dpdk": _balanced(
        ("198.51.100.236", "198.51.100.106", "198.51.100.130"),
        (7001, 7002, 7003),
        (_MAC_A, _MAC_B, _MAC_C),
    ),
    "bigfish_flexnic_dpdk2": (
        _worker("198.51.100.236", 7001, _spout(1), _spout(2), _rank(20), _rank(21), mac=_MAC_A),
        _worker("198.51.100.106", 7002, *map(_count, _COUNTERS), mac=_MAC_B),
        _worker("198.51.100.130", 7003, _spout(3), _spout(4), _rank(22), _rank(23), _rank(30),
                mac=_MAC_C),
    ),
    "swingout_balanced": _balanced(("10.0.0.1", "10.0.0.4", "10.0.0.5"), (7001, 7002, 7003)),
    "swingout_flextcp_balanced": _balanced(
        ("198.51.100.67", "198.51.100.149", "198.51.100.128"), (7001, 7002, 7003)
    ),
    "swingout_mtcp_balanced": _balanced(("10.0.0.4", "10.0.0.1", "10.0.0.5"), (7002, 7002, 7003)),
    "swingout_grouped": (
        _worker("198.51.100.67", 7001, *map(_spout, (1, 2, 3, 4))),
        _worker("198.51.100.106", 7002, *map(_count, _COUNTERS)),
        _worker("198.51.100.236", 7003, *map(_rank, _RANKERS)),
        _worker("198.51.100.236", 7004, _rank(30)),
    ),
}

_SLOW_CLOCK = frozenset({"bigfish", "bigfish_flexnic"})


def _normalise(name: str) -> str:
    key = name.strip().lower().replace("-", "_")
    if key not in _TOPOLOGIES:
        known = ", ".join(sorted(_TOPOLOGIES))
        raise KeyError(f"unknown topology {name!r}; known: {known}")
    return key


def get_topology(name: str) -> tuple[WorkerSpec, ...]:
    """The workers of the named topology, in worker-id order."""
    return _TOPOLOGIES[_normalise(name)]


def task_map(workers: Iterable[WorkerSpec]) -> dict[int, int]:
    """Map every task id to the index of the worker that runs it."""
    mapping: dict[int, int] = {}
    for index, worker in enumerate(workers):
        for executor in worker.executors:
            if executor.taskid in mapping:
                raise ValueError(f"task {executor.taskid} is placed on more than one executor")
            mapping[executor.taskid] = index
    return mapping


def proc_freq(name: str) -> float:
    """Processor clock of the topology's hosts, in cycles per millisecond."""
    return 1600000.0 if _normalise(name) in _SLOW_CLOCK else 2200000.0