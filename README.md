# tuplestorm

tuplestorm provides the building blocks of a word-count and top-N ranking
stream pipeline: a fixed-size tuple with a binary wire format, the Jenkins
hash used to route tuples, grouping strategies, a set of built-in cluster
layouts, and the spout, ranker and printer components.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tuplestorm.hashing.jenkins_hash(key, initval=0)` – the 32-bit lookup3
  (`hashlittle`) hash of a byte string; a `str` is hashed as its UTF-8
  encoding.
- `tuplestorm.tuples` – `Field` (a `str`/`integer` pair) and `StormTuple`
  (`task`, `fromtask`, `starttime` and up to `MAX_VECTOR` values, padded
  with empty fields). `StormTuple.pack()` encodes a tuple into a record of
  `TUPLE_SIZE` bytes and `decode_tuple(data)` decodes one. Strings longer
  than `MAX_STR - 1` bytes and out-of-range integers raise `ValueError`.
- `tuplestorm.grouping` – `fields_grouping`, `global_grouping` and
  `shuffle_grouping`, each choosing a destination task for a tuple from a
  list of output tasks (a 0 in the list ends it).
- `tuplestorm.topology` – `get_topology(name)` returns the workers of a
  built-in layout (`local`, `bigfish`, `bigfish_flexnic`,
  `bigfish_flexnic_dpdk`, `bigfish_flexnic_dpdk2`, `swingout_balanced`,
  `swingout_flextcp_balanced`, `swingout_mtcp_balanced`,
  `swingout_grouped`) as `WorkerSpec` objects holding `ExecutorSpec`
  objects. `ExecutorSpec.route(tup)` picks the destination task, with 0
  meaning drop. `task_map(workers)` maps each task id to its worker index,
  and `proc_freq(name)` gives the hosts' clock in cycles per millisecond.
- `tuplestorm.bolts` – `Spout` emits the words of a list in turn after an
  initial wait, `Ranker` keeps the top `TOP_N` words by count and emits them
  at most once per second, and `Printer` prints every tuple it receives.
  `load_words(path)` reads a word list (a count on the first line, then one
  word per line) and `format_tuple(tup)` gives the printer's line.

## Example

```python
from tuplestorm.bolts import Ranker
from tuplestorm.grouping import fields_grouping
from tuplestorm.tuples import Field, StormTuple, decode_tuple

tup = StormTuple(values=[Field("nathan")])
assert fields_grouping(tup, [10, 11, 12, 13]) in (10, 11, 12, 13)
assert decode_tuple(tup.pack()) == tup

emitted = []
ranker = Ranker(clock=lambda: 100.0)
ranker.execute(StormTuple(values=[Field("nathan", 3)]), emitted.append)
assert emitted[0].values[0] == Field("nathan", 3)
```

## What it does not do

The package has no commands and no running engine. It does not start
workers or executor threads, keep queues between tasks, open network
connections or shared memory, or forward tuples between hosts; the
components are called directly, with a function that receives what they
emit.