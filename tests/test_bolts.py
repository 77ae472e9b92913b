import pytest

from tuplestorm.bolts import Printer, Ranker, Spout, format_tuple, load_words
from tuplestorm.tuples import Field, StormTuple


def _write(tmp_path, text):
    path = tmp_path / "unames-1.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_words_reads_counted_lines(tmp_path):
    path = _write(tmp_path, "3\nalice\nbob\ncarol\n")
    assert load_words(path) == ["alice", "bob", "carol"]


def test_load_words_ignores_lines_past_count(tmp_path):
    path = _write(tmp_path, "1\nalice\nbob\n")
    assert load_words(path) == ["alice"]


def test_load_words_too_few_lines(tmp_path):
    path = _write(tmp_path, "3\nalice\n")
    with pytest.raises(ValueError):
        load_words(path)


def test_load_words_missing_final_newline(tmp_path):
    path = _write(tmp_path, "1\nalice")
    with pytest.raises(ValueError):
        load_words(path)


def test_load_words_bad_header(tmp_path):
    path = _write(tmp_path, "many\nalice\n")
    with pytest.raises(ValueError):
        load_words(path)


def test_load_words_word_too_long(tmp_path):
    path = _write(tmp_path, "1\n" + "x" * 31 + "\n")
    with pytest.raises(ValueError):
        load_words(path)


def test_load_words_longest_allowed(tmp_path):
    word = "x" * 30
    path = _write(tmp_path, f"1\n{word}\n")
    assert load_words(path) == [word]


def test_format_tuple_lists_every_value():
    tup = StormTuple(values=[Field("a", 1)])
    assert format_tuple(tup) == "Printer got: ['a', 1], ['', 0], ['', 0], ['', 0], ['', 0], "


def test_printer_prints_line(capsys):
    tup = StormTuple(values=[Field("w", 2)])
    Printer().execute(tup, lambda t: None)
    assert capsys.readouterr().out == format_tuple(tup) + "\n"


def test_spout_cycles_through_words():
    out = []
    spout = Spout(["x", "y"], wait_time=0)
    for _ in range(3):
        spout.execute(None, out.append)
    assert [t.key for t in out] == ["x", "y", "x"]
    assert all(t.values[0].integer == 0 for t in out)


def test_spout_rejects_input_tuple():
    with pytest.raises(ValueError):
        Spout(["x"], wait_time=0).execute(StormTuple(task=1), lambda t: None)


def test_spout_needs_words():
    with pytest.raises(ValueError):
        Spout([], wait_time=0)


class _Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def test_ranker_sorts_and_emits_first_time():
    out = []
    ranker = Ranker(clock=_Clock(100.0))
    ranker.execute(StormTuple(values=[Field("a", 3), Field("b", 5)]), out.append)
    assert len(out) == 1
    emitted = out[0].values
    assert [(v.str, v.integer) for v in emitted[:2]] == [("b", 5), ("a", 3)]
    assert all(v.integer == 0 for v in emitted[2:])


def test_ranker_emits_at_most_once_per_second():
    out = []
    clock = _Clock(100.0)
    ranker = Ranker(clock=clock)
    ranker.execute(StormTuple(values=[Field("a", 3)]), out.append)
    clock.now = 100.7
    ranker.execute(StormTuple(values=[Field("b", 4)]), out.append)
    assert len(out) == 1
    clock.now = 101.0
    ranker.execute(StormTuple(values=[Field("c", 1)]), out.append)
    assert len(out) == 2
    assert [v.str for v in out[1].values[:3]] == ["b", "a", "c"]


def test_ranker_updates_existing_word():
    ranker = Ranker(clock=_Clock(100.0))
    ranker.execute(StormTuple(values=[Field("a", 3), Field("b", 5)]), lambda t: None)
    ranker.execute(StormTuple(values=[Field("a", 9)]), lambda t: None)
    top = ranker.rankings
    assert [(v.str, v.integer) for v in top[:2]] == [("a", 9), ("b", 5)]
    assert sum(v.str == "a" for v in top) == 1


def test_ranker_stops_at_zero_count():
    ranker = Ranker(clock=_Clock(100.0))
    ranker.execute(StormTuple(values=[Field("a", 2), Field("z", 0), Field("b", 7)]),
                   lambda t: None)
    assert [v.str for v in ranker.rankings if v.integer] == ["a"]


def test_ranker_keeps_only_top_entries():
    ranker = Ranker(clock=_Clock(100.0))
    words = [Field(f"w{n}", n) for n in range(1, 6)]
    ranker.execute(StormTuple(values=words), lambda t: None)
    ranker.execute(StormTuple(values=[Field("big", 50)]), lambda t: None)
    top = ranker.rankings
    assert len(top) == 5
    assert top[0].str == "big"
    assert [v.integer for v in top] == sorted((v.integer for v in top), reverse=True)