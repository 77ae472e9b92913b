import pytest

from tuplestorm.hashing import jenkins_hash

PHRASE = b"Four score and seven years ago"


def test_empty_key_returns_seed_without_mixing():
    assert jenkins_hash(b"", 0) == 0xDEADBEEF


def test_empty_key_adds_initval_to_seed():
    assert jenkins_hash(b"", 5) == 0xDEADBEEF + 5


def test_reference_phrase_initval_zero():
    assert jenkins_hash(PHRASE, 0) == 0x17770551


def test_reference_phrase_initval_one():
    assert jenkins_hash(PHRASE, 1) == 0xCD628161


def test_str_hashes_as_utf8_bytes():
    assert jenkins_hash("nathan", 0) == jenkins_hash(b"nathan", 0)
    assert jenkins_hash("gölda", 0) == jenkins_hash("gölda".encode("utf-8"), 0)


def test_bytearray_and_memoryview_match_bytes():
    expected = jenkins_hash(PHRASE, 7)
    assert jenkins_hash(bytearray(PHRASE), 7) == expected
    assert jenkins_hash(memoryview(PHRASE), 7) == expected


def test_default_initval_is_zero():
    assert jenkins_hash(PHRASE) == jenkins_hash(PHRASE, 0)


@pytest.mark.parametrize("length", [1, 3, 4, 5, 11, 12, 13, 23, 24, 25, 100])
def test_result_fits_in_32_bits_for_block_boundaries(length):
    value = jenkins_hash(bytes(range(length)), 0)
    assert 0 <= value <= 0xFFFFFFFF


@pytest.mark.parametrize("length", [1, 12, 13, 24, 25])
def test_trailing_zero_byte_changes_hash(length):
    data = b"\x01" * length
    assert jenkins_hash(data, 0) != jenkins_hash(data + b"\x00", 0)


def test_initval_changes_hash():
    assert jenkins_hash(PHRASE, 0) != jenkins_hash(PHRASE, 1)


def test_initval_is_taken_modulo_two_to_the_32():
    assert jenkins_hash(PHRASE, 2**32 + 3) == jenkins_hash(PHRASE, 3)
    assert jenkins_hash(PHRASE, -1) == jenkins_hash(PHRASE, 0xFFFFFFFF)


def test_deterministic():
    words = ["nathan", "jackson", "golda", "bertels"]
    first = [jenkins_hash(w, 0) for w in words]
    second = [jenkins_hash(w, 0) for w in words]
    assert first == second
    assert len(set(first)) == len(words)


def test_rejects_non_bytes_key():
    with pytest.raises(TypeError):
        jenkins_hash(12345, 0)