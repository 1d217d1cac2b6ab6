import pytest

from dstructs.hashtable import HashTable, string_hash


def test_string_hash_values():
    assert string_hash("") == 0
    assert string_hash("a") == ord("a")
    assert string_hash("ab") == 5 * ord("a") + ord("b")


def test_string_hash_stays_in_64_bits():
    assert 0 <= string_hash("x" * 200) < 2**64


def test_main_scenario():
    h = HashTable(10)
    assert len(h) == 0
    h.insert("firstkey", 10)
    assert h.retrieve("firstkey") == 10
    assert "firstkey" in h
    assert h.keys() == ["firstkey"]
    key, value = h.find("firstkey")
    assert "secondkey" not in h
    h.insert("secondkey", value)
    assert "secondkey" in h
    h.modify("secondkey", 20)
    assert h.retrieve("secondkey") == 20
    assert sorted(h.keys()) == ["firstkey", "secondkey"]
    assert len(h) == 2


def test_insert_existing_key_keeps_value():
    h = HashTable(5)
    h.insert("k", 1)
    h.insert("k", 2)
    assert h.retrieve("k") == 1
    assert len(h) == 1


def test_collision_probes_next_bucket():
    h = HashTable(3)
    h.insert(0, "a")
    assert h.search(3) == 1
    h.insert(3, "b")
    assert h.find(3) == (3, "b")
    assert h.find(0) == (0, "a")


def test_full_table_ignores_insert():
    h = HashTable(2)
    h.insert(0, "a")
    h.insert(1, "b")
    h.insert(2, "c")
    assert len(h) == 2
    assert 2 not in h


def test_remove_and_missing_key_errors():
    h = HashTable()
    h.insert("a", 1)
    h.remove("a")
    h.remove("a")
    assert len(h) == 0
    assert h.find("a") is None
    with pytest.raises(KeyError):
        h.retrieve("a")
    with pytest.raises(KeyError):
        h.modify("a", 3)


def test_invalid_divisor():
    with pytest.raises(ValueError):
        HashTable(0)


def test_contains_value_and_pair():
    h = HashTable()
    h.insert("a", 1)
    h.insert("b", 2)
    assert h.contains_value(2)
    assert not h.contains_value(3)
    assert h.contains_pair("a", 1)
    assert not h.contains_pair("a", 2)


def test_keys_values_items_agree():
    h = HashTable(7)
    for i, word in enumerate(["x", "y", "z"]):
        h.insert(word, i)
    assert [k for k, _ in h.items()] == h.keys()
    assert [v for _, v in h.items()] == h.values()
    assert dict(h.items()) == {"x": 0, "y": 1, "z": 2}


def test_resize_doubles_and_keeps_pairs():
    h = HashTable(4)
    for i in range(4):
        h.insert(i, i * i)
    before = dict(h.items())
    h.resize()
    assert h.divisor() == 8
    assert len(h) == 4
    assert dict(h.items()) == before


def test_subset():
    small = HashTable()
    big = HashTable()
    small.insert("a", 1)
    big.insert("a", 1)
    big.insert("b", 2)
    assert small.is_subset(big)
    assert not big.is_subset(small)
    big.modify("a", 5)
    assert not small.is_subset(big)


def test_equality():
    a = HashTable(10)
    b = HashTable(10)
    for table in (a, b):
        table.insert("one", 1)
        table.insert("two", 2)
    assert a == b
    b.modify("two", 3)
    assert not a == b
    b.remove("two")
    assert not a == b