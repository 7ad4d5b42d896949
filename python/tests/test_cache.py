"""Level cache: at-most-once inserts, copies, and JSON export."""

from __future__ import annotations

import json
import random
import threading
from pathlib import Path

import pytest

from ballsort.engine.gamegenerator import LevelCache
from ballsort.errors import MalformedBoardError
from ballsort.models.board import Board

A, B = "red", "blue"


def test_get_generates_once_and_returns_copies() -> None:
    cache = LevelCache(rng=random.Random(1))
    first = cache.get(5)
    first.tubes.append([])
    second = cache.get(5)
    assert second != first
    assert 5 in cache
    assert len(cache) == 1


def test_put_keeps_first_board() -> None:
    cache = LevelCache()
    original = Board.from_tubes([[A, B], [B, A], [], []])
    stored = cache.put(3, original)
    replacement = cache.put(3, Board.from_tubes([[B, A], [A, B], [], []]))
    assert stored == original
    assert replacement == original
    assert cache.get(3) == original


def test_concurrent_puts_store_single_entry() -> None:
    cache = LevelCache()
    boards = [Board.from_tubes([[A] * (i % 4 + 1), []]) for i in range(8)]
    results: list[Board] = []

    def worker(board: Board) -> None:
        results.append(cache.put(1, board))

    threads = [threading.Thread(target=worker, args=(b,)) for b in boards]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(cache) == 1
    assert all(r == results[0] for r in results)


def test_pre_generate_and_clear() -> None:
    cache = LevelCache(rng=random.Random(4))
    cache.pre_generate(10, 5)
    assert cache.levels() == [10, 11, 12, 13, 14]
    cache.clear()
    assert len(cache) == 0
    assert 10 not in cache


def test_seeded_caches_agree() -> None:
    a = LevelCache(rng=random.Random(8))
    b = LevelCache(rng=random.Random(8))
    a.pre_generate(1, 5)
    b.pre_generate(1, 5)
    assert a.to_dict() == b.to_dict()


def test_export_and_load_round_trip(tmp_path: Path) -> None:
    cache = LevelCache(rng=random.Random(2))
    cache.pre_generate(1, 3)
    path = tmp_path / "out" / "levels.json"
    cache.export_json(path)

    data = json.loads(path.read_text())
    assert sorted(data) == ["1", "2", "3"]
    assert isinstance(data["1"]["tubes"], list)

    loaded = LevelCache.load_json(path)
    assert loaded.levels() == [1, 2, 3]
    for level in (1, 2, 3):
        assert loaded.get(level) == cache.get(level)


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "levels.json"
    path.write_text("[]")
    with pytest.raises(MalformedBoardError):
        LevelCache.load_json(path)


@pytest.mark.parametrize(
    ("data", "level"),
    [
        ({"x": {"tubes": []}}, "x"),
        ({"1": []}, "1"),
        ({"1": {}}, "1"),
        ({"1": {"tubes": 5}}, "1"),
        ({"2": {"tubes": ["red"]}}, "2"),
        ({"3": {"tubes": [[A, A, A, A, A]]}}, "3"),
    ],
    ids=["bad-key", "entry-not-mapping", "missing-tubes", "tubes-not-list", "tube-is-string", "overfull-tube"],
)
def test_load_rejects_bad_entries(tmp_path: Path, data: dict, level: str) -> None:
    path = tmp_path / "levels.json"
    path.write_text(json.dumps(data))
    with pytest.raises(MalformedBoardError) as excinfo:
        LevelCache.load_json(path)
    assert excinfo.value.context["level"] == level
    assert excinfo.value.context["path"] == str(path)
