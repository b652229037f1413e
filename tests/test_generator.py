import random
from collections import Counter

import pytest
from beehive.engine import PuzzleSpec, SourceUnavailable, RepeatedLetter
from beehive.generator import (
    DEFAULT_PUZZLE, generate_random_puzzle, random_puzzle_or_default,
    shuffle_letters, shuffle_spec, iter_candidates, is_good_candidate,
)
from beehive.engine import load_words


# --- shuffle ---
@pytest.mark.parametrize("seed", range(10))
def test_shuffle_keeps_center_and_letters(seed):
    board = "abcdefg"
    out = shuffle_letters(board, random.Random(seed))
    assert out[0] == "a"
    assert Counter(out) == Counter(board)


def test_shuffle_is_seed_deterministic():
    assert shuffle_letters("abcdefg", random.Random(3)) == shuffle_letters("abcdefg", random.Random(3))


def test_shuffle_spec_stays_valid():
    spec = PuzzleSpec.create("abcdefg")
    out = shuffle_spec(spec, random.Random(1))
    assert out.center == spec.center
    assert out.letter_set == spec.letter_set


# --- random puzzle ---
def test_generate_random_puzzle_from_file(tmp_path):
    p = tmp_path / "cands.txt"
    p.write_text("abcdefg 30 1;acegiop 25 2\nahijklm\n\n", encoding="utf-8")
    seen = {str(generate_random_puzzle(p, random.Random(s))) for s in range(50)}
    assert seen == {"abcdefg", "acegiop", "ahijklm"}


def test_generate_random_puzzle_from_records():
    spec = generate_random_puzzle(["bcdefga 12"], random.Random(0))
    assert spec == PuzzleSpec.create("bcdefga")


def test_generate_random_puzzle_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        generate_random_puzzle(tmp_path / "nope.txt")


def test_generate_random_puzzle_empty_source():
    with pytest.raises(SourceUnavailable):
        generate_random_puzzle([])


def test_generate_random_puzzle_invalid_record():
    with pytest.raises(RepeatedLetter):
        generate_random_puzzle(["aabcdef"])


def test_random_puzzle_or_default_falls_back(tmp_path):
    spec = random_puzzle_or_default(tmp_path / "nope.txt")
    assert str(spec) == DEFAULT_PUZZLE


# --- candidate sampling ---
DICT = ["gabfaced", "cage", "aced", "badge", "face", "decade", "bead", "fade"]


def test_is_good_candidate_bounds():
    table = load_words(PuzzleSpec.create("abcdefg"), DICT)
    assert is_good_candidate(table, min_words=1, max_words=100) is True
    assert is_good_candidate(table, min_words=50, max_words=100) is False


def test_iter_candidates_finds_pangram_sets():
    found = list(iter_candidates(DICT, random.Random(0), center="a",
                                 min_words=1, max_words=100, max_tries=50))
    assert len(found) == 1
    c = found[0]
    assert c.spec.center == "a"
    assert c.spec.letter_set == frozenset("abcdefg")
    assert c.pangrams == 1
    assert c.record().split()[0] == str(c.spec)


def test_iter_candidates_respects_exclude():
    found = list(iter_candidates(DICT, random.Random(0), center="a",
                                 min_words=1, max_words=100, exclude=["agfedcb"], max_tries=50))
    assert found == []


def test_in_memory_records_split_like_files(tmp_path):
    text = "abcdefg 30 1;acegiop 25 2\nahijklm\n"
    p = tmp_path / "cands.txt"
    p.write_text(text, encoding="utf-8")
    from_file = {str(generate_random_puzzle(p, random.Random(s))) for s in range(50)}
    from_memory = {str(generate_random_puzzle([text], random.Random(s))) for s in range(50)}
    assert from_memory == from_file == {"abcdefg", "acegiop", "ahijklm"}
