import pytest
from beehive.engine import (
    PuzzleSession, PuzzleSpec, create_puzzle,
    GuessError, TooShort, InvalidLetter, MissingCenterLetter, NotInDictionary, AlreadyFound,
    WrongLength,
)

WORDS = ["face", "cage", "aced", "badge", "bedded", "gabfaced", "decade"]


@pytest.fixture
def session() -> PuzzleSession:
    return create_puzzle("abcdefg", WORDS)


def _consistent(s: PuzzleSession) -> bool:
    found = [e for e in s.words.values() if e.discovered]
    return (s.current_score() == sum(e.score for e in found)
            and s.current_word_count() == len(found))


# --- guess rules, in precedence order ---
@pytest.mark.parametrize("guess,error", [
    ("bed", TooShort),
    ("xyz", TooShort),          # short beats invalid letter
    ("cagey", InvalidLetter),
    ("fac\u00e9", InvalidLetter),
    ("beds", InvalidLetter),    # invalid letter beats missing center
    ("bedded", MissingCenterLetter),
    ("dace", NotInDictionary),
])
def test_check_guess_error_precedence(session, guess, error):
    with pytest.raises(error):
        session.check_guess(guess)
    assert session.current_word_count() == 0
    assert session.current_score() == 0


def test_check_guess_success_marks_discovered(session):
    r = session.check_guess("badge")
    assert (r.word, r.score, r.is_pangram) == ("badge", 5, False)
    assert r.total_score == 5 and r.word_count == 1
    assert session.words["badge"].discovered is True


def test_check_guess_normalizes_case_and_whitespace(session):
    r = session.check_guess("  CAGE\n")
    assert r.word == "cage" and r.score == 1


def test_pangram_bonus(session):
    r = session.check_guess("gabfaced")
    assert r.is_pangram is True
    assert r.score == 15
    assert session.has_pangram is True


def test_already_found_does_not_double_count(session):
    session.check_guess("decade")
    before = (session.current_score(), session.current_word_count())
    with pytest.raises(AlreadyFound) as ei:
        session.check_guess("decade")
    assert str(ei.value) == "Already found."
    assert (session.current_score(), session.current_word_count()) == before


def test_counters_track_discovered_flags(session):
    for w in ["face", "cage", "decade"]:
        session.check_guess(w)
        assert _consistent(session)
    assert session.current_word_count() == 3
    assert session.current_score() == 1 + 1 + 6
    assert [e.word for e in session.found_words()] == ["face", "cage", "decade"]
    assert session.remaining_word_count() == session.total_word_count() - 3


def test_solve_all_discovers_everything(session):
    session.check_guess("cage")
    r = session.solve_all()

    assert [e.word for e in r.entries] == ["face", "cage", "aced", "badge", "gabfaced", "decade"]
    assert r.word_count == 6
    assert r.total_score == 1 + 1 + 1 + 5 + 15 + 6
    assert session.current_score() == r.total_score
    assert session.current_word_count() == r.word_count
    assert session.is_solved()
    assert _consistent(session)

    for w in r.entries:
        with pytest.raises(AlreadyFound):
            session.check_guess(w.word)


def test_guess_errors_share_base_class(session):
    with pytest.raises(GuessError):
        session.check_guess("no")


def test_create_puzzle_rejects_bad_puzzle():
    with pytest.raises(WrongLength):
        create_puzzle("abc", WORDS)


def test_create_puzzle_missing_dictionary_is_soft(tmp_path, caplog):
    s = create_puzzle("abcdefg", tmp_path / "missing.txt")
    assert s.spec == PuzzleSpec.create("abcdefg")
    assert s.total_word_count() == 0
    assert s.has_pangram is False
    assert "missing.txt" in caplog.text
    with pytest.raises(NotInDictionary):
        s.check_guess("cage")


def test_create_puzzle_reads_dictionary_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("face cage\naced  badge\n\nbedded\n", encoding="utf-8")
    s = create_puzzle("ABCDEFG", p)
    assert list(s.words) == ["face", "cage", "aced", "badge"]


def test_new_puzzle_does_not_share_state():
    first = create_puzzle("abcdefg", WORDS)
    first.check_guess("cage")
    second = create_puzzle("abcdefg", WORDS)
    assert second.current_word_count() == 0
    assert first.current_word_count() == 1


def test_check_guess_rejects_non_ascii_lookalike():
    s = create_puzzle("kabcdef", ["back"])
    with pytest.raises(InvalidLetter):
        s.check_guess("bac\u212A")
    assert s.current_word_count() == 0
    assert s.check_guess("BACK").word == "back"


def test_create_puzzle_accepts_str_path(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("cage badge\n", encoding="utf-8")
    s = create_puzzle("abcdefg", str(p))
    assert list(s.words) == ["cage", "badge"]
