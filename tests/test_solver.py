import pytest
from packages.solver import Solver
from packages.engine import score, MalformedFeedback, DictionaryUnavailable

GUESSES = ["crane", "sassy", "geese", "llama", "mummy", "eerie", "pious"]


@pytest.fixture(scope="module")
def bundled():
    return Solver()


@pytest.fixture
def solver(bundled):
    bundled.reset()
    return bundled


def _secrets(solver, step=150):
    return sorted(solver.index.words)[::step]


def test_construct_from_bundled_list(solver):
    assert solver.word_length == 5
    assert solver.remaining_count() == len(solver.index) == 2309
    assert len(solver) == 2309


def test_construct_from_path(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nslate\ntrain\n", encoding="utf-8")
    s = Solver(5, p)
    assert s.remaining_count() == 3


def test_construct_without_dictionary_fails(tmp_path):
    with pytest.raises(DictionaryUnavailable):
        Solver(5, tmp_path / "missing.txt")


def test_construct_rejects_bad_word_length():
    with pytest.raises(ValueError):
        Solver(0)


def test_feedback_round_trip_keeps_secret(solver):
    for secret in _secrets(solver):
        solver.reset()
        for g in GUESSES:
            solver.update(g, score(g, secret))
            assert secret in solver.candidates, (secret, solver.history)


def test_top_guess_self_play_keeps_secret(solver):
    for secret in _secrets(solver, step=300):
        solver.reset()
        for _ in range(6):
            g = next(iter(solver.guess(max_results=1)))
            solver.update(g, score(g, secret))
            assert secret in solver.candidates
            if g == secret:
                break


def test_updates_never_grow_candidates(solver):
    sizes = [solver.remaining_count()]
    for g, patt in [("slate", "00100"), ("crane", "00200"), ("pious", "01000")]:
        sizes.append(solver.update(g, patt))
    assert sizes == sorted(sizes, reverse=True)


def test_same_feedback_same_result(bundled):
    a = Solver.from_words(sorted(bundled.index.words))
    b = Solver.from_words(sorted(bundled.index.words, reverse=True))
    for g, patt in [("slate", "01020"), ("crane", "00100")]:
        a.update(g, patt)
        b.update(g.upper(), patt)
    assert a.candidates == b.candidates
    assert a.guess(max_results=10) == b.guess(max_results=10)


def test_reset_restores_initial_ranking(solver):
    first = solver.guess(max_results=10)
    solver.update("slate", "00000")
    solver.update("crony", "01000")
    assert solver.remaining_count() < len(solver.index)
    assert solver.reset() == len(solver.index)
    assert solver.guess(max_results=10) == first
    assert solver.history == []


def test_scores_track_candidates(solver):
    def check():
        assert set(solver.frequency_scores) == solver.candidates
        assert set(solver.position_scores) == solver.candidates

    check()
    solver.update("slate", "01000")
    check()
    solver.update("crony", "00010")
    check()
    solver.reset()
    check()


def test_contradictory_feedback_empties_without_error(solver):
    solver.update("crane", "22222")
    assert solver.remaining_count() == 1
    solver.update("crane", "00000")
    assert solver.remaining_count() == 0
    assert solver.guess() == {}
    assert dict(solver.frequency_scores) == {} and dict(solver.position_scores) == {}
    assert solver.reset() == 2309


@pytest.mark.parametrize("guess,patt", [
    ("cran", "00000"), ("crane", "0000"), ("cr4ne", "00000"), ("crane", "00300"),
])
def test_malformed_feedback_leaves_state_alone(solver, guess, patt):
    before = solver.candidates
    with pytest.raises(MalformedFeedback):
        solver.update(guess, patt)
    assert solver.candidates is before
    assert solver.history == []


def test_history_records_lowercased_guesses(solver):
    solver.update("SLATE", "00000")
    solver.update("crony", "00000")
    assert solver.history == [("slate", "00000"), ("crony", "00000")]


def test_guess_orders_by_both_scores(solver):
    top = solver.guess(max_results=20)
    assert len(top) == 20
    keys = [(-f, -p, w) for w, (f, p) in top.items()]
    assert keys == sorted(keys)
    # nothing outside the top-K beats the last entry
    last = keys[-1]
    assert all((-solver.frequency_scores[w], -solver.position_scores[w], w) >= last
               for w in solver.candidates if w not in top)


def test_guess_excludes_letters(solver):
    top = solver.guess(exclude="EA", max_results=8)
    assert len(top) == 8
    assert all("e" not in w and "a" not in w for w in top)


def test_guess_returns_what_is_left(solver):
    solver.update("crane", "22222")
    assert list(solver.guess(max_results=5)) == ["crane"]
    assert solver.guess(exclude="c") == {}
    assert solver.guess(max_results=0) == {}
