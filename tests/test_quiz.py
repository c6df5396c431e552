"""Tests for the test and play quiz sessions."""
import pytest

from quiztrainer import QuizCollection, QuizRecord
from quiztrainer.errors import MissingParameter, NotFound, QuizError
from quiztrainer.quiz import (
    Outcome, Phase, PlayEngine, RandomIndexSource, play, run_test,
)
from conftest import ScriptedIndexSource, StubPrompter


# run_test

def test_run_test_correct_ignores_case_and_whitespace(store, presenter):
    prompter = StubPrompter(["  MADRID  "])
    assert run_test(store, 2, prompter, presenter) is Outcome.CORRECT
    assert prompter.prompts == ["Capital of Spain? "]
    assert presenter.emphasized == [("CORRECT", "green")]


def test_run_test_incorrect_gets_one_attempt(store, presenter):
    prompter = StubPrompter(["Milan", "Rome"])
    assert run_test(store, "0", prompter, presenter) is Outcome.INCORRECT
    assert len(prompter.prompts) == 1
    assert presenter.emphasized == [("INCORRECT", "red")]


@pytest.mark.parametrize("index", [None, "", "   "])
def test_run_test_missing_index(index, presenter):
    class ExplodingStore:
        def get(self, index):
            raise AssertionError("store must not be touched")

    with pytest.raises(MissingParameter):
        run_test(ExplodingStore(), index, StubPrompter(["x"]), presenter)


@pytest.mark.parametrize("index", [3, "7", "-1", "abc", "1.5"])
def test_run_test_not_found(store, records, presenter, index):
    prompter = StubPrompter(["Rome"])
    with pytest.raises(NotFound):
        run_test(store, index, prompter, presenter)
    assert prompter.prompts == []
    assert store.records == records


# PlayEngine

def test_engine_empty_store_finishes_immediately():
    source = ScriptedIndexSource()
    step = PlayEngine(source).start([])
    assert step.prompt is None
    assert step.state.phase is Phase.EMPTY
    assert step.state.score == 0
    assert step.state.finished
    assert source.sizes == []


def test_engine_draws_by_position_and_shrinks(records):
    source = ScriptedIndexSource([1, 1, 0])
    engine = PlayEngine(source)

    step = engine.start(enumerate(records))
    assert step.prompt == "Capital of France? "

    step = engine.step(step.state, "paris")
    assert step.outcome is Outcome.CORRECT
    assert step.prompt == "Capital of Spain? "

    step = engine.step(step.state, "Madrid")
    assert step.prompt == "Capital of Italy? "

    step = engine.step(step.state, "ROME ")
    assert step.prompt is None
    assert step.state.phase is Phase.WON
    assert step.state.score == 3
    assert step.state.asked == 3
    assert source.sizes == [3, 2, 1]


def test_engine_wrong_answer_ends_session(records):
    engine = PlayEngine(ScriptedIndexSource([0, 0]))
    step = engine.start(enumerate(records))
    step = engine.step(step.state, "Rome")
    step = engine.step(step.state, "Barcelona")
    assert step.outcome is Outcome.INCORRECT
    assert step.prompt is None
    assert step.state.phase is Phase.LOST
    assert step.state.score == 1
    assert step.state.asked == 2


def test_engine_step_after_finish_raises(records):
    engine = PlayEngine(ScriptedIndexSource([0]))
    step = engine.start(enumerate(records))
    step = engine.step(step.state, "wrong")
    with pytest.raises(QuizError):
        engine.step(step.state, "Rome")


def test_engine_rejects_out_of_range_draw(records):
    with pytest.raises(QuizError):
        PlayEngine(lambda n: n).start(enumerate(records))


def test_engine_duplicate_records_each_asked_once():
    dupes = [QuizRecord("Two plus two", "4")] * 3
    engine = PlayEngine(ScriptedIndexSource([2, 0, 0]))
    step = engine.start(enumerate(dupes))
    drawn = []
    while step.prompt is not None:
        drawn.append(step.state.current[0])
        step = engine.step(step.state, "4")
    assert sorted(drawn) == [0, 1, 2]
    assert step.state.score == 3


def test_random_index_source_is_seedable():
    a = RandomIndexSource(seed=42)
    b = RandomIndexSource(seed=42)
    draws = [a(5) for _ in range(20)]
    assert draws == [b(5) for _ in range(20)]
    assert all(0 <= d < 5 for d in draws)


# play driver

def test_play_empty_store_asks_nothing(empty_store, presenter):
    prompter = StubPrompter(["anything"])
    state = play(empty_store, prompter, presenter, ScriptedIndexSource())
    assert state.score == 0
    assert state.phase is Phase.EMPTY
    assert prompter.prompts == []
    assert "There are no quizzes to play." in presenter.output
    assert presenter.emphasized == [("0", "magenta")]


def test_play_first_answer_wrong(store, presenter):
    prompter = StubPrompter(["Lyon", "Rome", "Paris"])
    state = play(store, prompter, presenter, ScriptedIndexSource([1]))
    assert len(prompter.prompts) == 1
    assert state.score == 0
    assert state.phase is Phase.LOST
    assert "INCORRECT." in presenter.output
    assert presenter.emphasized == [("0", "magenta")]


def test_play_all_correct_asks_each_quiz_once(store, records, presenter):
    answers = {r.question + "? ": r.answer.upper() for r in records}

    class AnswerKey(StubPrompter):
        def ask(self, prompt_text):
            self.prompts.append(prompt_text)
            return answers[prompt_text]

    prompter = AnswerKey()
    state = play(store, prompter, presenter, RandomIndexSource(seed=7))

    assert sorted(prompter.prompts) == sorted(answers)
    assert state.score == len(records)
    assert state.phase is Phase.WON
    assert "Nothing left to solve." in presenter.output
    assert "CORRECT - 3 correct so far." in presenter.output
    assert presenter.emphasized == [("3", "magenta")]


def test_play_does_not_touch_store(store, records, presenter):
    play(store, StubPrompter(["Rome", "Paris", "Madrid"]), presenter, ScriptedIndexSource([0, 0, 0]))
    assert store.records == records


@pytest.mark.parametrize("seed", range(10))
def test_play_score_bounded(seed, presenter):
    collection = QuizCollection([QuizRecord(f"q{i}", f"a{i}") for i in range(6)])
    key = {f"q{i}? ": f"a{i}" for i in range(6)}

    class SometimesWrong(StubPrompter):
        def ask(self, prompt_text):
            self.prompts.append(prompt_text)
            return key[prompt_text] if len(self.prompts) < 4 else "nope"

    prompter = SometimesWrong()
    state = play(collection, prompter, presenter, RandomIndexSource(seed=seed))
    assert state.score <= state.asked <= len(collection)
    assert len(set(prompter.prompts)) == len(prompter.prompts)
