"""
Quiz sessions: ask one quiz (test) or every quiz in random order (play).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from . import QuizCollection, QuizRecord, parse_index
from .errors import QuizError
from .matching import answers_match

logger = logging.getLogger(__name__)

# Returns a position in [0, n)
IndexSource = Callable[[int], int]


class Outcome(Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


class Phase(Enum):
    AWAIT_ANSWER = 'await_answer'
    WON = 'won'
    LOST = 'lost'
    EMPTY = 'empty'


FINISHED_PHASES = (Phase.WON, Phase.LOST, Phase.EMPTY)


class RandomIndexSource:
    """Uniform position draws backed by a numpy Generator."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def __call__(self, n: int) -> int:
        return int(self.rng.integers(0, n))


def _format_question(question: str) -> str:
    return f"{question}? "


def run_test(store: QuizCollection, index, prompter, presenter) -> Outcome:
    """Ask the quiz at index once and report whether the answer was right.

    Raises MissingParameter when no index was given (before touching the
    store) and NotFound when the index does not name a quiz. Read-only.
    """
    position = parse_index(index)
    record = store.get(position)

    answer = prompter.ask(_format_question(record.question))
    outcome = Outcome.CORRECT if answers_match(answer, record.answer) else Outcome.INCORRECT
    logger.debug("test %d: %s", position, outcome.value)

    presenter.show('Your answer is:')
    if outcome is Outcome.CORRECT:
        presenter.show_emphasized('CORRECT', 'green')
    else:
        presenter.show_emphasized('INCORRECT', 'red')
    return outcome


@dataclass
class PlayState:
    """Working set and score of one play session."""
    remaining: List[Tuple[int, QuizRecord]]
    score: int = 0
    asked: int = 0
    phase: Phase = Phase.AWAIT_ANSWER
    position: Optional[int] = None  # drawn position of the outstanding question
    total: int = field(init=False)

    def __post_init__(self):
        self.total = len(self.remaining)

    @property
    def finished(self) -> bool:
        return self.phase in FINISHED_PHASES

    @property
    def current(self) -> Optional[Tuple[int, QuizRecord]]:
        if self.finished or self.position is None:
            return None
        return self.remaining[self.position]

    @property
    def question(self) -> Optional[str]:
        current = self.current
        return current[1].question if current else None


@dataclass
class PlayStep:
    state: PlayState
    prompt: Optional[str]
    outcome: Optional[Outcome] = None


class PlayEngine:
    """State machine behind play.

    start() snapshots the records and draws the first question; step() feeds
    one answer and returns the next prompt, or None once the session is over.
    The engine does no I/O.
    """

    def __init__(self, index_source: Optional[IndexSource] = None):
        self.index_source = index_source if index_source is not None else RandomIndexSource()

    def start(self, records: Iterable[Tuple[int, QuizRecord]]) -> PlayStep:
        state = PlayState(remaining=list(records))
        if not state.remaining:
            state.phase = Phase.EMPTY
            logger.debug("play: nothing to ask")
            return PlayStep(state, None)
        return self._draw(state, None)

    def step(self, state: PlayState, answer: str) -> PlayStep:
        if state.finished:
            raise QuizError(f"Play session already finished ({state.phase.value})")

        original_index, record = state.current
        if not answers_match(answer, record.answer):
            state.phase = Phase.LOST
            state.position = None
            logger.debug("play: quiz %d answered wrong, score %d", original_index, state.score)
            return PlayStep(state, None, Outcome.INCORRECT)

        state.score += 1
        state.remaining.pop(state.position)
        logger.debug("play: quiz %d answered right, score %d, %d left",
                     original_index, state.score, len(state.remaining))

        if not state.remaining:
            state.phase = Phase.WON
            state.position = None
            return PlayStep(state, None, Outcome.CORRECT)
        return self._draw(state, Outcome.CORRECT)

    def _draw(self, state: PlayState, outcome: Optional[Outcome]) -> PlayStep:
        size = len(state.remaining)
        position = self.index_source(size)
        if not 0 <= position < size:
            raise QuizError(f"Drawn position {position} outside [0, {size})")

        state.position = position
        state.phase = Phase.AWAIT_ANSWER
        state.asked += 1
        logger.debug("play: drew position %d of %d (quiz %d)",
                     position, size, state.remaining[position][0])
        return PlayStep(state, _format_question(state.remaining[position][1].question), outcome)


def play(store: QuizCollection, prompter, presenter,
         index_source: Optional[IndexSource] = None) -> PlayState:
    """Ask every quiz once in random order until one is answered wrong."""
    engine = PlayEngine(index_source)
    step = engine.start(store.items())

    while step.prompt is not None:
        answer = prompter.ask(step.prompt)
        step = engine.step(step.state, answer)
        if step.outcome is Outcome.CORRECT:
            presenter.show(f"CORRECT - {step.state.score} correct so far.", 'green')

    state = step.state
    if state.phase is Phase.WON:
        presenter.show('Nothing left to solve.')
    elif state.phase is Phase.LOST:
        presenter.show('INCORRECT.', 'red')
    else:
        presenter.show('There are no quizzes to play.')

    presenter.show('End of quiz. Score:')
    presenter.show_emphasized(state.score, 'magenta')
    return state
