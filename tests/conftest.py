"""
Pytest configuration and shared fixtures for quiztrainer tests.
"""

import io
from typing import Iterable, List, Optional

import pytest

from quiztrainer import QuizCollection, QuizRecord
from quiztrainer.output import Presenter


class StubPrompter:
    """Answers prompts from a script and remembers what was asked."""

    def __init__(self, answers: Iterable[str] = ()):
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def ask(self, prompt_text: str) -> str:
        self.prompts.append(prompt_text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class RecordingPresenter(Presenter):
    """Plain text presenter that keeps every emphasized banner."""

    def __init__(self):
        super().__init__(stream=io.StringIO(), use_color=False)
        self.emphasized: List[tuple] = []
        self.errors: List[str] = []

    def show_emphasized(self, text, style_hint: Optional[str] = None):
        self.emphasized.append((str(text), style_hint))
        super().show_emphasized(text, style_hint)

    def show_error(self, text):
        self.errors.append(str(text))
        super().show_error(text)

    @property
    def output(self) -> str:
        return self.stream.getvalue()


class ScriptedIndexSource:
    """Returns preset positions and records the working set size of every draw."""

    def __init__(self, positions: Iterable[int] = ()):
        self.positions = list(positions)
        self.sizes: List[int] = []

    def __call__(self, n: int) -> int:
        self.sizes.append(n)
        return self.positions.pop(0) if self.positions else 0


@pytest.fixture
def records():
    return [
        QuizRecord("Capital of Italy", "Rome"),
        QuizRecord("Capital of France", "Paris"),
        QuizRecord("Capital of Spain", "Madrid"),
    ]


@pytest.fixture
def store(records):
    return QuizCollection(records)


@pytest.fixture
def empty_store():
    return QuizCollection()


@pytest.fixture
def presenter():
    return RecordingPresenter()
