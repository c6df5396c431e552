import json
import logging
import pandas as pd
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass
from pathlib import Path
from .errors import QuizError, MissingParameter, NotFound

__version__ = '0.2.0'

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizRecord:
    question: str
    answer: str

    def to_dict(self) -> dict:
        return {
            'question': self.question,
            'answer': self.answer,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'QuizRecord':
        try:
            return cls(question=str(data['question']), answer=str(data['answer']))
        except (KeyError, TypeError) as e:
            raise QuizError(f"Malformed quiz entry: {data!r}") from e

    def __str__(self):
        return f'{self.question} => {self.answer}'


def parse_index(value: Union[int, str, None]) -> int:
    """Turn a user supplied id into a list position.

    None or a blank string means the id was left out entirely; anything else
    that is not a non-negative integer cannot name a quiz.
    """
    if value is None:
        raise MissingParameter()
    if isinstance(value, bool):
        raise NotFound()
    if isinstance(value, int):
        if value < 0:
            raise NotFound()
        return value

    text = str(value).strip()
    if not text:
        raise MissingParameter()
    # isdigit() alone lets through '²' and other digits int() refuses
    if not (text.isascii() and text.isdecimal()):
        raise NotFound()
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int conversion limit
        raise NotFound() from None


class QuizCollection:
    """Ordered collection of quizzes addressed by position.

    Positions are not stable: deleting a quiz moves every later quiz down by one.
    """

    def __init__(self, records: Optional[Iterable[QuizRecord]] = None,
                 path: Optional[Union[str, Path]] = None):
        self.records: List[QuizRecord] = list(records or [])
        self.path: Optional[Path] = Path(path) if path is not None else None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[QuizRecord]:
        return iter(self.records)

    def items(self) -> List[Tuple[int, QuizRecord]]:
        """Snapshot of (index, record) pairs in the current order"""
        return list(enumerate(self.records))

    def _position(self, index) -> int:
        position = parse_index(index)
        if position >= len(self.records):
            raise NotFound()
        return position

    def get(self, index: int) -> QuizRecord:
        return self.records[self._position(index)]

    def add(self, question: str, answer: str) -> QuizRecord:
        record = QuizRecord(question, answer)
        previous = list(self.records)
        self.records.append(record)
        self._autosave(previous)
        logger.debug("Added quiz %d: %s", len(self.records) - 1, record)
        return record

    def update(self, index: int, question: str, answer: str) -> QuizRecord:
        position = self._position(index)
        record = QuizRecord(question, answer)
        previous = list(self.records)
        self.records[position] = record
        self._autosave(previous)
        logger.debug("Updated quiz %s: %s", index, record)
        return record

    def delete(self, index: int) -> QuizRecord:
        position = self._position(index)
        previous = list(self.records)
        record = self.records.pop(position)
        self._autosave(previous)
        logger.debug("Deleted quiz %s: %s", index, record)
        return record

    def _autosave(self, previous: List[QuizRecord]):
        """Save after a change; if the save fails, the change is undone in memory too."""
        if self.path is None:
            return
        try:
            self.save()
        except OSError:
            self.records = previous
            raise

    # persistence

    @classmethod
    def load(cls, path: Union[str, Path],
             defaults: Iterable[Dict[str, str]] = ()) -> 'QuizCollection':
        """Load quizzes from a JSON file, seeding it with defaults if it does not exist."""
        path = Path(path)
        if not path.exists():
            collection = cls([QuizRecord.from_dict(d) for d in defaults], path=path)
            collection.save()
            logger.info("Created %s with %d default quizzes", path, len(collection))
            return collection

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise QuizError(f"Could not read quizzes from {path}: {e}") from e

        if not isinstance(data, list):
            raise QuizError(f"Quiz file {path} must hold a JSON list")

        collection = cls([QuizRecord.from_dict(d) for d in data], path=path)
        logger.info("Loaded %d quizzes from %s", len(collection), path)
        return collection

    def save(self, path: Optional[Union[str, Path]] = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise QuizError("No file to save quizzes to")

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as f:
            json.dump([r.to_dict() for r in self.records], f, indent=2, ensure_ascii=False)
        logger.info("Saved %d quizzes to %s", len(self.records), target)

    # spreadsheets

    def load_from_spreadsheet(self, filepath: Union[str, Path], sheet_name: Optional[str] = None,
                              question_column: Optional[str] = None,
                              answer_column: Optional[str] = None) -> int:
        """Append quizzes from a CSV or Excel/ODS sheet. Returns the number added.

        Without explicit column names the first two columns are taken as
        question and answer.
        """
        filepath = Path(filepath)
        # Cells stay text: no numeric inference ("007"), no NA parsing ("None")
        if filepath.suffix.lower() == '.csv':
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(filepath, sheet_name=sheet_name or 0,
                               dtype=str, keep_default_na=False)

        if question_column is None or answer_column is None:
            if len(df.columns) < 2:
                raise QuizError(f"{filepath} needs a question and an answer column")
            question_column = question_column or df.columns[0]
            answer_column = answer_column or df.columns[1]

        missing = [c for c in (question_column, answer_column) if c not in df.columns]
        if missing:
            raise QuizError(f"{filepath} has no column(s): {', '.join(map(str, missing))}")

        added = []
        for _, row in df.iterrows():
            question = str(row[question_column]).strip()
            answer = str(row[answer_column]).strip()
            if not question or not answer:
                continue
            added.append(QuizRecord(question, answer))

        if added:
            previous = list(self.records)
            self.records.extend(added)
            self._autosave(previous)
        logger.info("Imported %d quizzes from %s", len(added), filepath)
        return len(added)

    def save_to_spreadsheet(self, filepath: Union[str, Path]):
        filepath = Path(filepath)
        df = pd.DataFrame([r.to_dict() for r in self.records], columns=['question', 'answer'])
        if filepath.suffix.lower() == '.csv':
            df.to_csv(filepath, index=False)
        else:
            df.to_excel(filepath, index=False)
        logger.info("Exported %d quizzes to %s", len(df), filepath)
