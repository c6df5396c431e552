import logging
from typing import Optional

from . import QuizCollection
from .config import TrainerConfig
from .errors import QuizError, MissingParameter
from .matching import find_similar
from .output import Presenter
from .quiz import IndexSource, RandomIndexSource, play, run_test

logger = logging.getLogger(__name__)


HELP_LINES = [
    "Commands:",
    "  h|help       - Show this help.",
    "  list         - List the existing quizzes.",
    "  show <id>    - Show the question and answer of the given quiz.",
    "  add          - Add a new quiz interactively.",
    "  delete <id>  - Delete the given quiz.",
    "  edit <id>    - Edit the given quiz.",
    "  test <id>    - Try the given quiz.",
    "  p|play       - Play: answer every quiz in random order.",
    "  import <file>- Add quizzes from a CSV or spreadsheet file.",
    "  export <file>- Write all quizzes to a CSV or spreadsheet file.",
    "  credits      - Credits.",
    "  q|quit       - Quit the program.",
]


class QuizShell:
    """Read-eval-print loop over a quiz collection"""

    def __init__(self, store: QuizCollection, presenter: Presenter, prompter,
                 config: Optional[TrainerConfig] = None,
                 index_source: Optional[IndexSource] = None):
        self.store = store
        self.presenter = presenter
        self.prompter = prompter
        self.config = config or TrainerConfig()
        self.index_source = index_source if index_source is not None else RandomIndexSource(self.config.seed)

        self.commands = {
            'h': self.help_cmd, 'help': self.help_cmd,
            'list': self.list_cmd,
            'show': self.show_cmd,
            'add': self.add_cmd,
            'delete': self.delete_cmd,
            'edit': self.edit_cmd,
            'test': self.test_cmd,
            'p': self.play_cmd, 'play': self.play_cmd,
            'import': self.import_cmd,
            'export': self.export_cmd,
            'credits': self.credits_cmd,
            'q': self.quit_cmd, 'quit': self.quit_cmd,
        }

    def run(self):
        """Prompt for commands until quit or end of input."""
        while True:
            try:
                line = self.prompter.ask(self.config.prompt)
                keep_going = self.handle(line)
            except EOFError:
                self.presenter.show()
                break
            except KeyboardInterrupt:
                self.presenter.show()
                continue
            if not keep_going:
                break
        self.presenter.show('Bye!', 'magenta')

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return True

        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else None

        handler = self.commands.get(cmd)
        if handler is None:
            self._unknown_command(parts[0])
            return True

        try:
            return handler(arg) is not False
        except (QuizError, OSError) as e:
            logger.debug("Command %r failed: %s", cmd, e)
            self.presenter.show_error(str(e))
        except KeyboardInterrupt:
            self.presenter.show()
            self.presenter.show_error(f"'{cmd}' interrupted.")
        return True

    def _unknown_command(self, word: str):
        self.presenter.show_error(f"Unknown command: '{word}'")
        suggestions = find_similar(word, set(self.commands), threshold=0.6)
        if suggestions:
            self.presenter.show(f"Did you mean '{suggestions[0][0]}'?")
        self.presenter.show(f"Use {self.presenter.colorize('help', 'green')} to see all commands.")

    def _id(self, value) -> str:
        return self.presenter.colorize(value, 'magenta')

    def _arrow(self) -> str:
        return self.presenter.colorize('=>', 'magenta')

    # commands

    def help_cmd(self, arg=None):
        for line in HELP_LINES:
            self.presenter.show(line)

    def list_cmd(self, arg=None):
        for index, record in self.store.items():
            self.presenter.show(f"  [{self._id(index)}]: {record.question}")

    def show_cmd(self, arg=None):
        record = self.store.get(arg)
        self.presenter.show(f"[{self._id(arg)}]:  {record.question} {self._arrow()} {record.answer}")

    def add_cmd(self, arg=None):
        question = self.prompter.ask(' Enter a question: ')
        answer = self.prompter.ask(' Enter the answer: ')
        self.store.add(question, answer)
        added = self.presenter.colorize('Added', 'magenta')
        self.presenter.show(f" {added}:  {question} {self._arrow()} {answer}")

    def delete_cmd(self, arg=None):
        record = self.store.delete(arg)
        self.presenter.show(f"Deleted quiz [{self._id(arg)}]: {record.question}")

    def edit_cmd(self, arg=None):
        record = self.store.get(arg)

        self.presenter.show(f"  Current: {record.question}")
        question = self.prompter.ask(' Enter a question (empty keeps current): ').strip() or record.question
        self.presenter.show(f"  Current: {record.answer}")
        answer = self.prompter.ask(' Enter the answer (empty keeps current): ').strip() or record.answer

        self.store.update(arg, question, answer)
        self.presenter.show(f"Changed quiz [{self._id(arg)}] to: {question} {self._arrow()} {answer}")

    def test_cmd(self, arg=None):
        run_test(self.store, arg, self.prompter, self.presenter)

    def play_cmd(self, arg=None):
        play(self.store, self.prompter, self.presenter, self.index_source)

    def import_cmd(self, arg=None):
        if not arg:
            raise MissingParameter("Missing file parameter.")
        try:
            added = self.store.load_from_spreadsheet(arg)
        except (OSError, ValueError, ImportError) as e:
            raise QuizError(f"Could not import {arg}: {e}") from e
        self.presenter.show(f"Imported {added} quizzes from {arg}.")

    def export_cmd(self, arg=None):
        if not arg:
            raise MissingParameter("Missing file parameter.")
        try:
            self.store.save_to_spreadsheet(arg)
        except (OSError, ValueError, ImportError) as e:
            raise QuizError(f"Could not export to {arg}: {e}") from e
        self.presenter.show(f"Exported {len(self.store)} quizzes to {arg}.")

    def credits_cmd(self, arg=None):
        self.presenter.show('Authors:')
        for author in self.config.authors:
            self.presenter.show(author, 'green')

    def quit_cmd(self, arg=None):
        return False
