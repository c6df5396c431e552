"""
Console output and input for the quiz shell.
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

# Enables ANSI handling on Windows consoles; a no-op elsewhere and safe to repeat
just_fix_windows_console()


class Presenter:
    """Writes plain, colored and emphasized lines to a stream."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color

    def colorize(self, text, color: Optional[str] = None, bright: bool = False) -> str:
        """Wrap text in a colorama color, e.g. 'green', 'red', 'magenta'."""
        text = str(text)
        if not self.use_color or (color is None and not bright):
            return text

        prefix = ''
        if color is not None:
            prefix += getattr(Fore, color.upper(), '')
        if bright:
            prefix += Style.BRIGHT
        return f"{prefix}{text}{Style.RESET_ALL}"

    def show(self, text='', color: Optional[str] = None):
        print(self.colorize(text, color), file=self.stream)

    def show_emphasized(self, text, style_hint: Optional[str] = None):
        """Show text in a framed banner, colored by style_hint."""
        body = f"  {text}  "
        border = '+' + '-' * len(body) + '+'
        for line in (border, f"|{body}|", border):
            print(self.colorize(line, style_hint, bright=True), file=self.stream)

    def show_error(self, text):
        print(self.colorize(f"Error: {text}", 'red', bright=True), file=self.stream)


class ConsolePrompter:
    """Reads one line of user input per question."""

    def __init__(self, presenter: Presenter):
        self.presenter = presenter

    def ask(self, prompt_text: str) -> str:
        # EOFError propagates; the shell treats it as quit
        return input(self.presenter.colorize(prompt_text, 'red'))
