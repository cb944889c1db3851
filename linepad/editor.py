"""Interactive, menu-driven front end for editing a :class:`Document`."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from linepad.document import Document

__all__ = ["TextEditor", "main"]

_MENU = (
    "--- Simple Text Editor ---",
    "1. Insert Line",
    "2. Delete Line",
    "3. Edit Line",
    "4. Display Document",
    "5. Search Word",
    "6. Save to File",
    "7. Load from File",
    "8. Exit",
    "Enter your choice: ",
)

_EXIT_CHOICE = 8


class TextEditor:
    """Drives a :class:`Document` through a numbered text menu.

    Input is read line by line from ``infile`` and all prompts and results
    are written to ``outfile``. Running out of input raises ``EOFError``
    from the prompting methods; :meth:`start` treats it as a request to quit.
    """

    def __init__(self, infile: TextIO | None = None, outfile: TextIO | None = None) -> None:
        self._in = infile if infile is not None else sys.stdin
        self._out = outfile if outfile is not None else sys.stdout
        self.document = Document()
        self.file_name = ""

    def _say(self, *parts: object) -> None:
        print(*parts, sep="", file=self._out)

    def _read_line(self) -> str:
        raw = self._in.readline()
        if not raw:
            raise EOFError("no more input")
        return raw.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self._read_line()

    def main_menu(self) -> int:
        """Show the menu until a choice from 1 to 8 is entered, and return it."""
        first = True
        while True:
            if not first:
                self._say()
            first = False
            for entry in _MENU:
                self._say(entry)
            answer = self._read_line().strip()
            try:
                option = int(answer)
            except ValueError:
                continue
            if 1 <= option <= _EXIT_CHOICE:
                return option

    def get_line_number(self, is_exact: bool) -> int | None:
        """Ask for a line number and return it, or ``None`` if it is not valid.

        With ``is_exact`` the number must name an existing line; otherwise it
        may also be one past the last line, as for insertion.
        """
        answer = self._ask("Enter line number: ").strip()
        try:
            number = int(answer)
        except ValueError:
            return None
        upper = len(self.document) if is_exact else len(self.document) + 1
        return number if 1 <= number <= upper else None

    def get_file_name(self) -> str:
        """Ask for a file name, remember it and return it."""
        self.file_name = self._ask("Enter the file name:")
        return self.file_name

    def _choose_line(self, is_exact: bool) -> int:
        upper = len(self.document) if is_exact else len(self.document) + 1
        self.display_document()
        number = self.get_line_number(is_exact)
        while number is None:
            self._say("Must be between 1 and ", upper)
            self.display_document()
            number = self.get_line_number(is_exact)
        return number

    def start(self) -> None:
        """Run the menu loop until the user chooses to exit or input runs out."""
        actions = {
            1: ("**Insert Line**", self.insert_line),
            2: ("**Delete Line**", self.delete_line),
            3: ("**Edit Line**", self.edit_line),
            4: ("**Display Document**", self.display_document),
            5: ("**Search Document**", self.search_document),
            6: ("**Save File**", self.save_file),
            7: ("**Load File**", self.load_file),
        }
        try:
            while True:
                self._say()
                choice = self.main_menu()
                if choice == _EXIT_CHOICE:
                    self._say("Thank you for using the Text Editor")
                    return
                heading, action = actions[choice]
                self._say(heading)
                action()
        except EOFError:
            return

    def insert_line(self) -> None:
        """Ask where and what to insert, then insert the new line."""
        if not self.document:
            text = self._ask("Enter text: ")
            self.document.insert_line(text, 1)
            return
        self._say("Inserts line before chosen line number")
        number = self._choose_line(is_exact=False)
        text = self._ask("Enter text: ")
        self.document.insert_line(text, number)

    def delete_line(self) -> None:
        """Ask which line to delete, then delete it."""
        if not self.document:
            self._say("There is no line to delete")
            return
        number = self._choose_line(is_exact=True)
        self.document.delete_line(number)

    def edit_line(self) -> None:
        """Ask which line to change and its new text, then update it."""
        if not self.document:
            self._say("There is no line to edit")
            return
        number = self._choose_line(is_exact=True)
        text = self._ask("Enter new text: ")
        self.document.edit_line(number, text)

    def display_document(self) -> None:
        """Print every line with its line number."""
        if not self.document:
            self._say("There is no document to display")
            return
        for number, text in self.document.numbered_lines():
            self._say(number, ": ", text)

    def search_document(self) -> None:
        """Ask for a word and print every line that contains it."""
        if not self.document:
            self._say("There is no line to search.")
            return
        word = self._ask("Enter the word to search: ")
        found = self.document.search(word)
        if not found:
            self._say("No found lines")
            return
        for number, text in found:
            self._say("Word found in line ", number, ": ", text)

    def save_file(self) -> None:
        """Ask for a file name and write the document to it."""
        filename = self.get_file_name()
        try:
            self.document.save(filename)
        except OSError:
            self._say("File could not be saved.")
            return
        self._say("File saved successfully!")

    def load_file(self) -> None:
        """Ask for a file name and insert its lines at the top of the document."""
        filename = self.get_file_name()
        try:
            self.document.load(filename)
        except OSError:
            self._say("File does not exist.")
            return
        self._say("File loaded successfully!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive editor on standard input and output."""
    parser = argparse.ArgumentParser(prog="linepad", description="Simple line-based text editor.")
    parser.parse_args(argv)
    TextEditor(sys.stdin, sys.stdout).start()
    return 0