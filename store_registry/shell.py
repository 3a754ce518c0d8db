"""
Design (shell.py)
- Purpose: Menu-driven read-eval loop over text streams (add, list, delete, filter, exit).
- Inputs: Repo (shared state), save callback, input/output streams.
- Outputs: Exit status from run().
- Side effects: Reads lines from stdin, writes prompts and listings to stdout, mutates Repo.
- States: awaiting choice -> {adding, listing, deleting, filtering} -> awaiting choice;
          exiting is terminal. Closed input counts as choosing exit.
"""

import sys
from typing import Callable, Iterable, Optional, TextIO

from .config import MENU_LINES
from .logging import get_logger
from .models import Store
from .repository import Repo

logger = get_logger(__name__)


class _InputClosed(Exception):
    pass


class StoreShell:
    """
    Design (StoreShell)
    - Purpose: Encapsulate the console interaction; the only writer to Repo in interactive mode.
    - Public methods:
        run(): loop until the user picks "Exit program"; returns 0
    """

    def __init__(
        self,
        repo: Repo,
        save_callback: Callable[[], None],
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.repo = repo
        self.save_callback = save_callback
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.actions = {
            1: self.add_store,
            2: self.list_stores,
            3: self.delete_store,
            4: self.find_featured,
        }

    def run(self) -> int:
        while True:
            for line in MENU_LINES:
                self._print(line)
            try:
                raw = self._ask("Select an option: ")
                choice = self._parse_choice(raw)
                if choice == 5:
                    break
                action = self.actions.get(choice)
                if action is None:
                    logger.debug(f"Invalid menu choice: {raw!r}")
                    self._print("Invalid choice. Try again.")
                    continue
                action()
            except _InputClosed:
                logger.debug("Input closed; exiting")
                break
        return self.exit_program()

    # -------- Menu actions --------

    def add_store(self) -> None:
        name = self._ask("Store name: ")
        address = self._ask("Address: ")
        specialization = self._ask("Specialization: ")
        working_hours = self._ask("Working hours: ")
        store = Store(name, address, specialization, working_hours)

        answer = self._ask("Add phone number (Y/N)? ")
        while answer.strip().upper() == "Y":
            store.add_phone(self._ask("Phone number: "))
            answer = self._ask("Add another phone number (Y/N)? ")

        self.repo.add(store)
        self._print("Store added!")

    def list_stores(self) -> None:
        self._print_stores(self.repo)

    def delete_store(self) -> None:
        name = self._ask("Enter the store name to delete: ")
        removed = self.repo.remove_by_name(name)
        logger.debug(f"Removed {removed} store(s) named {name!r}")
        self._print(f"Store with the name {name} deleted (if it was found).")

    def find_featured(self) -> None:
        self._print_stores(self.repo.featured())

    def exit_program(self) -> int:
        self.save_callback()
        self._print("Program terminated.")
        return 0

    # -------- I/O helpers --------

    @staticmethod
    def _parse_choice(raw: str) -> Optional[int]:
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise _InputClosed()
        return line.rstrip("\r\n")

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)

    def _print_stores(self, stores: Iterable[Store]) -> None:
        for store in stores:
            self._print(store.render())
