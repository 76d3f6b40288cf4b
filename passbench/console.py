"""Interactive console menu: generate passwords and run benchmarks."""

import logging
from typing import Callable, Dict, NamedTuple, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .errors import PassBenchError
from .generator import PasswordGenerator
from .password_config import MAX_LENGTH, PasswordConfig
from .tasks import BenchmarkRunner

logger = logging.getLogger(__name__)

YES_ANSWERS = {"y", "yes", "д", "да"}


class MenuCommand(NamedTuple):
    key: str
    description: str
    handler: Callable[[], bool]  # returns True to leave the menu


class ConsoleUI:
    def __init__(
        self,
        console: Optional[Console] = None,
        input_func: Callable[[str], str] = input,
        runner: Optional[BenchmarkRunner] = None,
    ):
        self.console = console or Console()
        self._input = input_func
        self.runner = runner or BenchmarkRunner()
        self.generator = PasswordGenerator()
        self.commands: Dict[str, MenuCommand] = {}
        for cmd in (
            MenuCommand("1", "Generate a password", self.handle_generate),
            MenuCommand("2", "Quick timing test (10k, 100k, 1M)", self.handle_quick_test),
            MenuCommand("3", "Detailed timing test (10k-1M, step 100k)", self.handle_detailed_test),
            MenuCommand("4", "Custom timing test", self.handle_custom_test),
            MenuCommand("0", "Exit", self.handle_exit),
        ):
            self.commands[cmd.key] = cmd

    def ask(self, prompt: str) -> str:
        self.console.print(prompt, end="", markup=False, highlight=False)
        return self._input("")

    def run(self) -> None:
        logger.info("console UI started")
        try:
            while True:
                self.print_menu()
                try:
                    choice = self.ask("Choose an action (0-4): ").strip()
                except EOFError:
                    logger.warning("input closed, leaving menu")
                    break
                if self.dispatch(choice):
                    break
        finally:
            self.runner.shutdown(wait=False)
            logger.info("console UI finished")

    def dispatch(self, choice: str) -> bool:
        cmd = self.commands.get(choice)
        if cmd is None:
            logger.warning("unknown menu choice: %r", choice)
            self.console.print("[yellow]Unknown menu item. Please choose 0 to 4.[/yellow]")
            return False
        logger.debug("running menu command %s", cmd.key)
        try:
            return cmd.handler()
        except EOFError:
            return True
        except PassBenchError as e:
            logger.warning("command %s failed: %s", cmd.key, e)
            self.console.print(Text(f"Error: {e}", style="red"))
            return False

    def print_menu(self) -> None:
        lines = [f"{c.key} - {c.description}" for c in self.commands.values() if c.key != "0"]
        lines.append(f"0 - {self.commands['0'].description}")
        self.console.print(Panel("\n".join(lines), title="PassBench"))

    # ----------------- prompts -----------------
    def read_positive_int(self, prompt: str, field: str) -> Optional[int]:
        raw = self.ask(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            self.console.print("[red]Error: please enter a whole number.[/red]")
            logger.warning("invalid number for %s: %r", field, raw)
            return None
        if value <= 0:
            self.console.print(f"[red]Error: {field} must be positive.[/red]")
            logger.warning("non-positive value for %s: %d", field, value)
            return None
        return value

    def read_yes_no(self, prompt: str) -> bool:
        answer = self.ask(f"{prompt} (y/n): ").strip().lower()
        return answer in YES_ANSWERS

    # ----------------- handlers -----------------
    def handle_generate(self) -> bool:
        length = self.read_positive_int(f"Password length (max {MAX_LENGTH}): ", "length")
        if length is None:
            return False

        config = PasswordConfig(length)
        config.enable_latin(self.read_yes_no("Use Latin letters (a-z, A-Z)?"))
        config.enable_cyrillic(self.read_yes_no("Use Cyrillic letters (а-я, А-Я)?"))
        config.enable_digits(self.read_yes_no("Use digits (0-9)?"))
        config.enable_special(self.read_yes_no("Use special characters (!@#$%^&*)?"))
        config.add_required_characters(self.ask("Required characters (leave empty for none): "))

        password = self.generator.generate(config)
        self.console.print(Text("Generated password:", style="bold green"))
        self.console.print(Text(password), soft_wrap=True)
        logger.info("password generated from console, length %d", len(password))
        return False

    def _wait_for(self, future, label: str) -> None:
        with self.console.status(f"{label} running..."):
            report = future.result()
        self.console.print(Text(report))

    def handle_quick_test(self) -> bool:
        self._wait_for(self.runner.submit_quick(), "Quick test")
        return False

    def handle_detailed_test(self) -> bool:
        self.console.print("This may take a few minutes.")
        self._wait_for(self.runner.submit_detailed(), "Detailed test")
        return False

    def handle_custom_test(self) -> bool:
        min_length = self.read_positive_int("Minimum length (10000 or more recommended): ", "minimum length")
        if min_length is None:
            return False
        max_length = self.read_positive_int(f"Maximum length (up to {MAX_LENGTH}): ", "maximum length")
        if max_length is None:
            return False
        step = self.read_positive_int("Step between measurements: ", "step")
        if step is None:
            return False

        self.console.print(f"Range: {min_length} - {max_length}, step: {step}")
        self._wait_for(self.runner.submit_custom(min_length, max_length, step), "Custom test")
        return False

    def handle_exit(self) -> bool:
        self.console.print("Bye.")
        logger.info("exit requested from menu")
        return True
