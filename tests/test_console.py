import io

from rich.console import Console

from passbench.console import ConsoleUI
from passbench.estimator import TimeEstimator
from passbench.tasks import BenchmarkRunner


class FastGenerator:
    def generate(self, config):
        return "x" * config.length


def scripted(*answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return fake_input


def make_ui(*answers, runner=None):
    out = io.StringIO()
    ui = ConsoleUI(
        console=Console(file=out, width=120, color_system=None),
        input_func=scripted(*answers),
        runner=runner or BenchmarkRunner(lambda: TimeEstimator(generator=FastGenerator())),
    )
    return ui, out


def test_exit_command():
    ui, out = make_ui("0")
    ui.run()
    assert "Bye." in out.getvalue()


def test_eof_leaves_menu():
    ui, out = make_ui()
    ui.run()
    assert "PassBench" in out.getvalue()


def test_unknown_choice():
    ui, out = make_ui("9", "0")
    ui.run()
    assert "Unknown menu item" in out.getvalue()


def test_generate_flow():
    # length, latin y, cyrillic n, digits да, special n, required
    ui, out = make_ui("1", "12", "y", "n", "да", "n", "Q7", "0")
    ui.run()
    text = out.getvalue()
    assert "Generated password" in text
    assert "Error" not in text


def test_generate_rejects_bad_length():
    ui, out = make_ui("1", "abc", "0")
    ui.run()
    assert "whole number" in out.getvalue()


def test_generate_without_classes_reports_error():
    ui, out = make_ui("1", "8", "n", "n", "n", "n", "", "0")
    ui.run()
    assert "Error: no character class selected" in out.getvalue()


def test_generate_too_many_required_reports_error():
    ui, out = make_ui("1", "2", "y", "n", "n", "n", "abc", "0")
    ui.run()
    assert "Error: cannot add" in out.getvalue()


def test_custom_benchmark_flow():
    ui, out = make_ui("4", "100", "300", "100", "0")
    ui.run()
    text = out.getvalue()
    assert "CUSTOM TEST (100-300, step 100)" in text
    assert "300" in text


def test_custom_benchmark_min_above_max():
    ui, out = make_ui("4", "300", "100", "10", "0")
    ui.run()
    assert "must not be greater than maximum" in out.getvalue()


def test_quick_benchmark_uses_runner():
    ui, out = make_ui("2", "0")
    ui.run()
    text = out.getvalue()
    assert "QUICK TEST" in text
    assert "1000000" in text


def test_long_password_printed_on_one_line():
    ui, out = make_ui("1", "300", "y", "n", "n", "n", "", "0")
    ui.generator = FastGenerator()
    ui.run()
    lines = out.getvalue().splitlines()
    assert "x" * 300 in lines
