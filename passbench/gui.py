# passbench/gui.py
# PassBench GUI: password generation tab and background benchmark tab

import sys
import typing
import logging
from functools import partial

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtGui import QClipboard, QFont
from PySide6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QSpinBox, QCheckBox, QTextEdit, QGroupBox, QGridLayout,
    QMessageBox, QDialog, QDialogButtonBox, QFormLayout, QTabWidget
)

from passbench.config import load_config, save_config
from passbench.errors import PassBenchError
from passbench.generator import PasswordGenerator
from passbench.password_config import MAX_LENGTH, PasswordConfig
from passbench.tasks import BenchmarkRunner

logger = logging.getLogger(__name__)

CFG = load_config()
DEFAULT_CLEAR_CLIP_SECONDS = int(CFG.get("clipboard_clear_seconds", 20))

# ---------------- UI building helpers ----------------

def make_generator_group(cfg):
    box = QGroupBox("Generator")
    layout = QGridLayout()
    box.setLayout(layout)

    lbl_len = QLabel("Length:")
    spin_len = QSpinBox()
    spin_len.setRange(1, MAX_LENGTH)
    spin_len.setValue(int(cfg.get("default_length", 16)))

    chk_latin = QCheckBox("Latin (a-z, A-Z)")
    chk_latin.setChecked(bool(cfg.get("use_latin", True)))
    chk_cyrillic = QCheckBox("Cyrillic (а-я, А-Я)")
    chk_cyrillic.setChecked(bool(cfg.get("use_cyrillic", False)))
    chk_digits = QCheckBox("Digits (0-9)")
    chk_digits.setChecked(bool(cfg.get("use_digits", True)))
    chk_special = QCheckBox("Special (!@#$%^&*)")
    chk_special.setChecked(bool(cfg.get("use_special", True)))

    lbl_required = QLabel("Required characters:")
    input_required = QLineEdit()

    btn_generate = QPushButton("Generate")
    btn_copy = QPushButton("Copy (auto-clear)")
    btn_settings = QPushButton("Settings")

    txt_generated = QTextEdit()
    txt_generated.setReadOnly(True)
    lbl_info = QLabel("")

    layout.addWidget(lbl_len, 0, 0)
    layout.addWidget(spin_len, 0, 1)
    layout.addWidget(chk_latin, 1, 0)
    layout.addWidget(chk_cyrillic, 1, 1)
    layout.addWidget(chk_digits, 2, 0)
    layout.addWidget(chk_special, 2, 1)
    layout.addWidget(lbl_required, 3, 0)
    layout.addWidget(input_required, 3, 1)
    layout.addWidget(btn_generate, 4, 0)
    layout.addWidget(btn_copy, 4, 1)
    layout.addWidget(btn_settings, 5, 0)
    layout.addWidget(txt_generated, 6, 0, 1, 2)
    layout.addWidget(lbl_info, 7, 0, 1, 2)

    return {
        "widget": box,
        "spin_len": spin_len,
        "chk_latin": chk_latin,
        "chk_cyrillic": chk_cyrillic,
        "chk_digits": chk_digits,
        "chk_special": chk_special,
        "input_required": input_required,
        "btn_generate": btn_generate,
        "btn_copy": btn_copy,
        "btn_settings": btn_settings,
        "txt_generated": txt_generated,
        "lbl_info": lbl_info,
    }


def make_benchmark_group():
    box = QGroupBox("Generation time benchmarks")
    layout = QVBoxLayout()
    box.setLayout(layout)

    buttons = QHBoxLayout()
    btn_quick = QPushButton("Quick test\n(10k, 100k, 1M)")
    btn_detailed = QPushButton("Detailed test\n(10k-1M, step 100k)")
    btn_custom = QPushButton("Custom test\n(your range)")
    for b in (btn_quick, btn_detailed, btn_custom):
        buttons.addWidget(b)

    lbl_status = QLabel("Ready to run benchmarks")
    txt_report = QTextEdit()
    txt_report.setReadOnly(True)
    txt_report.setFont(QFont("Courier New", 10))

    layout.addLayout(buttons)
    layout.addWidget(lbl_status)
    layout.addWidget(QLabel("Report:"))
    layout.addWidget(txt_report)

    return {
        "widget": box,
        "btn_quick": btn_quick,
        "btn_detailed": btn_detailed,
        "btn_custom": btn_custom,
        "lbl_status": lbl_status,
        "txt_report": txt_report,
    }


class BenchmarkSignals(QObject):
    # emitted from the worker thread, delivered on the GUI thread
    finished = Signal(str, str)
    failed = Signal(str, str)


class CustomRangeDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Custom test")
        layout = QFormLayout()
        self.setLayout(layout)

        self.spin_min = QSpinBox()
        self.spin_min.setRange(1, MAX_LENGTH)
        self.spin_min.setValue(10_000)
        self.spin_max = QSpinBox()
        self.spin_max.setRange(1, MAX_LENGTH)
        self.spin_max.setValue(100_000)
        self.spin_step = QSpinBox()
        self.spin_step.setRange(1, MAX_LENGTH)
        self.spin_step.setValue(10_000)

        layout.addRow("Minimum length:", self.spin_min)
        layout.addRow("Maximum length:", self.spin_max)
        layout.addRow("Step:", self.spin_step)

        btns = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        layout.addRow(btns)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

    def values(self):
        return self.spin_min.value(), self.spin_max.value(), self.spin_step.value()


class SettingsDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumSize(400, 220)
        cfg = load_config()
        self.layout = QVBoxLayout()
        self.setLayout(self.layout)

        self.spin_len = QSpinBox()
        self.spin_len.setRange(1, MAX_LENGTH)
        self.spin_len.setValue(int(cfg.get("default_length", 16)))

        self.chk_latin = QCheckBox("Latin by default")
        self.chk_latin.setChecked(bool(cfg.get("use_latin", True)))
        self.chk_cyrillic = QCheckBox("Cyrillic by default")
        self.chk_cyrillic.setChecked(bool(cfg.get("use_cyrillic", False)))
        self.chk_digits = QCheckBox("Digits by default")
        self.chk_digits.setChecked(bool(cfg.get("use_digits", True)))
        self.chk_special = QCheckBox("Special characters by default")
        self.chk_special.setChecked(bool(cfg.get("use_special", True)))

        self.spin_clip = QSpinBox()
        self.spin_clip.setRange(2, 600)
        self.spin_clip.setValue(int(cfg.get("clipboard_clear_seconds", DEFAULT_CLEAR_CLIP_SECONDS)))

        self.layout.addWidget(QLabel("Default password length:"))
        self.layout.addWidget(self.spin_len)
        for chk in (self.chk_latin, self.chk_cyrillic, self.chk_digits, self.chk_special):
            self.layout.addWidget(chk)
        self.layout.addWidget(QLabel("Clipboard auto-clear (seconds):"))
        self.layout.addWidget(self.spin_clip)

        btns = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.layout.addWidget(btns)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

    def values(self):
        return {
            "default_length": int(self.spin_len.value()),
            "use_latin": self.chk_latin.isChecked(),
            "use_cyrillic": self.chk_cyrillic.isChecked(),
            "use_digits": self.chk_digits.isChecked(),
            "use_special": self.chk_special.isChecked(),
            "clipboard_clear_seconds": int(self.spin_clip.value()),
        }


class PassBenchGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("PassBench — Generator & Benchmarks")
        self.setMinimumSize(900, 700)
        self.clip_timer: typing.Optional[QTimer] = None

        self.cfg = load_config()
        self.clip_clear_seconds = int(self.cfg.get("clipboard_clear_seconds", DEFAULT_CLEAR_CLIP_SECONDS))
        self.generator = PasswordGenerator()
        self.runner = BenchmarkRunner()
        self.signals = BenchmarkSignals()
        self.signals.finished.connect(self.on_benchmark_finished)
        self.signals.failed.connect(self.on_benchmark_failed)

        main = QVBoxLayout()
        self.setLayout(main)
        tabs = QTabWidget()
        main.addWidget(tabs)

        gen = make_generator_group(self.cfg)
        bench = make_benchmark_group()
        tabs.addTab(gen["widget"], "Generate")
        tabs.addTab(bench["widget"], "Benchmarks")

        gen["btn_generate"].clicked.connect(partial(self.on_generate_click, gen))
        gen["btn_copy"].clicked.connect(partial(self.on_copy_generated, gen))
        gen["btn_settings"].clicked.connect(self.on_settings)

        bench["btn_quick"].clicked.connect(self.on_quick_test)
        bench["btn_detailed"].clicked.connect(self.on_detailed_test)
        bench["btn_custom"].clicked.connect(self.on_custom_test)

        self.gen = gen
        self.bench = bench

    # ----------------- Generator actions -----------------
    def on_generate_click(self, gen):
        try:
            config = PasswordConfig.build(
                gen["spin_len"].value(),
                latin=gen["chk_latin"].isChecked(),
                cyrillic=gen["chk_cyrillic"].isChecked(),
                digits=gen["chk_digits"].isChecked(),
                special=gen["chk_special"].isChecked(),
                required=gen["input_required"].text(),
            )
            pw = self.generator.generate(config)
        except PassBenchError as e:
            logger.warning("generation rejected in GUI: %s", e)
            QMessageBox.critical(self, "Invalid configuration", f"Check the password parameters:\n\n{e}")
            return
        gen["txt_generated"].setPlainText(pw)
        gen["lbl_info"].setText(f"Length: {len(pw)} characters")

    def on_copy_generated(self, gen):
        pw = gen["txt_generated"].toPlainText()
        if not pw:
            return
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(pw, mode=QClipboard.Clipboard)

        btn = gen["btn_copy"]
        old_text = btn.text()
        btn.setText("Copied ✓")
        btn.setEnabled(False)
        QTimer.singleShot(1500, lambda: (btn.setText(old_text), btn.setEnabled(True)))

        self.start_clipboard_clear_timer(self.clip_clear_seconds)

    # ----------------- Benchmarks -----------------
    def set_benchmark_buttons_enabled(self, enabled: bool):
        for key in ("btn_quick", "btn_detailed", "btn_custom"):
            self.bench[key].setEnabled(enabled)

    def start_benchmark(self, label: str, future):
        self.set_benchmark_buttons_enabled(False)
        self.bench["lbl_status"].setText(f"{label} running...")
        self.bench["txt_report"].setPlainText(f"{label} running...\nPlease wait...")

        def done(f):
            exc = f.exception()
            if exc is None:
                self.signals.finished.emit(label, f.result())
            else:
                self.signals.failed.emit(label, str(exc))

        future.add_done_callback(done)

    def on_quick_test(self):
        self.start_benchmark("Quick test", self.runner.submit_quick())

    def on_detailed_test(self):
        self.start_benchmark("Detailed test", self.runner.submit_detailed())

    def on_custom_test(self):
        dlg = CustomRangeDialog(self)
        if dlg.exec() != QDialog.Accepted:
            return
        min_length, max_length, step = dlg.values()
        try:
            future = self.runner.submit_custom(min_length, max_length, step)
        except PassBenchError as e:
            QMessageBox.warning(self, "Invalid range", str(e))
            return
        self.start_benchmark("Custom test", future)

    def on_benchmark_finished(self, label: str, report: str):
        self.bench["txt_report"].setPlainText(report)
        self.bench["lbl_status"].setText(f"{label} finished")
        self.set_benchmark_buttons_enabled(True)

    def on_benchmark_failed(self, label: str, message: str):
        logger.error("%s failed: %s", label, message)
        self.bench["txt_report"].setPlainText("Benchmark failed")
        self.bench["lbl_status"].setText(f"{label} failed")
        self.set_benchmark_buttons_enabled(True)
        QMessageBox.critical(self, "Benchmark error", message)

    # ----------------- Settings -----------------
    def on_settings(self):
        dlg = SettingsDialog(self)
        if dlg.exec() != QDialog.Accepted:
            return
        self.cfg.update(dlg.values())
        save_config(self.cfg)
        self.clip_clear_seconds = int(self.cfg.get("clipboard_clear_seconds", DEFAULT_CLEAR_CLIP_SECONDS))
        QMessageBox.information(self, "Saved", "Settings saved.")

    # ----------------- Clipboard -----------------
    def start_clipboard_clear_timer(self, seconds: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds * 1000)

    def clear_clipboard(self):
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText("", mode=QClipboard.Clipboard)

    def closeEvent(self, event):
        self.runner.shutdown(wait=False)
        super().closeEvent(event)


def main():
    app = QApplication.instance() or QApplication(sys.argv)
    gui = PassBenchGUI()
    gui.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
