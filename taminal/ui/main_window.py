from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, Qt, Signal, Slot
from PySide6.QtGui import QAction, QKeySequence, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taminal.config.settings import settings
from taminal.container import container
from taminal.entities.command import COMPLETION_TRIGGER
from taminal.entities.profile import ShellProfile
from taminal.entities.session import Session
from taminal.use_cases.shell.dispatcher import BuiltinDispatcher

from .theme import error_color, monospace_font

WELCOME_LINES = [
    "=== Taminal GUI Terminal ===",
    "Type 'help' for available commands",
    "",
]


class CommandInput(QLineEdit):
    historyPrevious = Signal()
    historyNext = Signal()
    completionRequested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setPlaceholderText("Type a command…  (Enter to run • Tab to complete cd)")

    def event(self, event) -> bool:  # type: ignore[override]
        # Tab normally moves focus; it is the completion key here
        if event.type() == QEvent.Type.KeyPress and event.key() == Qt.Key.Key_Tab:
            self.completionRequested.emit()
            return True
        return super().event(event)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Up:
            self.historyPrevious.emit()
            return
        if event.key() == Qt.Key.Key_Down:
            self.historyNext.emit()
            return
        super().keyPressEvent(event)


class MainWindow(QMainWindow):
    def __init__(
        self,
        dispatcher: Optional[BuiltinDispatcher] = None,
        session: Optional[Session] = None,
    ) -> None:
        super().__init__()
        self._dispatcher = dispatcher or container.get_dispatcher(
            ShellProfile.gui(settings.output_limit)
        )
        self._session = session or self._dispatcher.new_session(seed=WELCOME_LINES)

        self.setWindowTitle("Taminal - GUI Terminal")
        self.resize(800, 600)
        self.setMinimumSize(400, 300)

        self._build_actions()
        self._build_layout()
        self._refresh()

    # UI building
    def _build_actions(self) -> None:
        self.action_clear = QAction("Clear", self)
        self.action_clear.setShortcut(QKeySequence("Ctrl+L"))
        self.action_clear.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        self.action_clear.triggered.connect(self._on_clear_triggered)
        self.addAction(self.action_clear)

    def _build_layout(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)

        title_lbl = QLabel("🖥️ Taminal GUI Terminal", central)
        title_lbl.setStyleSheet("font-weight: 600; font-size: 13.5pt; margin-bottom: 2px;")
        layout.addWidget(title_lbl)

        dir_row = QHBoxLayout()
        dir_row.addWidget(QLabel("Current Directory:", central))
        self.directory_lbl = QLabel(central)
        self.directory_lbl.setFont(monospace_font())
        self.directory_lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        dir_row.addWidget(self.directory_lbl, 1)
        layout.addLayout(dir_row)

        self.output_view = QPlainTextEdit(central)
        self.output_view.setReadOnly(True)
        self.output_view.setFont(monospace_font())
        self.output_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        layout.addWidget(self.output_view, 1)

        input_row = QHBoxLayout()
        self.prompt_lbl = QLabel(central)
        self.prompt_lbl.setTextFormat(Qt.TextFormat.PlainText)
        self.prompt_lbl.setFont(monospace_font())
        self.input_edit = CommandInput(central)
        self.input_edit.setFont(monospace_font())
        self.input_edit.returnPressed.connect(self._on_execute_clicked)
        self.input_edit.historyPrevious.connect(self._on_history_previous)
        self.input_edit.historyNext.connect(self._on_history_next)
        self.input_edit.completionRequested.connect(self._on_completion_requested)
        self.execute_btn = QPushButton("Execute", central)
        self.execute_btn.clicked.connect(self._on_execute_clicked)
        input_row.addWidget(self.prompt_lbl)
        input_row.addWidget(self.input_edit, 1)
        input_row.addWidget(self.execute_btn)
        layout.addLayout(input_row)

        self.input_edit.setFocus()

    # Slots
    @Slot()
    def _on_execute_clicked(self) -> None:
        line = self.input_edit.text()
        self.input_edit.clear()
        if line:
            self._execute(line)
        self.input_edit.setFocus()

    @Slot()
    def _on_completion_requested(self) -> None:
        line = self.input_edit.text()
        if line.split()[:1] != ["cd"]:
            return
        self.input_edit.clear()
        self._execute(line + COMPLETION_TRIGGER)

    @Slot()
    def _on_history_previous(self) -> None:
        entry = self._session.history_previous()
        if entry is not None:
            self.input_edit.setText(entry)

    @Slot()
    def _on_history_next(self) -> None:
        self.input_edit.setText(self._session.history_next())

    @Slot()
    def _on_clear_triggered(self) -> None:
        self._session.clear_output(self._dispatcher.profile.clear_line)
        self._refresh()

    # Helpers
    def _execute(self, line: str) -> None:
        # Runs synchronously: a long external command blocks the event loop
        shown = line.rstrip(COMPLETION_TRIGGER)
        self._session.emit(f"{self._session.directory_name}> {shown}")
        self._dispatcher.process_line(line, self._session)
        self._refresh()

    def _refresh(self) -> None:
        self.directory_lbl.setText(self._session.current_directory)
        self.prompt_lbl.setText(f"{self._session.directory_name}> ")
        self._render_output()

    def _render_output(self) -> None:
        normal = QTextCharFormat()
        error = QTextCharFormat()
        app = QApplication.instance()
        if isinstance(app, QApplication):
            error.setForeground(error_color(app))

        self.output_view.clear()
        cursor = self.output_view.textCursor()
        for index, line in enumerate(self._session.output):
            if index:
                cursor.insertBlock()
            cursor.insertText(line.text, error if line.is_error else normal)
        cursor.movePosition(QTextCursor.MoveOperation.End)
        self.output_view.setTextCursor(cursor)
        self.output_view.ensureCursorVisible()
