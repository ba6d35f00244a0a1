"""Application bootstrap for the Blueprint Playground."""
from __future__ import annotations

import sys
from typing import Optional

from loguru import logger
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar

from .config import EditorConfig, load_config
from .session import EditorState
from .widgets import Canvas, Controls


class Main(QMainWindow):
    """Top-level window wiring together the canvas, controls, and chrome."""

    def __init__(self, config: Optional[EditorConfig] = None):
        super().__init__()
        self.setWindowTitle("Blueprint Drawing Tool")

        self.canvas = Canvas(EditorState(config=config or load_config()))
        self.controls = Controls(
            self.canvas.state.config,
            self.canvas.set_grid_pitch,
            self.canvas.set_thickness,
            self.canvas.set_grid_color,
            self.canvas.clear,
            self.canvas.undo,
        )
        self.setCentralWidget(self.canvas)
        self.addDockWidget(Qt.RightDockWidgetArea, self.controls.dock)

        self._setup_status_bar()
        self._make_menu()
        self.canvas.status_changed.connect(self._on_status_changed)
        self.canvas.refresh()
        self.canvas.setFocus()

    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)
        self._walls_label = QLabel("walls: 0")
        self._walls_label.setToolTip("Number of committed walls.")
        self._length_label = QLabel("length: --")
        self._length_label.setToolTip("Summed length of all committed walls.")
        self._snap_label = QLabel("snap: --")
        self._snap_label.setToolTip("Rule that placed the last pointer position (end, align or grid).")
        for label in (self._walls_label, self._length_label, self._snap_label):
            bar.addPermanentWidget(label)

    def _make_menu(self) -> None:
        edit_menu = self.menuBar().addMenu("&Edit")
        # Ctrl+Z reaches the canvas as a key event; the menu entry is for mouse users.
        undo_action = edit_menu.addAction("Undo")
        undo_action.triggered.connect(self.canvas.undo)
        undo_action.setStatusTip("Undo the last wall.")
        clear_action = edit_menu.addAction("Clear Canvas")
        clear_action.triggered.connect(self.canvas.clear)
        clear_action.setStatusTip("Remove every wall and reset the undo history.")

    def _on_status_changed(self, payload: dict) -> None:
        message = payload.get("message")
        if message:
            self.statusBar().showMessage(message, 4000)
        if "walls" in payload:
            self._walls_label.setText(f"walls: {payload['walls']}")
            self._length_label.setText(f"length: {payload['total_length']:.1f}")
            self._snap_label.setText(f"snap: {payload.get('snap') or '--'}")


def main(config: Optional[EditorConfig] = None) -> int:  # pragma: no cover - GUI entry point
    app = QApplication(sys.argv[:1])
    window = Main(config)
    window.show()
    logger.info("Blueprint Playground started")
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
