"""Qt widgets for the Blueprint Playground UI."""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QComboBox,
    QDockWidget,
    QGroupBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .config import GRID_COLOR_OPTIONS, GRID_PITCH_OPTIONS, THICKNESS_OPTIONS, EditorConfig
from .geometry import Segment, total_length
from .guides import Guide, GuideKind
from .session import DisplayModel, EditorState, render
from .snap import SnapKind
from .tools import WallTool, point_from_event

WALL_COLOR = QColor("#1e3a8a")
GUIDE_COLOR = QColor("#ef4444")
SQUARE_COLOR = QColor("#22c55e")


class Controls:
    """Docked pickers for grid size, wall thickness and grid colour."""

    def __init__(
        self,
        config: EditorConfig,
        set_grid_pitch_cb: Callable[[float], None],
        set_thickness_cb: Callable[[float], None],
        set_grid_color_cb: Callable[[str], None],
        clear_cb: Callable[[], None],
        undo_cb: Callable[[], None],
    ):
        self._set_grid_pitch_cb = set_grid_pitch_cb
        self._set_thickness_cb = set_thickness_cb
        self._set_grid_color_cb = set_grid_color_cb
        self.dock = QDockWidget("Drawing")
        self.dock.setObjectName("BlueprintControlsDock")
        self.dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)
        host = QWidget()
        layout = QVBoxLayout(host)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self._pitch_combo = QComboBox()
        for pitch in GRID_PITCH_OPTIONS:
            self._pitch_combo.addItem(f"{pitch:g}px", pitch)
        self._select(self._pitch_combo, config.grid_pitch)
        self._pitch_combo.currentIndexChanged.connect(self._emit_pitch)
        layout.addWidget(self._boxed("Grid Size", self._pitch_combo, "Grid spacing used for snapping."))

        self._thickness_combo = QComboBox()
        for label, value in THICKNESS_OPTIONS:
            self._thickness_combo.addItem(label, value)
        self._select(self._thickness_combo, config.thickness)
        self._thickness_combo.currentIndexChanged.connect(self._emit_thickness)
        layout.addWidget(self._boxed("Wall Thickness", self._thickness_combo, "Applies to walls drawn next."))

        self._color_combo = QComboBox()
        for label, value in GRID_COLOR_OPTIONS:
            self._color_combo.addItem(label, value)
        self._select(self._color_combo, config.grid_color)
        self._color_combo.currentIndexChanged.connect(self._emit_color)
        layout.addWidget(self._boxed("Grid Color", self._color_combo, "Colour of the background grid."))

        clear_button = QPushButton("Clear Canvas")
        clear_button.setToolTip("Remove every wall and reset the undo history.")
        clear_button.clicked.connect(clear_cb)
        layout.addWidget(clear_button)

        undo_button = QPushButton("Undo (Ctrl+Z)")
        undo_button.setToolTip("Step back to the previous drawing state.")
        undo_button.clicked.connect(undo_cb)
        layout.addWidget(undo_button)

        layout.addStretch(1)
        self.dock.setWidget(host)

    @staticmethod
    def _boxed(title: str, widget: QWidget, tip: str) -> QGroupBox:
        box = QGroupBox(title)
        box.setToolTip(tip)
        box_layout = QVBoxLayout()
        box_layout.setContentsMargins(6, 6, 6, 6)
        box_layout.addWidget(widget)
        box.setLayout(box_layout)
        return box

    @staticmethod
    def _select(combo: QComboBox, value) -> None:
        idx = combo.findData(value)
        blocked = combo.blockSignals(True)
        combo.setCurrentIndex(idx if idx >= 0 else 0)
        combo.blockSignals(blocked)

    def _emit_pitch(self, *_args) -> None:
        value = self._pitch_combo.currentData()
        if value is not None:
            self._set_grid_pitch_cb(float(value))

    def _emit_thickness(self, *_args) -> None:
        value = self._thickness_combo.currentData()
        if value is not None:
            self._set_thickness_cb(float(value))

    def _emit_color(self, *_args) -> None:
        value = self._color_combo.currentData()
        if value is not None:
            self._set_grid_color_cb(str(value))


class Canvas(QWidget):
    """Drawing surface: forwards pointer input to the editor and paints the result."""

    status_changed = Signal(dict)

    def __init__(self, state: Optional[EditorState] = None):
        super().__init__()
        self.state = state or EditorState()
        self.setObjectName("BlueprintCanvas")
        self.setFixedSize(QSize(int(self.state.config.canvas_width), int(self.state.config.canvas_height)))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)
        self.setCursor(Qt.CrossCursor)
        self.setToolTip("Click and drag to draw walls. Ctrl+Z undoes the last wall.")
        self._tool = WallTool(self)
        self._model: DisplayModel = render(self.state)

    def world_from_event(self, event):
        return point_from_event(event)

    def refresh(self) -> None:
        self._model = render(self.state)
        self._emit_status()
        self.update()

    def post_status_message(self, message: str) -> None:
        self.status_changed.emit({"message": message})

    def _emit_status(self) -> None:
        segments = self._model.segments
        self.status_changed.emit(
            {
                "walls": len(segments),
                "total_length": total_length(segments),
                "snap": self._model.snap_kind.value if self._model.snap_kind is not None else None,
            }
        )

    # ------------------------------------------------------------------
    # Commands wired to the controls
    def set_grid_pitch(self, pitch: float) -> None:
        self.state.set_grid_pitch(pitch)
        self.refresh()

    def set_thickness(self, thickness: float) -> None:
        self.state.set_thickness(thickness)
        self.refresh()

    def set_grid_color(self, color: str) -> None:
        self.state.set_grid_color(color)
        self.refresh()

    def undo(self) -> None:
        if self.state.undo():
            self.post_status_message("Undo")
        self.refresh()

    def clear(self) -> None:
        self.state.clear()
        self.post_status_message("Canvas cleared")
        self.refresh()

    # ------------------------------------------------------------------
    # Painting
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        model = self._model
        painter.fillRect(self.rect(), QColor("#ffffff"))
        self._draw_grid(painter, model)
        for guide in model.hover_guides:
            self._draw_guide(painter, guide)
        for segment in model.segments:
            self._draw_wall(painter, segment)
        if model.preview is not None:
            self._draw_wall(painter, model.preview)
            for guide in model.drag_guides:
                self._draw_guide(painter, guide)
        if model.hover_point is not None and model.snap_kind is SnapKind.END:
            self._draw_snap_indicator(painter, model)

    def _draw_grid(self, painter: QPainter, model: DisplayModel) -> None:
        pitch = float(model.grid_pitch)
        pen = QPen(QColor(model.grid_color), 0.5)
        painter.setPen(pen)
        x = 0.0
        while x <= model.canvas_width:
            painter.drawLine(QPointF(x, 0.0), QPointF(x, model.canvas_height))
            x += pitch
        y = 0.0
        while y <= model.canvas_height:
            painter.drawLine(QPointF(0.0, y), QPointF(model.canvas_width, y))
            y += pitch

    def _draw_wall(self, painter: QPainter, segment: Segment) -> None:
        pen = QPen(WALL_COLOR, segment.thickness)
        pen.setCapStyle(Qt.SquareCap)
        painter.setPen(pen)
        painter.drawLine(
            QPointF(segment.start.x, segment.start.y),
            QPointF(segment.end.x, segment.end.y),
        )

    def _draw_guide(self, painter: QPainter, guide: Guide) -> None:
        painter.save()
        painter.setBrush(Qt.NoBrush)
        if guide.kind is GuideKind.RULER:
            pen = QPen(GUIDE_COLOR, 2, Qt.DashLine)
            painter.setPen(pen)
            painter.drawLine(QPointF(guide.start.x, guide.start.y), QPointF(guide.end.x, guide.end.y))
        elif guide.kind is GuideKind.SQUARE:
            pen = QPen(SQUARE_COLOR, 2, Qt.DotLine)
            painter.setPen(pen)
            painter.drawRect(
                QRectF(guide.start.x, guide.start.y, guide.end.x - guide.start.x, guide.end.y - guide.start.y)
            )
        else:
            style = Qt.SolidLine if guide.kind is GuideKind.LENGTH else Qt.DashLine
            painter.setPen(QPen(GUIDE_COLOR, 2, style))
            painter.drawEllipse(QPointF(guide.start.x, guide.start.y), guide.radius, guide.radius)
        painter.restore()

    def _draw_snap_indicator(self, painter: QPainter, model: DisplayModel) -> None:
        point = model.hover_point
        size = 4.0
        painter.save()
        painter.setPen(QPen(GUIDE_COLOR, 1.5))
        painter.translate(point.x, point.y)
        painter.drawLine(QPointF(-size, -size), QPointF(size, size))
        painter.drawLine(QPointF(-size, size), QPointF(size, -size))
        painter.restore()

    # ------------------------------------------------------------------
    # Event forwarding to the wall tool
    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_press(event)

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_move(event)

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.mouse_release(event)

    def leaveEvent(self, event):  # pragma: no cover - GUI entry point
        self._tool.leave()
        super().leaveEvent(event)

    def keyPressEvent(self, event):  # pragma: no cover - GUI entry point
        if self._tool.key_press(event):
            event.accept()
            return
        super().keyPressEvent(event)
