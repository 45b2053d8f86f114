"""Text panel listing the live value of every slider track."""
from __future__ import annotations

from PyQt5 import QtCore, QtWidgets

from circular_slider.rendering.track_view import TrackView

SWATCH_SIZE = 12


class ReadoutPanel(QtWidgets.QFrame):
    """One row per track: value, colour swatch and description."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumWidth(180)
        self._value_labels: list[QtWidgets.QLabel] = []
        self._layout = QtWidgets.QGridLayout()
        self._layout.setHorizontalSpacing(8)
        self._layout.setVerticalSpacing(6)
        self._layout.setColumnStretch(2, 1)
        outer = QtWidgets.QVBoxLayout()
        outer.addLayout(self._layout)
        outer.addStretch(1)
        self.setLayout(outer)

    def add_track(self, view: TrackView) -> None:
        row = len(self._value_labels)
        value_label = QtWidgets.QLabel(view.readout)
        value_label.setStyleSheet("font-weight: bold; font-size: 18px")
        value_label.setAlignment(QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter)
        swatch = QtWidgets.QLabel()
        swatch.setFixedSize(SWATCH_SIZE, SWATCH_SIZE)
        swatch.setStyleSheet(f"background-color: {view.color}; border-radius: 2px")
        description = QtWidgets.QLabel(view.description)
        self._layout.addWidget(value_label, row, 0)
        self._layout.addWidget(swatch, row, 1)
        self._layout.addWidget(description, row, 2)
        self._value_labels.append(value_label)
        view.readout_changed = value_label.setText

    def readout_text(self, index: int) -> str:
        return self._value_labels[index].text()

    @property
    def row_count(self) -> int:
        return len(self._value_labels)
