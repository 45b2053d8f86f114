"""Application wiring for the circular slider demo."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from PyQt5 import QtWidgets

from circular_slider import config as slider_config


class SliderApp(QtWidgets.QApplication):
    """Thin wrapper that stores shared configuration for the slider window."""

    def __init__(
        self,
        argv: List[str],
        main_script_path: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> None:
        super().__init__(argv)
        self.setQuitOnLastWindowClosed(True)
        self._config_file = config_file or slider_config.config_path(main_script_path)
        self.settings = slider_config.load_slider_settings(self._config_file)

    def load_track_specs(self) -> list[dict[str, Any]]:
        return slider_config.load_track_specs_or_default(self._config_file)
