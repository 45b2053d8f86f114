"""Entry point for the standalone circular slider."""
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys
from typing import Optional, Sequence

from circular_slider import config as slider_config
from circular_slider.model.track_config import SceneContext
from circular_slider.rendering.svg_export import write_svg
from circular_slider.widget.slider_app import SliderApp
from circular_slider.widget.slider_widget import CircularSlider, create_tracks

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    base_dir = os.path.dirname(sys.argv[0])
    log_path = os.path.join(base_dir, "circular_slider_log.txt")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Concentric circular range sliders.")
    ap.add_argument("--config", type=Path, help="Path to circular_slider.ini")
    ap.add_argument(
        "--live-readout",
        action="store_true",
        help="Update value readouts while dragging instead of on release",
    )
    ap.add_argument(
        "--export-svg",
        type=Path,
        metavar="PATH",
        help="Write the initial scene as SVG and exit",
    )
    ap.add_argument(
        "--write-default-config",
        action="store_true",
        help="Write the built-in tracks to the config file and exit",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap.parse_args(argv)


def export_svg(config_file: Path, output: Path) -> int:
    settings = slider_config.load_slider_settings(config_file)
    specs = slider_config.load_track_specs_or_default(config_file)
    scene = SceneContext()
    try:
        _states, views = create_tracks(specs, scene, settings.readout_symbol)
    except ValueError:
        logger.exception("Invalid slider configuration: path=%s", config_file)
        return 1
    write_svg(output, scene, views)
    return 0


def run_window(config_file: Path, live_readout: bool) -> int:
    app = SliderApp(sys.argv[:1], config_file=config_file)
    try:
        slider = CircularSlider(
            app.load_track_specs(),
            live_readout=live_readout or app.settings.live_readout,
            readout_symbol=app.settings.readout_symbol,
        )
    except ValueError:
        logger.exception("Invalid slider configuration: path=%s", config_file)
        return 1
    slider.setWindowTitle("Circular Slider")
    slider.show()
    return app.exec_()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger.info("Starting circular slider")

    config_file = args.config or slider_config.config_path(Path(__file__).resolve())
    if args.write_default_config:
        if not slider_config.save_track_specs(
            slider_config.DEFAULT_TRACK_SPECS, config_file
        ):
            logger.error("Default tracks were not written: path=%s", config_file)
            return 1
        logger.info("Wrote default tracks: path=%s", config_file)
        return 0
    if args.export_svg is not None:
        return export_svg(config_file, args.export_svg)
    return run_window(config_file, args.live_readout)


if __name__ == "__main__":
    sys.exit(main())
