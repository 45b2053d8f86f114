import pytest

pytest.importorskip("PyQt5")

from pathlib import Path

from circular_slider import main as slider_main


def test_parse_args_defaults():
    args = slider_main.parse_args([])

    assert args.config is None
    assert not args.live_readout
    assert args.export_svg is None
    assert not args.write_default_config


def test_parse_args_options():
    args = slider_main.parse_args(
        ["--config", "x.ini", "--live-readout", "--export-svg", "out.svg", "--verbose"]
    )

    assert args.config == Path("x.ini")
    assert args.live_readout
    assert args.export_svg == Path("out.svg")
    assert args.verbose


def test_export_svg_uses_default_tracks(tmp_path):
    output = tmp_path / "scene.svg"

    assert slider_main.export_svg(tmp_path / "missing.ini", output) == 0
    assert output.read_text(encoding="utf-8").count("<g ") == 5


def test_export_svg_rejects_invalid_config(tmp_path):
    ini_path = tmp_path / "circular_slider.ini"
    ini_path.write_text("[track:bad]\ncolor = red\nradius = -5\n", encoding="utf-8")
    output = tmp_path / "scene.svg"

    assert slider_main.export_svg(ini_path, output) == 1
    assert not output.exists()


@pytest.fixture
def quiet_main(monkeypatch):
    monkeypatch.setattr(slider_main, "configure_logging", lambda verbose=False: None)
    return slider_main


def test_main_writes_default_config(quiet_main, tmp_path):
    ini_path = tmp_path / "circular_slider.ini"

    assert quiet_main.main(["--config", str(ini_path), "--write-default-config"]) == 0
    specs = quiet_main.slider_config.load_track_specs(ini_path)
    assert len(specs) == len(quiet_main.slider_config.DEFAULT_TRACK_SPECS)


def test_main_fails_when_default_config_cannot_be_written(quiet_main, tmp_path):
    ini_path = tmp_path / "no_such_dir" / "circular_slider.ini"

    assert quiet_main.main(["--config", str(ini_path), "--write-default-config"]) == 1
    assert not ini_path.exists()


class _FakeApp:
    def __init__(self, argv, config_file=None):
        self.settings = slider_main.slider_config.load_slider_settings(config_file)
        self._config_file = config_file

    def load_track_specs(self):
        return slider_main.slider_config.load_track_specs_or_default(self._config_file)

    def exec_(self):
        return 0


class _FakeSlider:
    created = []

    def __init__(self, slides, **kwargs):
        self.kwargs = kwargs
        _FakeSlider.created.append(self)

    def setWindowTitle(self, title):
        pass

    def show(self):
        pass


@pytest.mark.parametrize(
    "ini_text, argv, expected",
    [
        ("", [], False),
        ("", ["--live-readout"], True),
        ("[slider]\nlive_readout = true\n", [], True),
        ("[slider]\nlive_readout = false\nreadout_symbol = EUR\n", ["--live-readout"], True),
    ],
)
def test_main_merges_live_readout_flag_with_config(
    quiet_main, monkeypatch, tmp_path, ini_text, argv, expected
):
    ini_path = tmp_path / "circular_slider.ini"
    ini_path.write_text(ini_text, encoding="utf-8")
    monkeypatch.setattr(quiet_main, "SliderApp", _FakeApp)
    monkeypatch.setattr(quiet_main, "CircularSlider", _FakeSlider)
    _FakeSlider.created.clear()

    assert quiet_main.main(["--config", str(ini_path), *argv]) == 0
    (slider,) = _FakeSlider.created
    assert slider.kwargs["live_readout"] is expected
    expected_symbol = "EUR" if "EUR" in ini_text else "$"
    assert slider.kwargs["readout_symbol"] == expected_symbol
