"""Tests for the command-line entry point."""

import pytest

from lissascope.cli import _progress_bar, build_parser, config_from_args, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        cfg = config_from_args(args)
        assert cfg.preset == "classic"
        assert cfg.overrides == {}
        assert cfg.initial_preview is True
        assert cfg.max_trail_points is None

    def test_curve_overrides(self):
        args = build_parser().parse_args(["--preset", "knot", "--amp-x", "42", "--phase-y", "1.5", "--speed", "3"])
        cfg = config_from_args(args)
        assert cfg.overrides == {"amp_x": 42.0, "phase_y": 1.5, "speed": 3.0}
        params = cfg.initial_params()
        assert params.amp_x == 42.0
        assert params.freq_x == 3.0
        assert params.phase_y == 1.5

    def test_drawing_flags(self):
        args = build_parser().parse_args(["--no-preview", "--max-trail", "500"])
        cfg = config_from_args(args)
        assert cfg.initial_preview is False
        assert cfg.max_trail_points == 500

    def test_unknown_preset_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--preset", "spiral"])


class TestMain:
    def test_headless_requires_frames(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--headless"])
        assert exc.value.code == 1
        assert "--frames" in capsys.readouterr().err

    def test_invalid_size(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--headless", "--frames", "1", "--width", "0"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_headless_run(self, capsys):
        assert main(["--headless", "--frames", "4", "--autostart", "--width", "400", "--height", "300",
                     "--fps", "240"]) == 0
        out = capsys.readouterr().out
        assert "Preset: classic" in out
        assert "Done! 4 frames" in out
        # First frame drawn on start, then one per refresh
        assert "Trail points: 5" in out


def test_progress_bar_non_tty(capsys):
    _progress_bar(20, 20)
    assert "100.0%" in capsys.readouterr().out
