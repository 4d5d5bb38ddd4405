import argparse

import numpy as np
import pytest

from arrowhead import main, parse_color, parse_options


class TestParseColor:
    def test_valid(self) -> None:
        assert parse_color('1,0.5,0') == (1.0, 0.5, 0.0)

    @pytest.mark.parametrize('text', ['1,1', 'a,b,c', '1,2,0', '-1,0,0'])
    def test_invalid(self, text) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_color(text)


class TestParseOptions:
    def test_defaults(self) -> None:
        opts = parse_options(['hex2d', '4'])
        assert opts.variant == 'hex2d'
        assert opts.max_depth == 4
        assert opts.scale == 0.05
        assert opts.color == (1., 1., 1.)
        assert not opts.gradient
        assert not opts.text_only

    @pytest.mark.parametrize('argv', [
        ['koch', '2'],
        ['hex2d', '-1'],
        ['hex2d', '2', '-s', '0'],
        ['hex2d', '2', '-c', '2,0,0'],
    ])
    def test_rejected(self, argv, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            parse_options(argv)
        assert excinfo.value.code == 2


class TestMain:
    def test_text_output(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        main(['axis3d', '2', '-t', '-s', '1', '-c', '0,1,0'])
        out = capsys.readouterr().out
        assert 'generated 10 vertices' in out
        data = np.loadtxt(tmp_path / 'vertices.txt')
        assert data.shape == (10, 6)
        np.testing.assert_allclose(data[0, :3], 0.)
        np.testing.assert_allclose(data[:, 3:], [[0., 1., 0.]] * 10)

    def test_too_many_segments(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        main(['hex2d', '3', '-x', '10'])
        assert 'exceeded' in capsys.readouterr().out
        assert not (tmp_path / 'segment_plot.png').exists()

    def test_plot_output(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        main(['hex2d', '3', '-g', '-o', 'arrow.png'])
        assert (tmp_path / 'arrow.png').exists()
