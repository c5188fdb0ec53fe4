import pytest

import main
from setsim.console import ColorRenderer
from setsim.renderer import NullRenderer


@pytest.mark.parametrize("argv", [[], ["many"], ["0"], ["-4"], ["1", "2"]])
def test_usage_on_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(argv)
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_runs_silently(capsys):
    assert main.main(["3", "--display", "none", "--seed", "1"]) == 0
    assert capsys.readouterr().out == ""


def test_color_display_prints_histogram(capsys):
    assert main.main(["1", "--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert "Remaining cards: [" in out
    assert "(18:" in out


def test_save_plot(tmp_path):
    path = tmp_path / "hist.png"
    assert main.main(["2", "--display", "none", "--seed", "1", "--save-plot", str(path)]) == 0
    assert path.exists()


def test_verbose_summary(capsys):
    main.main(["2", "--display", "none", "--verbose-level", "1"])
    assert "Mean leftover" in capsys.readouterr().out


def test_create_renderer():
    assert isinstance(main.create_renderer("color"), ColorRenderer)
    assert isinstance(main.create_renderer("none"), NullRenderer)


def test_create_pygame_renderer(tmp_path):
    from setsim.hmi import PygameRenderer
    renderer = main.create_renderer("pygame", True, str(tmp_path / "h.png"), 5)
    assert isinstance(renderer, PygameRenderer)
    assert renderer.show and renderer.plot and renderer.delay_ms == 5


@pytest.fixture
def show_calls(monkeypatch):
    from setsim import hmi
    calls = []
    monkeypatch.setattr(hmi.plt, "show", lambda *a, **k: calls.append(1))
    return calls


def test_pygame_display_save_plot_does_not_show(tmp_path, show_calls):
    path = tmp_path / "hist.png"
    assert main.main(["1", "--display", "pygame", "--seed", "1", "--save-plot", str(path)]) == 0
    assert path.exists()
    assert show_calls == []


def test_pygame_display_plot_shows(show_calls):
    assert main.main(["1", "--display", "pygame", "--seed", "1", "--plot"]) == 0
    assert show_calls == [1]
