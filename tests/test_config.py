import math

import pytest

from svgplot.config import SVGPLOT_CONFIG, ViewConfig, config_sources, load_view_config
from svgplot.vector import Vector3
## unit tests for svgplot config.py


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.delenv(SVGPLOT_CONFIG, raising=False)
    return tmp_path


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


def test_defaults():
    cfg = load_view_config()
    assert cfg.eye == Vector3(15, 10, 5)
    assert cfg.xy_angle == pytest.approx(-math.pi / 3)
    assert cfg.xz_angle == pytest.approx(0.1)
    assert cfg.distance == 15
    assert cfg.clip_offset == 1
    assert cfg.bounds == (-10, 10, -10, 10)
    assert len(config_sources()) == 1


def test_override_precedence(isolated_env, monkeypatch):
    _write(isolated_env / '.config' / 'svgplot' / 'view.yaml',
           'distance: 20\nwidth: 800\n')
    env = _write(isolated_env / 'env.yaml', 'distance: 30\n')
    explicit = _write(isolated_env / 'explicit.yaml', 'eye: [0, 0, 50]\n')
    monkeypatch.setenv(SVGPLOT_CONFIG, str(env))

    assert len(config_sources(explicit)) == 4
    cfg = load_view_config(explicit)
    assert cfg.width == 800
    assert cfg.distance == 30
    assert cfg.eye == Vector3(0, 0, 50)
    assert cfg.height == 600


def test_empty_override(isolated_env):
    empty = _write(isolated_env / 'empty.yaml', '')
    assert load_view_config(empty).distance == 15


def test_missing_files(isolated_env, monkeypatch):
    with pytest.raises(ValueError):
        load_view_config(isolated_env / 'nope.yaml')
    monkeypatch.setenv(SVGPLOT_CONFIG, str(isolated_env / 'gone.yaml'))
    with pytest.raises(ValueError):
        load_view_config()


@pytest.mark.parametrize('text', [
    'colour: red\n',
    '- 1\n- 2\n',
    'eye: [1, 2]\n',
    'distance: fast\n',
    'distance: -1\n',
    'zoom_factor: 1.0\n',
    'distance: 500\n',
    'left: 10\n',
    'clip_offset: 0\n',
])
def test_bad_values(isolated_env, text):
    bad = _write(isolated_env / 'bad.yaml', text)
    with pytest.raises(ValueError):
        load_view_config(bad)


def test_missing_keys():
    with pytest.raises(ValueError):
        ViewConfig.from_mapping({'distance': 10})


def test_error_messages_name_the_keys(isolated_env):
    bad = _write(isolated_env / 'bad.yaml', 'colour: red\nshade: 2\n')
    with pytest.raises(ValueError, match='unknown config keys: colour, shade'):
        load_view_config(bad)
    with pytest.raises(ValueError, match='missing config keys: '):
        ViewConfig.from_mapping({'distance': 10})
