"""View configuration loading with bundled defaults and override files.

Settings are merged from YAML files, later sources overriding earlier
ones key by key:

1. Bundled defaults (``svgplot/data/view.yaml``)
2. User config file (``~/.config/svgplot/view.yaml``)
3. The file named by the ``SVGPLOT_CONFIG`` environment variable
4. An explicit ``path`` passed to :func:`load_view_config`

Example:
    export SVGPLOT_CONFIG="$HOME/plots/wide.yaml"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from svgplot.vector import Vector3, isgoodnum

__all__ = [
    'SVGPLOT_CONFIG',
    'ViewConfig',
    'load_view_config',
    'config_sources',
]

log = logging.getLogger(__name__)

# Environment variable naming an override file
SVGPLOT_CONFIG = 'SVGPLOT_CONFIG'

_BUNDLED_CONFIG = Path(__file__).parent / 'data' / 'view.yaml'
_USER_CONFIG = Path('~/.config/svgplot/view.yaml')


@dataclass(frozen=True)
class ViewConfig:
    """Camera, canvas and navigation settings for a 3D plot."""

    eye: Vector3
    xy_angle: float
    xz_angle: float
    distance: float
    clip_offset: float
    width: float
    height: float
    left: float
    right: float
    bottom: float
    top: float
    pan_step: float
    rotate_rate: float
    elevation_rate: float
    zoom_factor: float
    min_distance: float
    max_distance: float

    def __post_init__(self):
        for f in fields(self):
            if f.name == 'eye':
                continue
            val = getattr(self, f.name)
            if not isgoodnum(val):
                raise ValueError('bad config value for {}: {!r}'.format(f.name, val))
        for name in ('distance', 'clip_offset', 'width', 'height',
                     'pan_step', 'min_distance'):
            if getattr(self, name) <= 0:
                raise ValueError('config value {} must be positive'.format(name))
        if self.zoom_factor <= 1:
            raise ValueError('config value zoom_factor must be greater than 1')
        if self.max_distance < self.min_distance:
            raise ValueError('max_distance must not be less than min_distance')
        if not self.min_distance <= self.distance <= self.max_distance:
            raise ValueError('distance must lie between min_distance and max_distance')
        if self.right <= self.left or self.top <= self.bottom:
            raise ValueError('bad plot bounds in config: {}'.format(self.bounds))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.left, self.right, self.bottom, self.top)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> 'ViewConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError('unknown config keys: {}'.format(', '.join(unknown)))
        missing = sorted(known - set(data))
        if missing:
            raise ValueError('missing config keys: {}'.format(', '.join(missing)))
        values = dict(data)
        eye = values['eye']
        if not isinstance(eye, (list, tuple)) or len(eye) != 3:
            raise ValueError('config value eye must be three numbers, got {!r}'.format(eye))
        values['eye'] = Vector3(*eye)
        return cls(**values)


def config_sources(path: Optional[Union[str, Path]] = None) -> Tuple[Path, ...]:
    """Return the existing config files to merge, lowest priority first."""
    sources = [_BUNDLED_CONFIG]

    user = _USER_CONFIG.expanduser()
    if user.is_file():
        sources.append(user)

    env_path = os.environ.get(SVGPLOT_CONFIG)
    if env_path:
        env = Path(env_path).expanduser()
        if not env.is_file():
            raise ValueError('{} names a missing file: {}'.format(SVGPLOT_CONFIG, env))
        sources.append(env)

    if path is not None:
        explicit = Path(path).expanduser()
        if not explicit.is_file():
            raise ValueError('config file not found: {}'.format(explicit))
        sources.append(explicit)

    return tuple(sources)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError('config file {} must contain a mapping'.format(path))
    return data


def load_view_config(path: Optional[Union[str, Path]] = None) -> ViewConfig:
    """Load and validate the merged view configuration."""
    merged: Dict[str, Any] = {}
    for source in config_sources(path):
        log.debug('reading view config from %s', source)
        merged.update(_read_yaml(source))
    return ViewConfig.from_mapping(merged)
