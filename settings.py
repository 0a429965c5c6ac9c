# settings.py
# 程序配置：内置默认值，可通过 YAML 文件覆盖
#
# Example config.yaml:
#
#   window_title: "IPv4 地址转换"
#   binary_display: flat
#   initial_address: 10.0.0.1
#   history_size: 20

import copy
from typing import Any, Dict, Optional

import yaml

from ipconv import ConversionError, DottedDecimalCodec

DEFAULT_SETTINGS: Dict[str, Any] = {
    'window_title': "IPv4 地址记法转换",
    'window_width': 900,
    'window_height': 520,
    'binary_display': 'grouped',
    'initial_address': '192.168.1.1',
    'history_size': 50,
    'log_level': 'WARNING',
}

BINARY_DISPLAY_MODES = ('grouped', 'flat')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _require_dict(d: Any, path: str) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError(f"Expected mapping at '{path}', got {type(d).__name__}")
    return d


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    return _require_dict(data, "/")


def _positive_int(settings: Dict[str, Any], key: str) -> None:
    value = settings[key]
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Invalid value at '{key}': {value!r}. Expected a positive integer")


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    unknown = sorted(set(settings) - set(DEFAULT_SETTINGS))
    if unknown:
        raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")

    if not isinstance(settings['window_title'], str):
        raise ValueError(f"Invalid value at 'window_title': {settings['window_title']!r}")
    for key in ('window_width', 'window_height', 'history_size'):
        _positive_int(settings, key)

    mode = str(settings['binary_display']).strip().lower()
    if mode not in BINARY_DISPLAY_MODES:
        raise ValueError(f"Invalid value at 'binary_display': {settings['binary_display']!r}. Valid: grouped | flat")
    settings['binary_display'] = mode

    level = str(settings['log_level']).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid value at 'log_level': {settings['log_level']!r}. Valid: {' | '.join(LOG_LEVELS)}")
    settings['log_level'] = level

    address = settings['initial_address']
    if address is None:
        address = ''
    if not isinstance(address, str):
        raise ValueError(f"Invalid value at 'initial_address': {address!r}")
    if address:
        try:
            DottedDecimalCodec.parse(address)
        except ConversionError as e:
            raise ValueError(f"Invalid value at 'initial_address': {e}") from e
    settings['initial_address'] = address
    return settings


def load_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """Return the default settings, overridden by the YAML mapping at ``path`` if given."""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if path:
        settings.update(_load_yaml(path))
    return validate_settings(settings)
