import json

import pytest

from cssvendor.config import PrefixConfig
from cssvendor.errors import ConfigError


def test_from_dict():
    config = PrefixConfig.from_dict({
        "preconfigured": True,
        "properties": {"transition": ["-webkit-*"]},
        "values": {"display": {"flex": ["-webkit-flex"]}},
    })
    assert config.preconfigured is True
    assert config.properties == {"transition": ["-webkit-*"]}
    assert config.values == {"display": {"flex": ["-webkit-flex"]}}


def test_defaults():
    config = PrefixConfig.from_dict({})
    assert config == PrefixConfig()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"properties": []},
        {"properties": {"transition": "-webkit-transition"}},
        {"properties": {"transition": [1]}},
        {"values": {"display": ["flex"]}},
        {"values": {"display": {"flex": "-webkit-flex"}}},
        {"preconfigured": "yes"},
        {"prefixes": {}},
    ],
)
def test_invalid(data):
    with pytest.raises(ConfigError):
        PrefixConfig.from_dict(data)


def test_from_path(tmp_path):
    path = tmp_path / "prefix.json"
    path.write_text(json.dumps({"properties": {"filter": ["-webkit-filter"]}}))
    assert PrefixConfig.from_path(path).properties == {"filter": ["-webkit-filter"]}


def test_from_path_errors(tmp_path):
    with pytest.raises(ConfigError):
        PrefixConfig.from_path(tmp_path / "missing.json")

    path = tmp_path / "broken.json"
    path.write_text("{")
    with pytest.raises(ConfigError):
        PrefixConfig.from_path(path)
