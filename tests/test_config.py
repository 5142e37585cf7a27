import pytest

from inktrail import DEFAULT_ALPHA, TrailConfig


def test_defaults():
    cfg = TrailConfig()
    assert cfg.alpha == DEFAULT_ALPHA
    assert cfg.raw_point_ttl == 0.4
    assert cfg.segment_ttl == 0.25


def test_dict_round_trip():
    cfg = TrailConfig(alpha=0.5, raw_point_ttl=1.0, segment_ttl=0.75)
    assert TrailConfig.from_dict(cfg.to_dict()) == cfg


def test_from_dict_partial():
    assert TrailConfig.from_dict({"alpha": 0.25}).segment_ttl == 0.25


def test_from_dict_rejects_unknown_key():
    with pytest.raises(KeyError):
        TrailConfig.from_dict({"tension": 0.5})


@pytest.mark.parametrize("field", ["raw_point_ttl", "segment_ttl"])
@pytest.mark.parametrize("value", [0, -0.1])
def test_non_positive_ttl_rejected(field, value):
    with pytest.raises(ValueError):
        TrailConfig(**{field: value})


def test_non_numeric_rejected():
    with pytest.raises(TypeError):
        TrailConfig(alpha="0.3")
