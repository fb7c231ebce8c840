import pytest

from gridsnake.config import Config, ConfigError
from gridsnake.main import config_from_args, parse_args


def test_defaults():
    cfg = Config().validate()
    assert cfg.grid_size == 30
    assert cfg.tick_ms == 100


@pytest.mark.parametrize(
    "kwargs",
    [{"grid_size": 1}, {"tick_ms": 0}, {"cell_size": 0}, {"max_food_attempts": 0}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        Config(**kwargs).validate()


def test_cli_arguments(tmp_path):
    args = parse_args([
        "--grid-size", "12",
        "--tick-ms", "80",
        "--seed", "4",
        "--high-score-file", str(tmp_path / "hs.json"),
    ])
    cfg = config_from_args(args)
    assert (cfg.grid_size, cfg.tick_ms, cfg.seed) == (12, 80, 4)
    assert cfg.high_score_path == tmp_path / "hs.json"
    assert cfg.window_size[0] == 12 * cfg.cell_size


def test_cli_rejects_bad_grid():
    with pytest.raises(ConfigError):
        config_from_args(parse_args(["--grid-size", "1"]))
