import logging
from pathlib import Path

import pytest
import yaml

from budget_verifier.config import (
    FILTER_FILE_NAME,
    get_default_config,
    generate_default_config,
    load_config,
)
from budget_verifier.utils.exceptions import ConfigurationError
from budget_verifier.utils.logging_config import level_from_name


def test_defaults():
    config = load_config()

    assert config.matching.date_match_range_days == 7
    assert config.input.bank.header_labels == ["Date", "Description", "Amount"]
    assert config.input.bank.rows_after_header == 1
    assert config.input.bank.columns.details is None
    assert config.input.budget.columns.amount == 4
    assert config.input.budget.columns.details == 3
    assert config.config_file_path is None


def test_user_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "matching": {"date_match_range_days": 3},
                "input": {"budget": {"delimiter": ";"}},
                "filters": {"path": "/etc/budget/filter.json"},
            }
        )
    )

    config = load_config(path)

    assert config.matching.date_match_range_days == 3
    assert config.input.budget.delimiter == ";"
    assert config.input.budget.date_format == "%m/%d/%Y"
    assert config.input.bank.delimiter == ","
    assert config.filter_path() == Path("/etc/budget/filter.json")
    assert config.config_file_path == str(path)


def test_default_filter_path_is_next_to_executable():
    config = load_config()

    assert config.filter_path().name == FILTER_FILE_NAME
    assert config.filter_path().is_absolute()


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path).matching.date_match_range_days == 7


@pytest.mark.parametrize(
    "content",
    [
        "matching: {date_match_range_days: -1}\n",
        "matching: {date_match_range_days: soon}\n",
        "- just\n- a list\n",
        "matching: [unclosed\n",
        "logging: {level: verbose}\n",
    ],
)
def test_invalid_config_raises(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_log_level_name_is_normalised(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging: {level: debug}\n")

    assert load_config(path).logging.level == "DEBUG"


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "absent.yaml")


def test_generate_default_config_round_trips(tmp_path):
    path = tmp_path / "nested" / "config.yaml"

    generate_default_config(path)

    assert yaml.safe_load(path.read_text()) == get_default_config()
    assert load_config(path).matching.date_match_range_days == 7


def test_level_from_name():
    assert level_from_name("warning") == logging.WARNING

    with pytest.raises(ValueError):
        level_from_name("loud")
