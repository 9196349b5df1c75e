"""Configuration loader and validation for budget verification settings."""

from pathlib import Path
from typing import Any, Optional
import logging
import sys

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .utils.exceptions import ConfigurationError
from .utils.logging_config import level_from_name

logger = logging.getLogger(__name__)

FILTER_FILE_NAME = "filter.json"


class ColumnMapping(BaseModel):
    """Zero-based column positions of a ledger row."""

    timestamp: int = Field(ge=0)
    description: int = Field(ge=0)
    amount: int = Field(ge=0)
    details: Optional[int] = Field(default=None, ge=0)


class BankInputConfig(BaseModel):
    """Configuration for bank statement parsing."""

    encoding: str = "utf-8"
    delimiter: str = ","
    date_format: str = "%m/%d/%Y"
    header_labels: list[str] = Field(
        default_factory=lambda: ["Date", "Description", "Amount"]
    )
    # Rows between the header and the first transaction
    rows_after_header: int = Field(default=1, ge=0)
    columns: ColumnMapping = Field(
        default_factory=lambda: ColumnMapping(timestamp=0, description=1, amount=2)
    )


class BudgetInputConfig(BaseModel):
    """Configuration for budget export parsing."""

    encoding: str = "utf-8"
    delimiter: str = ","
    date_format: str = "%m/%d/%Y"
    header_rows: int = Field(default=1, ge=0)
    columns: ColumnMapping = Field(
        default_factory=lambda: ColumnMapping(
            timestamp=0, description=2, details=3, amount=4
        )
    )


class InputConfig(BaseModel):
    """Configuration for input file parsing."""

    bank: BankInputConfig = Field(default_factory=BankInputConfig)
    budget: BudgetInputConfig = Field(default_factory=BudgetInputConfig)


class MatchingSettings(BaseModel):
    """Settings for the reconciliation engine."""

    # Matches need fewer days than this between budget entry and bank date
    date_match_range_days: int = Field(default=7, ge=0)


class FilterConfig(BaseModel):
    """Location of the filter rule file."""

    path: Optional[str] = None


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level_from_name(value)
        return value.upper()


class ReconConfig(BaseModel):
    """Main configuration model for budget verification."""

    input: InputConfig = Field(default_factory=InputConfig)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    config_file_path: Optional[str] = None

    def filter_path(self) -> Path:
        """
        Resolve the filter file location.

        Without an explicit path the file is looked up next to the running
        executable.
        """
        if self.filters.path:
            return Path(self.filters.path).expanduser()
        return default_filter_path()


def default_filter_path() -> Path:
    """Return ``filter.json`` in the directory of the running executable."""
    return Path(sys.argv[0]).resolve().parent / FILTER_FILE_NAME


def get_default_config() -> dict[str, Any]:
    """Return the default configuration as a dictionary."""
    return {
        "input": {
            "bank": {
                "encoding": "utf-8",
                "delimiter": ",",
                "date_format": "%m/%d/%Y",
                "header_labels": ["Date", "Description", "Amount"],
                "rows_after_header": 1,
                "columns": {
                    "timestamp": 0,
                    "description": 1,
                    "amount": 2,
                    "details": None,
                },
            },
            "budget": {
                "encoding": "utf-8",
                "delimiter": ",",
                "date_format": "%m/%d/%Y",
                "header_rows": 1,
                "columns": {
                    "timestamp": 0,
                    "description": 2,
                    "details": 3,
                    "amount": 4,
                },
            },
        },
        "matching": {
            "date_match_range_days": 7,
        },
        "filters": {
            "path": None,
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file": None,
        },
    }


def load_config(config_path: Optional[Path] = None) -> ReconConfig:
    """
    Load configuration from a YAML file or use defaults.

    Args:
        config_path: Path to YAML configuration file (optional)

    Returns:
        ReconConfig object with loaded or default settings

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    config_dict = get_default_config()

    if config_path is not None:
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading configuration from: {config_path}")
        try:
            with open(config_path, "r") as f:
                user_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}"
            )

        # Deep merge user config into defaults
        config_dict = _deep_merge(config_dict, user_config)
        config_dict["config_file_path"] = str(config_path)
    else:
        logger.info("Using default configuration")

    try:
        return ReconConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary to merge on top

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def generate_default_config(output_path: Path) -> None:
    """
    Generate a default configuration file.

    Args:
        output_path: Path to write the configuration file
    """
    yaml_content = """# Budget verifier configuration
# Column positions are zero-based

"""
    yaml_content += yaml.dump(
        get_default_config(), default_flow_style=False, sort_keys=False
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(yaml_content)

    logger.info(f"Generated configuration file: {output_path}")
