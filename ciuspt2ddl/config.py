import copy
import json
import logging
import logging.config
import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import envtoml
from dotenv import load_dotenv


class ContractReferenceSource(str, Enum):
    """Which UBL element feeds the DDL `ContractReferenceNumber`."""

    ORDER_REFERENCE = "order_reference"  # cac:OrderReference/cbc:ID
    BUYER_REFERENCE = "buyer_reference"  # cbc:BuyerReference


@dataclass(frozen=True)
class MappingConfig:
    """Choices the UBL -> DDL mapping leaves open."""

    contract_reference_source: ContractReferenceSource = ContractReferenceSource.ORDER_REFERENCE


@dataclass(frozen=True)
class OutputConfig:
    """JSON rendering options."""

    indent: int = 2


@dataclass(frozen=True)
class AppConfig:
    """Root container for all configuration sections."""

    mapping: MappingConfig = field(default_factory=MappingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


DEFAULT_LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "ciuspt2ddl": {"level": "DEBUG", "handlers": ["console"], "propagate": False},
    },
}


def _get_path_from_env(env_var: str, check_exists: bool = True) -> Path | None:
    """Get an optional path from an environment variable and validate it."""
    path_str = os.getenv(env_var)
    if not path_str:
        return None
    path = Path(path_str)
    if check_exists and not path.exists():
        raise FileNotFoundError(f"Path from '{env_var}' does not exist: {path}")
    return path


def _reject_unknown_keys(section_name: str, section: dict[str, Any], known: set[str]) -> None:
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown key(s) in [{section_name}]: {', '.join(unknown)}")


def _build_mapping_config(section: dict[str, Any]) -> MappingConfig:
    _reject_unknown_keys("mapping", section, {"contract_reference_source"})
    source = section.get("contract_reference_source", ContractReferenceSource.ORDER_REFERENCE.value)
    try:
        return MappingConfig(contract_reference_source=ContractReferenceSource(source))
    except ValueError as e:
        allowed = ", ".join(s.value for s in ContractReferenceSource)
        raise ValueError(f"Invalid contract_reference_source '{source}', expected one of: {allowed}") from e


def _build_output_config(section: dict[str, Any]) -> OutputConfig:
    _reject_unknown_keys("output", section, {"indent"})
    indent = section.get("indent", OutputConfig.indent)
    # a quoted value such as indent = "2" stays a string
    try:
        indent = int(indent)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid indent '{indent}', expected a non-negative integer") from e
    if indent < 0:
        raise ValueError(f"Invalid indent '{indent}', expected a non-negative integer")
    return OutputConfig(indent=indent)


@lru_cache(maxsize=1)
def get_config(
    config_file: str | Path | None = None,
    env_file: str | Path | None = None,
) -> AppConfig:
    """
    Load configuration from files and environment, returning a frozen AppConfig instance.

    Loading precedence:
    1. Arguments passed to this function.
    2. Environment variables (CIUSPT2DDL_CONFIG_FILE, CIUSPT2DDL_ENV_FILE).
    3. Built-in defaults when no configuration file is found.

    The result is cached, so subsequent calls with the same arguments will not reload files.

    Args:
        config_file: Path to the TOML config file. Overrides CIUSPT2DDL_CONFIG_FILE.
        env_file: Path to a .env file loaded before the TOML, so that ${ENV_VAR}
            placeholders in the TOML can be resolved. Overrides CIUSPT2DDL_ENV_FILE.

    Returns:
        An immutable, nested AppConfig object.
    """
    env_file_path = Path(env_file) if env_file else _get_path_from_env("CIUSPT2DDL_ENV_FILE")
    if env_file_path is not None:
        if not env_file_path.exists():
            raise FileNotFoundError(f"Environment file not found at: {env_file_path}")
        load_dotenv(env_file_path)

    config_file_path = Path(config_file) if config_file else _get_path_from_env("CIUSPT2DDL_CONFIG_FILE")
    if config_file_path is None:
        return AppConfig()

    if not config_file_path.exists():
        raise FileNotFoundError(f"Configuration file not found at: {config_file_path}")

    # envtoml resolves ${ENV_VAR} placeholders within the TOML values
    with open(config_file_path, "rb") as f:
        toml_config = envtoml.load(f)

    return AppConfig(
        mapping=_build_mapping_config(toml_config.get("mapping", {})),
        output=_build_output_config(toml_config.get("output", {})),
    )


def setup_logging(verbose: bool = False, logging_config_file: str | Path | None = None) -> None:
    """
    Setup logging for the CLI application.

    This should be called from the CLI entrypoint. It is not part of the
    core configuration loading to keep the library decoupled from logging setup.
    Logs always go to stderr; stdout carries the JSON output.
    """
    config_path = (
        Path(logging_config_file) if logging_config_file else _get_path_from_env("CIUSPT2DDL_LOGGING_CONFIG_FILE")
    )
    logging_config: dict[str, Any]
    if config_path is not None:
        with open(config_path) as f:
            logging_config = json.load(f)
    else:
        logging_config = copy.deepcopy(DEFAULT_LOGGING)

    if verbose and "console" in logging_config.get("handlers", {}):
        # For CLI, make console more verbose
        logging_config["handlers"]["console"]["level"] = "DEBUG"

    logging.config.dictConfig(logging_config)
