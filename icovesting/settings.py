"""Project configuration.

The project sections of ``brownie-config.yaml`` (``token``, ``logging`` and the
price feed entries under ``networks``) are validated with frozen pydantic
models. Everything else in the file belongs to brownie and is ignored here.
``${VAR}`` references are expanded from the environment before parsing.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from web3 import Web3

from icovesting.exceptions import ConfigError
from icovesting.log import LOG_LEVELS

DEFAULT_CONFIG_FILE = "brownie-config.yaml"
DEVELOPMENT = "development"


class TokenSettings(BaseModel):
    """Token parameters passed to the contract constructor."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(default="Vesting", min_length=1)
    symbol: str = Field(default="ICOV", min_length=1)
    max_supply: int = Field(default=100, gt=0, description="Cap in whole tokens")


class LoggingSettings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal[LOG_LEVELS] = "INFO"
    json_output: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class MockFeedSettings(BaseModel):
    """Parameters of the MockV3Aggregator deployed on development networks."""

    model_config = {"frozen": True, "extra": "forbid"}

    decimals: int = Field(default=8, ge=0, le=18)
    initial_answer: int = Field(default=2000 * 10**8, gt=0)


class NetworkSettings(BaseModel):
    """Price feed source for one brownie network."""

    # brownie keeps its own keys (gas_limit, cmd_settings, ...) in the same section
    model_config = {"frozen": True, "extra": "ignore"}

    eth_usd_price_feed: str | None = None
    mock_price_feed: MockFeedSettings | None = None

    @field_validator("eth_usd_price_feed")
    @classmethod
    def validate_feed_address(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not Web3.is_address(value):
            raise ValueError(f"'{value}' is not an address")
        return Web3.to_checksum_address(value)

    @model_validator(mode="after")
    def validate_feed_source(self) -> "NetworkSettings":
        if self.eth_usd_price_feed is not None and self.mock_price_feed is not None:
            raise ValueError("set either eth_usd_price_feed or mock_price_feed, not both")
        return self

    @property
    def is_live_feed(self) -> bool:
        return self.eth_usd_price_feed is not None

    @property
    def mock_feed(self) -> MockFeedSettings:
        return self.mock_price_feed or MockFeedSettings()


class ProjectSettings(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    token: TokenSettings = Field(default_factory=TokenSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    default_network: str = DEVELOPMENT
    networks: dict[str, NetworkSettings] = Field(default_factory=lambda: {DEVELOPMENT: NetworkSettings()})

    @model_validator(mode="before")
    @classmethod
    def split_default_network(cls, data: Any) -> Any:
        # brownie keeps the default network name next to the network sections
        if isinstance(data, dict) and isinstance(data.get("networks"), dict):
            networks = dict(data["networks"])
            default = networks.pop("default", DEVELOPMENT)
            data = {**data, "networks": networks, "default_network": default}
        return data

    @model_validator(mode="after")
    def validate_default_network(self) -> "ProjectSettings":
        if self.default_network not in self.networks:
            raise ValueError(f"networks.default '{self.default_network}' has no section under networks")
        return self

    def network(self, name: str | None = None) -> tuple[str, NetworkSettings]:
        """Return ``(name, settings)`` for ``name`` or the default network."""
        name = name or self.default_network
        try:
            return name, self.networks[name]
        except KeyError:
            known = ", ".join(sorted(self.networks))
            raise ConfigError(f"unknown network '{name}' (configured: {known})") from None


def load_settings(path: str | Path | None = None) -> ProjectSettings:
    """Load and validate the project configuration.

    Without ``path`` the brownie config in the working directory is used if
    it exists, otherwise built-in defaults apply.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_FILE)
        if not path.exists():
            return ProjectSettings()
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(os.path.expandvars(text)) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    try:
        return ProjectSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration in {path}:\n{exc}") from exc
