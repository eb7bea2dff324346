from __future__ import annotations

import os
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import BaseModel, Field, computed_field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

__all__ = [
    "DEFAULT_FAUCET_URL",
    "Config",
    "LogConfig",
    "get_config",
    "set_config",
    "set_data_dir",
]


DEFAULT_FAUCET_URL = "https://iyppmmnflwqrbezacmaf.supabase.co/functions/v1/claimMon"

_data_dir: str = ""
_config_dir: str = "config"


def config_file_path():
    return os.path.join(_data_dir, _config_dir, "config.yml")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A simple settings source class that loads variables from a YAML file

    Note: slightly adapted version of JsonConfigSettingsSource from docs.
    """

    _yaml_data: Dict[str, Any] | None = None

    @property
    def yaml_data(self) -> Dict[str, Any]:
        if self._yaml_data is None:
            yaml_file = config_file_path()
            if os.path.exists(yaml_file):
                with open(yaml_file, mode="r", encoding="utf-8") as f:
                    self._yaml_data = yaml.safe_load(f) or {}
            else:
                self._yaml_data = {}
        return self._yaml_data  # type: ignore

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        field_value = self.yaml_data.get(field_name)
        return field_value, field_name, False

    def prepare_field_value(
        self, field_name: str, field: FieldInfo, value: Any, value_is_complex: bool
    ) -> Any:
        return value

    def __call__(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}

        for field_name, field in self.settings_cls.model_fields.items():
            field_value, field_key, value_is_complex = self.get_field_value(
                field, field_name
            )
            field_value = self.prepare_field_value(
                field_name, field, field_value, value_is_complex
            )
            if field_value is not None:
                d[field_key] = field_value

        return d


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "FATAL", "CRITICAL"]


def set_data_dir(dirname: str):
    global _data_dir

    _data_dir = dirname


class LogConfig(BaseModel):
    m_dir: str = Field("logs", alias="dir")
    level: LogLevel = "INFO"
    filename: str = "faucet-relay.log"

    @computed_field
    @property
    def dir(self) -> str:
        return os.path.abspath(os.path.join(_data_dir, self.m_dir))


class Config(BaseSettings):
    log: LogConfig = Field(default_factory=LogConfig)

    faucet_url: str = DEFAULT_FAUCET_URL

    server_host: str = "0.0.0.0"
    server_port: int = 3000

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YamlConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


_config: Optional[Config] = None


def get_config():
    global _config

    if _config is None:
        _config = Config()  # type: ignore

    return _config


def set_config(config: Config):
    global _config
    _config = config
