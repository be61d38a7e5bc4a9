#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import configparser
import logging
import os
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any, ClassVar, Final, Literal

from .discovery import EndpointCache
from .exceptions import ConfigError
from .http.aiohttp import AIOHTTPClient
from .identity import AWSCredentialsResolver, create_default_chain
from .interfaces import URI, EndpointResolver
from .interfaces.http import HTTPClient, HTTPRequestConfiguration
from .utils import strict_parse_bool

logger: Final = logging.getLogger(__name__)

SOURCE_CONSTRUCTOR = "constructor"
SOURCE_ENVIRONMENT = "environment"
SOURCE_CREDENTIALS_FILE = "credentials_file"
SOURCE_CONFIG_FILE = "config_file"
SOURCE_DEFAULT = "default"
SOURCE_IN_CODE_UPDATE = "in_code_update"

SourceType = Literal[
    "constructor",
    "environment",
    "credentials_file",
    "config_file",
    "default",
    "in_code_update",
]

type Loader = Callable[[], Awaitable[Mapping[str, Any]]]


class ConfigValue:
    """Configuration value with metadata about its source"""

    def __init__(self, value: Any, source: SourceType):
        self.value = value
        self.source = source

    def __repr__(self) -> str:
        return f"ConfigValue({self.value!r}, source={self.source!r})"


class Config:
    """Client configuration with precedence-based resolution.

    Each field is resolved from, in order: the constructor, the environment, the
    active profile of ``~/.aws/config``, the active profile of ``~/.aws/credentials``
    and finally the field's default. The source of every value is kept and can be
    read with :py:meth:`get_config_value_object`.

    The constructor uses Ellipsis as its default so that "not provided" can be told
    apart from "explicitly set to None".

    Fields are described in ``CONFIG_FIELDS``. Each entry needs a ``default`` and
    either a ``type`` or a ``validator``. ``env_var`` and ``config_key`` name the
    environment variable and profile key to read, and ``converter`` names a method
    that normalizes values read from text sources. A method named
    ``_resolve_<field>`` replaces the standard resolution of that field.
    """

    CONFIG_FIELDS: ClassVar[dict[str, dict[str, Any]]] = {
        "aws_credentials_identity_resolver": {
            "default": None,
            "type": object,
        },
        "endpoint_resolver": {
            "default": None,
            "type": object,
        },
        "endpoint_cache": {
            "default": None,
            "type": EndpointCache,
        },
        "transport": {
            "default": None,
            "type": object,
        },
        "http_request_config": {
            "default": None,
            "type": HTTPRequestConfiguration | None,
        },
        "aws_access_key_id": {
            "env_var": "AWS_ACCESS_KEY_ID",
            "config_key": "aws_access_key_id",
            "default": None,
            "type": str | None,
        },
        "aws_secret_access_key": {
            "env_var": "AWS_SECRET_ACCESS_KEY",
            "config_key": "aws_secret_access_key",
            "default": None,
            "type": str | None,
        },
        "aws_session_token": {
            "env_var": "AWS_SESSION_TOKEN",
            "config_key": "aws_session_token",
            "default": None,
            "type": str | None,
        },
        "endpoint_uri": {
            "env_var": "AWS_ENDPOINT_URL",
            "config_key": "endpoint_url",
            "default": None,
            "validator": "_validate_endpoint_uri",
        },
        "endpoint_discovery_enabled": {
            "env_var": "AWS_ENABLE_ENDPOINT_DISCOVERY",
            "config_key": "endpoint_discovery_enabled",
            "default": False,
            "converter": "_convert_bool",
            "type": bool,
        },
        "region": {
            "env_var": "AWS_REGION",
            "config_key": "region",
            "default": None,
            "type": str | None,
        },
        "scheme": {
            "default": "https",
            "validator": "_validate_scheme",
        },
    }

    def __init__(
        self,
        *,
        aws_access_key_id: str | None = ...,  # type: ignore[assignment]
        aws_secret_access_key: str | None = ...,  # type: ignore[assignment]
        aws_session_token: str | None = ...,  # type: ignore[assignment]
        endpoint_uri: str | URI | None = ...,  # type: ignore[assignment]
        endpoint_discovery_enabled: bool | str = ...,  # type: ignore[assignment]
        region: str | None = ...,  # type: ignore[assignment]
        scheme: str = ...,  # type: ignore[assignment]
        aws_credentials_identity_resolver: AWSCredentialsResolver | None = ...,  # type: ignore[assignment]
        endpoint_resolver: EndpointResolver | None = ...,  # type: ignore[assignment]
        endpoint_cache: EndpointCache = ...,  # type: ignore[assignment]
        transport: HTTPClient = ...,  # type: ignore[assignment]
        http_request_config: HTTPRequestConfiguration | None = ...,  # type: ignore[assignment]
    ):
        self._constructor_values = {
            k: v for k, v in locals().items() if k != "self" and v is not ...
        }
        self._resolved = False

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    async def resolve(
        self,
        *,
        environment_loader: Loader | None = None,
        config_file_loader: Loader | None = None,
        credentials_file_loader: Loader | None = None,
    ) -> None:
        """Resolve configuration from all sources.

        :param environment_loader: Custom environment loader function.
        :param config_file_loader: Custom config file loader function.
        :param credentials_file_loader: Custom credentials file loader function.
        :raises ConfigError: If a resolved value is invalid.
        """
        if self._resolved:
            raise RuntimeError(
                "Config has already been resolved. Multiple calls to resolve() are not "
                "allowed."
            )

        env_values, config_file_values, credentials_file_values = await asyncio.gather(
            (environment_loader or self._load_environment_values)(),
            (config_file_loader or self._load_config_file_values)(),
            (credentials_file_loader or self._load_credentials_file_values)(),
        )

        for field_name, field_info in self.CONFIG_FIELDS.items():
            resolved_value = await self._resolve_field(
                field_name,
                self._constructor_values,
                env_values,
                config_file_values,
                credentials_file_values,
                field_info["default"],
            )
            logger.debug(
                "Resolved %s from %s", field_name, resolved_value.source
            )
            setattr(self, f"_{field_name}", resolved_value)

        self._resolved = True

    async def _load_environment_values(self) -> Mapping[str, str]:
        return os.environ

    async def _load_config_file_values(self) -> dict[str, Any]:
        def _read_config() -> dict[str, str]:
            config_path = Path(
                os.environ.get("AWS_CONFIG_FILE", Path.home() / ".aws" / "config")
            )
            if not config_path.exists():
                return {}

            parser = configparser.ConfigParser()
            parser.read(config_path)

            profile = os.environ.get("AWS_PROFILE", "default")
            section_name = f"profile {profile}" if profile != "default" else "default"

            if section_name not in parser:
                return {}

            return dict(parser[section_name])

        return await asyncio.to_thread(_read_config)

    async def _load_credentials_file_values(self) -> dict[str, Any]:
        def _read_credentials() -> dict[str, str]:
            credentials_path = Path(
                os.environ.get(
                    "AWS_SHARED_CREDENTIALS_FILE", Path.home() / ".aws" / "credentials"
                )
            )
            if not credentials_path.exists():
                return {}

            parser = configparser.ConfigParser()
            parser.read(credentials_path)

            profile = os.environ.get("AWS_PROFILE", "default")

            if profile not in parser:
                return {}

            return dict(parser[profile])

        return await asyncio.to_thread(_read_credentials)

    async def _resolve_field(
        self,
        field_name: str,
        constructor_values: Mapping[str, Any],
        env_values: Mapping[str, Any],
        config_file_values: Mapping[str, Any],
        credentials_file_values: Mapping[str, Any],
        default_value: Any,
    ) -> ConfigValue:
        custom_resolver = getattr(self, f"_resolve_{field_name}", None)
        if custom_resolver:
            return await custom_resolver(constructor_values, default_value)

        field_config = self.CONFIG_FIELDS[field_name]
        env_var = field_config.get("env_var")
        config_key = field_config.get("config_key")

        if field_name in constructor_values:
            value = constructor_values[field_name]
            source = SOURCE_CONSTRUCTOR
        elif env_var and env_var in env_values:
            value = env_values[env_var]
            source = SOURCE_ENVIRONMENT
        elif config_key and config_key in config_file_values:
            value = config_file_values[config_key]
            source = SOURCE_CONFIG_FILE
        elif config_key and config_key in credentials_file_values:
            value = credentials_file_values[config_key]
            source = SOURCE_CREDENTIALS_FILE
        else:
            value = default_value
            source = SOURCE_DEFAULT

        if converter := field_config.get("converter"):
            value = getattr(self, converter)(value, field_name)

        if validator := field_config.get("validator"):
            getattr(self, validator)(value, field_name)
        elif not isinstance(value, field_config["type"]):
            actual_name = type(value).__name__
            expected = field_config["type"]
            expected_name = getattr(expected, "__name__", str(expected))
            raise ConfigError(f"{field_name} must be {expected_name}, got {actual_name}")

        return ConfigValue(value, source)

    def _convert_bool(self, value: Any, field_name: str) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return strict_parse_bool(value.strip())
            except ValueError as e:
                raise ConfigError(
                    f"{field_name} must be true or false, got {value!r}"
                ) from e
        raise ConfigError(f"{field_name} must be a bool, got {type(value).__name__}")

    def _validate_endpoint_uri(self, value: Any, field_name: str) -> None:
        if (
            value is not None
            and not isinstance(value, str)
            and not (hasattr(value, "scheme") and hasattr(value, "host"))
        ):
            raise ConfigError(f"{field_name} must be a string or URI")

    def _validate_scheme(self, value: Any, field_name: str) -> None:
        if value not in ("http", "https"):
            raise ConfigError(f"{field_name} must be 'http' or 'https', got {value!r}")

    async def _resolve_aws_credentials_identity_resolver(
        self, constructor_values: Mapping[str, Any], default_value: Any
    ) -> ConfigValue:
        resolver = constructor_values.get("aws_credentials_identity_resolver")
        if resolver is not None:
            return ConfigValue(resolver, SOURCE_CONSTRUCTOR)
        return ConfigValue(create_default_chain(), SOURCE_DEFAULT)

    async def _resolve_endpoint_cache(
        self, constructor_values: Mapping[str, Any], default_value: Any
    ) -> ConfigValue:
        if "endpoint_cache" in constructor_values:
            return ConfigValue(constructor_values["endpoint_cache"], SOURCE_CONSTRUCTOR)
        return ConfigValue(EndpointCache(), SOURCE_DEFAULT)

    async def _resolve_transport(
        self, constructor_values: Mapping[str, Any], default_value: Any
    ) -> ConfigValue:
        if "transport" in constructor_values:
            return ConfigValue(constructor_values["transport"], SOURCE_CONSTRUCTOR)
        return ConfigValue(AIOHTTPClient(), SOURCE_DEFAULT)

    def get_config_value_object(self, field_name: str) -> ConfigValue:
        """Get the raw ConfigValue object for a field"""
        if not self._resolved:
            raise RuntimeError("Config must be resolved before accessing values")
        return getattr(self, f"_{field_name}")

    def _value(self, field_name: str) -> Any:
        return self.get_config_value_object(field_name).value

    @property
    def aws_access_key_id(self) -> str | None:
        return self._value("aws_access_key_id")

    @aws_access_key_id.setter
    def aws_access_key_id(self, value: str | None) -> None:
        self._aws_access_key_id = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def aws_secret_access_key(self) -> str | None:
        return self._value("aws_secret_access_key")

    @aws_secret_access_key.setter
    def aws_secret_access_key(self, value: str | None) -> None:
        self._aws_secret_access_key = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def aws_session_token(self) -> str | None:
        return self._value("aws_session_token")

    @aws_session_token.setter
    def aws_session_token(self, value: str | None) -> None:
        self._aws_session_token = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def aws_credentials_identity_resolver(self) -> AWSCredentialsResolver:
        return self._value("aws_credentials_identity_resolver")

    @aws_credentials_identity_resolver.setter
    def aws_credentials_identity_resolver(self, value: AWSCredentialsResolver) -> None:
        self._aws_credentials_identity_resolver = ConfigValue(
            value, SOURCE_IN_CODE_UPDATE
        )

    @property
    def endpoint_resolver(self) -> EndpointResolver | None:
        return self._value("endpoint_resolver")

    @endpoint_resolver.setter
    def endpoint_resolver(self, value: EndpointResolver | None) -> None:
        self._endpoint_resolver = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def endpoint_cache(self) -> EndpointCache:
        return self._value("endpoint_cache")

    @endpoint_cache.setter
    def endpoint_cache(self, value: EndpointCache) -> None:
        self._endpoint_cache = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def endpoint_uri(self) -> str | URI | None:
        return self._value("endpoint_uri")

    @endpoint_uri.setter
    def endpoint_uri(self, value: str | URI | None) -> None:
        self._endpoint_uri = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def endpoint_discovery_enabled(self) -> bool:
        return self._value("endpoint_discovery_enabled")

    @endpoint_discovery_enabled.setter
    def endpoint_discovery_enabled(self, value: bool) -> None:
        self._endpoint_discovery_enabled = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def http_request_config(self) -> HTTPRequestConfiguration | None:
        return self._value("http_request_config")

    @http_request_config.setter
    def http_request_config(self, value: HTTPRequestConfiguration | None) -> None:
        self._http_request_config = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def region(self) -> str | None:
        return self._value("region")

    @region.setter
    def region(self, value: str | None) -> None:
        self._region = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def scheme(self) -> str:
        return self._value("scheme")

    @scheme.setter
    def scheme(self, value: str) -> None:
        self._validate_scheme(value, "scheme")
        self._scheme = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def transport(self) -> HTTPClient:
        return self._value("transport")

    @transport.setter
    def transport(self, value: HTTPClient) -> None:
        self._transport = ConfigValue(value, SOURCE_IN_CODE_UPDATE)
