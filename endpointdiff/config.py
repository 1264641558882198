"""Configuration loading for EndpointDiff."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigError, PathSyntaxError
from .jsonpath_utils import PathExpression
from .models import Side
from .utils import merge_headers

DEFAULT_TIMEOUT_SECONDS = 10


@dataclass
class GeneralConfig:
    """Settings shared by both endpoints."""
    timeout: int = DEFAULT_TIMEOUT_SECONDS
    parallel: bool = True
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "GeneralConfig":
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("general must be a mapping", {"type": type(data).__name__})

        timeout = data.get("timeout")
        try:
            timeout = int(timeout) if timeout is not None else 0
        except (TypeError, ValueError):
            raise ConfigError("general.timeout must be an integer", {"timeout": timeout})
        if timeout <= 0:
            timeout = DEFAULT_TIMEOUT_SECONDS

        parallel = data.get("parallel")
        if parallel is None:
            parallel = True
        elif not isinstance(parallel, bool):
            raise ConfigError("general.parallel must be true or false", {"parallel": parallel})

        return cls(
            timeout=timeout,
            parallel=parallel,
            headers=_parse_headers(data.get("headers"), "general"),
        )


@dataclass
class EndpointSpec:
    """One endpoint to fetch and the JSONPath applied to its response."""
    url: str
    jsonpath: PathExpression
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[dict], name: str, side: Side) -> "EndpointSpec":
        if not isinstance(data, dict):
            raise ConfigError(f"{name} section is required", {"section": name})

        url = data.get("url")
        if not url:
            raise ConfigError(f"{name} URL is required", {"section": name})

        path = data.get("jsonpath")
        if not path:
            raise ConfigError(f"{name} JSONPath is required", {"section": name})

        try:
            jsonpath = PathExpression(str(path))
        except PathSyntaxError as e:
            raise PathSyntaxError(e.expression, e.reason, side=side.value) from e

        return cls(
            url=str(url),
            jsonpath=jsonpath,
            headers=_parse_headers(data.get("headers"), name),
        )

    def merged_headers(self, general: GeneralConfig) -> dict[str, str]:
        """General headers overridden by this endpoint's headers."""
        return merge_headers(general.headers, self.headers)


@dataclass
class DiffConfig:
    """Complete EndpointDiff configuration."""
    endpoint1: EndpointSpec
    endpoint2: EndpointSpec
    general: GeneralConfig = field(default_factory=GeneralConfig)

    @classmethod
    def from_dict(cls, data: Any) -> "DiffConfig":
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration must be a mapping",
                {"type": type(data).__name__}
            )

        return cls(
            general=GeneralConfig.from_dict(data.get("general")),
            endpoint1=EndpointSpec.from_dict(data.get("endpoint1"), "endpoint1", Side.LEFT),
            endpoint2=EndpointSpec.from_dict(data.get("endpoint2"), "endpoint2", Side.RIGHT),
        )


def load_config(config_path: str | Path) -> DiffConfig:
    """
    Load and validate a YAML (or JSON) configuration file.

    Every JSONPath is parsed here, so syntax errors surface before any
    request is made.

    Raises:
        ConfigError: the file is missing, unparsable or incomplete
        PathSyntaxError: an endpoint's jsonpath is malformed
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", {"path": str(path)})

    with open(path, 'r') as f:
        content = f.read()

    # JSON is valid YAML
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file: {e}", {"path": str(path)})

    return DiffConfig.from_dict(data)


def _parse_headers(headers: Any, section: str) -> dict[str, str]:
    if headers is None:
        return {}
    if not isinstance(headers, dict):
        raise ConfigError(
            f"{section}.headers must be a mapping",
            {"type": type(headers).__name__}
        )
    return {str(k): str(v) for k, v in headers.items()}
