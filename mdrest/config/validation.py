"""Configuration validation utilities."""

import re
from dataclasses import dataclass, fields
from typing import Any
from urllib.parse import urlparse

from .defaults import EndpointPaths

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_base_url(value: Any) -> list[ConfigIssue]:
        """Validate the API base URL."""
        errors = []

        if not isinstance(value, str):
            errors.append(ConfigIssue(
                field="base_url",
                message="Must be a string",
                value=value
            ))
            return errors

        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(ConfigIssue(
                field="base_url",
                message="Must be an absolute http(s) URL",
                value=value
            ))
        elif value.endswith("/"):
            errors.append(ConfigIssue(
                field="base_url",
                message="Must not end with a slash",
                value=value
            ))

        return errors

    @staticmethod
    def validate_paths(paths: dict[str, Any]) -> list[ConfigIssue]:
        """Validate endpoint path templates."""
        errors = []
        known = {f.name for f in fields(EndpointPaths)}

        for name, template in paths.items():
            field_name = f"paths.{name}"

            if name not in known:
                errors.append(ConfigIssue(
                    field=field_name,
                    message="Unknown endpoint",
                    value=template
                ))
                continue

            if not isinstance(template, str) or not template.startswith("/"):
                errors.append(ConfigIssue(
                    field=field_name,
                    message="Must be a string starting with '/'",
                    value=template
                ))
                continue

            # Anything left after removing well-formed placeholders is unbalanced
            stripped = _PLACEHOLDER.sub("", template)
            if "{" in stripped or "}" in stripped:
                errors.append(ConfigIssue(
                    field=field_name,
                    message="Unbalanced path placeholder",
                    value=template
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        errors = []

        errors.extend(ConfigValidator.validate_base_url(config.get("base_url")))

        paths = config.get("paths", {})
        if not isinstance(paths, dict):
            errors.append(ConfigIssue(
                field="paths",
                message="Must be a mapping of endpoint name to path template",
                value=paths
            ))
        else:
            errors.extend(ConfigValidator.validate_paths(paths))

        return errors
