"""
Configuration loading and validation for Log Alerts.
"""

from datetime import date
from pathlib import Path
from string import Template
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator


def filter_placeholders(today: date) -> dict[str, str]:
    """
    Values available to ``filter_line_by`` templates.

    ``${month}`` and ``${day}`` match the classic syslog prefix,
    e.g. ``Jan  5``.
    """
    return {
        "month": today.strftime("%b"),
        "day": str(today.day),
        "day2": f"{today.day:02d}",
        "year": str(today.year),
        "iso_date": today.isoformat(),
    }


class FilterTemplate(Template):
    """
    Template that only substitutes braced placeholders like ``${day}``.

    ``$$``, ``$name`` and a bare ``$`` are regex text and pass through unchanged.
    """
    pattern = r"""
    \$(?:
      (?P<escaped>(?!))                   |
      (?P<named>(?!))                     |
      \{(?P<braced>[_a-z][_a-z0-9]*)\}   |
      (?P<invalid>(?!))
    )
    """


def render_filter(pattern: str | None, today: date | None = None) -> str | None:
    """
    Substitute date placeholders in a filter pattern.

    Only ``${name}`` placeholders are replaced; unknown names, ``$$`` and
    regex anchors are left as-is.

    Args:
        pattern: The configured pattern, or None for no filtering
        today: Date to render (default: today)

    Returns:
        The rendered pattern, or None
    """
    if pattern is None:
        return None
    return FilterTemplate(pattern).safe_substitute(filter_placeholders(today or date.today()))


class LogConfig(BaseModel):
    """A log file to check."""
    path: str = Field(..., min_length=1)
    filter_line_by: str | None = None  # regex, may contain ${month}/${day}/... placeholders
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Configured name, or the file name."""
        return self.name or Path(self.path).name

    def resolve_filter(self, today: date | None = None) -> str | None:
        """Return the filter pattern rendered for ``today``."""
        return render_filter(self.filter_line_by, today)


class EmailConfig(BaseModel):
    """SMTP settings and recipients for email notifications."""
    recipients: list[str] = Field(..., min_length=1)
    from_addr: str = "logalerts@localhost"
    smtp_host: str = "localhost"
    smtp_port: int = 25
    username: str | None = None
    password: str | None = None
    use_tls: bool = False
    timeout: float = 30.0
    subject_prefix: str = "[logalerts]"

    @field_validator("recipients")
    @classmethod
    def _check_recipients(cls, value: list[str]) -> list[str]:
        for address in value:
            if "@" not in address:
                raise ValueError(f"Invalid recipient address: {address}")
        return value


class NotifierConfig(BaseModel):
    """Configuration for notification destinations."""
    type: str  # "email", "console", "webhook"
    config: dict[str, Any] = Field(default_factory=dict)


class Config(BaseModel):
    """Main configuration for Log Alerts."""
    logs: list[LogConfig] = Field(..., min_length=1)
    email: EmailConfig | None = None
    notifiers: list[NotifierConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_notification_route(self) -> "Config":
        if self.email is None and not self.notifiers:
            raise ValueError("At least one of 'email' or 'notifiers' must be configured")
        return self

    def notifier_configs(self) -> list[NotifierConfig]:
        """All notifiers to use, with the email section first."""
        configs = []
        if self.email is not None:
            configs.append(NotifierConfig(type="email", config=self.email.model_dump()))
        configs.extend(self.notifiers)
        return configs


def load_config(config_path: str | Path) -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with path.open('r', encoding='utf-8') as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    try:
        return Config.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
