"""Agent configuration: immutable per invocation, validated up front."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ConfigurationError


class Language(str, Enum):
    """Natural language of the model's explanatory fields."""

    CHINESE = "chinese"
    ENGLISH = "english"

    @classmethod
    def parse(cls, value: str | Language) -> Language:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"Invalid language: {value!r}") from None

    def __str__(self) -> str:
        return self.value


class AgentConfig(BaseModel):
    """Endpoint credentials, model and loop limits for one agent run."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="Provider API key")
    base_url: AnyHttpUrl = Field(..., description="OpenAI-compatible API base URL")
    model: str = Field(..., min_length=1, description="Model identifier")
    language: Language = Field(Language.CHINESE, description="Response language")
    temperature: float = Field(0.7, ge=0.0, le=2.0)
    max_steps: int = Field(10, ge=1, description="Planning attempts before giving up")
    max_tokens: int | None = Field(None, ge=1)

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Language.parse(value.lower())
        return value

    @classmethod
    def load(cls, **values: Any) -> AgentConfig:
        """Build a config, reporting validation failures as ConfigurationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise ConfigurationError(f"Invalid agent configuration: {fields}", e) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> AgentConfig:
        env = os.environ if environ is None else environ
        missing = [k for k in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_API_BASE") if not env.get(k)]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")
        values: dict[str, Any] = {
            "api_key": env["OPENAI_API_KEY"],
            "model": env["OPENAI_MODEL"],
            "base_url": env["OPENAI_API_BASE"],
        }
        if env.get("AGENT_LANGUAGE"):
            values["language"] = env["AGENT_LANGUAGE"]
        if env.get("AGENT_MAX_STEPS"):
            values["max_steps"] = env["AGENT_MAX_STEPS"]
        if env.get("AGENT_TEMPERATURE"):
            values["temperature"] = env["AGENT_TEMPERATURE"]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.load(**values)
