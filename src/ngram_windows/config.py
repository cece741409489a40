from __future__ import annotations

import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Pattern

import yaml

from .errors import InvalidConfiguration
from .windowing import create_strategy, validate_window_size

DEFAULT_SPLIT_PATTERN = r"\s+"


@dataclass(slots=True)
class NgramConfig:
    """Configuration options for the n-gram pipeline."""

    n: int = 2
    separator: str = " "
    token_split_pattern: str | Pattern[str] = DEFAULT_SPLIT_PATTERN
    strategy: str = "direct"
    id_field: str = "doc_id"
    text_field: str = "text"
    workers: int = 1

    def validate(self) -> "NgramConfig":
        """Raise InvalidConfiguration for any unusable option; return self."""
        validate_window_size(self.n)
        if not isinstance(self.separator, str):
            raise InvalidConfiguration(
                f"separator must be a string, got {type(self.separator).__name__}."
            )
        self.compiled_pattern()
        create_strategy(self.strategy)
        for name in ("id_field", "text_field"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidConfiguration(f"{name} must be a non-empty string.")
        if (
            isinstance(self.workers, bool)
            or not isinstance(self.workers, int)
            or self.workers < 1
        ):
            raise InvalidConfiguration(
                f"workers must be a positive integer, got {self.workers!r}."
            )
        return self

    def compiled_pattern(self) -> Pattern[str]:
        """Return the token split pattern compiled, validating it on the way."""
        return compile_split_pattern(self.token_split_pattern)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        data = dict(asdict(self))
        if isinstance(self.token_split_pattern, re.Pattern):
            data["token_split_pattern"] = self.token_split_pattern.pattern
        return data


def compile_split_pattern(pattern: str | Pattern[str]) -> Pattern[str]:
    """Compile a token boundary pattern; it must never match the empty string."""
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    elif isinstance(pattern, str):
        if not pattern:
            raise InvalidConfiguration("token_split_pattern must not be empty.")
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise InvalidConfiguration(
                f"Invalid token_split_pattern {pattern!r}: {exc}"
            ) from exc
    else:
        raise InvalidConfiguration(
            "token_split_pattern must be a string or compiled regular expression."
        )
    if not isinstance(compiled.pattern, str):
        raise InvalidConfiguration("token_split_pattern must be a text pattern.")
    if compiled.fullmatch("") is not None:
        raise InvalidConfiguration(
            f"token_split_pattern {compiled.pattern!r} matches the empty string."
        )
    return compiled


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(NgramConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> NgramConfig:
    """Build an NgramConfig from a dictionary-like input."""
    if data is None:
        return NgramConfig()
    return NgramConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> NgramConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise InvalidConfiguration("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> NgramConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return NgramConfig()
    return config_from_yaml(path)
