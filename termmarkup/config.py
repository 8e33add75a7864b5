import os
from pathlib import Path
from typing import Any, get_args, get_origin

import dotenv
from pydantic import BaseModel, field_validator
from typing_extensions import Self

from .log import escape_tag, logger_wrapper

logger = logger_wrapper("Config")

ENV_PREFIX = "TERMMARKUP_"


def _construct_parser(type):
    if get_origin(type) is list:
        vt = get_args(type)[0]
        return lambda v: [vt(_) for _ in v.split(",")]
    if get_origin(type) is dict:
        kt, vt = get_args(type)
        return lambda v: {
            kt(k.strip()): vt(v.strip())
            for k, v in (pair.split(":", 1) for pair in v.split(",") if pair)
        }
    if type is bool:
        return lambda v: v.lower() in {"true", "1"}
    return type


def read_env(cls: type[BaseModel], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect field values of `cls` from `PREFIX_FIELD` variables."""
    values = {}
    for key, field in cls.model_fields.items():
        env_value = os.getenv(prefix + key.upper(), None)
        if env_value is None:
            continue
        values[key] = _construct_parser(field.annotation)(env_value)
    return values


class MarkupConfig(BaseModel):
    # log skipped tags and attributes while parsing
    debug: bool = False
    # extra color names, resolved before the built-in names
    color_aliases: dict[str, str] = {}

    @field_validator("color_aliases")
    @classmethod
    def lower_alias_names(cls, value: dict[str, str]) -> dict[str, str]:
        return {k.lower(): v for k, v in value.items()}

    @classmethod
    def from_env(cls, env_file: str | Path | None = ".env") -> Self:
        if env_file is not None:
            dotenv.load_dotenv(env_file)
        injected = read_env(cls)
        if injected:
            logger.debug("Loaded from environment: " + escape_tag(", ".join(
                f"{k}={v}" for k, v in injected.items())))
        return cls.model_validate(injected)
