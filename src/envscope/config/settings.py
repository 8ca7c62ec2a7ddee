"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ENVSCOPE_*`` prefix
  3. Code defaults

Configuration files are deliberately not read.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class EnvScopeSettings(BaseSettings):
    """Settings for the envscope CLI and for :meth:`Resolver.from_settings`.

    Attributes:
        domains: Domains to register, highest precedence first.  From the
            environment this is a JSON list, e.g. ``ENVSCOPE_DOMAINS='["ci"]'``.
        fallback_to_raw_key: Also try the raw key after domain-qualified keys.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENVSCOPE_",
    }

    domains: list[str] = Field(default_factory=list)
    fallback_to_raw_key: bool = False

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> EnvScopeSettings:
        """Construct settings from a CLI invocation.

        Flags left at their unset value (False, None, empty tuple) are
        dropped so they don't shadow ``ENVSCOPE_*`` variables.
        """
        overrides = {
            name: list(value) if isinstance(value, tuple) else value
            for name, value in cli_flags.items()
            if value not in (None, False, ())
        }
        return cls(**overrides)
