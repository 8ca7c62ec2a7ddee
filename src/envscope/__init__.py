"""envscope — domain-scoped lookup of scalar configuration values."""

from envscope.convenience import (
    env_bool,
    env_int,
    env_optional_str,
    env_str,
    get_resolver,
    use_resolver,
)
from envscope.resolver import Resolver
from envscope.sources import (
    ContextEnvironmentSource,
    MemoryValueSource,
    ProcessEnvironmentSource,
    ValueSource,
)

__version__ = "0.1.0"

__all__ = [
    "ContextEnvironmentSource",
    "MemoryValueSource",
    "ProcessEnvironmentSource",
    "Resolver",
    "ValueSource",
    "__version__",
    "env_bool",
    "env_int",
    "env_optional_str",
    "env_str",
    "get_resolver",
    "use_resolver",
]
