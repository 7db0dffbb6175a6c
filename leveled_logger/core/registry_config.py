"""
Registry configuration management
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union
import os

from leveled_logger.core.log_level import Severity


DEFAULT_LEVEL = Severity.INFO
DEFAULT_ENV_VAR = "LLT_DEBUG"


@dataclass
class RegistryConfig:
    """
    Level registry configuration.

    ``level`` is validated by the registry itself, with the usual fallback
    to DEFAULT_LEVEL, so raw values coming from the environment are allowed.
    A level of None disables logging.
    """

    # Threshold settings
    level: Union[Severity, int, str, None] = DEFAULT_LEVEL
    env_var: str = DEFAULT_ENV_VAR

    # Console settings
    colored_output: bool = False
    stream: Optional[object] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.env_var, str) or not self.env_var:
            raise ValueError("env_var must be a non-empty string")
        if self.stream is not None and not hasattr(self.stream, "write"):
            raise TypeError("stream must provide a write() method")

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_var: str = DEFAULT_ENV_VAR,
    ) -> "RegistryConfig":
        """
        Create configuration seeded from the environment.

        Args:
            environ: Mapping to read from (default: os.environ)
            env_var: Variable holding the initial level

        Returns:
            Configuration whose level is the raw variable value, or the
            default level when the variable is unset or empty
        """
        environ = os.environ if environ is None else environ
        value = environ.get(env_var)
        return cls(level=value if value else DEFAULT_LEVEL, env_var=env_var)

    @classmethod
    def debug_config(cls) -> "RegistryConfig":
        """Create configuration for debugging."""
        return cls(level=Severity.DEBUG, colored_output=True)

    @classmethod
    def quiet_config(cls) -> "RegistryConfig":
        """Create configuration with logging disabled."""
        return cls(level=None)
