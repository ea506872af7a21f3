"""Shell configuration.

Holds the identity strings, host label and canned system information a
session renders. Defaults reproduce the Android-style demo terminal.
"""

import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.paths import normalize

DEFAULT_UNAME_FULL = (
    "Linux localhost 5.10.198-android14-9-g8a3a #1 SMP PREEMPT "
    "Thu Jan 1 00:00:00 UTC 2026 aarch64 GNU/Linux"
)

DEFAULT_BANNER = (
    "Welcome to Android Termux-style Emulator v1.0.0",
    'Type "help" for a list of available commands.',
)

# Environment variables that override ShellConfig fields
ENV_PREFIX = "VTS_"
ENV_FIELDS = ("user_name", "root_name", "host_label", "home_path", "shell_name")


class ShellConfig(BaseModel):
    """Static configuration shared by every session created with it.

    Args:
        user_name: Identity shown for the standard privilege level.
        root_name: Identity shown for the elevated privilege level.
        host_label: Host name shown in the prompt.
        home_path: Home directory; start directory and target of a bare `cd`.
        shell_name: Name used as prefix for "command not found" messages.
        uname_short: Output of `uname`.
        uname_full: Output of `uname -a`.
        banner: Lines placed in the transcript of a new session.
        max_history_size: Maximum recalled commands kept (None = unlimited).
    """

    model_config = ConfigDict(frozen=True)

    user_name: str = Field(default="user", min_length=1, description="Standard identity")
    root_name: str = Field(default="root", min_length=1, description="Elevated identity")
    host_label: str = Field(default="localhost", min_length=1, description="Prompt host label")
    home_path: str = Field(default="/home/user", description="Home directory")
    shell_name: str = Field(default="bash", min_length=1, description="Shell name for errors")
    uname_short: str = Field(default="Linux", description="Output of uname")
    uname_full: str = Field(default=DEFAULT_UNAME_FULL, description="Output of uname -a")
    banner: tuple[str, ...] = Field(
        default=DEFAULT_BANNER, description="Lines shown when a session starts"
    )
    max_history_size: Optional[int] = Field(
        default=None, description="Maximum recalled commands kept (None = unlimited)"
    )

    @field_validator("home_path")
    @classmethod
    def validate_home_path(cls, v: str) -> str:
        """Normalize home_path to an absolute path.

        Args:
            v: The home_path value.

        Returns:
            The normalized path.

        Raises:
            ValueError: If home_path is not absolute.
        """
        if not v.startswith("/"):
            raise ValueError("home_path must be an absolute path")
        return normalize(v)

    @field_validator("max_history_size")
    @classmethod
    def validate_max_history_size(cls, v: Optional[int]) -> Optional[int]:
        """Validate that max_history_size is positive if provided."""
        if v is not None and v <= 0:
            raise ValueError("max_history_size must be positive")
        return v

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None, **overrides: Any) -> "ShellConfig":
        """Create a config from VTS_* environment variables.

        Recognized variables: VTS_USER_NAME, VTS_ROOT_NAME, VTS_HOST_LABEL,
        VTS_HOME_PATH, VTS_SHELL_NAME. Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ).
            **overrides: Explicit field values that win over the environment.

        Returns:
            New ShellConfig instance.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field_name in ENV_FIELDS:
            value = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if value:
                values[field_name] = value
        values.update(overrides)
        return cls(**values)
