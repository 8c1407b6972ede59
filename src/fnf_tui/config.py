# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating fnf-tui configuration.
#
# Sources, later ones win:
#   1. $XDG_CONFIG_HOME/fnf-tui/config.toml  (default: ~/.config/fnf-tui/)
#   2. FNF_* environment variables
#   3. System keyring for secrets still missing (service "fnf-tui")
#
# Secrets (application secret, consumer key) are never written back to the
# config file.
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import keyring
import tomli_w  # For writing TOML (tomllib is read-only)
from keyring.errors import KeyringError

from fnf_tui.session import SessionStyle

logger = logging.getLogger(__name__)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in XDG paths and as keyring service
APP_NAME = "fnf-tui"

# Prefix of the environment overrides
ENV_PREFIX = "FNF"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for fnf-tui.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/fnf-tui/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class OVHConfig:
    """
    OVH API access.

    Attributes:
        endpoint: API endpoint name ("ovh-eu", "ovh-ca", ...) or URL.
        app_key: Application key.
        app_secret: Application secret (env or keyring preferred).
        consumer_key: Consumer key (env or keyring preferred).
        domain: Mail domain holding the redirections.
    """
    endpoint: str = "ovh-eu"
    app_key: str = ""
    app_secret: str = ""
    consumer_key: str = ""
    domain: str = ""


@dataclass
class ForwardConfig:
    """
    Forwarding defaults.

    Attributes:
        default_email: Destination for random redirections and the value
                       pre-filled in the creation form.
    """
    default_email: str = ""


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Styles are Rich style strings ("color(205)", "bold magenta", ...).
    """
    table_height: int = 7
    top_margin: int = 1
    focused_style: str = "color(205)"
    blurred_style: str = ""
    cursor_style: str = "color(205)"

    def session_style(self) -> SessionStyle:
        """Build the per-session style handed to the controller."""
        return SessionStyle(
            focused=self.focused_style,
            blurred=self.blurred_style,
            cursor=self.cursor_style,
            table_height=self.table_height,
            top_margin=self.top_margin,
        )


# Environment variable suffix -> (section, attribute)
ENV_KEYS: dict[str, tuple[str, str]] = {
    "OVH_ENDPOINT": ("ovh", "endpoint"),
    "OVH_APP_KEY": ("ovh", "app_key"),
    "OVH_APP_SECRET": ("ovh", "app_secret"),
    "OVH_CONSUMER_KEY": ("ovh", "consumer_key"),
    "OVH_DOMAIN": ("ovh", "domain"),
    "DEFAULT_EMAIL": ("forward", "default_email"),
}

# Values looked up in the keyring when still empty
SECRET_KEYS = ("app_secret", "consumer_key")


@dataclass
class Config:
    """
    Main configuration container for fnf-tui.

    Usage:
        >>> config = Config.load()
        >>> config.validate()
        >>> config.ovh.domain
        'example.com'
    """
    ovh: OVHConfig = field(default_factory=OVHConfig)
    forward: ForwardConfig = field(default_factory=ForwardConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        environ: dict[str, str] | None = None,
        *,
        use_keyring: bool = True,
    ) -> "Config":
        """
        Load configuration from file, environment and keyring.

        A missing config file is not an error; environment variables alone
        are enough.

        Args:
            path: Config file (default: XDG location).
            environ: Environment mapping (default: os.environ).
            use_keyring: Look up missing secrets in the system keyring.

        Returns:
            Loaded Config object. Call validate() before use.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file: {e}") from e
            config = cls._from_dict(data)
        else:
            logger.debug(f"No config file at {config_path}")
            config = cls()

        config.apply_env(os.environ if environ is None else environ)
        if use_keyring:
            config.load_secrets()
        return config

    def apply_env(self, environ: dict[str, str]) -> None:
        """Override values with FNF_* environment variables."""
        for suffix, (section, attr) in ENV_KEYS.items():
            name = f"{ENV_PREFIX}_{suffix}"
            if name in environ:
                setattr(getattr(self, section), attr, environ[name])

    def load_secrets(self) -> None:
        """Fill empty secrets from the system keyring."""
        for attr in SECRET_KEYS:
            if getattr(self.ovh, attr):
                continue
            try:
                secret = keyring.get_password(APP_NAME, attr)
            except KeyringError as e:
                logger.warning(f"Keyring lookup for {attr} failed: {e}")
                continue
            if secret:
                setattr(self.ovh, attr, secret)

    def validate(self) -> None:
        """
        Check that every required value is set.

        Raises:
            ConfigError: Naming the first missing value's variable.
        """
        for suffix, (section, attr) in ENV_KEYS.items():
            if not getattr(getattr(self, section), attr):
                raise ConfigError(
                    f"{ENV_PREFIX}_{suffix} environment variable is not defined"
                )

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration (without secrets) to the config file.

        Returns:
            The path written.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)
        return config_path

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create a Config object from a parsed TOML dictionary."""
        config = cls()

        ovh = data.get("ovh", {})
        config.ovh = OVHConfig(
            endpoint=ovh.get("endpoint", "ovh-eu"),
            app_key=ovh.get("app_key", ""),
            app_secret=ovh.get("app_secret", ""),
            consumer_key=ovh.get("consumer_key", ""),
            domain=ovh.get("domain", ""),
        )

        forward = data.get("forward", {})
        config.forward = ForwardConfig(
            default_email=forward.get("default_email", ""),
        )

        ui = data.get("ui", {})
        config.ui = UIConfig(
            table_height=ui.get("table_height", 7),
            top_margin=ui.get("top_margin", 1),
            focused_style=ui.get("focused_style", "color(205)"),
            blurred_style=ui.get("blurred_style", ""),
            cursor_style=ui.get("cursor_style", "color(205)"),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """Convert Config to a dictionary for TOML serialization."""
        return {
            "ovh": {
                "endpoint": self.ovh.endpoint,
                "app_key": self.ovh.app_key,
                "domain": self.ovh.domain,
            },
            "forward": {
                "default_email": self.forward.default_email,
            },
            "ui": {
                "table_height": self.ui.table_height,
                "top_margin": self.ui.top_margin,
                "focused_style": self.ui.focused_style,
                "blurred_style": self.ui.blurred_style,
                "cursor_style": self.ui.cursor_style,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or validating configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """Print the configuration paths."""
    print(f"Config:       {get_xdg_config_home()}")
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Keyring:      service '{APP_NAME}', users {', '.join(SECRET_KEYS)}")
