"""
Configuration management for OGPT.

Provides a small, hierarchical configuration system with sensible defaults.
Supports both global (~/.config/ogpt/config.toml) and local (ogpt.toml) configurations.

Library objects never read the global configuration on their own: pass an
``OgptConfig`` explicitly (``OpenGraphProtocol(config=...)``). The cached
instance from ``get_config`` is meant for the command-line front end.
"""
import os
import tomli
import tomli_w
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from ogpt.constants import (
    URL_CHECK_TIMEOUT,
    USER_AGENT,
    META_ATTRIBUTE,
)


@dataclass
class OgptConfig:
    """
    OGPT configuration with sensible defaults.

    Configuration hierarchy (highest to lowest priority):
    1. Command-line arguments
    2. Environment variables (OGPT_*)
    3. Explicit config file
    4. Local config file (./ogpt.toml or ./.ogptrc)
    5. User config file (~/.config/ogpt/config.toml)
    6. System defaults
    """

    # URL verification (HEAD request per URL; off by default)
    verify_urls: bool = field(default=False)
    timeout: int = field(default=URL_CHECK_TIMEOUT)
    user_agent: str = field(default=USER_AGENT)

    # Output
    meta_attribute: str = field(default=META_ATTRIBUTE)  # property or name

    # Advanced
    log_level: str = field(default="WARNING")

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "OgptConfig":
        """
        Load configuration from files and environment.

        Args:
            config_file: Specific config file to load (applied after the user and local files)

        Returns:
            Merged configuration object
        """
        config = cls()

        user_config_path = Path.home() / ".config" / "ogpt" / "config.toml"
        if user_config_path.exists():
            config._merge(cls._load_toml(user_config_path))

        local_paths = [
            Path.cwd() / "ogpt.toml",
            Path.cwd() / ".ogptrc",
        ]

        for path in local_paths:
            if path.exists():
                config._merge(cls._load_toml(path))
                break

        if config_file and Path(config_file).exists():
            config._merge(cls._load_toml(Path(config_file)))

        # Environment variables win over files
        config._apply_env_vars()

        return config

    @staticmethod
    def _load_toml(path: Path) -> Dict[str, Any]:
        """Load TOML configuration file."""
        with open(path, "rb") as f:
            return tomli.load(f)

    def _merge(self, data: Dict[str, Any]):
        """Merge configuration data into this instance, ignoring unknown keys."""
        for key, value in data.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def _apply_env_vars(self):
        """Apply environment variables with OGPT_ prefix."""
        prefix = "OGPT_"
        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()
                if hasattr(self, config_key):
                    current_value = getattr(self, config_key)
                    # bool before int: bool is a subclass of int
                    if isinstance(current_value, bool):
                        setattr(self, config_key, value.lower() in ("true", "1", "yes"))
                    elif isinstance(current_value, int):
                        setattr(self, config_key, int(value))
                    else:
                        setattr(self, config_key, value)

    def save(self, path: Optional[Path] = None):
        """
        Save current configuration to TOML file.

        Args:
            path: Path to save to (defaults to user config)
        """
        if path is None:
            path = Path.home() / ".config" / "ogpt" / "config.toml"

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            tomli_w.dump(asdict(self), f)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


# Global configuration instance
_config: Optional[OgptConfig] = None


def get_config(reload: bool = False, config_file: Optional[Path] = None) -> OgptConfig:
    """
    Get the global configuration instance.

    Args:
        reload: Force reload configuration from files
        config_file: Specific config file to load

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None or reload:
        _config = OgptConfig.load(config_file)
    return _config


def init_config(config_file: Optional[Path] = None, **kwargs) -> OgptConfig:
    """
    Initialize configuration with command-line overrides.

    Args:
        config_file: Config file to load before applying overrides
        **kwargs: Configuration overrides; None values are ignored

    Returns:
        Configured instance
    """
    config = get_config(reload=config_file is not None, config_file=config_file)

    for key, value in kwargs.items():
        if hasattr(config, key) and value is not None:
            setattr(config, key, value)

    return config
