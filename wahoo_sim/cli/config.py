"""
Configuration management for the Wahoo simulator CLI.

Settings are layered: built-in defaults, then a JSON config file, then
environment variables, then command-line options.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..simulation.runner import SimulationSettings

logger = logging.getLogger(__name__)


class SimConfig:
    """Manages simulator configuration settings."""

    DEFAULT_CONFIG = {
        # Board
        'num_legs': 6,
        'leg_height': 5,
        'num_players': 6,

        # Simulation
        'num_games': 100,
        'num_sets': 20,
        'max_turns': 5000,
        'seed': None,
        'workers': 1,

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    INT_KEYS = ('num_legs', 'leg_height', 'num_players', 'num_games',
                'num_sets', 'max_turns', 'seed', 'workers')
    BOOL_KEYS = ('verbose', 'quiet')

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            Path.cwd() / '.wahoo-sim.json',
            Path.cwd() / 'wahoo-sim.json',
            Path.home() / '.wahoo-sim.json',
            Path.home() / '.config' / 'wahoo-sim.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                    self._config.update(file_config)
                    logger.debug(f"Loaded config from {self._config_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        env_mappings = {
            'WAHOO_SIM_NUM_LEGS': 'num_legs',
            'WAHOO_SIM_LEG_HEIGHT': 'leg_height',
            'WAHOO_SIM_NUM_PLAYERS': 'num_players',
            'WAHOO_SIM_NUM_GAMES': 'num_games',
            'WAHOO_SIM_NUM_SETS': 'num_sets',
            'WAHOO_SIM_MAX_TURNS': 'max_turns',
            'WAHOO_SIM_SEED': 'seed',
            'WAHOO_SIM_WORKERS': 'workers',
            'WAHOO_SIM_VERBOSE': 'verbose',
            'WAHOO_SIM_QUIET': 'quiet',
        }

        for env_var, config_key in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if config_key in self.BOOL_KEYS:
                self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
            elif config_key in self.INT_KEYS:
                try:
                    self._config[config_key] = int(env_value)
                except ValueError:
                    logger.warning(f"Invalid integer value for {config_key}: {env_value}")
            else:
                self._config[config_key] = env_value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def update(self, updates: Dict[str, Any]):
        """Update configuration with the values that are not None."""
        self._config.update({k: v for k, v in updates.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def to_settings(self) -> SimulationSettings:
        """Build simulation settings from the current configuration."""
        return SimulationSettings(
            num_legs=self._config['num_legs'],
            leg_height=self._config['leg_height'],
            num_players=self._config['num_players'],
            num_games=self._config['num_games'],
            num_sets=self._config['num_sets'],
            max_turns=self._config['max_turns'],
            seed=self._config['seed'],
            workers=self._config['workers'],
        )

    def __repr__(self):
        return f"SimConfig(config_file={self._config_file})"


# Global configuration instance
_config = None

def get_config() -> SimConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = SimConfig()
    return _config

def set_config(config: SimConfig):
    """Set global configuration instance."""
    global _config
    _config = config
