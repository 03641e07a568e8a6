"""
Settings management for Polymath Monitor
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import Optional

CONFIG_DIR = os.path.expanduser("~/.config/polymath-monitor")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass
class Settings:
    """Application settings"""

    # Characters shown in the one-line trace node preview
    preview_max_chars: int = 50

    # Display radius hint carried on every graph node
    node_size: int = 5

    # Leading embedding values shown by the inspector
    embedding_preview_dims: int = 3

    # Replacement policies: "cardinality", "always" or "deep"
    graph_refresh_policy: str = "cardinality"
    trace_refresh_policy: str = "always"

    def save(self):
        """Save settings to config file"""
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, or return defaults"""
        if not os.path.exists(CONFIG_FILE):
            return cls()

        try:
            with open(CONFIG_FILE, "r") as f:
                data = json.load(f)

            # Filter to only known fields (ignore obsolete settings)
            valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
            filtered_data = {k: v for k, v in data.items() if k in valid_fields}

            return cls(**filtered_data)
        except (OSError, ValueError, TypeError, AttributeError):
            return cls()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def save_settings():
    """Save the global settings"""
    if _settings is not None:
        _settings.save()
