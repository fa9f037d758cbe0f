"""
Configuration loader for default derivation parameters.

Handles loading and validating keystretch configuration files.
"""

import json
import sys
from pathlib import Path
from typing import Optional

from .models import DerivationConfig

CONFIG_FILENAME = "keystretch.json"


def load_config(config_path: Optional[Path] = None) -> DerivationConfig:
    """
    Load derivation defaults from a JSON file.

    Args:
        config_path: Path to the configuration file. If None, looks for
                    'keystretch.json' next to the executable/script.

    Returns:
        DerivationConfig object with validated configuration

    Raises:
        ValueError: If config is invalid
    """
    if config_path is None:
        if getattr(sys, 'frozen', False):
            base_dir = Path(sys.executable).parent
        else:
            base_dir = Path(__file__).parent.parent

        config_path = base_dir / CONFIG_FILENAME

    config_path = Path(config_path)
    if not config_path.exists():
        print(f"Warning: Config file '{config_path}' not found. Using default configuration.", file=sys.stderr)
        return DerivationConfig.default()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")
    except OSError as e:
        raise ValueError(f"Error reading config file: {e}")

    if not isinstance(data, dict):
        raise ValueError("Invalid configuration: top level must be a JSON object")

    config = DerivationConfig.from_dict(data)

    is_valid, error_message = config.validate()
    if not is_valid:
        raise ValueError(f"Invalid configuration: {error_message}")

    return config


def create_sample_config(output_path: Path):
    """
    Create a sample configuration file.

    Args:
        output_path: Path where to save the sample config
    """
    sample_config = DerivationConfig.default().to_dict()
    sample_config["_comment"] = "Default PBKDF2 parameters. Adjust values as needed."
    sample_config["_instructions"] = {
        "rounds": "PBKDF2 iteration count (cost per output block)",
        "length": "Derived key length in bytes",
        "hash": "Hash under HMAC: sha1, sha224, sha256, sha384 or sha512",
        "salt_size": "Length of randomly generated salts in bytes",
        "output_format": "How keys are printed: hex, base64 or raw",
    }

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)

    print(f"Sample configuration created at: {output_path}")
