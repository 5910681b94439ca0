import json
import logging
from pathlib import Path
from typing import Any, Dict


def load_settings(config_file: Path | None, required: bool = True) -> Dict[str, Any]:
    try:
        if config_file:
            with open(config_file, 'r') as config_handle:
                return json.load(config_handle)
    except (OSError, ValueError) as e:
        if required:
            logging.error(f"Error loading config file {config_file}: {e}")
        return {}

    return {}
