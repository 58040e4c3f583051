import os
import sys
import json
from typing import Dict

DEFAULT_CONFIG = {
    'testing_mode': False,
    'decimal_places': 2,
}


def get_data_dir() -> str:
    """Directory holding config.json and the log file"""
    data_dir = os.getenv('HOURCALC_DATA')
    if not data_dir:
        data_dir = os.path.expanduser('~/.config/hourcalc')
    return data_dir


def load_config() -> Dict:
    """Load config.json from the data directory, falling back to defaults"""
    config = dict(DEFAULT_CONFIG)
    config_file = os.path.join(get_data_dir(), 'config.json')
    if not os.path.exists(config_file):
        return config

    try:
        with open(config_file, 'r') as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error loading config: {str(e)}", file=sys.stderr)
        return config

    if not isinstance(loaded, dict):
        print(f"Error loading config: expected an object in {config_file}", file=sys.stderr)
        return config

    if isinstance(loaded.get('testing_mode'), bool):
        config['testing_mode'] = loaded['testing_mode']

    # bool is an int subclass, so rule it out explicitly
    places = loaded.get('decimal_places')
    if isinstance(places, int) and not isinstance(places, bool) and places >= 0:
        config['decimal_places'] = places

    return config


def get_testing_mode() -> bool:
    """Check if testing mode is enabled"""
    return load_config()['testing_mode']
