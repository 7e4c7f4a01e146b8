import click
import functools
import json
import logging
import os
import platform

from ..errors import UBootEnvError
from .log import log_error, log_modify_file

DEFAULT_CONFIG = {
    'size': 0x20000,
    'best_effort': False,
}

def read_json_file(file_path):
    """
    Read a JSON object from file_path; a missing or blank file reads as {}.
    """
    if not os.path.exists(file_path):
        return {}
    with open(file_path, 'r') as f:
        content = f.read().strip()
    if not content:
        return {}
    try:
        config = json.loads(content)
    except json.JSONDecodeError as err:
        log_error(f'Invalid config file {file_path}: {err}')
        raise click.exceptions.Exit(1)
    if not isinstance(config, dict):
        log_error(f'Invalid config file {file_path}: expected a JSON object')
        raise click.exceptions.Exit(1)
    return config

def write_json_file(file_path, content):
    with open(file_path, 'w') as f:
        json.dump(content, f, indent=4, sort_keys=True)
        f.write('\n')
    log_modify_file(file_path)

def get_config_path():
    config_dir = os.getenv('UBOOTENV_CONFIG_DIRECTORY')

    if config_dir is None:
        system = platform.system()
        if system == 'Linux':
            config_dir = os.path.join(os.path.expanduser('~'), '.config', 'ubootenv')
        elif system == 'Windows':
            config_dir = os.path.join(os.environ.get('APPDATA', os.path.expanduser('~')), 'ubootenv')
        elif system == 'Darwin':
            config_dir = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support', 'ubootenv')
        else:
            raise RuntimeError(f'Unsupported platform: {system}')

    if not os.path.exists(config_dir):
        os.makedirs(config_dir)

    return config_dir

def get_tool_config_path():
    return os.path.join(get_config_path(), 'ubootenv.json')

def read_tool_config():
    config = dict(DEFAULT_CONFIG)
    config.update(read_json_file(get_tool_config_path()))
    return config

def parse_size(value):
    """
    Parse a size given in decimal or 0x-prefixed hex.
    """
    if isinstance(value, int):
        return value
    try:
        size = int(value, 0)
    except ValueError:
        raise click.BadParameter(f'{value!r} is not a valid size')
    if size <= 0:
        raise click.BadParameter(f'size must be positive, got {size}')
    return size

def setup_logging(verbose):
    level = 'DEBUG' if verbose else os.getenv('UBOOTENV_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

def fail(err):
    log_error(str(err))
    raise click.exceptions.Exit(1)

def handle_errors(func):
    """
    Report storage and I/O errors as a failed command instead of a traceback.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (UBootEnvError, OSError) as err:
            fail(err)
    return wrapper
