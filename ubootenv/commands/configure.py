import click
from .log import log_info, log_success, log_task
from .utils import get_tool_config_path, parse_size, read_json_file, write_json_file

@click.command()
@click.option('--size', type=str, help='Default environment size, decimal or 0x hex')
@click.option('--best-effort/--strict', default=None, help='Default parsing mode when opening environments')
def configure(size, best_effort):
    log_task('Configuring ubootenv')
    config_file = get_tool_config_path()
    config = read_json_file(config_file)
    update_config(config, size, best_effort)
    write_json_file(config_file, config)
    for key, value in sorted(config.items()):
        log_info(f'{key}: {value}')
    log_success('ubootenv configured successfully')

def update_config(config, size, best_effort):
    if size is not None:
        config['size'] = parse_size(size)
    if best_effort is not None:
        config['best_effort'] = best_effort
