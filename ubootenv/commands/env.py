import click

from ..store import Env, create_env_file
from .log import log_info, log_modify_file, log_skip_task, log_success, log_task
from .utils import handle_errors, parse_size, read_tool_config

best_effort_option = click.option(
    '--best-effort/--strict',
    default=None,
    help='Skip malformed entries instead of failing (default from config)',
)

def open_env(path, best_effort):
    if best_effort is None:
        best_effort = read_tool_config()['best_effort']
    return Env.open(path, best_effort=best_effort)

def parse_assignment(assignment):
    key, sep, value = assignment.partition('=')
    if not sep or not key:
        raise click.BadParameter(f'expected KEY=VALUE, got {assignment!r}')
    return key, value

@click.command(name='create')
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--size', type=str, help='Total size in bytes, decimal or 0x hex (default from config)')
@click.option('--set', 'assignments', multiple=True, metavar='KEY=VALUE', help='Initial variable')
@handle_errors
def create(path, size, assignments):
    size = parse_size(size if size is not None else read_tool_config()['size'])
    log_task('Creating U-Boot environment')
    log_info(f'Size: {size} (0x{size:x})')
    env_dict = dict(parse_assignment(a) for a in assignments)
    env = create_env_file(env_dict, size, path)
    log_modify_file(path)
    log_success(f'{len(env)} variables written')

@click.command(name='print')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('keys', nargs=-1)
@best_effort_option
@handle_errors
def print_env(path, keys, best_effort):
    env = open_env(path, best_effort)
    if not keys:
        click.echo(env.render(), nl=False)
        return
    for key in keys:
        if key not in env:
            log_skip_task(f'{key} is not set')
            continue
        click.echo(f'{key}={env.get(key)}')

@click.command(name='get')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@best_effort_option
@handle_errors
def get(path, key, best_effort):
    env = open_env(path, best_effort)
    click.echo(env.get(key))

@click.command(name='set')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.argument('value', required=False, default='')
@best_effort_option
@handle_errors
def set_var(path, key, value, best_effort):
    if not key or '=' in key:
        raise click.BadParameter('key must be non-empty and must not contain "="', param_hint='KEY')
    env = open_env(path, best_effort)
    if value:
        log_task(f'Setting {key}')
    else:
        log_task(f'Removing {key}')
    env.set(key, value)
    env.save()
    log_modify_file(path)

@click.command(name='import')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('script', type=click.File('rb'))
@best_effort_option
@handle_errors
def import_script(path, script, best_effort):
    env = open_env(path, best_effort)
    name = getattr(script, 'name', '-')
    if not isinstance(name, str) or name == '-':
        name = 'stdin'
    log_task(f'Importing variables from {name}')
    env.import_text(script)
    env.save()
    log_modify_file(path)
    log_success(f'{len(env)} variables in environment')
