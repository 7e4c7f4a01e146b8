import click
from ubootenv.commands.configure import configure
from ubootenv.commands.env import create, get, import_script, print_env, set_var
from ubootenv.commands.utils import setup_logging

@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    setup_logging(verbose)

cli.add_command(configure)
cli.add_command(create)
cli.add_command(print_env)
cli.add_command(get)
cli.add_command(set_var)
cli.add_command(import_script)

if __name__ == "__main__":
    cli()
