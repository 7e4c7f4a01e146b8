import click

def log_task(message):
    click.secho(f'==> {message}', fg='blue', bold=True, err=True)

def log_info(message):
    click.echo(f'    {message}', err=True)

def log_success(message):
    click.secho(f'    {message}', fg='green', err=True)

def log_skip_task(message):
    click.secho(f'--> {message}', fg='yellow', err=True)

def log_modify_file(file_path):
    click.secho(f'    Wrote {file_path}', fg='cyan', err=True)

def log_error(message):
    click.secho(f'Error: {message}', fg='red', err=True)
