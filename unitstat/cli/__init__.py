import click

from unitstat.cli.commands.collect import collect


@click.group()
def cli() -> None:
    """unitstat - Collect systemd unit statistics.
    """
    pass


cli.add_command(collect)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
