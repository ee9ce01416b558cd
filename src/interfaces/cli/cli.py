"""CLIエントリーポイント."""

import click

from src.interfaces.cli.commands.quake import quake


@click.group()
def main():
    """quake-template CLI."""
    pass


main.add_command(quake)


if __name__ == "__main__":
    main()
