"""都道府県一覧コマンド."""

import click

from src.domain.value_objects.prefecture import PREFECTURES


@click.command()
def prefectures():
    """指定できる都道府県名を表示する."""
    for name in PREFECTURES:
        click.echo(name)
