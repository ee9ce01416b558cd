"""地震情報テンプレート CLI コマンドグループ."""

import click

from src.common.logging import is_configured, setup_logging
from src.infrastructure.config.settings import get_settings
from src.interfaces.cli.commands.quake.list_earthquakes import list_earthquakes
from src.interfaces.cli.commands.quake.prefectures import prefectures
from src.interfaces.cli.commands.quake.render import render


@click.group()
def quake():
    """地震情報テンプレート生成コマンド."""
    if not is_configured():
        settings = get_settings()
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


quake.add_command(prefectures)
quake.add_command(list_earthquakes, "list")
quake.add_command(render)
