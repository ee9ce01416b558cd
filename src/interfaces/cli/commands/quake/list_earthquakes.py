"""都道府県別の地震一覧コマンド."""

import asyncio

import click

from src.interfaces.cli.base import with_error_handling


@click.command()
@click.option("--prefecture", "-p", required=True, help="都道府県名（例: 東京）")
@with_error_handling
def list_earthquakes(prefecture: str):
    """指定都道府県で観測された地震を新しい順に表示する."""
    asyncio.run(_run_list(prefecture))


async def _run_list(prefecture: str) -> None:
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    usecase = container.use_cases.generate_earthquake_text_usecase()
    candidates = await usecase.list_candidates(prefecture)

    if not candidates:
        click.echo("該当する地震なし")
        return

    for option in usecase.to_options(candidates):
        click.echo(f"{option.earthquake_id}\t{option.label}")
