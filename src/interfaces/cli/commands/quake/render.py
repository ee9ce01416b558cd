"""テンプレート生成コマンド."""

import asyncio

import click

from src.application.dtos.earthquake_template_dto import (
    GenerateEarthquakeTextInputDTO,
)
from src.domain.services.template_renderer import DEFAULT_TEMPLATE
from src.interfaces.cli.base import with_error_handling


@click.command()
@click.option("--prefecture", "-p", required=True, help="都道府県名（例: 東京）")
@click.option("--template", "-t", default=None, help="テンプレート文字列")
@click.option(
    "--template-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="テンプレートを読み込むファイル（UTF-8）",
)
@click.option(
    "--earthquake-id", default=None, help="地震ID（省略時は最新の地震）"
)
@with_error_handling
def render(
    prefecture: str,
    template: str | None,
    template_file: str | None,
    earthquake_id: str | None,
):
    """地震情報をテンプレートに差し込んで表示する."""
    if template is not None and template_file is not None:
        raise click.UsageError("--template と --template-file は同時に指定できません")

    if template_file is not None:
        with open(template_file, encoding="utf-8") as f:
            template = f.read()

    input_dto = GenerateEarthquakeTextInputDTO(
        prefecture=prefecture,
        template=template if template is not None else DEFAULT_TEMPLATE,
        earthquake_id=earthquake_id,
    )
    asyncio.run(_run_render(input_dto))


async def _run_render(input_dto: GenerateEarthquakeTextInputDTO) -> None:
    from src.infrastructure.di.container import get_container, init_container

    try:
        container = get_container()
    except RuntimeError:
        container = init_container()

    usecase = container.use_cases.generate_earthquake_text_usecase()
    output = await usecase.execute(input_dto)
    click.echo(output.rendered_text)
