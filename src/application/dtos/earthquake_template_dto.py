"""地震情報テンプレート生成関連のDTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities.earthquake import Earthquake
from src.domain.services.template_renderer import DEFAULT_TEMPLATE


@dataclass(frozen=True)
class EarthquakeOptionDTO:
    """地震選択プルダウンの1項目."""

    earthquake_id: str
    label: str


@dataclass
class GenerateEarthquakeTextInputDTO:
    """テンプレート生成入力DTO."""

    prefecture: str
    template: str = DEFAULT_TEMPLATE
    # 未指定なら最新の地震
    earthquake_id: str | None = None


@dataclass
class GenerateEarthquakeTextOutputDTO:
    """テンプレート生成出力DTO."""

    prefecture: str
    rendered_text: str
    candidates: list[Earthquake] = field(default_factory=list)
    selected: Earthquake | None = None
