from pydantic import BaseModel, Field, field_validator, model_validator

from shared.constants import (
    ALLOWED_INTERVALS,
    DEFAULT_DISPLAY_CRS,
    DEFAULT_INTERVAL_LADDER,
    GRID_FONT_SIZE_PX,
    GRID_LABEL_BG_COLOR,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH_PX,
    GRID_TEXT_COLOR,
    GRID_TEXT_OUTLINE_COLOR,
    GRID_TEXT_OUTLINE_WIDTH,
    ZONE_LINE_COLOR,
    ZONE_LINE_WIDTH_PX,
    AnchorClass,
)

RGB = tuple[int, int, int]


class IntervalStep(BaseModel):
    """Ступень шкалы: разрешение ниже ``max_resolution`` => шаг ``interval``."""

    max_resolution: float
    interval: int

    @field_validator('interval')
    @classmethod
    def validate_interval(cls, v: int) -> int:
        if v not in ALLOWED_INTERVALS:
            msg = f'Шаг сетки должен быть одним из {ALLOWED_INTERVALS}'
            raise ValueError(msg)
        return v

    @field_validator('max_resolution')
    @classmethod
    def validate_max_resolution(cls, v: float) -> float:
        if v <= 0:
            msg = 'Порог разрешения должен быть положительным'
            raise ValueError(msg)
        return v


class LineStyle(BaseModel):
    color: RGB
    width_px: int = 1
    # Штрих: (длина штриха, длина пробела) в пикселях; None - сплошная
    dash: tuple[int, int] | None = None

    @field_validator('width_px')
    @classmethod
    def validate_width(cls, v: int) -> int:
        return max(1, int(v))


class LabelStyle(BaseModel):
    """Оформление подписи одного класса привязки."""

    font_size_px: int = GRID_FONT_SIZE_PX
    color: RGB = GRID_TEXT_COLOR
    outline_color: RGB = GRID_TEXT_OUTLINE_COLOR
    outline_width_px: int = GRID_TEXT_OUTLINE_WIDTH
    # Якорь текста Pillow ('ms', 'rm', ...)
    anchor: str = 'ms'
    offset_px: tuple[int, int] = (0, 0)
    background: RGB | None = None


def default_label_styles() -> dict[AnchorClass, LabelStyle]:
    return {
        AnchorClass.EASTING: LabelStyle(anchor='mb', offset_px=(0, -4)),
        AnchorClass.NORTHING: LabelStyle(anchor='lm', offset_px=(5, 0)),
        AnchorClass.EASTING_SQUARE_END: LabelStyle(anchor='rb', offset_px=(-4, -4)),
        AnchorClass.EASTING_SQUARE_START: LabelStyle(anchor='lb', offset_px=(4, -4)),
        AnchorClass.NORTHING_SQUARE_END: LabelStyle(anchor='lt', offset_px=(5, 4)),
        AnchorClass.NORTHING_SQUARE_START: LabelStyle(anchor='lb', offset_px=(5, -4)),
        AnchorClass.ZONE: LabelStyle(
            font_size_px=GRID_FONT_SIZE_PX + 4,
            anchor='mt',
            offset_px=(0, 4),
            background=GRID_LABEL_BG_COLOR,
        ),
    }


class GridSettings(BaseModel):
    """Настройки сетки USNG: проекция, шкала шагов и стили отрисовки."""

    model_config = {
        'extra': 'ignore',  # игнорировать лишние поля из профилей
    }

    display_crs: str = DEFAULT_DISPLAY_CRS

    interval_ladder: list[IntervalStep] = Field(
        default_factory=lambda: [
            IntervalStep(max_resolution=r, interval=i)
            for r, i in DEFAULT_INTERVAL_LADDER
        ]
    )

    # Подписи обозначения зоны (например, 31U)
    show_zone_labels: bool = True

    zone_line_style: LineStyle = Field(
        default_factory=lambda: LineStyle(
            color=ZONE_LINE_COLOR, width_px=ZONE_LINE_WIDTH_PX
        )
    )
    grid_line_style: LineStyle = Field(
        default_factory=lambda: LineStyle(
            color=GRID_LINE_COLOR, width_px=GRID_LINE_WIDTH_PX, dash=(2, 6)
        )
    )
    label_styles: dict[AnchorClass, LabelStyle] = Field(
        default_factory=default_label_styles
    )

    @model_validator(mode='after')
    def validate_ladder(self) -> 'GridSettings':
        thresholds = [s.max_resolution for s in self.interval_ladder]
        intervals = [s.interval for s in self.interval_ladder]
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            msg = 'Пороги разрешения должны строго возрастать'
            raise ValueError(msg)
        if any(b < a for a, b in zip(intervals, intervals[1:])):
            msg = 'Шаги сетки не должны убывать с ростом разрешения'
            raise ValueError(msg)
        return self

    @field_validator('label_styles')
    @classmethod
    def fill_missing_label_styles(
        cls, v: dict[AnchorClass, LabelStyle]
    ) -> dict[AnchorClass, LabelStyle]:
        # Профиль может переопределять только часть классов
        styles = default_label_styles()
        styles.update(v)
        return styles

    def ladder_pairs(self) -> list[tuple[float, int]]:
        return [(s.max_resolution, s.interval) for s in self.interval_ladder]

    def label_style(self, anchor_class: AnchorClass) -> LabelStyle:
        return self.label_styles[anchor_class]
