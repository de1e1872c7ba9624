from enum import Enum

# Ширина 6-градусной зоны UTM (градусы)
UTM_ZONE_WIDTH_DEG = 6

# Количество зон UTM
MAX_UTM_ZONE = 60

# Смещение долготы для нумерации зон (зона 1 начинается с -180°)
UTM_LON_ORIGIN_DEG = -180

# Ложное смещение на восток (метры)
UTM_FALSE_EASTING = 500_000

# Ложное смещение на север для южного полушария (метры)
UTM_FALSE_NORTHING_SOUTH = 10_000_000

# Базовые EPSG коды WGS84 / UTM (северное и южное полушария)
EPSG_UTM_NORTH_BASE = 32600
EPSG_UTM_SOUTH_BASE = 32700

WGS84_CODE = 4326
WEB_MERCATOR_CODE = 3857

# Проекция карты по умолчанию
DEFAULT_DISPLAY_CRS = f'EPSG:{WEB_MERCATOR_CODE}'

# Размер 100-км квадрата (метры)
SQUARE_SIZE_M = 100_000

# Период повтора букв строк 100-км квадратов по northing (метры)
NORTHING_LETTER_CYCLE_M = 2_000_000

# Допустимые значения easting для буквенных столбцов 100-км квадратов
EASTING_SQUARE_MIN = 100_000
EASTING_SQUARE_MAX = 900_000

# Пределы географических координат
WORLD_LON_MIN = -180.0
WORLD_LON_MAX = 180.0
WORLD_LAT_MIN = -90.0
WORLD_LAT_MAX = 90.0

# Допуск округления на краю мира (градусы)
WORLD_EDGE_EPSILON_DEG = 1e-9

# Буквы столбцов 100-км квадратов, строка таблицы = zone % 6
EAST_WEST_LETTERS: tuple[tuple[str, ...], ...] = (
    ('S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z'),  # 0 (зоны 6, 12, ...)
    ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H'),  # 1
    ('J', 'K', 'L', 'M', 'N', 'P', 'Q', 'R'),  # 2
    ('S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z'),  # 3
    ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H'),  # 4
    ('J', 'K', 'L', 'M', 'N', 'P', 'Q', 'R'),  # 5
)

# Буквы строк 100-км квадратов, строка таблицы = zone % 2
NORTH_SOUTH_LETTERS: tuple[tuple[str, ...], ...] = (
    (
        'F', 'G', 'H', 'J', 'K', 'L', 'M', 'N', 'P', 'Q',
        'R', 'S', 'T', 'U', 'V', 'A', 'B', 'C', 'D', 'E',
    ),
    (
        'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K',
        'L', 'M', 'N', 'P', 'Q', 'R', 'S', 'T', 'U', 'V',
    ),
)

# Буквы широтных поясов (8°), пояс X растянут до 84°
LATITUDE_BANDS = 'CDEFGHJKLMNPQRSTUVWX'
LATITUDE_BAND_HEIGHT_DEG = 8
LATITUDE_BAND_MIN_DEG = -80
LATITUDE_BAND_X_START_DEG = 72
LATITUDE_BAND_MAX_DEG = 84

# Число цифр в подписи для каждого шага сетки
LABEL_DIGITS: dict[int, int] = {
    10_000: 1,
    1_000: 2,
    100: 3,
    10: 4,
    1: 5,
}

# Ширина числа, из которого вырезаются цифры подписи
LABEL_VALUE_WIDTH = 7

# Количество отбрасываемых старших цифр (сотни километров)
LABEL_DROPPED_DIGITS = 2

# Допустимые шаги сетки (метры)
ALLOWED_INTERVALS: tuple[int, ...] = (1, 10, 100, 1_000, 10_000, 100_000)

# Шкала выбора шага сетки: (верхняя граница разрешения, шаг)
# Разрешение (единиц проекции на пиксель) >= последней границы => только зоны
DEFAULT_INTERVAL_LADDER: tuple[tuple[float, int], ...] = (
    (0.02, 1),
    (0.25, 10),
    (2.5, 100),
    (25.0, 1_000),
    (160.0, 10_000),
    (2500.0, 100_000),
)

# Минимальное количество точек для линии
MIN_POINTS_FOR_LINE = 2

# Цвета по умолчанию (RGB)
ZONE_LINE_COLOR = (255, 0, 0)
GRID_LINE_COLOR = (0, 0, 0)
GRID_TEXT_COLOR = (0, 0, 0)
GRID_TEXT_OUTLINE_COLOR = (255, 255, 255)
GRID_LABEL_BG_COLOR = (255, 255, 0)
CANVAS_BG_COLOR = (255, 255, 255)

# Толщина линий по умолчанию (px)
ZONE_LINE_WIDTH_PX = 4
GRID_LINE_WIDTH_PX = 2

# Размер шрифта подписей (px) и толщина обводки
GRID_FONT_SIZE_PX = 12
GRID_TEXT_OUTLINE_WIDTH = 3

# Путь к шрифту TTF/OTF (если None - системный шрифт)
GRID_FONT_PATH = None

# Каталог профилей относительно корня проекта
PROFILES_DIR = 'configs/profiles'

# Размер холста по умолчанию для CLI (px)
DEFAULT_CANVAS_SIZE_PX = (1024, 768)


class GridAxis(str, Enum):
    """Направление линии сетки."""

    EASTING = 'ew'  # линия постоянного easting (вертикальная)
    NORTHING = 'ns'  # линия постоянного northing (горизонтальная)


class LineRole(str, Enum):
    """Роль линии при отрисовке."""

    ZONE_BOUNDARY = 'zone-boundary'
    GRID_LINE = 'grid-line'


class AnchorClass(str, Enum):
    """Класс привязки подписи; стиль выбирает внешний рендерер."""

    EASTING = 'ew'  # цифры easting в центре столбца
    NORTHING = 'ns'  # цифры northing у западного края
    EASTING_SQUARE_START = 'ew-start'  # буква столбца справа от границы 100 км
    EASTING_SQUARE_END = 'ew-end'  # буква столбца слева от границы 100 км
    NORTHING_SQUARE_START = 'ns-start'  # буква строки выше границы 100 км
    NORTHING_SQUARE_END = 'ns-end'  # буква строки ниже границы 100 км
    ZONE = 'zone'  # обозначение зоны, например 31U
