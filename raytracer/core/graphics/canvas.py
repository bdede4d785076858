"""
Canvas — Растровый буфер цветов фиксированного размера

Пиксели хранятся плоским списком в row-major порядке:
    index(x, y) = x + width * y,   0 ≤ x < width, 0 ≤ y < height

Новый canvas заполнен чёрным. Единственная мутирующая операция: запись
пикселя. Внутренней синхронизации нет: canvas принадлежит создателю.

Политика выхода за границы (и для чтения, и для записи): PixelOutOfBoundsError,
canvas при этом не изменяется.
"""

import logging
from typing import TYPE_CHECKING, Iterator

from raytracer.core.graphics.color import BLACK, Color
from raytracer.core.math.tolerance import require_integer, validate_non_negative_int

if TYPE_CHECKING:
    from raytracer.core.config import PpmSettings

logger = logging.getLogger(__name__)


class PixelOutOfBoundsError(IndexError):
    """Координата пикселя вне границ canvas."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Pixel ({x}, {y}) is outside canvas bounds {width}x{height}"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Canvas:
    """
    Растровый буфер width × height.

    Args:
        width: Ширина (≥ 0)
        height: Высота (≥ 0)

    Raises:
        TypeError: Если размеры не целые
        ValueError: Если размеры отрицательные
    """

    def __init__(self, width: int, height: int):
        width = validate_non_negative_int(width, "width")
        height = validate_non_negative_int(height, "height")

        self._width = width
        self._height = height
        # Color immutable, поэтому общий экземпляр BLACK безопасен
        self._pixels: list[Color] = [BLACK] * (width * height)

        logger.debug("Created %dx%d canvas", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> tuple[Color, ...]:
        """Снимок пикселей в row-major порядке (только чтение)."""
        return tuple(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def contains(self, x: int, y: int) -> bool:
        """Проверка, что (x, y) лежит внутри canvas."""
        x = require_integer(x, "x")
        y = require_integer(y, "y")
        return 0 <= x < self._width and 0 <= y < self._height

    def index(self, x: int, y: int) -> int:
        """
        Индекс пикселя в плоском буфере.

        Raises:
            PixelOutOfBoundsError: Если (x, y) вне canvas
        """
        if not self.contains(x, y):
            raise PixelOutOfBoundsError(x, y, self._width, self._height)
        return int(x) + self._width * int(y)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Запись цвета в пиксель (x, y).

        Raises:
            PixelOutOfBoundsError: Если (x, y) вне canvas (canvas не изменяется)
            TypeError: Если color не Color
        """
        if not isinstance(color, Color):
            raise TypeError(f"color must be a Color, got {type(color).__name__}")

        try:
            idx = self.index(x, y)
        except PixelOutOfBoundsError:
            logger.debug("Rejected write outside %dx%d canvas at (%s, %s)",
                         self._width, self._height, x, y)
            raise

        self._pixels[idx] = color

    def pixel_at(self, x: int, y: int) -> Color:
        """
        Чтение цвета пикселя (x, y).

        Raises:
            PixelOutOfBoundsError: Если (x, y) вне canvas
        """
        return self._pixels[self.index(x, y)]

    def rows(self) -> Iterator[tuple[Color, ...]]:
        """Итерация по строкам сверху вниз."""
        for y in range(self._height):
            start = y * self._width
            yield tuple(self._pixels[start:start + self._width])

    def to_ppm(self, settings: "PpmSettings | None" = None) -> str:
        """Кодирование canvas в текстовый PPM (см. canvas_to_ppm)."""
        from raytracer.core.graphics.ppm import canvas_to_ppm

        if settings is None:
            return canvas_to_ppm(self)
        return canvas_to_ppm(self, settings)


# =============================================================================
# FUNCTIONAL API
# =============================================================================


def canvas(width: int, height: int) -> Canvas:
    """Новый canvas width × height, заполненный чёрным."""
    return Canvas(width, height)


def write_pixel(canvas: Canvas, x: int, y: int, color: Color) -> None:
    """Запись пикселя (см. Canvas.write_pixel)."""
    canvas.write_pixel(x, y, color)


def pixel_at(canvas: Canvas, x: int, y: int) -> Color:
    """Чтение пикселя (см. Canvas.pixel_at)."""
    return canvas.pixel_at(x, y)
