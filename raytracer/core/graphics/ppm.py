"""
PPM Encoder — Кодирование Canvas в текстовый PPM (P3)

Формат вывода:
    P3
    <width> <height>
    255
    <тело: row-major, 3 канала на пиксель, целые 0..255 через пробел>

Кодирование выполняется в две фазы:
1. Масштабирование (векторизовано numpy по всем пикселям сразу):
   channel * 255 → округление half-away-from-zero → clamp [0, 255].
   Каждый пиксель зависит только от собственных каналов.
2. Сборка тела (строго последовательно, row-major):
   каждая строка canvas начинается с новой строки вывода; строка вывода
   не длиннее max_line_length (69) символов; если следующее значение
   не помещается, вместо пробела ставится перевод строки.

Вывод всегда заканчивается переводом строки.

NaN-каналы кодируются как 0, +inf как 255, -inf как 0.
"""

import logging
from typing import Iterable

import numpy as np

from raytracer.core.config import DEFAULT_PPM_SETTINGS, PpmSettings
from raytracer.core.graphics.canvas import Canvas

logger = logging.getLogger(__name__)


# =============================================================================
# ФАЗА 1: МАСШТАБИРОВАНИЕ КАНАЛОВ
# =============================================================================


def scale_channels(
    canvas: Canvas,
    settings: PpmSettings = DEFAULT_PPM_SETTINGS,
) -> np.ndarray:
    """
    Масштабирование всех каналов canvas в целые [0, max_color_value].

    Args:
        canvas: Исходный canvas
        settings: Настройки encoder (max_color_value)

    Returns:
        Массив int64 формы (width * height, 3) в row-major порядке пикселей

    Examples:
        0.5 → 128, -5.0 → 0, 2.5 → 255, 1.01 → 255
    """
    max_value = settings.max_color_value

    raw = np.array(
        [pixel.as_tuple() for pixel in canvas.pixels], dtype=np.float64
    ).reshape(-1, 3)
    # Каналы не ограничены: переполнение до ±inf и NaN разрешаются ниже
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = raw * max_value

        # numpy.round использует banker's rounding, нужен half-away-from-zero
        rounded = np.where(scaled >= 0, np.floor(scaled + 0.5), np.ceil(scaled - 0.5))
    rounded = np.nan_to_num(rounded, nan=0.0, posinf=float(max_value), neginf=0.0)

    return np.clip(rounded, 0, max_value).astype(np.int64)


# =============================================================================
# ФАЗА 2: СБОРКА ТЕЛА
# =============================================================================


def wrap_row(values: Iterable[int], max_line_length: int) -> list[str]:
    """
    Раскладка значений одной строки canvas по строкам вывода.

    Значения разделяются одним пробелом; если следующее значение не
    помещается в max_line_length, оно начинает новую строку.

    Args:
        values: Значения каналов строки canvas (по порядку)
        max_line_length: Максимальная длина строки вывода

    Returns:
        Строки вывода без завершающих переводов строки

    Examples:
        >>> wrap_row([255, 0, 0], 69)
        ['255 0 0']
        >>> wrap_row([255, 0, 0], 5)
        ['255 0', '0']
    """
    lines: list[str] = []
    current = ""

    for value in values:
        text = str(value)
        if not current:
            current = text
        elif len(current) + 1 + len(text) > max_line_length:
            lines.append(current)
            current = text
        else:
            current = f"{current} {text}"

    if current:
        lines.append(current)

    return lines


def canvas_to_ppm(
    canvas: Canvas,
    settings: PpmSettings = DEFAULT_PPM_SETTINGS,
) -> str:
    """
    Кодирование canvas в текстовый PPM.

    Args:
        canvas: Исходный canvas
        settings: Настройки encoder (default: P3 / 255 / 69)

    Returns:
        PPM-строка, всегда заканчивающаяся "\\n"
    """
    header = [
        settings.magic,
        f"{canvas.width} {canvas.height}",
        str(settings.max_color_value),
    ]

    channels = scale_channels(canvas, settings)
    # Фаза 2 начинается только после завершения масштабирования
    rows = channels.reshape(canvas.height, canvas.width * 3)

    body: list[str] = []
    for row in rows:
        body.extend(wrap_row(row.tolist(), settings.max_line_length))

    logger.debug(
        "Encoded %dx%d canvas into %d body lines",
        canvas.width,
        canvas.height,
        len(body),
    )

    return "\n".join(header + body) + "\n"
