"""
PpmSettings — Настройки текстового PPM encoder

Immutable Pydantic модель в strict-режиме. Значения по умолчанию задают
канонический формат вывода:
- magic "P3" (plain-text PPM)
- max_color_value 255
- max_line_length 69 (консервативно под историческое ограничение в 70 символов)

Вывод с настройками по умолчанию побайтно фиксирован. max_color_value,
отличный от 255, является opt-in расширением: он меняет и заголовок, и
масштаб каналов, и выбирается только явной передачей PpmSettings.
"""

from typing import Any, Dict, Final, Literal

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFAULTS
# =============================================================================

PPM_MAGIC: Final[str] = "P3"

PPM_MAX_COLOR_VALUE: Final[int] = 255

PPM_MAX_LINE_LENGTH: Final[int] = 69


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class PpmSettings(BaseModel):
    """
    Настройки PPM encoder.

    Immutable модель (frozen=True): encoder получает её как значение.
    Strict-режим без неизвестных полей: "255" или 69.5 не приводятся к int,
    лишние ключи ("gamma") отвергаются.
    """

    magic: Literal["P3"] = Field(PPM_MAGIC, description="Тег формата (первая строка заголовка)")
    max_color_value: int = Field(
        PPM_MAX_COLOR_VALUE, ge=1, le=65535, description="Максимальное значение канала"
    )
    max_line_length: int = Field(
        PPM_MAX_LINE_LENGTH, ge=1, description="Максимальная длина строки тела"
    )

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    @field_validator("max_line_length")
    @classmethod
    def validate_line_fits_value(cls, v: int, info) -> int:
        """Строка должна вмещать хотя бы одно значение канала максимальной ширины."""
        if "max_color_value" in info.data:
            width = len(str(info.data["max_color_value"]))
            if v < width:
                raise ValueError(
                    f"max_line_length {v} cannot hold a {width}-digit channel value"
                )
        return v


DEFAULT_PPM_SETTINGS: Final[PpmSettings] = PpmSettings()


def load_ppm_settings(data: Dict[str, Any]) -> PpmSettings:
    """
    Построение настроек из JSON-совместимого dict.

    Отсутствующие ключи берутся из значений по умолчанию.

    Raises:
        pydantic.ValidationError: Если данные нарушают типы, диапазоны
            или межполевые ограничения (все нарушения в одной ошибке)
    """
    return PpmSettings.model_validate(data)
