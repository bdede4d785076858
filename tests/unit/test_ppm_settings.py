"""
Tests for PpmSettings

Проверяет:
- Значения по умолчанию и immutability модели
- Ограничения полей и межполевую проверку
- Strict-режим: без приведения типов и без неизвестных полей
- load_ppm_settings: dict → модель
"""

import pytest
from pydantic import ValidationError

from raytracer.core.config import DEFAULT_PPM_SETTINGS, PpmSettings, load_ppm_settings


# =============================================================================
# MODEL TESTS
# =============================================================================


class TestPpmSettings:
    """Тесты для модели PpmSettings"""

    def test_defaults(self) -> None:
        assert DEFAULT_PPM_SETTINGS.magic == "P3"
        assert DEFAULT_PPM_SETTINGS.max_color_value == 255
        assert DEFAULT_PPM_SETTINGS.max_line_length == 69

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_PPM_SETTINGS.max_line_length = 70  # type: ignore[misc]

    def test_only_plain_ppm_supported(self) -> None:
        with pytest.raises(ValidationError):
            PpmSettings(magic="P6")  # type: ignore[arg-type]

    def test_max_color_value_range(self) -> None:
        with pytest.raises(ValidationError):
            PpmSettings(max_color_value=0)
        with pytest.raises(ValidationError):
            PpmSettings(max_color_value=70000)

    def test_line_must_hold_one_value(self) -> None:
        """max_line_length должен вмещать значение максимальной ширины"""
        with pytest.raises(ValidationError) as exc_info:
            PpmSettings(max_line_length=2)
        assert "max_line_length" in str(exc_info.value)

        assert PpmSettings(max_line_length=3).max_line_length == 3

    def test_json_roundtrip(self) -> None:
        settings = PpmSettings(max_line_length=70)
        restored = PpmSettings.model_validate_json(settings.model_dump_json())
        assert restored == settings


class TestPpmSettingsStrict:
    """Тесты strict-режима"""

    def test_no_type_coercion(self) -> None:
        with pytest.raises(ValidationError):
            PpmSettings.model_validate({"max_color_value": "255"})
        with pytest.raises(ValidationError):
            PpmSettings.model_validate({"max_line_length": 69.5})
        with pytest.raises(ValidationError):
            PpmSettings.model_validate({"max_line_length": True})

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PpmSettings.model_validate({"gamma": 2.2})
        assert "gamma" in str(exc_info.value)

    def test_all_errors_reported(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PpmSettings.model_validate({"max_color_value": 0, "max_line_length": 0})
        assert exc_info.value.error_count() == 2


# =============================================================================
# LOADER TESTS
# =============================================================================


class TestLoadPpmSettings:
    """Тесты для load_ppm_settings"""

    def test_defaults_from_empty_payload(self) -> None:
        assert load_ppm_settings({}) == DEFAULT_PPM_SETTINGS

    def test_overrides(self) -> None:
        settings = load_ppm_settings({"max_line_length": 70})
        assert settings.max_line_length == 70
        assert settings.max_color_value == 255

    def test_full_payload(self) -> None:
        settings = load_ppm_settings(
            {"magic": "P3", "max_color_value": 255, "max_line_length": 69}
        )
        assert settings == DEFAULT_PPM_SETTINGS

    def test_range_violation(self) -> None:
        with pytest.raises(ValidationError):
            load_ppm_settings({"max_color_value": -1})

    def test_cross_field_violation(self) -> None:
        with pytest.raises(ValidationError):
            load_ppm_settings({"max_color_value": 255, "max_line_length": 2})
