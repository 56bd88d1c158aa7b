from __future__ import annotations

import pytest
from pydantic import ValidationError

from cep_weather.models import WeatherResult


@pytest.mark.parametrize("celsius", [-40.0, 0.0, 21.0, 28.3, 36.6])
def test_unit_conversion(celsius: float) -> None:
    result = WeatherResult.from_celsius(city="Linhares", temp_c=celsius)

    assert result.temp_c == celsius
    assert result.temp_f == celsius * 1.8 + 32
    assert result.temp_k == celsius + 273


def test_wire_format_uses_scale_suffixed_keys() -> None:
    result = WeatherResult.from_celsius(city="Brasília", temp_c=21.0)

    assert result.to_wire() == {
        "city": "Brasília",
        "temp_C": 21.0,
        "temp_F": 21.0 * 1.8 + 32,
        "temp_K": 294.0,
    }


def test_describe() -> None:
    result = WeatherResult.from_celsius(city="Linhares", temp_c=28.3)
    assert result.describe() == "Weather in Linhares: 28.3C, 82.9F, 301.3K"


def test_result_is_immutable() -> None:
    result = WeatherResult.from_celsius(city="Linhares", temp_c=28.3)
    with pytest.raises(ValidationError):
        result.city = "Vitória"  # type: ignore[misc]
