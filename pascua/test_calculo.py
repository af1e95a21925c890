"""
Tests del algoritmo de Pascua (computus gregoriano)
"""

from datetime import date, timedelta

import pytest

from pascua.calculo import (
    EasterDate,
    InvalidArgumentError,
    OutOfRangeError,
    PascuaError,
    calcular_pascua,
    calcular_pascua_ymd,
    desglose_computus,
)


@pytest.mark.parametrize("year, esperado", [
    (1583, (1583, 4, 10)),
    (1900, (1900, 4, 15)),
    (2000, (2000, 4, 23)),
    (2024, (2024, 3, 31)),
    (2025, (2025, 4, 20)),
    (2026, (2026, 4, 5)),
    (2027, (2027, 3, 28)),
])
def test_fechas_conocidas(year, esperado):
    assert calcular_pascua_ymd(year) == esperado


def test_extremos_de_la_ventana():
    # Pascua más temprana y más tardía posibles
    assert calcular_pascua_ymd(1818) == (1818, 3, 22)
    assert calcular_pascua_ymd(1943) == (1943, 4, 25)
    assert calcular_pascua_ymd(2285) == (2285, 3, 22)


@pytest.mark.parametrize("year, esperado", [
    (1954, (1954, 4, 18)),
    (1981, (1981, 4, 19)),
])
def test_correccion_de_desbordamiento(year, esperado):
    assert desglose_computus(year).overflow_correction == 1
    assert calcular_pascua_ymd(year) == esperado


def test_valores_intermedios_2025():
    """Calculado a mano paso a paso"""
    c = desglose_computus(2025)

    assert c.golden_number == 11
    assert c.century == 20
    assert c.year_in_century == 25
    assert c.century_leap_blocks == 5
    assert c.century_leap_remainder == 0
    assert c.gregorian_leap_skip == 1
    assert c.lunar_correction == 6
    assert c.epact == 23
    assert c.year_leap_blocks == 6
    assert c.year_leap_remainder == 1
    assert c.weekday_shift == 6
    assert c.overflow_correction == 0
    assert c.raw_offset == 143


def test_valores_intermedios_1900():
    c = desglose_computus(1900)

    assert c.golden_number == 0
    assert (c.century, c.year_in_century) == (19, 0)
    assert (c.century_leap_blocks, c.century_leap_remainder) == (4, 3)
    assert c.gregorian_leap_skip == 1
    assert c.lunar_correction == 6
    assert c.epact == 24
    assert (c.year_leap_blocks, c.year_leap_remainder) == (0, 0)
    assert c.weekday_shift == 0
    assert c.raw_offset == 138


def test_rango_y_domingo():
    for year in range(1583, 2584):
        pascua = calcular_pascua_ymd(year)

        assert pascua.year == year
        assert pascua.month in (3, 4)
        if pascua.month == 3:
            assert 22 <= pascua.day <= 31
        else:
            assert 1 <= pascua.day <= 25

        assert pascua.to_date().weekday() == 6, f"{year}: {pascua} no es domingo"


def test_determinismo():
    assert calcular_pascua_ymd(2025) == calcular_pascua_ymd(2025)


def test_numero_aureo_ciclo_metonico():
    for year in (1583, 1700, 1999, 2024, 3000):
        assert desglose_computus(year).golden_number == desglose_computus(year + 19).golden_number


def test_epact_se_repite_dentro_del_mismo_siglo():
    # Mismas correcciones de siglo => misma epacta cada 19 años
    assert desglose_computus(2001).epact == desglose_computus(2020).epact
    assert desglose_computus(2001).epact == desglose_computus(2039).epact


def test_sin_limite_superior():
    pascua = calcular_pascua_ymd(100000)
    assert pascua.year == 100000
    assert pascua.month in (3, 4)


def test_easter_date_es_inmutable():
    pascua = calcular_pascua_ymd(2025)
    assert isinstance(pascua, EasterDate)
    with pytest.raises(AttributeError):
        pascua.month = 5


def test_calcular_pascua_devuelve_date():
    assert calcular_pascua(2025) == date(2025, 4, 20)
    assert calcular_pascua(2024) - timedelta(days=2) == date(2024, 3, 29)


def test_año_1582_fuera_de_rango():
    with pytest.raises(OutOfRangeError, match="1583"):
        calcular_pascua_ymd(1582)


@pytest.mark.parametrize("valor", [1582.5, 2024.0, "2024", None, True])
def test_año_no_entero(valor):
    with pytest.raises(InvalidArgumentError, match="year must be an integer"):
        calcular_pascua_ymd(valor)


def test_jerarquia_de_errores():
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(InvalidArgumentError, PascuaError)
    assert issubclass(OutOfRangeError, PascuaError)
