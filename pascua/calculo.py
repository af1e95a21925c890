"""
Cálculo de la fecha del Domingo de Pascua (calendario gregoriano)

Usa el algoritmo "Anonymous Gregorian Computus" (Butcher/Meeus), válido
desde 1583 en adelante. Todas las divisiones son enteras.

Referencias:
    - https://en.wikipedia.org/wiki/Computus
    - Butcher, S. (1876). "Ecclesiastical Calendar"
"""

from datetime import date
from typing import NamedTuple


AÑO_MINIMO = 1583


class PascuaError(Exception):
    """Error base del cálculo de Pascua"""


class InvalidArgumentError(PascuaError, TypeError):
    """El año no es un entero"""


class OutOfRangeError(PascuaError, ValueError):
    """El año es anterior a la reforma gregoriana"""


class EasterDate(NamedTuple):
    """Domingo de Pascua como tripleta (year, month, day)"""
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        # El año sale de la tripleta, nunca de un objeto fecha
        return date(self.year, self.month, self.day)


class Computus(NamedTuple):
    """Valores intermedios del algoritmo para un año"""
    year: int
    golden_number: int
    century: int
    year_in_century: int
    century_leap_blocks: int
    century_leap_remainder: int
    gregorian_leap_skip: int
    lunar_correction: int
    epact: int
    year_leap_blocks: int
    year_leap_remainder: int
    weekday_shift: int
    overflow_correction: int
    raw_offset: int


def validar_año(year) -> int:
    """
    Comprueba que el año es un entero >= 1583.

    Raises:
        InvalidArgumentError: si no es un entero (bool y float incluidos)
        OutOfRangeError: si es anterior a 1583
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError('year must be an integer')
    if year < AÑO_MINIMO:
        raise OutOfRangeError(f'Gregorian Easter is defined for years >= {AÑO_MINIMO}')
    return year


def desglose_computus(year: int) -> Computus:
    """
    Calcula todos los valores intermedios del computus.

    Args:
        year: Año gregoriano (>= 1583)

    Returns:
        Computus con cada paso del algoritmo
    """
    validar_año(year)

    # Ciclo metónico (19 años)
    golden_number = year % 19

    century, year_in_century = divmod(year, 100)
    century_leap_blocks, century_leap_remainder = divmod(century, 4)

    # Siglos sin bisiesto desde la reforma y deriva lunar asociada
    gregorian_leap_skip = (century + 8) // 25
    lunar_correction = (century - gregorian_leap_skip + 1) // 3

    # Edad de la luna el 21 de marzo
    epact = (19 * golden_number + century - century_leap_blocks - lunar_correction + 15) % 30

    year_leap_blocks, year_leap_remainder = divmod(year_in_century, 4)

    # Desplazamiento hasta el domingo
    weekday_shift = (32 + 2 * century_leap_remainder + 2 * year_leap_blocks
                     - epact - year_leap_remainder) % 7

    # 1 solo cuando el resultado caería el 21 de marzo o el 26 de abril
    overflow_correction = (golden_number + 11 * epact + 22 * weekday_shift) // 451

    raw_offset = epact + weekday_shift - 7 * overflow_correction + 114

    return Computus(
        year=year,
        golden_number=golden_number,
        century=century,
        year_in_century=year_in_century,
        century_leap_blocks=century_leap_blocks,
        century_leap_remainder=century_leap_remainder,
        gregorian_leap_skip=gregorian_leap_skip,
        lunar_correction=lunar_correction,
        epact=epact,
        year_leap_blocks=year_leap_blocks,
        year_leap_remainder=year_leap_remainder,
        weekday_shift=weekday_shift,
        overflow_correction=overflow_correction,
        raw_offset=raw_offset,
    )


def calcular_pascua_ymd(year: int) -> EasterDate:
    """
    Calcula el Domingo de Pascua como tripleta (year, month, day).

    Args:
        year: Año gregoriano (>= 1583)

    Returns:
        EasterDate con month 3 (marzo) o 4 (abril)

    Raises:
        InvalidArgumentError: si el año no es un entero
        OutOfRangeError: si el año es anterior a 1583
    """
    computus = desglose_computus(year)
    month, resto = divmod(computus.raw_offset, 31)
    return EasterDate(year, month, resto + 1)


def calcular_pascua(year: int) -> date:
    """Calcula el Domingo de Pascua como datetime.date"""
    return calcular_pascua_ymd(year).to_date()


if __name__ == "__main__":
    años_test = {
        1900: (4, 15),
        2000: (4, 23),
        2024: (3, 31),
        2025: (4, 20),
        2026: (4, 5),
    }

    print("🧪 Test del algoritmo de Pascua\n")

    for year, (mes_esperado, dia_esperado) in años_test.items():
        pascua = calcular_pascua_ymd(year)
        correcto = (pascua.month, pascua.day) == (mes_esperado, dia_esperado)
        emoji = "✅" if correcto else "❌"
        print(f"{emoji} {year}: {pascua.to_date()} (esperado: {year}-{mes_esperado:02d}-{dia_esperado:02d})")
