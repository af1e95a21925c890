"""
Tabla de fechas de Pascua para un rango de años (CSV / Excel)
"""

from typing import List, Dict

import pandas as pd

from .calculo import calcular_pascua_ymd, validar_año
from .comparador import MESES


COLUMNAS = ['year', 'fecha', 'fecha_texto', 'mes', 'dia']


def tabla_pascua(desde: int, hasta: int, max_años: int = 5000) -> pd.DataFrame:
    """
    Genera un DataFrame con el Domingo de Pascua de cada año.

    Args:
        desde: Primer año (incluido)
        hasta: Último año (incluido)
        max_años: Número máximo de filas

    Returns:
        DataFrame con columnas year, fecha, fecha_texto, mes, dia

    Raises:
        InvalidArgumentError / OutOfRangeError: si algún extremo no es válido
        ValueError: si el rango está invertido o es demasiado grande
    """
    validar_año(desde)
    validar_año(hasta)

    if hasta < desde:
        raise ValueError(f"Rango invertido: {desde} > {hasta}")
    if hasta - desde + 1 > max_años:
        raise ValueError(f"Rango demasiado grande: máximo {max_años} años")

    filas: List[Dict] = []
    for year in range(desde, hasta + 1):
        pascua = calcular_pascua_ymd(year)
        filas.append({
            'year': pascua.year,
            'fecha': f"{pascua.year:04d}-{pascua.month:02d}-{pascua.day:02d}",
            'fecha_texto': f"{MESES[pascua.month - 1]} {pascua.day}, {pascua.year}",
            'mes': pascua.month,
            'dia': pascua.day,
        })

    return pd.DataFrame(filas, columns=COLUMNAS)
