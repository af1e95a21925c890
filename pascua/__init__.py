"""
Calculadora de Pascua (calendario gregoriano)
"""

from .calculo import (
    EasterDate,
    Computus,
    PascuaError,
    InvalidArgumentError,
    OutOfRangeError,
    calcular_pascua_ymd,
    calcular_pascua,
    desglose_computus,
)
from .comparador import (
    comparar_fecha,
    frase_tiempo,
    interpretar_año,
    describir_pascua,
)

__all__ = [
    'EasterDate',
    'Computus',
    'PascuaError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'calcular_pascua_ymd',
    'calcular_pascua',
    'desglose_computus',
    'comparar_fecha',
    'frase_tiempo',
    'interpretar_año',
    'describir_pascua',
]
