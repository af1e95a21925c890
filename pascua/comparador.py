"""
Comparación de la fecha de Pascua con "hoy"

Genera la frase que muestra la web ("Today, April 20, 2025 is Easter!")
y el tiempo verbal correspondiente. "Hoy" siempre se recibe como parámetro.
"""

import re
from datetime import date, datetime
from typing import Dict, Optional, Tuple

from .calculo import PascuaError, calcular_pascua_ymd


# Independiente del locale del proceso
MESES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

FRASES_TIEMPO = {
    'past': 'was Easter',
    'present': 'is Easter',
    'future': 'will be Easter',
}

MENSAJE_AÑO_INVALIDO = "Pick any year after 1582."
MENSAJE_AÑO_GRANDE = f"Pick a year up to {date.max.year}."

_PATRON_ENTERO = re.compile(r'^\s*([+-]?[0-9]+)')


def _como_fecha(valor) -> date:
    if isinstance(valor, datetime):
        return valor.date()
    if not isinstance(valor, date):
        raise TypeError('comparar_fecha expects a date')
    return valor


def comparar_fecha(fecha, hoy) -> Tuple[str, str]:
    """
    Describe la fecha de Pascua respecto a hoy.

    Args:
        fecha: Domingo de Pascua
        hoy: Fecha de referencia

    Returns:
        Tupla (mensaje, tiempo) con tiempo 'past', 'present' o 'future'
    """
    fecha = _como_fecha(fecha)
    hoy = _como_fecha(hoy)

    mes = MESES[fecha.month - 1]
    dia = fecha.day
    year = fecha.year
    diff = (fecha - hoy).days  # positivo => futuro

    if diff == 0:
        return f"Today, {mes} {dia}, {year} is Easter!", 'present'
    if diff == 1:
        return f"Tomorrow, {mes} {dia}, {year} is Easter!", 'future'
    if diff == -1:
        return f"Yesterday, {mes} {dia}, {year} was Easter!", 'past'

    # Mismo año natural
    if year == hoy.year:
        if diff < 0:
            return f"This year, Easter was on {mes} {dia}.", 'past'
        return f"This year, Easter will be on {mes} {dia}.", 'future'

    # Años contiguos
    if year == hoy.year - 1:
        return f"Last year, Easter was on {mes} {dia}.", 'past'
    if year == hoy.year + 1:
        return f"Next year, Easter will be on {mes} {dia}.", 'future'

    if year < hoy.year:
        return f"In {year}, Easter was on {mes} {dia}.", 'past'
    return f"In {year}, Easter will be on {mes} {dia}.", 'future'


def frase_tiempo(tiempo: str) -> str:
    """Frase corta para el tiempo verbal ('' si no se reconoce)"""
    return FRASES_TIEMPO.get(tiempo, '')


def interpretar_año(texto) -> Optional[int]:
    """
    Extrae el año de lo que escribe el usuario.

    Igual que parseInt del navegador: ignora espacios iniciales y
    cualquier resto no numérico ("2025abc" -> 2025).

    Returns:
        El año, o None si el texto no empieza por un número
    """
    if texto is None:
        return None
    match = _PATRON_ENTERO.match(str(texto))
    if not match:
        return None

    try:
        return int(match.group(1))
    except ValueError:
        # Más dígitos de los que int() admite (sys.get_int_max_str_digits)
        return None


def describir_pascua(texto_año, hoy: date) -> Dict:
    """
    Paso completo de presentación: texto del usuario -> mensaje.

    Args:
        texto_año: Año tal cual lo escribió el usuario
        hoy: Fecha de referencia

    Returns:
        Dict con 'msg', 'tense' y 'frase'; si el año es válido incluye
        además 'year', 'month', 'day' y 'fecha' (ISO)
    """
    year = interpretar_año(texto_año)
    if year is None:
        return {'msg': MENSAJE_AÑO_INVALIDO, 'tense': '', 'frase': ''}

    try:
        pascua = calcular_pascua_ymd(year)
    except PascuaError:
        return {'msg': MENSAJE_AÑO_INVALIDO, 'tense': '', 'frase': ''}

    # datetime.date no llega más allá de 9999
    if pascua.year > date.max.year:
        return {'msg': MENSAJE_AÑO_GRANDE, 'tense': '', 'frase': ''}

    fecha = pascua.to_date()
    msg, tense = comparar_fecha(fecha, hoy)

    return {
        'msg': msg,
        'tense': tense,
        'frase': frase_tiempo(tense),
        'year': pascua.year,
        'month': pascua.month,
        'day': pascua.day,
        'fecha': fecha.isoformat(),
    }
