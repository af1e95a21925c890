"""
Configuración de la aplicación (config/app.yaml + variables de entorno)
"""

import os
from pathlib import Path
from typing import Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'app.yaml'

DEFAULTS = {
    'host': '0.0.0.0',
    'port': 5001,
    'debug': False,
    'max_años_tabla': 5000,
}


def cargar_config(config_path: Optional[Path] = None, entorno: Optional[Dict] = None) -> Dict:
    """
    Carga la configuración desde YAML y aplica el entorno encima.

    Args:
        config_path: Ruta del YAML (por defecto config/app.yaml)
        entorno: Variables de entorno (por defecto os.environ)

    Returns:
        Dict con host, port, debug y max_años_tabla
    """
    config_path = config_path or CONFIG_PATH
    entorno = os.environ if entorno is None else entorno

    config = dict(DEFAULTS)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        print(f"⚠️  Archivo de configuración no encontrado: {config_path}")

    if entorno.get('PORT'):
        config['port'] = int(entorno['PORT'])
    if entorno.get('FLASK_DEBUG'):
        config['debug'] = entorno['FLASK_DEBUG'].lower() in ('1', 'true', 'yes')

    return config
