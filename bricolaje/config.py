# ==============================================================================
# CONFIGURACIÓN
# ==============================================================================
# Se usa flask.Config (el mismo objeto que app.config) sin necesidad de
# levantar una aplicación Flask.
#
# Orden de carga (el último gana):
#   1. DEFAULTS de este módulo
#   2. Variables de entorno con prefijo BRICOLAJE_
#        export BRICOLAJE_DATA_DIR="/srv/bricolaje/data"
#        export BRICOLAJE_STRICT_TEXT_VALIDATION=true
#   3. Mapping explícito pasado a load_config() (útil en tests)
# ==============================================================================

import os
from typing import Any, Mapping, Optional

from flask import Config

ENV_PREFIX = 'BRICOLAJE'

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULTS = {
    # Directorio donde viven los JSON de cada entidad
    'DATA_DIR': os.path.join(BASE_DIR, 'data'),

    # Profiling de operaciones de los gestores
    'ENABLE_PROFILING': True,
    'LOGS_DIR': os.path.join(BASE_DIR, 'logs'),
    'THRESHOLD_WARNING': 300,   # ms
    'THRESHOLD_CRITICAL': 700,  # ms

    # False = comportamiento histórico: solo None cuenta como "campo ausente".
    # True  = también se rechazan textos vacíos o en blanco.
    'STRICT_TEXT_VALIDATION': False,
}


def load_config(overrides: Optional[Mapping[str, Any]] = None) -> Config:
    """
    Construye la configuración de la capa de servicios.

    Args:
        overrides: Valores que prevalecen sobre entorno y defaults

    Returns:
        flask.Config con todas las claves de DEFAULTS
    """
    config = Config(BASE_DIR, defaults=DEFAULTS)
    config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        config.from_mapping(overrides)
    return config
