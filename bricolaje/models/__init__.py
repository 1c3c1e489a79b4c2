# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Este módulo define todas las entidades del dominio usando dataclasses.
# Beneficios:
#   - Type hints para mejor documentación y autocompletado
#   - Fácil serialización/deserialización para JSON
#   - Independiente del mecanismo de persistencia
# ==============================================================================

from .entities import (
    UNASSIGNED_ID,

    # Organización
    Position,
    Module,
    Permission,
    Role,

    # Catálogo
    ProductType,
    SalesUnit,

    # Direcciones
    Address,
    AddressType,

    # Usuarios
    User,
)

__all__ = [
    'UNASSIGNED_ID',

    # Organización
    'Position',
    'Module',
    'Permission',
    'Role',

    # Catálogo
    'ProductType',
    'SalesUnit',

    # Direcciones
    'Address',
    'AddressType',

    # Usuarios
    'User',
]
