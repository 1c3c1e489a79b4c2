# ==============================================================================
# CÓDIGOS DE RESULTADO
# ==============================================================================
# Cada gestor devuelve un entero en lugar de lanzar excepciones de dominio.
# Una tabla por entidad, siempre con:
#     0 → OK
#     1 → MISSING_ID (clave sin asignar: id 0, DNI nulo o vacío)
# El resto de códigos es propio de cada entidad. Los llamadores deben
# tratarlos como una enumeración opaca, nunca como valores aritméticos.
#
# Todas las tablas comparten los nombres OK, MISSING_ID, ALREADY_EXISTS,
# NOT_FOUND y PERSISTENCE_FAILED, que son los que usa EntityManager.
# ==============================================================================

from enum import IntEnum


class PositionResult(IntEnum):
    """Cargos. La unicidad la comprueba el gestor, no el validador."""
    OK = 0
    MISSING_ID = 1
    MISSING_DESCRIPTION = 2
    PERSISTENCE_FAILED = 3
    ALREADY_EXISTS = 4
    NOT_FOUND = 5


class AddressResult(IntEnum):
    """Direcciones."""
    OK = 0
    MISSING_ID = 1
    MISSING_STREET = 2
    MISSING_NUMBER = 3
    MISSING_FLOOR = 4
    MISSING_DOOR = 5
    MISSING_LOCALITY = 6
    MISSING_PROVINCE = 7
    ALREADY_EXISTS = 8
    INVALID_POSTAL_CODE = 9
    MISSING_ADDRESS_TYPE = 10
    PERSISTENCE_FAILED = 11
    NOT_FOUND = 12


class ModuleResult(IntEnum):
    """Módulos. La unicidad la comprueba el gestor, no el validador."""
    OK = 0
    MISSING_ID = 1
    MISSING_NAME = 2
    PERSISTENCE_FAILED = 3
    ALREADY_EXISTS = 4
    NOT_FOUND = 5


class PermissionResult(IntEnum):
    OK = 0
    MISSING_ID = 1
    MISSING_PERMISSION_TYPE = 2
    ALREADY_EXISTS = 3
    PERSISTENCE_FAILED = 4
    NOT_FOUND = 5


class RoleResult(IntEnum):
    OK = 0
    MISSING_ID = 1
    MISSING_DESCRIPTION = 2
    ALREADY_EXISTS = 3
    PERSISTENCE_FAILED = 4
    NOT_FOUND = 5


class ProductTypeResult(IntEnum):
    OK = 0
    MISSING_ID = 1
    MISSING_DESCRIPTION = 2
    ALREADY_EXISTS = 3
    PERSISTENCE_FAILED = 4
    NOT_FOUND = 5


class SalesUnitResult(IntEnum):
    OK = 0
    MISSING_ID = 1
    MISSING_DESCRIPTION = 2
    ALREADY_EXISTS = 3
    PERSISTENCE_FAILED = 4
    NOT_FOUND = 5


class UserResult(IntEnum):
    """
    Usuarios. MISSING_ID se refiere al DNI (clave natural).
    MISSING_ROLE / MISSING_ADDRESS cubren tanto el id 0 como una
    referencia a una fila que no existe.
    """
    OK = 0
    MISSING_ID = 1
    ALREADY_EXISTS = 2
    MISSING_NAMES = 3
    MISSING_SURNAMES = 4
    INVALID_AGE = 5
    MISSING_EMAIL = 6
    INVALID_PHONE = 7
    PERSISTENCE_FAILED = 8
    MISSING_ROLE = 9
    MISSING_ADDRESS = 10
    NOT_FOUND = 11


# Nombres que EntityManager exige en cada tabla
REQUIRED_CODES = ('OK', 'MISSING_ID', 'ALREADY_EXISTS', 'NOT_FOUND', 'PERSISTENCE_FAILED')
