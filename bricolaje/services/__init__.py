# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# PRINCIPIOS:
# 1. Un único gestor genérico (EntityManager) para las ocho entidades
# 2. Cada entidad aporta su tabla de códigos y el orden de sus reglas
# 3. Los fallos de dominio se devuelven como códigos, no como excepciones
# 4. Los gestores NO conocen el tipo de almacenamiento (JSON/MySQL)
#
# ESTRUCTURA:
# ├── result_codes.py    → Tablas de códigos de resultado por entidad
# ├── validation.py      → Reglas, Validator, ExistenceChecker
# ├── entity_manager.py  → Gestor genérico (alta, modificación, baja, consultas)
# ├── catalog.py         → Perfiles de cargos, módulos, permisos, roles, tipos, UVs
# ├── address_service.py → Direcciones (consultas por CP, localidad, provincia)
# └── user_service.py    → Usuarios (clave DNI, validación de rol y dirección)
# ==============================================================================

from bricolaje.services.result_codes import (
    PositionResult,
    AddressResult,
    ModuleResult,
    PermissionResult,
    RoleResult,
    ProductTypeResult,
    SalesUnitResult,
    UserResult,
)
from bricolaje.services.validation import Rule, Validator, ExistenceChecker, is_missing_key
from bricolaje.services.entity_manager import EntityManager
from bricolaje.services.catalog import CATALOG, EntityProfile, build_manager, build_validator
from bricolaje.services.address_service import ADDRESS, AddressManager, build_address_manager
from bricolaje.services.user_service import UserManager, build_user_manager, user_profile

__all__ = [
    # Códigos
    'PositionResult',
    'AddressResult',
    'ModuleResult',
    'PermissionResult',
    'RoleResult',
    'ProductTypeResult',
    'SalesUnitResult',
    'UserResult',

    # Validación
    'Rule',
    'Validator',
    'ExistenceChecker',
    'is_missing_key',

    # Gestores
    'EntityManager',
    'EntityProfile',
    'CATALOG',
    'build_manager',
    'build_validator',
    'ADDRESS',
    'AddressManager',
    'build_address_manager',
    'UserManager',
    'build_user_manager',
    'user_profile',
]
