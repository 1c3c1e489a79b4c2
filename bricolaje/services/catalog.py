# ==============================================================================
# TABLA DE CONFIGURACIÓN DE ENTIDADES
# ==============================================================================
# Cada entidad se describe con un EntityProfile:
#   - su tabla de códigos de resultado
#   - el orden EXACTO de sus reglas de validación
#   - dónde se comprueba la unicidad al dar de alta (validador o gestor)
#
# build_manager() convierte un perfil + repositorio en un EntityManager.
# Direcciones y usuarios añaden consultas propias en sus módulos
# (address_service.py, user_service.py) pero se construyen igual.
# ==============================================================================

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Type

from bricolaje.services.entity_manager import EntityManager
from bricolaje.services.result_codes import (
    ModuleResult,
    PermissionResult,
    PositionResult,
    ProductTypeResult,
    RoleResult,
    SalesUnitResult,
)
from bricolaje.services.validation import (
    ExistenceChecker,
    Rule,
    Validator,
    key_assigned,
    not_existing,
    text_required,
)


@dataclass(frozen=True)
class EntityProfile:
    """
    Descripción de una entidad gestionada.

    Attributes:
        name: Nombre de la entidad
        codes: IntEnum de resultados
        rules: Función (checker, strict) -> reglas en orden de evaluación
        uniqueness_in_validator: False si el gestor comprueba "ya existe"
            después de validar
        key_field: Campo clave
    """
    name: str
    codes: Type[IntEnum]
    rules: Callable[[ExistenceChecker, bool], List[Rule]]
    uniqueness_in_validator: bool = True
    key_field: str = 'id'


POSITION = EntityProfile(
    name='Position',
    codes=PositionResult,
    rules=lambda checker, strict: [
        key_assigned(PositionResult.MISSING_ID),
        text_required(PositionResult.MISSING_DESCRIPTION, 'description', strict),
    ],
    uniqueness_in_validator=False,
)

MODULE = EntityProfile(
    name='Module',
    codes=ModuleResult,
    rules=lambda checker, strict: [
        key_assigned(ModuleResult.MISSING_ID),
        not_existing(ModuleResult.ALREADY_EXISTS, checker),
        text_required(ModuleResult.MISSING_NAME, 'name', strict),
    ],
)

PERMISSION = EntityProfile(
    name='Permission',
    codes=PermissionResult,
    rules=lambda checker, strict: [
        key_assigned(PermissionResult.MISSING_ID),
        not_existing(PermissionResult.ALREADY_EXISTS, checker),
        text_required(PermissionResult.MISSING_PERMISSION_TYPE, 'permission_type', strict),
    ],
)

ROLE = EntityProfile(
    name='Role',
    codes=RoleResult,
    rules=lambda checker, strict: [
        key_assigned(RoleResult.MISSING_ID),
        text_required(RoleResult.MISSING_DESCRIPTION, 'description', strict),
        not_existing(RoleResult.ALREADY_EXISTS, checker),
    ],
)

PRODUCT_TYPE = EntityProfile(
    name='ProductType',
    codes=ProductTypeResult,
    rules=lambda checker, strict: [
        key_assigned(ProductTypeResult.MISSING_ID),
        not_existing(ProductTypeResult.ALREADY_EXISTS, checker),
        text_required(ProductTypeResult.MISSING_DESCRIPTION, 'description', strict),
    ],
)

SALES_UNIT = EntityProfile(
    name='SalesUnit',
    codes=SalesUnitResult,
    rules=lambda checker, strict: [
        key_assigned(SalesUnitResult.MISSING_ID),
        not_existing(SalesUnitResult.ALREADY_EXISTS, checker),
        text_required(SalesUnitResult.MISSING_DESCRIPTION, 'description', strict),
    ],
)

CATALOG: Dict[str, EntityProfile] = {
    'position': POSITION,
    'module': MODULE,
    'permission': PERMISSION,
    'role': ROLE,
    'product_type': PRODUCT_TYPE,
    'sales_unit': SALES_UNIT,
}


def build_validator(profile: EntityProfile, repository, strict: bool = False) -> Validator:
    checker = ExistenceChecker(repository)
    return Validator(profile.codes.OK, profile.rules(checker, strict))


def build_manager(
    profile: EntityProfile,
    repository,
    strict: bool = False,
    manager_class: Type[EntityManager] = EntityManager
) -> EntityManager:
    """
    Construye el gestor de una entidad a partir de su perfil.

    Args:
        profile: Perfil de la entidad
        repository: Repositorio de la entidad
        strict: STRICT_TEXT_VALIDATION de la configuración
        manager_class: Subclase de EntityManager con consultas propias
    """
    return manager_class(
        entity_name=profile.name,
        repository=repository,
        validator=build_validator(profile, repository, strict),
        codes=profile.codes,
        key_field=profile.key_field,
        uniqueness_in_validator=profile.uniqueness_in_validator,
    )
