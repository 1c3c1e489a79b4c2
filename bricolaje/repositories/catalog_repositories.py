# ==============================================================================
# REPOSITORIOS DE CATÁLOGO Y ORGANIZACIÓN
# ==============================================================================
# Entidades sencillas (id + un campo descriptivo). Toda la lógica vive en
# EntityRepository; aquí solo se declara archivo, clase y campo de texto.
#
# Formato de datos (ej: positions.json):
# {
#     "1": {"id": 1, "description": "EMPLEADO"},
#     "2": {"id": 2, "description": "GERENTE"}
# }
# ==============================================================================

from bricolaje.models import Module, Permission, Position, ProductType, Role, SalesUnit
from bricolaje.repositories.base import EntityRepository


class PositionRepository(EntityRepository[Position]):
    """Acceso a positions.json (cargos)."""
    entity_class = Position
    file_name = 'positions.json'
    text_field = 'description'


class ModuleRepository(EntityRepository[Module]):
    """Acceso a modules.json (módulos de la app)."""
    entity_class = Module
    file_name = 'modules.json'
    text_field = 'name'


class PermissionRepository(EntityRepository[Permission]):
    """Acceso a permissions.json."""
    entity_class = Permission
    file_name = 'permissions.json'
    text_field = 'permission_type'


class RoleRepository(EntityRepository[Role]):
    """Acceso a roles.json."""
    entity_class = Role
    file_name = 'roles.json'
    text_field = 'description'


class ProductTypeRepository(EntityRepository[ProductType]):
    """Acceso a product_types.json."""
    entity_class = ProductType
    file_name = 'product_types.json'
    text_field = 'description'


class SalesUnitRepository(EntityRepository[SalesUnit]):
    """Acceso a sales_units.json."""
    entity_class = SalesUnit
    file_name = 'sales_units.json'
    text_field = 'description'
