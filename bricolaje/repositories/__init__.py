# ==============================================================================
# CAPA DE REPOSITORIOS - Acceso a datos
# ==============================================================================
# Esta capa encapsula todo el acceso a la persistencia (archivos JSON).
#
# ESTRUCTURA:
# ├── interfaces.py            → Protocolos (contratos que usan los gestores)
# ├── base.py                  → BaseRepository, DictRepository, EntityRepository
# ├── catalog_repositories.py  → Cargos, módulos, permisos, roles, tipos, UVs
# ├── address_repository.py    → addresses.json
# └── user_repository.py       → users.json (clave natural: DNI)
# ==============================================================================

from bricolaje.repositories.interfaces import (
    IEntityRepository,
    IAddressRepository,
    IUserRepository,
)

from bricolaje.repositories.base import (
    BaseRepository,
    DictRepository,
    EntityRepository,
    RepositoryError,
    DuplicateKeyError,
    MATCH_EXACT,
    MATCH_PREFIX,
    MATCH_CONTAINS,
    MATCH_MODES,
)
from bricolaje.repositories.catalog_repositories import (
    PositionRepository,
    ModuleRepository,
    PermissionRepository,
    RoleRepository,
    ProductTypeRepository,
    SalesUnitRepository,
)
from bricolaje.repositories.address_repository import AddressRepository
from bricolaje.repositories.user_repository import UserRepository

__all__ = [
    # Interfaces
    'IEntityRepository',
    'IAddressRepository',
    'IUserRepository',

    # Clases base
    'BaseRepository',
    'DictRepository',
    'EntityRepository',
    'RepositoryError',
    'DuplicateKeyError',
    'MATCH_EXACT',
    'MATCH_PREFIX',
    'MATCH_CONTAINS',
    'MATCH_MODES',

    # Implementaciones JSON
    'PositionRepository',
    'ModuleRepository',
    'PermissionRepository',
    'RoleRepository',
    'ProductTypeRepository',
    'SalesUnitRepository',
    'AddressRepository',
    'UserRepository',
]
