# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Construcción de repositorios y gestores
# ==============================================================================
# Forma centralizada de obtener repositorios y gestores ya conectados:
#   - Cada gestor recibe sus repositorios EXPLÍCITAMENTE al construirse
#   - Testing: basta con pasar otro DATA_DIR
#   - Migración: cambiar aquí la clase de repositorio no afecta a los gestores
#
# No es un singleton: cada AppContainer tiene su propia configuración.
# ==============================================================================

from typing import Any, Dict, Mapping, Optional

from bricolaje import performance_logger
from bricolaje.config import load_config

# ═══════════════════════════════════════════════════════════════════════════════
# REPOSITORIOS - Capa de persistencia (JSON)
# ═══════════════════════════════════════════════════════════════════════════════
from bricolaje.repositories import (
    AddressRepository,
    ModuleRepository,
    PermissionRepository,
    PositionRepository,
    ProductTypeRepository,
    RoleRepository,
    SalesUnitRepository,
    UserRepository,
)

# ═══════════════════════════════════════════════════════════════════════════════
# SERVICIOS - Gestores de entidades
# ═══════════════════════════════════════════════════════════════════════════════
from bricolaje.services import (
    CATALOG,
    AddressManager,
    EntityManager,
    UserManager,
    build_address_manager,
    build_manager,
    build_user_manager,
)


class AppContainer:
    """
    Contenedor de dependencias de la capa de servicios.

    Repositorios y gestores se crean de forma perezosa y se reutilizan
    dentro del mismo contenedor.

    Uso:
        container = AppContainer({'DATA_DIR': '/path/to/data'})
        container.role_manager.create(Role(id=1, description='ADMIN'))
        container.user_manager.fetch('12345678Z')
    """

    # Repositorios de las entidades del catálogo genérico
    _CATALOG_REPOSITORIES = {
        'position': PositionRepository,
        'module': ModuleRepository,
        'permission': PermissionRepository,
        'role': RoleRepository,
        'product_type': ProductTypeRepository,
        'sales_unit': SalesUnitRepository,
    }

    def __init__(self, overrides: Optional[Mapping[str, Any]] = None):
        """
        Inicializa el contenedor.

        Args:
            overrides: Valores de configuración que prevalecen sobre
                entorno y defaults (ver config.py)
        """
        self.config = load_config(overrides)
        performance_logger.init_profiling(self.config)

        self._repositories: Dict[str, Any] = {}
        self._managers: Dict[str, EntityManager] = {}

    @property
    def data_dir(self) -> str:
        return self.config['DATA_DIR']

    @property
    def strict(self) -> bool:
        return bool(self.config['STRICT_TEXT_VALIDATION'])

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    def repository(self, name: str):
        """
        Repositorio de una entidad (singleton dentro del contenedor).

        Args:
            name: position, module, permission, role, product_type,
                sales_unit, address o user
        """
        if name not in self._repositories:
            if name in self._CATALOG_REPOSITORIES:
                repo_class = self._CATALOG_REPOSITORIES[name]
            elif name == 'address':
                repo_class = AddressRepository
            elif name == 'user':
                repo_class = UserRepository
            else:
                raise KeyError(f"Entidad desconocida: {name}")
            self._repositories[name] = repo_class(self.data_dir)
        return self._repositories[name]

    # =========================================================================
    # GESTORES
    # =========================================================================

    def manager(self, name: str) -> EntityManager:
        """Gestor de una entidad (singleton dentro del contenedor)."""
        if name not in self._managers:
            if name in CATALOG:
                manager = build_manager(CATALOG[name], self.repository(name), self.strict)
            elif name == 'address':
                manager = build_address_manager(self.repository('address'), self.strict)
            elif name == 'user':
                manager = build_user_manager(
                    self.repository('user'),
                    self.repository('role'),
                    self.repository('address'),
                    self.strict
                )
            else:
                raise KeyError(f"Entidad desconocida: {name}")
            self._managers[name] = manager
        return self._managers[name]

    @property
    def position_manager(self) -> EntityManager:
        return self.manager('position')

    @property
    def module_manager(self) -> EntityManager:
        return self.manager('module')

    @property
    def permission_manager(self) -> EntityManager:
        return self.manager('permission')

    @property
    def role_manager(self) -> EntityManager:
        return self.manager('role')

    @property
    def product_type_manager(self) -> EntityManager:
        return self.manager('product_type')

    @property
    def sales_unit_manager(self) -> EntityManager:
        return self.manager('sales_unit')

    @property
    def address_manager(self) -> AddressManager:
        return self.manager('address')

    @property
    def user_manager(self) -> UserManager:
        return self.manager('user')

    # =========================================================================
    # UTILIDADES
    # =========================================================================

    def reset(self) -> None:
        """
        Descarta todas las instancias.
        Útil para testing o tras cambiar la configuración.
        """
        self._repositories.clear()
        self._managers.clear()
