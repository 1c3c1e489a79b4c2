# ==============================================================================
# INTERFACES DE REPOSITORIOS
# ==============================================================================
#
# Contratos que los gestores (services/) consumen. Los gestores dependen de
# estas interfaces, NO de la implementación JSON:
#
# 1. INDEPENDENCIA DE ALMACENAMIENTO
#    - Cambiar JSON → MySQL solo requiere una nueva implementación
#
# 2. TESTING
#    - Fácil crear dobles que implementen estas interfaces
#
# ==============================================================================

from typing import Any, ContextManager, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class IEntityRepository(Protocol):
    """
    Interfaz común para los repositorios de entidades.
    """

    def find_by_key(self, key: Any) -> Optional[Any]:
        """Busca por clave; None si no existe."""
        ...

    def save(self, entity: Any) -> Optional[Any]:
        """Inserta o actualiza; retorna la entidad almacenada."""
        ...

    def insert(self, entity: Any) -> Optional[Any]:
        """Inserta; lanza DuplicateKeyError si la clave ya existe."""
        ...

    def delete_by_key(self, key: Any) -> bool:
        """Elimina por clave."""
        ...

    def find_all(self) -> List[Any]:
        """Todas las filas."""
        ...

    def find_by_text(self, text: str, mode: str = 'exact', field: Optional[str] = None) -> List[Any]:
        """Búsqueda por texto normalizado a MAYÚSCULAS."""
        ...

    def transaction(self) -> ContextManager[Any]:
        """Ámbito transaccional con rollback ante cualquier excepción."""
        ...


@runtime_checkable
class IAddressRepository(IEntityRepository, Protocol):
    """
    Interfaz para el repositorio de direcciones.
    """

    def find_by_postal_code(self, postal_code: int) -> List[Any]:
        ...

    def find_by_locality(self, locality: str) -> List[Any]:
        ...

    def find_by_province(self, province: str) -> List[Any]:
        ...


@runtime_checkable
class IUserRepository(IEntityRepository, Protocol):
    """
    Interfaz para el repositorio de usuarios (clave natural: DNI).
    """

    def find_by_id(self, user_id: int) -> Optional[Any]:
        """Busca por id sustituto."""
        ...
