# ==============================================================================
# GESTOR GENÉRICO DE ENTIDADES
# ==============================================================================
# Un único orquestador para las ocho entidades del sistema:
#
#   llamador → EntityManager → transacción → Validator → ExistenceChecker
#            → Repositorio → código de resultado
#
# REGLAS:
# - Los fallos de dominio (campo ausente, no encontrado, ya existe) NUNCA se
#   lanzan como excepción: se devuelven como código de resultado.
# - Los fallos de infraestructura del repositorio se propagan tal cual
#   (después del rollback de la transacción).
# - Solo se traducen a PERSISTENCE_FAILED un save/insert que devuelve None
#   y la colisión de clave detectada por el propio repositorio al insertar.
# - Sin reintentos: un fallo se informa una vez.
#
# Ciclo de vida de una fila:
#   ausente → (alta válida y única) → presente → (modificación) → presente
#           → (baja) → ausente
# ==============================================================================

from enum import IntEnum
from typing import Any, Generic, List, Optional, Type, TypeVar

from bricolaje import performance_logger
from bricolaje.performance_logger import profile_operation
from bricolaje.repositories.base import (
    DuplicateKeyError,
    MATCH_CONTAINS,
    MATCH_EXACT,
    MATCH_PREFIX,
    normalize_text,
)
from bricolaje.services.result_codes import REQUIRED_CODES
from bricolaje.services.validation import ExistenceChecker, Validator, is_missing_key

E = TypeVar('E')


class EntityManager(Generic[E]):
    """
    Gestor CRUD genérico parametrizado por entidad.

    Args:
        entity_name: Nombre de la entidad (para logs y estadísticas)
        repository: Repositorio de la entidad (ver IEntityRepository)
        validator: Cadena de reglas de la entidad
        codes: IntEnum de resultados de la entidad
        key_field: Campo clave ('id', o 'dni' en usuarios)
        uniqueness_in_validator: False si la comprobación de "ya existe" al
            dar de alta la hace el gestor después de validar (Cargo)
    """

    def __init__(
        self,
        entity_name: str,
        repository,
        validator: Validator,
        codes: Type[IntEnum],
        key_field: str = 'id',
        uniqueness_in_validator: bool = True
    ):
        missing = [name for name in REQUIRED_CODES if name not in codes.__members__]
        if missing:
            raise ValueError(f"La tabla {codes.__name__} no define: {', '.join(missing)}")

        self.entity_name = entity_name
        self.repository = repository
        self.validator = validator
        self.codes = codes
        self.key_field = key_field
        self.uniqueness_in_validator = uniqueness_in_validator
        self.checker = ExistenceChecker(repository)

    def _key_of(self, entity: E) -> Any:
        return getattr(entity, self.key_field)

    def _reject(self, operation: str, key: Any, code: IntEnum) -> IntEnum:
        performance_logger.log_rejected_operation(self.entity_name, operation, key, code)
        return code

    # =========================================================================
    # OPERACIONES DE ESCRITURA
    # =========================================================================

    @profile_operation('create')
    def create(self, entity: E) -> IntEnum:
        """
        Da de alta una entidad nueva.

        Returns:
            OK, MISSING_ID, el primer fallo de validación, ALREADY_EXISTS
            o PERSISTENCE_FAILED
        """
        key = self._key_of(entity)
        if is_missing_key(key):
            return self._reject('create', key, self.codes.MISSING_ID)

        with self.repository.transaction():
            result = self.validator.validate(
                entity, check_uniqueness=self.uniqueness_in_validator
            )
            if result != self.codes.OK:
                return self._reject('create', key, result)

            if not self.uniqueness_in_validator and self.checker.exists(key):
                return self._reject('create', key, self.codes.ALREADY_EXISTS)

            try:
                stored = self.repository.insert(entity)
            except DuplicateKeyError:
                # Otra operación ganó la carrera entre la comprobación y el alta
                return self._reject('create', key, self.codes.PERSISTENCE_FAILED)

            if stored is None:
                return self._reject('create', key, self.codes.PERSISTENCE_FAILED)

        return self.codes.OK

    @profile_operation('update')
    def update(self, entity: E) -> IntEnum:
        """
        Modifica una entidad existente.

        El id sustituto se toma SIEMPRE de la fila almacenada, nunca del
        llamador: entity.id se reasigna antes de guardar.

        Returns:
            OK, MISSING_ID, el primer fallo de validación, NOT_FOUND
            o PERSISTENCE_FAILED
        """
        key = self._key_of(entity)
        if is_missing_key(key):
            return self._reject('update', key, self.codes.MISSING_ID)

        with self.repository.transaction():
            result = self.validator.validate(entity, check_uniqueness=False)
            if result != self.codes.OK:
                return self._reject('update', key, result)

            current = self.repository.find_by_key(key)
            if current is None:
                return self._reject('update', key, self.codes.NOT_FOUND)

            entity.id = current.id
            if self.repository.save(entity) is None:
                return self._reject('update', key, self.codes.PERSISTENCE_FAILED)

        return self.codes.OK

    @profile_operation('delete')
    def delete(self, key: Any) -> IntEnum:
        """
        Da de baja la entidad con esa clave.

        Returns:
            OK, MISSING_ID o NOT_FOUND
        """
        if is_missing_key(key):
            return self._reject('delete', key, self.codes.MISSING_ID)

        with self.repository.transaction():
            if not self.checker.exists(key):
                return self._reject('delete', key, self.codes.NOT_FOUND)
            self.repository.delete_by_key(key)

        return self.codes.OK

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    @profile_operation('fetch')
    def fetch(self, key: Any) -> Optional[E]:
        """Entidad almacenada o None. La ausencia no es un error."""
        if is_missing_key(key):
            return None
        return self.repository.find_by_key(key)

    @profile_operation('exists')
    def exists(self, key: Any) -> bool:
        return self.checker.exists(key)

    @profile_operation('list_all')
    def list_all(self) -> List[E]:
        return self.repository.find_all()

    @profile_operation('list_by_text')
    def list_by_text(self, text: Optional[str], mode: str = MATCH_EXACT) -> List[E]:
        """
        Búsqueda por el campo descriptivo de la entidad.
        El texto se normaliza a MAYÚSCULAS antes de delegar en el repositorio.

        Args:
            text: Texto buscado (None → lista vacía)
            mode: 'exact', 'prefix' o 'contains'

        Raises:
            ValueError: Si el modo no es válido
        """
        if text is None:
            return []
        return self.repository.find_by_text(normalize_text(text), mode)

    def list_exact(self, text: Optional[str]) -> List[E]:
        return self.list_by_text(text, MATCH_EXACT)

    def list_starting_with(self, text: Optional[str]) -> List[E]:
        return self.list_by_text(text, MATCH_PREFIX)

    def list_containing(self, text: Optional[str]) -> List[E]:
        return self.list_by_text(text, MATCH_CONTAINS)

    @profile_operation('fetch_by_text')
    def fetch_by_text(self, text: Optional[str]) -> Optional[E]:
        """Primera coincidencia exacta (sin distinguir mayúsculas) o None."""
        matches = self.list_exact(text)
        return matches[0] if matches else None
