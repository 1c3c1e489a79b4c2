# ==============================================================================
# REPOSITORIO BASE - Funcionalidad común para acceso a archivos JSON
# ==============================================================================
# Cada tipo de entidad se guarda en su propio archivo JSON con la forma
#     {"<id>": {...fila...}, ...}
# Las escrituras son atómicas (archivo temporal + os.replace) y todas las
# operaciones se serializan con un RLock global de proceso.
#
# TRANSACCIONES:
#   with repo.transaction():
#       ...  # lecturas y escrituras sobre un buffer en memoria
#   - Si el bloque termina bien, el buffer se escribe de una sola vez.
#   - Si se lanza cualquier excepción, el buffer se descarta (rollback).
# ==============================================================================

import json
import os
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar


# Modos de búsqueda por texto (siempre normalizados a MAYÚSCULAS)
MATCH_EXACT = 'exact'
MATCH_PREFIX = 'prefix'
MATCH_CONTAINS = 'contains'
MATCH_MODES = frozenset([MATCH_EXACT, MATCH_PREFIX, MATCH_CONTAINS])


class RepositoryError(Exception):
    """Fallo de la capa de persistencia (archivo corrupto, E/S, ...)."""
    pass


class DuplicateKeyError(RepositoryError):
    """Se intentó insertar una fila cuya clave ya existe."""
    pass


def normalize_text(value: Optional[str]) -> str:
    """Normaliza un texto para comparación (MAYÚSCULAS)."""
    return (value or '').upper()


def text_matches(stored: Optional[str], query: Optional[str], mode: str) -> bool:
    """
    Compara un valor almacenado con el texto buscado.

    Args:
        stored: Valor guardado en la fila
        query: Texto buscado
        mode: 'exact', 'prefix' o 'contains'

    Returns:
        True si coincide según el modo

    Raises:
        ValueError: Si el modo no es válido
    """
    if mode not in MATCH_MODES:
        raise ValueError(f"Modo de búsqueda inválido: {mode!r}")
    if stored is None:
        return False
    haystack = normalize_text(stored)
    needle = normalize_text(query)
    if mode == MATCH_EXACT:
        return haystack == needle
    if mode == MATCH_PREFIX:
        return haystack.startswith(needle)
    return needle in haystack


class BaseRepository(ABC):
    """
    Clase base abstracta para todos los repositorios.
    Proporciona lectura/escritura de archivos JSON con manejo de
    concurrencia mediante locks y transacciones con rollback.
    """

    # Lock global para evitar escrituras concurrentes a archivos
    _file_lock = threading.RLock()

    def __init__(self, file_path: str):
        """
        Inicializa el repositorio con la ruta al archivo JSON.

        Args:
            file_path: Ruta absoluta al archivo JSON de datos
        """
        self.file_path = file_path
        self._tx_buffer: Optional[Any] = None
        self._tx_dirty = False
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Crea el archivo (y su directorio) con datos vacíos si no existe."""
        with self._file_lock:
            if not os.path.exists(self.file_path):
                directory = os.path.dirname(self.file_path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                self._write_file(self._empty_data())

    @abstractmethod
    def _empty_data(self) -> Any:
        """
        Retorna la estructura de datos vacía para este repositorio.
        Debe ser implementado por cada repositorio concreto.
        """
        pass

    def _load_file(self) -> Any:
        """
        Lee los datos del archivo JSON.

        Raises:
            RepositoryError: Si el archivo contiene JSON inválido
        """
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            return self._empty_data()
        except json.JSONDecodeError as e:
            raise RepositoryError(f"Archivo de datos corrupto: {self.file_path}") from e

    def _write_file(self, data: Any) -> None:
        """Escribe el archivo de forma atómica."""
        # Escribir a archivo temporal primero para atomicidad
        temp_path = self.file_path + '.tmp'
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.file_path)
        except Exception:
            # Limpiar archivo temporal si algo falla
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

    def _read_raw(self) -> Any:
        """
        Lee los datos crudos: del buffer si hay una transacción abierta,
        del archivo en caso contrario.
        """
        with self._file_lock:
            if self._tx_buffer is not None:
                return self._tx_buffer
            return self._load_file()

    def _write_raw(self, data: Any) -> None:
        """
        Escribe datos: al buffer si hay una transacción abierta,
        directamente al archivo en caso contrario.
        """
        with self._file_lock:
            if self._tx_buffer is not None:
                self._tx_buffer = data
                self._tx_dirty = True
                return
            self._write_file(data)

    @contextmanager
    def transaction(self) -> Iterator['BaseRepository']:
        """
        Abre un ámbito transaccional sobre este repositorio.

        Mantiene el lock global durante todo el bloque, de modo que la
        secuencia validar-luego-persistir no se intercala con otras
        operaciones del proceso. Las transacciones anidadas se unen a la
        exterior.
        """
        with self._file_lock:
            if self._tx_buffer is not None:
                yield self
                return
            self._tx_buffer = self._load_file()
            self._tx_dirty = False
            try:
                yield self
                if self._tx_dirty:
                    self._write_file(self._tx_buffer)
            finally:
                self._tx_buffer = None
                self._tx_dirty = False

    @property
    def in_transaction(self) -> bool:
        """True si hay una transacción abierta sobre este repositorio."""
        return self._tx_buffer is not None


class DictRepository(BaseRepository):
    """
    Repositorio base para datos almacenados como diccionario.
    El ID es la clave del diccionario.

    Ejemplo: positions.json -> {"1": {...}, "2": {...}}
    """

    def _empty_data(self) -> Dict:
        """Retorna diccionario vacío."""
        return {}

    def get_all(self) -> Dict[str, Any]:
        """Obtiene todos los registros."""
        return self._read_raw()

    def get_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """
        Obtiene un registro por su ID.

        Args:
            record_id: ID del registro (puede ser int o str)

        Returns:
            Datos del registro o None si no existe
        """
        return self._read_raw().get(str(record_id))

    def update(self, record_id: Any, record_data: Dict[str, Any]) -> None:
        """Inserta o reemplaza un registro."""
        with self._file_lock:
            data = self._read_raw()
            data[str(record_id)] = record_data
            self._write_raw(data)

    def delete(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """
        Elimina un registro.

        Returns:
            Datos del registro eliminado o None si no existía
        """
        with self._file_lock:
            data = self._read_raw()
            removed = data.pop(str(record_id), None)
            if removed is not None:
                self._write_raw(data)
            return removed

    def get_next_id(self) -> int:
        """Siguiente id libre (máximo actual + 1)."""
        ids = [int(k) for k in self._read_raw().keys() if str(k).isdigit()]
        return max(ids, default=0) + 1


E = TypeVar('E')


class EntityRepository(DictRepository, Generic[E]):
    """
    Repositorio de entidades de dominio sobre un archivo JSON.

    Las subclases solo declaran:
        entity_class: dataclass con to_dict()/from_dict()
        file_name: nombre del archivo JSON
        text_field: campo descriptivo usado en las búsquedas por texto
        key_field: campo clave ('id' salvo en usuarios, que usan el DNI)
    """

    entity_class: Type[E]
    file_name: str = ''
    text_field: Optional[str] = None
    key_field: str = 'id'

    def __init__(self, base_path: str):
        super().__init__(os.path.join(base_path, self.file_name))

    def _to_entity(self, row: Dict[str, Any]) -> E:
        return self.entity_class.from_dict(row)

    def _rows(self) -> List[Dict[str, Any]]:
        """Filas ordenadas por id."""
        data = self._read_raw()
        return [data[k] for k in sorted(data.keys(), key=lambda k: int(k))]

    def _find_row(self, key: Any) -> Optional[Dict[str, Any]]:
        if self.key_field == 'id':
            return self.get_by_id(key)
        for row in self._rows():
            if row.get(self.key_field) == key:
                return row
        return None

    def _find_where(self, predicate: Callable[[Dict[str, Any]], bool]) -> List[E]:
        return [self._to_entity(row) for row in self._rows() if predicate(row)]

    # =========================================================================
    # CONTRATO DEL REPOSITORIO
    # =========================================================================

    def find_by_key(self, key: Any) -> Optional[E]:
        """Busca por clave. None si no existe."""
        row = self._find_row(key)
        return self._to_entity(row) if row is not None else None

    def find_all(self) -> List[E]:
        """Todas las filas, ordenadas por id."""
        return self._find_where(lambda row: True)

    def save(self, entity: E) -> E:
        """
        Inserta o actualiza una entidad.
        Si el id está sin asignar (0) se asigna el siguiente libre.

        Returns:
            La entidad tal como quedó almacenada
        """
        with self._file_lock:
            if not entity.id:
                entity.id = self.get_next_id()
            row = entity.to_dict()
            self.update(entity.id, row)
            return self._to_entity(row)

    def insert(self, entity: E) -> E:
        """
        Inserta una entidad nueva.

        Raises:
            DuplicateKeyError: Si la clave ya existe
        """
        with self._file_lock:
            key = getattr(entity, self.key_field)
            if self._find_row(key) is not None or (entity.id and self.get_by_id(entity.id)):
                raise DuplicateKeyError(
                    f"{self.entity_class.__name__} con clave {key!r} ya existe"
                )
            return self.save(entity)

    def delete_by_key(self, key: Any) -> bool:
        """
        Elimina la fila con esa clave.

        Returns:
            True si existía y fue eliminada
        """
        with self._file_lock:
            row = self._find_row(key)
            if row is None:
                return False
            return self.delete(row['id']) is not None

    def find_by_text(self, text: str, mode: str = MATCH_EXACT,
                     field: Optional[str] = None) -> List[E]:
        """
        Búsqueda por texto sobre el campo descriptivo, en MAYÚSCULAS.

        Args:
            text: Texto a buscar
            mode: 'exact', 'prefix' o 'contains'
            field: Campo alternativo (por defecto text_field)
        """
        field = field or self.text_field
        if field is None:
            raise ValueError(f"{type(self).__name__} no admite búsqueda por texto")
        if mode not in MATCH_MODES:
            raise ValueError(f"Modo de búsqueda inválido: {mode!r}")
        return self._find_where(lambda row: text_matches(row.get(field), text, mode))
