# ==============================================================================
# VALIDACIÓN DE ENTIDADES
# ==============================================================================
# Un Validator es una cadena ORDENADA de reglas. Devuelve el código de la
# PRIMERA regla que falla, o el código OK si todas pasan. Nunca evalúa reglas
# posteriores a un fallo ni acumula errores: el orden forma parte del
# contrato de cada entidad.
#
# La regla de unicidad ("ya existe") se marca con uniqueness=True para que
# las modificaciones puedan omitirla: al modificar, la fila DEBE existir.
# ==============================================================================

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, List, Sequence


def is_missing_key(key: Any) -> bool:
    """
    True si la clave está sin asignar: None, 0 o texto vacío.
    """
    if key is None:
        return True
    if isinstance(key, str):
        return not key.strip()
    return key == 0


def present_text(value: Any, strict: bool = False) -> bool:
    """
    Comprueba que un campo de texto esté presente.

    Args:
        value: Valor del campo
        strict: Si es False solo None cuenta como ausente (comportamiento
            histórico: un texto vacío pasa la validación). Si es True
            también se rechazan textos vacíos o en blanco.
    """
    if value is None:
        return False
    if strict:
        return bool(str(value).strip())
    return True


def nonzero(value: Any) -> bool:
    return value is not None and value != 0


def ref_assigned(ref: Any) -> bool:
    """Referencia presente y con id distinto de 0."""
    return ref is not None and not is_missing_key(getattr(ref, 'id', None))


class ExistenceChecker:
    """
    Responde si una clave resuelve a una fila almacenada.
    Sin caché: siempre refleja el estado actual del repositorio.
    """

    def __init__(self, repository):
        self.repository = repository

    def exists(self, key: Any) -> bool:
        if is_missing_key(key):
            return False
        return self.repository.find_by_key(key) is not None


@dataclass(frozen=True)
class Rule:
    """
    Regla de validación.

    Attributes:
        code: Código devuelto si la regla falla
        check: Función entidad -> bool (True = la regla se cumple)
        name: Nombre legible de la regla
        uniqueness: True si es la regla "la entidad no existe todavía"
    """
    code: IntEnum
    check: Callable[[Any], bool]
    name: str = ''
    uniqueness: bool = False


class Validator:
    """Cadena de reglas con cortocircuito."""

    def __init__(self, ok_code: IntEnum, rules: Sequence[Rule]):
        self.ok_code = ok_code
        self.rules: List[Rule] = list(rules)

    def validate(self, entity: Any, check_uniqueness: bool = True) -> IntEnum:
        """
        Evalúa las reglas en orden.

        Args:
            entity: Entidad candidata
            check_uniqueness: False para omitir la regla de unicidad

        Returns:
            Código de la primera regla que falla, u ok_code
        """
        for rule in self.rules:
            if rule.uniqueness and not check_uniqueness:
                continue
            if not rule.check(entity):
                return rule.code
        return self.ok_code

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]


# ==============================================================================
# CONSTRUCTORES DE REGLAS
# ==============================================================================

def key_assigned(code: IntEnum, attr: str = 'id') -> Rule:
    """La clave (id o DNI) está asignada."""
    return Rule(code, lambda e: not is_missing_key(getattr(e, attr)), f'{attr} asignado')


def not_existing(code: IntEnum, checker: ExistenceChecker, attr: str = 'id') -> Rule:
    """No existe ya una fila con esa clave."""
    return Rule(code, lambda e: not checker.exists(getattr(e, attr)),
                f'{attr} no existente', uniqueness=True)


def text_required(code: IntEnum, attr: str, strict: bool = False) -> Rule:
    """Campo de texto presente (ver present_text)."""
    return Rule(code, lambda e: present_text(getattr(e, attr), strict), f'{attr} presente')


def value_required(code: IntEnum, attr: str) -> Rule:
    """Campo no nulo."""
    return Rule(code, lambda e: getattr(e, attr) is not None, f'{attr} presente')


def nonzero_required(code: IntEnum, attr: str) -> Rule:
    """Campo numérico distinto de 0."""
    return Rule(code, lambda e: nonzero(getattr(e, attr)), f'{attr} distinto de cero')


def ref_required(code: IntEnum, attr: str) -> Rule:
    """Referencia con id distinto de 0."""
    return Rule(code, lambda e: ref_assigned(getattr(e, attr)), f'{attr} asignado')


def ref_existing(code: IntEnum, attr: str, checker: ExistenceChecker) -> Rule:
    """Referencia con id distinto de 0 que además resuelve a una fila existente."""
    def check(entity):
        ref = getattr(entity, attr)
        return ref_assigned(ref) and checker.exists(ref.id)
    return Rule(code, check, f'{attr} existente')
