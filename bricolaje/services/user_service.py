# ==============================================================================
# SERVICIO DE USUARIOS
# ==============================================================================
# Variante del gestor genérico:
#   - La clave es el DNI (clave natural), no el id sustituto.
#     fetch / update / delete reciben el DNI.
#   - Es el único gestor con validación entre entidades: el rol y la
#     dirección deben existir YA en sus repositorios. No se crean en cascada.
#
# Orden de validación (parte del contrato):
#   DNI → no existente → nombres → apellidos → edad → email → teléfono
#       → rol → dirección
# ==============================================================================

from typing import List, Optional

from bricolaje.models import User
from bricolaje.repositories.base import MATCH_EXACT
from bricolaje.services.catalog import EntityProfile, build_manager
from bricolaje.services.entity_manager import EntityManager
from bricolaje.services.result_codes import UserResult
from bricolaje.services.validation import (
    ExistenceChecker,
    key_assigned,
    nonzero_required,
    not_existing,
    ref_existing,
    text_required,
)


def user_profile(role_repo, address_repo) -> EntityProfile:
    """
    Perfil del usuario. Necesita los repositorios de roles y direcciones
    para resolver las referencias.
    """
    roles = ExistenceChecker(role_repo)
    addresses = ExistenceChecker(address_repo)

    return EntityProfile(
        name='User',
        codes=UserResult,
        key_field='dni',
        rules=lambda checker, strict: [
            key_assigned(UserResult.MISSING_ID, 'dni'),
            not_existing(UserResult.ALREADY_EXISTS, checker, 'dni'),
            text_required(UserResult.MISSING_NAMES, 'names', strict),
            text_required(UserResult.MISSING_SURNAMES, 'surnames', strict),
            nonzero_required(UserResult.INVALID_AGE, 'age'),
            text_required(UserResult.MISSING_EMAIL, 'email', strict),
            nonzero_required(UserResult.INVALID_PHONE, 'phone'),
            ref_existing(UserResult.MISSING_ROLE, 'role', roles),
            ref_existing(UserResult.MISSING_ADDRESS, 'address', addresses),
        ],
    )


class UserManager(EntityManager[User]):
    """
    Gestor de usuarios (clave: DNI).
    """

    def list_by_names(self, names: Optional[str], mode: str = MATCH_EXACT) -> List[User]:
        """Usuarios cuyos nombres coinciden (sin distinguir mayúsculas)."""
        return self.list_by_text(names, mode)

    def fetch_by_id(self, user_id: int) -> Optional[User]:
        """Usuario por id sustituto, o None."""
        if not user_id:
            return None
        return self.repository.find_by_id(user_id)


def build_user_manager(user_repo, role_repo, address_repo, strict: bool = False) -> UserManager:
    return build_manager(
        user_profile(role_repo, address_repo), user_repo, strict, manager_class=UserManager
    )
