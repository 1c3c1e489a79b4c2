# ==============================================================================
# REPOSITORIO DE USUARIOS
# ==============================================================================
# Encapsula todo el acceso a users.json
# Los usuarios se indexan por id sustituto, pero su clave de negocio es el DNI:
# find_by_key / delete_by_key / insert trabajan con el DNI.
# ==============================================================================

from typing import List, Optional

from bricolaje.models import User
from bricolaje.repositories.base import EntityRepository, MATCH_EXACT


class UserRepository(EntityRepository[User]):
    """
    Repositorio para gestión de usuarios.

    Formato de datos en users.json:
    {
        "1": {
            "id": 1,
            "dni": "12345678Z",
            "names": "ANA",
            ...
            "role": {"id": 2, "description": "VENDEDOR"},
            "address": {"id": 7, ...}
        }
    }
    """
    entity_class = User
    file_name = 'users.json'
    text_field = 'names'
    key_field = 'dni'

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Busca un usuario por su id sustituto."""
        row = self.get_by_id(user_id)
        return self._to_entity(row) if row is not None else None

    def find_by_names(self, names: str, mode: str = MATCH_EXACT) -> List[User]:
        """Usuarios cuyos nombres coinciden con el texto."""
        return self.find_by_text(names, mode)
