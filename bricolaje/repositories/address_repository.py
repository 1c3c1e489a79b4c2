# ==============================================================================
# REPOSITORIO DE DIRECCIONES
# ==============================================================================
# Encapsula todo el acceso a addresses.json
# El tipo de dirección se guarda embebido en cada fila.
# ==============================================================================

from typing import List

from bricolaje.models import Address
from bricolaje.repositories.base import EntityRepository, MATCH_EXACT, text_matches


class AddressRepository(EntityRepository[Address]):
    """
    Repositorio de direcciones.

    Formato de datos en addresses.json:
    {
        "7": {
            "id": 7,
            "street": "CALLE MAYOR",
            "number": "12",
            ...
            "postal_code": 28013,
            "address_type": {"id": 1, "description": "PARTICULAR"}
        }
    }
    """
    entity_class = Address
    file_name = 'addresses.json'
    text_field = 'street'

    def find_by_postal_code(self, postal_code: int) -> List[Address]:
        """Direcciones con ese código postal."""
        return self._find_where(lambda row: row.get('postal_code') == postal_code)

    def find_by_locality(self, locality: str) -> List[Address]:
        """Direcciones de una localidad (sin distinguir mayúsculas)."""
        return self._find_where(
            lambda row: text_matches(row.get('locality'), locality, MATCH_EXACT)
        )

    def find_by_province(self, province: str) -> List[Address]:
        """Direcciones de una provincia (sin distinguir mayúsculas)."""
        return self._find_where(
            lambda row: text_matches(row.get('province'), province, MATCH_EXACT)
        )
