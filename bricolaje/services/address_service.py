# ==============================================================================
# SERVICIO DE DIRECCIONES
# ==============================================================================
# Gestor de direcciones: CRUD genérico + consultas por código postal,
# localidad, provincia y calle.
#
# Orden de validación (parte del contrato):
#   id → no existente → calle → número → planta → puerta → localidad
#      → provincia → código postal → tipo de dirección
# ==============================================================================

from typing import List, Optional

from bricolaje.models import Address
from bricolaje.services.catalog import EntityProfile, build_manager
from bricolaje.services.entity_manager import EntityManager
from bricolaje.services.result_codes import AddressResult
from bricolaje.services.validation import (
    key_assigned,
    nonzero_required,
    not_existing,
    ref_required,
    text_required,
    value_required,
)


ADDRESS = EntityProfile(
    name='Address',
    codes=AddressResult,
    rules=lambda checker, strict: [
        key_assigned(AddressResult.MISSING_ID),
        not_existing(AddressResult.ALREADY_EXISTS, checker),
        text_required(AddressResult.MISSING_STREET, 'street', strict),
        value_required(AddressResult.MISSING_NUMBER, 'number'),
        text_required(AddressResult.MISSING_FLOOR, 'floor', strict),
        text_required(AddressResult.MISSING_DOOR, 'door', strict),
        text_required(AddressResult.MISSING_LOCALITY, 'locality', strict),
        text_required(AddressResult.MISSING_PROVINCE, 'province', strict),
        nonzero_required(AddressResult.INVALID_POSTAL_CODE, 'postal_code'),
        ref_required(AddressResult.MISSING_ADDRESS_TYPE, 'address_type'),
    ],
)


class AddressManager(EntityManager[Address]):
    """
    Gestor de direcciones.

    Las búsquedas por texto (list_by_text, list_containing, ...) trabajan
    sobre la calle/avenida.
    """

    def list_by_street(self, street: Optional[str]) -> List[Address]:
        """Direcciones cuya calle coincide exactamente (sin distinguir mayúsculas)."""
        return self.list_exact(street)

    def fetch_by_street(self, street: Optional[str]) -> Optional[Address]:
        """Primera dirección con esa calle, o None."""
        return self.fetch_by_text(street)

    def list_by_postal_code(self, postal_code: int) -> List[Address]:
        return self.repository.find_by_postal_code(postal_code)

    def list_by_locality(self, locality: Optional[str]) -> List[Address]:
        if locality is None:
            return []
        return self.repository.find_by_locality(locality)

    def list_by_province(self, province: Optional[str]) -> List[Address]:
        if province is None:
            return []
        return self.repository.find_by_province(province)


def build_address_manager(repository, strict: bool = False) -> AddressManager:
    return build_manager(ADDRESS, repository, strict, manager_class=AddressManager)
