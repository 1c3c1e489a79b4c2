# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio de la ferretería.
# Diseñadas para ser independientes del mecanismo de persistencia.
#
# CONVENCIÓN DE IDENTIFICADORES:
#   id == 0  →  "sin asignar". Nunca es una clave real.
# ==============================================================================

from dataclasses import dataclass
from typing import Optional, Dict, Any


# Valor centinela para ids sin asignar
UNASSIGNED_ID = 0


def _ref_to_dict(ref) -> Optional[Dict[str, Any]]:
    """Serializa una referencia embebida (o None)."""
    return ref.to_dict() if ref is not None else None


# ==============================================================================
# ENTIDADES DE ORGANIZACIÓN
# ==============================================================================

@dataclass
class Position:
    """
    Cargo dentro de la empresa (Supervisor, Empleado, Director, Gerente...).

    Attributes:
        id: Identificador del cargo (0 = sin asignar)
        description: Descripción del cargo
    """
    id: int = UNASSIGNED_ID
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para persistencia."""
        return {'id': self.id, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Position':
        """Crea instancia desde diccionario."""
        return cls(
            id=data.get('id', UNASSIGNED_ID),
            description=data.get('description')
        )


@dataclass
class Module:
    """Módulo funcional de la aplicación (Ventas, Inventario, ...)."""
    id: int = UNASSIGNED_ID
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Module':
        return cls(id=data.get('id', UNASSIGNED_ID), name=data.get('name'))


@dataclass
class Permission:
    """
    Permiso asignable dentro del sistema.

    Attributes:
        id: Identificador del permiso
        permission_type: Texto que describe el tipo de permiso (LECTURA, ESCRITURA...)
    """
    id: int = UNASSIGNED_ID
    permission_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'permission_type': self.permission_type}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Permission':
        return cls(
            id=data.get('id', UNASSIGNED_ID),
            permission_type=data.get('permission_type')
        )


@dataclass
class Role:
    """Rol de usuario (ADMINISTRADOR, VENDEDOR, ...)."""
    id: int = UNASSIGNED_ID
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Role':
        return cls(id=data.get('id', UNASSIGNED_ID), description=data.get('description'))


# ==============================================================================
# ENTIDADES DE CATÁLOGO
# ==============================================================================

@dataclass
class ProductType:
    """Tipo de producto (HERRAMIENTA, TORNILLERÍA, PINTURA, ...)."""
    id: int = UNASSIGNED_ID
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductType':
        return cls(id=data.get('id', UNASSIGNED_ID), description=data.get('description'))


@dataclass
class SalesUnit:
    """
    Unidad de venta de un producto (UNIDAD, PAR, DOCENA, CAJA, ...).
    """
    id: int = UNASSIGNED_ID
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SalesUnit':
        return cls(id=data.get('id', UNASSIGNED_ID), description=data.get('description'))


# ==============================================================================
# DIRECCIONES
# ==============================================================================

@dataclass
class AddressType:
    """
    Tipo de dirección (PARTICULAR, FISCAL, ENVÍO...).
    Es un valor de referencia embebido en Address, sin gestor propio.
    """
    id: int = UNASSIGNED_ID
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AddressType':
        return cls(id=data.get('id', UNASSIGNED_ID), description=data.get('description'))


@dataclass
class Address:
    """
    Dirección postal.

    Attributes:
        id: Identificador de la dirección
        street: Calle o avenida
        number: Número del portal (texto: "12", "12B", "s/n")
        floor: Planta
        door: Puerta
        locality: Localidad
        province: Provincia
        postal_code: Código postal (0 = sin definir)
        address_type: Tipo de dirección (referencia con id distinto de 0)
    """
    id: int = UNASSIGNED_ID
    street: Optional[str] = None
    number: Optional[str] = None
    floor: Optional[str] = None
    door: Optional[str] = None
    locality: Optional[str] = None
    province: Optional[str] = None
    postal_code: int = 0
    address_type: Optional[AddressType] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para persistencia JSON."""
        return {
            'id': self.id,
            'street': self.street,
            'number': self.number,
            'floor': self.floor,
            'door': self.door,
            'locality': self.locality,
            'province': self.province,
            'postal_code': self.postal_code,
            'address_type': _ref_to_dict(self.address_type),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Address':
        """Crea instancia desde diccionario."""
        address_type = data.get('address_type')
        return cls(
            id=data.get('id', UNASSIGNED_ID),
            street=data.get('street'),
            number=data.get('number'),
            floor=data.get('floor'),
            door=data.get('door'),
            locality=data.get('locality'),
            province=data.get('province'),
            postal_code=data.get('postal_code', 0),
            address_type=AddressType.from_dict(address_type) if address_type else None
        )


# ==============================================================================
# ENTIDADES DE USUARIO
# ==============================================================================

@dataclass
class User:
    """
    Representa un usuario del sistema.

    La clave natural es el DNI (único entre todos los usuarios). El id
    sustituto lo asigna el repositorio al dar de alta y se conserva en
    cada modificación.

    Attributes:
        id: Identificador sustituto (0 = sin asignar)
        dni: Documento nacional de identidad (clave natural)
        names: Nombres
        surnames: Apellidos
        age: Edad (0 = sin definir)
        email: Correo electrónico
        phone: Teléfono (0 = sin definir)
        role: Rol asignado (debe existir previamente)
        address: Dirección asignada (debe existir previamente)
    """
    id: int = UNASSIGNED_ID
    dni: Optional[str] = None
    names: Optional[str] = None
    surnames: Optional[str] = None
    age: int = 0
    email: Optional[str] = None
    phone: int = 0
    role: Optional[Role] = None
    address: Optional[Address] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para persistencia."""
        return {
            'id': self.id,
            'dni': self.dni,
            'names': self.names,
            'surnames': self.surnames,
            'age': self.age,
            'email': self.email,
            'phone': self.phone,
            'role': _ref_to_dict(self.role),
            'address': _ref_to_dict(self.address),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """Crea instancia desde diccionario."""
        role = data.get('role')
        address = data.get('address')
        return cls(
            id=data.get('id', UNASSIGNED_ID),
            dni=data.get('dni'),
            names=data.get('names'),
            surnames=data.get('surnames'),
            age=data.get('age', 0),
            email=data.get('email'),
            phone=data.get('phone', 0),
            role=Role.from_dict(role) if role else None,
            address=Address.from_dict(address) if address else None
        )
