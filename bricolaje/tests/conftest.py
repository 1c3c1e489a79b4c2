import pytest

from bricolaje import performance_logger
from bricolaje.app_container import AppContainer
from bricolaje.models import Address, AddressType, Role, User


class SpyRepository:
    """Envuelve un repositorio real y anota las llamadas que modifican datos."""

    MUTATING = ('save', 'insert', 'delete_by_key')

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def __getattr__(self, name):
        attr = getattr(self.inner, name)
        if name in self.MUTATING:
            def recorder(*args, **kwargs):
                self.calls.append(name)
                return attr(*args, **kwargs)
            return recorder
        return attr


@pytest.fixture(autouse=True)
def isolated_profiling(tmp_path):
    """Logs de profiling en tmp_path; la configuración global se restaura al terminar."""
    previous = dict(performance_logger._settings)
    performance_logger._settings.update(enabled=True, logs_dir=str(tmp_path / 'logs'))
    yield
    performance_logger._settings.clear()
    performance_logger._settings.update(previous)
    performance_logger.reset_stats()


@pytest.fixture
def container(tmp_path):
    c = AppContainer({
        'DATA_DIR': str(tmp_path / 'data'),
        'LOGS_DIR': str(tmp_path / 'logs'),
        'STRICT_TEXT_VALIDATION': False,
    })
    yield c
    performance_logger.reset_stats()


@pytest.fixture
def strict_container(tmp_path):
    c = AppContainer({
        'DATA_DIR': str(tmp_path / 'strict-data'),
        'LOGS_DIR': str(tmp_path / 'logs'),
        'STRICT_TEXT_VALIDATION': True,
    })
    yield c
    performance_logger.reset_stats()


@pytest.fixture
def data_dir(container):
    return container.data_dir


def make_address(address_id=7, **overrides):
    fields = dict(
        id=address_id,
        street='Calle Mayor',
        number='12',
        floor='2',
        door='B',
        locality='Madrid',
        province='Madrid',
        postal_code=28013,
        address_type=AddressType(id=1, description='PARTICULAR'),
    )
    fields.update(overrides)
    return Address(**fields)


def make_user(dni='X1', role=None, address=None, **overrides):
    fields = dict(
        dni=dni,
        names='Ana',
        surnames='García López',
        age=34,
        email='ana@example.com',
        phone=600123123,
        role=role if role is not None else Role(id=2, description='VENDEDOR'),
        address=address if address is not None else make_address(),
    )
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def seeded_refs(container):
    """Rol 2 y dirección 7 ya existentes, para dar de alta usuarios."""
    assert container.role_manager.create(Role(id=2, description='VENDEDOR')) == 0
    assert container.address_manager.create(make_address(7)) == 0
    return container
