import json
import os

import pytest

from bricolaje.models import Position, Role
from bricolaje.repositories import (
    AddressRepository,
    DuplicateKeyError,
    IAddressRepository,
    IEntityRepository,
    IUserRepository,
    PositionRepository,
    RepositoryError,
    UserRepository,
)
from conftest import make_address, make_user


@pytest.fixture
def positions(tmp_path):
    return PositionRepository(str(tmp_path))


def test_repositories_implement_interfaces(tmp_path):
    assert isinstance(PositionRepository(str(tmp_path)), IEntityRepository)
    assert isinstance(AddressRepository(str(tmp_path)), IAddressRepository)
    assert isinstance(UserRepository(str(tmp_path)), IUserRepository)


def test_file_created_empty(positions):
    assert os.path.exists(positions.file_path)
    with open(positions.file_path, encoding='utf-8') as f:
        assert json.load(f) == {}


def test_save_and_find_by_key(positions):
    stored = positions.save(Position(id=5, description='EMPLEADO'))
    assert stored == Position(id=5, description='EMPLEADO')
    assert positions.find_by_key(5) == Position(id=5, description='EMPLEADO')
    assert positions.find_by_key(6) is None


def test_save_assigns_next_id_when_unassigned(positions):
    positions.save(Position(id=3, description='DIRECTOR'))
    stored = positions.save(Position(description='GERENTE'))
    assert stored.id == 4


def test_find_all_ordered_by_id(positions):
    for pid in (10, 2, 7):
        positions.save(Position(id=pid, description=f'CARGO {pid}'))
    assert [p.id for p in positions.find_all()] == [2, 7, 10]


def test_insert_refuses_existing_key(positions):
    positions.insert(Position(id=5, description='EMPLEADO'))
    with pytest.raises(DuplicateKeyError):
        positions.insert(Position(id=5, description='OTRO'))
    assert positions.find_by_key(5).description == 'EMPLEADO'


def test_delete_by_key(positions):
    positions.save(Position(id=5, description='EMPLEADO'))
    assert positions.delete_by_key(5) is True
    assert positions.delete_by_key(5) is False
    assert positions.find_all() == []


@pytest.mark.parametrize('mode, query', [
    ('exact', 'tornillo'),
    ('prefix', 'torn'),
    ('contains', 'nill'),
])
def test_text_search_is_case_insensitive(positions, mode, query):
    positions.save(Position(id=1, description='TORNILLO'))
    positions.save(Position(id=2, description='TUERCA'))
    assert [p.id for p in positions.find_by_text(query, mode)] == [1]


@pytest.mark.parametrize('mode, query', [
    ('exact', 'TORNILLO '),
    ('prefix', ' TORN'),
    ('contains', ' nill '),
])
def test_text_search_keeps_surrounding_spaces(positions, mode, query):
    positions.save(Position(id=1, description='TORNILLO'))
    assert positions.find_by_text(query, mode) == []


def test_text_search_rejects_unknown_mode(positions):
    with pytest.raises(ValueError):
        positions.find_by_text('x', 'regex')


def test_transaction_commits_on_success(positions):
    with positions.transaction():
        positions.save(Position(id=1, description='EMPLEADO'))
        positions.save(Position(id=2, description='GERENTE'))
        assert positions.in_transaction
    assert not positions.in_transaction
    fresh = PositionRepository(os.path.dirname(positions.file_path))
    assert [p.id for p in fresh.find_all()] == [1, 2]


def test_transaction_rolls_back_on_error(positions):
    positions.save(Position(id=1, description='EMPLEADO'))

    with pytest.raises(RuntimeError):
        with positions.transaction():
            positions.save(Position(id=2, description='GERENTE'))
            positions.delete_by_key(1)
            raise RuntimeError('fallo a mitad de la operación')

    assert [p.id for p in positions.find_all()] == [1]


def test_nested_transaction_joins_outer(positions):
    with pytest.raises(RuntimeError):
        with positions.transaction():
            with positions.transaction():
                positions.save(Position(id=1, description='EMPLEADO'))
            raise RuntimeError('fallo')
    assert positions.find_all() == []


def test_corrupt_file_raises_repository_error(positions):
    with open(positions.file_path, 'w', encoding='utf-8') as f:
        f.write('{no es json')
    with pytest.raises(RepositoryError):
        positions.find_all()


def test_address_finders(tmp_path):
    repo = AddressRepository(str(tmp_path))
    repo.save(make_address(1, postal_code=28013, locality='Madrid', province='Madrid'))
    repo.save(make_address(2, postal_code=8001, locality='Barcelona', province='Barcelona'))
    repo.save(make_address(3, postal_code=28013, locality='MADRID', province='Madrid'))

    assert [a.id for a in repo.find_by_postal_code(28013)] == [1, 3]
    assert [a.id for a in repo.find_by_locality('madrid')] == [1, 3]
    assert [a.id for a in repo.find_by_province('BARCELONA')] == [2]


def test_address_round_trip_keeps_address_type(tmp_path):
    repo = AddressRepository(str(tmp_path))
    address = make_address(9)
    repo.save(address)
    assert repo.find_by_key(9) == address


def test_user_repository_keyed_by_dni(tmp_path):
    repo = UserRepository(str(tmp_path))
    stored = repo.insert(make_user('12345678Z', role=Role(id=2, description='VENDEDOR')))
    assert stored.id == 1
    assert repo.find_by_key('12345678Z').id == 1
    assert repo.find_by_id(1).dni == '12345678Z'

    with pytest.raises(DuplicateKeyError):
        repo.insert(make_user('12345678Z'))

    assert repo.delete_by_key('12345678Z') is True
    assert repo.find_by_key('12345678Z') is None
