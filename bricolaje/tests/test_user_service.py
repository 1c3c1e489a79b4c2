import pytest

from bricolaje.models import Address, Role
from bricolaje.services import UserResult
from conftest import SpyRepository, make_address, make_user


@pytest.fixture
def users(seeded_refs):
    return seeded_refs.user_manager


def test_role_missing_scenario(users, container):
    user = make_user('X1', role=Role(id=0), address=make_address(7))
    assert users.create(user) == UserResult.MISSING_ROLE
    assert container.repository('user').find_all() == []


def test_role_must_exist(users):
    assert users.create(make_user('X1', role=Role(id=99, description='FANTASMA'))) == UserResult.MISSING_ROLE


def test_address_must_exist(users):
    assert users.create(make_user('X1', address=Address(id=0))) == UserResult.MISSING_ADDRESS
    assert users.create(make_user('X1', address=make_address(55))) == UserResult.MISSING_ADDRESS


def test_create_and_fetch_by_dni(users):
    user = make_user('12345678Z')
    assert users.create(user) == UserResult.OK

    stored = users.fetch('12345678Z')
    assert stored.id == 1
    user.id = stored.id
    assert stored == user
    assert users.fetch_by_id(1) == stored
    assert users.fetch_by_id(0) is None


def test_duplicate_dni(users):
    assert users.create(make_user('X1')) == UserResult.OK
    assert users.create(make_user('X1', names='Otra')) == UserResult.ALREADY_EXISTS
    assert users.fetch('X1').names == 'Ana'


@pytest.mark.parametrize('overrides, expected', [
    ({'names': None}, UserResult.MISSING_NAMES),
    ({'surnames': None}, UserResult.MISSING_SURNAMES),
    ({'age': 0}, UserResult.INVALID_AGE),
    ({'email': None}, UserResult.MISSING_EMAIL),
    ({'phone': 0}, UserResult.INVALID_PHONE),
])
def test_field_validation(users, overrides, expected):
    assert users.create(make_user('X1', **overrides)) == expected


def test_validation_order(users):
    user = make_user('X1', names=None, age=0, role=Role(id=0))
    assert users.create(user) == UserResult.MISSING_NAMES


@pytest.mark.parametrize('dni', [None, ''])
def test_missing_dni(seeded_refs, dni):
    spy = SpyRepository(seeded_refs.repository('user'))
    users = seeded_refs.user_manager
    users.repository = spy

    assert users.create(make_user(dni)) == UserResult.MISSING_ID
    assert users.update(make_user(dni)) == UserResult.MISSING_ID
    assert users.delete(dni) == UserResult.MISSING_ID
    assert users.fetch(dni) is None
    assert spy.calls == []


def test_update_pins_surrogate_id(users):
    users.create(make_user('X1'))
    original_id = users.fetch('X1').id

    request = make_user('X1', names='Ana María', email='anamaria@example.com')
    request.id = 999
    assert users.update(request) == UserResult.OK

    stored = users.fetch('X1')
    assert stored.id == original_id
    assert stored.names == 'Ana María'
    assert users.fetch_by_id(999) is None


def test_update_and_delete_not_found(users):
    assert users.update(make_user('NOEXISTE')) == UserResult.NOT_FOUND
    assert users.delete('NOEXISTE') == UserResult.NOT_FOUND
    assert users.list_all() == []


def test_delete_by_dni(users):
    users.create(make_user('X1'))
    assert users.delete('X1') == UserResult.OK
    assert users.fetch('X1') is None


def test_list_by_names(users):
    users.create(make_user('X1', names='Ana'))
    users.create(make_user('X2', names='Luis'))
    users.create(make_user('X3', names='ana'))

    assert [u.dni for u in users.list_by_names('ANA')] == ['X1', 'X3']
    assert [u.dni for u in users.list_by_names('lu', mode='prefix')] == ['X2']
    assert len(users.list_all()) == 3
