import os

import pytest

from bricolaje import performance_logger
from bricolaje.app_container import AppContainer
from bricolaje.config import load_config
from bricolaje.models import Position, Role
from bricolaje.services import (
    AddressManager,
    EntityManager,
    PositionResult,
    UserManager,
    UserResult,
)
from conftest import make_address, make_user


def test_config_defaults():
    config = load_config()
    assert config['STRICT_TEXT_VALIDATION'] is False
    assert config['ENABLE_PROFILING'] is True
    assert config['THRESHOLD_WARNING'] < config['THRESHOLD_CRITICAL']


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('BRICOLAJE_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('BRICOLAJE_STRICT_TEXT_VALIDATION', 'true')
    config = load_config()
    assert config['DATA_DIR'] == str(tmp_path)
    assert config['STRICT_TEXT_VALIDATION'] is True


def test_overrides_win_over_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('BRICOLAJE_STRICT_TEXT_VALIDATION', 'true')
    config = load_config({'STRICT_TEXT_VALIDATION': False})
    assert config['STRICT_TEXT_VALIDATION'] is False


def test_managers_are_cached(container):
    assert container.position_manager is container.manager('position')
    assert isinstance(container.address_manager, AddressManager)
    assert isinstance(container.user_manager, UserManager)
    for name in ('module', 'permission', 'role', 'product_type', 'sales_unit'):
        assert isinstance(container.manager(name), EntityManager)


def test_user_manager_sees_roles_created_through_container(container):
    container.address_manager.create(make_address(7))
    assert container.user_manager.create(make_user('X1')) == UserResult.MISSING_ROLE

    container.role_manager.create(Role(id=2, description='VENDEDOR'))
    assert container.user_manager.create(make_user('X1')) == UserResult.OK


def test_unknown_entity(container):
    with pytest.raises(KeyError):
        container.manager('invoice')
    with pytest.raises(KeyError):
        container.repository('invoice')


def test_reset_discards_instances(container):
    manager = container.position_manager
    container.reset()
    assert container.position_manager is not manager


def test_data_files_live_in_data_dir(container):
    container.position_manager.create(Position(id=1, description='EMPLEADO'))
    assert os.path.exists(os.path.join(container.data_dir, 'positions.json'))


# ==============================================================================
# PROFILING Y REGISTRO DE OPERACIONES
# ==============================================================================

def test_operations_are_profiled(container):
    performance_logger.reset_stats()
    manager = container.position_manager
    manager.create(Position(id=1, description='EMPLEADO'))
    manager.fetch(1)
    manager.fetch(2)

    stats = performance_logger.get_function_stats()
    assert stats['Position.create']['calls'] == 1
    assert stats['Position.fetch']['calls'] == 2


def test_rejected_operations_are_logged(container):
    manager = container.position_manager
    assert manager.delete(42) == PositionResult.NOT_FOUND

    log_path = os.path.join(container.config['LOGS_DIR'], performance_logger.REJECTED_OPERATIONS_LOG)
    with open(log_path, encoding='utf-8') as f:
        content = f.read()
    assert 'Baja de Position' in content
    assert 'NOT_FOUND' in content

    summary = performance_logger.get_log_summary()
    assert summary['rejected_operations']['exists'] is True

    performance_logger.clear_logs()
    assert not os.path.exists(log_path)


def test_stats_report_written(container):
    performance_logger.reset_stats()
    container.position_manager.list_all()
    performance_logger.write_function_stats_report()

    summary = performance_logger.get_log_summary()
    assert summary['performance']['exists'] is True
    assert summary['performance']['lines'] > 0


def test_profiling_disabled(tmp_path):
    container = AppContainer({
        'DATA_DIR': str(tmp_path / 'data'),
        'LOGS_DIR': str(tmp_path / 'logs'),
        'ENABLE_PROFILING': False,
    })
    performance_logger.reset_stats()
    container.position_manager.delete(42)
    assert performance_logger.get_function_stats() == {}
    assert not os.path.exists(tmp_path / 'logs')


def test_logs_stay_out_of_package_without_container(tmp_path):
    assert performance_logger._settings['logs_dir'].startswith(str(tmp_path))

    performance_logger.log_rejected_operation('Position', 'delete', 42, PositionResult.NOT_FOUND)
    assert os.path.exists(os.path.join(str(tmp_path), 'logs', performance_logger.REJECTED_OPERATIONS_LOG))
