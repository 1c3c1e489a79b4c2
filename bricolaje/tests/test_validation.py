import pytest

from bricolaje.models import Position
from bricolaje.services.result_codes import PositionResult, RoleResult
from bricolaje.services.validation import (
    ExistenceChecker,
    Rule,
    Validator,
    is_missing_key,
    present_text,
)


class _NoLookupRepository:
    def find_by_key(self, key):
        raise AssertionError('no debería consultar el repositorio')


class _DictLookupRepository:
    def __init__(self, rows):
        self.rows = rows

    def find_by_key(self, key):
        return self.rows.get(key)


@pytest.mark.parametrize('key', [None, 0, '', '   '])
def test_missing_keys(key):
    assert is_missing_key(key)


@pytest.mark.parametrize('key', [1, 42, 'X1'])
def test_assigned_keys(key):
    assert not is_missing_key(key)


def test_present_text_lenient_accepts_empty_string():
    assert present_text('')
    assert present_text('  ')
    assert not present_text(None)


def test_present_text_strict_rejects_blank():
    assert not present_text('', strict=True)
    assert not present_text('   ', strict=True)
    assert present_text('EMPLEADO', strict=True)


def test_validator_returns_first_failing_rule_and_stops():
    evaluated = []

    def rule(code, result):
        def check(entity):
            evaluated.append(code)
            return result
        return Rule(code, check)

    validator = Validator(RoleResult.OK, [
        rule(RoleResult.MISSING_ID, True),
        rule(RoleResult.MISSING_DESCRIPTION, False),
        rule(RoleResult.ALREADY_EXISTS, False),
    ])

    assert validator.validate(object()) == RoleResult.MISSING_DESCRIPTION
    assert evaluated == [RoleResult.MISSING_ID, RoleResult.MISSING_DESCRIPTION]


def test_validator_all_rules_pass():
    validator = Validator(PositionResult.OK, [
        Rule(PositionResult.MISSING_ID, lambda e: e.id != 0),
        Rule(PositionResult.MISSING_DESCRIPTION, lambda e: e.description is not None),
    ])
    assert validator.validate(Position(id=3, description='GERENTE')) == PositionResult.OK


def test_uniqueness_rule_skipped_when_requested():
    validator = Validator(RoleResult.OK, [
        Rule(RoleResult.ALREADY_EXISTS, lambda e: False, uniqueness=True),
        Rule(RoleResult.MISSING_DESCRIPTION, lambda e: True),
    ])
    assert validator.validate(object()) == RoleResult.ALREADY_EXISTS
    assert validator.validate(object(), check_uniqueness=False) == RoleResult.OK


def test_existence_checker_never_looks_up_unassigned_key():
    checker = ExistenceChecker(_NoLookupRepository())
    assert checker.exists(0) is False
    assert checker.exists(None) is False


def test_existence_checker_reflects_repository():
    rows = {}
    checker = ExistenceChecker(_DictLookupRepository(rows))
    assert checker.exists(5) is False
    rows[5] = Position(id=5, description='EMPLEADO')
    assert checker.exists(5) is True
