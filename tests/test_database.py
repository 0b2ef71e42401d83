# ruff: noqa

import pytest
from sqlalchemy import insert, select, text

from vendor_console.database import Database, StorageError
from vendor_console.models.department import Department


def test_ping_round_trips(db):
    assert db.ping() is True


def test_execute_returns_row_mappings_for_select(db):
    db.execute(insert(Department.__table__), {"department_name": "Ops", "respective_manager": "Kim"})

    rows = db.execute(select(Department.__table__))

    assert len(rows) == 1
    assert rows[0]["department_name"] == "Ops"
    assert rows[0]["no_of_ongoing_projects"] == 0


def test_execute_returns_rowcount_for_dml(db):
    db.execute(insert(Department.__table__), {"department_name": "A"})
    db.execute(insert(Department.__table__), {"department_name": "B"})

    affected = db.execute(text("UPDATE departments SET respective_manager = :m"), {"m": "Lee"})

    assert affected == 2


def test_insert_returns_generated_id(db):
    first = db.insert(insert(Department.__table__), {"department_name": "A"})
    second = db.insert(insert(Department.__table__), {"department_name": "B"})

    assert second == first + 1


def test_malformed_statement_raises_storage_error(db):
    with pytest.raises(StorageError):
        db.execute(text("SELECT * FROM no_such_table"))


def test_databases_built_from_settings_are_independent(settings):
    one = Database(settings)
    two = Database(settings)
    one.create_all()
    two.create_all()
    one.execute(insert(Department.__table__), {"department_name": "Only here"})

    assert len(two.execute(select(Department.__table__))) == 0
    one.dispose()
    two.dispose()
