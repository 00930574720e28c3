"""
End-to-end model behavior against an in-memory SQLite database.
"""

import pytest

from table_gateway.exceptions import SchemaIntrospectionError, UndefinedOperationError
from table_gateway.model import Model
from table_gateway.registry import ModelRegistry

pytestmark = pytest.mark.integration


class UserProfile(Model):
    pass


class AuditNote(Model):
    pass


class Missing(Model):
    table = "no_such_table"


@pytest.fixture
def registry(sqlite_db):
    registry = ModelRegistry()
    registry.register_connection("db", sqlite_db)
    return registry


@pytest.fixture
def users(registry):
    model = registry.model(UserProfile)
    model.create({"user_name": "bob", "status": "active", "email": "bob@x.io", "age": 30})
    model.create({"user_name": "amy", "status": "active", "email": "amy@x.io", "age": 25})
    model.create({"user_name": "bob", "status": "inactive", "age": 52})
    return model


class TestWrites:
    def test_create_returns_id(self, registry):
        users = registry.model(UserProfile)

        assert users.create({"user_name": "zoe", "status": "active"}) == 1
        assert users.find_by_id(1)["user_name"] == "zoe"

    def test_update_by_id(self, users):
        assert users.update({"age": 31}, 1) == 1

        assert users.find_by_id(1)["age"] == 31

    def test_update_with_prebound_condition(self, users):
        affected = users.update(
            {"status": "archived", "user_name": ":user_name"},
            "user_name = :user_name",
            {":user_name": "bob"},
        )

        assert affected == 2
        assert users.find_by_id(1)["user_name"] == "bob"
        assert users.find_by_id(2)["status"] == "active"

    def test_delete_by_numeric_string(self, users):
        assert users.delete("2") == 1

        assert users.find_by_id(2) is None

    def test_delete_raw_condition(self, users):
        assert users.delete("age > :age", {"age": 40}) == 1
        assert sorted(users.find()) == [1, 2]

    def test_declined_writes_touch_nothing(self, users):
        assert users.create({}) is False
        assert users.delete(None) is False
        assert users.delete("0") is False
        assert users.update({}, 1) is False
        assert len(users.find()) == 3

    def test_large_numeric_string_keys_are_exact(self, registry):
        users = registry.model(UserProfile)
        for key in (12345678901234567, 12345678901234568):
            users.create({"id": key, "user_name": str(key), "status": "active"})

        assert users.find("12345678901234567")[12345678901234567]["user_name"] == (
            "12345678901234567"
        )
        assert users.update({"age": 9}, "12345678901234568") == 1
        assert users.delete("12345678901234567") == 1

        remaining = users.find()
        assert list(remaining) == [12345678901234568]
        assert remaining[12345678901234568]["age"] == 9

    def test_save_updates_existing(self, users):
        users.save({"id": 2, "age": 26}, check_primary_key=True)

        assert users.find_by_id(2)["age"] == 26
        assert len(users.find()) == 3

    def test_save_creates_missing(self, users):
        users.save({"id": 10, "user_name": "kim", "status": "active"}, check_primary_key=True)

        assert users.find_by_id(10)["user_name"] == "kim"

    def test_save_without_key_creates(self, users):
        new_id = users.save({"user_name": "lee", "status": "active"})

        assert users.find_by_id(new_id)["user_name"] == "lee"


class TestReads:
    def test_find_keyed_by_primary_key(self, users):
        rows = users.find("status = :status", {"status": "active"})

        assert set(rows) == {1, 2}
        assert rows[2]["email"] == "amy@x.io"

    def test_find_by_numeric_condition(self, users):
        assert list(users.find(3)) == [3]

    def test_find_without_key_in_fields(self, users):
        rows = users.find("age < :age", {"age": 40}, fields=["user_name"])

        assert sorted(row["user_name"] for row in rows) == ["amy", "bob"]

    def test_find_first(self, users):
        assert users.find_first("age > :age", {"age": 50})["id"] == 3
        assert users.find_first("age > :age", {"age": 99}) is None

    def test_find_by_id_fields(self, users):
        assert users.find_by_id(2, fields=["id", "age"]) == {"id": 2, "age": 25}

    def test_find_by_ids(self, users):
        rows = users.find_by_ids([3, 1, 77])

        assert list(rows) == [3, 1]
        assert rows[3]["status"] == "inactive"

    def test_find_by_ids_empty(self, users):
        assert users.find_by_ids([]) is False
        assert users.find_by_ids([77]) == []

    def test_table_without_primary_key(self, registry):
        notes = registry.model(AuditNote)
        notes.create({"note": "first", "author": "bob"})
        notes.create({"note": "second", "author": "amy"})

        rows = notes.find()

        assert isinstance(rows, list)
        assert [row["note"] for row in rows] == ["first", "second"]

    def test_missing_table(self, registry):
        with pytest.raises(SchemaIntrospectionError):
            registry.model(Missing).find()


class TestDynamicFinders:
    def test_find_by_one_column(self, users):
        assert set(users.findByUserName("bob")) == {1, 3}

    def test_find_by_two_columns(self, users):
        rows = users.findByUserNameAndStatus("bob", "active")

        assert list(rows) == [1]

    def test_find_first_by(self, users):
        assert users.findFirstByEmail("amy@x.io")["id"] == 2
        assert users.find_first_by_email("nobody@x.io") is None

    def test_snake_case_two_columns(self, users):
        row = users.find_first_by_user_name_and_status("bob", "inactive", fields=["age"])

        assert row == {"age": 52}

    def test_unknown_column(self, users):
        with pytest.raises(UndefinedOperationError):
            users.findByNickname("bobby")
