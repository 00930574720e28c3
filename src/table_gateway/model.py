"""
Table-backed models with synthesized CRUD and dynamic finders.

A model maps one table. Declaring a subclass is enough; the table name
defaults to the snake_case class name and columns are discovered from the
database on first use.

Usage:
    class UserProfile(Model):
        primary_key = "id"

    users = registry.model(UserProfile)          # or UserProfile(connection)
    new_id = users.create({"user_name": "bob", "status": "active"})
    users.update({"status": "inactive"}, new_id)
    users.find("status = :status", {"status": "active"})
    users.findByUserNameAndStatus("bob", "active")
    users.find_first_by_user_name("bob")

Declined operations (empty fields, empty conditions, empty id lists) return
``False`` instead of raising; callers must check for it.

Conditions are either a primary-key value or a raw SQL predicate string.
Raw predicates are inserted into the statement verbatim and are therefore
trusted input: pass user-supplied values through ``binds`` only.
"""

from __future__ import annotations

import functools
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Tuple

from table_gateway.exceptions import SchemaIntrospectionError, UndefinedOperationError
from table_gateway.infrastructure.sql.core.statement import (
    Condition,
    primary_key_condition,
)
from table_gateway.infrastructure.sql.operations import (
    DeleteBuilder,
    FieldList,
    InsertBuilder,
    SelectBuilder,
    UpdateBuilder,
)
from table_gateway.infrastructure.sql.results import (
    ResultSet,
    Row,
    shape_row,
    shape_rows,
)
from table_gateway.io.connection import ConnectionLike
from table_gateway.resolver import OperationKind, resolve
from table_gateway.utils.logging import get_logger
from table_gateway.utils.naming import uncamelize

if TYPE_CHECKING:
    from table_gateway.registry import ModelRegistry

logger = get_logger(__name__)

ALL_FIELDS = "*"


@dataclass(frozen=True)
class ModelDescriptor:
    """
    Table metadata for one model.

    Attributes:
        table_name: Table the model maps.
        primary_key: Primary key column.
        connection_name: Registry name of the connection the model uses.
        schema: Optional schema (or attached database) qualifier.
    """

    table_name: str
    primary_key: str = "id"
    connection_name: str = "db"
    schema: Optional[str] = None


class Model:
    """
    Record access for a single table.

    Subclasses configure the mapping through class attributes; the same
    values can be passed to the constructor to use ``Model`` directly.

    Attributes:
        table: Table name; defaults to the snake_case class name.
        primary_key: Primary key column name.
        connection_name: Registry name of the connection to use.
        schema: Optional schema qualifier.
    """

    table: Optional[str] = None
    primary_key: str = "id"
    connection_name: str = "db"
    schema: Optional[str] = None

    def __init__(
        self,
        db: ConnectionLike,
        *,
        table: Optional[str] = None,
        primary_key: Optional[str] = None,
        schema: Optional[str] = None,
        registry: Optional["ModelRegistry"] = None,
        preload_columns: bool = False,
    ) -> None:
        """
        Initialize the model.

        Args:
            db: Connection used for every statement
            table: Overrides the class-level table name
            primary_key: Overrides the class-level primary key
            schema: Overrides the class-level schema
            registry: Registry used to resolve services by attribute name
            preload_columns: Load the column catalog now instead of on first use
        """
        cls = type(self)
        self.descriptor = ModelDescriptor(
            table_name=table or cls.table or uncamelize(cls.__name__),
            primary_key=primary_key or cls.primary_key,
            connection_name=cls.connection_name,
            schema=schema if schema is not None else cls.schema,
        )
        self.db = db
        self.registry = registry

        dialect = db.dialect
        self._insert = InsertBuilder(dialect)
        self._delete = DeleteBuilder(dialect)
        self._update = UpdateBuilder(dialect)
        self._select = SelectBuilder(dialect)

        self._catalog_lock = threading.Lock()
        self._columns: Optional[List[Row]] = None
        self._column_names: Tuple[str, ...] = ()
        self._default_fields: Optional[str] = None

        if preload_columns:
            self.columns()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table={self.table_name!r}>"

    # ------------------------------------------------------------------
    # Descriptor access
    # ------------------------------------------------------------------

    @property
    def table_name(self) -> str:
        return self.descriptor.table_name

    @property
    def pk(self) -> str:
        return self.descriptor.primary_key

    @property
    def table_schema(self) -> Optional[str]:
        return self.descriptor.schema

    # ------------------------------------------------------------------
    # Schema catalog
    # ------------------------------------------------------------------

    def columns(self) -> List[Row]:
        """
        Return the table's column descriptions, querying the database once.

        Concurrent first calls are serialized so the describe query runs only
        once per model instance. Database errors propagate unchanged.

        Raises:
            SchemaIntrospectionError: If the table reports no columns.
        """
        if self._columns is None:
            with self._catalog_lock:
                if self._columns is None:
                    self._load_columns()
        return self._columns

    def _load_columns(self) -> None:
        stmt = self.db.dialect.describe_table(self.table_name, self.table_schema)
        rows = self.db.query_all(stmt.sql, stmt.binds)
        if not rows:
            raise SchemaIntrospectionError(self.table_name)

        names = tuple(row["Field"] for row in rows)
        self._column_names = names
        self._default_fields = self._select.select_list(names)
        self._columns = rows

        logger.info(
            "model.columns.loaded",
            model=type(self).__name__,
            table=self.table_name,
            column_count=len(names),
        )

    def column_names(self) -> Tuple[str, ...]:
        """Return the table's column names in definition order."""
        self.columns()
        return self._column_names

    def _normalize_fields(self, fields: FieldList) -> FieldList:
        if fields != ALL_FIELDS:
            return fields
        self.columns()
        return self._default_fields

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: Mapping[str, Any]) -> Any:
        """
        Insert one row.

        Example:
            >>> users.create({"name": "ueaner", "age": 28})

        Args:
            fields: Column name to value mapping

        On dialects without a driver-reported row id (PostgreSQL) the key is
        read back with ``RETURNING`` when the table has the primary-key
        column; otherwise the affected row count is returned.

        Returns:
            The new primary key value (or affected rows when no key can be
            reported), or False when ``fields`` is empty
        """
        if not fields:
            logger.debug("model.create.declined", table=self.table_name)
            return False

        returning = None
        if self.db.dialect.insert_returns_key and self.pk in self.column_names():
            returning = self.pk

        stmt = self._insert.insert(
            self.table_schema, self.table_name, fields, returning=returning
        )
        result = self.db.query(stmt.sql, stmt.binds)
        if returning and isinstance(result, list):
            return result[0][returning] if result else None
        return result

    def delete(
        self, condition: Condition, binds: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Delete rows matching a condition.

        Examples:
            >>> users.delete(123)
            >>> users.delete("created_at < :created_at", {"created_at": "2015-10-27"})

        Returns:
            Affected row count, or False when ``condition`` is empty
        """
        stmt = self._delete.delete(
            self.table_schema, self.table_name, self.pk, condition, binds
        )
        if stmt is None:
            logger.debug("model.delete.declined", table=self.table_name)
            return False
        return self.db.query(stmt.sql, stmt.binds)

    def update(
        self,
        fields: Mapping[str, Any],
        condition: Condition,
        binds: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Update rows matching a condition.

        Fields whose name already appears as a key of ``binds`` are not
        assigned; that bind belongs to the caller's condition.

        Examples:
            >>> users.update({"name": "jack", "age": 20}, 12)
            >>> users.update({"age": 21}, "created_at = :created_at",
            ...              {"created_at": "2015-10-27 08:36:42"})

        Returns:
            Affected row count, or False when nothing can be updated
        """
        stmt = self._update.update(
            self.table_schema, self.table_name, self.pk, fields, condition, binds
        )
        if stmt is None:
            logger.debug("model.update.declined", table=self.table_name)
            return False
        return self.db.query(stmt.sql, stmt.binds)

    def save(self, fields: Mapping[str, Any], check_primary_key: bool = False) -> Any:
        """
        Update the row identified by the primary key in ``fields``, or create one.

        With ``check_primary_key`` the row is looked up first and created when
        missing. The lookup and the write are separate statements, so a
        concurrent writer may act in between.

        Returns:
            Result of :meth:`update` or :meth:`create`, or False when
            ``fields`` is empty
        """
        if not fields:
            logger.debug("model.save.declined", table=self.table_name)
            return False

        key = fields.get(self.pk)
        if key and (not check_primary_key or self.find_by_id(key)):
            where, binds = primary_key_condition(
                self.pk, key, self.db.dialect.quote(self.pk)
            )
            return self.update(fields, where, binds)

        return self.create(fields)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find(
        self,
        condition: Condition = None,
        binds: Optional[Mapping[str, Any]] = None,
        fields: FieldList = ALL_FIELDS,
    ) -> ResultSet:
        """
        Find rows matching a condition; every row when it is empty.

        Examples:
            >>> users.find()
            >>> users.find(123)
            >>> users.find("age > :age", {"age": 20}, fields=["id", "name"])

        Returns:
            Rows keyed by primary key when selected, otherwise a list
        """
        stmt = self._select.select(
            self.table_schema,
            self.table_name,
            self.pk,
            self._normalize_fields(fields),
            condition,
            binds,
        )
        return shape_rows(self.db.query_all(stmt.sql, stmt.binds), self.pk)

    def find_first(
        self,
        condition: Condition = None,
        binds: Optional[Mapping[str, Any]] = None,
        fields: FieldList = ALL_FIELDS,
    ) -> Optional[Row]:
        """Find the first row matching a condition, or None."""
        stmt = self._select.select(
            self.table_schema,
            self.table_name,
            self.pk,
            self._normalize_fields(fields),
            condition,
            binds,
        )
        return shape_row(self.db.query_row(stmt.sql, stmt.binds))

    def find_by_id(self, id: Any, fields: FieldList = ALL_FIELDS) -> Any:
        """
        Find one row by primary key.

        Returns:
            The row, None when missing, or False when ``id`` is empty
        """
        if not id:
            return False
        return self.find_first_by_column(self.pk, id, fields)

    def find_by_ids(self, ids: Sequence[Any], fields: FieldList = ALL_FIELDS) -> Any:
        """
        Find rows for a list of primary keys.

        The query orders rows by their position in ``ids`` and the result is
        keyed by primary key, so look rows up by key rather than position.

        Returns:
            Rows keyed by primary key, an empty list when nothing matched, or
            False when ``ids`` is empty
        """
        if not ids:
            logger.debug("model.find_by_ids.declined", table=self.table_name)
            return False

        stmt = self._select.select_by_ids(
            self.table_schema,
            self.table_name,
            self.pk,
            self._normalize_fields(fields),
            ids,
        )
        return shape_rows(self.db.query_all(stmt.sql, stmt.binds), self.pk)

    def find_by_column(
        self, column: str, value: Any, fields: FieldList = ALL_FIELDS
    ) -> ResultSet:
        """Find rows where ``column`` equals ``value``."""
        stmt = self._select.select_by_columns(
            self.table_schema,
            self.table_name,
            self._normalize_fields(fields),
            [column],
            [value],
        )
        return shape_rows(self.db.query_all(stmt.sql, stmt.binds), self.pk)

    def find_first_by_column(
        self, column: str, value: Any, fields: FieldList = ALL_FIELDS
    ) -> Optional[Row]:
        """Find the first row where ``column`` equals ``value``."""
        stmt = self._select.select_by_columns(
            self.table_schema,
            self.table_name,
            self._normalize_fields(fields),
            [column],
            [value],
        )
        return shape_row(self.db.query_row(stmt.sql, stmt.binds))

    def find_by_column_and_column(
        self,
        column1: str,
        column2: str,
        value1: Any,
        value2: Any,
        fields: FieldList = ALL_FIELDS,
    ) -> ResultSet:
        """Find rows where both columns equal their values."""
        stmt = self._select.select_by_columns(
            self.table_schema,
            self.table_name,
            self._normalize_fields(fields),
            [column1, column2],
            [value1, value2],
        )
        return shape_rows(self.db.query_all(stmt.sql, stmt.binds), self.pk)

    def find_first_by_column_and_column(
        self,
        column1: str,
        column2: str,
        value1: Any,
        value2: Any,
        fields: FieldList = ALL_FIELDS,
    ) -> Optional[Row]:
        """Find the first row where both columns equal their values."""
        stmt = self._select.select_by_columns(
            self.table_schema,
            self.table_name,
            self._normalize_fields(fields),
            [column1, column2],
            [value1, value2],
        )
        return shape_row(self.db.query_row(stmt.sql, stmt.binds))

    # ------------------------------------------------------------------
    # Dynamic finders
    # ------------------------------------------------------------------

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Dispatch a dynamic finder by name.

        ``name`` follows ``findBy<Column>[And<Column>]`` or
        ``findFirstBy<Column>[And<Column>]`` (or the snake_case spelling).
        Column values follow in positional arguments, then optional ``fields``.

        Example:
            >>> users.call("findByUserNameAndStatus", "bob", "active")
            # same as users.find_by_column_and_column("user_name", "status", "bob", "active")

        Raises:
            UndefinedOperationError: If the name is not a finder name, or a
                column it names is not in the table.
        """
        operation = resolve(name)
        if operation is None:
            raise UndefinedOperationError(name, "not a finder name")

        known = self.column_names()
        for column in operation.columns:
            if column not in known:
                logger.warning(
                    "model.dynamic_finder.unknown_column",
                    table=self.table_name,
                    operation=name,
                    column=column,
                )
                raise UndefinedOperationError(name, f"unknown column '{column}'")

        handler = self._finder_for(operation.kind, len(operation.columns))
        return handler(*operation.columns, *args, **kwargs)

    def _finder_for(self, kind: OperationKind, column_count: int):
        if kind is OperationKind.FIND_BY:
            if column_count == 2:
                return self.find_by_column_and_column
            return self.find_by_column
        if column_count == 2:
            return self.find_first_by_column_and_column
        return self.find_first_by_column

    def __getattr__(self, name: str) -> Any:
        """
        Resolve finder names and registry services by attribute access.

        ``find...`` names return a callable bound to :meth:`call`. Other names
        are looked up in the registry and cached on the instance. Anything
        else logs a warning and yields None.
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name.startswith("find"):
            return functools.partial(self.call, name)

        registry = self.__dict__.get("registry")
        if registry is not None and registry.has(name):
            service = registry.get(name)
            setattr(self, name, service)
            return service

        logger.warning(
            "model.attribute.undefined",
            model=type(self).__name__,
            attribute=name,
        )
        return None
