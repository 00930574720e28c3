"""
SQL identifier handling utilities.

Provides functions for quoting and qualifying SQL identifiers (table names,
column names) emitted by the statement builders. Values never pass through
here; they always travel as bind parameters.
"""

from typing import Optional, Sequence


def quote_identifier(name: str, dialect: str = "postgresql") -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        dialect: Database dialect ("postgresql", "sqlite", "mysql")

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("user_name")
        '"user_name"'
        >>> quote_identifier("order", dialect="mysql")
        '`order`'
        >>> quote_identifier('odd"name', dialect="sqlite")
        '"odd""name"'
    """
    if dialect == "mysql":
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
    # PostgreSQL and SQLite both use ANSI double quotes
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def qualify_table(
    table: str, schema: Optional[str] = None, dialect: str = "postgresql"
) -> str:
    """
    Create a fully qualified table name with optional schema prefix.

    Args:
        table: Table name
        schema: Optional schema name
        dialect: Database dialect

    Returns:
        Qualified table name

    Examples:
        >>> qualify_table("users")
        '"users"'
        >>> qualify_table("users", schema="crm")
        '"crm"."users"'
        >>> qualify_table("users", schema="crm", dialect="mysql")
        '`crm`.`users`'
    """
    quoted_table = quote_identifier(table, dialect)
    if schema:
        return f"{quote_identifier(schema, dialect)}.{quoted_table}"
    return quoted_table


def quote_column_list(columns: Sequence[str], dialect: str = "postgresql") -> str:
    """
    Quote and comma-join a sequence of column names.

    Examples:
        >>> quote_column_list(["id", "name"])
        '"id", "name"'
    """
    return ", ".join(quote_identifier(column, dialect) for column in columns)
