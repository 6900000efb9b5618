"""SQL introspection provider using SQLAlchemy (MySQL/Postgres/SQLite)."""

from __future__ import annotations

import asyncio
import logging
import re

from scaffold_core.config import ConnectionConfig
from scaffold_core.exceptions import (
    IntrospectionUnavailableError,
    SchemaIntrospectionError,
    TableNotFoundError,
)
from scaffold_core.schema.column import ColumnDescriptor, ColumnType
from scaffold_core.security import redact_url
from sqlalchemy import inspect
from sqlalchemy.exc import ArgumentError, InvalidRequestError, NoSuchModuleError, NoSuchTableError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from scaffold_introspect.providers.base import SchemaProvider

logger = logging.getLogger(__name__)

# Default connection timeout in seconds to prevent indefinite hangs on
# unreachable hosts.
_CONNECT_TIMEOUT_SECONDS = 30

# Map reflected SQLAlchemy type names to ColumnType
_SQL_TYPE_MAP: dict[str, ColumnType] = {
    "BOOLEAN": ColumnType.BOOLEAN,
    "BOOL": ColumnType.BOOLEAN,
    "TINYINT": ColumnType.BOOLEAN,
    "JSON": ColumnType.JSON,
    "JSONB": ColumnType.JSON,
    "VARCHAR": ColumnType.STRING,
    "NVARCHAR": ColumnType.STRING,
    "CHAR": ColumnType.STRING,
    "NCHAR": ColumnType.STRING,
    "STRING": ColumnType.STRING,
    "INTEGER": ColumnType.INTEGER,
    "INT": ColumnType.INTEGER,
    "MEDIUMINT": ColumnType.INTEGER,
    "BIGINT": ColumnType.BIGINT,
    "SMALLINT": ColumnType.SMALLINT,
    "FLOAT": ColumnType.FLOAT,
    "REAL": ColumnType.FLOAT,
    "DOUBLE": ColumnType.FLOAT,
    "DOUBLE_PRECISION": ColumnType.FLOAT,
    "NUMERIC": ColumnType.DECIMAL,
    "DECIMAL": ColumnType.DECIMAL,
    "DATETIME": ColumnType.DATETIME,
    "TIMESTAMP": ColumnType.DATETIME,
    "DATE": ColumnType.DATE,
    "YEAR": ColumnType.DATE,
    "TIME": ColumnType.TIME,
    "TEXT": ColumnType.TEXT,
    "TINYTEXT": ColumnType.TEXT,
    "MEDIUMTEXT": ColumnType.TEXT,
    "LONGTEXT": ColumnType.TEXT,
    "CLOB": ColumnType.TEXT,
    "BLOB": ColumnType.BLOB,
    "TINYBLOB": ColumnType.BLOB,
    "MEDIUMBLOB": ColumnType.BLOB,
    "LONGBLOB": ColumnType.BLOB,
    "BYTEA": ColumnType.BLOB,
    "LARGEBINARY": ColumnType.BLOB,
}

# Database types with no first-class SQLAlchemy counterpart that are edited as strings.
_STRING_LIKE_TYPES = (
    "ENUM",
    "SET",
    "GEOMETRY",
    "GEOMETRYCOLLECTION",
    "LINESTRING",
    "POLYGON",
    "MULTILINESTRING",
    "MULTIPOINT",
    "MULTIPOLYGON",
    "POINT",
)
for _type_name in _STRING_LIKE_TYPES:
    _SQL_TYPE_MAP[_type_name] = ColumnType.STRING

# Quoted literal, optionally followed by a Postgres cast ('draft'::character varying).
_QUOTED_DEFAULT_RE = re.compile(r"^'(.*)'(?:::[\w\s]+)?$", re.DOTALL)


def _resolve_column_type(sa_type: object) -> ColumnType:
    """Map a reflected SQLAlchemy column type to a ColumnType."""
    type_name = type(sa_type).__name__.upper()
    if type_name in _SQL_TYPE_MAP:
        return _SQL_TYPE_MAP[type_name]
    # Fallback: try matching by string representation
    try:
        type_str = str(sa_type).upper().split("(")[0].strip()
    except SQLAlchemyError:
        # NullType and friends cannot be rendered
        return ColumnType.OTHER
    return _SQL_TYPE_MAP.get(type_str, ColumnType.OTHER)


def _normalize_default(raw: object) -> str | None:
    """Turn a reflected server default into the bare stored value."""
    if raw is None:
        return None
    text = str(raw).strip()
    if text.upper() == "NULL":
        return None
    match = _QUOTED_DEFAULT_RE.match(text)
    if match:
        return match.group(1).replace("''", "'")
    return text


class SQLSchemaProvider(SchemaProvider):
    """Introspects SQL tables (MySQL, Postgres, SQLite) via SQLAlchemy."""

    def __init__(self, *, timeout: float = _CONNECT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    async def list_columns(
        self,
        connection: ConnectionConfig,
        table: str,
        *,
        schema: str | None = None,
    ) -> list[ColumnDescriptor]:
        """Read the columns of *table* in physical order.

        Raises:
            IntrospectionUnavailableError: If the dialect or driver for the
                connection URL is not installed.
            TableNotFoundError: If the table does not exist.
            SchemaIntrospectionError: For any other database error.
            TimeoutError: If the operation exceeds the provider timeout.
        """
        url = connection.to_url()
        safe_url = redact_url(url)
        qualified = f"{schema}.{table}" if schema else table

        engine = self._create_engine(url, safe_url, qualified)
        logger.debug("Introspecting columns of %s on %s", qualified, safe_url)
        try:
            columns = await asyncio.wait_for(
                self._read_columns(engine, table, schema),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise TimeoutError(
                f"Introspection of {qualified} on {safe_url} timed out after {self.timeout}s. "
                "The host may be unreachable."
            ) from None
        except NoSuchTableError as exc:
            logger.error("Table %s not found on %s", qualified, safe_url)
            raise TableNotFoundError(
                table=qualified,
                detail=f"table does not exist on {safe_url}",
                cause=exc,
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Introspection of %s failed: %s", qualified, type(exc).__name__)
            raise SchemaIntrospectionError(
                table=qualified,
                detail=redact_url(str(exc)),
                cause=exc,
            ) from exc
        finally:
            await engine.dispose()

        logger.debug("Found %d column(s) in %s", len(columns), qualified)
        return columns

    @staticmethod
    def _create_engine(url: str, safe_url: str, qualified: str) -> AsyncEngine:
        try:
            return create_async_engine(url, pool_pre_ping=True)
        except (NoSuchModuleError, InvalidRequestError, ImportError) as exc:
            raise IntrospectionUnavailableError(
                table=qualified,
                detail=(
                    f"no async database driver available for {safe_url} ({redact_url(str(exc))}). "
                    "Install the driver package for this dialect, e.g. 'aiomysql' or 'aiosqlite'."
                ),
                cause=exc,
            ) from exc
        except ArgumentError as exc:
            raise SchemaIntrospectionError(
                table=qualified,
                detail=f"invalid connection URL {safe_url}",
                cause=exc,
            ) from exc

    async def _read_columns(
        self,
        engine: AsyncEngine,
        table: str,
        schema: str | None,
    ) -> list[ColumnDescriptor]:
        async with engine.connect() as conn:
            reflected = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_columns(table, schema=schema))

        columns: list[ColumnDescriptor] = []
        for col in reflected:
            column_type = _resolve_column_type(col["type"])
            if column_type is ColumnType.OTHER:
                logger.warning("Column %s.%s has unmapped type %s", table, col["name"], col["type"])
            columns.append(
                ColumnDescriptor(
                    name=col["name"],
                    column_type=column_type,
                    default=_normalize_default(col.get("default")),
                )
            )
        return columns
