"""Connection configuration handed to schema introspection."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from sqlalchemy.engine import URL

DEFAULT_DRIVER = "mysql+aiomysql"
DEFAULT_PORT = 3306
DEFAULT_CHARSET = "utf8mb4"


class ConnectionConfig(BaseModel):
    """Parameters for reaching the database that holds a model's table.

    Either ``url`` is given verbatim, or the discrete fields are assembled
    into a URL by :meth:`to_url`.
    """

    url: str | None = Field(default=None, description="Full SQLAlchemy URL. Overrides the discrete fields.")
    driver: str = Field(default=DEFAULT_DRIVER, min_length=1, description="SQLAlchemy dialect+driver name.")
    host: str = Field(default="127.0.0.1", description="Database host.")
    port: int = Field(default=DEFAULT_PORT, gt=0, le=65535, description="Database port.")
    database: str | None = Field(default=None, description="Database (schema) name.")
    username: str | None = Field(default=None, description="Login user.")
    password: str | None = Field(default=None, description="Login password.")
    charset: str | None = Field(default=DEFAULT_CHARSET, description="Connection charset.")
    table_prefix: str = Field(default="", description="Prefix applied to every table on this connection.")

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_target(self) -> ConnectionConfig:
        """Require a database name when no explicit URL is given."""
        if self.url is None and not self.database:
            raise ValueError("ConnectionConfig requires either 'url' or 'database'")
        return self

    def to_url(self) -> str:
        """Return the SQLAlchemy URL string, credentials included."""
        if self.url is not None:
            return self.url
        query = {"charset": self.charset} if self.charset else {}
        url = URL.create(
            self.driver,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
            query=query,
        )
        return url.render_as_string(hide_password=False)
