#!/usr/bin/env python3
"""Example 2: Introspection — Scaffold a resource straight from a SQLite table.

Demonstrates:
- Creating a throwaway SQLite database
- Pointing a ResourceGenerator at it through a ConnectionConfig
- Generating all three sections from one introspection run
"""

import asyncio
import tempfile
from pathlib import Path

from scaffold_codegen import ResourceGenerator
from scaffold_core import ConnectionConfig, TableModel
from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, String, Table, Text, create_engine

db_path = Path(tempfile.mkdtemp(prefix="scaffold-")) / "blog.db"

metadata = MetaData()
Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("slug", String(200), nullable=False),
    Column("status", String(20), server_default="draft"),
    Column("image", String(255)),
    Column("body", Text),
    Column("featured", Boolean, server_default="0"),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
)
engine = create_engine(f"sqlite:///{db_path}")
metadata.create_all(engine)
engine.dispose()
print(f"📁 Database: {db_path}\n")

generator = ResourceGenerator(
    TableModel(table="posts"),
    connection=ConnectionConfig(url=f"sqlite+aiosqlite:///{db_path}"),
)
scaffold = asyncio.run(generator.generate_all())

print("--- form ---")
print(scaffold.form)
print("--- show ---")
print(scaffold.show)
print("--- grid ---")
print(scaffold.grid)
