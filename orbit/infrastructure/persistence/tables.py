"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PLANETS TABLE
# ============================================================================
# No unique constraint on name: ingestion deduplicates by containment check.
planets_table = Table(
    "planets",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("rotation_period", Integer, nullable=True),
    Column("orbital_period", Integer, nullable=True),
    Column("diameter", Integer, nullable=True),
    Column("population", BigInteger, nullable=True),
    Column("climate", String, nullable=True),
    Column("gravity", String, nullable=True),
    Column("terrain", String, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=True),  # Upstream "created"
    Column("updated_at", DateTime(timezone=True), nullable=True),  # Upstream "edited"
)

Index("idx_planets_name", planets_table.c.name)
