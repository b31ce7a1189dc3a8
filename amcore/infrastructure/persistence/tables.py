"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.types import JSON

metadata = MetaData()

# ============================================================================
# RESOURCE SETS TABLE (UMA resource registrations)
# ============================================================================
resource_sets_table = Table(
    "resource_sets",
    metadata,
    Column("id", String, primary_key=True),
    Column("domain", String, nullable=False),
    Column("client_id", String, nullable=False),
    Column("user_id", String, nullable=False),
    Column("resource_scopes", JSON, nullable=False),  # ordered list of scope names
    Column("name", String, nullable=True),
    Column("description", Text, nullable=True),
    Column("icon_uri", String, nullable=True),
    Column("type", String, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_resource_sets_owner",
    resource_sets_table.c.domain,
    resource_sets_table.c.client_id,
    resource_sets_table.c.user_id,
)


# ============================================================================
# IDENTITY PROVIDERS TABLE
# ============================================================================
identity_providers_table = Table(
    "identity_providers",
    metadata,
    Column("id", String, primary_key=True),
    Column("domain", String, nullable=False),
    Column("name", String, nullable=False),
    Column("type", String, nullable=False),
    Column("configuration", JSON, nullable=True),
    Column("mappers", JSON, nullable=True),
    Column("role_mapper", JSON, nullable=True),
    Column("external", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_identity_providers_domain", identity_providers_table.c.domain)


# ============================================================================
# CLIENTS (read-only here; owned by client management)
# ============================================================================
clients_table = Table(
    "clients",
    metadata,
    Column("id", String, primary_key=True),
    Column("domain", String, nullable=False),
    Column("client_id", String, nullable=False),
)

# No FK to identity_providers: referential integrity is checked by the service.
client_identity_providers_table = Table(
    "client_identity_providers",
    metadata,
    Column("client_id", String, ForeignKey("clients.id", ondelete="CASCADE"), primary_key=True),
    Column("identity_provider_id", String, primary_key=True),
)

Index(
    "idx_client_identity_providers_idp",
    client_identity_providers_table.c.identity_provider_id,
)
