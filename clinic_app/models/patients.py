"""Patient model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    func,
    text,
)

# Shared by every clinic table so foreign keys resolve
metadata = MetaData()

patients = Table(
    "patients",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Identity
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("date_of_birth", Date, nullable=False),
    # Contact
    Column("phone_number", String(20), nullable=False),
    Column("email", String(255), nullable=False),
    Column("address", String(500), nullable=False),
    # Medical information
    Column("medical_history", String(2000), nullable=False, server_default=""),
    # Metadata
    Column(
        "registration_date",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
)

# Emails are unique regardless of casing
EMAIL_INDEX_NAME = "ix_patients_email_lower"

Index(EMAIL_INDEX_NAME, func.lower(patients.c.email), unique=True)
Index("ix_patients_registration_date", patients.c.registration_date)
