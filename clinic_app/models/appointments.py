"""Appointments table model using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    text,
)

from clinic_app.models.patients import metadata

DEFAULT_APPOINTMENT_STATUS = "Scheduled"

appointments = Table(
    "appointments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Ownership
    Column(
        "patient_id",
        Integer,
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    # Appointment details
    Column("doctor_name", String(100), nullable=False),
    Column("appointment_at", DateTime(timezone=True), nullable=False),
    Column("reason", String(500), nullable=False),
    Column("status", String(50), nullable=False, server_default=DEFAULT_APPOINTMENT_STATUS),
    Column("notes", String(1000), nullable=False, server_default=""),
    # Audit fields
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    ),
)
