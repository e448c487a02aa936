"""SQLAlchemy database models."""

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from farmadvisor.database import Base


class User(Base):
    """Farm owner account. Authentication happens outside this service."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    farms: Mapped[list["Farm"]] = relationship("Farm", back_populates="user")


class Farm(Base):
    """A farm owned by a user."""

    __tablename__ = "farms"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    size: Mapped[float | None] = mapped_column(Float, nullable=True)  # same unit as plot sizes
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    user: Mapped["User"] = relationship("User", back_populates="farms")
    plots: Mapped[list["Plot"]] = relationship("Plot", back_populates="farm")
    crop_entries: Mapped[list["CropEntry"]] = relationship("CropEntry", back_populates="farm")
    livestock_entries: Mapped[list["LivestockEntry"]] = relationship(
        "LivestockEntry", back_populates="farm"
    )

    __table_args__ = (Index("idx_farms_user_id", "user_id"),)


class Plot(Base):
    """A parcel of farm land used for crops or livestock pens."""

    __tablename__ = "plots"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    size: Mapped[float | None] = mapped_column(Float, nullable=True)
    usage: Mapped[str | None] = mapped_column(String(50), nullable=True)  # "crops", "livestock"

    farm: Mapped["Farm"] = relationship("Farm", back_populates="plots")

    __table_args__ = (Index("idx_plots_farm_id", "farm_id"),)


class CropEntry(Base):
    """A crop planted on a farm."""

    __tablename__ = "crop_entries"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    plot_id: Mapped[str | None] = mapped_column(String, ForeignKey("plots.id"), nullable=True)
    crop_name: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)  # "CEREAL", "LEGUME"
    area: Mapped[float | None] = mapped_column(Float, nullable=True)
    planting_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="PLANTED", nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    farm: Mapped["Farm"] = relationship("Farm", back_populates="crop_entries")

    __table_args__ = (Index("idx_crop_entries_farm_id", "farm_id"),)


class LivestockEntry(Base):
    """A group of animals of one type kept on a farm."""

    __tablename__ = "livestock_entries"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    animal_type: Mapped[str] = mapped_column(String(100), nullable=False)  # free-form, e.g. "Layer"
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    batch_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    acquired_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="ACTIVE", nullable=False)
    expected_selling_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    farm: Mapped["Farm"] = relationship("Farm", back_populates="livestock_entries")
    health_records: Mapped[list["HealthRecord"]] = relationship(
        "HealthRecord", back_populates="livestock_entry", cascade="all, delete-orphan"
    )
    production_records: Mapped[list["ProductionRecord"]] = relationship(
        "ProductionRecord", back_populates="livestock_entry", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_livestock_entries_farm_id", "farm_id"),
        Index("idx_livestock_entries_user_id", "user_id"),
    )

    @property
    def start_date(self) -> date:
        """Date the lifecycle schedules count from."""
        if self.acquired_date is not None:
            return self.acquired_date
        if self.created_at is not None:
            return self.created_at.date()
        return date.today()


class HealthRecord(Base):
    """A vaccination or deworming, scheduled or done."""

    __tablename__ = "health_records"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    livestock_entry_id: Mapped[str] = mapped_column(
        String, ForeignKey("livestock_entries.id"), nullable=False
    )
    # "VACCINATION", "DEWORMING"
    record_type: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    completed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # "SCHEDULED", "OVERDUE", "COMPLETED", "MISSED"
    status: Mapped[str] = mapped_column(String(20), default="SCHEDULED", nullable=False)
    priority: Mapped[str] = mapped_column(String(10), default="MEDIUM", nullable=False)
    dosage_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    occurrence: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_generated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    livestock_entry: Mapped["LivestockEntry"] = relationship(
        "LivestockEntry", back_populates="health_records"
    )

    __table_args__ = (
        Index("idx_health_records_entry", "livestock_entry_id"),
        Index("idx_health_records_scheduled", "scheduled_date"),
    )


class ProductionRecord(Base):
    """Expected or recorded output of a livestock entry for a production phase."""

    __tablename__ = "production_records"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    livestock_entry_id: Mapped[str] = mapped_column(
        String, ForeignKey("livestock_entries.id"), nullable=False
    )
    production_type: Mapped[str] = mapped_column(String(20), nullable=False)  # "EGGS", "MILK"
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    expected_quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
    actual_quantity: Mapped[float | None] = mapped_column(Float, nullable=True)
    expected_revenue: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="EXPECTED", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_generated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    livestock_entry: Mapped["LivestockEntry"] = relationship(
        "LivestockEntry", back_populates="production_records"
    )

    __table_args__ = (Index("idx_production_records_entry", "livestock_entry_id"),)


class Task(Base):
    """A farm task such as feeding, spraying or a vet visit."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # "PENDING", "IN_PROGRESS", "COMPLETED", "OVERDUE"
    status: Mapped[str] = mapped_column(String(20), default="PENDING", nullable=False)
    priority: Mapped[str] = mapped_column(String(10), default="MEDIUM", nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    __table_args__ = (Index("idx_tasks_farm_status", "farm_id", "status"),)


class Expense(Base):
    """Money spent on a farm."""

    __tablename__ = "expenses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("idx_expenses_farm_date", "farm_id", "transaction_date"),)


class Income(Base):
    """Money earned by a farm."""

    __tablename__ = "income"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False)
    farm_id: Mapped[str] = mapped_column(String, ForeignKey("farms.id"), nullable=False)
    source: Mapped[str | None] = mapped_column(String(50), nullable=True)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("idx_income_farm_date", "farm_id", "transaction_date"),)
