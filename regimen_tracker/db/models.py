"""Database models for cycles, day logs and their items."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class CycleRecord(Base):
    """Stored dosing cycle."""

    __tablename__ = "cycles"

    id = Column(String(36), primary_key=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<CycleRecord(id={self.id}, start_date={self.start_date}, is_active={self.is_active})>"


class DayLogRecord(Base):
    """Stored day log, one per calendar date."""

    __tablename__ = "day_logs"

    id = Column(String(36), primary_key=True)
    date = Column(Date, unique=True, nullable=False)
    day_type = Column(String(20), nullable=False)  # EVENING, MIDDAY, AFTERNOON, REST
    cycle_week = Column(Integer)  # Captured at creation
    water_intake = Column(Float, default=0.0, nullable=False)  # liters
    sleep_hours = Column(Float, default=0.0, nullable=False)
    weight = Column(Float)  # kg
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    meals = relationship(
        "MealLogRecord", cascade="all, delete-orphan", passive_deletes=True,
        order_by="MealLogRecord.position",
    )
    supplements = relationship(
        "SupplementLogRecord", cascade="all, delete-orphan", passive_deletes=True,
        order_by="SupplementLogRecord.position",
    )
    advanced_supplements = relationship(
        "AdvancedSupplementLogRecord", cascade="all, delete-orphan", passive_deletes=True,
        order_by="AdvancedSupplementLogRecord.position",
    )

    def __repr__(self):
        return f"<DayLogRecord(date={self.date}, day_type={self.day_type}, cycle_week={self.cycle_week})>"


class MealLogRecord(Base):
    """Stored meal item."""

    __tablename__ = "meal_logs"

    id = Column(String(36), primary_key=True)
    day_log_id = Column(String(36), ForeignKey("day_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    meal_type = Column(String(30), nullable=False)
    scheduled_time = Column(String(5))  # HH:MM, NULL when the day type has no slot
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime)

    def __repr__(self):
        return f"<MealLogRecord(meal_type={self.meal_type}, scheduled_time={self.scheduled_time})>"


class SupplementLogRecord(Base):
    """Stored standard supplement item."""

    __tablename__ = "supplement_logs"

    id = Column(String(36), primary_key=True)
    day_log_id = Column(String(36), ForeignKey("day_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    supplement_type = Column(String(30), nullable=False)
    timing_slot = Column(String(20), nullable=False)
    dosage = Column(String(50), nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime)

    def __repr__(self):
        return f"<SupplementLogRecord(supplement_type={self.supplement_type}, timing_slot={self.timing_slot})>"


class AdvancedSupplementLogRecord(Base):
    """Stored advanced supplement item."""

    __tablename__ = "advanced_supplement_logs"

    id = Column(String(36), primary_key=True)
    day_log_id = Column(String(36), ForeignKey("day_logs.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    supplement_type = Column(String(30), nullable=False)
    dosage = Column(String(50), nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime)

    def __repr__(self):
        return f"<AdvancedSupplementLogRecord(supplement_type={self.supplement_type}, dosage={self.dosage})>"
