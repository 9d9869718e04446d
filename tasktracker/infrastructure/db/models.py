"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, ForeignKey, Enum as SQLEnum, Index
)
from sqlalchemy.orm import relationship

from tasktracker.domain.models.task import TaskStatus
from tasktracker.infrastructure.db.database import Base


class UserModel(Base):
    """Users table"""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Always stored lower-cased
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, nullable=False)

    tasks = relationship("TaskModel", back_populates="owner", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<UserModel(id={self.id}, email='{self.email}')>"


class TaskModel(Base):
    """Tasks table"""
    __tablename__ = 'tasks'
    __table_args__ = (
        Index('ix_tasks_user_id_created_at', 'user_id', 'created_at'),
        Index('ix_tasks_user_id_status', 'user_id', 'status'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(TaskStatus, values_callable=lambda enum: [e.value for e in enum], native_enum=False),
        nullable=False,
        default=TaskStatus.PENDING
    )

    # Timestamps
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # Relationships
    owner = relationship("UserModel", back_populates="tasks")

    def __repr__(self):
        return f"<TaskModel(id={self.id}, user_id={self.user_id}, status='{self.status}')>"
