from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Enum as SQLEnum
import enum

from jobly.database import Base


class UserRole(str, enum.Enum):
    """User role for role-based access control (RBAC)."""
    USER = "user"  # Regular user - can browse and apply
    ADMIN = "admin"  # Admin - can create, update and delete jobs


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    first_name = Column(Text, nullable=True)
    last_name = Column(Text, nullable=True)
    email = Column(Text, nullable=True, unique=True)

    # Role-based access control
    role = Column(
        SQLEnum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.USER,
        index=True
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def is_admin(self) -> bool:
        """Check if user has admin role."""
        return self.role == UserRole.ADMIN
