from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, UniqueConstraint

from jobly.database import Base


class Application(Base):
    """A user's application to a job. At most one row per (username, job_id)."""
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    applied_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        # Duplicate applications collapse onto this constraint (ON CONFLICT DO NOTHING)
        UniqueConstraint("username", "job_id", name="uq_application_user_job"),
    )
