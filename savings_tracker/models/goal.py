# savings_tracker/models/goal.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from savings_tracker.core.database import Base

class SavingsGoal(Base):
    __tablename__ = "savings_goals"
    __table_args__ = (
        CheckConstraint("target >= 0.01", name="ck_savings_goals_target_positive"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(length=100), nullable=False)
    # Fixed-point so balances add up to the cent
    target = Column(Numeric(14, 2), nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="goals")
    # Append-only history, in insertion order
    transactions = relationship(
        "Transaction",
        back_populates="goal",
        order_by="Transaction.position",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<SavingsGoal title={self.title!r} target={self.target} user_id={self.user_id}>"
