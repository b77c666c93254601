# savings_tracker/models/transaction.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Numeric, Integer, DateTime, ForeignKey, CheckConstraint, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from savings_tracker.core.database import Base

class Transaction(Base):
    __tablename__ = "goal_transactions"
    __table_args__ = (
        # Two appends that both read the same history collide here
        UniqueConstraint("goal_id", "position", name="uq_goal_transactions_goal_position"),
        CheckConstraint("amount >= 0.01", name="ck_goal_transactions_amount_positive"),
        CheckConstraint("type IN ('deposit', 'withdrawal')", name="ck_goal_transactions_type"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    goal_id = Column(Uuid(as_uuid=True), ForeignKey("savings_goals.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    type = Column(String(length=16), nullable=False)
    # 0-based index within the goal's history
    position = Column(Integer, nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    goal = relationship("SavingsGoal", back_populates="transactions")

    def __repr__(self):
        return f"<Transaction {self.type} amount={self.amount} goal_id={self.goal_id}>"
