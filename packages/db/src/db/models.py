# This project was developed with assistance from AI tools.
"""
Prompt pipeline -- persistence models

The interaction history is the only durable record the service keeps.
"""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, func

from .database import Base


class InteractionHistory(Base):
    """Append-only log of completed interactions. INSERT + SELECT only."""

    __tablename__ = "interaction_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    model = Column(String(50), nullable=False)
    prompt = Column(Text, nullable=False)
    result = Column(Text, nullable=False)
    # ``metadata`` is reserved on declarative classes
    interaction_metadata = Column("metadata", JSON, nullable=True)
    timestamp = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    def __repr__(self):
        return f"<InteractionHistory(id={self.id}, user_id='{self.user_id}', model='{self.model}')>"
