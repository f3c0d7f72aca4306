from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base import Base


class QuestionModel(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)  # HTML from the rich-text editor
    input_format = Column(Text, nullable=False)
    output_format = Column(Text, nullable=False)
    constraints = Column(Text, nullable=False)
    example_1_input = Column(Text, nullable=False)
    example_1_output = Column(Text, nullable=False)
    example_2_input = Column(Text, nullable=False)
    example_2_output = Column(Text, nullable=False)
    round = Column(String, nullable=False, index=True)
    base_points = Column(Integer, nullable=False, default=0)
    avg_time = Column(Integer, nullable=False)  # seconds
    sequence_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    test_cases = relationship("TestCaseModel", back_populates="question", cascade="all, delete-orphan", passive_deletes=True)
