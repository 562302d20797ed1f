from sqlalchemy import Column, PrimaryKeyConstraint, Text

from src.database import Base


class UsedWord(Base):
    """A word already served for a language."""
    
    __tablename__ = "used_words"
    
    word = Column(Text, nullable=False)
    language = Column(Text, nullable=False)
    
    __table_args__ = (PrimaryKeyConstraint("word", "language"),)
    
    def __repr__(self):
        return f"<UsedWord(word='{self.word}', language='{self.language}')>"
