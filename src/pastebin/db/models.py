from sqlalchemy import Column, Text

from .session import Base


class Paste(Base):
    __tablename__ = "pastes"

    token = Column(Text, primary_key=True)
    content = Column(Text)
