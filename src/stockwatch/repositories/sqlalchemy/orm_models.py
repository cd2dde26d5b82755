"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Integer, String, Text

from stockwatch.repositories.sqlalchemy.database import Base


class SettingEntryORM(Base):
    """One element of a string-list setting, ordered by position."""

    __tablename__ = "setting_entries"

    key = Column(String(255), primary_key=True)
    position = Column(Integer, primary_key=True)
    value = Column(Text, nullable=False)
