from sqlalchemy import Column, String, Text

from shortit.database.connection import Base


class MappingRecord(Base):
    """
    Row of the SQL mapping store.
    
    The short key is the primary key, so re-inserting a key replaces its URL.
    """
    __tablename__ = "mappings"

    key = Column(String(64), primary_key=True)
    url = Column(Text, nullable=False)
