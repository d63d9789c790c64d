"""Bridge domain model — maps to the 'bridges' table."""

from sqlalchemy import Column, Integer, Float, Text

from bridgeclear.infrastructure.database import Base


class Bridge(Base):
    __tablename__ = "bridges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    latitude = Column(Float, nullable=False, index=True)
    longitude = Column(Float, nullable=False, index=True)

    # clearance_inches is the comparator; clearance_height is display only
    clearance_height = Column(Text, nullable=False)
    clearance_inches = Column(Integer, nullable=False, index=True)

    state = Column(Text, nullable=False)
    city = Column(Text, nullable=False)
    road_name = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Bridge {self.name} ({self.clearance_height})>"
