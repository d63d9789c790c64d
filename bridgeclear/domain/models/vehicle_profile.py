"""Vehicle profile domain model — maps to the 'vehicle_profiles' table."""

from sqlalchemy import Column, Integer, Text

from bridgeclear.infrastructure.database import Base


class VehicleProfile(Base):
    __tablename__ = "vehicle_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    height = Column(Text, nullable=False)
    height_inches = Column(Integer, nullable=False)
    weight = Column(Text, nullable=False)
    length = Column(Text, nullable=False)
    width = Column(Text, nullable=False)

    def __repr__(self):
        return f"<VehicleProfile {self.name} ({self.height})>"
