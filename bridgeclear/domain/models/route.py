"""Route domain model — maps to the 'routes' table (append-only)."""

from sqlalchemy import Column, Integer, Float, Text

from bridgeclear.infrastructure.database import Base


class Route(Base):
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    vehicle_profile_id = Column(Integer, nullable=False)  # not a foreign key
    start_lat = Column(Float, nullable=False)
    start_lng = Column(Float, nullable=False)
    end_lat = Column(Float, nullable=False)
    end_lng = Column(Float, nullable=False)
    route_data = Column(Text, nullable=False)
    avoided_bridges = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Route {self.id} profile={self.vehicle_profile_id}>"
