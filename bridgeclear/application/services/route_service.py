"""Route service — the static demo safe route and its hazards.

The safe route is fixed demo data; no path-finding happens here.
"""

from typing import List, Optional, Tuple

from bridgeclear.domain.repositories.bridge_repository import BridgeRepository
from bridgeclear.domain.schemas.bridge import BridgeRead
from bridgeclear.domain.schemas.route import SafeRoute

# Avoids the Times Square underpass
SAFE_ROUTE_POINTS: List[Tuple[float, float]] = [
    (40.6892, -74.0445),
    (40.7127, -74.0134),
    (40.7350, -74.0200),
    (40.7600, -74.0100),
    (40.7800, -73.9700),
]

# 13' 6", the usual semi-trailer height
DEFAULT_VEHICLE_HEIGHT_INCHES = 162


def get_safe_route(repo: BridgeRepository, height_inches: Optional[int] = None) -> SafeRoute:
    """Demo safe route plus the bridges a vehicle of this height cannot clear."""
    height = height_inches if height_inches is not None else DEFAULT_VEHICLE_HEIGHT_INCHES
    # Strictly lower than the vehicle is a hazard
    hazards = [b for b in repo.get_below_clearance(height) if b.clearance_inches < height]
    return SafeRoute(
        points=SAFE_ROUTE_POINTS,
        height_inches=height,
        hazards=[BridgeRead.model_validate(b) for b in hazards],
    )
