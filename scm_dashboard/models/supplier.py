import enum


class SupplierActivity(str, enum.Enum):
    """Values accepted by the supplier status filter besides "all"."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class PerformanceBucket(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


HIGH_PERFORMANCE_MIN = 4.5
MEDIUM_PERFORMANCE_MIN = 3.5


def performance_bucket(rating: float) -> PerformanceBucket:
    """Group a 0-5 rating: high >= 4.5, medium in [3.5, 4.5), low < 3.5."""
    if rating >= HIGH_PERFORMANCE_MIN:
        return PerformanceBucket.HIGH
    if rating >= MEDIUM_PERFORMANCE_MIN:
        return PerformanceBucket.MEDIUM
    return PerformanceBucket.LOW
