from dataclasses import dataclass, asdict, fields

from inktrail.core import DEFAULT_ALPHA


@dataclass(frozen=True)
class TrailConfig:
    """
    Settings of a streaming trail:
      - alpha: tension handed to every interpolation call
      - raw_point_ttl: seconds a point stays in the continuous trail
      - segment_ttl: seconds an emitted segment stays live
    """
    alpha: float = DEFAULT_ALPHA
    raw_point_ttl: float = 0.4
    segment_ttl: float = 0.25

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{f.name} must be a number, got {type(value).__name__}")
        if self.raw_point_ttl <= 0 or self.segment_ttl <= 0:
            raise ValueError("time-to-live values must be positive")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TrailConfig":
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise KeyError(key)
        return cls(**data)
