"""
Data models for the case-count series.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# Counter fields a chart can be drawn from
METRIC_FIELDS = ("confirmed", "deaths", "new_confirmed")


def _count(value) -> int:
    # Upstream leaves counters null on days without a report
    if value is None:
        return 0
    return int(value)


@dataclass(frozen=True)
class Country:
    """A configured country: upstream query code plus display label."""

    code: str
    name: str


@dataclass
class DataPoint:
    """Case counters for one country on one day."""

    date: str
    deaths: int = 0
    confirmed: int = 0
    new_confirmed: int = 0

    def value(self, field_name: str) -> int:
        if field_name not in METRIC_FIELDS:
            raise ValueError(f"Unknown metric field: {field_name}")
        return getattr(self, field_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "deaths": self.deaths,
            "confirmed": self.confirmed,
            "new_confirmed": self.new_confirmed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DataPoint":
        return cls(
            date=str(data["date"]),
            deaths=_count(data.get("deaths")),
            confirmed=_count(data.get("confirmed")),
            new_confirmed=_count(data.get("new_confirmed")),
        )


@dataclass
class CountrySeries:
    """Ordered day-by-day counters for a single country."""

    country: Country
    points: List[DataPoint] = field(default_factory=list)

    def dates(self) -> List[str]:
        return [p.date for p in self.points]

    def values(self, field_name: str) -> List[int]:
        return [p.value(field_name) for p in self.points]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.country.code,
            "name": self.country.name,
            "data": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CountrySeries":
        return cls(
            country=Country(code=data["code"], name=data["name"]),
            points=[DataPoint.from_dict(p) for p in data.get("data", [])],
        )
