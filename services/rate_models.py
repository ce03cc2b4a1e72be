"""
services.rate_models - Shapes exchanged with the external rates backend.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import config


def _as_rate(value) -> Optional[float]:
    # bool is an int subclass; a flag is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def format_price(value: Optional[float], currency: Optional[str] = None) -> str:
    """'1234.50 USD' for a priced container, an em dash otherwise."""
    if value is None:
        return "—"
    return f"{value:.2f} {currency or 'USD'}"


@dataclass
class RateQuery:
    origin: str = ""
    destination: str = ""
    date: str = ""
    rate_type: str = ""
    page: int = 1
    sort: str = config.DEFAULT_SORT
    limit: int = config.RATES_PER_PAGE

    @classmethod
    def from_args(cls, args) -> "RateQuery":
        """Build from request query args, defaulting anything malformed."""
        try:
            page = int(args.get("page", 1))
        except (TypeError, ValueError):
            page = 1
        sort = (args.get("sort") or config.DEFAULT_SORT).strip()
        rate_type = (args.get("rateType") or "").strip()
        return cls(
            origin=(args.get("origin") or "").strip(),
            destination=(args.get("destination") or "").strip(),
            date=(args.get("date") or "").strip(),
            rate_type=rate_type if rate_type in config.RATE_TYPES else "",
            page=max(page, 1),
            sort=sort if sort in config.SORT_OPTIONS else config.DEFAULT_SORT,
        )

    def to_params(self) -> dict:
        params = {}
        if self.origin:
            params["origin"] = self.origin
        if self.destination:
            params["destination"] = self.destination
        if self.date:
            params["date"] = self.date
        if self.rate_type:
            params["rateType"] = self.rate_type
        params["limit"] = str(self.limit)
        params["page"] = str(self.page)
        params["sort"] = self.sort
        return params


@dataclass
class RateRecord:
    id: int
    origin: str
    destination: str
    carrier: Optional[str] = None
    rate20: Optional[float] = None      # 20 ft container
    rate40: Optional[float] = None      # 40 ft container
    rate40hc: Optional[float] = None    # 40 ft high cube
    currency: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "RateRecord":
        return cls(
            id=d.get("id"),
            origin=d.get("origin") or "",
            destination=d.get("destination") or "",
            carrier=d.get("carrier"),
            rate20=_as_rate(d.get("rate20")),
            rate40=_as_rate(d.get("rate40")),
            rate40hc=_as_rate(d.get("rate40hc")),
            currency=d.get("currency"),
            date=d.get("date"),
            description=d.get("description"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "origin": self.origin,
            "destination": self.destination,
            "carrier": self.carrier,
            "rate20": self.rate20,
            "rate40": self.rate40,
            "rate40hc": self.rate40hc,
            "currency": self.currency or "USD",
            "date": self.date,
            "description": self.description or "",
            "prices": {
                "20ft": format_price(self.rate20, self.currency),
                "40ft": format_price(self.rate40, self.currency),
                "40ft_hc": format_price(self.rate40hc, self.currency),
            },
        }


@dataclass
class RatesPage:
    total: int = 0
    page: int = 1
    per_page: int = config.RATES_PER_PAGE
    results: list[RateRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def showing_from(self) -> int:
        return (self.page - 1) * self.per_page + 1 if self.total else 0

    @property
    def showing_to(self) -> int:
        return min(self.page * self.per_page, self.total)

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page * self.per_page < self.total

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "page": self.page,
            "per_page": self.per_page,
            "showing_from": self.showing_from,
            "showing_to": self.showing_to,
            "has_prev": self.has_prev,
            "has_next": self.has_next,
            "results": [r.to_dict() for r in self.results],
            "error": self.error,
        }
