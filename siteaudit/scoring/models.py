"""Result records for per-page scores and the site-level rollup."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Dimension(Enum):
    """The nine fixed scoring dimensions, valued by their wire key."""
    HTML_STRUCTURE = "htmlStructure"
    METADATA = "metadata"
    SCHEMA = "schema"
    CONTENT_WITHOUT_JS = "contentWithoutJs"
    SITEMAP_ROBOTS = "sitemapRobots"
    ACCESSIBILITY = "accessibility"
    SPEED = "speed"
    READABILITY = "readability"
    INTERNAL_LINKING = "internalLinking"

    @property
    def column(self) -> str:
        """Persistence column name, e.g. ``html_structure_score``."""
        return f"{self.name.lower()}_score"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title().replace("Html", "HTML").replace("Js", "JS")


class AuditStatus(Enum):
    """Companion flag telling an all-zero result apart from real findings."""
    COMPLETE = "complete"
    PARTIAL = "partial"
    FAILED = "failed"


def round_half_up(value: float, places: int = 2) -> float:
    """Round like a calculator (0.125 -> 0.13), not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) if places else float(int(rounded))


def ratio_points(part: int, whole: int, points: int) -> int:
    """Partial credit: ``part/whole`` of ``points``, rounded half up."""
    if whole <= 0:
        return points
    return int(round_half_up(part / whole * points, 0))


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


@dataclass(frozen=True)
class DimensionScore:
    """Score of one dimension for one page. Score is always in [0, 100]."""
    score: float
    methodology: Mapping[str, str]
    details: Mapping[str, Any] = field(default_factory=dict)
    failed: bool = False

    def __post_init__(self):
        object.__setattr__(self, "score", clamp_score(self.score))
        object.__setattr__(self, "methodology", MappingProxyType(dict(self.methodology)))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "methodology": dict(self.methodology),
            "details": dict(self.details),
        }


def mean_score(scores: list[float]) -> float:
    if not scores:
        return 0.0
    return round_half_up(sum(scores) / len(scores))


@dataclass(frozen=True)
class PageResult:
    """All nine dimension scores of one page plus their mean."""
    url: str
    scores: Mapping[Dimension, DimensionScore]
    page_total: float

    @classmethod
    def build(
        cls,
        url: str,
        scores: Mapping[Dimension, DimensionScore],
        exclude_failed: bool = False,
    ) -> "PageResult":
        """
        Create a page result, deriving ``page_total``.

        Args:
            url: Analyzed page
            scores: One DimensionScore per dimension
            exclude_failed: Leave dimensions that failed outright out of the mean

        Raises:
            ValueError: If any dimension is missing
        """
        missing = [d.value for d in Dimension if d not in scores]
        if missing:
            raise ValueError(f"Missing dimension scores: {', '.join(missing)}")

        counted = [
            scores[d].score for d in Dimension
            if not (exclude_failed and scores[d].failed)
        ]
        return cls(
            url=url,
            scores=MappingProxyType({d: scores[d] for d in Dimension}),
            page_total=mean_score(counted),
        )

    def to_dict(self) -> dict:
        data = {d.value: self.scores[d].to_dict() for d in Dimension}
        data["totalScore"] = self.page_total
        return data


@dataclass(frozen=True)
class AggregatedDimensionScore:
    """One dimension rolled up across every analyzed page."""
    score: float
    methodology: Mapping[str, str]
    pages_analyzed: int = 0
    average_score: float = 0.0
    min_score: float = 0.0
    max_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "methodology": dict(self.methodology),
            "details": {
                "pagesAnalyzed": self.pages_analyzed,
                "averageScore": self.average_score,
                "scoreRange": {"min": self.min_score, "max": self.max_score},
            },
        }


@dataclass(frozen=True)
class SiteResult:
    """Site-level report: per-dimension rollup plus the overall total."""
    dimensions: Mapping[Dimension, AggregatedDimensionScore]
    site_total: float
    status: AuditStatus
    url: str = ""
    pages: tuple = ()
    errors: tuple = ()

    @property
    def is_empty(self) -> bool:
        """True for the sentinel produced when no page could be analyzed."""
        return self.status is AuditStatus.FAILED

    def score(self, dimension: Dimension) -> float:
        return self.dimensions[dimension].score

    def to_dict(self) -> dict:
        data: dict[str, Any] = {d.value: self.dimensions[d].to_dict() for d in Dimension}
        data["totalScore"] = self.site_total
        data["status"] = self.status.value
        data["url"] = self.url
        data["pages"] = list(self.pages)
        data["errors"] = [dict(error) for error in self.errors]
        return data

    def to_score_columns(self) -> dict[str, float]:
        columns = {d.column: self.dimensions[d].score for d in Dimension}
        columns["total_score"] = self.site_total
        return columns
