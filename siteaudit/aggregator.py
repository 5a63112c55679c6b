"""Roll per-page results up into one site-level result."""

from typing import Optional, Sequence

from siteaudit.scoring.methodology import failed_methodology
from siteaudit.scoring.models import (
    AggregatedDimensionScore,
    AuditStatus,
    Dimension,
    DimensionScore,
    PageResult,
    SiteResult,
    mean_score,
)


def empty_site_result(url: str = "", errors: Sequence[dict] = ()) -> SiteResult:
    """The all-zero result returned when no page could be analyzed."""
    empty = AggregatedDimensionScore(score=0.0, methodology=failed_methodology())
    return SiteResult(
        dimensions={d: empty for d in Dimension},
        site_total=0.0,
        status=AuditStatus.FAILED,
        url=url,
        errors=tuple(errors),
    )


def aggregate_dimension(scores: Sequence[DimensionScore]) -> AggregatedDimensionScore:
    """Mean, range and page count of one dimension; methodology from the first page."""
    values = [s.score for s in scores]
    average = mean_score(values)
    return AggregatedDimensionScore(
        score=average,
        methodology=dict(scores[0].methodology),
        pages_analyzed=len(values),
        average_score=average,
        min_score=min(values),
        max_score=max(values),
    )


def aggregate(
    results: Sequence[PageResult],
    url: str = "",
    status: Optional[AuditStatus] = None,
    errors: Sequence[dict] = (),
) -> SiteResult:
    """
    Combine page results into a SiteResult.

    Args:
        results: Successfully analyzed pages only
        url: Seed URL of the audit
        status: Overrides the derived status (complete when results exist)
        errors: ``{url, reason}`` records of pages that failed

    Returns:
        SiteResult, or the all-zero result when ``results`` is empty
    """
    if not results:
        return empty_site_result(url, errors)

    dimensions = {
        d: aggregate_dimension([r.scores[d] for r in results])
        for d in Dimension
    }
    return SiteResult(
        dimensions=dimensions,
        site_total=mean_score([r.page_total for r in results]),
        status=status or AuditStatus.COMPLETE,
        url=url,
        pages=tuple(r.url for r in results),
        errors=tuple(errors),
    )
