"""
scoring/board_independence.py - Board Independence Score

Formula:
    terms = [independent NED % of each committee that reported one]
          + [size_term]                                   (if board size known)
    size_term = 100 − min(100, |board_size − IDEAL| × PENALTY)
    score = round(mean(terms))                            (0 when no terms)

Parameters (config.py):
    IDEAL_BOARD_SIZE            = 10
    BOARD_SIZE_PENALTY_PER_SEAT = 10

The size term is averaged in with the committee terms, not added to them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

import structlog

from esg_engine.config import Settings, get_settings
from esg_engine.models.metric import Metric
from esg_engine.models.reported import Reported, decode
from esg_engine.pipelines.extractors import get_board_size_metrics, get_committee_metrics
from esg_engine.pipelines.ingest import RecordInput, get_latest_year, parse_records, pool_metrics
from esg_engine.pipelines.utils import parse_leading_float, parse_leading_int
from esg_engine.scoring.utils import clamp, mean, round_half_up, to_decimal

logger = structlog.get_logger(__name__)


@dataclass
class BoardIndependenceResult:
    """Output of BoardIndependenceCalculator.calculate()."""
    score: int                                   # [0, 100]
    independent_percents: List[Decimal] = field(default_factory=list)
    board_size: Optional[int] = None
    board_size_term: Optional[Decimal] = None

    @property
    def term_count(self) -> int:
        return len(self.independent_percents) + (1 if self.board_size_term is not None else 0)


def parse_independent_percent(raw: str) -> Optional[Decimal]:
    """"67%" -> 67; "Not reported", "" and unparseable -> None."""
    reported = decode(raw)
    if not isinstance(reported, Reported):
        return None
    number = parse_leading_float(reported.value)
    return to_decimal(number, places=2) if number is not None else None


class BoardIndependenceCalculator:
    """Calculate the board independence score from committee composition and board size."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def size_term(self, board_size: int) -> Decimal:
        ideal = Decimal(self.settings.IDEAL_BOARD_SIZE)
        penalty = Decimal(str(self.settings.BOARD_SIZE_PENALTY_PER_SEAT))
        deviation = abs(Decimal(board_size) - ideal) * penalty
        return Decimal("100") - min(Decimal("100"), deviation)

    def calculate(self, metrics: Sequence[Metric], latest_year: int) -> BoardIndependenceResult:
        """
        Args:
            metrics: Pooled metrics for one company.
            latest_year: Shared latest year used for committee lookups.

        Returns:
            BoardIndependenceResult with the score and the terms behind it.

        Examples:
            >>> # committees 60% and 80% independent, board of 12
            >>> # terms = [60, 80, 80] -> score 73
        """
        committees = get_committee_metrics(metrics, latest_year)
        percents = [
            p for p in (parse_independent_percent(raw) for raw in committees.independent_percents())
            if p is not None
        ]

        board_size: Optional[int] = None
        size_term: Optional[Decimal] = None
        board = get_board_size_metrics(metrics)
        if board is not None:
            board_size = parse_leading_int(board.value)
            if board_size is not None:
                size_term = self.size_term(board_size)

        terms = percents + ([size_term] if size_term is not None else [])
        score = round_half_up(clamp(mean(terms))) if terms else 0

        logger.info(
            "board_independence_calculated",
            independent_percents=[float(p) for p in percents],
            board_size=board_size,
            board_size_term=float(size_term) if size_term is not None else None,
            term_count=len(terms),
            score=score,
        )

        return BoardIndependenceResult(
            score=score,
            independent_percents=percents,
            board_size=board_size,
            board_size_term=size_term,
        )


def calculate_board_independence_score(
    records: Iterable[RecordInput],
    settings: Optional[Settings] = None,
) -> int:
    """Board independence score (0-100) for a company's records."""
    metrics = pool_metrics(parse_records(records))
    return BoardIndependenceCalculator(settings).calculate(metrics, get_latest_year(metrics)).score
