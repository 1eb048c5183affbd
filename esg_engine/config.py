"""Engine configuration with validation."""
from functools import lru_cache
from typing import List, Literal, Tuple

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring parameters and logging options, overridable via ESG_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="ESG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "ESG Governance Metrics Engine"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Board independence
    IDEAL_BOARD_SIZE: int = Field(default=10, ge=1, le=50)
    BOARD_SIZE_PENALTY_PER_SEAT: float = Field(default=10.0, ge=0, le=100)

    # Committee effectiveness is not modelled yet; this stands in for it
    COMMITTEE_EFFECTIVENESS_PLACEHOLDER: float = Field(default=75.0, ge=0, le=100)

    # CSR impact
    CSR_EDUCATION_DIVISOR: float = Field(default=1000.0, gt=0)
    CSR_HEALTH_DIVISOR: float = Field(default=10000.0, gt=0)
    CSR_POINTS_PER_UNIT: float = Field(default=5.0, ge=0)
    CSR_TERM_CAP: float = Field(default=50.0, ge=0, le=100)
    CSR_TREND_BONUS: float = Field(default=5.0, ge=0, le=100)

    # Grade thresholds (inclusive lower bounds)
    GRADE_A_MIN: int = Field(default=90, ge=0, le=100)
    GRADE_B_MIN: int = Field(default=80, ge=0, le=100)
    GRADE_C_MIN: int = Field(default=70, ge=0, le=100)
    GRADE_D_MIN: int = Field(default=60, ge=0, le=100)

    # Money parsing: scale "k"/"m"/"bn" suffixes instead of reading the literal
    MONEY_APPLY_SUFFIX_MULTIPLIER: bool = False

    @model_validator(mode="after")
    def validate_grade_thresholds(self):
        """Grade thresholds must be strictly descending from A to D."""
        thresholds = [self.GRADE_A_MIN, self.GRADE_B_MIN, self.GRADE_C_MIN, self.GRADE_D_MIN]
        if any(high <= low for high, low in zip(thresholds, thresholds[1:])):
            raise ValueError(
                f"Grade thresholds must be strictly descending (A > B > C > D), got {thresholds}"
            )
        return self

    @property
    def grade_thresholds(self) -> List[Tuple[int, str]]:
        """(minimum score, grade letter) pairs, highest first."""
        return [
            (self.GRADE_A_MIN, "A"),
            (self.GRADE_B_MIN, "B"),
            (self.GRADE_C_MIN, "C"),
            (self.GRADE_D_MIN, "D"),
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
