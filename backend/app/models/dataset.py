"""
Pydantic models for the monthly temperature variance dataset.
"""

from pydantic import BaseModel, ConfigDict, Field


class MonthRecord(BaseModel):
    """One month of land-surface temperature variance."""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)  # 1-12
    variance: float  # °C offset from the base temperature

    def absolute_temp(self, base_temperature: float) -> float:
        return base_temperature + self.variance


class Dataset(BaseModel):
    """Fetched dataset: base temperature plus monthly variance records."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_temperature: float = Field(alias="baseTemperature")
    monthly_variance: tuple[MonthRecord, ...] = Field(
        alias="monthlyVariance", min_length=1
    )

    @property
    def absolute_temps(self) -> list[float]:
        return [r.absolute_temp(self.base_temperature) for r in self.monthly_variance]

    @property
    def year_span(self) -> tuple[int, int]:
        years = [r.year for r in self.monthly_variance]
        return min(years), max(years)
