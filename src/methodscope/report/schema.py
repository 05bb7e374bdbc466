"""Pydantic wire models for the JSON export format.

These mirror the profiler's export field-for-field and run in strict mode:
integers must be JSON integers, booleans are never accepted as numbers, and
strings are never coerced. Number fields must be finite, including integers
too large to convert to a float. Unknown keys are ignored so newer exports
still load.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeInt,
    StrictBool,
    StrictInt,
    StrictStr,
)

from methodscope.report.models import (
    MethodCounts,
    Report,
    SamplingMetadata,
    SummaryStatistics,
    Tick,
    TopMethod,
)


def _check_float_range(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            float(value)
        except OverflowError:
            raise ValueError("number is too large to be represented as a float") from None
    return value


Number = Annotated[float, BeforeValidator(_check_float_range)]
NonNegativeNumber = Annotated[Number, Field(ge=0)]
PositiveNumber = Annotated[Number, Field(gt=0)]


class _WireModel(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore", allow_inf_nan=False)


class TopMethodPayload(_WireModel):
    method_name: StrictStr
    avg_calls_per_tick: NonNegativeNumber
    max_calls: NonNegativeInt
    total_calls: NonNegativeInt

    def to_domain(self) -> TopMethod:
        return TopMethod(
            method_name=self.method_name,
            avg_calls_per_tick=float(self.avg_calls_per_tick),
            max_calls=self.max_calls,
            total_calls=self.total_calls,
        )


class SummaryStatisticsPayload(_WireModel):
    unique_method_count: NonNegativeInt
    top_methods: list[TopMethodPayload]
    avg_calls_per_tick: NonNegativeNumber

    def to_domain(self) -> SummaryStatistics:
        return SummaryStatistics(
            unique_method_count=self.unique_method_count,
            avg_calls_per_tick=float(self.avg_calls_per_tick),
            top_methods=tuple(m.to_domain() for m in self.top_methods),
        )


class SamplingMetadataPayload(_WireModel):
    sampling_rate_ms: PositiveNumber
    excessive_call_threshold: NonNegativeNumber
    method_filters: list[StrictStr]

    def to_domain(self) -> SamplingMetadata:
        return SamplingMetadata(
            sampling_rate_ms=float(self.sampling_rate_ms),
            excessive_call_threshold=float(self.excessive_call_threshold),
            method_filters=tuple(self.method_filters),
        )


class TickPayload(_WireModel):
    tick: NonNegativeInt
    timestamp: StrictInt
    method_counts: dict[StrictStr, NonNegativeInt]
    method_trends: dict[StrictStr, Number]
    tick_duration_ms: NonNegativeNumber
    is_problem_tick: StrictBool

    def to_domain(self) -> Tick:
        return Tick(
            tick=self.tick,
            timestamp=self.timestamp,
            tick_duration_ms=float(self.tick_duration_ms),
            method_counts=MethodCounts(self.method_counts),
            method_trends=MappingProxyType({k: float(v) for k, v in self.method_trends.items()}),
            is_problem_tick=self.is_problem_tick,
        )


class ReportPayload(_WireModel):
    """Top-level export object. No envelope, no array wrapping."""

    server_name: StrictStr
    server_version: StrictStr
    ticks: list[TickPayload]
    metadata: SamplingMetadataPayload
    summary: SummaryStatisticsPayload

    def to_domain(self) -> Report:
        return Report(
            server_name=self.server_name,
            server_version=self.server_version,
            metadata=self.metadata.to_domain(),
            summary=self.summary.to_domain(),
            ticks=tuple(t.to_domain() for t in self.ticks),
        )
