"""FilterService: validate, apply and describe an advanced contact filter."""

from __future__ import annotations

import time
import uuid
from typing import Any

from ..domain.describe import NO_FILTERS_MESSAGE, describe_filter
from ..domain.evaluator import FilterEvaluator
from ..domain.fields import CONTACT_FIELDS, FieldCatalog
from ..domain.filters import FilterConfig
from ..domain.projector import LookupMaps
from ..interface.validation import validate_filter_config
from ..models.requests import FilterRequest
from ..models.responses import FilterResponse
from ..observability import log_filter_evaluation


class FilterService:
    """Orchestrates one filter run over already-loaded records."""

    def __init__(
        self,
        catalog: FieldCatalog = CONTACT_FIELDS,
        evaluator: FilterEvaluator | None = None,
        empty_description: str = NO_FILTERS_MESSAGE,
        logger: Any = None,
    ) -> None:
        self._catalog = catalog
        self._evaluator = evaluator or FilterEvaluator(catalog)
        self._empty_description = empty_description
        self._logger = logger

    @property
    def catalog(self) -> FieldCatalog:
        return self._catalog

    def is_active(self, config: FilterConfig | None) -> bool:
        return not self._evaluator.is_empty(config)

    def describe(self, config: FilterConfig | dict | None) -> str:
        return describe_filter(config, self._catalog, empty_message=self._empty_description)

    def run(self, request: FilterRequest) -> FilterResponse:
        trace_id = request.trace_id or uuid.uuid4().hex
        started = time.perf_counter()
        if self._logger:
            self._logger.info(
                "filter_start",
                extra={"trace_id": trace_id, "total": len(request.records)},
            )

        validation = validate_filter_config(request.filter, self._catalog)
        active = self.is_active(request.filter)
        records = self._evaluator.apply(
            request.records,
            request.filter,
            LookupMaps(request.lookup_maps),
        )

        response = FilterResponse(
            records=records,
            total=len(request.records),
            matched=len(records),
            active=active,
            description=self.describe(request.filter),
            errors=validation.errors,
            warnings=validation.warnings,
        )
        latency_ms = (time.perf_counter() - started) * 1000.0
        log_filter_evaluation(
            "active" if active else "inactive",
            trace_id,
            latency_ms,
            error="; ".join(validation.errors) or None,
            extra={"total": response.total, "matched": response.matched},
        )
        if self._logger:
            self._logger.info(
                "filter_done",
                extra={"trace_id": trace_id, "matched": response.matched, "active": active},
            )
        return response
