"""
Quote price use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...conf import orders_settings
from ...domain.services.pricing import apply_customization_surcharges, price_breakdown
from ...domain.value_objects import CakeConfiguration
from ..dtos.order_dto import PriceQuoteDTO, QuotePriceDTO


@dataclass
class QuotePriceUseCase(UseCase[QuotePriceDTO, PriceQuoteDTO]):
    """Price a cake while it is still being designed."""

    def execute(self, input_dto: QuotePriceDTO) -> UseCaseResult[PriceQuoteDTO]:
        config = CakeConfiguration.from_dict(input_dto.cake_config)
        breakdown = price_breakdown(config, currency=orders_settings.CURRENCY)
        total = breakdown.total
        if input_dto.include_customization:
            total = apply_customization_surcharges(total, config.customization)
        return UseCaseResult.ok(
            PriceQuoteDTO.from_breakdown(breakdown, total, is_complete=config.is_complete)
        )
