from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.services.conversion import ConversionResult


class ConversionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exchange_rate: Decimal = Field(..., alias="exchangeRate")
    converted_amount: Decimal = Field(..., alias="convertedAmount")

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionResponse":
        return cls(
            exchange_rate=result.exchange_rate,
            converted_amount=result.converted_amount,
        )
