"""Request schemas for the HTTP surface.

Responses are plain dictionaries passed through FastAPI's JSON encoder, so
only incoming bodies are modelled here. Both snake_case and camelCase field
names are accepted.
"""

from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from Payments.models import PaymentRequest


class PaymentRequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_type: str = Field(default="", alias="paymentType")
    amount: Decimal = Field(default=Decimal(0))
    order_id: str = Field(default="", alias="orderId")
    additional_data: Optional[Dict[str, str]] = Field(default=None, alias="additionalData")

    def to_payment_request(self) -> PaymentRequest:
        return PaymentRequest(
            payment_type=self.payment_type.strip(),
            amount=self.amount,
            order_id=self.order_id,
            additional_data=dict(self.additional_data or {})
        )


class CreateUserBody(BaseModel):
    name: str = ""
    email: str = ""
