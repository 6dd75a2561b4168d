# Payments/models.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Any


@dataclass(frozen=True)
class PaymentRequest:
    """Payment data for a single processing call"""
    payment_type: str
    amount: Decimal
    order_id: str
    additional_data: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a processing call, returned to the caller and not retained"""
    success: bool
    message: str
    payment_type: str
    transaction_id: str = ""
    amount: Decimal = Decimal(0)
    transaction_fee: Decimal = Decimal(0)
    total_amount: Decimal = Decimal(0)
    processed_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "transaction_id": self.transaction_id,
            "payment_type": self.payment_type,
            "amount": self.amount,
            "transaction_fee": self.transaction_fee,
            "total_amount": self.total_amount,
            "processed_at": self.processed_at.isoformat(),
            "additional_info": dict(self.additional_info),
        }


@dataclass(frozen=True)
class PaymentMethodInfo:
    """Static description of a payment method for client display"""
    type: str
    display_name: str
    description: str
    min_amount: Decimal
    max_amount: Optional[Decimal]  # None means no upper bound
    fee_description: str
    required_fields: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "display_name": self.display_name,
            "description": self.description,
            "min_amount": self.min_amount,
            "max_amount": self.max_amount,
            "fee_description": self.fee_description,
            "required_fields": list(self.required_fields),
        }
