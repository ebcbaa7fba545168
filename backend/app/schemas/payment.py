"""
Schémas Pydantic pour la création d'un PaymentIntent Stripe.
"""

from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class PaymentIntentCreate(CamelModel):
    # en dollars, converti en cents avant l'appel Stripe ; NaN et Infinity refusés,
    # plafond : montant maximal accepté par Stripe (999 999,99 $)
    amount: float = Field(gt=0, le=999_999.99, allow_inf_nan=False)
    sponsorship_id: Optional[int] = None


class PaymentIntentResponse(CamelModel):
    client_secret: str
