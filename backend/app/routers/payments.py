"""
Router de paiement (Stripe PaymentIntent).
"""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.payment import PaymentIntentCreate, PaymentIntentResponse
from app.services import payment_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api", tags=["Paiements"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse,
             summary="Créer un PaymentIntent Stripe")
async def create_payment_intent(data: PaymentIntentCreate, store: RecordStore = Depends(get_store)):
    """
    Crée un PaymentIntent pour le montant donné (en dollars).
    Si sponsorshipId est fourni, l'identifiant Stripe est enregistré sur le parrainage.
    """
    try:
        secret = await payment_service.create_payment_intent(store, data.amount, data.sponsorship_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except payment_service.PaymentError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PaymentIntentResponse(client_secret=secret)
