"""
Service de paiement Stripe.
Un seul appel PaymentIntent par requête, sans nouvelle tentative en cas d'échec.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import stripe
from fastapi.concurrency import run_in_threadpool

from app.config import settings
from app.services import sponsorship_service
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class PaymentError(Exception):
    """Stripe non configuré ou en erreur."""


def to_minor_units(amount: float) -> int:
    """Convertit un montant en dollars en cents (arrondi au plus proche, .5 vers le haut)."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def create_payment_intent(store: RecordStore, amount: float, sponsorship_id: Optional[int] = None) -> str:
    """
    Crée un PaymentIntent et retourne son client_secret.
    Si un parrainage est fourni, l'identifiant du PaymentIntent y est enregistré.

    Lève une ValueError si le montant vaut moins d'un cent, une PaymentError si
    Stripe n'est pas configuré ou refuse la demande.
    """
    cents = to_minor_units(amount)
    if cents < 1:
        raise ValueError("Montant invalide : minimum 0,01 $.")

    if not settings.STRIPE_SECRET_KEY:
        raise PaymentError("Stripe n'est pas configuré.")

    metadata = {}
    if sponsorship_id:
        metadata["sponsorshipId"] = str(sponsorship_id)

    # Appel réseau hors de la boucle d'événements ; aucune écriture BDD n'est en cours ici.
    try:
        intent = await run_in_threadpool(
            stripe.PaymentIntent.create,
            amount=cents,
            currency=settings.STRIPE_CURRENCY,
            metadata=metadata,
            api_key=settings.STRIPE_SECRET_KEY,
        )
    except stripe.StripeError as e:
        logger.error("Échec de création du PaymentIntent : %s", e)
        raise PaymentError("Le paiement n'a pas pu être créé.") from e

    logger.info("PaymentIntent %s créé (%d cents)", intent.id, cents)

    if sponsorship_id:
        if sponsorship_service.set_payment_id(store, sponsorship_id, intent.id) is None:
            logger.warning("Parrainage %d introuvable, paiement %s non rattaché", sponsorship_id, intent.id)

    return intent.client_secret
