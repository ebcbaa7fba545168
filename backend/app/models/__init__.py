# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.

from app.models.user import User  # noqa: F401  (doit précéder les profils)
from app.models.student_profile import StudentProfile  # noqa: F401
from app.models.sponsor_profile import SponsorProfile  # noqa: F401
from app.models.funding_application import FundingApplication  # noqa: F401
from app.models.sponsorship import Sponsorship  # noqa: F401
from app.models.micro_job import MicroJob  # noqa: F401
