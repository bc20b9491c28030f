# backend/app/ai/schemas.py
"""
Category labels used by the classification prompt.
"""

from enum import Enum


class ArticleCategory(str, Enum):
    """Closed set of categories offered to the model."""

    CRYPTO = "Cryptomonnaies"
    TRADING = "Trading"
    CPI = "CPI (Indice des Prix à la Consommation)"
    ARTIFICIAL_INTELLIGENCE = "Intelligence Artificielle"
    CYBERSECURITY = "Cybersécurité"
    OTHER = "Autre"


SUMMARY_UNAVAILABLE = "Résumé non disponible."
