# app/models/database/__init__.py
"""Database models initialization."""

from .base import Base
from .user import PROFILE_MODELS, User, Styler, Partner
from .item import StylerCloth, PartnerCloth
from .outfit import Occasion, Payment

# This makes imports cleaner elsewhere in the application
__all__ = [
    'Base',
    'User',
    'Styler',
    'Partner',
    'PROFILE_MODELS',
    'StylerCloth',
    'PartnerCloth',
    'Occasion',
    'Payment'
]
