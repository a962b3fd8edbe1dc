"""Infrastructure ORM Models"""

from .user_model import UserModel
from .session_model import SessionModel
from .password_reset_token_model import PasswordResetTokenORM
from .listing_model import ListingModel, ListingImageModel
from .inquiry_model import InquiryModel

__all__ = [
    'UserModel',
    'SessionModel',
    'PasswordResetTokenORM',
    'ListingModel',
    'ListingImageModel',
    'InquiryModel',
]
