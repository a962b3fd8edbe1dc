"""Inquiry ORM Model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class InquiryModel(Base):
    __tablename__ = 'inquiries'

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(Integer, ForeignKey('listings.id', ondelete='CASCADE'), nullable=False, index=True)
    buyer_name = Column(String, nullable=False)
    buyer_email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)

    listing = relationship('ListingModel', back_populates='inquiries')
