"""Listing ORM Models"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class ListingModel(Base):
    __tablename__ = 'listings'

    id = Column(Integer, primary_key=True, index=True)
    seller_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    url = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False, index=True)
    asking_price = Column(Integer, nullable=False, index=True)

    # Seller-reported metrics
    monthly_revenue = Column(Integer, nullable=True)
    monthly_profit = Column(Integer, nullable=True)
    monthly_traffic = Column(Integer, nullable=True)
    age_months = Column(Integer, nullable=False)

    monetization = Column(JSON, default=list)
    tech_stack = Column(JSON, default=list)
    reason_for_selling = Column(Text, nullable=False)
    included_assets = Column(Text, nullable=True)
    status = Column(String, nullable=False, default='active', index=True)  # active | under_offer | sold | unpublished
    faqs = Column(JSON, default=list)

    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    seller = relationship('UserModel', back_populates='listings')
    images = relationship(
        'ListingImageModel',
        back_populates='listing',
        cascade='all, delete-orphan',
        order_by='ListingImageModel.display_order',
    )
    inquiries = relationship('InquiryModel', back_populates='listing', cascade='all, delete-orphan')


class ListingImageModel(Base):
    __tablename__ = 'listing_images'

    id = Column(Integer, primary_key=True, index=True)
    listing_id = Column(Integer, ForeignKey('listings.id', ondelete='CASCADE'), nullable=False, index=True)
    url = Column(String, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    listing = relationship('ListingModel', back_populates='images')
