from sqlalchemy import Column, Enum, Index, Integer, Text, text
from sqlalchemy.orm import declarative_base

from ..utils.identifiers import new_document_id, utc_now

Base = declarative_base()
metadata = Base.metadata


class Universities(Base):
    __tablename__ = 'universities'
    __table_args__ = (
        Index('ix_universities_slug', 'slug'),
    )

    id = Column(Text, primary_key=True, default=new_document_id)
    # Nullable: rows imported from the old document store may lack a name
    name = Column(Text)
    slug = Column(Text)
    country = Column(Text)
    type = Column(Enum('Public', 'Private'))
    image = Column(Text)
    short_description = Column(Text)
    details = Column(Text)
    status = Column(Enum('draft', 'published'), nullable=False, server_default=text("'draft'"))
    created_at = Column(Text, nullable=False, default=utc_now)
    updated_at = Column(Text, nullable=False, default=utc_now)


class Consultations(Base):
    __tablename__ = 'consultations'

    id = Column(Text, primary_key=True, default=new_document_id)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    preferred_destination = Column(Text)
    program_level = Column(Text)
    message = Column(Text)
    agree_to_terms = Column(Integer, nullable=False, server_default=text('0'))
    subscribe_newsletter = Column(Integer, nullable=False, server_default=text('0'))
    status = Column(
        Enum('pending', 'contacted', 'scheduled', 'completed', 'cancelled'),
        nullable=False,
        server_default=text("'pending'"),
    )
    priority = Column(
        Enum('low', 'medium', 'high', 'urgent'),
        nullable=False,
        server_default=text("'medium'"),
    )
    assigned_to = Column(Text)
    notes = Column(Text)
    scheduled_date = Column(Text)
    created_at = Column(Text, nullable=False, default=utc_now)
    updated_at = Column(Text, nullable=False, default=utc_now)


class ContactMessages(Base):
    __tablename__ = 'contact_messages'

    id = Column(Text, primary_key=True, default=new_document_id)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(
        Enum('new', 'read', 'replied', 'closed'),
        nullable=False,
        server_default=text("'new'"),
    )
    priority = Column(
        Enum('low', 'medium', 'high', 'urgent'),
        nullable=False,
        server_default=text("'medium'"),
    )
    notes = Column(Text)
    replied_at = Column(Text)
    created_at = Column(Text, nullable=False, default=utc_now)
    updated_at = Column(Text, nullable=False, default=utc_now)


class SiteSettings(Base):
    __tablename__ = 'settings'

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=False, server_default=text("'{}'"))
    updated_at = Column(Text, nullable=False, default=utc_now)


class TeamMembers(Base):
    __tablename__ = 'team_members'

    id = Column(Text, primary_key=True, default=new_document_id)
    name = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    image = Column(Text)
    bio = Column(Text)
    sort_order = Column(Integer, nullable=False, server_default=text('0'))
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, nullable=False, default=utc_now)
    updated_at = Column(Text, nullable=False, default=utc_now)


class SuccessStories(Base):
    __tablename__ = 'success_stories'

    id = Column(Text, primary_key=True, default=new_document_id)
    name = Column(Text, nullable=False)
    country = Column(Text, nullable=False)
    university = Column(Text, nullable=False)
    program = Column(Text, nullable=False)
    story = Column(Text, nullable=False)
    image = Column(Text)
    rating = Column(Integer, nullable=False, server_default=text('5'))
    flag = Column(Text)
    color = Column(Text)
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, nullable=False, default=utc_now)
    updated_at = Column(Text, nullable=False, default=utc_now)
