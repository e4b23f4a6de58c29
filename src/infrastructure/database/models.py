"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """User profile model. Adjacency sets are stored as JSON arrays.

    ``version`` is checked on every UPDATE, so a write based on a stale
    read fails with ``StaleDataError`` instead of overwriting.
    """

    __tablename__ = "profiles"

    # Subject id issued by the identity provider
    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    photo_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    user_name: Mapped[str] = mapped_column(String(100), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    followers: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    following: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    __mapper_args__ = {"version_id_col": version}


class PostModel(Base):
    """Post model with soft delete."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_creator_created", "creator_id", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    creator_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    share: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    photo_url: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    hashtag: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    cate_id: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    reaction: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    mention: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    comments: Mapped[list["CommentModel"]] = relationship(
        "CommentModel",
        back_populates="post",
        cascade="all, delete-orphan",
    )


class CommentModel(Base):
    """Comment model."""

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    post: Mapped["PostModel"] = relationship("PostModel", back_populates="comments")
