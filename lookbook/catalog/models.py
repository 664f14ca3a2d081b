"""SQLAlchemy models for the product and moodboard catalog.

Records are converted to CatalogItem view records before they leave
the repository.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lookbook.domain.entities import CatalogItem, ItemKind
from lookbook.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Products
# ============================================================================


class ProductRecord(Base):
    """Product row.

    Attributes:
        id: Product identifier (e.g. "prod_001").
        slug: Unique URL slug.
        name: Product name.
        description: Product description.
        brand: Brand name.
        category: Category name (e.g. "Outerwear").
        price: Price in major currency units, nullable.
        image_url: Product image URL.
        affiliate_url: Outbound purchase link.
        is_featured: Shown on featured listings.
        is_published: Visible to public queries.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    affiliate_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    tags: Mapped[list["ProductTagRecord"]] = relationship(
        "ProductTagRecord",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductRecord(id={self.id}, slug={self.slug})>"

    @classmethod
    def from_item(cls, item: CatalogItem) -> "ProductRecord":
        """Build a row (with tag rows) from a catalog item."""
        return cls(
            id=item.id,
            slug=item.slug,
            name=item.name,
            description=item.description,
            brand=item.brand,
            category=item.category,
            price=item.price,
            image_url=item.image_url,
            affiliate_url=item.affiliate_url,
            is_featured=item.is_featured,
            is_published=item.is_published,
            created_at=item.created_at,
            updated_at=item.created_at,
            tags=[ProductTagRecord(tag=tag) for tag in sorted(item.tags)],
        )

    def to_item(self) -> CatalogItem:
        """Convert to a catalog view record."""
        return CatalogItem(
            id=self.id,
            slug=self.slug,
            kind=ItemKind.PRODUCT,
            name=self.name,
            description=self.description,
            brand=self.brand,
            category=self.category,
            price=self.price,
            image_url=self.image_url,
            affiliate_url=self.affiliate_url,
            tags=frozenset(t.tag for t in self.tags),
            is_featured=self.is_featured,
            is_published=self.is_published,
            created_at=self.created_at,
        )


class ProductTagRecord(Base):
    """Tag attached to a product."""

    __tablename__ = "product_tags"
    __table_args__ = (UniqueConstraint("product_id", "tag", name="uq_product_tags_product_tag"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag: Mapped[str] = mapped_column(String(100), nullable=False, index=True)


# ============================================================================
# Moodboards
# ============================================================================


class MoodboardRecord(Base):
    """Moodboard row.

    Attributes:
        id: Moodboard identifier (e.g. "mood_001").
        slug: Unique URL slug.
        title: Moodboard title.
        description: Moodboard description.
        cover_image: Cover image URL.
        how_to_wear: Wear guidance.
        is_featured: Shown on featured listings.
        is_published: Visible to public queries.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "moodboards"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    how_to_wear: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    tags: Mapped[list["MoodboardTagRecord"]] = relationship(
        "MoodboardTagRecord",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    products: Mapped[list["MoodboardProductRecord"]] = relationship(
        "MoodboardProductRecord",
        cascade="all, delete-orphan",
        order_by="MoodboardProductRecord.sort_order",
        lazy="selectin",
    )
    styling_tips: Mapped[list["MoodboardStylingTipRecord"]] = relationship(
        "MoodboardStylingTipRecord",
        cascade="all, delete-orphan",
        order_by="MoodboardStylingTipRecord.sort_order",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<MoodboardRecord(id={self.id}, slug={self.slug})>"

    @classmethod
    def from_item(cls, item: CatalogItem) -> "MoodboardRecord":
        """Build a row (with tag, product and tip rows) from a catalog item."""
        return cls(
            id=item.id,
            slug=item.slug,
            title=item.name,
            description=item.description,
            cover_image=item.image_url,
            how_to_wear=item.how_to_wear,
            is_featured=item.is_featured,
            is_published=item.is_published,
            created_at=item.created_at,
            updated_at=item.created_at,
            tags=[MoodboardTagRecord(tag=tag) for tag in sorted(item.tags)],
            products=[
                MoodboardProductRecord(product_id=product_id, sort_order=index)
                for index, product_id in enumerate(item.product_ids)
            ],
            styling_tips=[
                MoodboardStylingTipRecord(tip=tip, sort_order=index)
                for index, tip in enumerate(item.styling_tips)
            ],
        )

    def to_item(self) -> CatalogItem:
        """Convert to a catalog view record."""
        return CatalogItem(
            id=self.id,
            slug=self.slug,
            kind=ItemKind.MOODBOARD,
            name=self.title,
            description=self.description,
            image_url=self.cover_image,
            tags=frozenset(t.tag for t in self.tags),
            is_featured=self.is_featured,
            is_published=self.is_published,
            created_at=self.created_at,
            styling_tips=tuple(tip.tip for tip in self.styling_tips),
            how_to_wear=self.how_to_wear,
            product_ids=tuple(p.product_id for p in self.products),
        )


class MoodboardTagRecord(Base):
    """Tag attached to a moodboard."""

    __tablename__ = "moodboard_tags"
    __table_args__ = (UniqueConstraint("moodboard_id", "tag", name="uq_moodboard_tags_moodboard_tag"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    moodboard_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("moodboards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag: Mapped[str] = mapped_column(String(100), nullable=False, index=True)


class MoodboardProductRecord(Base):
    """Product placed on a moodboard."""

    __tablename__ = "moodboard_products"

    moodboard_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("moodboards.id", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    )
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class MoodboardStylingTipRecord(Base):
    """Styling tip shown on a moodboard."""

    __tablename__ = "moodboard_styling_tips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    moodboard_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("moodboards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tip: Mapped[str] = mapped_column(Text, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
