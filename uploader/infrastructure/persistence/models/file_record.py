"""StoredFile ORM model. Metadata row for one uploaded file."""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from uploader.infrastructure.persistence.database import Base


class StoredFile(Base):
    """Table: file_record. Bytes live either inline (file_data) or on disk (file_path)."""

    __tablename__ = "file_record"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    content_type: Mapped[str] = mapped_column(String, nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    file_data: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    file_path: Mapped[str | None] = mapped_column(String, nullable=True)
    upload_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    last_modified: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        # Exactly one storage location per row.
        CheckConstraint(
            "(file_data IS NULL) <> (file_path IS NULL)",
            name="ck_file_record_single_location",
        ),
    )
