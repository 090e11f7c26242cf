from fondation_cms.extensions import db
from .base import BaseModel


class StorageEntry(BaseModel):
    """One key of the content store. `value` holds the JSON-encoded record."""
    __tablename__ = "storage_entries"

    key = db.Column(db.String(255), primary_key=True)
    value = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            "key": self.key,
            "value": self.value,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
