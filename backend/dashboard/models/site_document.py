from dashboard.extensions import db
from .base import BaseModel

# The site has exactly one document row.
SITE_DOCUMENT_KEY = "site"


class SiteDocument(BaseModel):
    __tablename__ = "site_documents"

    key = db.Column(db.String(50), unique=True, nullable=False, default=SITE_DOCUMENT_KEY)

    content = db.Column(db.JSON, nullable=True)
    history = db.Column(db.JSON, nullable=False, default=list)

    # Peer collections sharing the same document; edited through their own routes.
    news = db.Column(db.JSON, nullable=False, default=list)
    game_rules = db.Column(db.JSON, nullable=False, default=list)

    updated_by = db.Column(db.String(120), nullable=True)

    @classmethod
    def current(cls):
        return cls.query.filter_by(key=SITE_DOCUMENT_KEY).first()

    @classmethod
    def current_or_new(cls):
        document = cls.current()
        if document is None:
            document = cls()
            document.key = SITE_DOCUMENT_KEY
            document.history = []
            document.news = []
            document.game_rules = []
            db.session.add(document)
        return document

    @property
    def has_content(self) -> bool:
        return isinstance(self.content, dict)

    def to_dict(self):
        return {
            "content": self.content,
            "history": self.history or [],
        }
