# blog_api/models/post.py
from blog_api.extensions import db, utcnow

SLUG_MAX_LENGTH = 255


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)

    # 👤 Autor
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    author = db.relationship("User", back_populates="posts")

    # 🧠 Contenido
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(SLUG_MAX_LENGTH), unique=True, nullable=False)

    # ⏰ Timestamp
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    # ✅ Formato público de la API
    def to_dict(self, author_name=None):
        if author_name is None:
            author_name = self.author.name if self.author else None
        return {
            "id": self.id,
            "autor": author_name,
            "titulo": self.title,
            "texto": self.body,
            "slug": self.slug,
            "data_criacao": self.created_at.isoformat() if self.created_at else None,
        }
