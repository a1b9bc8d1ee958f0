# blog_api/models/user.py
from blog_api.extensions import db, utcnow


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    # Se guarda tal como llegó; la unicidad la decide el collation de la base
    email = db.Column(db.String(255), nullable=False, unique=True)
    # Nunca la contraseña en claro
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    posts = db.relationship("Post", back_populates="author", lazy="dynamic")

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
