# blog_api/routes/users.py
from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import IntegrityError

from blog_api.auth import hash_password
from blog_api.errors import ValidationError
from blog_api.extensions import db
from blog_api.models import User
from blog_api.schemas import UserCreate, validate

users_bp = Blueprint("users", __name__)


# 🟢 Registro de usuario
@users_bp.route("/usuarios", methods=["POST"])
def register():
    data = validate(UserCreate, request.get_json(silent=True))

    if User.query.filter_by(email=data.email).first():
        raise ValidationError("El email ya está registrado", field="email")

    user = User(name=data.nome, email=data.email, password_hash=hash_password(data.senha))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Otro request registró el mismo email entre la consulta y el commit
        db.session.rollback()
        raise ValidationError("El email ya está registrado", field="email")

    current_app.logger.info("✅ Usuario registrado: id=%s", user.id)
    return jsonify({"message": "Usuario creado exitosamente"}), 201
