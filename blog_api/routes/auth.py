# blog_api/routes/auth.py
from flask import Blueprint, request, jsonify, current_app

from blog_api.auth import verify_password
from blog_api.auth.tokens import get_token_issuer
from blog_api.errors import AuthenticationError
from blog_api.models import User
from blog_api.schemas import LoginRequest, validate

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = validate(LoginRequest, request.get_json(silent=True))

    user = User.query.filter_by(email=data.email).first()
    if not user or not verify_password(data.senha, user.password_hash):
        current_app.logger.info("⚠️ Login fallido")
        raise AuthenticationError()

    # 🛡️ Generar JWT
    token = get_token_issuer().issue(user.id)
    current_app.logger.info("✅ Login exitoso: id=%s", user.id)
    return jsonify({"token": token}), 200
