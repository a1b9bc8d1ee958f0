# blog_api/routes/post_routes.py
from flask import Blueprint, request, jsonify, g, current_app
from slugify import slugify

from blog_api.auth import jwt_required
from blog_api.errors import InvalidTokenError, NotFoundError
from blog_api.extensions import db
from blog_api.models import Post, User
from blog_api.models.post import SLUG_MAX_LENGTH

# Lugar para el prefijo "post-" y el sufijo "-N"
SLUG_BASE_MAX_LENGTH = SLUG_MAX_LENGTH - 16
from blog_api.schemas import PostCreate, validate

post_bp = Blueprint("posts", __name__)


def generate_unique_slug(title):
    """Slug a partir del título, con sufijo numérico si ya existe."""
    base_slug = slugify(title, max_length=SLUG_BASE_MAX_LENGTH) or "post"
    if base_slug.isdecimal():
        # Un slug numérico se confundiría con un id en la ruta de detalle
        base_slug = f"post-{base_slug}"
    slug = base_slug
    i = 1
    while Post.query.filter_by(slug=slug).first():
        slug = f"{base_slug}-{i}"
        i += 1
    return slug


# 🟢 Crear un nuevo post
@post_bp.route("/postagens", methods=["POST"])
@jwt_required
def create_post():
    data = validate(PostCreate, request.get_json(silent=True))

    subject = g.current_user["id"]
    user = db.session.get(User, int(subject)) if subject.isdecimal() else None
    if user is None:
        # Token bien firmado pero el usuario ya no existe
        raise InvalidTokenError()

    new_post = Post(
        user_id=user.id,
        title=data.titulo,
        body=data.texto,
        slug=generate_unique_slug(data.titulo),
    )
    db.session.add(new_post)
    db.session.commit()

    current_app.logger.info("📝 Post %s creado por usuario %s", new_post.id, user.id)
    return jsonify({"message": "Post creado exitosamente"}), 201


# 🟣 Listar posts con el nombre del autor
@post_bp.route("/postagens", methods=["GET"])
def list_posts():
    rows = (
        db.session.query(Post, User.name)
        .join(User, Post.user_id == User.id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )
    return jsonify([post.to_dict(author_name=name) for post, name in rows]), 200


# 🔵 Ver un solo post (por ID o slug)
@post_bp.route("/postagens/<string:identifier>", methods=["GET"])
def get_post_detail(identifier):
    if identifier.isdecimal():
        post = db.session.get(Post, int(identifier))
    else:
        post = Post.query.filter_by(slug=identifier).first()

    if not post:
        raise NotFoundError("Post no encontrado")

    return jsonify(post.to_dict()), 200
