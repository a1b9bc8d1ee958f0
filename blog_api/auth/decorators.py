# blog_api/auth/decorators.py
from functools import wraps

from flask import request, jsonify, g

from blog_api.auth.pipeline import RequestContext, Terminate, bearer_gate, run_pipeline
from blog_api.auth.tokens import get_token_verifier


def jwt_required(f):
    """Corre el gate de bearer token antes de la vista.

    Sin token -> 401, token inválido o expirado -> 403. Si pasa, deja el id
    del usuario en ``g.current_user``.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        context = RequestContext(headers=request.headers)
        result = run_pipeline(bearer_gate(get_token_verifier()), context)
        if isinstance(result, Terminate):
            return jsonify(result.body), result.status

        g.current_user = {"id": result.context.user_id}
        return f(*args, **kwargs)
    return decorated
