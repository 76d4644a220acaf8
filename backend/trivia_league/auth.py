"""Host authentication: a single shared bearer secret.

Wired into Flask-Login as a request loader, so host-only routes are plain
``@login_required`` views.
"""

import hmac

from flask import current_app, jsonify
from flask_login import UserMixin


class Host(UserMixin):
    id = 'host'


def load_host_from_request(request):
    secret = current_app.config.get('HOST_SECRET')
    if not secret:
        return None
    supplied = request.headers.get('Authorization', '')
    if hmac.compare_digest(supplied.encode('utf-8'), f'Bearer {secret}'.encode('utf-8')):
        return Host()
    return None


def unauthorized():
    return jsonify({'error': 'Unauthorized: valid HOST_SECRET required'}), 401
