from flask import request, g, jsonify
from sitenav.models.site import Site
from sitenav.extensions import db

# Endpoints served without a site context
SITE_EXEMPT_ENDPOINTS = {"v1.health_check"}

def site_middleware(app):
    @app.before_request
    def load_site():
        if request.blueprint != "v1" or request.endpoint in SITE_EXEMPT_ENDPOINTS:
            return None

        site_id = request.headers.get('X-Site-ID')
        if not site_id:
            return jsonify({"error": "X-Site-ID header is missing"}), 400

        site = db.session.query(Site).filter_by(id=site_id, is_active=True).first()
        if not site:
            return jsonify({"error": "Invalid site"}), 404

        # Attach site to global context
        g.current_site = site
