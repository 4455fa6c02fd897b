from __future__ import annotations

import logging
import os
from datetime import timedelta
from typing import Any, Dict

import click
import structlog
from flask import Flask, current_app, g, jsonify, request
from markupsafe import Markup

from blogstream.config import Config
from blogstream.extensions import (
    db,
    migrate,
    login_manager,
    csrf,
    limiter,
    cache,
)
from blogstream.logging_config import configure_logging
from blogstream.security import apply_security_headers
from blogstream.models.user import User  # ensure models imported for migrations
from blogstream.utils.crypto import hash_password
from blogstream.utils.html_sanitizer import sanitize_html


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(logging.DEBUG if app.config.get("DEBUG") else logging.INFO)
    log = structlog.get_logger(__name__)

    app.permanent_session_lifetime = timedelta(minutes=int(app.config.get("SESSION_LIFETIME_MINUTES", 30)))

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    cache.init_app(app)
    limiter.init_app(app)

    from blogstream.services.posts import configure_tag_cache

    configure_tag_cache(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id: str) -> User | None:
        try:
            from blogstream.utils.db_retry import safe_db_operation
            return safe_db_operation(db.session.get, User, int(user_id))
        except Exception as e:
            current_app.logger.error(f"Error loading user {user_id}: {str(e)}")
            return None

    @login_manager.unauthorized_handler
    def unauthorized_json():
        return jsonify({"error": "unauthorized", "message": "login required"}), 401

    @app.template_filter('safe_html')
    def safe_html_filter(html_content: str) -> str:
        """Template filter to sanitize HTML content for safe rendering."""
        return Markup(sanitize_html(html_content or ""))

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()

    # Security headers
    @app.after_request
    def set_headers(resp):
        return apply_security_headers(resp)

    # Blueprints
    from blogstream.blueprints.posts import bp as posts_bp

    app.register_blueprint(posts_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Error handlers (JSON)
    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"error": "bad_request", "message": str(e)}), 400

    @app.errorhandler(401)
    def unauthorized(e):
        return jsonify({"error": "unauthorized", "message": str(e)}), 401

    @app.errorhandler(403)
    def forbidden(e):
        return jsonify({"error": "forbidden", "message": str(e)}), 403

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: create a user who can like posts
    @app.cli.command("create-user")
    @click.option("--username", prompt=True)
    @click.option("--email", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    @click.option("--admin", is_flag=True, default=False)
    def create_user_command(username: str, email: str, password: str, admin: bool) -> None:
        from blogstream.repositories.user import create_user, get_user_by_username

        if get_user_by_username(username):
            click.echo("User already exists")
            return
        try:
            create_user(
                username=username,
                email=email,
                password_hash=hash_password(password),
                is_admin=admin,
            )
        except ValueError:
            click.echo("Username or email already in use")
            return
        log.info("user_created", username=username, is_admin=admin)
        click.echo("User created")

    # CLI: sample posts and tags for local development
    @app.cli.command("seed-demo")
    def seed_demo_command() -> None:
        from blogstream.services.posts import invalidate_tag_cache
        from blogstream.utils.demo_data import seed_demo_content

        db.create_all()
        created = seed_demo_content()
        invalidate_tag_cache()
        click.echo(f"Created {created} demo posts")

    return app
