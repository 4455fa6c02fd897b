from __future__ import annotations

from flask import current_app, jsonify

from blogstream.extensions import limiter
from blogstream.services import posts as post_svc
from blogstream.utils.tag_cloud import render_tag_cloud

from blogstream.blueprints.posts import bp


@bp.get("/tags")
@limiter.limit("120 per minute")
def all_tag_dtos():
    return jsonify([t.model_dump(by_alias=True) for t in post_svc.get_tag_dtos()])


@bp.get("/tagvalues")
@limiter.limit("120 per minute")
def tag_values():
    return jsonify(post_svc.get_tag_values())


@bp.get("/tagcloud")
@limiter.limit("120 per minute")
def tag_cloud():
    tags = post_svc.get_tag_cloud()
    return render_tag_cloud(tags, current_app.config.get("BASE_URL", ""))
