"""Key/value JSON demo endpoints.

``/map``, ``/simpleentry`` and ``/singleton`` all answer
``{"key": "Json Key-Value Demo"}``; ``/pair`` spells out both halves as
``{"key": "key", "value": "Json Key-Value Demo"}``.
"""
from __future__ import annotations

from flask import jsonify

from blogstream.schemas.keyvalue import KeyValuePair

from blogstream.blueprints.posts import bp

DEMO_KEY = "key"
DEMO_VALUE = "Json Key-Value Demo"


@bp.get("/map")
def key_value_map():
    return jsonify({DEMO_KEY: DEMO_VALUE})


@bp.get("/simpleentry")
def key_value_entry():
    key, value = DEMO_KEY, DEMO_VALUE
    return jsonify({key: value})


@bp.get("/singleton")
def key_value_singleton():
    return jsonify(dict([(DEMO_KEY, DEMO_VALUE)]))


@bp.get("/pair")
def key_value_pair():
    return jsonify(KeyValuePair(key=DEMO_KEY, value=DEMO_VALUE).model_dump())
