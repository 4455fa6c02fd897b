from __future__ import annotations

# Import routes to register them with the posts JSON blueprint
# Each module imports `bp` from blogstream.blueprints.posts
from blogstream.blueprints.view.posts import titles  # noqa: E402,F401
from blogstream.blueprints.view.posts import stream  # noqa: E402,F401
from blogstream.blueprints.view.posts import likes  # noqa: E402,F401
from blogstream.blueprints.view.posts import tags  # noqa: E402,F401
from blogstream.blueprints.view.posts import keyvalue  # noqa: E402,F401
