"""ORM models; importing this package registers them on ``Base.metadata``."""

from app.models.human import Human  # noqa: F401
