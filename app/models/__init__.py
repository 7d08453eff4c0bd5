from app.models.models import Joke, TimestampMixin, utcnow

__all__ = ["Joke", "TimestampMixin", "utcnow"]
