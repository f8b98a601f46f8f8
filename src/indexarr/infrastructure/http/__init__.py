from .transport import HttpxTransport, RateLimitedTransport

__all__ = ["HttpxTransport", "RateLimitedTransport"]
