from .notification import ActionRead, NotificationRead

__all__ = ["ActionRead", "NotificationRead"]
