from .dto import PolkaEventIn
from .service import USER_UPGRADED, WebhookService

__all__ = ["PolkaEventIn", "USER_UPGRADED", "WebhookService"]
