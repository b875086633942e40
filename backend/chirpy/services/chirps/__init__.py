from .dto import ChirpCreateIn, ChirpListIn, ChirpOut
from .service import BANNED_WORDS, ChirpService, filter_profanity

__all__ = [
    "BANNED_WORDS",
    "ChirpCreateIn",
    "ChirpListIn",
    "ChirpOut",
    "ChirpService",
    "filter_profanity",
]
