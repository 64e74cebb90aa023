from .sms import FALLBACK_MERCHANT, parse

__all__ = ["parse", "FALLBACK_MERCHANT"]
