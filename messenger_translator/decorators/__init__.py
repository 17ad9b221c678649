"""View decorators."""
from messenger_translator.decorators.security import signature_required, verify_signature, compute_signature

__all__ = ["signature_required", "verify_signature", "compute_signature"]
