"""
Payload size limits for encrypted chat and key directory requests.
"""

# Decoded payload limits.
MAX_MESSAGE_CIPHERTEXT_BYTES = 64 * 1024
MAX_WRAPPED_KEY_BYTES = 4 * 1024
MAX_PUBLIC_KEY_BYTES = 4 * 1024

# Envelopes accepted in one send call (one per recipient).
MAX_ENVELOPES_PER_BATCH = 250


def base64_max_length(byte_limit: int) -> int:
    """Return the largest padded base64 string length for byte_limit bytes."""
    return ((byte_limit + 2) // 3) * 4


MAX_MESSAGE_CIPHERTEXT_B64_CHARS = base64_max_length(MAX_MESSAGE_CIPHERTEXT_BYTES)
MAX_WRAPPED_KEY_B64_CHARS = base64_max_length(MAX_WRAPPED_KEY_BYTES)
MAX_PUBLIC_KEY_B64_CHARS = base64_max_length(MAX_PUBLIC_KEY_BYTES)
