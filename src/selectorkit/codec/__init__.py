from selectorkit.codec.json_codec import decode, encode

__all__ = ["decode", "encode"]
