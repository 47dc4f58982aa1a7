"""JSON encoding and decoding backed by ``msgspec``."""

from typing import Any, Union

import msgspec

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder(enc_hook=str)
_decoder = msgspec.json.Decoder()


def encode_json(data: Any, as_bytes: bool = False) -> Union[str, bytes]:
    """Encode ``data`` as compact JSON; unsupported objects are encoded with ``str()``."""
    encoded = _encoder.encode(data)
    return encoded if as_bytes else encoded.decode("utf-8")


def decode_json(data: Union[str, bytes], decode_bytes: bool = True) -> Any:
    if isinstance(data, bytes) and not decode_bytes:
        return data
    return _decoder.decode(data)
