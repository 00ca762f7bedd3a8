"""Transfer log decoding.

This package provides:
- Raw ABI word decoder (decode_data)
- Address normalization (truncate_address_hash, encode_address_hash)
- Transfer shape table (TransferShape, make_shapes)
- Classifier returning Classified / Unclassified results
"""

from tokenflow.decoding.abi import decode_data
from tokenflow.decoding.addresses import encode_address_hash, truncate_address_hash
from tokenflow.decoding.classifier import Classified, ClassifyResult, Unclassified, classify
from tokenflow.decoding.shapes import TransferShape, find_shape, make_shapes

__all__ = [
    "decode_data",
    "encode_address_hash",
    "truncate_address_hash",
    "Classified",
    "ClassifyResult",
    "Unclassified",
    "classify",
    "TransferShape",
    "find_shape",
    "make_shapes",
]
