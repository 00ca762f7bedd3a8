"""Core data models, configuration, errors, and constants.

This package provides:
- Data models (EventLog, Token, TokenTransfer, ParseResult, ParseStats)
- Configuration (ParserConfig)
- Error taxonomy (ClassificationError and friends, TokenUpdateError)
- Event topic constants
"""

from tokenflow.core.config import ParserConfig
from tokenflow.core.errors import (
    ClassificationError,
    DecodeError,
    MalformedTopicError,
    TokenFlowError,
    TokenUpdateError,
    UnrecognizedLogShape,
)
from tokenflow.core.models import ERC20, ERC721, EventLog, ParseResult, ParseStats, Token, TokenTransfer, TokenType

__all__ = [
    "ParserConfig",
    "ClassificationError",
    "DecodeError",
    "MalformedTopicError",
    "TokenFlowError",
    "TokenUpdateError",
    "UnrecognizedLogShape",
    "ERC20",
    "ERC721",
    "EventLog",
    "ParseResult",
    "ParseStats",
    "Token",
    "TokenTransfer",
    "TokenType",
]
