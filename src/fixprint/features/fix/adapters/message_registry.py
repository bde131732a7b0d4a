"""Summary: FIX 4.2 message type and field name dictionaries.
Why: Resolve type tags and field tags to readable names for rendering and reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, final

from fixprint.features.stream.domain.models import UnknownMessageTypeError

FIX42_MESSAGE_TYPES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "0": "Heartbeat",
        "1": "TestRequest",
        "2": "ResendRequest",
        "3": "Reject",
        "4": "SequenceReset",
        "5": "Logout",
        "6": "IndicationOfInterest",
        "7": "Advertisement",
        "8": "ExecutionReport",
        "9": "OrderCancelReject",
        "A": "Logon",
        "B": "News",
        "C": "Email",
        "D": "NewOrderSingle",
        "E": "NewOrderList",
        "F": "OrderCancelRequest",
        "G": "OrderCancelReplaceRequest",
        "H": "OrderStatusRequest",
        "J": "Allocation",
        "K": "ListCancelRequest",
        "L": "ListExecute",
        "M": "ListStatusRequest",
        "N": "ListStatus",
        "P": "AllocationInstructionAck",
        "Q": "DontKnowTrade",
        "R": "QuoteRequest",
        "S": "Quote",
        "T": "SettlementInstructions",
        "V": "MarketDataRequest",
        "W": "MarketDataSnapshotFullRefresh",
        "X": "MarketDataIncrementalRefresh",
        "Y": "MarketDataRequestReject",
        "Z": "QuoteCancel",
        "a": "QuoteStatusRequest",
        "b": "QuoteAcknowledgement",
        "c": "SecurityDefinitionRequest",
        "d": "SecurityDefinition",
        "e": "SecurityStatusRequest",
        "f": "SecurityStatus",
        "g": "TradingSessionStatusRequest",
        "h": "TradingSessionStatus",
        "i": "MassQuote",
        "j": "BusinessMessageReject",
        "k": "BidRequest",
        "l": "BidResponse",
        "m": "ListStrikePrice",
    }
)

# Header, trailer and the most common application fields.
FIX42_FIELD_NAMES: Final[Mapping[int, str]] = MappingProxyType(
    {
        1: "Account",
        6: "AvgPx",
        8: "BeginString",
        9: "BodyLength",
        10: "CheckSum",
        11: "ClOrdID",
        14: "CumQty",
        15: "Currency",
        17: "ExecID",
        20: "ExecTransType",
        21: "HandlInst",
        31: "LastPx",
        32: "LastShares",
        34: "MsgSeqNum",
        35: "MsgType",
        37: "OrderID",
        38: "OrderQty",
        39: "OrdStatus",
        40: "OrdType",
        41: "OrigClOrdID",
        43: "PossDupFlag",
        44: "Price",
        45: "RefSeqNum",
        49: "SenderCompID",
        52: "SendingTime",
        54: "Side",
        55: "Symbol",
        56: "TargetCompID",
        58: "Text",
        59: "TimeInForce",
        60: "TransactTime",
        97: "PossResend",
        98: "EncryptMethod",
        108: "HeartBtInt",
        112: "TestReqID",
        122: "OrigSendingTime",
        141: "ResetSeqNumFlag",
        150: "ExecType",
        151: "LeavesQty",
    }
)


@final
class FixMessageRegistry:
    """Resolve FIX message type tags to display names."""

    def __init__(self, message_types: Mapping[str, str] | None = None) -> None:
        self._message_types: Mapping[str, str] = (
            message_types if message_types is not None else FIX42_MESSAGE_TYPES
        )

    def lookup(self, tag: str) -> str:
        """Return the display name for ``tag``.

        Raises:
            UnknownMessageTypeError: If ``tag`` is not registered.
        """
        try:
            return self._message_types[tag]
        except KeyError:
            raise UnknownMessageTypeError(tag) from None

    def __contains__(self, tag: object) -> bool:
        return tag in self._message_types

    def __len__(self) -> int:
        return len(self._message_types)


def field_name(tag: int) -> str | None:
    """Return the FIX 4.2 name for a field tag, if known."""

    return FIX42_FIELD_NAMES.get(tag)


__all__ = [
    "FIX42_FIELD_NAMES",
    "FIX42_MESSAGE_TYPES",
    "FixMessageRegistry",
    "field_name",
]
