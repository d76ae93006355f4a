"""Blockchain transaction records the map can be asked to focus on.

Only proof-of-coverage receipts carry geography the viewport cares about:
the challenged hotspot (``challengee``) and the witnesses that heard its
beacon, whose locations arrive as H3 cells.
"""

from __future__ import annotations

from pydantic import Field

from pyviewport.models._base import ApiModel

POC_RECEIPTS_KIND = "poc_receipts_v1"


class ReceiptWitness(ApiModel):
    """A witness entry in a receipt path element."""

    gateway: str | None = None
    location: str | None = None
    owner: str | None = None
    is_valid: bool | None = None


class ReceiptPathElement(ApiModel):
    """One hop of a proof-of-coverage receipt."""

    challengee: str = Field(..., min_length=1)
    witnesses: tuple[ReceiptWitness, ...] = ()


class Transaction(ApiModel):
    """A transaction record tagged by ``type``.

    ``hash`` is the identity used to decide whether a selection changed.
    """

    hash: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    height: int | None = None
    time: int | None = None
    path: tuple[ReceiptPathElement, ...] = ()

    def is_kind(self, kind: str) -> bool:
        return self.type == kind

    @property
    def first_hop(self) -> ReceiptPathElement | None:
        return self.path[0] if self.path else None
