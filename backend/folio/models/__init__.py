from folio.models.holding import AssetType, Holding
from folio.models.quote import Quote

__all__ = [
    "AssetType",
    "Holding",
    "Quote",
]
