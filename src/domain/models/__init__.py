from domain.models.artwork import DISPLAY_FIELDS, SCAN_FIELDS, Artwork
from domain.models.page import FetchedPage, Page

__all__ = [
    "DISPLAY_FIELDS",
    "SCAN_FIELDS",
    "Artwork",
    "FetchedPage",
    "Page",
]
