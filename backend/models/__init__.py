from models.session import Session
from models.share import ShareRequest, ShareResponse, ClientConfig

__all__ = ["Session", "ShareRequest", "ShareResponse", "ClientConfig"]
