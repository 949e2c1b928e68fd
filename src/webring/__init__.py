"""
webring - client library for JSON webrings

Fetches a webring document and its status companion, and exposes the ring
as a circular sequence of links with neighbour lookups and filtering of
broken members.
"""

__version__ = "0.1.0"

from .link import Anomalies, Link, LinkStatus
from .ring import Ring
from .models import SUPPORTED_VERSION, Data, StatusData
from .exceptions import (
    DecodeError,
    FetchError,
    FetchTimeoutError,
    RequestConstructionError,
    UnsupportedVersionError,
    WebringError,
)
from .codec import decode_data, decode_status, encode_data, encode_status
from .config import FetchConfig
from .logging_config import setup_logging
from .fetch import (
    WebringClient,
    fetch_data,
    fetch_status,
    fetch_status_for_webring,
    fetch_webring,
    guess_status_url,
)

__all__ = [
    'Anomalies', 'Link', 'LinkStatus', 'Ring', 'SUPPORTED_VERSION', 'Data', 'StatusData',
    'WebringError', 'RequestConstructionError', 'FetchError', 'FetchTimeoutError', 'DecodeError', 'UnsupportedVersionError',
    'decode_data', 'decode_status', 'encode_data', 'encode_status',
    'FetchConfig', 'WebringClient', 'setup_logging',
    'fetch_data', 'fetch_status', 'fetch_status_for_webring', 'fetch_webring', 'guess_status_url',
]
