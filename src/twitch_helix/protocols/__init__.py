# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for the external collaborators of the dispatcher.

Available protocols:
- TransportProtocol: performs one HTTP round trip
- CredentialProtocol: supplies the bearer token, client id and scopes

Supporting types:
- HttpRequest / HttpResponse: raw HTTP values exchanged with a transport
"""

from .credential import CredentialProtocol
from .transport import HttpRequest, HttpResponse, TransportProtocol

__all__ = [
    "CredentialProtocol",
    "HttpRequest",
    "HttpResponse",
    "TransportProtocol",
]
