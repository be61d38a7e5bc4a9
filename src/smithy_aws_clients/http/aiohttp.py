#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from itertools import chain
from urllib.parse import parse_qsl, urlunparse

import aiohttp

from ..interfaces import URI
from ..interfaces.http import (
    FieldPosition,
    HTTPClient,
    HTTPRequest,
    HTTPRequestConfiguration,
)
from . import Field, Fields, HTTPResponse


class AIOHTTPClient(HTTPClient):
    """Implementation of :py:class:`..interfaces.http.HTTPClient` using aiohttp.

    The underlying ``aiohttp.ClientSession`` is created on first use, since it must be
    created from within a running event loop.
    """

    def __init__(self, *, _session: aiohttp.ClientSession | None = None) -> None:
        self._session = _session

    async def send(
        self,
        request: HTTPRequest,
        *,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send HTTP request using aiohttp client.

        :param request: The request including destination URI, fields, payload.
        :param request_config: Configuration specific to this request.
        """
        request_config = request_config or HTTPRequestConfiguration()
        if self._session is None:
            self._session = aiohttp.ClientSession()

        headers_list = list(
            chain.from_iterable(
                fld.as_tuples()
                for fld in request.fields.get_by_type(FieldPosition.HEADER)
            )
        )
        timeout = aiohttp.ClientTimeout(sock_read=request_config.read_timeout)

        async with self._session.request(
            method=request.method,
            url=self._serialize_uri_without_query(request.destination),
            params=parse_qsl(request.destination.query or "", keep_blank_values=True),
            headers=headers_list,
            data=request.body,
            timeout=timeout,
        ) as resp:
            return await self._marshal_response(resp)

    async def close(self) -> None:
        """Close the underlying session, if one was opened."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _serialize_uri_without_query(self, uri: URI) -> str:
        """Serialize all parts of the URI up to and including the path."""
        components = (uri.scheme, uri.netloc, uri.path or "", "", "", "")
        return urlunparse(components)

    async def _marshal_response(
        self, aiohttp_resp: aiohttp.ClientResponse
    ) -> HTTPResponse:
        """Convert a ``aiohttp.ClientResponse`` to an ``HTTPResponse``."""
        headers = Fields()
        for header_name, header_val in aiohttp_resp.headers.items():
            try:
                headers[header_name].add(header_val)
            except KeyError:
                headers[header_name] = Field(
                    name=header_name,
                    values=[header_val],
                    kind=FieldPosition.HEADER,
                )

        return HTTPResponse(
            status=aiohttp_resp.status,
            fields=headers,
            body=await aiohttp_resp.read(),
            reason=aiohttp_resp.reason,
        )
