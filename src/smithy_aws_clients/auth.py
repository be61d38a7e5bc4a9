#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from collections.abc import Mapping
from datetime import datetime
from io import BytesIO
from typing import Any, Final, Required, TypedDict

from awscrt import auth as crt_auth
from awscrt import http as crt_http

from .exceptions import SmithyIdentityError
from .http import Field
from .identity import AWSCredentialsIdentity
from .interfaces.auth import Signer
from .interfaces.http import FieldPosition, HTTPRequest

logger: Final = logging.getLogger(__name__)

DEFAULT_PORTS: Final = {"https": 443, "http": 80}
SIGNED_HEADERS: Final = ("Authorization", "X-Amz-Date", "X-Amz-Security-Token")


class SigV4SigningProperties(TypedDict, total=False):
    region: Required[str]
    service: Required[str]
    date: datetime
    """Sign as of this time instead of the current time."""


class SigV4Signer(Signer[AWSCredentialsIdentity, SigV4SigningProperties]):
    """Sign requests using AWS Signature Version 4, as implemented by awscrt."""

    SIGNATURE_TYPE: crt_auth.AwsSignatureType = (
        crt_auth.AwsSignatureType.HTTP_REQUEST_HEADERS
    )
    ALGORITHM: crt_auth.AwsSigningAlgorithm = crt_auth.AwsSigningAlgorithm.V4
    USE_DOUBLE_URI_ENCODE: bool = True
    SHOULD_NORMALIZE_URI_PATH: bool = True

    async def sign(
        self,
        *,
        request: HTTPRequest,
        identity: AWSCredentialsIdentity,
        properties: SigV4SigningProperties,
    ) -> HTTPRequest:
        """Sign a request using the ``Authorization`` header.

        :param request: The request to sign. Its fields are updated in place.
        :param identity: The credentials to sign with.
        :param properties: The region and service to scope the signature to.
        """
        self._validate(identity, properties)
        crt_request = self._to_crt_request(request)
        credentials_provider = crt_auth.AwsCredentialsProvider.new_static(
            access_key_id=identity.access_key_id,
            secret_access_key=identity.secret_access_key,
            session_token=identity.session_token,
        )
        signing_config = crt_auth.AwsSigningConfig(
            algorithm=self.ALGORITHM,
            signature_type=self.SIGNATURE_TYPE,
            credentials_provider=credentials_provider,
            region=properties["region"],
            service=properties["service"],
            date=properties.get("date"),
            use_double_uri_encode=self.USE_DOUBLE_URI_ENCODE,
            should_normalize_uri_path=self.SHOULD_NORMALIZE_URI_PATH,
        )

        signed = await asyncio.wrap_future(
            crt_auth.aws_sign_request(crt_request, signing_config)
        )
        for name in SIGNED_HEADERS:
            value = signed.headers.get(name)
            if value is not None:
                request.fields.set_field(Field(name=name, values=[value]))
        return request

    def _validate(self, identity: Any, properties: Mapping[str, Any]) -> None:
        if not isinstance(identity, AWSCredentialsIdentity):
            raise SmithyIdentityError(
                "Invalid identity type. Expected AWSCredentialsIdentity, "
                f"but received {type(identity)}."
            )
        missing = [key for key in ("region", "service") if not properties.get(key)]
        if missing:
            raise SmithyIdentityError(
                f"The signing properties {', '.join(missing)} are required for SigV4 "
                "auth."
            )

    def _to_crt_request(self, request: HTTPRequest) -> crt_http.HttpRequest:
        uri = request.destination
        path = uri.path or "/"
        if uri.query:
            path = f"{path}?{uri.query}"

        headers = crt_http.HttpHeaders()
        for fld in request.fields.get_by_type(FieldPosition.HEADER):
            if fld.name.lower() in ("authorization", "x-amz-date"):
                continue
            for value in fld.values:
                headers.add(fld.name, value)
        if headers.get("Host") is None:
            host = uri.host if uri.port == DEFAULT_PORTS.get(uri.scheme) else None
            headers.add("Host", host or uri.netloc)

        return crt_http.HttpRequest(
            method=request.method,
            path=path,
            headers=headers,
            body_stream=BytesIO(request.body),
        )


class AnonymousSigner(Signer[Any, Mapping[str, Any]]):
    """A signer for operations that are sent unauthenticated."""

    async def sign(
        self, *, request: HTTPRequest, identity: Any, properties: Mapping[str, Any]
    ) -> HTTPRequest:
        logger.debug("Sending %s %s unsigned", request.method, request.destination)
        return request
