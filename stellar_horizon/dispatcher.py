# stellar_horizon/dispatcher.py
"""Executes one request descriptor and maps the response to records or errors."""

from typing import Any

from loguru import logger
from pydantic import ValidationError

from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.endpoint import Endpoint
from stellar_horizon.errors import ApiError, DecodeError
from stellar_horizon.interfaces.transport import IHttpTransport
from stellar_horizon.interfaces.xdr_codec import IXdrCodec
from stellar_horizon.models.base import HorizonRecord, Page


class Dispatcher:
    """
    One GET per call, no retries and no state kept between calls.

    Args:
        transport: performs the HTTP GET
        codec: decodes the XDR fields a record declares in ``XDR_FIELDS``
    """

    def __init__(self, transport: IHttpTransport, codec: IXdrCodec):
        self.transport = transport
        self.codec = codec

    async def dispatch(self, endpoint: Endpoint, request: RequestDescriptor) -> Any:
        """
        Fetch ``request`` from ``endpoint``.

        Returns:
            A record of ``request.shape``, or a ``Page`` of them when ``request.paged``

        Raises:
            TransportError: no response was received
            ApiError: Horizon answered with a non-2xx status
            DecodeError: the body does not fit the expected shape
        """
        url = request.url(endpoint)
        logger.debug(f"GET {url}")
        response = await self.transport.get(url)
        logger.debug(f"{response.status} {request.path} ({len(response.body)} bytes)")

        if not 200 <= response.status < 300:
            raise ApiError.from_response(response.status, response.body)

        if request.paged:
            page = self._parse(Page[request.shape], request, response.body)
            records = [self._decode_xdr(record, request) for record in page.records]
            return page.model_copy(update={"records": records}).with_request(request)

        record = self._parse(request.shape, request, response.body)
        return self._decode_xdr(record, request)

    @staticmethod
    def _parse(model: Any, request: RequestDescriptor, body: bytes) -> Any:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError.from_validation_error(request.path, e) from e

    def _decode_xdr(self, record: HorizonRecord, request: RequestDescriptor) -> HorizonRecord:
        if not record.XDR_FIELDS:
            return record
        decoded = {}
        for field, type_name in record.XDR_FIELDS.items():
            blob = getattr(record, field)
            if not blob:
                continue
            try:
                decoded[field] = self.codec.decode(type_name, blob)
            except ValueError as e:
                raise DecodeError(request.path, field, str(e)) from e
        return record.with_decoded(decoded)
