"""Single-request order submission over HTTP."""

from __future__ import annotations

from enum import Enum

import httpx

from cupcake_corner.codec import OrderDecodeError, deserialize_order, serialize_order
from cupcake_corner.config import resolve_order_endpoint
from cupcake_corner.debug_log import log_debug
from cupcake_corner.models import Confirmation, Order

_JSON_HEADERS = {"Content-Type": "application/json"}


class SubmissionError(Exception):
    """Terminal failure of one submission attempt."""

    kind = "submission"


class TransportError(SubmissionError):
    """No usable data came back: connection failure, HTTP error status or empty body."""

    kind = "transport"


class InvalidResponseError(SubmissionError):
    """Data came back but does not describe an order."""

    kind = "invalid_response"


class SubmissionState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class OrderSubmission:
    """
    One POST of one order.

    The order is snapshotted on construction, so later edits to the live
    order do not leak into the request. ``run`` moves the submission from
    IDLE through SENDING to CONFIRMED or FAILED and can only be called once.
    There is no retry and no cancellation; httpx's default timeout applies.
    """

    def __init__(
        self,
        order: Order,
        *,
        url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.snapshot = order.snapshot()
        self.url = url or resolve_order_endpoint()
        self._client = client
        self.state = SubmissionState.IDLE
        self.confirmation: Confirmation | None = None
        self.error: SubmissionError | None = None

    @property
    def is_finished(self) -> bool:
        return self.state in {SubmissionState.CONFIRMED, SubmissionState.FAILED}

    async def run(self) -> Confirmation:
        if self.state is not SubmissionState.IDLE:
            raise RuntimeError(f"Submission already {self.state.value}")

        body = serialize_order(self.snapshot)
        self.state = SubmissionState.SENDING
        log_debug(f"submit_start url={self.url} bytes={len(body)}")

        try:
            data = await self._post(body)
            confirmation = _confirmation_from_response(data)
        except SubmissionError as exc:
            self.state = SubmissionState.FAILED
            self.error = exc
            log_debug(f"submit_failed kind={exc.kind} error={exc}")
            raise

        self.state = SubmissionState.CONFIRMED
        self.confirmation = confirmation
        log_debug(f"submit_confirmed quantity={confirmation.quantity} cake_type={confirmation.cake_type!r}")
        return confirmation

    async def _post(self, body: bytes) -> bytes:
        if self._client is not None:
            return await _post_with(self._client, self.url, body)
        async with httpx.AsyncClient() as client:
            return await _post_with(client, self.url, body)


async def _post_with(client: httpx.AsyncClient, url: str, body: bytes) -> bytes:
    try:
        response = await client.post(url, content=body, headers=_JSON_HEADERS)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"Request failed: {exc}") from exc

    if not response.is_success:
        raise TransportError(f"Server returned HTTP {response.status_code}")
    if not response.content:
        raise TransportError("No data returned")
    return response.content


def _confirmation_from_response(data: bytes) -> Confirmation:
    try:
        decoded = deserialize_order(data)
    except OrderDecodeError as exc:
        raise InvalidResponseError(f"Invalid server response: {exc}") from exc

    cake_type = decoded.cake_type
    if cake_type is None:
        raise InvalidResponseError(f"Invalid server response: unknown cakeTypeIndex {decoded.cake_type_index}")

    return Confirmation(
        order=decoded,
        quantity=decoded.quantity,
        cake_type=cake_type,
        total_cost=decoded.total_cost,
    )


async def submit_order(
    order: Order,
    *,
    url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> OrderSubmission:
    """Submit an order and return the finished submission holding either a confirmation or an error."""
    submission = OrderSubmission(order, url=url, client=client)
    try:
        await submission.run()
    except SubmissionError:
        # Kept on submission.error for the caller.
        pass
    return submission
