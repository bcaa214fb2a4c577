"""
Page walker for the admin API.
"""

from typing import Any, List, Optional, Set
from urllib.parse import urljoin

from shared.logging import get_logger
from shared.errors import HttpError
from ..adapters.transport import HttpTransport
from ..domain.envelopes import PageEnvelope, Scalar, decode_page


class PageWalker:
    """Resolves a request target into a complete collection or a raw value.

    Pages are fetched strictly one after another. Only the first request
    carries the page size hint; continuation links are followed as the
    server hands them out.
    """

    def __init__(self, transport: HttpTransport):
        self.transport = transport
        self.logger = get_logger("kong_admin.walker")

    async def resolve(self, target: str, page_size: Optional[int] = None) -> Any:
        """Return the materialized collection behind ``target``.

        Non-paginated bodies are returned as decoded. Raises HttpError on a
        non-success status; transport and JSON errors propagate as-is.

        The walk ends early, returning the items collected so far, when a
        continuation link points at a page already visited or when a
        continuation page is not a ``data`` envelope. Such a page is not
        added to the collection.
        """
        envelope = await self._fetch(target, page_size)
        if isinstance(envelope, Scalar):
            return envelope.value

        items: List[Any] = list(envelope.items)
        visited: Set[str] = {target}
        pages = 1
        current_target, page = target, envelope

        while page.next:
            # A short page with a continuation link is taken as the last one
            if page_size is not None and pages == 1 and len(page.items) < page_size:
                self.logger.debug(
                    "Short first page, ignoring continuation",
                    target=target,
                    items=len(page.items),
                    page_size=page_size
                )
                break

            next_target = urljoin(current_target, page.next)
            if next_target in visited:
                self.logger.warning(
                    "Continuation loops back to a visited page, stopping",
                    target=target,
                    next=next_target,
                    pages=pages
                )
                break
            visited.add(next_target)

            next_envelope = await self._fetch(next_target, None)
            pages += 1
            if isinstance(next_envelope, Scalar):
                self.logger.warning(
                    "Continuation returned a non-paginated body, stopping",
                    target=target,
                    next=next_target
                )
                break

            items.extend(next_envelope.items)
            current_target, page = next_target, next_envelope

        self.logger.debug("Collection resolved", target=target, pages=pages, items=len(items))
        return items

    async def _fetch(self, target: str, page_size: Optional[int]) -> PageEnvelope:
        response = await self.transport.get(target, page_size)
        if not response.is_success:
            self.logger.error(
                "Admin API request failed",
                target=target,
                status_code=response.status_code,
                reason=response.reason_phrase
            )
            raise HttpError(target, response.status_code, response.reason_phrase, response)

        return decode_page(response.json())
