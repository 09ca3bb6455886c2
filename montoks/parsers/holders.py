"""Holder pagination: total holder count plus the first-page top holders.

Blockvision has no holder-count field on this chain, so the count is built by
walking every page of /token/holders. Pages are fetched sequentially with a
fixed pause in between, bounded by a hard page ceiling.
"""

import asyncio
from dataclasses import dataclass, field

from loguru import logger

from montoks.models.token import HolderShare
from montoks.parsers.blockvision.client import BlockvisionClient

PAGE_SIZE = 50
MAX_PAGES = 1000
PAGE_DELAY_SEC = 0.1
TOP_HOLDERS_LIMIT = 10


@dataclass
class HolderSummary:
    total_holders: int = 0
    top_holders: list[HolderShare] = field(default_factory=list)


async def paginate_holders(
    client: BlockvisionClient,
    address: str,
    *,
    page_size: int = PAGE_SIZE,
    max_pages: int = MAX_PAGES,
    page_delay: float = PAGE_DELAY_SEC,
) -> HolderSummary:
    """Walk holder pages until the last one, a failed page, or ``max_pages``.

    A failed page keeps the partial total. Any unexpected error returns an
    empty summary instead of propagating.
    """
    total = 0
    top_holders: list[HolderShare] = []
    page_index = 1

    try:
        logger.debug(f"[HOLDERS] Counting holders for {address[:12]}")

        while True:
            page = await client.get_holders_page(address, page_index, page_size)
            if page is None:
                logger.warning(f"[HOLDERS] Page {page_index} unavailable, stopping at {total}")
                break

            total += len(page.data)

            if page_index == 1:
                top_holders = [
                    HolderShare(
                        address=row.effective_address,
                        percentage=row.effective_percentage,
                    )
                    for row in page.data[:TOP_HOLDERS_LIMIT]
                ]

            if len(page.data) < page_size:
                has_more = False
            else:
                has_more = bool(page.nextPageIndex) and page.nextPageIndex > page_index

            if not has_more:
                break

            if page_index >= max_pages:
                logger.warning(f"[HOLDERS] Reached page ceiling ({max_pages}) for {address[:12]}")
                break

            page_index += 1
            await asyncio.sleep(page_delay)

        logger.debug(f"[HOLDERS] {address[:12]}: {total} holders over {page_index} pages")
        return HolderSummary(total_holders=total, top_holders=top_holders)

    except Exception as e:
        logger.error(f"[HOLDERS] Pagination failed for {address[:12]}: {e}")
        return HolderSummary()
