"""Creator balance classification against the tracked holder set."""

from collections.abc import Sequence

from montoks.models.token import CreatorBalance, HolderShare, Sentinel

_SENTINELS = frozenset(s.value for s in Sentinel)


def is_sentinel(value: str | None) -> bool:
    return not value or value in _SENTINELS


def resolve_creator_balance(
    creator: str | None,
    holders: Sequence[HolderShare],
) -> CreatorBalance:
    """Locate the creator among tracked holders.

    Only the first holder page is tracked, so a creator absent from it is
    reported as SOLD.
    """
    if is_sentinel(creator):
        return CreatorBalance.no_data()

    needle = creator.lower()
    for holder in holders:
        if holder.address.lower() == needle:
            return CreatorBalance.held(holder.percentage)

    return CreatorBalance.sold()
