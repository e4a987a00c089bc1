"""Helpers for reading complete result sets through Protean querysets.

Querysets are paginated by the provider, so reports and admin listings walk
the pages until the reported total is reached.
"""

_BATCH_SIZE = 100


def fetch_all(queryset, batch_size: int = _BATCH_SIZE) -> list:
    """Return every record matched by ``queryset``, fetching ``batch_size`` at a time."""
    records: list = []
    offset = 0
    while True:
        page = queryset.offset(offset).limit(batch_size).all()
        records.extend(page.items)
        if not page.items or len(records) >= page.total:
            return records
        offset += len(page.items)
