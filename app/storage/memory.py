"""In-memory storage for customers, transactions, and KYC actions.

Backs the dashboard's customer search, transactions table, and the
operator actions taken on a KYC decision. All data lives in memory and is
reseeded from data/ on restart -- suitable for a demo service.
"""

import re
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from thefuzz import fuzz

from app.models import (
    Customer,
    KycActionRecord,
    Transaction,
    TransactionFilters,
    TransactionsPage,
)


def _normalize_name(name: str) -> str:
    """Lowercase, strip, and collapse multiple spaces."""
    return re.sub(r"\s+", " ", name.strip().lower())


def _utc_date(value: datetime) -> date:
    """Calendar date of a timestamp in UTC (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()


class MemoryStore:
    """In-memory store for the dashboard's reference and activity data."""

    def __init__(self) -> None:
        # Customers keyed by ID, kept in insertion order for listing
        self._customers: Dict[str, Customer] = {}
        self._transactions: List[Transaction] = []
        # Chronological log of operator actions
        self._actions: List[KycActionRecord] = []

    # -- customers ---------------------------------------------------------

    def add_customer(self, customer: Customer) -> None:
        self._customers[customer.id] = customer

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def list_customers(self) -> List[Customer]:
        return list(self._customers.values())

    def search_customers(
        self,
        term: str,
        fuzzy_threshold: int = 80,
    ) -> List[Customer]:
        """Find customers by name or ID.

        A blank term returns every customer. Otherwise a case-insensitive
        substring match on name or ID is tried first; if nothing matches,
        names are fuzzy-matched with partial_ratio() so small typos and
        transliteration differences ("Jenifer" vs "Jennifer") still find
        the customer. Fuzzy hits are ordered best match first.
        """
        if not term or not term.strip():
            return self.list_customers()

        needle = _normalize_name(term)
        exact = [
            c for c in self._customers.values()
            if needle in _normalize_name(c.name) or needle in c.id.lower()
        ]
        if exact:
            return exact

        scored = []
        for customer in self._customers.values():
            score = fuzz.partial_ratio(needle, _normalize_name(customer.name))
            if score >= fuzzy_threshold:
                scored.append((score, customer))
        # sorted() is stable, so equal scores keep insertion order
        scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
        return [customer for _, customer in scored]

    # -- transactions ------------------------------------------------------

    def add_transaction(self, tx: Transaction) -> None:
        self._transactions.append(tx)

    def query_transactions(self, filters: TransactionFilters) -> TransactionsPage:
        """Filter, sort newest first, and paginate transactions.

        date_from and date_to are inclusive calendar dates compared against
        each transaction's UTC date. The returned total counts every match,
        not just the current page.
        """
        results: List[Transaction] = []
        for t in self._transactions:
            if filters.customer_id is not None and t.customer_id != filters.customer_id:
                continue
            if filters.type is not None and t.type != filters.type:
                continue
            if filters.status is not None and t.status != filters.status:
                continue
            day = _utc_date(t.date)
            if filters.date_from is not None and day < filters.date_from:
                continue
            if filters.date_to is not None and day > filters.date_to:
                continue
            results.append(t)

        results.sort(key=lambda t: t.date, reverse=True)

        start = (filters.page - 1) * filters.page_size
        end = start + filters.page_size
        return TransactionsPage(
            transactions=results[start:end],
            total=len(results),
            page=filters.page,
            page_size=filters.page_size,
        )

    # -- KYC actions -------------------------------------------------------

    def record_action(self, record: KycActionRecord) -> None:
        """Append an operator action to the log."""
        self._actions.append(record)

    def get_actions(self, customer_id: Optional[str] = None) -> List[KycActionRecord]:
        """Return logged actions, optionally for a single customer."""
        if customer_id is None:
            return list(self._actions)
        return [a for a in self._actions if a.customer_id == customer_id]
