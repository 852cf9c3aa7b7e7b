"""Customer/order search script against the Milvus indexes.

Configuration via constants below (no CLI args). Run:
	uv run python scripts/search.py

Environment:
	MILVUS_URI            (default http://localhost:19530)
	MILVUS_TOKEN          (default root:Milvus)
	ORDERS_INDEX_NAME     (default commerce_orders_index)
	CUSTOMERS_INDEX_NAME  (default commerce_userprofiles_index_master)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

# Ensure 'src' on path
CURRENT_DIR = Path(__file__).resolve().parent
SRC_DIR = CURRENT_DIR.parent / "src"
if str(SRC_DIR) not in sys.path:
	sys.path.insert(0, str(SRC_DIR))

from customer_order_search.config import load_config  # noqa: E402
from customer_order_search.index.milvus_index import MilvusIndexProvider  # noqa: E402
from customer_order_search.search import SearchOutcome, SearchRequest, SearchService  # noqa: E402


# ---------------------------------------------------------------------------
# Configuration Constants
# ---------------------------------------------------------------------------
ITEM_TYPE: str = "customer"
SEARCH_TERM: str = "jo*"
ENVIRONMENT: str = "Store1"
SORTING: tuple[str, str] = ("Asc", "last_name")
PAGE_INDEX: int = 0
PAGE_SIZE: int = 10
FIELDS: list[str] = []
LOG_LEVEL: str = "INFO"


def search() -> SearchOutcome:
	"""Run the configured search and log one line per returned record."""
	logger = logging.getLogger(__name__)

	config = load_config()
	provider = MilvusIndexProvider(date_fields=config.date_fields_by_index())
	service = SearchService(provider, config)
	sort_direction, sort_field = SORTING
	outcome = service.get_search_results(
		SearchRequest(
			entity_kind=ITEM_TYPE,
			term=SEARCH_TERM,
			scope_key=ENVIRONMENT,
			sort_field=sort_field,
			sort_direction=sort_direction,
			page_index=PAGE_INDEX,
			page_size=PAGE_SIZE,
			requested_fields=FIELDS,
		)
	)

	lines = [
		f"Returned {len(outcome.records)} of {outcome.total_item_count} results. \n"
		f"{ITEM_TYPE}: {SEARCH_TERM!r} \n"
	]
	for idx, record in enumerate(outcome.records, start=1):
		lines.append(f"{idx}. {json.dumps(record, ensure_ascii=False, default=str)}")
	logger.info("\n".join(lines))
	return outcome


def main() -> int:
	logging.basicConfig(
		level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s - %(message)s",
	)
	try:
		search()
		return 0
	except Exception as e:  # pragma: no cover
		logging.exception("Search failed: %s", e)
		return 1

if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
