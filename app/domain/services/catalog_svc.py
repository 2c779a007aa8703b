import json
import logging
from pathlib import Path
from typing import List

from app.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)


def load_seed_file(path: str) -> List[dict]:
    """Read the catalog seed JSON (a list of product documents). Missing file -> []."""
    p = Path(path)
    if not p.exists():
        logger.warning("catalog seed file not found: %s", path)
        return []
    raw = p.read_text(encoding="utf-8").strip()
    data = json.loads(raw or "[]")
    if not isinstance(data, list):
        raise ValueError(f"Catalog seed must be a JSON list, got {type(data).__name__}")
    return data


async def seed_catalog(db, path: str) -> int:
    """Replace the whole catalog with the seed file contents."""
    docs = load_seed_file(path)
    if not docs:
        logger.info("catalog seed empty, nothing seeded")
        return 0
    count = await ProductRepo(db).reseed(docs)
    logger.info("catalog seeded count=%s from=%s", count, path)
    return count
