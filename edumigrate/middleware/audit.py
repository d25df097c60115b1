# edumigrate/middleware/audit.py
# One JSON line per request on the "edumigrate.audit" logger.
# University detail requests also record the path segment and which
# lookup the resolver takes for it (legacy id or slug).

import json
import logging
import time

from fastapi import Request

from ..services.slug import parse_legacy_id

logger = logging.getLogger("edumigrate.audit")

UNIVERSITY_PREFIXES = ("/universities/", "/api/universities/")


def _university_segment(path: str) -> str | None:
    for prefix in UNIVERSITY_PREFIXES:
        if path.startswith(prefix):
            segment = path[len(prefix):].strip("/")
            return segment or None
    return None


async def audit_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 1)

    path = request.url.path
    record = {
        "method": request.method,
        "path": path,
        "status": response.status_code,
        "ip": request.headers.get("X-Real-IP") or (request.client.host if request.client else None),
        "duration_ms": elapsed_ms,
    }

    segment = _university_segment(path)
    if segment is not None:
        record["segment"] = segment
        record["lookup"] = "legacy" if parse_legacy_id(segment) else "slug"

    if response.status_code >= 500:
        logger.warning(json.dumps(record, ensure_ascii=False))
    else:
        logger.info(json.dumps(record, ensure_ascii=False))

    return response
