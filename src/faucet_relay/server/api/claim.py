import json
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from faucet_relay.claim import process_claim
from faucet_relay.faucet import get_faucet

router = APIRouter()


async def _read_json(request: Request) -> Any:
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        return None

    raw = await request.body()
    if len(raw) == 0:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


async def claim_mon(request: Request):
    body = await _read_json(request)
    result = await process_claim(request.method, body, get_faucet())
    return JSONResponse(result.to_response_body(), status_code=result.status)


# no method list, so any method reaches the claim contract's 405
router.add_route("/claim-mon", claim_mon)
