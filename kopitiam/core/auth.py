import secrets

from fastapi import Header, HTTPException, Request


async def require_api_key(request: Request, x_api_key: str = Header(default="", alias="X-API-Key")):
    # Unset key means searches cannot be triggered over HTTP at all.
    expected = request.app.state.cfg.api_key
    if not expected or not secrets.compare_digest(x_api_key, expected):
        raise HTTPException(status_code=401, detail="unauthorized")
