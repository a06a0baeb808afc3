"""Storefront FastAPI application.

Processes every request synchronously inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8082 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects which config overlay is applied.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.domain import storefront
from storefront.utils.logging import bind_request_context, clear_request_context

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="E-commerce backend for users, products, carts and checkout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request details to the log context."""
    bind_request_context(method=request.method, path=request.url.path)
    try:
        with storefront.domain_context():
            response = await call_next(request)
        return response
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Routers and error handlers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    cart_router,
    product_router,
    register_api_error_handler,
    user_router,
)

app.include_router(user_router)
app.include_router(product_router)
app.include_router(cart_router)

register_exception_handlers(app)
register_api_error_handler(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
