from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncEngine
import logging
from app.config import Settings
from app.core.errors import APIError, IrasError
from app.database import build_engine, build_session_factory, init_db
from app.api.responses import api_json, iras_json
from app.middleware.error_handler import ErrorBoundaryMiddleware
from app.middleware.request_logger import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

CORS_ALLOWED_HEADERS = [
    "Content-Type",
    "Content-Length",
    "Accept-Encoding",
    "X-CSRF-Token",
    "Authorization",
    "accept",
    "origin",
    "Cache-Control",
    "X-Requested-With",
    "X-IBM-Client-Id",
    "X-IBM-Client-Secret",
    "access_token",
]

ADMIN_GST_ENDPOINTS = {
    "create": "POST /admin/gst-registrations",
    "list": "GET /admin/gst-registrations",
    "get": "GET /admin/gst-registrations/{id}",
    "update": "PUT /admin/gst-registrations/{id}",
    "delete": "DELETE /admin/gst-registrations/{id}",
}


def api_info(settings: Settings) -> dict:
    return {
        "title": "Check GST Register",
        "description": (
            "The Check GST Register API enables you to check whether businesses are GST-registered "
            "based on their GST registration number, UEN or NRIC."
        ),
        "version": settings.API_VERSION,
        "basePath": "/iras/prod/GSTListing",
        "schemes": ["https"],
        "host": "apiservices.iras.gov.sg",
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "endpoints": {
            "main": "POST /iras/prod/GSTListing/SearchGSTRegistered",
            "admin": ADMIN_GST_ENDPOINTS,
        },
    }


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(IrasError)
    async def iras_error_handler(request: Request, exc: IrasError):
        return iras_json(exc.envelope, status_code=exc.status_code)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return api_json(exc.message, status_code=exc.status_code, success=False, error=exc.error)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        malformed = any(error.get("type") == "json_invalid" for error in errors)
        message = "Invalid request format" if malformed else "Validation failed"
        detail = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in errors
        )
        return api_json(message, status_code=status.HTTP_400_BAD_REQUEST, success=False, error=detail)


def create_app(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Build the application around one Settings instance and one database engine"""
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = engine or build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine)
        logger.info(f"IRAS gateway {settings.API_VERSION} started in {settings.ENV} mode")
        yield
        await engine.dispose()

    app = FastAPI(
        title="IRAS API Gateway",
        description="GST, CorpPass, eStamp, property, rental, CIT and SingPass endpoints",
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)

    # Last added runs first: CORS, then gzip, then access log, then the error boundary
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "OK",
            "message": "IRAS GST API is running",
            "version": settings.API_VERSION,
        }

    @app.get("/api/info")
    async def get_api_info():
        return api_info(settings)

    from app.api.v1 import admin, ais, auth, cit, corppass, estamp, gst, property, rental, sd, singpass

    app.include_router(gst.router, prefix="/iras", tags=["GST"])
    app.include_router(corppass.router, prefix="/iras", tags=["CorpPass"])
    app.include_router(estamp.router, prefix="/iras", tags=["eStamp"])
    app.include_router(sd.router, prefix="/iras", tags=["Stamp Duty"])
    app.include_router(ais.router, prefix="/iras", tags=["AIS"])
    app.include_router(property.router, prefix="/iras", tags=["Property Tax"])
    app.include_router(rental.router, prefix="/iras", tags=["Rental"])
    app.include_router(cit.router, prefix="/iras", tags=["Corporate Income Tax"])
    app.include_router(singpass.router, prefix="/iras", tags=["SingPass"])
    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(admin.router, prefix="/admin", tags=["Admin"])

    return app


def run():
    """Console entry point: serve the app with uvicorn on the configured port"""
    import uvicorn

    settings = Settings()
    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=settings.PORT)
