# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db
from routes.products import router as products_router
from utils.exceptions import ProductNotFoundError, ProductValidationError, StoreError
from utils.validation import violations_from_errors

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Tables are created once per process on start-up
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.APP_TITLE, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    description="CRUD API for products with pagination and input validation.",
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- ERROR HANDLERS ----
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    violations = violations_from_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, violations)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "violations": [v.model_dump() for v in violations],
        },
    )


@app.exception_handler(ProductValidationError)
async def product_validation_handler(request: Request, exc: ProductValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "violations": [v.model_dump() for v in exc.violations],
        },
    )


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Product not found"})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.exception("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Rejestracja routerów
app.include_router(products_router)


@app.get("/", include_in_schema=False)
def read_root():
    return {"message": f"{settings.APP_TITLE} is running"}
