import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import settings
from app.database import Base, engine
from app.routers import auth, user, task, review
from app.schemas.response import ApiResponse, ErrorKind
from app.utils.responses import to_response

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Task Management API")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(review.router, prefix="/api/reviews", tags=["Reviews"])


def _field_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else error.get("msg", "Invalid request")


# Error handlers: every failure leaves the API in the same envelope
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [_field_error(error) for error in exc.errors()]
    return to_response(ApiResponse.fail(ErrorKind.VALIDATION_FAILED, "Validation failed", errors))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ApiResponse(success=False, message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json"),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error while handling {request.method} {request.url.path}")
    body = ApiResponse(success=False, message="An unexpected error occurred.")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump(mode="json"))


# Startup and shutdown events
@app.on_event("startup")
def startup_event():
    """Create any missing tables when the application starts"""
    logger.info("Starting Task Management API...")
    Base.metadata.create_all(bind=engine)


@app.on_event("shutdown")
def shutdown_event():
    logger.info("Shutting down Task Management API...")
    engine.dispose()


# Root route
@app.get("/")
def read_root():
    return {"message": "Task Management API"}

@app.get("/health")
def health():
  return {"status": "ok"}
