import uvicorn as uvicorn
import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging

from src.config.settings import get_settings
from src.config.clients import get_mailchimp_client, get_mailer
from src.routes import contactRoute, mailchimpRoute

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()


# Initialize FastAPI app with lifespan context
@asynccontextmanager
async def lifespan(app: FastAPI):
    # One HTTP connection pool and one SMTP mailer for the whole process
    http_client = httpx.AsyncClient(timeout=settings.MAILCHIMP_TIMEOUT_SECONDS)
    app.state.mailchimp = get_mailchimp_client(settings, http_client)
    app.state.mailer = get_mailer(settings)
    logger.info(f"🚀 Contact relay ready (environment: {settings.ENVIRONMENT})")

    yield

    await http_client.aclose()


app = FastAPI(
    lifespan=lifespan,
    docs_url=None if settings.ENVIRONMENT.lower() == "production" else "/docs",
    redoc_url=None if settings.ENVIRONMENT.lower() == "production" else "/redoc"
)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like any other validation failure"""
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Validation error",
            "errors": [
                {
                    "field": ".".join(str(part) for part in error["loc"] if part != "body"),
                    "message": error["msg"],
                }
                for error in exc.errors()
            ],
        }
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler that formats all errors consistently"""
    logger.error(f"Unexpected error on {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"}
    )


app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mailchimpRoute.router, tags=['Mailchimp'], prefix='/api/mailchimp')
app.include_router(contactRoute.router, tags=['Contact'], prefix='/api')


@app.get("/")
def root():
    return {"message": "Backend API is running!"}


if __name__ == "__main__":
    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.PORT, reload=True, log_level="info")
