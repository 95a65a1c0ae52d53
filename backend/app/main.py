import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.core.logging_config import configure_logging
from app.api.routes import intake, items, listings, sequences

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Rota de health check
@app.get("/health")
def health_check():
    """Health check para monitoramento"""
    return {"status": "healthy"}


# Endpoint de versão simples (sem dependências)
@app.get("/api/v1/version")
def get_api_version():
    """Retorna versão do backend para verificar deploy"""
    return {"version": "1.0.0", "status": "ok"}


@app.get("/")
def root():
    return {
        "message": "EMZ Intake API",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }


# Incluir routers
app.include_router(intake.router, prefix=f"{settings.API_V1_STR}/intake", tags=["intake"])
app.include_router(items.router, prefix=f"{settings.API_V1_STR}/items", tags=["items"])
app.include_router(listings.router, prefix=f"{settings.API_V1_STR}/listings", tags=["listings"])
app.include_router(sequences.router, prefix=f"{settings.API_V1_STR}/sequences", tags=["sequences"])


# Evento de startup
@app.on_event("startup")
def startup_event():
    configure_logging(settings.LOG_LEVEL)
    logger.info("[STARTUP] %s iniciado!", settings.PROJECT_NAME)
    logger.info("[STARTUP] Ambiente: %s", settings.ENVIRONMENT)

    # Criar tabelas do banco de dados automaticamente
    try:
        from app.database import engine
        from app.models.base import Base
        # Importar todos os models para registrar no metadata
        from app.models import sequence_counter, inventory_item, listing  # noqa: F401
        Base.metadata.create_all(bind=engine)
        logger.info("[STARTUP] Tabelas do banco de dados criadas/verificadas!")
    except Exception:
        # Sem banco o app sobe mesmo assim; a alocação responde 503
        logger.exception("[STARTUP] Erro ao criar tabelas")


@app.on_event("shutdown")
def shutdown_event():
    logger.info("[SHUTDOWN] Sistema encerrado!")
