from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings


def build_engine(database_url: str, echo: bool = False):
    """
    Cria engine do SQLAlchemy para a URL informada

    SQLite (usado nos testes) precisa de check_same_thread=False e de um
    timeout de lock maior para suportar várias threads escrevendo no contador.
    """
    connect_args = {}
    engine_kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 30}
    else:
        engine_kwargs["pool_timeout"] = settings.DB_POOL_TIMEOUT

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verifica conexões antes de usar
        echo=echo,
        connect_args=connect_args,
        **engine_kwargs
    )


# Engine do SQLAlchemy
engine = build_engine(
    settings.DATABASE_URL,
    echo=True if settings.ENVIRONMENT == "development" else False  # Log SQL em dev
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para os models
Base = declarative_base()
