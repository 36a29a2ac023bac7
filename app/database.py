import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from app.settings import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_conn, _conn_record):
    # SQLite no aplica ON UPDATE / ON DELETE sin este pragma
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys = ON;")
    cur.close()


def make_engine(url: str, echo: bool = False, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(url, echo=echo, pool_pre_ping=True, **kwargs)


engine = make_engine(settings.database_url, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Dependencia para obtener la sesión de BD en cada petición
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Crea las tablas a partir de los modelos (no hay migraciones)."""
    from app import models  # noqa: F401  registra las tablas en Base.metadata

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Esquema sincronizado: %s", ", ".join(sorted(Base.metadata.tables)))
