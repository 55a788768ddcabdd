import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cardquest.models.orm import Base

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False) -> Engine:
    if url.startswith("sqlite") and (":memory:" in url or url.rstrip("/") == "sqlite:"):
        # One shared connection, otherwise each pooled connection gets its own empty database
        return create_engine(url, echo=echo, future=True, poolclass=StaticPool,
                             connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo, future=True, pool_pre_ping=True)


def init_db(url: str, echo: bool = False) -> sessionmaker:
    engine = build_engine(url, echo=echo)
    Base.metadata.create_all(engine)
    logger.info(f"Database initialized ({engine.url.get_backend_name()})")
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def close_db(session_factory: sessionmaker) -> None:
    session_factory.kw["bind"].dispose()


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
