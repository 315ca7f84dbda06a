from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from config import DB_URL


class Base(DeclarativeBase):
    pass


def make_engine(db_url: str = DB_URL) -> Engine:
    # in-memory SQLite needs one shared connection or every session sees an empty db
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(db_url, echo=False, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    import models.company  # noqa: F401  registers the table on Base.metadata

    Base.metadata.create_all(engine)
