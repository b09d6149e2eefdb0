from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import load_config


def make_engine(url: str):
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(bind) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


# config.yaml value, or DATABASE_URL when set
DATABASE_URL = load_config().database.url

engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)
